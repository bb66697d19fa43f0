"""Off-axis projection matrices and perspective divide.

Frustum bounds are the per-eye tangents reported by the headset runtime, so
left/right/top/bottom need not be symmetric about the view axis. Degenerate
bounds or a zero homogeneous divisor produce inf/NaN; nothing is checked.
"""

import jax
import jax.numpy as jnp

from jax_vrmath.config import FLOAT
from jax_vrmath.core.types import Rect2
from . import matrix

Array = jax.Array


def make_projection(left, right, top, bottom, near, far) -> Array:
    """
    Build an OpenGL style off-axis perspective projection matrix.

    Args:
        left, right: horizontal frustum extents
        top, bottom: vertical frustum extents
        near, far: clipping plane distances

    Returns:
        (..., 4, 4) float32 projection matrix, row-major
    """
    left, right, top, bottom, near, far = (
        jnp.asarray(value, dtype=FLOAT) for value in (left, right, top, bottom, near, far)
    )

    one = jnp.ones((), dtype=FLOAT)
    two = jnp.asarray(2.0, dtype=FLOAT)

    idx = one / (right - left)
    idy = one / (bottom - top)
    idz = one / (near - far)
    sx = right + left
    sy = bottom + top

    zero = jnp.zeros_like(idx * idy * idz)

    def row(*values):
        return jnp.stack(jnp.broadcast_arrays(*values), axis=-1)

    return jnp.stack(jnp.broadcast_arrays(
        row(two * idx, zero, sx * idx, zero),
        row(zero, two * idy, sy * idy, zero),
        row(zero, zero, (far + near) * idz, two * far * near * idz),
        row(zero, zero, -one, zero),
    ), axis=-2)


def make_projection_from_rect(rect: Rect2, near, far) -> Array:
    """
    Build a projection matrix from the near-plane rectangle of a frustum.

    Args:
        rect: Rect2 with top_left = (left, top), bottom_right = (right, bottom)
        near, far: clipping plane distances

    Returns:
        (..., 4, 4) float32 projection matrix
    """
    return make_projection(rect.left, rect.right, rect.top, rect.bottom, near, far)


def project(proj, point) -> Array:
    """
    Project a homogeneous point to normalized device coordinates.

    Args:
        proj: (..., 4, 4) projection matrix
        point: (..., 4) homogeneous point (x, y, z, w)

    Returns:
        (..., 3) float32 NDC point
    """
    clip = matrix.mat_mul44(point, proj)
    pd = jnp.ones((), dtype=FLOAT) / clip[..., 3:]
    return clip[..., :3] * pd
