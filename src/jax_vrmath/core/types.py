"""Value types shared by the pose and projection math.

Every entity is a plain JAX array with a fixed trailing shape and dtype;
the constructors below normalize array-likes (lists, tuples, numpy arrays)
into that form. The only structured type is ``Rect2``, an immutable PyTree
holding the near-plane extents of an off-axis frustum.
"""

import jax.numpy as jnp
from jax import Array
from flax import struct
from typing import Sequence, Tuple, Union

from jax_vrmath.config import DOUBLE, FLOAT

# Type aliases
ArrayLike = Union[Array, Sequence[float], float]


def _as_shape(value: ArrayLike, trailing: Tuple[int, ...], dtype, name: str) -> Array:
    array = jnp.asarray(value, dtype=dtype)
    if array.ndim < len(trailing) or array.shape[-len(trailing):] != trailing:
        dims = ",".join(str(d) for d in trailing)
        raise ValueError(f"{name} must have shape (...,{dims}), got {array.shape}")
    return array


def vector3(value: ArrayLike) -> Array:
    """Single precision 3-vector, shape (..., 3)."""
    return _as_shape(value, (3,), FLOAT, "vector3")


def vector3d(value: ArrayLike) -> Array:
    """Double precision 3-vector, shape (..., 3)."""
    return _as_shape(value, (3,), DOUBLE, "vector3d")


def vector4(value: ArrayLike) -> Array:
    """Homogeneous point (x, y, z, w), shape (..., 4)."""
    return _as_shape(value, (4,), FLOAT, "vector4")


def quaternion_array(value: ArrayLike) -> Array:
    """Quaternion in (w, x, y, z) order, shape (..., 4), double precision."""
    return _as_shape(value, (4,), DOUBLE, "quaternion")


def matrix34(value: ArrayLike) -> Array:
    """Pose matrix: 3x3 rotation block plus translation column, shape (..., 3, 4)."""
    return _as_shape(value, (3, 4), FLOAT, "matrix")


def matrix44(value: ArrayLike) -> Array:
    """Row-major 4x4 transform or projection matrix, shape (..., 4, 4)."""
    return _as_shape(value, (4, 4), FLOAT, "matrix")


@struct.dataclass
class Rect2:
    """Near-plane extents of an off-axis frustum.

    Attributes:
        top_left: (2,) array holding (left, top).
        bottom_right: (2,) array holding (right, bottom).
    """
    top_left: Array
    bottom_right: Array

    @property
    def left(self) -> Array:
        return self.top_left[..., 0]

    @property
    def top(self) -> Array:
        return self.top_left[..., 1]

    @property
    def right(self) -> Array:
        return self.bottom_right[..., 0]

    @property
    def bottom(self) -> Array:
        return self.bottom_right[..., 1]


def rect2(top_left: ArrayLike, bottom_right: ArrayLike) -> Rect2:
    """Build a Rect2 from its two corners, each (..., 2)."""
    return Rect2(
        top_left=_as_shape(top_left, (2,), FLOAT, "top_left"),
        bottom_right=_as_shape(bottom_right, (2,), FLOAT, "bottom_right"),
    )
