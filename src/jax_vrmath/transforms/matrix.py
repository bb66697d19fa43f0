"""Matrix algebra on pose (3x4) and projection (4x4) matrices.

Pose matrices carry a 3x3 rotation/scale block and a translation column.
The products here only ever touch the 3x3 block: translation is applied
separately by the pose pipeline. All functions are pure, JIT-able and
broadcast over leading batch dimensions.
"""

import jax
import jax.numpy as jnp

from jax_vrmath.config import DOUBLE, FLOAT

Array = jax.Array


def identity34() -> Array:
    """Identity rotation with zero translation, shape (3, 4)."""
    return jnp.eye(3, 4, dtype=FLOAT)


def _as_float(v) -> Array:
    v = jnp.asarray(v)
    if not jnp.issubdtype(v.dtype, jnp.floating):
        v = v.astype(DOUBLE)
    return v


def mat_mul33(a, b) -> Array:
    """
    Multiply the 3x3 blocks of two pose matrices.

    The translation column is not computed or copied; it is zero in the
    result. Callers that need it must combine translations themselves.

    Args:
        a: (..., 3, 4) pose matrix
        b: (..., 3, 4) pose matrix

    Returns:
        (..., 3, 4) matrix holding a[:3, :3] @ b[:3, :3]
    """
    a = jnp.asarray(a, dtype=FLOAT)
    b = jnp.asarray(b, dtype=FLOAT)
    block = jnp.einsum("...ik,...kj->...ij", a[..., :3, :3], b[..., :3, :3])
    zeros = jnp.zeros(block.shape[:-1] + (1,), dtype=FLOAT)
    return jnp.concatenate([block, zeros], axis=-1)


def mat_mul33_vector(a, v) -> Array:
    """
    Rotate a vector by the 3x3 block: result[i] = sum_k a[i][k] * v[k].

    Translation is never applied.

    Args:
        a: (..., 3, 4) pose matrix
        v: (..., 3) float32 or float64 vector; integer input is promoted to float64

    Returns:
        (..., 3) vector with the precision of *v*
    """
    v = _as_float(v)
    block = jnp.asarray(a)[..., :3, :3].astype(v.dtype)
    return jnp.einsum("...ik,...k->...i", block, v)


def vector_mul33(v, a) -> Array:
    """
    Row vector times the 3x3 block: result[i] = sum_k v[k] * a[k][i].

    Equivalent to rotating by the transposed block.

    Args:
        v: (..., 3) float32 or float64 vector; integer input is promoted to float64
        a: (..., 3, 4) pose matrix

    Returns:
        (..., 3) vector with the precision of *v*
    """
    v = _as_float(v)
    block = jnp.asarray(a)[..., :3, :3].astype(v.dtype)
    return jnp.einsum("...k,...ki->...i", v, block)


def transpose_mul33(a) -> Array:
    """
    Transpose the 3x3 block, keeping the translation column as is.

    Args:
        a: (..., 3, 4) pose matrix

    Returns:
        (..., 3, 4) matrix with the block transposed and column 3 unchanged
    """
    a = jnp.asarray(a, dtype=FLOAT)
    block = jnp.swapaxes(a[..., :3, :3], -1, -2)
    return jnp.concatenate([block, a[..., :3, 3:]], axis=-1)


def mat_mul44(a, b) -> Array:
    """
    Homogeneous vector times 4x4 matrix: result[i] = sum_k a[k] * b[i][k].

    Each output element is the dot product of *a* with row i of *b*.

    Args:
        a: (..., 4) vector
        b: (..., 4, 4) matrix

    Returns:
        (..., 4) float32 vector
    """
    a = jnp.asarray(a, dtype=FLOAT)
    b = jnp.asarray(b, dtype=FLOAT)
    return jnp.einsum("...ik,...k->...i", b, a)
