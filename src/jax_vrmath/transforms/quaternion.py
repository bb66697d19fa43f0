"""Quaternion algebra in JAX.

Quaternions are (..., 4) float64 arrays in (w, x, y, z) order. All functions
are pure, JIT-able and broadcast over leading batch dimensions. Nothing here
normalizes implicitly: rotation helpers assume unit quaternions and unit
axes, and hand back whatever the arithmetic gives otherwise.
"""

import jax
import jax.numpy as jnp

from jax_vrmath.config import DOUBLE, FLOAT

Array = jax.Array


def _as_quaternion(q) -> Array:
    return jnp.asarray(q, dtype=DOUBLE)


def add(q1, q2) -> Array:
    """Componentwise sum. This does not compose rotations."""
    return _as_quaternion(q1) + _as_quaternion(q2)


def subtract(q1, q2) -> Array:
    """Componentwise difference."""
    return _as_quaternion(q1) - _as_quaternion(q2)


def multiply(q1, q2) -> Array:
    """
    Hamilton product q1 * q2.

    The product applies q2 first, then q1.

    Args:
        q1: (..., 4) quaternion
        q2: (..., 4) quaternion

    Returns:
        (..., 4) quaternion
    """
    w1, x1, y1, z1 = jnp.moveaxis(_as_quaternion(q1), -1, 0)
    w2, x2, y2, z2 = jnp.moveaxis(_as_quaternion(q2), -1, 0)

    return jnp.stack([
        w1*w2 - x1*x2 - y1*y2 - z1*z2,
        w1*x2 + x1*w2 + y1*z2 - z1*y2,
        w1*y2 + y1*w2 + z1*x2 - x1*z2,
        w1*z2 + z1*w2 + x1*y2 - y1*x2,
    ], axis=-1)


def conjugate(q) -> Array:
    """Negate the vector part. For a unit quaternion this is the inverse."""
    q = _as_quaternion(q)
    return q * jnp.array([1.0, -1.0, -1.0, -1.0], dtype=DOUBLE)


def normalize(q) -> Array:
    """Scale to unit length. A zero quaternion gives NaN."""
    q = _as_quaternion(q)
    return q / jnp.linalg.norm(q, axis=-1, keepdims=True)


def from_rotation_axis(angle, ux, uy, uz) -> Array:
    """
    Quaternion for a rotation of *angle* radians about (ux, uy, uz).

    The axis is used as given; a non-unit axis yields a non-unit quaternion.

    Returns:
        (..., 4) quaternion
    """
    half_angle = jnp.asarray(angle, dtype=DOUBLE) / 2
    s = jnp.sin(half_angle)
    w = jnp.cos(half_angle)
    ux = jnp.asarray(ux, dtype=DOUBLE)
    uy = jnp.asarray(uy, dtype=DOUBLE)
    uz = jnp.asarray(uz, dtype=DOUBLE)
    return jnp.stack(jnp.broadcast_arrays(w, ux * s, uy * s, uz * s), axis=-1)


def from_rotation_x(angle) -> Array:
    """Rotation of *angle* radians about the X axis."""
    return from_rotation_axis(angle, 1.0, 0.0, 0.0)


def from_rotation_y(angle) -> Array:
    """Rotation of *angle* radians about the Y axis."""
    return from_rotation_axis(angle, 0.0, 1.0, 0.0)


def from_rotation_z(angle) -> Array:
    """Rotation of *angle* radians about the Z axis."""
    return from_rotation_axis(angle, 0.0, 0.0, 1.0)


def from_yaw_pitch_roll(yaw, pitch, roll) -> Array:
    """
    Quaternion from yaw (Y), pitch (X) and roll (Z) in radians.

    Composed as Ry(yaw) * Rx(pitch) * Rz(roll). Device orientation consumers
    depend on this exact order.
    """
    return multiply(
        multiply(from_rotation_y(yaw), from_rotation_x(pitch)),
        from_rotation_z(roll),
    )


def from_rotation_matrix(matrix) -> Array:
    """
    Convert the rotation block of pose matrices to quaternions (w, x, y, z).

    Shepperd's method: branch on the trace, otherwise on the largest diagonal
    element, so the divisor is never the near-zero one. The vector part is
    negated after extraction to match the handedness of device reported
    matrices. No clamping or renormalization is applied.

    Args:
        matrix: (..., 3, 4) or (..., 3, 3) array; only the 3x3 block is read

    Returns:
        (..., 4) quaternion
    """
    a = jnp.asarray(matrix)[..., :3, :3].astype(DOUBLE)

    a00, a01, a02 = a[..., 0, 0], a[..., 0, 1], a[..., 0, 2]
    a10, a11, a12 = a[..., 1, 0], a[..., 1, 1], a[..., 1, 2]
    a20, a21, a22 = a[..., 2, 0], a[..., 2, 1], a[..., 2, 2]

    trace = a00 + a11 + a22

    # Positive trace
    s0 = 0.5 / jnp.sqrt(trace + 1.0)
    q0 = jnp.stack([
        0.25 / s0,
        (a12 - a21) * s0,
        (a20 - a02) * s0,
        (a01 - a10) * s0,
    ], axis=-1)

    # a00 dominates
    s1 = 2.0 * jnp.sqrt(1.0 + a00 - a11 - a22)
    q1 = jnp.stack([
        (a12 - a21) / s1,
        0.25 * s1,
        (a10 + a01) / s1,
        (a20 + a02) / s1,
    ], axis=-1)

    # a11 dominates
    s2 = 2.0 * jnp.sqrt(1.0 + a11 - a00 - a22)
    q2 = jnp.stack([
        (a20 - a02) / s2,
        (a10 + a01) / s2,
        0.25 * s2,
        (a21 + a12) / s2,
    ], axis=-1)

    # a22 dominates
    s3 = 2.0 * jnp.sqrt(1.0 + a22 - a00 - a11)
    q3 = jnp.stack([
        (a01 - a10) / s3,
        (a20 + a02) / s3,
        (a21 + a12) / s3,
        0.25 * s3,
    ], axis=-1)

    # Unselected branches may hold NaN; jnp.where never mixes them in.
    quaternion = jnp.where(
        (trace > 0)[..., None],
        q0,
        jnp.where(
            ((a00 > a11) & (a00 > a22))[..., None],
            q1,
            jnp.where((a11 > a22)[..., None], q2, q3),
        ),
    )

    return conjugate(quaternion)


def to_rotation_matrix(q) -> Array:
    """
    Convert quaternions to pose matrices with zero translation.

    This is the partner of from_rotation_matrix: feeding the result back
    recovers the same rotation (up to the sign of q).

    Args:
        q: (..., 4) quaternion in (w, x, y, z) format

    Returns:
        (..., 3, 4) float32 matrix
    """
    w, x, y, z = jnp.moveaxis(_as_quaternion(q), -1, 0)

    xx, yy, zz = x*x, y*y, z*z
    wx, wy, wz = w*x, w*y, w*z
    xy, xz, yz = x*y, x*z, y*z
    zeros = jnp.zeros_like(w)

    matrix = jnp.stack([
        jnp.stack([1 - 2*(yy + zz), 2*(xy - wz), 2*(xz + wy), zeros], axis=-1),
        jnp.stack([2*(xy + wz), 1 - 2*(xx + zz), 2*(yz - wx), zeros], axis=-1),
        jnp.stack([2*(xz - wy), 2*(yz + wx), 1 - 2*(xx + yy), zeros], axis=-1),
    ], axis=-2)

    return matrix.astype(FLOAT)


def _pure(vector) -> Array:
    v = jnp.asarray(vector, dtype=DOUBLE)
    return jnp.concatenate([jnp.zeros_like(v[..., :1]), v], axis=-1)


def rotate_vector_with_inverse(q, q_inv, vector, reverse: bool = False) -> Array:
    """
    Rotate *vector* with a caller supplied inverse of *q*.

    Computes the vector part of q * (0, v) * q_inv, or q_inv * (0, v) * q
    when *reverse* is set.

    Args:
        q: (..., 4) unit quaternion
        q_inv: (..., 4) inverse of q
        vector: (..., 3) vector or plain 3-element sequence
        reverse: apply the inverse rotation instead (static under jit)

    Returns:
        (..., 3) double vector
    """
    p = _pure(vector)
    if reverse:
        out = multiply(multiply(q_inv, p), q)
    else:
        out = multiply(multiply(q, p), q_inv)
    return out[..., 1:]


def rotate_vector(q, vector, reverse: bool = False) -> Array:
    """
    Rotate *vector* by unit quaternion *q* using the sandwich product.

    Args:
        q: (..., 4) unit quaternion
        vector: (..., 3) vector or plain 3-element sequence
        reverse: apply the inverse rotation instead

    Returns:
        (..., 3) double vector
    """
    return rotate_vector_with_inverse(q, conjugate(q), vector, reverse=reverse)
