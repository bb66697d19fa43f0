"""Scalar helpers."""

import jax
import jax.numpy as jnp

Array = jax.Array


def signum(value) -> Array:
    """
    Sign of *value* as -1, 0 or 1.

    Works elementwise for any ordered dtype. NaN compares false both ways
    and therefore maps to 0.

    Args:
        value: scalar or array

    Returns:
        int32 array with the shape of *value*
    """
    value = jnp.asarray(value)
    zero = jnp.zeros((), dtype=value.dtype)
    return jnp.where(value > zero, 1, jnp.where(value < zero, -1, 0)).astype(jnp.int32)
