"""Elementwise algebra on double precision 3-vectors.

Division by zero is left to IEEE 754: the result is inf or NaN, never an
exception.
"""

import jax
import jax.numpy as jnp

from jax_vrmath.config import DOUBLE

Array = jax.Array


def add(lhs, rhs) -> Array:
    """
    Add two 3-vectors.

    Args:
        lhs: (..., 3) vector
        rhs: (..., 3) vector or plain 3-element sequence

    Returns:
        (..., 3) double vector
    """
    return jnp.asarray(lhs, dtype=DOUBLE) + jnp.asarray(rhs, dtype=DOUBLE)


def subtract(lhs, rhs) -> Array:
    """
    Subtract *rhs* from *lhs*.

    Args:
        lhs: (..., 3) vector
        rhs: (..., 3) vector or plain 3-element sequence

    Returns:
        (..., 3) double vector
    """
    return jnp.asarray(lhs, dtype=DOUBLE) - jnp.asarray(rhs, dtype=DOUBLE)


def scale(v, s) -> Array:
    """Multiply a 3-vector by a scalar."""
    return jnp.asarray(v, dtype=DOUBLE) * jnp.asarray(s, dtype=DOUBLE)


def divide(v, s) -> Array:
    """Divide a 3-vector by a scalar. Unchecked for s == 0."""
    return jnp.asarray(v, dtype=DOUBLE) / jnp.asarray(s, dtype=DOUBLE)
