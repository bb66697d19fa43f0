"""Precision set-up for jax_vrmath.

Quaternions and double vectors are float64, which JAX only honours once
``jax_enable_x64`` is on. Matrices and float vectors stay float32 to match
what the rendering and tracking runtimes hand us.
"""

import logging

import jax
import jax.numpy as jnp

_LOG: logging.Logger = logging.getLogger(__name__)

FLOAT = jnp.float32
DOUBLE = jnp.float64


def enable_x64() -> None:
    """Turn on 64-bit floats for the whole JAX runtime."""
    _LOG.debug("Enabling jax_enable_x64 for double precision quaternions")
    jax.config.update("jax_enable_x64", True)
