"""
JAX-based spatial math for VR pose tracking and stereo rendering.

This module provides JIT-compilable implementations of:
- scalar helpers (scalar module)
- double precision 3-vector algebra (vector module)
- quaternion algebra and rotation construction (quaternion module)
- the Quaternion value type with arithmetic operators (quat module)
- pose and projection matrix products (matrix module)
- off-axis projection matrices and perspective divide (projection module)

All functions are pure and stateless.
"""

from . import scalar
from . import vector
from . import quaternion
from . import matrix
from . import projection
from .quat import Quaternion

__all__ = [
    "scalar",
    "vector",
    "quaternion",
    "matrix",
    "projection",
    "Quaternion",
]
