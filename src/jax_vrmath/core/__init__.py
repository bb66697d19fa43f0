"""Core value types for JAX VR Math.

This module provides the fixed-shape array constructors and the Rect2
PyTree used across the pose and projection math.
"""

from .types import (
    Rect2,
    matrix34,
    matrix44,
    quaternion_array,
    rect2,
    vector3,
    vector3d,
    vector4,
)

__all__ = [
    "Rect2",
    "matrix34",
    "matrix44",
    "quaternion_array",
    "rect2",
    "vector3",
    "vector3d",
    "vector4",
]
