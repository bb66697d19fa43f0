"""
JAX VR Math: spatial math for VR head and controller pose pipelines.

This library provides JIT-compilable implementations of quaternion, vector
and matrix arithmetic, rotation construction and off-axis projection
matrices, following the conventions of the OpenVR pose and projection APIs.
"""

import logging

from .config import enable_x64

logging.getLogger(__name__).addHandler(logging.NullHandler())

enable_x64()

# Import core modules
from . import core
from . import transforms
from .core import Rect2
from .transforms.quat import Quaternion

__version__ = "0.1.0"
__all__ = ["transforms", "core", "Quaternion", "Rect2"]
