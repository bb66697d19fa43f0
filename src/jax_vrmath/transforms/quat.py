"""Quaternion value type with arithmetic operators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import jax
import jax.numpy as jnp
from jax.tree_util import register_pytree_node_class

from jax_vrmath.config import DOUBLE
from . import quaternion

Array = jax.Array

@register_pytree_node_class
@dataclass(frozen=True, eq=False)
class Quaternion:
    """
    Orientation as a (w, x, y, z) quaternion, or a batch of them.

    `*` composes rotations (the right operand is applied first); `+` and `-`
    are plain componentwise sums. Equality and hashing are by identity, since
    the components are an array; compare `wxyz` with numpy instead.
    """
    wxyz: Array  # shape (..., 4), float64

    # Constructors
    @classmethod
    def from_array(cls, wxyz) -> "Quaternion":
        wxyz = jnp.asarray(wxyz, dtype=DOUBLE)
        if wxyz.ndim == 0 or wxyz.shape[-1] != 4:
            raise ValueError(f"quaternion must have shape (...,4), got {wxyz.shape}")
        return cls(wxyz)

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(jnp.array([1.0, 0.0, 0.0, 0.0], dtype=DOUBLE))

    @classmethod
    def from_rotation_axis(cls, angle, ux, uy, uz) -> "Quaternion":
        return cls(quaternion.from_rotation_axis(angle, ux, uy, uz))

    @classmethod
    def from_yaw_pitch_roll(cls, yaw, pitch, roll) -> "Quaternion":
        return cls(quaternion.from_yaw_pitch_roll(yaw, pitch, roll))

    @classmethod
    def from_rotation_matrix(cls, matrix) -> "Quaternion":
        return cls(quaternion.from_rotation_matrix(matrix))

    # Flattened as the single wxyz leaf
    def tree_flatten(self):
        return (self.wxyz,), None

    @classmethod
    def tree_unflatten(cls, aux, children):
        (wxyz,) = children
        return cls(wxyz)

    # Components
    @property
    def w(self) -> Array:
        return self.wxyz[..., 0]

    @property
    def x(self) -> Array:
        return self.wxyz[..., 1]

    @property
    def y(self) -> Array:
        return self.wxyz[..., 2]

    @property
    def z(self) -> Array:
        return self.wxyz[..., 3]

    # Arithmetic
    def __add__(self, other: "Quaternion") -> "Quaternion":
        return Quaternion(quaternion.add(self.wxyz, other.wxyz))

    def __sub__(self, other: "Quaternion") -> "Quaternion":
        return Quaternion(quaternion.subtract(self.wxyz, other.wxyz))

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        """Hamilton product: apply *other* first, then self."""
        return Quaternion(quaternion.multiply(self.wxyz, other.wxyz))

    def conjugate(self) -> "Quaternion":
        return Quaternion(quaternion.conjugate(self.wxyz))

    def normalized(self) -> "Quaternion":
        return Quaternion(quaternion.normalize(self.wxyz))

    # Vector rotation
    def rotate(self, vector, reverse: bool = False, inverse: Optional["Quaternion"] = None) -> Array:
        """
        Rotate *vector* by this (unit) quaternion.

        Pass *inverse* to reuse an already computed conjugate.
        """
        if inverse is None:
            return quaternion.rotate_vector(self.wxyz, vector, reverse=reverse)
        return quaternion.rotate_vector_with_inverse(self.wxyz, inverse.wxyz, vector, reverse=reverse)

    def to_rotation_matrix(self) -> Array:
        return quaternion.to_rotation_matrix(self.wxyz)
