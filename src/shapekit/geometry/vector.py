"""
Scalar 3-component vector used for points and displacements.

Points and vectors share one type: a point is the vector from the origin.
"""

from __future__ import annotations
from dataclasses import dataclass
import math

import numpy as np
from numpy.typing import NDArray, ArrayLike
from typing import Iterator, Union


@dataclass(frozen=True)
class Vector3D:
    """Immutable 3D vector."""
    x: float
    y: float
    z: float

    def to_array(self) -> NDArray[np.float64]:
        """Convert to NumPy array (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: ArrayLike) -> Vector3D:
        """Create from NumPy array (or any length-3 sequence)."""
        arr = np.asarray(arr, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"Expected array of shape (3,), got {arr.shape}")
        return cls(x=float(arr[0]), y=float(arr[1]), z=float(arr[2]))

    @classmethod
    def zero(cls) -> Vector3D:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def splat(cls, value: float) -> Vector3D:
        """Vector with all three components set to `value`."""
        return cls(value, value, value)

    def length_squared(self) -> float:
        """Squared magnitude, no square root."""
        return float(np.dot(self.to_array(), self.to_array()))

    def magnitude(self) -> float:
        """Vector magnitude (L2 norm), without overflow or underflow in the squares."""
        return math.hypot(self.x, self.y, self.z)

    def is_normalized(self, tolerance: float = 2e-4) -> bool:
        """True if |length² - 1| is within `tolerance`."""
        return abs(self.length_squared() - 1.0) <= tolerance

    def dot(self, other: Vector3D) -> float:
        """Dot product."""
        return float(np.dot(self.to_array(), other.to_array()))

    def clamp(self, lower: Vector3D, upper: Vector3D) -> Vector3D:
        """Clamp each component to [lower, upper] on its own axis."""
        arr = np.minimum(np.maximum(self.to_array(), lower.to_array()), upper.to_array())
        return Vector3D.from_array(arr)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vector3D) -> Vector3D:
        """Vector addition."""
        arr = self.to_array() + other.to_array()
        return Vector3D.from_array(arr)

    def __sub__(self, other: Vector3D) -> Vector3D:
        """Vector subtraction."""
        arr = self.to_array() - other.to_array()
        return Vector3D.from_array(arr)

    def __mul__(self, scalar: float) -> Vector3D:
        """Scalar multiplication."""
        arr = self.to_array() * scalar
        return Vector3D.from_array(arr)

    def __rmul__(self, scalar: float) -> Vector3D:
        """Scalar multiplication (reversed)."""
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3D:
        """Scalar division."""
        if scalar == 0:
            raise ZeroDivisionError("Division of vector by zero")
        arr = self.to_array() / scalar
        return Vector3D.from_array(arr)

    def __neg__(self) -> Vector3D:
        """Negation."""
        return Vector3D.from_array(-self.to_array())

    def __repr__(self) -> str:
        return f"Vector3D({self.x!r}, {self.y!r}, {self.z!r})"


VectorLike = Union[Vector3D, ArrayLike]


def as_vector(value: VectorLike) -> Vector3D:
    """Coerce a Vector3D, tuple, list or (3,) array into a Vector3D."""
    if isinstance(value, Vector3D):
        return value
    return Vector3D.from_array(value)
