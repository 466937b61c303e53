"""
Unit-length direction vectors.

A Direction can only be obtained through validated constructors
(`from_vector`, `from_vector_with_length`, `from_xyz`) or through
`from_vector_unchecked`, whose caller guarantees unit length. The unchecked
path is verified with an `assert` only, so it costs nothing under `python -O`.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
import math
from typing import ClassVar, Iterator, Tuple

import numpy as np
from numpy.typing import NDArray

from ..config import get_settings
from .vector import Vector3D, VectorLike, as_vector

logger = logging.getLogger(__name__)


class InvalidDirectionReason(str, Enum):
    """Why a vector could not be turned into a Direction."""
    ZERO = "zero"
    NAN = "nan"
    INFINITE = "infinite"


class InvalidDirectionError(ValueError):
    """Raised when a vector has a zero, NaN or infinite length."""

    def __init__(self, reason: InvalidDirectionReason):
        self.reason = InvalidDirectionReason(reason)
        super().__init__(f"Cannot create a direction from a vector with {self.reason.value} length")

    @classmethod
    def from_length(cls, length: float) -> InvalidDirectionError:
        """Classify a rejected vector by its length."""
        if math.isinf(length):
            return cls(InvalidDirectionReason.INFINITE)
        if math.isnan(length):
            return cls(InvalidDirectionReason.NAN)
        return cls(InvalidDirectionReason.ZERO)


@dataclass(frozen=True)
class Direction:
    """
    A normalized vector pointing in a direction in 3D space.

    Components are readable like a vector (`d.x`, `tuple(d)`, `d * 2.0`)
    but the wrapped vector cannot be replaced, so the unit-length invariant
    holds for the lifetime of the object.
    """
    vector: Vector3D

    X: ClassVar[Direction]
    Y: ClassVar[Direction]
    Z: ClassVar[Direction]
    NEG_X: ClassVar[Direction]
    NEG_Y: ClassVar[Direction]
    NEG_Z: ClassVar[Direction]

    def __post_init__(self):
        object.__setattr__(self, "vector", as_vector(self.vector))
        assert self.vector.is_normalized(get_settings().normalized_tolerance), \
            f"{self.vector!r} is not normalized"

    @classmethod
    def from_vector(cls, value: VectorLike) -> Direction:
        """
        Create a direction from a finite, nonzero vector.

        Raises:
            InvalidDirectionError: if the length of `value` is zero,
                infinite or NaN.
        """
        direction, _ = cls.from_vector_with_length(value)
        return direction

    @classmethod
    def from_vector_with_length(cls, value: VectorLike) -> Tuple[Direction, float]:
        """
        Create a direction from a finite, nonzero vector and also return
        the vector's original length.
        """
        value = as_vector(value)
        length = value.magnitude()
        if not (math.isfinite(length) and length > 0.0):
            error = InvalidDirectionError.from_length(length)
            logger.debug("Rejected direction candidate %r: %s", value, error.reason.value)
            raise error
        # Rescale first so subnormal components still normalize to unit length
        scaled = value / max(abs(c) for c in value)
        return cls(scaled / scaled.magnitude()), length

    @classmethod
    def from_vector_unchecked(cls, value: VectorLike) -> Direction:
        """
        Create a direction from a vector that is already normalized.

        Warning:
            `value` must have length 1. This is only checked by an assertion,
            never in optimized runs.
        """
        return cls(as_vector(value))

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> Direction:
        """Create a direction from its x, y and z components."""
        return cls.from_vector(Vector3D(x, y, z))

    @property
    def x(self) -> float:
        return self.vector.x

    @property
    def y(self) -> float:
        return self.vector.y

    @property
    def z(self) -> float:
        return self.vector.z

    def to_array(self) -> NDArray[np.float64]:
        return self.vector.to_array()

    def __array__(self, dtype=None, copy=None):
        arr = self.to_array()
        return arr if dtype is None else arr.astype(dtype)

    def dot(self, other: Direction | Vector3D) -> float:
        if isinstance(other, Direction):
            other = other.vector
        return self.vector.dot(other)

    def is_close(self, other: Direction, tolerance: float | None = None) -> bool:
        """Component-wise comparison within the configured tolerance."""
        if tolerance is None:
            tolerance = get_settings().approx_tolerance
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=0.0, atol=tolerance))

    def __iter__(self) -> Iterator[float]:
        return iter(self.vector)

    def __mul__(self, scalar: float) -> Vector3D:
        return self.vector * scalar

    def __rmul__(self, scalar: float) -> Vector3D:
        return self.vector * scalar

    def __neg__(self) -> Direction:
        """The antipodal direction."""
        return Direction(-self.vector)

    def __repr__(self) -> str:
        return f"Direction({self.x!r}, {self.y!r}, {self.z!r})"


Direction.X = Direction(Vector3D(1.0, 0.0, 0.0))
Direction.Y = Direction(Vector3D(0.0, 1.0, 0.0))
Direction.Z = Direction(Vector3D(0.0, 0.0, 1.0))
Direction.NEG_X = Direction(Vector3D(-1.0, 0.0, 0.0))
Direction.NEG_Y = Direction(Vector3D(0.0, -1.0, 0.0))
Direction.NEG_Z = Direction(Vector3D(0.0, 0.0, -1.0))
