"""
Torus primitive and its topological classification.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import math

from .markers import Primitive3d


class TorusKind(str, Enum):
    """
    Shape of a torus, determined by its minor and major radii.

    RING:    major > minor, the torus has a hole
    HORN:    major == minor, no hole but not self-intersecting
    SPINDLE: major < minor, self-intersecting
    INVALID: a radius is non-positive, infinite or NaN
    """
    RING = "ring"
    HORN = "horn"
    SPINDLE = "spindle"
    INVALID = "invalid"


@dataclass(frozen=True)
class Torus(Primitive3d):
    """
    A torus, often representing a ring or donut shape.

    Attributes:
        minor_radius: Radius of the tube
        major_radius: Distance from the center of the torus to the center
            of the tube

    Radii are not validated on construction. A torus built from nonsensical
    radii (for example inner > outer) is still created, and only `kind()`
    reports it as INVALID (or as an unexpected kind).
    """
    minor_radius: float
    major_radius: float

    @classmethod
    def from_radii(cls, inner_radius: float, outer_radius: float) -> Torus:
        """
        Create a torus from the radius of its hole and of the whole object.
        """
        minor_radius = (outer_radius - inner_radius) / 2.0
        major_radius = outer_radius - minor_radius
        return cls(minor_radius=minor_radius, major_radius=major_radius)

    def inner_radius(self) -> float:
        """Radius of the hole, major - minor (for a ring torus)."""
        return self.major_radius - self.minor_radius

    def outer_radius(self) -> float:
        """Radius of the whole object, major + minor."""
        return self.major_radius + self.minor_radius

    def kind(self) -> TorusKind:
        """Classify the torus as ring, horn, spindle or invalid."""
        for radius in (self.minor_radius, self.major_radius):
            if not math.isfinite(radius) or radius <= 0.0:
                return TorusKind.INVALID

        if self.major_radius > self.minor_radius:
            return TorusKind.RING
        if self.major_radius == self.minor_radius:
            return TorusKind.HORN
        return TorusKind.SPINDLE
