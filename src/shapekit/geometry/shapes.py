"""
3D primitive shapes.

All shapes are immutable records centered at the origin. Placement in a
scene (translation/rotation) belongs to the consumer, not the shape.
"""

from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Tuple

from .direction import Direction
from .markers import Primitive2d, Primitive3d
from .vector import Vector3D, VectorLike, as_vector


@dataclass(frozen=True)
class Sphere(Primitive3d):
    """A sphere primitive."""
    radius: float

    def closest_point(self, point: VectorLike) -> Vector3D:
        """
        Find the point on the sphere closest to `point`.

        A point inside (or on) the sphere is returned as is; a point outside
        is projected onto the surface along the ray from the center.
        """
        point = as_vector(point)
        distance_squared = point.length_squared()

        if distance_squared <= self.radius * self.radius:
            return point

        dir_to_point = point / math.sqrt(distance_squared)
        return dir_to_point * self.radius


@dataclass(frozen=True)
class Plane3d(Primitive3d):
    """
    An unbounded plane through the origin, perpendicular to `normal`.
    """
    normal: Direction

    @classmethod
    def from_normal(cls, normal: VectorLike) -> Plane3d:
        """
        Create a plane from a raw normal vector.

        Raises:
            InvalidDirectionError: if the normal is zero, infinite or NaN.
        """
        return cls(normal=Direction.from_vector(normal))


@dataclass(frozen=True)
class Line3d(Primitive3d):
    """An infinite line through the origin. For a finite line see Segment3d."""
    direction: Direction


@dataclass(frozen=True)
class Segment3d(Primitive3d):
    """
    A line segment centered at the origin.

    Attributes:
        direction: Direction from point1 towards point2
        half_length: Half the length of the segment; it extends this far
            along `direction` and along its opposite
    """
    direction: Direction
    half_length: float

    @classmethod
    def from_length(cls, direction: Direction, length: float) -> Segment3d:
        """Create a segment from a direction and its full length."""
        return cls(direction=direction, half_length=length / 2.0)

    @classmethod
    def from_points(cls, point1: VectorLike, point2: VectorLike) -> Tuple[Segment3d, Vector3D]:
        """
        Create a segment from its two end points.

        Returns:
            (segment, midpoint): the origin-centered segment and the
            translation that puts it back between the given points

        Raises:
            InvalidDirectionError: if the points coincide (or are not finite)
        """
        point1 = as_vector(point1)
        point2 = as_vector(point2)
        direction, length = Direction.from_vector_with_length(point2 - point1)
        return cls.from_length(direction, length), (point1 + point2) / 2.0

    def point1(self) -> Vector3D:
        """First end point, relative to the segment center."""
        return self.direction * -self.half_length

    def point2(self) -> Vector3D:
        """Second end point, relative to the segment center."""
        return self.direction * self.half_length


@dataclass(frozen=True)
class Cuboid(Primitive3d):
    """An axis-aligned box, stored as half of its width, height and depth."""
    half_size: Vector3D

    def __post_init__(self):
        object.__setattr__(self, "half_size", as_vector(self.half_size))

    @classmethod
    def from_lengths(cls, x_length: float, y_length: float, z_length: float) -> Cuboid:
        """Create a cuboid from full x, y and z lengths."""
        return cls.from_size(Vector3D(x_length, y_length, z_length))

    @classmethod
    def from_size(cls, size: VectorLike) -> Cuboid:
        """Create a cuboid from a full size vector."""
        return cls(half_size=as_vector(size) / 2.0)

    def closest_point(self, point: VectorLike) -> Vector3D:
        """
        Find the point on the cuboid closest to `point`.

        Each coordinate is clamped to [-half_size, half_size] on its axis,
        so interior points come back unchanged.
        """
        return as_vector(point).clamp(-self.half_size, self.half_size)


@dataclass(frozen=True)
class Cylinder(Primitive3d):
    """A cylinder along the Y axis."""
    radius: float
    half_height: float

    @classmethod
    def from_height(cls, radius: float, height: float) -> Cylinder:
        """Create a cylinder from a radius and full height."""
        return cls(radius=radius, half_height=height / 2.0)


@dataclass(frozen=True)
class Capsule(Primitive2d, Primitive3d):
    """
    A capsule: every point within `radius` of a segment.

    Valid both as a 2D and as a 3D primitive.

    Attributes:
        radius: Radius of the capsule
        half_length: Half the length of the inner segment, excluding the
            hemispherical caps
    """
    radius: float
    half_length: float

    @classmethod
    def from_length(cls, radius: float, length: float) -> Capsule:
        """Create a capsule from a radius and inner segment length."""
        return cls(radius=radius, half_length=length / 2.0)


@dataclass(frozen=True)
class Cone(Primitive3d):
    """A cone primitive."""
    radius: float
    height: float


@dataclass(frozen=True)
class ConicalFrustum(Primitive3d):
    """A cone with its tip sliced off."""
    radius_top: float
    radius_bottom: float
    height: float
