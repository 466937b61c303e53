"""Geometry: vectors, directions and 3D primitive shapes."""

from .vector import Vector3D, as_vector
from .direction import Direction, InvalidDirectionError, InvalidDirectionReason
from .markers import Primitive2d, Primitive3d, is_primitive_2d, is_primitive_3d
from .shapes import (
    Sphere,
    Plane3d,
    Line3d,
    Segment3d,
    Cuboid,
    Cylinder,
    Capsule,
    Cone,
    ConicalFrustum,
)
from .polyline import Polyline3d, BoxedPolyline3d
from .torus import Torus, TorusKind

__all__ = [
    "Vector3D",
    "as_vector",
    "Direction",
    "InvalidDirectionError",
    "InvalidDirectionReason",
    "Primitive2d",
    "Primitive3d",
    "is_primitive_2d",
    "is_primitive_3d",
    "Sphere",
    "Plane3d",
    "Line3d",
    "Segment3d",
    "Cuboid",
    "Cylinder",
    "Capsule",
    "Cone",
    "ConicalFrustum",
    "Polyline3d",
    "BoxedPolyline3d",
    "Torus",
    "TorusKind",
]
