"""
Marker base classes tagging shape types as 2D and/or 3D primitives.

They carry no data or behavior; downstream code filters on them with
`isinstance` / `issubclass`.
"""

from abc import ABC


class Primitive3d(ABC):
    """A primitive shape in 3D space."""
    __slots__ = ()


class Primitive2d(ABC):
    """A primitive shape in 2D space."""
    __slots__ = ()


def is_primitive_3d(obj) -> bool:
    """True for 3D primitive instances or classes."""
    if isinstance(obj, type):
        return issubclass(obj, Primitive3d)
    return isinstance(obj, Primitive3d)


def is_primitive_2d(obj) -> bool:
    """True for 2D primitive instances or classes."""
    if isinstance(obj, type):
        return issubclass(obj, Primitive2d)
    return isinstance(obj, Primitive2d)
