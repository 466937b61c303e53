"""
Polylines: series of connected line segments.

`Polyline3d[N]` holds exactly N vertices. Building one from more points
drops the extra points; building one from fewer pads the tail with the
origin. `BoxedPolyline3d` keeps every point it is given.
"""

from __future__ import annotations
from dataclasses import dataclass
import functools
import itertools
import operator
from typing import ClassVar, Iterable, Iterator, Optional, Tuple, Type

from .markers import Primitive3d
from .vector import Vector3D, VectorLike, as_vector


@dataclass(frozen=True)
class Polyline3d(Primitive3d):
    """
    A polyline with a fixed number of vertices.

    Usage:
        square = Polyline3d[4]([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)])
    """
    vertices: Tuple[Vector3D, ...]

    size: ClassVar[Optional[int]] = None

    def __class_getitem__(cls, size: int) -> Type[Polyline3d]:
        return _sized_polyline(size)

    def __post_init__(self):
        if self.size is None:
            raise TypeError("Polyline3d needs a vertex count, use Polyline3d[N](points)")
        points = [as_vector(p) for p in itertools.islice(self.vertices, self.size)]
        points.extend(Vector3D.zero() for _ in range(self.size - len(points)))
        object.__setattr__(self, "vertices", tuple(points))

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vector3D]:
        return iter(self.vertices)


@functools.lru_cache(maxsize=None)
def _sized_polyline(size: int) -> Type[Polyline3d]:
    size = operator.index(size)
    if size < 0:
        raise ValueError(f"Polyline vertex count must be non-negative, got {size}")
    return type(f"Polyline3d[{size}]", (Polyline3d,), {"size": size, "__module__": __name__})


@dataclass(frozen=True)
class BoxedPolyline3d(Primitive3d):
    """A polyline with any number of vertices."""
    vertices: Tuple[Vector3D, ...]

    def __post_init__(self):
        object.__setattr__(self, "vertices", tuple(as_vector(p) for p in self.vertices))

    @classmethod
    def from_points(cls, points: Iterable[VectorLike]) -> BoxedPolyline3d:
        return cls(vertices=tuple(points))

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vector3D]:
        return iter(self.vertices)
