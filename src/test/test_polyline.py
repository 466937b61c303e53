"""
Test fixed-size and dynamic polylines.
"""

import pytest
import numpy as np
from pathlib import Path

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from shapekit.geometry import BoxedPolyline3d, Polyline3d, Primitive3d, Vector3D


class TestPolyline3d:
    """Test Polyline3d[N] truncation and padding."""

    def test_exact_count(self):
        points = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0)]
        polyline = Polyline3d[3](points)
        assert len(polyline) == 3
        assert polyline.vertices == tuple(Vector3D(*p) for p in points)

    def test_extra_points_dropped(self):
        polyline = Polyline3d[2]([(1.0, 0.0, 0.0), (2.0, 0.0, 0.0), (3.0, 0.0, 0.0)])
        assert polyline.vertices == (Vector3D(1.0, 0.0, 0.0), Vector3D(2.0, 0.0, 0.0))

    def test_missing_points_padded_with_origin(self):
        polyline = Polyline3d[4]([(1.0, 2.0, 3.0)])
        assert polyline.vertices[0] == Vector3D(1.0, 2.0, 3.0)
        assert polyline.vertices[1:] == (Vector3D(0.0, 0.0, 0.0),) * 3

    def test_generator_and_array_input(self):
        polyline = Polyline3d[2](Vector3D(float(i), 0.0, 0.0) for i in range(5))
        assert list(polyline) == [Vector3D(0.0, 0.0, 0.0), Vector3D(1.0, 0.0, 0.0)]

        polyline = Polyline3d[2](np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]]))
        assert polyline.vertices[1] == Vector3D(1.0, 1.0, 1.0)

    def test_sized_classes_are_cached(self):
        assert Polyline3d[3] is Polyline3d[3]
        assert Polyline3d[3] is not Polyline3d[4]
        assert issubclass(Polyline3d[3], Polyline3d)
        assert isinstance(Polyline3d[1]([]), Primitive3d)

    def test_equality(self):
        assert Polyline3d[2]([(1.0, 0.0, 0.0)]) == Polyline3d[2]([(1.0, 0.0, 0.0), (0.0, 0.0, 0.0)])

    def test_size_required(self):
        with pytest.raises(TypeError):
            Polyline3d([(0.0, 0.0, 0.0)])

    def test_negative_size(self):
        with pytest.raises(ValueError):
            Polyline3d[-1]


class TestBoxedPolyline3d:
    """Test BoxedPolyline3d."""

    def test_keeps_all_points(self):
        points = [(float(i), float(i * i), 0.0) for i in range(100)]
        polyline = BoxedPolyline3d.from_points(points)
        assert len(polyline) == 100
        assert polyline.vertices[-1] == Vector3D(99.0, 9801.0, 0.0)

    def test_empty(self):
        assert len(BoxedPolyline3d(())) == 0

    def test_immutable(self):
        polyline = BoxedPolyline3d([(0.0, 0.0, 0.0)])
        assert isinstance(polyline.vertices, tuple)
        with pytest.raises(AttributeError):
            polyline.vertices = ()
