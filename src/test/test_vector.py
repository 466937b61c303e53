"""
Test the Vector3D value type.
"""

import pytest
import numpy as np
from pathlib import Path

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from shapekit.geometry import Vector3D, as_vector


class TestVector3D:
    """Test Vector3D construction and arithmetic."""

    def test_vector_creation(self):
        v = Vector3D(1.0, 2.0, 3.0)
        assert v.x == 1.0
        assert v.y == 2.0
        assert v.z == 3.0

    def test_vector_to_array(self):
        v = Vector3D(1.0, 2.0, 3.0)
        np.testing.assert_array_almost_equal(v.to_array(), [1.0, 2.0, 3.0])

    def test_from_array_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            Vector3D.from_array(np.zeros(2))

    def test_as_vector_accepts_sequences(self):
        assert as_vector((1, 2, 3)) == Vector3D(1.0, 2.0, 3.0)
        assert as_vector(np.array([1.0, 2.0, 3.0])) == Vector3D(1.0, 2.0, 3.0)
        v = Vector3D(0.0, 1.0, 0.0)
        assert as_vector(v) is v

    def test_vector_operations(self):
        v1 = Vector3D(1.0, 0.0, 0.0)
        v2 = Vector3D(0.0, 1.0, 0.0)

        # Dot product
        assert v1.dot(v2) == 0.0

        # Magnitude
        assert v1.magnitude() == 1.0
        assert Vector3D(3.0, 4.0, 0.0).length_squared() == 25.0

        assert Vector3D(3.0, 4.0, 0.0).magnitude() == 5.0

    def test_arithmetic(self):
        a = Vector3D(1.0, 2.0, 3.0)
        b = Vector3D(4.0, 5.0, 6.0)
        assert a + b == Vector3D(5.0, 7.0, 9.0)
        assert b - a == Vector3D(3.0, 3.0, 3.0)
        assert a * 2.0 == Vector3D(2.0, 4.0, 6.0)
        assert 2.0 * a == Vector3D(2.0, 4.0, 6.0)
        assert b / 2.0 == Vector3D(2.0, 2.5, 3.0)
        assert -a == Vector3D(-1.0, -2.0, -3.0)

    def test_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Vector3D(1.0, 0.0, 0.0) / 0.0

    def test_clamp(self):
        v = Vector3D(5.0, -5.0, 0.5)
        clamped = v.clamp(Vector3D.splat(-1.0), Vector3D.splat(1.0))
        assert clamped == Vector3D(1.0, -1.0, 0.5)

    def test_is_normalized(self):
        assert Vector3D(0.0, 0.0, 1.0).is_normalized()
        assert not Vector3D(0.0, 0.0, 2.0).is_normalized()
        assert not Vector3D(float("nan"), 0.0, 0.0).is_normalized()

    def test_immutable(self):
        v = Vector3D(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0

    def test_magnitude_extreme_values(self):
        assert Vector3D(3e-162, 0.0, 0.0).magnitude() == 3e-162
        assert Vector3D(1e200, 0.0, 0.0).magnitude() == 1e200
        assert Vector3D(3e200, 4e200, 0.0).magnitude() == pytest.approx(5e200)

    def test_requires_three_components(self):
        with pytest.raises(TypeError):
            Vector3D(1.0, 2.0)

    def test_repr_keeps_small_values(self):
        assert repr(Vector3D(3e-162, 1.0, -2.5)) == "Vector3D(3e-162, 1.0, -2.5)"
