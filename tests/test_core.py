"""Unit tests for the core value types.

Tests cover:
- Vector3 arithmetic, products and normalization
- UV and Ray helpers
- Matrix44 point and direction transforms
"""

import math

import numpy as np
import pytest

from pathtracer.core.matrix import Matrix44
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3


class TestVector3:
    """Tests for Vector3 arithmetic."""

    def test_add_sub(self):
        """Test component-wise addition and subtraction."""
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)

    def test_scalar_and_component_multiplication(self):
        """Test scalar multiplication from both sides and color tinting."""
        v = Vector3(1, -2, 3)
        assert v * 2 == Vector3(2, -4, 6)
        assert 2 * v == Vector3(2, -4, 6)
        assert v * Vector3(2, 3, 4) == Vector3(2, -6, 12)

    def test_numpy_scalar_multiplication(self):
        """Test numpy scalars are treated as scalars."""
        v = Vector3(1, 2, 3) * np.float32(2.0)
        assert v == Vector3(2, 4, 6)

    def test_negation(self):
        """Test unary negation."""
        assert -Vector3(1, -2, 0) == Vector3(-1, 2, 0)

    def test_dot_and_cross(self):
        """Test dot and cross products of the unit axes."""
        x, y, z = Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1)
        assert x.dot(y) == 0
        assert x.dot(x) == 1
        assert x.cross(y) == z
        assert y.cross(z) == x
        assert z.cross(x) == y

    def test_length(self):
        """Test Euclidean length."""
        assert Vector3(3, 4, 0).length() == pytest.approx(5.0)

    def test_normalize_returns_copy(self):
        """Test normalize() leaves the original untouched."""
        v = Vector3(0, 3, 4)
        n = v.normalize()
        assert n.is_close(Vector3(0, 0.6, 0.8))
        assert v == Vector3(0, 3, 4)

    def test_normalize_in_place(self):
        """Test normalize_() mutates and returns self."""
        v = Vector3(0, 0, 2)
        result = v.normalize_()
        assert result is v
        assert v == Vector3(0, 0, 1)

    def test_normalize_zero_vector(self):
        """Test the zero vector normalizes to zero in both forms."""
        assert Vector3(0, 0, 0).normalize().is_zero()
        assert Vector3(0, 0, 0).normalize_().is_zero()

    def test_iteration_and_tuple(self):
        """Test unpacking and tuple conversion."""
        x, y, z = Vector3(1, 2, 3)
        assert (x, y, z) == (1.0, 2.0, 3.0)
        assert Vector3(1, 2, 3).to_tuple() == (1.0, 2.0, 3.0)

    def test_fill(self):
        assert Vector3.fill(0.5) == Vector3(0.5, 0.5, 0.5)

    def test_copy_is_independent(self):
        v = Vector3(1, 2, 3)
        c = v.copy()
        assert c == v and c is not v
        c.normalize_()
        assert v == Vector3(1, 2, 3)


class TestUVAndRay:
    """Tests for UV and Ray helpers."""

    def test_uv_arithmetic(self):
        assert UV(1, 2) + UV(3, 4) == UV(4, 6)
        assert UV(3, 4) - UV(1, 1) == UV(2, 3)
        assert UV(1, 2) * 2 == UV(2, 4)

    def test_ray_at(self):
        """Test ray evaluation at positive and zero t."""
        ray = Ray(Vector3(1, 1, 1), Vector3(0, 0, -1))
        assert ray.at(0) == Vector3(1, 1, 1)
        assert ray.at(5) == Vector3(1, 1, -4)


class TestMatrix44:
    """Tests for camera-to-world transforms."""

    def test_identity(self):
        m = Matrix44()
        assert m.mult_vec_matrix(Vector3(1, 2, 3)) == Vector3(1, 2, 3)
        assert m.mult_dir_matrix(Vector3(1, 2, 3)) == Vector3(1, 2, 3)

    def test_translation_moves_points_not_directions(self):
        """Test directions ignore the translation row."""
        m = Matrix44.translation(Vector3(1, 2, 3))
        assert m.mult_vec_matrix(Vector3(0, 0, 0)) == Vector3(1, 2, 3)
        assert m.mult_dir_matrix(Vector3(0, 0, -1)) == Vector3(0, 0, -1)

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            Matrix44([[1, 0, 0], [0, 1, 0], [0, 0, 1]])

    def test_look_at_forward(self):
        """Test the camera's -Z axis maps onto the view direction."""
        origin = Vector3(0, 0, 5)
        m = Matrix44.look_at(origin, Vector3(0, 0, 0))
        assert m.mult_vec_matrix(Vector3(0, 0, 0)).is_close(origin)
        assert m.mult_dir_matrix(Vector3(0, 0, -1)).is_close(Vector3(0, 0, -1))

    def test_look_at_sideways(self):
        """Test looking down +X keeps the basis right-handed with Y up."""
        m = Matrix44.look_at(Vector3(0, 0, 0), Vector3(1, 0, 0))
        forward = m.mult_dir_matrix(Vector3(0, 0, -1))
        up = m.mult_dir_matrix(Vector3(0, 1, 0))
        right = m.mult_dir_matrix(Vector3(1, 0, 0))
        assert forward.is_close(Vector3(1, 0, 0))
        assert up.is_close(Vector3(0, 1, 0))
        assert right.is_close(Vector3(0, 0, 1))

    def test_look_at_default_up_is_fresh(self):
        """Test the default up vector is not shared between calls."""
        a = Matrix44.look_at(Vector3(0, 0, 5), Vector3(0, 0, 0))
        b = Matrix44.look_at(Vector3(0, 0, 5), Vector3(0, 0, 0), Vector3(0, 1, 0))
        assert a == b

    @pytest.mark.parametrize("target", [Vector3(0, 5, 0), Vector3(0, -3, 0)])
    def test_look_at_parallel_to_up(self, target):
        with pytest.raises(ValueError, match="parallel to up"):
            Matrix44.look_at(Vector3(0, 0, 0), target)

    def test_look_at_same_point(self):
        with pytest.raises(ValueError, match="coincide"):
            Matrix44.look_at(Vector3(1, 1, 1), Vector3(1, 1, 1))

    def test_rotation_about_y(self):
        """Test a 90 degree rotation of a direction."""
        c, s = math.cos(math.pi / 2), math.sin(math.pi / 2)
        m = Matrix44([
            [c, 0, -s, 0],
            [0, 1, 0, 0],
            [s, 0, c, 0],
            [0, 0, 0, 1],
        ])
        assert m.mult_dir_matrix(Vector3(1, 0, 0)).is_close(Vector3(0, 0, -1))

    def test_inverse_round_trip(self):
        m = Matrix44.look_at(Vector3(1, 2, 3), Vector3(0, 0, 0))
        p = Vector3(0.5, -1, 2)
        assert m.inverse().mult_vec_matrix(m.mult_vec_matrix(p)).is_close(p, 1e-9)
