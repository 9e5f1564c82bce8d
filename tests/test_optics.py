"""Tests for reflect and refract."""

import math

import pytest

from pathtracer.core.utils import reflect, refract
from pathtracer.core.vector import Vector3

UP = Vector3(0, 1, 0)


class TestReflect:
    """Tests for mirror reflection."""

    @pytest.mark.parametrize("incident", [
        Vector3(1, -1, 0),
        Vector3(0.3, -0.2, 0.9),
        Vector3(0, -1, 0),
        Vector3(2, 1, -3),
    ])
    @pytest.mark.parametrize("normal", [
        Vector3(0, 1, 0),
        Vector3(1, 1, 1).normalize(),
        Vector3(-0.2, 0.5, 0.1).normalize(),
    ])
    def test_reflection_law(self, incident, normal):
        """Test R.N == -(I.N) and |R| == |I|."""
        r = reflect(incident, normal)
        assert r.dot(normal) == pytest.approx(-incident.dot(normal))
        assert r.length() == pytest.approx(incident.length())

    def test_normal_incidence_bounces_back(self):
        assert reflect(Vector3(0, -1, 0), UP) == Vector3(0, 1, 0)

    def test_tangential_component_preserved(self):
        r = reflect(Vector3(1, -1, 0), UP)
        assert r == Vector3(1, 1, 0)


class TestRefract:
    """Tests for Snell's law refraction."""

    def test_equal_media_straight_through(self):
        """Test ior == 1 along the normal returns the direction unchanged."""
        i = Vector3(0, -1, 0)
        assert refract(i, UP, 1.0).is_close(i)

    def test_equal_media_any_angle(self):
        """Test ior == 1 never bends the ray."""
        i = Vector3(0.6, -0.8, 0)
        assert refract(i, UP, 1.0).is_close(i, 1e-12)

    def test_leaving_along_normal(self):
        """Test a ray exiting along the normal is unchanged."""
        i = Vector3(0, 1, 0)
        assert refract(i, UP, 1.5).is_close(i)

    def test_total_internal_reflection_returns_zero(self):
        """Test k < 0 from inside a dense medium gives the zero vector."""
        # Leaving glass at cos = 0.6: k = 1 - 1.5^2 * (1 - 0.36) < 0
        i = Vector3(0.8, 0.6, 0)
        assert refract(i, UP, 1.5).is_zero()

    def test_snell_law_entering(self):
        """Test sin(theta_t) = sin(theta_i) / ior when entering the medium."""
        theta_i = math.radians(40)
        i = Vector3(math.sin(theta_i), -math.cos(theta_i), 0)
        t = refract(i, UP, 1.5).normalize()
        sin_t = math.sqrt(1 - t.dot(UP) ** 2)
        assert sin_t == pytest.approx(math.sin(theta_i) / 1.5)
        # transmitted ray continues below the surface
        assert t.y < 0
        assert t.x > 0

    def test_snell_law_leaving(self):
        """Test sin(theta_t) = ior * sin(theta_i) when leaving the medium."""
        theta_i = math.radians(20)
        i = Vector3(math.sin(theta_i), math.cos(theta_i), 0)
        t = refract(i, UP, 1.5).normalize()
        sin_t = math.sqrt(1 - t.dot(UP) ** 2)
        assert sin_t == pytest.approx(1.5 * math.sin(theta_i))
        assert t.y > 0

    def test_unit_input_gives_unit_output(self):
        """Test the transmitted vector of a unit input is already unit length."""
        i = Vector3(0.3, -0.9, 0.1).normalize()
        assert refract(i, UP, 1.33).length() == pytest.approx(1.0)
