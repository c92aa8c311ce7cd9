"""Tests for material system."""

import math

import pytest

from weekendtracer.vec3 import Point, Direction, Colour
from weekendtracer.ray import Ray
from weekendtracer.hit import HitRecord
from weekendtracer.materials import Lambert, Metal, Dielectric, ScatterResult


def make_hit(material, direction, normal=Direction(0, 1, 0), point=Point(0, 0, 0)):
    """Hit at `point` for a ray arriving along `direction` on a surface with `normal`."""
    ray = Ray(point - direction, direction)
    return HitRecord.from_outward_normal(ray, 1.0, point, normal, material)


class TestLambert:
    """Test Lambert diffuse material."""

    def test_scatter_always_succeeds(self):
        hit = make_hit(Lambert(Colour(0.5, 0.5, 0.5)), Direction(0, -1, 0))
        for _ in range(100):
            assert isinstance(hit.scatter(), ScatterResult)

    def test_scattered_in_hemisphere(self):
        hit = make_hit(Lambert(Colour(0.5, 0.5, 0.5)), Direction(1, -1, 0))
        for _ in range(100):
            result = hit.scatter()
            assert result.scattered.direction.dot(hit.normal) >= 0
            assert result.scattered.origin == hit.point

    def test_attenuation_matches_albedo(self):
        albedo = Colour(0.8, 0.2, 0.3)
        result = make_hit(Lambert(albedo), Direction(0, -1, 0)).scatter()
        assert result.attenuation == albedo

    def test_degenerate_direction_falls_back_to_normal(self, monkeypatch):
        normal = Direction(0, 1, 0)
        monkeypatch.setattr(Direction, "random_direction_in_hemisphere", lambda self: -normal)
        result = make_hit(Lambert(Colour(1, 1, 1)), Direction(0, -1, 0), normal).scatter()
        assert result.scattered.direction == normal

    def test_value_semantics(self):
        assert Lambert(Colour(0.1, 0.2, 0.3)) == Lambert(Colour(0.1, 0.2, 0.3))


class TestMetal:
    """Test Metal material."""

    def test_perfect_reflection(self):
        hit = make_hit(Metal(Colour(1, 1, 1), 0.0), Direction(1, -1, 0))
        result = hit.scatter()
        assert result.scattered.direction == Direction(1, 1, 0)

    def test_reflection_is_not_normalized(self):
        hit = make_hit(Metal(Colour(1, 1, 1), 0.0), Direction(3, -4, 0))
        result = hit.scatter()
        assert abs(result.scattered.direction.length() - 5.0) < 1e-9

    def test_fuzz_perturbs_by_at_most_fuzz(self):
        fuzz = 0.3
        hit = make_hit(Metal(Colour(1, 1, 1), fuzz), Direction(1, -1, 0))
        for _ in range(50):
            d = hit.scatter().scattered.direction
            assert abs((d - Direction(1, 1, 0)).length() - fuzz) < 1e-9

    def test_attenuation_matches_albedo(self):
        albedo = Colour(0.9, 0.8, 0.7)
        result = make_hit(Metal(albedo, 0.5), Direction(0, -1, 0)).scatter()
        assert result.attenuation == albedo

    def test_fuzz_is_not_clamped(self):
        assert Metal(Colour(1, 1, 1), 2.5).fuzzy_scatter == 2.5


class TestDielectric:
    """Test Dielectric material."""

    def test_attenuation_is_white(self):
        result = make_hit(Dielectric(1.5), Direction(0, -1, 0)).scatter()
        assert result.attenuation == Colour(1, 1, 1)

    def test_normal_incidence_mostly_refracts(self):
        hit = make_hit(Dielectric(1.5), Direction(0, -1, 0))
        refracted = sum(hit.scatter().scattered.direction.y < 0 for _ in range(400))
        # Schlick reflectance at normal incidence for glass is 4%
        assert refracted > 340

    def test_total_internal_reflection(self):
        # Leaving glass at a grazing angle: the ray travels along the outward normal
        direction = Direction(1, 0.2, 0).unit_vector()
        hit = make_hit(Dielectric(1.5), direction, normal=Direction(0, 1, 0))
        assert hit.front_face is False
        for _ in range(50):
            d = hit.scatter().scattered.direction
            assert d == direction.reflect(hit.normal)

    def test_refraction_ratio_on_entry(self, monkeypatch):
        monkeypatch.setattr("weekendtracer.materials.np.random.random", lambda: 1.0)
        direction = Direction(1, -1, 0).unit_vector()
        hit = make_hit(Dielectric(1.5), direction)
        d = hit.scatter().scattered.direction
        assert abs(d.x - math.sin(math.pi / 4) / 1.5) < 1e-9

    def test_reflectance_limits(self):
        assert abs(Dielectric.reflectance(1.0, 1 / 1.5) - 0.04) < 1e-12
        assert Dielectric.reflectance(0.0, 1 / 1.5) == pytest.approx(1.0)
        assert Dielectric.reflectance(1.0, 1.0) == 0.0
