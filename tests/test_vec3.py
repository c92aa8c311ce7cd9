"""Tests for the vector types."""

import math

import numpy as np
import pytest

from weekendtracer.vec3 import Vec3, Point, Direction, Colour


class TestVec3Creation:
    """Test vector construction."""

    def test_default_constructor(self):
        v = Direction()
        assert v.x == 0.0
        assert v.y == 0.0
        assert v.z == 0.0

    def test_from_array_keeps_role(self):
        p = Point.from_array(np.array([1.0, 2.0, 3.0]))
        assert isinstance(p, Point)
        assert p.x == 1.0
        assert p.z == 3.0

    def test_colour_aliases(self):
        c = Colour(0.5, 0.6, 0.7)
        assert c.r == 0.5
        assert c.g == 0.6
        assert c.b == 0.7

    def test_equality_requires_same_role(self):
        assert Direction(1, 2, 3) == Direction(1, 2, 3)
        assert Direction(1, 2, 3) != Point(1, 2, 3)


class TestIndexing:
    """Component indexing is limited to 0..2."""

    def test_valid_indexes(self):
        v = Direction(4, 5, 6)
        assert (v[0], v[1], v[2]) == (4.0, 5.0, 6.0)

    @pytest.mark.parametrize("index", [3, -1, 10])
    def test_out_of_range_index_raises(self, index):
        with pytest.raises(IndexError):
            Colour(1, 2, 3)[index]

    def test_immutable(self):
        v = Direction(1, 2, 3)
        with pytest.raises(AttributeError):
            v.x = 5


class TestArithmetic:
    """Test arithmetic inside and across roles."""

    def test_negation(self):
        assert -Direction(1, 2, 3) == Direction(-1, -2, -3)

    def test_addition(self):
        assert Direction(1, 2, 3) + Direction(4, 5, 6) == Direction(5, 7, 9)

    def test_addition_scalar(self):
        assert Colour(0.1, 0.2, 0.3) + 0.5 == Colour(0.6, 0.7, 0.8)

    def test_subtraction(self):
        assert Direction(4, 5, 6) - Direction(1, 2, 3) == Direction(3, 3, 3)

    def test_scalar_multiplication_both_sides(self):
        assert Direction(1, 2, 3) * 2 == Direction(2, 4, 6)
        assert 2 * Direction(1, 2, 3) == Direction(2, 4, 6)

    def test_colour_multiplication(self):
        assert Colour(0.5, 0.5, 1.0) * Colour(0.2, 1.0, 0.5) == Colour(0.1, 0.5, 0.5)

    def test_division(self):
        assert Direction(2, 4, 6) / 2 == Direction(1, 2, 3)

    def test_scalar_divided_by_vector(self):
        assert 1.0 / Direction(1, 2, 4) == Direction(1, 0.5, 0.25)

    def test_divide_by_zero_is_not_an_error(self):
        v = Direction(1, 0, -1) / 0
        assert math.isinf(v.x)
        assert math.isnan(v.y)
        assert math.isinf(v.z)

    def test_point_plus_direction_is_point(self):
        p = Point(1, 1, 1) + Direction(1, 2, 3)
        assert isinstance(p, Point)
        assert p == Point(2, 3, 4)

    def test_point_minus_direction_is_point(self):
        assert Point(1, 1, 1) - Direction(1, 1, 1) == Point(0, 0, 0)

    def test_point_towards(self):
        d = Point(1, 1, 1).point_towards(Point(2, 3, 4))
        assert isinstance(d, Direction)
        assert d == Direction(1, 2, 3)

    def test_point_plus_point_rejected(self):
        with pytest.raises(TypeError):
            Point(1, 1, 1) + Point(1, 1, 1)

    def test_point_minus_point_rejected(self):
        with pytest.raises(TypeError):
            Point(1, 1, 1) - Point(1, 1, 1)

    def test_mixing_colour_and_direction_rejected(self):
        with pytest.raises(TypeError):
            Colour(1, 1, 1) + Direction(1, 1, 1)
        with pytest.raises(TypeError):
            Colour(1, 1, 1) * Direction(1, 1, 1)


class TestDirectionOps:
    """Test geometric operations on directions."""

    def test_length(self):
        assert Direction(3, 4, 0).length() == 5.0

    def test_length_squared(self):
        assert Direction(3, 4, 0).length_squared() == 25.0

    def test_dot(self):
        assert Direction(1, 2, 3).dot(Direction(4, -5, 6)) == 12.0

    def test_cross(self):
        assert Direction(1, 0, 0).cross(Direction(0, 1, 0)) == Direction(0, 0, 1)
        assert Direction(0, 1, 0).cross(Direction(1, 0, 0)) == Direction(0, 0, -1)

    @pytest.mark.parametrize("components", [(3, 4, 0), (1e-3, 2e-3, -5e-4), (1e6, -3e5, 42)])
    def test_unit_vector_has_unit_length(self, components):
        assert abs(Direction(*components).unit_vector().length() - 1.0) < 1e-9

    def test_unit_vector_of_zero_is_nan(self):
        v = Direction(0, 0, 0).unit_vector()
        assert all(math.isnan(c) for c in v)

    def test_is_zero(self):
        assert Direction(0, 0, 0).is_zero()
        assert Direction(1e-17, -1e-17, 0).is_zero()
        assert not Direction(1e-8, 0, 0).is_zero()

    def test_reflect(self):
        v = Direction(1, -1, 0)
        n = Direction(0, 1, 0)
        assert v.reflect(n) == Direction(1, 1, 0)

    def test_reflect_flips_normal_component(self):
        n = Direction(1, 2, -2).unit_vector()
        for _ in range(20):
            v = Direction.new_random()
            if v.dot(n) >= 0:
                v = -v
            r = v.reflect(n)
            assert abs(r.dot(n) + v.dot(n)) < 1e-12

    def test_refract_straight_through(self):
        v = Direction(0, -1, 0)
        n = Direction(0, 1, 0)
        assert v.refract(n, 1.0 / 1.5) == Direction(0, -1, 0)

    def test_refract_bends_towards_normal(self):
        v = Direction(1, -1, 0).unit_vector()
        n = Direction(0, 1, 0)
        refracted = v.refract(n, 1.0 / 1.5)
        assert abs(refracted.length() - 1.0) < 1e-9
        # Snell: sin(theta_t) = sin(theta_i) / 1.5
        assert abs(refracted.x - math.sin(math.pi / 4) / 1.5) < 1e-9
        assert refracted.y < 0


class TestRandomSampling:
    """Test random vector generation."""

    def test_new_random_range(self):
        for _ in range(100):
            v = Direction.new_random()
            assert all(-1.0 <= c < 1.0 for c in v)

    def test_in_unit_sphere(self):
        for _ in range(100):
            assert Direction.new_random_in_unit_sphere().length_squared() < 1.0

    def test_hemisphere_matches_normal(self):
        normal = Direction(0, 0, 1)
        for _ in range(100):
            d = normal.random_direction_in_hemisphere()
            assert d.dot(normal) >= 0
            assert abs(d.length() - 1.0) < 1e-9

    def test_random_colour_range(self):
        for _ in range(50):
            c = Colour.new_random()
            assert all(0.0 <= ch < 1.0 for ch in c)


class TestColour:
    """Test colour specific operations."""

    def test_linear_to_gamma(self):
        assert Colour(0.25, 1.0, 0.0).linear_to_gamma() == Colour(0.5, 1.0, 0.0)

    def test_to_array_is_copy(self):
        c = Colour(0.1, 0.2, 0.3)
        arr = c.to_array()
        arr[0] = 99
        assert c.r == 0.1
