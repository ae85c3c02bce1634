"""Unit tests for tuples and colors.

Tests cover:
- Point/vector construction and predicates
- Tolerant equality
- Arithmetic, magnitude, normalization, dot/cross products and reflection
- Color arithmetic
"""

import math

import pytest


class TestTupleBasics:
    """Tests for Tuple construction and equality."""

    def test_point_has_w_one(self):
        """Test point() creates a tuple with w == 1."""
        from whitted.core.tuples import Tuple, point

        p = point(4.3, -4.2, 3.1)
        assert p == Tuple(4.3, -4.2, 3.1, 1.0)
        assert p.is_point
        assert not p.is_vector

    def test_vector_has_w_zero(self):
        """Test vector() creates a tuple with w == 0."""
        from whitted.core.tuples import Tuple, vector

        v = vector(4.3, -4.2, 3.1)
        assert v == Tuple(4.3, -4.2, 3.1, 0.0)
        assert v.is_vector
        assert not v.is_point

    def test_equality_is_tolerant(self):
        """Test components differing by less than EPSILON compare equal."""
        from whitted.core.tuples import point

        assert point(1.0, 2.0, 3.0) == point(1.00005, 2.0, 2.99995)
        assert point(1.0, 2.0, 3.0) != point(1.001, 2.0, 3.0)

    def test_tuples_are_unhashable(self):
        """Test tuples cannot be hashed since equality is approximate."""
        from whitted.core.tuples import point

        with pytest.raises(TypeError):
            hash(point(1, 2, 3))


class TestTupleArithmetic:
    """Tests for Tuple operators."""

    def test_point_plus_vector_is_point(self):
        """Test adding a vector to a point gives a point."""
        from whitted.core.tuples import Tuple

        result = Tuple(3, -2, 5, 1) + Tuple(-2, 3, 1, 0)
        assert result == Tuple(1, 1, 6, 1)

    def test_point_minus_point_is_vector(self):
        """Test subtracting two points gives the vector between them."""
        from whitted.core.tuples import point, vector

        assert point(3, 2, 1) - point(5, 6, 7) == vector(-2, -4, -6)

    def test_point_minus_vector_is_point(self):
        """Test subtracting a vector from a point gives a point."""
        from whitted.core.tuples import point, vector

        assert point(3, 2, 1) - vector(5, 6, 7) == point(-2, -4, -6)

    def test_negation(self):
        """Test unary minus negates every component."""
        from whitted.core.tuples import Tuple

        assert -Tuple(1, -2, 3, -4) == Tuple(-1, 2, -3, 4)

    def test_scalar_multiplication_and_division(self):
        """Test multiplying and dividing by scalars, on either side."""
        from whitted.core.tuples import Tuple

        a = Tuple(1, -2, 3, -4)
        assert a * 3.5 == Tuple(3.5, -7, 10.5, -14)
        assert 0.5 * a == Tuple(0.5, -1, 1.5, -2)
        assert a / 2 == Tuple(0.5, -1, 1.5, -2)


class TestVectorOperations:
    """Tests for magnitude, normalization, products and reflection."""

    @pytest.mark.parametrize(
        "components,expected",
        [
            ((1, 0, 0), 1.0),
            ((0, 1, 0), 1.0),
            ((1, 2, 3), math.sqrt(14)),
            ((-1, -2, -3), math.sqrt(14)),
        ],
    )
    def test_magnitude(self, components, expected):
        """Test vector magnitude."""
        from whitted.core.tuples import vector

        assert vector(*components).magnitude() == pytest.approx(expected)

    def test_normalize(self):
        """Test normalizing gives a unit vector in the same direction."""
        from whitted.core.tuples import vector

        v = vector(1, 2, 3).normalize()
        root = math.sqrt(14)
        assert v == vector(1 / root, 2 / root, 3 / root)
        assert v.magnitude() == pytest.approx(1.0)

    def test_normalize_zero_vector_is_unchanged(self):
        """Test a zero vector normalizes to itself instead of dividing by zero."""
        from whitted.core.tuples import vector

        assert vector(0, 0, 0).normalize() == vector(0, 0, 0)

    def test_dot_product(self):
        """Test dot product of two vectors."""
        from whitted.core.tuples import vector

        assert vector(1, 2, 3).dot(vector(2, 3, 4)) == pytest.approx(20.0)

    def test_cross_product(self):
        """Test cross product is anti-commutative."""
        from whitted.core.tuples import vector

        a = vector(1, 2, 3)
        b = vector(2, 3, 4)
        assert a.cross(b) == vector(-1, 2, -1)
        assert b.cross(a) == vector(1, -2, 1)

    def test_reflect_at_45_degrees(self):
        """Test reflecting a vector approaching at 45 degrees."""
        from whitted.core.tuples import vector

        assert vector(1, -1, 0).reflect(vector(0, 1, 0)) == vector(1, 1, 0)

    def test_reflect_off_slanted_surface(self):
        """Test reflecting a vector off a slanted surface."""
        from whitted.core.tuples import vector

        half = math.sqrt(2) / 2
        assert vector(0, -1, 0).reflect(vector(half, half, 0)) == vector(1, 0, 0)


class TestColor:
    """Tests for Color arithmetic."""

    def test_color_components(self):
        """Test colors expose red, green and blue."""
        from whitted.core.color import color

        c = color(-0.5, 0.4, 1.7)
        assert (c.red, c.green, c.blue) == (-0.5, 0.4, 1.7)

    def test_add_and_subtract(self):
        """Test adding and subtracting colors."""
        from whitted.core.color import color

        c1 = color(0.9, 0.6, 0.75)
        c2 = color(0.7, 0.1, 0.25)
        assert c1 + c2 == color(1.6, 0.7, 1.0)
        assert c1 - c2 == color(0.2, 0.5, 0.5)

    def test_multiply_by_scalar(self):
        """Test scaling a color by a scalar."""
        from whitted.core.color import color

        assert color(0.2, 0.3, 0.4) * 2 == color(0.4, 0.6, 0.8)

    def test_hadamard_product(self):
        """Test multiplying two colors componentwise."""
        from whitted.core.color import color

        assert color(1, 0.2, 0.4) * color(0.9, 1, 0.1) == color(0.9, 0.2, 0.04)

    def test_constants(self):
        """Test the BLACK and WHITE constants."""
        from whitted.core.color import BLACK, WHITE, color

        assert BLACK == color(0, 0, 0)
        assert WHITE == color(1, 1, 1)
