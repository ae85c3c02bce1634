"""Unit tests for materials, patterns and Phong lighting.

Tests cover:
- Material defaults, validation and replacement
- Stripe, gradient, ring and checkers patterns
- Pattern and shape transform chaining
- Phong lighting reference values
"""

import math

import pytest


class TestMaterial:
    """Tests for the Material value."""

    def test_defaults(self):
        """Test the default material coefficients."""
        from whitted.core.color import WHITE
        from whitted.materials.material import Material

        m = Material()
        assert m.color == WHITE
        assert m.ambient == 0.1
        assert m.diffuse == 0.9
        assert m.specular == 0.9
        assert m.shininess == 200.0
        assert m.reflective == 0.0
        assert m.transparency == 0.0
        assert m.refractive_index == 1.0
        assert m.pattern is None

    def test_replace_returns_new_value(self):
        """Test replace() builds a modified copy and leaves the original alone."""
        from whitted.materials.material import Material

        base = Material()
        shiny = base.replace(reflective=0.5)
        assert shiny.reflective == 0.5
        assert base.reflective == 0.0
        assert shiny.diffuse == base.diffuse

    def test_is_immutable(self):
        """Test fields cannot be assigned."""
        import dataclasses

        from whitted.materials.material import Material

        with pytest.raises(dataclasses.FrozenInstanceError):
            Material().ambient = 0.5

    def test_is_unhashable(self):
        """Test materials are unhashable, like the colors they hold."""
        from whitted.materials.material import Material

        with pytest.raises(TypeError):
            hash(Material())

    @pytest.mark.parametrize(
        "changes",
        [
            {"ambient": -0.1},
            {"diffuse": -1.0},
            {"specular": -0.5},
            {"shininess": 0.0},
            {"reflective": 1.5},
            {"transparency": -0.1},
            {"refractive_index": 0.5},
        ],
    )
    def test_validation(self, changes):
        """Test invalid coefficients raise ValueError."""
        from whitted.materials.material import Material

        with pytest.raises(ValueError):
            Material(**changes)


class TestPatterns:
    """Tests for the procedural pattern functions."""

    def test_stripe_alternates_in_x_only(self):
        """Test stripes depend only on x."""
        from whitted.core.color import BLACK, WHITE
        from whitted.core.tuples import point
        from whitted.materials.patterns import stripe_pattern

        p = stripe_pattern(WHITE, BLACK)
        assert p.pattern_at(point(0, 1, 2)) == WHITE
        assert p.pattern_at(point(0, 0, 0)) == WHITE
        assert p.pattern_at(point(0.9, 0, 0)) == WHITE
        assert p.pattern_at(point(1, 0, 0)) == BLACK
        assert p.pattern_at(point(-0.1, 0, 0)) == BLACK
        assert p.pattern_at(point(-1, 0, 0)) == BLACK
        assert p.pattern_at(point(-1.1, 0, 0)) == WHITE

    def test_gradient_interpolates(self):
        """Test the gradient blends linearly between the colors."""
        from whitted.core.color import BLACK, WHITE, color
        from whitted.core.tuples import point
        from whitted.materials.patterns import gradient_pattern

        p = gradient_pattern(WHITE, BLACK)
        assert p.pattern_at(point(0, 0, 0)) == WHITE
        assert p.pattern_at(point(0.25, 0, 0)) == color(0.75, 0.75, 0.75)
        assert p.pattern_at(point(0.5, 0, 0)) == color(0.5, 0.5, 0.5)
        assert p.pattern_at(point(0.75, 0, 0)) == color(0.25, 0.25, 0.25)

    def test_gradient_repeats_for_negative_x(self):
        """Test the gradient uses the floor fraction for negative x."""
        from whitted.core.color import BLACK, WHITE, color
        from whitted.core.tuples import point
        from whitted.materials.patterns import gradient_pattern

        p = gradient_pattern(WHITE, BLACK)
        assert p.pattern_at(point(-0.25, 0, 0)) == color(0.25, 0.25, 0.25)

    def test_ring_extends_in_x_and_z(self):
        """Test rings depend on distance from the y axis."""
        from whitted.core.color import BLACK, WHITE
        from whitted.core.tuples import point
        from whitted.materials.patterns import ring_pattern

        p = ring_pattern(WHITE, BLACK)
        assert p.pattern_at(point(0, 0, 0)) == WHITE
        assert p.pattern_at(point(1, 0, 0)) == BLACK
        assert p.pattern_at(point(0, 0, 1)) == BLACK
        assert p.pattern_at(point(0.708, 0, 0.708)) == BLACK

    @pytest.mark.parametrize(
        "p,expected_white",
        [
            ((0, 0, 0), True),
            ((0.99, 0, 0), True),
            ((1.01, 0, 0), False),
            ((0, 0.99, 0), True),
            ((0, 1.01, 0), False),
            ((0, 0, 0.99), True),
            ((0, 0, 1.01), False),
        ],
    )
    def test_checkers_repeat_in_each_dimension(self, p, expected_white):
        """Test checkers alternate along x, y and z."""
        from whitted.core.color import BLACK, WHITE
        from whitted.core.tuples import point
        from whitted.materials.patterns import checkers_pattern

        result = checkers_pattern(WHITE, BLACK).pattern_at(point(*p))
        assert result == (WHITE if expected_white else BLACK)

    def test_pattern_with_object_transform(self):
        """Test the shape transform is undone before evaluating the pattern."""
        from whitted.core.color import BLACK, WHITE
        from whitted.core.matrix import scaling
        from whitted.core.tuples import point
        from whitted.geometry.shape import make_sphere
        from whitted.materials.patterns import stripe_pattern

        shape = make_sphere().set_transform(scaling(2, 2, 2))
        assert stripe_pattern(WHITE, BLACK).pattern_at_shape(shape, point(1.5, 0, 0)) == WHITE

    def test_pattern_with_pattern_transform(self):
        """Test the pattern's own transform is undone as well."""
        from whitted.core.color import BLACK, WHITE
        from whitted.core.matrix import scaling
        from whitted.core.tuples import point
        from whitted.geometry.shape import make_sphere
        from whitted.materials.patterns import stripe_pattern

        pattern = stripe_pattern(WHITE, BLACK).set_transform(scaling(2, 2, 2))
        assert pattern.pattern_at_shape(make_sphere(), point(1.5, 0, 0)) == WHITE

    def test_pattern_with_both_transforms(self):
        """Test shape and pattern transforms compose."""
        from whitted.core.color import BLACK, WHITE
        from whitted.core.matrix import scaling, translation
        from whitted.core.tuples import point
        from whitted.geometry.shape import make_sphere
        from whitted.materials.patterns import stripe_pattern

        shape = make_sphere().set_transform(scaling(2, 2, 2))
        pattern = stripe_pattern(WHITE, BLACK).set_transform(translation(0.5, 0, 0))
        assert pattern.pattern_at_shape(shape, point(2.5, 0, 0)) == WHITE

    def test_singular_pattern_transform_fails_fast(self):
        """Test a non-invertible pattern transform raises."""
        from whitted.core.color import BLACK, WHITE
        from whitted.core.matrix import SingularMatrixError, scaling
        from whitted.materials.patterns import stripe_pattern

        with pytest.raises(SingularMatrixError):
            stripe_pattern(WHITE, BLACK).set_transform(scaling(0, 0, 0))


class TestLighting:
    """Tests for the Phong lighting function."""

    @pytest.fixture
    def setup(self):
        from whitted.core.tuples import point
        from whitted.geometry.shape import make_sphere
        from whitted.materials.material import Material

        return Material(), make_sphere(), point(0, 0, 0)

    @pytest.mark.parametrize(
        "eye,light_pos,expected",
        [
            ((0, 0, -1), (0, 0, -10), 1.9),
            ((0, math.sqrt(2) / 2, -math.sqrt(2) / 2), (0, 0, -10), 1.0),
            ((0, 0, -1), (0, 10, -10), 0.7364),
            ((0, -math.sqrt(2) / 2, -math.sqrt(2) / 2), (0, 10, -10), 1.6364),
            ((0, 0, -1), (0, 0, 10), 0.1),
        ],
    )
    def test_reference_values(self, setup, eye, light_pos, expected):
        """Test eye/light arrangements: head-on, offset eye, offset light,
        eye in the reflection path, and light behind the surface."""
        from whitted.core.color import WHITE, color
        from whitted.core.tuples import point, vector
        from whitted.materials.phong import lighting
        from whitted.scene.light import PointLight

        material, shape, position = setup
        light = PointLight(point(*light_pos), WHITE)
        result = lighting(material, shape, light, position, vector(*eye), vector(0, 0, -1))
        assert result == color(expected, expected, expected)

    def test_surface_in_shadow(self, setup):
        """Test a shadowed point receives ambient light only."""
        from whitted.core.color import WHITE, color
        from whitted.core.tuples import point, vector
        from whitted.materials.phong import lighting
        from whitted.scene.light import PointLight

        material, shape, position = setup
        light = PointLight(point(0, 0, -10), WHITE)
        result = lighting(
            material, shape, light, position, vector(0, 0, -1), vector(0, 0, -1), in_shadow=True
        )
        assert result == color(0.1, 0.1, 0.1)

    def test_pattern_replaces_color(self):
        """Test lighting samples the pattern instead of the base color."""
        from whitted.core.color import BLACK, WHITE
        from whitted.core.tuples import point, vector
        from whitted.geometry.shape import make_sphere
        from whitted.materials.material import Material
        from whitted.materials.patterns import stripe_pattern
        from whitted.materials.phong import lighting
        from whitted.scene.light import PointLight

        material = Material(
            pattern=stripe_pattern(WHITE, BLACK), ambient=1.0, diffuse=0.0, specular=0.0
        )
        light = PointLight(point(0, 0, -10), WHITE)
        eye = vector(0, 0, -1)
        normal = vector(0, 0, -1)
        shape = make_sphere()
        assert lighting(material, shape, light, point(0.9, 0, 0), eye, normal) == WHITE
        assert lighting(material, shape, light, point(1.1, 0, 0), eye, normal) == BLACK
