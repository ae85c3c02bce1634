"""Procedural color patterns.

A Pattern alternates (or blends) between two colors as a function of a
point in pattern space. Pattern space is reached from world space in two
steps: the owning shape's inverse transform takes the point to object
space, then the pattern's own inverse transform takes it to pattern space.
That lets a pattern be scaled or rotated independently of the shape it
decorates.

The four kinds:
    stripe:   a if floor(x) is even, else b
    gradient: linear blend from a to b over each unit of x
    ring:     a if floor(sqrt(x^2 + z^2)) is even, else b
    checkers: a if floor(x) + floor(y) + floor(z) is even, else b

Example:
    >>> from whitted.core.color import BLACK, WHITE
    >>> from whitted.core.tuples import point
    >>> from whitted.materials.patterns import stripe_pattern
    >>> p = stripe_pattern(WHITE, BLACK)
    >>> p.pattern_at(point(1.5, 0, 0)) == BLACK
    True
"""

from __future__ import annotations

import math
from enum import IntEnum
from typing import TYPE_CHECKING

from whitted.core.color import Color
from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.tuples import Tuple

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape


class PatternKind(IntEnum):
    """The closed set of procedural pattern kinds."""

    STRIPE = 0
    GRADIENT = 1
    RING = 2
    CHECKERS = 3


class Pattern:
    """A two-color procedural pattern with its own transform.

    Attributes:
        kind: Which procedural function to evaluate.
        a: First color.
        b: Second color.
    """

    def __init__(self, kind: PatternKind, a: Color, b: Color) -> None:
        self.kind = kind
        self.a = a
        self.b = b
        self._transform = IDENTITY
        self._inverse = IDENTITY

    def __repr__(self) -> str:
        return f"Pattern({self.kind.name}, a={self.a!r}, b={self.b!r})"

    @property
    def transform(self) -> Matrix:
        return self._transform

    def set_transform(self, transform: Matrix) -> Pattern:
        """Replace the transform and cache its inverse.

        Raises:
            SingularMatrixError: If the transform cannot be inverted.
        """
        inverse = transform.inverse()
        self._transform = transform
        self._inverse = inverse
        return self

    def pattern_at(self, pattern_point: Tuple) -> Color:
        """Evaluate the pattern at a point already in pattern space."""
        x, y, z = pattern_point.x, pattern_point.y, pattern_point.z
        kind = self.kind

        if kind == PatternKind.STRIPE:
            return self.a if math.floor(x) % 2 == 0 else self.b
        if kind == PatternKind.GRADIENT:
            fraction = x - math.floor(x)
            return self.a + (self.b - self.a) * fraction
        if kind == PatternKind.RING:
            return self.a if math.floor(math.sqrt(x * x + z * z)) % 2 == 0 else self.b
        if kind == PatternKind.CHECKERS:
            total = math.floor(x) + math.floor(y) + math.floor(z)
            return self.a if total % 2 == 0 else self.b
        raise ValueError(f"Unknown pattern kind: {kind!r}")

    def pattern_at_shape(self, shape: Shape, world_point: Tuple) -> Color:
        """Evaluate the pattern at a world-space point on a shape."""
        object_point = shape.inverse @ world_point
        pattern_point = self._inverse @ object_point
        return self.pattern_at(pattern_point)


def stripe_pattern(a: Color, b: Color) -> Pattern:
    """Alternate a and b in unit-wide stripes along x."""
    return Pattern(PatternKind.STRIPE, a, b)


def gradient_pattern(a: Color, b: Color) -> Pattern:
    """Blend from a to b across each unit of x."""
    return Pattern(PatternKind.GRADIENT, a, b)


def ring_pattern(a: Color, b: Color) -> Pattern:
    """Alternate a and b in concentric unit-wide rings in the xz plane."""
    return Pattern(PatternKind.RING, a, b)


def checkers_pattern(a: Color, b: Color) -> Pattern:
    """Alternate a and b in a 3D checkerboard of unit cubes."""
    return Pattern(PatternKind.CHECKERS, a, b)
