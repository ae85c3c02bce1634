"""Ray data structure.

A ray is an origin point plus a direction vector. Directions are not
normalized here: transforming a ray into object space deliberately keeps
the scaled direction so that t values stay comparable across shapes.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> ray = Ray(origin=point(2, 3, 4), direction=vector(1, 0, 0))
    >>> ray.position(2.5) == point(4.5, 3, 4)
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from whitted.core.tuples import Tuple

if TYPE_CHECKING:
    from whitted.core.matrix import Matrix


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray.
    """

    origin: Tuple
    direction: Tuple

    def position(self, t: float) -> Tuple:
        """Compute the point along the ray at parameter t."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Apply a 4x4 transform to both origin and direction."""
        return Ray(origin=matrix @ self.origin, direction=matrix @ self.direction)
