"""Infinite xz plane through the object-space origin."""

from __future__ import annotations

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple, vector

# The plane's normal is constant everywhere on its surface
PLANE_NORMAL = vector(0.0, 1.0, 0.0)


def intersect_plane(ray: Ray) -> list[float]:
    """Intersect an object-space ray with the y == 0 plane.

    Rays parallel to the plane (including coplanar ones) miss.
    """
    if abs(ray.direction.y) < EPSILON:
        return []
    return [-ray.origin.y / ray.direction.y]


def plane_normal(local_point: Tuple) -> Tuple:
    return PLANE_NORMAL
