"""Unit sphere intersection and normal.

The sphere is centered on the object-space origin with radius 1. World
placement and size come from the owning Shape's transform, so the math
here never sees a center or a radius.

The ray-sphere intersection solves:
    |origin + t * direction|^2 = 1

which expands to the quadratic a*t^2 + b*t + c = 0 with:
    a = dot(direction, direction)
    b = 2 * dot(direction, origin - (0, 0, 0))
    c = dot(origin - (0, 0, 0), origin - (0, 0, 0)) - 1

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.sphere import intersect_sphere
    >>> intersect_sphere(Ray(point(0, 0, -5), vector(0, 0, 1)))
    [4.0, 6.0]
"""

from __future__ import annotations

import math

from whitted.core.ray import Ray
from whitted.core.tuples import ORIGIN, Tuple, vector


def intersect_sphere(ray: Ray) -> list[float]:
    """Intersect an object-space ray with the unit sphere.

    Args:
        ray: Ray in the sphere's object space (direction not normalized).

    Returns:
        The two roots in ascending order, both reported even when the ray
        is tangent (a double root), or an empty list on a miss. Roots
        behind the origin are kept; hit selection happens later.
    """
    # Vector from sphere center to ray origin
    sphere_to_ray = ray.origin - ORIGIN

    a = ray.direction.dot(ray.direction)
    b = 2.0 * ray.direction.dot(sphere_to_ray)
    c = sphere_to_ray.dot(sphere_to_ray) - 1.0

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return []

    sqrt_d = math.sqrt(discriminant)
    t0 = (-b - sqrt_d) / (2.0 * a)
    t1 = (-b + sqrt_d) / (2.0 * a)
    return [t0, t1]


def sphere_normal(local_point: Tuple) -> Tuple:
    """Outward normal at a point on the unit sphere: the point minus the center."""
    return vector(local_point.x, local_point.y, local_point.z)
