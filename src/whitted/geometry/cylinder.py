"""Radius-1 cylinder around the object-space y axis.

The cylinder may be truncated to ``minimum < y < maximum`` (both exclusive)
and, when ``closed``, capped with unit discs at both ends. An untruncated
cylinder has infinite bounds and no caps.

Example:
    >>> import math
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.cylinder import intersect_cylinder
    >>> intersect_cylinder(Ray(point(1, 0, -5), vector(0, 0, 1)), -math.inf, math.inf, False)
    [5.0, 5.0]
"""

from __future__ import annotations

import math

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple, vector


def _within_radius(ray: Ray, t: float, radius: float) -> bool:
    """Check whether the ray at t lies inside a cap disc of the given radius."""
    x = ray.origin.x + t * ray.direction.x
    z = ray.origin.z + t * ray.direction.z
    return x * x + z * z <= radius * radius


def intersect_cylinder(ray: Ray, minimum: float, maximum: float, closed: bool) -> list[float]:
    """Intersect an object-space ray with the (possibly truncated) cylinder.

    Args:
        ray: Ray in object space.
        minimum: Lower y bound (exclusive) of the body.
        maximum: Upper y bound (exclusive) of the body.
        closed: Whether the end caps are solid.

    Returns:
        Body hits followed by cap hits; callers sort them.
    """
    xs: list[float] = []

    a = ray.direction.x ** 2 + ray.direction.z ** 2
    # A ray parallel to the y axis never crosses the body
    if abs(a) >= EPSILON:
        b = 2.0 * ray.origin.x * ray.direction.x + 2.0 * ray.origin.z * ray.direction.z
        c = ray.origin.x ** 2 + ray.origin.z ** 2 - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        if t0 > t1:
            t0, t1 = t1, t0

        for t in (t0, t1):
            y = ray.origin.y + t * ray.direction.y
            if minimum < y < maximum:
                xs.append(t)

    xs.extend(_intersect_caps(ray, minimum, maximum, closed))
    return xs


def _intersect_caps(ray: Ray, minimum: float, maximum: float, closed: bool) -> list[float]:
    if not closed or abs(ray.direction.y) < EPSILON:
        return []

    xs = []
    for cap_y in (minimum, maximum):
        if not math.isfinite(cap_y):
            continue
        t = (cap_y - ray.origin.y) / ray.direction.y
        if _within_radius(ray, t, 1.0):
            xs.append(t)
    return xs


def cylinder_normal(local_point: Tuple, minimum: float, maximum: float) -> Tuple:
    """Normal on the body (radial) or on a cap (+/- y)."""
    dist = local_point.x ** 2 + local_point.z ** 2

    if dist < 1.0 and local_point.y >= maximum - EPSILON:
        return vector(0.0, 1.0, 0.0)
    if dist < 1.0 and local_point.y <= minimum + EPSILON:
        return vector(0.0, -1.0, 0.0)
    return vector(local_point.x, 0.0, local_point.z)
