"""Double-napped cone with its apex at the object-space origin.

The surface is x^2 + z^2 == y^2, so the radius at height y is |y|. Like the
cylinder it may be truncated to ``minimum < y < maximum`` and capped, with
each cap's radius equal to the cone's radius at that height.
"""

from __future__ import annotations

import math

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple, vector
from whitted.geometry.cylinder import _within_radius


def intersect_cone(ray: Ray, minimum: float, maximum: float, closed: bool) -> list[float]:
    """Intersect an object-space ray with the (possibly truncated) cone.

    Args:
        ray: Ray in object space.
        minimum: Lower y bound (exclusive) of the body.
        maximum: Upper y bound (exclusive) of the body.
        closed: Whether the end caps are solid.

    Returns:
        Body hits followed by cap hits; callers sort them.
    """
    o, d = ray.origin, ray.direction

    a = d.x ** 2 - d.y ** 2 + d.z ** 2
    b = 2.0 * (o.x * d.x - o.y * d.y + o.z * d.z)
    c = o.x ** 2 - o.y ** 2 + o.z ** 2

    roots: list[float] = []
    if abs(a) < EPSILON:
        # Ray parallel to one of the cone's halves: at most one crossing
        if abs(b) >= EPSILON:
            roots.append(-c / (2.0 * b))
    else:
        discriminant = b * b - 4.0 * a * c
        if discriminant >= 0.0:
            sqrt_d = math.sqrt(discriminant)
            t0 = (-b - sqrt_d) / (2.0 * a)
            t1 = (-b + sqrt_d) / (2.0 * a)
            roots.extend(sorted((t0, t1)))

    xs = [t for t in roots if minimum < o.y + t * d.y < maximum]
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
        if _within_radius(ray, t, abs(cap_y)):
            xs.append(t)
    return xs


def cone_normal(local_point: Tuple, minimum: float, maximum: float) -> Tuple:
    """Normal on the body or on a cap (+/- y)."""
    dist = local_point.x ** 2 + local_point.z ** 2

    if dist < local_point.y ** 2 and local_point.y >= maximum - EPSILON:
        return vector(0.0, 1.0, 0.0)
    if dist < local_point.y ** 2 and local_point.y <= minimum + EPSILON:
        return vector(0.0, -1.0, 0.0)

    y = math.sqrt(dist)
    if local_point.y > 0.0:
        y = -y
    return vector(local_point.x, y, local_point.z)
