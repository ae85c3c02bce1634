"""Axis-aligned cube spanning -1..1 on every axis.

Intersection uses the slab method: each axis contributes the interval of t
over which the ray lies between that axis' two faces, and the ray hits the
cube where all three intervals overlap.
"""

from __future__ import annotations

import math

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple, vector


def _check_axis(origin: float, direction: float) -> tuple[float, float]:
    """Return the (tmin, tmax) interval between the -1 and +1 faces of one axis.

    A direction component of (nearly) zero means the ray is parallel to the
    slab; the numerators are then divided out as signed infinities so that
    a ray outside the slab produces an empty interval.
    """
    tmin_numerator = -1.0 - origin
    tmax_numerator = 1.0 - origin

    if abs(direction) >= EPSILON:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = math.copysign(math.inf, tmin_numerator)
        tmax = math.copysign(math.inf, tmax_numerator)

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


def intersect_cube(ray: Ray) -> list[float]:
    """Intersect an object-space ray with the unit cube.

    Returns:
        [tmin, tmax] when the three slab intervals overlap, else [].
    """
    xtmin, xtmax = _check_axis(ray.origin.x, ray.direction.x)
    ytmin, ytmax = _check_axis(ray.origin.y, ray.direction.y)
    ztmin, ztmax = _check_axis(ray.origin.z, ray.direction.z)

    tmin = max(xtmin, ytmin, ztmin)
    tmax = min(xtmax, ytmax, ztmax)

    if tmin > tmax:
        return []
    return [tmin, tmax]


def cube_normal(local_point: Tuple) -> Tuple:
    """Normal of the face the point lies on: the axis of largest magnitude.

    Ties (edges and corners) resolve toward x, then y.
    """
    abs_x, abs_y, abs_z = abs(local_point.x), abs(local_point.y), abs(local_point.z)
    max_c = max(abs_x, abs_y, abs_z)

    if max_c == abs_x:
        return vector(local_point.x, 0.0, 0.0)
    if max_c == abs_y:
        return vector(0.0, local_point.y, 0.0)
    return vector(0.0, 0.0, local_point.z)
