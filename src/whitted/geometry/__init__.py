"""Geometry module for shape primitives and ray intersection.

This module provides the primitive abstraction and intersection records:

Components:
    shape: Shape (tagged by ShapeKind) with cached transforms and factories
    sphere: Unit sphere at the origin
    plane: Infinite xz plane
    cube: Axis-aligned cube spanning -1..1
    cylinder: Radius-1 cylinder around y, optionally truncated and capped
    cone: Double-napped cone, optionally truncated and capped
    intersection: Intersection, Intersections and ComputedIntersection

Per-kind modules are pure functions over object-space rays and points;
Shape moves rays and normals between world and object space around them.
"""

from .intersection import ComputedIntersection, Intersection, Intersections
from .shape import (
    Shape,
    ShapeKind,
    make_cone,
    make_cube,
    make_cylinder,
    make_glass_sphere,
    make_plane,
    make_sphere,
)

__all__ = [
    "Shape",
    "ShapeKind",
    "make_sphere",
    "make_glass_sphere",
    "make_plane",
    "make_cube",
    "make_cylinder",
    "make_cone",
    "Intersection",
    "Intersections",
    "ComputedIntersection",
]
