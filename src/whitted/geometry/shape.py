"""The primitive abstraction shared by every kind of shape.

A Shape is a tagged variant: ``kind`` selects which per-kind math module
(sphere, plane, cube, cylinder, cone) answers intersection and normal
queries in object space. Everything else is common to all kinds:

- a transform (object space to world space) with its inverse and
  inverse-transpose cached when the transform is set,
- a Material,
- a UUID identity used wherever "the same shape" matters (refraction
  container tracking). Shapes never compare equal structurally.

Shapes are built with the ``make_*`` factories and configured in place
through the fluent setters:

Example:
    >>> from whitted.core.matrix import Matrix
    >>> from whitted.geometry.shape import make_sphere
    >>> s = make_sphere().set_transform(Matrix.identity().scale(2, 2, 2).translate(0, 1, 0))
    >>> s.material.refractive_index
    1.0
"""

from __future__ import annotations

import math
import uuid
from enum import IntEnum

from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple
from whitted.geometry.cone import cone_normal, intersect_cone
from whitted.geometry.cube import cube_normal, intersect_cube
from whitted.geometry.cylinder import cylinder_normal, intersect_cylinder
from whitted.geometry.intersection import Intersection, Intersections
from whitted.geometry.plane import intersect_plane, plane_normal
from whitted.geometry.sphere import intersect_sphere, sphere_normal
from whitted.materials.material import Material


class ShapeKind(IntEnum):
    """The closed set of primitive kinds."""

    SPHERE = 0
    PLANE = 1
    CUBE = 2
    CYLINDER = 3
    CONE = 4


class Shape:
    """A primitive with a transform, a material and a unique identity.

    Attributes:
        kind: Which primitive this is.
        id: Unique identifier, compared by value in ``same_as``.
        material: Surface material.
        minimum: Lower y bound (cylinder and cone only).
        maximum: Upper y bound (cylinder and cone only).
        closed: Whether the ends are capped (cylinder and cone only).
    """

    def __init__(
        self,
        kind: ShapeKind,
        material: Material | None = None,
        minimum: float = -math.inf,
        maximum: float = math.inf,
        closed: bool = False,
    ) -> None:
        self.kind = kind
        self.id = uuid.uuid4()
        self.material = material if material is not None else Material()
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed

        self._transform = IDENTITY
        self._inverse = IDENTITY
        self._inverse_transpose = IDENTITY

    def __repr__(self) -> str:
        return f"Shape({self.kind.name}, id={str(self.id)[:8]})"

    @property
    def transform(self) -> Matrix:
        return self._transform

    @property
    def inverse(self) -> Matrix:
        """Cached inverse of the transform (world space to object space)."""
        return self._inverse

    def set_transform(self, transform: Matrix) -> Shape:
        """Replace the transform and refresh the cached inverses.

        Raises:
            SingularMatrixError: If the transform cannot be inverted. The
                shape is left unchanged.
        """
        inverse = transform.inverse()
        self._transform = transform
        self._inverse = inverse
        self._inverse_transpose = inverse.transpose()
        return self

    def set_material(self, material: Material) -> Shape:
        self.material = material
        return self

    def same_as(self, other: Shape) -> bool:
        return self.id == other.id

    def intersection(self, t: float) -> Intersection:
        """Build an Intersection of this shape at parameter t."""
        return Intersection(t, self)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a world-space ray with this shape.

        The ray is moved into object space with the cached inverse; its
        direction is not renormalized, so the returned t values are valid
        on the original world ray.
        """
        local_ray = ray.transform(self._inverse)
        return Intersections(Intersection(t, self) for t in self.local_intersect(local_ray))

    def local_intersect(self, local_ray: Ray) -> list[float]:
        """Dispatch an object-space ray to the per-kind intersection routine."""
        kind = self.kind
        if kind == ShapeKind.SPHERE:
            return intersect_sphere(local_ray)
        if kind == ShapeKind.PLANE:
            return intersect_plane(local_ray)
        if kind == ShapeKind.CUBE:
            return intersect_cube(local_ray)
        if kind == ShapeKind.CYLINDER:
            return intersect_cylinder(local_ray, self.minimum, self.maximum, self.closed)
        if kind == ShapeKind.CONE:
            return intersect_cone(local_ray, self.minimum, self.maximum, self.closed)
        raise ValueError(f"Unknown shape kind: {kind!r}")

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Compute the unit surface normal at a world-space point.

        The object-space normal is carried back to world space by the
        inverse-transpose, which keeps it perpendicular to the surface under
        non-uniform scaling. The w component picked up from any translation
        is discarded before normalizing.
        """
        local_point = self._inverse @ world_point
        local_normal = self.local_normal_at(local_point)
        world_normal = self._inverse_transpose @ local_normal
        return Tuple(world_normal.x, world_normal.y, world_normal.z, 0.0).normalize()

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        kind = self.kind
        if kind == ShapeKind.SPHERE:
            return sphere_normal(local_point)
        if kind == ShapeKind.PLANE:
            return plane_normal(local_point)
        if kind == ShapeKind.CUBE:
            return cube_normal(local_point)
        if kind == ShapeKind.CYLINDER:
            return cylinder_normal(local_point, self.minimum, self.maximum)
        if kind == ShapeKind.CONE:
            return cone_normal(local_point, self.minimum, self.maximum)
        raise ValueError(f"Unknown shape kind: {kind!r}")


# =============================================================================
# Factories
# =============================================================================


def make_sphere() -> Shape:
    """Create a unit sphere at the origin with the default material."""
    return Shape(ShapeKind.SPHERE)


def make_glass_sphere() -> Shape:
    """Create a unit sphere made of clear glass (transparency 1, index 1.5)."""
    return Shape(ShapeKind.SPHERE, Material(transparency=1.0, refractive_index=1.5))


def make_plane() -> Shape:
    return Shape(ShapeKind.PLANE)


def make_cube() -> Shape:
    return Shape(ShapeKind.CUBE)


def make_cylinder(
    minimum: float = -math.inf, maximum: float = math.inf, closed: bool = False
) -> Shape:
    """Create a radius-1 cylinder around the y axis.

    Args:
        minimum: Lower y bound (exclusive). Defaults to unbounded.
        maximum: Upper y bound (exclusive). Defaults to unbounded.
        closed: Whether to cap both ends.
    """
    return Shape(ShapeKind.CYLINDER, minimum=minimum, maximum=maximum, closed=closed)


def make_cone(
    minimum: float = -math.inf, maximum: float = math.inf, closed: bool = False
) -> Shape:
    """Create a double-napped cone with its apex at the origin.

    Args:
        minimum: Lower y bound (exclusive). Defaults to unbounded.
        maximum: Upper y bound (exclusive). Defaults to unbounded.
        closed: Whether to cap both ends.
    """
    return Shape(ShapeKind.CONE, minimum=minimum, maximum=maximum, closed=closed)
