"""Intersection records, hit selection and shading precomputation.

An Intersection pairs a ray parameter ``t`` with the shape that produced
it. Intersections collects them in ascending ``t`` order; its ``hit()`` is
the visible surface (smallest positive ``t``).

``Intersection.prepare_computations`` turns one intersection into a
ComputedIntersection: everything the shading code needs, including the
refractive indices on either side of the surface. Those come from walking
the full sorted list and tracking which transparent shapes the ray is
currently inside, which handles nested and overlapping volumes without
any constructive solid geometry.

Example:
    >>> from whitted.geometry.shape import make_sphere
    >>> s = make_sphere()
    >>> xs = Intersections([s.intersection(5), s.intersection(7),
    ...                     s.intersection(-3), s.intersection(2)])
    >>> xs.hit().t
    2
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from whitted.core.tuples import EPSILON, Tuple

if TYPE_CHECKING:
    from whitted.core.ray import Ray
    from whitted.geometry.shape import Shape


@dataclass(frozen=True)
class Intersection:
    """A candidate hit along a ray.

    Attributes:
        t: Signed distance along the ray (in units of its direction).
        object: The shape that was intersected. Compared by identity.
    """

    t: float
    object: Shape

    def prepare_computations(
        self, ray: Ray, xs: Intersections | None = None
    ) -> ComputedIntersection:
        """Precompute the shading state for this intersection.

        Args:
            ray: The ray that produced the intersection.
            xs: Every intersection of that ray with the scene, used to find
                the refractive indices n1 and n2. Defaults to this
                intersection alone.

        Returns:
            A ComputedIntersection snapshot.
        """
        if xs is None:
            xs = Intersections([self])

        point = ray.position(self.t)
        normal = self.object.normal_at(point)
        eye = -ray.direction

        inside = normal.dot(eye) < 0.0
        if inside:
            normal = -normal

        n1, n2 = _refractive_indices(self, xs)

        return ComputedIntersection(
            t=self.t,
            object=self.object,
            point=point,
            over_point=point + normal * EPSILON,
            under_point=point - normal * EPSILON,
            normal=normal,
            eye=eye,
            reflect=ray.direction.reflect(normal),
            inside=inside,
            n1=n1,
            n2=n2,
        )


def _refractive_indices(target: Intersection, xs: Intersections) -> tuple[float, float]:
    """Find (n1, n2) for ``target`` by walking ``xs`` with a container stack.

    Shapes are matched by id, never by structural equality: two glass
    spheres with equal geometry are still two separate volumes.
    """
    containers: list[Shape] = []
    n1 = n2 = 1.0

    for entry in xs:
        is_target = entry == target
        if is_target:
            n1 = containers[-1].material.refractive_index if containers else 1.0

        for index, shape in enumerate(containers):
            if shape.same_as(entry.object):
                del containers[index]
                break
        else:
            containers.append(entry.object)

        if is_target:
            n2 = containers[-1].material.refractive_index if containers else 1.0
            break

    return n1, n2


class Intersections:
    """An immutable, t-sorted collection of intersections."""

    __slots__ = ("_items",)

    def __init__(self, intersections: Iterable[Intersection] = ()) -> None:
        self._items: tuple[Intersection, ...] = tuple(sorted(intersections, key=lambda i: i.t))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Intersection:
        return self._items[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Intersections({[round(i.t, 5) for i in self._items]})"

    def hit(self) -> Intersection | None:
        """Return the intersection with the smallest positive t, if any."""
        for intersection in self._items:
            if intersection.t > 0.0:
                return intersection
        return None


@dataclass(frozen=True)
class ComputedIntersection:
    """Shading state derived from one intersection.

    Attributes:
        t: Ray parameter of the intersection.
        object: The intersected shape.
        point: World-space intersection point.
        over_point: ``point`` nudged along the normal, used as the origin of
            shadow and reflection rays to avoid self-intersection (acne).
        under_point: ``point`` nudged against the normal, used as the
            origin of refraction rays.
        normal: Unit surface normal, flipped to face the eye.
        eye: Unit vector from the point back toward the ray origin.
        reflect: The incoming direction reflected about ``normal``.
        inside: True when the ray origin is inside the shape.
        n1: Refractive index of the medium being left.
        n2: Refractive index of the medium being entered.
    """

    t: float
    object: Shape
    point: Tuple
    over_point: Tuple
    under_point: Tuple
    normal: Tuple
    eye: Tuple
    reflect: Tuple
    inside: bool
    n1: float
    n2: float

    def schlick(self) -> float:
        """Approximate the Fresnel reflectance with Schlick's polynomial.

        Returns:
            The fraction of light reflected, in [0, 1]. Exactly 1.0 under
            total internal reflection.
        """
        cos = self.eye.dot(self.normal)
        if self.n1 > self.n2:
            ratio = self.n1 / self.n2
            sin2_t = ratio * ratio * (1.0 - cos * cos)
            if sin2_t > 1.0:
                return 1.0
            cos = math.sqrt(1.0 - sin2_t)

        r0 = ((self.n1 - self.n2) / (self.n1 + self.n2)) ** 2
        return r0 + (1.0 - r0) * (1.0 - cos) ** 5
