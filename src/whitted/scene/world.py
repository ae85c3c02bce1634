"""The world: one light, a flat list of shapes, and recursive shading.

Shading a ray follows Whitted's recursion. At the nearest hit the surface
is lit with the Phong model (shadowed when another shape blocks the
light), then a reflection ray and a refraction ray are spawned as the
material demands and shaded the same way. Every recursive call takes the
remaining depth explicitly; a branch that runs out of depth contributes
black.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.scene.presets import default_world
    >>> world = default_world()
    >>> world.color_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
    Color(red=0.38066..., green=0.47583..., blue=0.2855...)
"""

from __future__ import annotations

import math

from whitted.core.color import BLACK, Color
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple
from whitted.geometry.intersection import ComputedIntersection, Intersections
from whitted.geometry.shape import Shape
from whitted.materials.phong import lighting
from whitted.scene.light import PointLight

# Maximum number of recursive reflection/refraction bounces per primary ray
MAX_DEPTH = 5


class World:
    """A collection of shapes lit by at most one point light.

    Attributes:
        light: The light source, or None for a dark world.
        objects: Shapes in insertion order.
    """

    def __init__(self, light: PointLight | None = None, objects: list[Shape] | None = None) -> None:
        self.light = light
        self.objects: list[Shape] = list(objects) if objects is not None else []

    def __repr__(self) -> str:
        return f"World(light={self.light!r}, objects={len(self.objects)})"

    def add(self, *shapes: Shape) -> World:
        """Append shapes to the world."""
        self.objects.extend(shapes)
        return self

    def contains(self, shape: Shape) -> bool:
        return any(obj.same_as(shape) for obj in self.objects)

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a world-space ray with every shape, sorted by t."""
        hits = []
        for obj in self.objects:
            hits.extend(obj.intersect(ray))
        return Intersections(hits)

    # -------------------------------------------------------------------------
    # Shading
    # -------------------------------------------------------------------------

    def shade_hit(self, comps: ComputedIntersection, remaining: int = MAX_DEPTH) -> Color:
        """Shade a prepared intersection, including reflection and refraction.

        When the material is both reflective and transparent, reflection and
        refraction are weighted by the Fresnel reflectance (Schlick).
        """
        material = comps.object.material

        if self.light is None:
            surface = BLACK
        else:
            surface = lighting(
                material,
                comps.object,
                self.light,
                comps.over_point,
                comps.eye,
                comps.normal,
                self.is_shadowed(comps.over_point),
            )

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0.0 and material.transparency > 0.0:
            reflectance = comps.schlick()
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)
        return surface + reflected + refracted

    def color_at(self, ray: Ray, remaining: int = MAX_DEPTH) -> Color:
        """Trace a ray and return the color it sees (black on a miss)."""
        xs = self.intersect(ray)
        hit = xs.hit()
        if hit is None:
            return BLACK
        comps = hit.prepare_computations(ray, xs)
        return self.shade_hit(comps, remaining)

    def reflected_color(self, comps: ComputedIntersection, remaining: int = MAX_DEPTH) -> Color:
        reflective = comps.object.material.reflective
        if remaining <= 0 or reflective == 0.0:
            return BLACK

        reflect_ray = Ray(comps.over_point, comps.reflect)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: ComputedIntersection, remaining: int = MAX_DEPTH) -> Color:
        """Trace the transmitted ray through a transparent surface.

        Uses Snell's law with n1/n2 from the prepared computations. Total
        internal reflection yields black (the energy goes to the reflected
        ray instead).
        """
        transparency = comps.object.material.transparency
        if transparency == 0.0 or remaining <= 0:
            return BLACK

        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eye.dot(comps.normal)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normal * (n_ratio * cos_i - cos_t) - comps.eye * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency

    def is_shadowed(self, point: Tuple) -> bool:
        """Check whether any shape lies between ``point`` and the light."""
        if self.light is None:
            return False

        to_light = self.light.position - point
        distance = to_light.magnitude()
        ray = Ray(point, to_light.normalize())

        hit = self.intersect(ray).hit()
        return hit is not None and hit.t < distance
