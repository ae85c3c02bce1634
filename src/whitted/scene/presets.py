"""Ready-made scenes.

``default_world`` is the two-sphere reference world that shading tests are
written against. ``demo_scene`` is a small showcase of every primitive and
material feature, used by the example driver.
"""

from __future__ import annotations

import math

from whitted.camera.pinhole import Camera
from whitted.core.color import WHITE, color
from whitted.core.matrix import Matrix, scaling, view_transform
from whitted.core.tuples import point, vector
from whitted.geometry.shape import (
    make_cone,
    make_cube,
    make_cylinder,
    make_glass_sphere,
    make_plane,
    make_sphere,
)
from whitted.materials.material import Material
from whitted.materials.patterns import checkers_pattern, ring_pattern, stripe_pattern
from whitted.scene.light import PointLight
from whitted.scene.world import World


def default_world() -> World:
    """Create the reference world.

    A white light at (-10, 10, -10) and two concentric spheres at the
    origin: a unit sphere with color (0.8, 1.0, 0.6), diffuse 0.7 and
    specular 0.2, and an inner sphere scaled by 0.5 with the default
    material.
    """
    light = PointLight(point(-10, 10, -10), WHITE)

    outer = make_sphere().set_material(
        Material(color=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)
    )
    inner = make_sphere().set_transform(scaling(0.5, 0.5, 0.5))

    return World(light, [outer, inner])


def demo_scene(width: int = 400, height: int = 200) -> tuple[Camera, World]:
    """Create a showcase scene with every shape kind and material feature.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Tuple of (camera, world).
    """
    camera = Camera(width, height, math.pi / 3).set_transform(
        view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0))
    )
    light = PointLight(point(-10, 10, -10), WHITE)

    checkers = checkers_pattern(color(0.9, 0.9, 0.9), color(0.1, 0.1, 0.1))
    floor = make_plane().set_material(
        Material(pattern=checkers, specular=0.0, reflective=0.2)
    )

    stripes = stripe_pattern(color(0.9, 0.4, 0.1), color(1.0, 0.8, 0.3)).set_transform(
        Matrix.identity().scale(0.2, 0.2, 0.2).rotate_z(math.pi / 4)
    )
    middle = (
        make_sphere()
        .set_transform(Matrix.identity().translate(-0.5, 1, 0.5))
        .set_material(Material(pattern=stripes, diffuse=0.7, specular=0.3))
    )

    glass = make_glass_sphere().set_transform(
        Matrix.identity().scale(0.6, 0.6, 0.6).translate(1.5, 0.6, -0.5)
    )
    glass.set_material(
        glass.material.replace(color=color(0.1, 0.1, 0.1), diffuse=0.1, reflective=0.9, shininess=300.0)
    )

    cube = (
        make_cube()
        .set_transform(Matrix.identity().scale(0.4, 0.4, 0.4).rotate_y(math.pi / 5).translate(-2.2, 0.4, -0.6))
        .set_material(Material(color=color(0.2, 0.5, 0.9), reflective=0.3))
    )

    rings = ring_pattern(color(0.3, 0.7, 0.3), color(0.1, 0.3, 0.1)).set_transform(
        scaling(0.1, 0.1, 0.1)
    )
    cylinder = (
        make_cylinder(minimum=0.0, maximum=1.5, closed=True)
        .set_transform(Matrix.identity().scale(0.35, 1, 0.35).translate(2.6, 0, 1.5))
        .set_material(Material(pattern=rings, specular=0.4))
    )

    cone = (
        make_cone(minimum=-1.0, maximum=0.0, closed=True)
        .set_transform(Matrix.identity().scale(0.5, 1, 0.5).translate(-1.5, 1, 2))
        .set_material(Material(color=color(0.8, 0.2, 0.3), shininess=50.0))
    )

    return camera, World(light, [floor, middle, glass, cube, cylinder, cone])
