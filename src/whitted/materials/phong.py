"""Phong reflection model for a single point light.

The shaded color is the sum of three terms:
    ambient  = effective * ambient
    diffuse  = effective * diffuse * dot(light_dir, normal)
    specular = intensity * specular * dot(reflect_dir, eye) ^ shininess

where ``effective`` is the surface color (from the material's pattern when
it has one) multiplied by the light's intensity. Diffuse and specular are
black when the light is behind the surface; a point in shadow receives the
ambient term only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from whitted.core.color import BLACK, Color
from whitted.core.tuples import Tuple

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape
    from whitted.materials.material import Material
    from whitted.scene.light import PointLight


def lighting(
    material: Material,
    shape: Shape,
    light: PointLight,
    point: Tuple,
    eye: Tuple,
    normal: Tuple,
    in_shadow: bool = False,
) -> Color:
    """Shade one surface point with the Phong model.

    Args:
        material: Material at the point.
        shape: Shape being shaded; needed to place the material's pattern.
        light: The scene's point light.
        point: World-space point being shaded.
        eye: Unit vector toward the viewer.
        normal: Unit surface normal, facing the viewer.
        in_shadow: Whether the light is blocked from ``point``.

    Returns:
        The unclamped shaded color.
    """
    if material.pattern is not None:
        surface = material.pattern.pattern_at_shape(shape, point)
    else:
        surface = material.color

    effective = surface * light.intensity
    ambient = effective * material.ambient
    if in_shadow:
        return ambient

    light_dir = (light.position - point).normalize()
    light_dot_normal = light_dir.dot(normal)

    # Light is on the other side of the surface
    if light_dot_normal < 0.0:
        return ambient

    diffuse = effective * material.diffuse * light_dot_normal

    reflect_dir = (-light_dir).reflect(normal)
    reflect_dot_eye = reflect_dir.dot(eye)
    if reflect_dot_eye <= 0.0:
        specular = BLACK
    else:
        factor = reflect_dot_eye ** material.shininess
        specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular
