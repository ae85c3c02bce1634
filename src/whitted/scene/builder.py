"""Build a Camera and World from a parsed scene description.

A scene description is a list of commands, each a mapping whose ``add`` key
names what to create. It is plain Python data (for example the result of
loading a YAML or JSON file); this module never reads files itself.

Example description:
    [
        {"add": "camera", "width": 400, "height": 160, "field-of-view": 0.7854,
         "from": [-3, 1, 2.5], "to": [0, 0.5, 0], "up": [0, 1, 0]},
        {"add": "light", "at": [-4.9, 4.9, -1], "intensity": [1, 1, 1]},
        {"add": "plane", "material": {"color": [1, 1, 1], "specular": 0}},
        {"add": "sphere",
         "transform": [["scale", 0.4, 0.4, 0.4], ["translate", 4.6, 0.4, 1]],
         "material": {"color": [0.8, 0.5, 0.3], "shininess": 50}},
    ]

Transform steps are applied in list order: the first step acts on the
shape first. Rotation angles are in radians.

Example:
    >>> from whitted.scene.builder import build_scene
    >>> camera, world = build_scene(description)
    >>> len(world.objects)
    2
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from whitted.camera.pinhole import Camera
from whitted.core.color import Color
from whitted.core.matrix import Matrix, SingularMatrixError, view_transform
from whitted.core.tuples import point, vector
from whitted.geometry.shape import (
    Shape,
    make_cone,
    make_cube,
    make_cylinder,
    make_plane,
    make_sphere,
)
from whitted.materials.material import Material
from whitted.materials.patterns import (
    Pattern,
    checkers_pattern,
    gradient_pattern,
    ring_pattern,
    stripe_pattern,
)
from whitted.scene.light import PointLight
from whitted.scene.world import World

logger = logging.getLogger(__name__)


class SceneDescriptionError(ValueError):
    """Raised when a scene description is malformed or incomplete."""


# Transform step name -> (Matrix method name, argument count)
_TRANSFORM_STEPS: dict[str, tuple[str, int]] = {
    "translate": ("translate", 3),
    "scale": ("scale", 3),
    "rotate-x": ("rotate_x", 1),
    "rotate-y": ("rotate_y", 1),
    "rotate-z": ("rotate_z", 1),
    "shear": ("shear", 6),
    "shearing": ("shear", 6),
}

# Scene key -> Material field for the scalar material properties
_MATERIAL_KEYS: dict[str, str] = {
    "ambient": "ambient",
    "diffuse": "diffuse",
    "specular": "specular",
    "shininess": "shininess",
    "reflective": "reflective",
    "transparency": "transparency",
    "refractive-index": "refractive_index",
}

_PATTERN_FACTORIES: dict[str, Callable[[Color, Color], Pattern]] = {
    "stripes": stripe_pattern,
    "stripe": stripe_pattern,
    "gradient": gradient_pattern,
    "rings": ring_pattern,
    "ring": ring_pattern,
    "checkers": checkers_pattern,
}

_SHAPE_FACTORIES: dict[str, Callable[[], Shape]] = {
    "sphere": make_sphere,
    "plane": make_plane,
    "cube": make_cube,
    "cylinder": make_cylinder,
    "cone": make_cone,
}


# =============================================================================
# Value helpers
# =============================================================================


def _require(command: Mapping[str, Any], key: str) -> Any:
    if key not in command:
        raise SceneDescriptionError(f"'{command.get('add')}' is missing required key '{key}'")
    return command[key]


def _floats(value: Any, count: int, key: str) -> list[float]:
    """Convert a sequence of exactly ``count`` numbers to floats."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise SceneDescriptionError(f"'{key}' must be a list of {count} numbers, got {value!r}")
    if len(value) != count:
        raise SceneDescriptionError(f"'{key}' must have {count} numbers, got {len(value)}")
    try:
        return [float(v) for v in value]
    except (TypeError, ValueError) as e:
        raise SceneDescriptionError(f"'{key}' must contain only numbers, got {value!r}") from e


def _number(value: Any, key: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise SceneDescriptionError(f"'{key}' must be a number, got {value!r}") from e


def _color(value: Any, key: str) -> Color:
    r, g, b = _floats(value, 3, key)
    return Color(r, g, b)


def parse_transform(steps: Any) -> Matrix:
    """Compose a list of ``[name, *args]`` steps into one matrix.

    Args:
        steps: Transform steps, applied in list order.

    Returns:
        The composed object-to-world matrix.

    Raises:
        SceneDescriptionError: On an unknown step or wrong argument count.
    """
    if isinstance(steps, (str, bytes)) or not isinstance(steps, Sequence):
        raise SceneDescriptionError(f"'transform' must be a list of steps, got {steps!r}")

    matrix = Matrix.identity()
    for step in steps:
        if isinstance(step, (str, bytes)) or not isinstance(step, Sequence) or not step:
            raise SceneDescriptionError(f"Transform step must be [name, *args], got {step!r}")
        name, *args = step
        if name not in _TRANSFORM_STEPS:
            raise SceneDescriptionError(f"Unknown transform step '{name}'")
        method, arity = _TRANSFORM_STEPS[name]
        values = _floats(args, arity, name)
        matrix = getattr(matrix, method)(*values)
    return matrix


def _apply_transform(target: Shape | Pattern, matrix: Matrix) -> None:
    try:
        target.set_transform(matrix)
    except SingularMatrixError as e:
        raise SceneDescriptionError(f"Transform is not invertible: {matrix!r}") from e


def parse_pattern(spec: Any) -> Pattern:
    """Build a Pattern from ``{"type", "colors": [a, b], "transform"?}``."""
    if not isinstance(spec, Mapping):
        raise SceneDescriptionError(f"'pattern' must be a mapping, got {spec!r}")

    kind = _require(spec, "type")
    if kind not in _PATTERN_FACTORIES:
        raise SceneDescriptionError(f"Unknown pattern type '{kind}'")

    colors = _require(spec, "colors")
    if isinstance(colors, (str, bytes)) or not isinstance(colors, Sequence) or len(colors) != 2:
        raise SceneDescriptionError(f"Pattern 'colors' must hold exactly two colors, got {colors!r}")

    pattern = _PATTERN_FACTORIES[kind](_color(colors[0], "colors"), _color(colors[1], "colors"))
    if "transform" in spec:
        _apply_transform(pattern, parse_transform(spec["transform"]))
    return pattern


def parse_material(spec: Any) -> Material:
    """Build a Material from a mapping; unspecified fields keep their defaults.

    Raises:
        SceneDescriptionError: On an unknown key or an invalid value.
    """
    if not isinstance(spec, Mapping):
        raise SceneDescriptionError(f"'material' must be a mapping, got {spec!r}")

    fields: dict[str, Any] = {}
    for key, value in spec.items():
        if key == "color":
            fields["color"] = _color(value, key)
        elif key == "pattern":
            fields["pattern"] = parse_pattern(value)
        elif key in _MATERIAL_KEYS:
            fields[_MATERIAL_KEYS[key]] = _number(value, key)
        else:
            raise SceneDescriptionError(f"Unknown material key '{key}'")

    try:
        return Material(**fields)
    except ValueError as e:
        raise SceneDescriptionError(f"Invalid material: {e}") from e


# =============================================================================
# Commands
# =============================================================================


def parse_camera(command: Mapping[str, Any]) -> Camera:
    """Build a Camera from an ``add: camera`` command."""
    width = _require(command, "width")
    height = _require(command, "height")
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, int):
            raise SceneDescriptionError(
                f"Camera width and height must be integers, got {width!r}, {height!r}"
            )

    fov = _number(_require(command, "field-of-view"), "field-of-view")
    from_point = point(*_floats(_require(command, "from"), 3, "from"))
    to_point = point(*_floats(_require(command, "to"), 3, "to"))
    up = vector(*_floats(_require(command, "up"), 3, "up"))

    try:
        return Camera(width, height, fov, view_transform(from_point, to_point, up))
    except ValueError as e:
        raise SceneDescriptionError(f"Invalid camera: {e}") from e


def parse_light(command: Mapping[str, Any]) -> PointLight:
    """Build a PointLight from an ``add: light`` command."""
    position = point(*_floats(_require(command, "at"), 3, "at"))
    return PointLight(position, _color(_require(command, "intensity"), "intensity"))


def parse_shape(command: Mapping[str, Any]) -> Shape:
    """Build a Shape from an ``add: <shape>`` command."""
    kind = command["add"]
    shape = _SHAPE_FACTORIES[kind]()

    if kind in ("cylinder", "cone"):
        if "min" in command:
            shape.minimum = _number(command["min"], "min")
        if "max" in command:
            shape.maximum = _number(command["max"], "max")
        if "closed" in command:
            closed = command["closed"]
            if not isinstance(closed, bool):
                raise SceneDescriptionError(f"'closed' must be true or false, got {closed!r}")
            shape.closed = closed

    if "transform" in command:
        _apply_transform(shape, parse_transform(command["transform"]))
    if "material" in command:
        shape.set_material(parse_material(command["material"]))
    return shape


def build_scene(commands: Sequence[Mapping[str, Any]]) -> tuple[Camera, World]:
    """Turn a scene description into a camera and a world.

    Args:
        commands: The list of ``{"add": ...}`` commands.

    Returns:
        Tuple of (camera, world).

    Raises:
        SceneDescriptionError: If the description is malformed, or does not
            contain exactly one camera and exactly one light.
    """
    if isinstance(commands, (str, bytes)) or not isinstance(commands, Sequence):
        raise SceneDescriptionError("Scene description must be a list of commands")

    cameras: list[Camera] = []
    lights: list[PointLight] = []
    objects: list[Shape] = []

    for index, command in enumerate(commands):
        if not isinstance(command, Mapping) or "add" not in command:
            raise SceneDescriptionError(f"Command {index} must be a mapping with an 'add' key")

        what = command["add"]
        if what == "camera":
            cameras.append(parse_camera(command))
        elif what == "light":
            lights.append(parse_light(command))
        elif what in _SHAPE_FACTORIES:
            objects.append(parse_shape(command))
        else:
            raise SceneDescriptionError(f"Command {index}: unknown item '{what}'")
        logger.debug("Parsed command %d: %s", index, what)

    if len(cameras) != 1:
        raise SceneDescriptionError(f"Scene needs exactly one camera, found {len(cameras)}")
    if len(lights) != 1:
        raise SceneDescriptionError(f"Scene needs exactly one light, found {len(lights)}")

    logger.info("Built scene with %d objects", len(objects))
    return cameras[0], World(lights[0], objects)
