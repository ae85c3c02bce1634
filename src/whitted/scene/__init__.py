"""Scene module for lights, world composition and scene construction.

Components:
    light: PointLight
    world: World (shapes + light) with recursive Whitted shading
    builder: Camera and World from a parsed scene description
    presets: The reference world and a demo scene

Only the light and world are re-exported here. The builder and presets
depend on the camera, which itself depends on the world; import them from
``whitted.scene.builder`` and ``whitted.scene.presets`` directly.
"""

from .light import PointLight
from .world import MAX_DEPTH, World

__all__ = [
    "PointLight",
    "World",
    "MAX_DEPTH",
]
