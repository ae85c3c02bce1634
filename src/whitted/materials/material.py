"""Surface material parameters for Phong shading and recursive rays.

A Material is an immutable value. To derive a variant, replace fields:

Example:
    >>> from whitted.core.color import color
    >>> from whitted.materials.material import Material
    >>> red = Material().replace(color=color(1, 0, 0), diffuse=0.7)
    >>> red.specular
    0.9
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from whitted.core.color import WHITE, Color
from whitted.materials.patterns import Pattern


@dataclass(frozen=True)
class Material:
    """Phong coefficients plus reflection and refraction properties.

    Attributes:
        color: Base surface color, used when no pattern is set.
        ambient: Fraction of the light contributed regardless of geometry.
        diffuse: Lambertian reflection coefficient.
        specular: Phong highlight coefficient.
        shininess: Phong exponent; larger is a smaller, sharper highlight.
        reflective: Mirror reflectance in [0, 1].
        transparency: Fraction of light transmitted, in [0, 1].
        refractive_index: Index of refraction (1.0 for vacuum, 1.5 for glass).
        pattern: Optional procedural pattern that replaces ``color``.
    """

    color: Color = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0
    pattern: Pattern | None = None

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"Material {name} must be non-negative, got {getattr(self, name)}")
        if self.shininess <= 0.0:
            raise ValueError(f"Material shininess must be positive, got {self.shininess}")
        for name in ("reflective", "transparency"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ValueError(f"Material {name} must be in [0, 1], got {getattr(self, name)}")
        if self.refractive_index < 1.0:
            raise ValueError(
                f"Material refractive_index must be at least 1.0, got {self.refractive_index}"
            )

    def replace(self, **changes) -> Material:
        """Return a copy with the given fields replaced (validated again)."""
        return dataclasses.replace(self, **changes)
