"""Materials module for surface appearance.

Components:
    material: Immutable Material (Phong coefficients, reflection, refraction)
    patterns: Procedural two-color patterns (stripe, gradient, ring, checkers)
    phong: Phong lighting for a single point light

Materials are plain values shared freely between shapes; a shape's
material is swapped, never edited.
"""

from .material import Material
from .patterns import (
    Pattern,
    PatternKind,
    checkers_pattern,
    gradient_pattern,
    ring_pattern,
    stripe_pattern,
)
from .phong import lighting

__all__ = [
    "Material",
    "Pattern",
    "PatternKind",
    "stripe_pattern",
    "gradient_pattern",
    "ring_pattern",
    "checkers_pattern",
    "lighting",
]
