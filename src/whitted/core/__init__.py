"""Core math and buffer module.

This module contains the fundamental building blocks for ray tracing:

Components:
    tuples: Homogeneous points and vectors with tolerant equality
    color: Linear RGB colors
    matrix: Square matrices, cofactor inversion and affine builders
    ray: Ray data structure
    canvas: Taichi-field pixel buffer the camera renders into

Everything except the canvas is plain Python/NumPy and needs no Taichi
initialization. Import the canvas directly from ``whitted.core.canvas``.
"""

from .color import BLACK, WHITE, Color, color
from .matrix import (
    IDENTITY,
    Matrix,
    SingularMatrixError,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .ray import Ray
from .tuples import EPSILON, ORIGIN, Tuple, approx_equal, point, vector

__all__ = [
    "EPSILON",
    "ORIGIN",
    "Tuple",
    "approx_equal",
    "point",
    "vector",
    "Color",
    "color",
    "BLACK",
    "WHITE",
    "Matrix",
    "IDENTITY",
    "SingularMatrixError",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    "Ray",
]
