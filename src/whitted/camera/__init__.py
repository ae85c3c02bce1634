"""Camera module for view and ray generation.

Components:
    pinhole: Pinhole (perspective) camera with a world-to-view transform

Camera responsibilities:
    - Derive the canvas geometry (half width/height, pixel size) from the
      image size and field of view
    - Map pixel (px, py) to a normalized world-space primary ray
    - Drive a World over every pixel into a Canvas

The camera module imports Taichi through the Canvas; call ``ti.init``
before rendering.
"""

from .pinhole import Camera, ProgressCallback

__all__ = [
    "Camera",
    "ProgressCallback",
]
