"""Preview module for turning rendered canvases into image files.

Components:
    display: Tone mapping, gamma encoding and 8-bit quantization (NumPy)
    export: PPM and PNG writers (Pillow), image comparison

Example:
    >>> from whitted.preview import save_png
    >>> save_png(canvas, "output.png", gamma=2.2)
"""

from whitted.preview.display import (
    ToneMapMethod,
    apply_gamma,
    process_image_for_display,
    quantize,
    tone_map_exposure,
    tone_map_reinhard,
)
from whitted.preview.export import (
    canvas_to_ppm,
    compute_rmse,
    image_to_uint8,
    save_png,
    save_png_from_array,
    save_ppm,
)

__all__ = [
    # Display transforms
    "tone_map_reinhard",
    "tone_map_exposure",
    "apply_gamma",
    "process_image_for_display",
    "quantize",
    "ToneMapMethod",
    # Export functions
    "canvas_to_ppm",
    "save_ppm",
    "save_png",
    "save_png_from_array",
    "image_to_uint8",
    "compute_rmse",
]
