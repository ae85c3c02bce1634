"""Image export for rendered canvases.

Supported formats:
    - PPM (plain-text P3), written straight from the canvas quantization
    - PNG (8-bit via Pillow), with optional tone mapping and gamma

Example:
    >>> from whitted.preview.export import save_png, save_ppm
    >>> canvas = camera.render(world)
    >>> save_ppm(canvas, "output.ppm")
    >>> save_png(canvas, "output.png", tone_map="reinhard", gamma=2.2)
"""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from whitted.preview.display import ToneMapMethod, process_image_for_display, quantize

if TYPE_CHECKING:
    from whitted.core.canvas import Canvas

logger = logging.getLogger(__name__)

# Plain PPM readers expect lines of at most this many characters
PPM_MAX_LINE_LENGTH = 70


def canvas_to_ppm(canvas: Canvas) -> str:
    """Serialize a canvas as plain PPM (P3) text.

    Each image row starts on a new line; rows longer than 70 characters are
    wrapped between values. The text ends with a newline.
    """
    rgb = canvas.to_rgb8()
    lines = ["P3", f"{canvas.width} {canvas.height}", "255"]

    for row in rgb:
        line = ""
        for value in row.reshape(-1).tolist():
            token = str(value)
            if line and len(line) + 1 + len(token) > PPM_MAX_LINE_LENGTH:
                lines.append(line)
                line = token
            else:
                line = f"{line} {token}" if line else token
        lines.append(line)

    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | PathLike[str]) -> None:
    """Write a canvas to a plain PPM file."""
    path = Path(filepath)
    path.write_text(canvas_to_ppm(canvas), encoding="ascii")
    logger.info("Saved %dx%d PPM to %s", canvas.width, canvas.height, path)


def image_to_uint8(
    image: npt.NDArray[np.float32],
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> npt.NDArray[np.uint8]:
    """Convert a linear (H, W, 3) float image to 8-bit.

    Args:
        image: Linear image array of shape (H, W, 3).
        tone_map: Tone mapping method ("none", "reinhard", or "exposure").
        gamma: Gamma value (1.0 keeps values linear).
        exposure: Exposure for the "exposure" tone map.

    Returns:
        Array of shape (H, W, 3) with dtype uint8.
    """
    processed = process_image_for_display(image, tone_map=tone_map, gamma=gamma, exposure=exposure)
    return quantize(processed)


def save_png_from_array(
    image: npt.NDArray[np.float32],
    filepath: str | PathLike[str],
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> None:
    """Save a linear (H, W, 3) float image as an 8-bit PNG."""
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) image, got shape {image.shape}")
    image_uint8 = image_to_uint8(image, tone_map=tone_map, gamma=gamma, exposure=exposure)
    PILImage.fromarray(image_uint8).save(Path(filepath))


def save_png(
    canvas: Canvas,
    filepath: str | PathLike[str],
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> None:
    """Save a canvas as an 8-bit PNG.

    With the defaults (no tone map, gamma 1.0) the PNG holds exactly the
    values the PPM export would write.

    Args:
        canvas: The rendered canvas.
        filepath: Output file path (should end in .png).
        tone_map: Tone mapping method ("none", "reinhard", or "exposure").
        gamma: Gamma value (1.0 keeps values linear, 2.2 approximates sRGB).
        exposure: Exposure for the "exposure" tone map.
    """
    save_png_from_array(
        canvas.to_numpy(), filepath, tone_map=tone_map, gamma=gamma, exposure=exposure
    )
    logger.info("Saved %dx%d PNG to %s", canvas.width, canvas.height, filepath)


def compute_rmse(
    image_a: npt.NDArray[np.floating],
    image_b: npt.NDArray[np.floating],
) -> float:
    """Compute the root mean squared error between two images of equal shape.

    Raises:
        ValueError: If the shapes differ.
    """
    if image_a.shape != image_b.shape:
        raise ValueError(f"Image shapes must match: {image_a.shape} vs {image_b.shape}")
    diff = image_a.astype(np.float64) - image_b.astype(np.float64)
    return float(np.sqrt(np.mean(diff**2)))
