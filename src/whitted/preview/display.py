"""Display transforms for linear renders: tone mapping, gamma, quantization.

The renderer produces unclamped linear RGB. Before writing an 8-bit image
the values go through:

1. Tone mapping (optional): ``reinhard`` (c / (1 + c)) or ``exposure``
   (1 - exp(-c * exposure)) to compress values above 1.0
2. Gamma encoding: c ^ (1 / gamma); a gamma of 1.0 leaves values linear
3. Clamping to [0, 1]

All operations are vectorized NumPy over (H, W, 3) float arrays.
"""

from __future__ import annotations

from typing import Literal

import numpy as np
import numpy.typing as npt

# Type alias for tone mapping options
ToneMapMethod = Literal["none", "reinhard", "exposure"]


def tone_map_reinhard(image: npt.NDArray[np.float32]) -> npt.NDArray[np.float32]:
    """Compress [0, inf) into [0, 1) with the Reinhard operator c / (1 + c)."""
    clipped = np.maximum(image, 0.0)
    return (clipped / (1.0 + clipped)).astype(np.float32)


def tone_map_exposure(
    image: npt.NDArray[np.float32],
    exposure: float = 1.0,
) -> npt.NDArray[np.float32]:
    """Compress with 1 - exp(-c * exposure); larger exposure is brighter."""
    if exposure <= 0.0:
        raise ValueError(f"Exposure must be positive, got {exposure}")
    clipped = np.maximum(image, 0.0)
    return (1.0 - np.exp(-clipped * exposure)).astype(np.float32)


def apply_gamma(
    image: npt.NDArray[np.float32],
    gamma: float = 1.0,
) -> npt.NDArray[np.float32]:
    """Gamma-encode an image: out = in ^ (1 / gamma).

    Values are clamped to [0, 1] first. A gamma of 1.0 returns the input
    untouched.
    """
    if gamma <= 0.0:
        raise ValueError(f"Gamma must be positive, got {gamma}")
    if gamma == 1.0:
        return image
    return np.power(np.clip(image, 0.0, 1.0), 1.0 / gamma).astype(np.float32)


def process_image_for_display(
    image: npt.NDArray[np.float32],
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> npt.NDArray[np.float32]:
    """Run the full display pipeline on a linear image.

    Args:
        image: Linear image array of shape (H, W, 3).
        tone_map: Tone mapping method ("none", "reinhard", or "exposure").
        gamma: Gamma value (1.0 keeps values linear, 2.2 approximates sRGB).
        exposure: Exposure for the "exposure" tone map.

    Returns:
        A new float32 array in [0, 1].

    Raises:
        ValueError: On an unknown tone mapping method.
    """
    if tone_map == "reinhard":
        result = tone_map_reinhard(image)
    elif tone_map == "exposure":
        result = tone_map_exposure(image, exposure)
    elif tone_map == "none":
        result = np.asarray(image, dtype=np.float32)
    else:
        raise ValueError(f"Unknown tone mapping method: {tone_map}")

    result = apply_gamma(result, gamma)
    return np.clip(result, 0.0, 1.0).astype(np.float32)


def quantize(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Scale a [0, 1] image to 0..255 and round half up.

    This is the same rounding the canvas uses, so a linear PNG and a PPM of
    the same render hold identical pixel values.
    """
    clamped = np.clip(np.asarray(image, dtype=np.float32), 0.0, 1.0)
    return np.floor(clamped * np.float32(255.0) + np.float32(0.5)).astype(np.uint8)
