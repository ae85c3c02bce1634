"""Pixel buffer backed by a Taichi vector field.

The camera writes one linear RGB value per pixel into a Canvas; the
preview module reads it back for export. Storage is a
``ti.Vector.field(3, ti.f32)`` indexed ``[x, y]`` with (0, 0) the top-left
pixel, so that the buffer can be handed to Taichi kernels directly.

Taichi must be initialized (``ti.init(...)``) before a Canvas is created.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from whitted.core.canvas import Canvas
    >>> from whitted.core.color import color
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_pixel(2, 3, color(1, 0, 0))
    >>> canvas.pixel_at(2, 3) == color(1, 0, 0)
    True
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

from whitted.core.color import BLACK, Color


@ti.kernel
def _fill_kernel(pixels: ti.template(), r: ti.f32, g: ti.f32, b: ti.f32):
    for x, y in pixels:
        pixels[x, y] = ti.Vector([r, g, b])


@ti.kernel
def _quantize_kernel(pixels: ti.template(), out: ti.types.ndarray()):
    """Clamp each channel to [0, 1], scale to [0, 255] and round half up."""
    for x, y in pixels:
        for c in ti.static(range(3)):
            value = ti.min(ti.max(pixels[x, y][c], 0.0), 1.0)
            out[x, y, c] = ti.cast(ti.floor(value * 255.0 + 0.5), ti.u8)


class Canvas:
    """A width x height grid of linear RGB colors.

    Attributes:
        width: Number of pixel columns.
        height: Number of pixel rows.
    """

    def __init__(self, width: int, height: int, fill: Color = BLACK) -> None:
        """Allocate the pixel field.

        Args:
            width: Number of columns (positive).
            height: Number of rows (positive).
            fill: Initial color of every pixel.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        self.fill(fill)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def field(self) -> ti.MatrixField:
        """The underlying Taichi field, for use inside kernels."""
        return self._pixels

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def write_pixel(self, x: int, y: int, value: Color) -> None:
        self._check_bounds(x, y)
        self._pixels[x, y] = [value.red, value.green, value.blue]

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        rgb = self._pixels[x, y]
        return Color(float(rgb[0]), float(rgb[1]), float(rgb[2]))

    def fill(self, value: Color) -> None:
        _fill_kernel(self._pixels, value.red, value.green, value.blue)

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Copy the buffer out as a row-major (height, width, 3) array."""
        return np.ascontiguousarray(self._pixels.to_numpy().transpose(1, 0, 2))

    def to_rgb8(self) -> npt.NDArray[np.uint8]:
        """Quantize to 8 bits per channel as a (height, width, 3) array.

        Values are clamped to [0, 1] first; nothing else (no gamma) is
        applied.
        """
        out = np.zeros((self._width, self._height, 3), dtype=np.uint8)
        _quantize_kernel(self._pixels, out)
        return np.ascontiguousarray(out.transpose(1, 0, 2))
