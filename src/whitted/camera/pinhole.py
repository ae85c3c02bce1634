"""Pinhole camera: maps pixels to primary rays and renders a world.

The canvas sits one unit in front of the eye, looking down -z in view
space. The camera's transform is the world-to-view matrix (usually built
with ``view_transform``); its cached inverse carries view-space points back
into the world to build primary rays.

The field of view spans the longer image dimension:
    half_view = tan(field_of_view / 2)
    aspect    = hsize / vsize

    aspect >= 1: half_width = half_view,          half_height = half_view / aspect
    aspect <  1: half_width = half_view * aspect, half_height = half_view

    pixel_size = 2 * half_width / hsize

Rows are rendered independently, so ``render_rows`` lets a caller split a
frame into disjoint row sets (for example across worker processes) while
``render`` does the whole frame with an optional progress callback.

Example:
    >>> import math
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from whitted.camera.pinhole import Camera
    >>> from whitted.core.matrix import view_transform
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.scene.presets import default_world
    >>> camera = Camera(11, 11, math.pi / 2).set_transform(
    ...     view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0))
    ... )
    >>> canvas = camera.render(default_world())
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Generator, Iterable

from whitted.core.canvas import Canvas
from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import ORIGIN, point
from whitted.scene.world import MAX_DEPTH, World

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]


class Camera:
    """A pinhole camera with a world-to-view transform.

    Attributes:
        hsize: Horizontal size of the image in pixels.
        vsize: Vertical size of the image in pixels.
        field_of_view: Angle (radians) covered by the longer image side.
        half_width: Half the width of the canvas at unit distance.
        half_height: Half the height of the canvas at unit distance.
        pixel_size: World-space size of one pixel on that canvas.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix | None = None,
    ) -> None:
        """Create a camera and derive its canvas geometry.

        Args:
            hsize: Image width in pixels (positive).
            vsize: Image height in pixels (positive).
            field_of_view: Field of view in radians, strictly between 0 and pi.
            transform: World-to-view transform. Defaults to the identity
                (eye at the origin looking down -z).

        Raises:
            ValueError: If a size is not positive or the field of view is
                out of range.
            SingularMatrixError: If ``transform`` cannot be inverted.
        """
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"Field of view must be in (0, pi), got {field_of_view}")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2.0) / hsize

        self._transform = IDENTITY
        self._inverse = IDENTITY
        if transform is not None:
            self.set_transform(transform)

    def __repr__(self) -> str:
        return f"Camera({self.hsize}x{self.vsize}, fov={self.field_of_view:.4f})"

    @property
    def transform(self) -> Matrix:
        return self._transform

    def set_transform(self, transform: Matrix) -> Camera:
        """Replace the world-to-view transform and cache its inverse.

        Raises:
            SingularMatrixError: If the transform cannot be inverted.
        """
        inverse = transform.inverse()
        self._transform = transform
        self._inverse = inverse
        return self

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Build the primary ray through the center of pixel (px, py).

        Pixel (0, 0) is the top-left corner of the image.
        """
        # Offset from the canvas edge to the pixel's center
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self._inverse @ point(world_x, world_y, -1.0)
        origin = self._inverse @ ORIGIN
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render_rows(
        self,
        world: World,
        canvas: Canvas,
        rows: Iterable[int],
        max_depth: int = MAX_DEPTH,
    ) -> None:
        """Render only the given rows into ``canvas``.

        Args:
            world: Scene to render. Must not be mutated during the call.
            canvas: Target canvas, at least as large as the camera image.
            rows: Row indices to fill; other rows are left untouched.
            max_depth: Recursion budget for reflection and refraction.
        """
        for py in rows:
            self._render_row(world, canvas, py, max_depth)

    def _render_row(self, world: World, canvas: Canvas, py: int, max_depth: int) -> None:
        for px in range(self.hsize):
            ray = self.ray_for_pixel(px, py)
            canvas.write_pixel(px, py, world.color_at(ray, max_depth))
        logger.debug("Rendered row %d/%d", py + 1, self.vsize)

    def _prepare_canvas(self, world: World, canvas: Canvas | None) -> Canvas:
        if canvas is None:
            canvas = Canvas(self.hsize, self.vsize)
        elif canvas.width != self.hsize or canvas.height != self.vsize:
            raise ValueError(
                f"Canvas is {canvas.width}x{canvas.height} but the camera renders "
                f"{self.hsize}x{self.vsize}"
            )

        if world.light is None:
            logger.warning("World has no light; every surface will render black")
        return canvas

    def render(
        self,
        world: World,
        canvas: Canvas | None = None,
        max_depth: int = MAX_DEPTH,
        callback: ProgressCallback | None = None,
    ) -> Canvas:
        """Render the full image.

        Args:
            world: Scene to render.
            canvas: Optional target canvas; must match the camera size. A new
                canvas is allocated when omitted (Taichi must be initialized).
            max_depth: Recursion budget for reflection and refraction.
            callback: Optional callback called after each row with
                (rows_done, total_rows). An exception raised by the callback
                aborts the render.

        Returns:
            The canvas holding the rendered linear colors.

        Raises:
            ValueError: If ``canvas`` does not match the camera size.

        Example:
            >>> def progress(done, total):
            ...     print(f"Progress: {done}/{total} rows")
            >>> camera.render(world, callback=progress)
        """
        canvas = self._prepare_canvas(world, canvas)

        logger.info(
            "Rendering %dx%d with %d objects (max depth %d)",
            self.hsize,
            self.vsize,
            len(world.objects),
            max_depth,
        )
        start_time = time.perf_counter()

        for py in range(self.vsize):
            self._render_row(world, canvas, py, max_depth)
            if callback is not None:
                callback(py + 1, self.vsize)

        logger.info("Rendered %dx%d in %.2fs", self.hsize, self.vsize, time.perf_counter() - start_time)
        return canvas

    def render_progressive(
        self,
        world: World,
        canvas: Canvas | None = None,
        max_depth: int = MAX_DEPTH,
    ) -> Generator[tuple[int, int, Canvas], None, None]:
        """Render row by row, yielding progress after each row.

        This is a generator-based alternative to render() with callbacks;
        stopping iteration early leaves the remaining rows unrendered.

        Yields:
            Tuple of (rows_done, total_rows, canvas).

        Example:
            >>> for done, total, canvas in camera.render_progressive(world):
            ...     print(f"Progress: {done}/{total} rows")
        """
        canvas = self._prepare_canvas(world, canvas)
        for py in range(self.vsize):
            self._render_row(world, canvas, py, max_depth)
            yield (py + 1, self.vsize, canvas)
