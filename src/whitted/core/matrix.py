"""Square matrices and affine transform builders.

Matrices are immutable wrappers around NumPy float64 arrays. Inversion
uses cofactor expansion, which is exact enough for the 4x4 affine
transforms a scene is built from and fails loudly on singular input.

Composition follows the usual column-vector convention: in ``A @ B @ p``
the right-most matrix ``B`` is applied to ``p`` first. The fluent helpers
on Matrix (``translate``, ``scale``, ``rotate_x`` ...) left-multiply, so a
chain reads in the order the transforms are applied:

Example:
    >>> import math
    >>> from whitted.core.matrix import Matrix
    >>> from whitted.core.tuples import point
    >>> m = Matrix.identity().rotate_x(math.pi / 2).scale(5, 5, 5).translate(10, 5, 7)
    >>> m @ point(1, 0, 1) == point(15, 0, 7)
    True
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from whitted.core.tuples import EPSILON, Tuple


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is zero."""


class Matrix:
    """An immutable square matrix (2x2, 3x3 or 4x4).

    Attributes:
        size: Number of rows (and columns).
    """

    __slots__ = ("_data",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Sequence[Sequence[float]] | npt.NDArray[np.float64]) -> None:
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {data.shape}")
        if data.shape[0] not in (2, 3, 4):
            raise ValueError(f"Matrix size must be 2, 3 or 4, got {data.shape[0]}")
        data.setflags(write=False)
        self._data = data

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        return cls(np.identity(size))

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return float(self._data[row, col])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and bool(
            np.allclose(self._data, other._data, rtol=0.0, atol=EPSILON)
        )

    def __repr__(self) -> str:
        rows = ", ".join(str([round(v, 5) for v in row]) for row in self._data.tolist())
        return f"Matrix([{rows}])"

    def __matmul__(self, other: Matrix | Tuple) -> Matrix | Tuple:
        if isinstance(other, Matrix):
            return Matrix(self._data @ other._data)
        if isinstance(other, Tuple):
            if self.size != 4:
                raise ValueError("Only 4x4 matrices can transform tuples")
            x, y, z, w = (self._data @ np.array((other.x, other.y, other.z, other.w))).tolist()
            return Tuple(x, y, z, w)
        return NotImplemented

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the underlying array."""
        return np.array(self._data)

    # -------------------------------------------------------------------------
    # Inversion by cofactor expansion
    # -------------------------------------------------------------------------

    def transpose(self) -> Matrix:
        return Matrix(self._data.T)

    def submatrix(self, row: int, col: int) -> Matrix:
        """Remove one row and one column, returning a matrix one size smaller."""
        if self.size == 2:
            raise ValueError("A 2x2 matrix has no submatrix")
        reduced = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix(reduced)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        """Compute the determinant by expansion along the first row."""
        if self.size == 2:
            d = self._data
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        return sum(float(self._data[0, col]) * self.cofactor(0, col) for col in range(self.size))

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> Matrix:
        """Invert the matrix: transposed cofactor matrix over the determinant.

        Returns:
            The inverse matrix.

        Raises:
            SingularMatrixError: If the determinant is zero.
        """
        det = self.determinant()
        if det == 0.0:
            raise SingularMatrixError(f"Matrix is not invertible (determinant {det!r}): {self!r}")
        n = self.size
        cofactors = np.array([[self.cofactor(row, col) for col in range(n)] for row in range(n)])
        return Matrix(cofactors.T / det)

    # -------------------------------------------------------------------------
    # Fluent composition (each call is applied after the previous ones)
    # -------------------------------------------------------------------------

    def translate(self, x: float, y: float, z: float) -> Matrix:
        return translation(x, y, z) @ self

    def scale(self, x: float, y: float, z: float) -> Matrix:
        return scaling(x, y, z) @ self

    def rotate_x(self, radians: float) -> Matrix:
        return rotation_x(radians) @ self

    def rotate_y(self, radians: float) -> Matrix:
        return rotation_y(radians) @ self

    def rotate_z(self, radians: float) -> Matrix:
        return rotation_z(radians) @ self

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        return shearing(xy, xz, yx, yz, zx, zy) @ self


IDENTITY = Matrix.identity()


# =============================================================================
# Transform builders
# =============================================================================


def translation(x: float, y: float, z: float) -> Matrix:
    """Build a translation matrix. Vectors are unaffected by it."""
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    """Build a scaling matrix. Negative factors reflect across an axis."""
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_x(radians: float) -> Matrix:
    """Build a left-handed rotation about the x axis."""
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    """Build a left-handed rotation about the y axis."""
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    """Build a left-handed rotation about the z axis."""
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Build a shearing matrix.

    Each argument moves one component in proportion to another, e.g. ``xy``
    moves x in proportion to y.
    """
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(from_point: Tuple, to_point: Tuple, up: Tuple) -> Matrix:
    """Build the world-to-view transform for an eye looking at a target.

    Args:
        from_point: Eye position.
        to_point: Point the eye looks at.
        up: Approximate up vector; it need not be orthogonal to the view
            direction.

    Returns:
        A matrix that orients the world so the eye sits at the origin and
        looks down -z.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)
