"""Homogeneous 4-component tuples for points and vectors.

A Tuple carries (x, y, z, w). Points have w == 1 and are moved by
translations; vectors have w == 0 and are not. All comparisons are
tolerant to EPSILON so values that went through a matrix inverse or a
square root still compare equal to the hand-written expectation.

Example:
    >>> from whitted.core.tuples import point, vector
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 1.0, 0.0)
    >>> p + v
    Tuple(x=1.0, y=3.0, z=3.0, w=1.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Tolerance used for every float comparison and for surface offsets
EPSILON = 1e-4


def approx_equal(a: float, b: float) -> bool:
    """Return True when a and b differ by less than EPSILON."""
    return abs(a - b) < EPSILON


@dataclass(frozen=True, eq=False)
class Tuple:
    """An immutable homogeneous coordinate.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
        w: Homogeneous component (1.0 for points, 0.0 for vectors).
    """

    x: float
    y: float
    z: float
    w: float

    __hash__ = None  # type: ignore[assignment]

    @property
    def is_point(self) -> bool:
        return approx_equal(self.w, 1.0)

    @property
    def is_vector(self) -> bool:
        return approx_equal(self.w, 0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            approx_equal(self.x, other.x)
            and approx_equal(self.y, other.y)
            and approx_equal(self.z, other.z)
            and approx_equal(self.w, other.w)
        )

    def __add__(self, other: Tuple) -> Tuple:
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple:
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def magnitude(self) -> float:
        """Compute the Euclidean length over all four components."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> Tuple:
        """Scale to unit length.

        Returns:
            A tuple of magnitude 1 pointing the same way. A zero-length
            tuple is returned unchanged.
        """
        length = self.magnitude()
        if length < EPSILON:
            return self
        return self / length

    def dot(self, other: Tuple) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Tuple) -> Tuple:
        """Compute the cross product of two vectors.

        The w component is ignored; the result is always a vector.
        """
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Tuple) -> Tuple:
        """Reflect this vector about a unit normal: v - 2 (v . n) n."""
        return self - normal * (2.0 * self.dot(normal))


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w == 1)."""
    return Tuple(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w == 0)."""
    return Tuple(float(x), float(y), float(z), 0.0)


ORIGIN = point(0.0, 0.0, 0.0)
