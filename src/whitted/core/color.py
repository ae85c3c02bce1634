"""Linear RGB color values.

Colors are unclamped: lighting sums may exceed 1.0 and are only clamped
when a Canvas is quantized for output.
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.tuples import approx_equal


@dataclass(frozen=True, eq=False)
class Color:
    """An immutable linear RGB triple.

    Attributes:
        red: Red channel.
        green: Green channel.
        blue: Blue channel.
    """

    red: float
    green: float
    blue: float

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            approx_equal(self.red, other.red)
            and approx_equal(self.green, other.green)
            and approx_equal(self.blue, other.blue)
        )

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Color | float) -> Color:
        # Hadamard product for colors, plain scaling for numbers
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Color(self.red * other, self.green * other, self.blue * other)

    def __rmul__(self, scalar: float) -> Color:
        return Color(self.red * scalar, self.green * scalar, self.blue * scalar)

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue


def color(red: float, green: float, blue: float) -> Color:
    """Create a Color from three channel values."""
    return Color(float(red), float(green), float(blue))


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
