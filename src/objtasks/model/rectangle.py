"""Rectangle record with a computed area."""

from __future__ import annotations

from dataclasses import dataclass

Number = int | float


@dataclass
class Rectangle:
    """A width/height pair; area() is computed on every call."""

    width: Number
    height: Number

    def area(self) -> Number:
        return self.width * self.height


def make_rectangle(width: Number, height: Number) -> Rectangle:
    """Return a Rectangle with the given dimensions.

    Example:
        r = make_rectangle(10, 20)
        r.width     # => 10
        r.height    # => 20
        r.area()    # => 200
    """
    return Rectangle(width=width, height=height)
