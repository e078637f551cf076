"""
Geometric primitives for rectangle packing.
Sizes, placed rectangles and area helpers.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, Union


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")


@total_ordering
@dataclass(frozen=True)
class Size:
    """
    Width and height of a rectangle to be packed.

    Sizes are ordered by height first and width second, so a "greater" size
    is taller, or equally tall and wider. Sorting descending therefore yields
    the tallest rectangles first.
    """

    width: int
    height: int

    def __post_init__(self):
        _check_non_negative(width=self.width, height=self.height)

    def __lt__(self, other: "Size") -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return (self.height, self.width) < (other.height, other.width)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_square(self) -> bool:
        return self.width == self.height

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class Rectangle:
    """A placed rectangle; (x, y) is the top-left corner."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        _check_non_negative(x=self.x, y=self.y, width=self.width, height=self.height)

    @classmethod
    def from_size(cls, x: int, y: int, size: Size) -> "Rectangle":
        """Create a rectangle at (x, y) with the dimensions of `size`."""
        return cls(x, y, size.width, size.height)

    def to_size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, other: "Rectangle") -> bool:
        """
        Check whether `other` lies completely inside this rectangle.

        Bounds are inclusive: a rectangle touching the edges from the inside,
        or equal to this one, is contained.
        """
        return (self.x <= other.x
                and self.y <= other.y
                and self.right >= other.right
                and self.bottom >= other.bottom)

    def intersects(self, other: "Rectangle") -> bool:
        """
        Check whether the interiors of the two rectangles overlap.

        Bounds are exclusive: rectangles that only share an edge or a corner
        do not intersect.
        """
        return (self.x < other.right
                and self.right > other.x
                and self.y < other.bottom
                and self.bottom > other.y)


def total_area(items: Iterable[Union[Size, Rectangle]]) -> int:
    """Sum the areas of sizes and/or rectangles."""
    return sum(item.area for item in items)
