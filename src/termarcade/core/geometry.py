"""Integer geometry used by sprites, canvases and layout."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Pos:
    """2D integer coordinate."""

    x: int
    y: int

    def __add__(self, other: 'Pos') -> 'Pos':
        return Pos(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Pos') -> 'Pos':
        return Pos(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Size:
    """2D dimension (width, height)."""

    width: int
    height: int

    @classmethod
    def from_pos(cls, pos: Pos) -> 'Size':
        return cls(pos.x, pos.y)

    def __add__(self, other: 'Size') -> 'Size':
        return Size(self.width + other.width, self.height + other.height)

    def __sub__(self, other: 'Size') -> 'Size':
        return Size(self.width - other.width, self.height - other.height)


@dataclass(frozen=True)
class Line:
    """Half-open interval [start, end).

    `end` must be greater than `start` for the line to cover anything; use
    `Line.checked` when that is not already guaranteed.
    """

    start: int
    end: int

    @classmethod
    def checked(cls, start: int, end: int) -> Optional['Line']:
        """Return a line, or None if it would be empty."""
        if start >= end:
            return None
        return cls(start, end)

    @property
    def size(self) -> int:
        return self.end - self.start

    def range(self) -> range:
        return range(self.start, self.end)

    def translate(self, amount: int) -> 'Line':
        return Line(self.start + amount, self.end + amount)

    def intersect(self, other: 'Line') -> Optional['Line']:
        return Line.checked(max(self.start, other.start), min(self.end, other.end))


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle made of an x and a y extent."""

    x: Line
    y: Line

    @property
    def size(self) -> Size:
        return Size(self.x.size, self.y.size)

    def intersect(self, other: 'Rect') -> Optional['Rect']:
        x = self.x.intersect(other.x)
        if x is None:
            return None
        y = self.y.intersect(other.y)
        if y is None:
            return None
        return Rect(x, y)
