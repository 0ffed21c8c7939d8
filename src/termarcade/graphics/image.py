"""
Bitmap images, sprites and pixel-exact collision.

Images are stored as rows of bits: bit i of a row is column i, least
significant bit first, so the leftmost pixel is bit 0. Rows are plain ints,
but every image is limited to MAX_IMAGE_WIDTH columns so the tables stay
interchangeable with 32-bit row storage.

Sprite space uses screen orientation: x grows to the right, y grows
downward and row 0 of an image is its top row.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional, Sequence, Tuple

from termarcade.core.geometry import Line, Pos, Rect, Size

Color = Tuple[int, int, int]

# Bits per row
MAX_IMAGE_WIDTH = 32


@dataclass(frozen=True)
class Image:
    """Immutable 1-bit bitmap with a display colour."""

    pixels: Tuple[int, ...]
    width: int
    color: Color

    def __post_init__(self) -> None:
        if not 0 < self.width <= MAX_IMAGE_WIDTH:
            raise ValueError(
                f"Image width must be in 1..{MAX_IMAGE_WIDTH}, got {self.width}"
            )
        if not isinstance(self.pixels, tuple):
            object.__setattr__(self, "pixels", tuple(self.pixels))
        for row in self.pixels:
            if row < 0 or row >> self.width:
                raise ValueError(
                    f"Image row {row:#b} has bits outside width {self.width}"
                )

    @property
    def height(self) -> int:
        return len(self.pixels)


class ImageAnimation:
    """Cyclic sequence of frames."""

    def __init__(self, images: Sequence[Image]) -> None:
        if not images:
            raise ValueError("An animation needs at least one image")
        self._images = tuple(images)

    def __len__(self) -> int:
        return len(self._images)

    def __iter__(self) -> Iterator[Image]:
        return iter(self._images)

    def image(self, frame: int) -> Image:
        return self._images[frame % len(self._images)]


class Origin(Enum):
    """Which edge of the bounding box the sprite position refers to."""
    MIN = auto()  # position is the low edge (left / top)
    MAX = auto()  # position is the high edge (right / bottom), inclusive


@dataclass
class SpriteRect:
    """The visible part of a sprite, in canvas coordinates."""

    image: Image
    image_offset: Pos
    rect: Rect

    def draw(self, painter) -> None:
        """Paint every set bit through ``painter.paint(x, y, color)``."""
        image_y = self.image_offset.y

        for y in self.rect.y.range():
            bitmap = self.image.pixels[image_y] >> self.image_offset.x

            for x in self.rect.x.range():
                if bitmap & 1:
                    painter.paint(x, y, self.image.color)
                bitmap >>= 1

            image_y += 1


@dataclass
class Clip:
    """One axis of a sprite clipped against a window of `window_size`."""

    image_offset: int
    position: Line

    @classmethod
    def new(cls, window_size: int, extent: Line) -> Optional['Clip']:
        if extent.end <= 0 or window_size <= extent.start:
            return None

        return cls(
            image_offset=max(-extent.start, 0),
            position=Line(max(extent.start, 0), min(extent.end, window_size)),
        )


def _extent(position: int, size: int, origin: Origin) -> Line:
    if origin is Origin.MIN:
        return Line(position, position + size)
    return Line(position - size + 1, position + 1)


@dataclass
class Sprite:
    """An image placed in sprite space. Built fresh every frame."""

    image: Image
    position: Pos
    origin: Tuple[Origin, Origin] = (Origin.MIN, Origin.MIN)

    def bounding_box(self) -> Rect:
        origin_x, origin_y = self.origin
        return Rect(
            x=_extent(self.position.x, self.image.width, origin_x),
            y=_extent(self.position.y, self.image.height, origin_y),
        )

    def rect(self, origin: Pos, canvas_size: Size) -> Optional[SpriteRect]:
        """Project onto a canvas whose sprite-space (0, 0) sits at `origin`.

        Returns None if nothing of the sprite is visible.
        """
        box = self.bounding_box()

        x_clip = Clip.new(canvas_size.width, box.x.translate(origin.x))
        if x_clip is None:
            return None
        y_clip = Clip.new(canvas_size.height, box.y.translate(origin.y))
        if y_clip is None:
            return None

        return SpriteRect(
            image=self.image,
            image_offset=Pos(x_clip.image_offset, y_clip.image_offset),
            rect=Rect(x=x_clip.position, y=y_clip.position),
        )

    def collide(self, other: 'Sprite') -> bool:
        """Pixel-exact overlap test."""
        box_a = self.bounding_box()
        box_b = other.bounding_box()

        intersection = box_a.intersect(box_b)
        if intersection is None:
            return False

        for y in intersection.y.range():
            row_a = self.image.pixels[y - box_a.y.start]
            row_b = other.image.pixels[y - box_b.y.start]

            # Align columns on the box that starts further right
            if box_a.x.start < box_b.x.start:
                row_a >>= box_b.x.start - box_a.x.start
            else:
                row_b >>= box_a.x.start - box_b.x.start

            if row_a & row_b:
                return True

        return False
