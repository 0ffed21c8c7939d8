"""Pixel canvas: a numpy RGB buffer that sprites are painted onto."""

from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from termarcade.core.geometry import Pos, Size
from termarcade.graphics.image import Color, Sprite, SpriteRect

# Type aliases
Buffer = NDArray[np.uint8]


def clear(buffer: Buffer, color: Color = (0, 0, 0)) -> None:
    """Clear buffer to a solid color."""
    buffer[:, :] = color


def row_bits(rows: NDArray[np.uint64], width: int) -> NDArray[np.bool_]:
    """Expand bit rows into a (len(rows), width) boolean mask, LSB first."""
    shifts = np.arange(width, dtype=np.uint64)
    return ((rows[:, None] >> shifts) & np.uint64(1)).astype(bool)


class PixelCanvas:
    """Low-resolution raster the games draw on.

    `origin` is the canvas position of sprite-space (0, 0); for the runner it
    sits on the ground line, a little in from the left edge.
    """

    def __init__(self, size: Size, origin: Pos = Pos(0, 0)) -> None:
        self.size = size
        self.origin = origin
        self.buffer: Buffer = np.zeros((size.height, size.width, 3), dtype=np.uint8)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.size.height, self.size.width

    def clear(self, color: Color = (0, 0, 0)) -> None:
        clear(self.buffer, color)

    def paint(self, x: int, y: int, color: Color) -> None:
        """Set a single pixel. Out-of-range pixels are ignored."""
        if 0 <= x < self.size.width and 0 <= y < self.size.height:
            self.buffer[y, x] = color

    def draw(self, sprite: Sprite) -> Optional[SpriteRect]:
        """Draw a sprite. Returns the visible part, or None if off-canvas."""
        rect = sprite.rect(self.origin, self.size)
        if rect is not None:
            self.blit(rect)
        return rect

    def blit(self, sprite_rect: SpriteRect) -> None:
        """Paint a clipped sprite with one masked numpy assignment."""
        image = sprite_rect.image
        offset = sprite_rect.image_offset
        x, y = sprite_rect.rect.x, sprite_rect.rect.y

        rows = np.array(
            image.pixels[offset.y:offset.y + y.size], dtype=np.uint64
        ) >> np.uint64(offset.x)
        mask = row_bits(rows, x.size)

        region = self.buffer[y.start:y.end, x.start:x.end]
        region[mask] = image.color

    def lit(self) -> NDArray[np.bool_]:
        """Boolean mask of non-black pixels."""
        return self.buffer.any(axis=2)
