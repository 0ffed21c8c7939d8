"""Graphics module for termarcade: bitmaps, sprites and the pixel canvas."""

from termarcade.graphics.image import (
    Color,
    Image,
    ImageAnimation,
    Origin,
    Sprite,
    SpriteRect,
    MAX_IMAGE_WIDTH,
)
from termarcade.graphics.canvas import PixelCanvas
from termarcade.graphics.braille import BrailleFrame, to_braille, pixel_size

__all__ = [
    "Color",
    "Image",
    "ImageAnimation",
    "Origin",
    "Sprite",
    "SpriteRect",
    "MAX_IMAGE_WIDTH",
    "PixelCanvas",
    "BrailleFrame",
    "to_braille",
    "pixel_size",
]
