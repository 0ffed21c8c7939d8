"""Rasterise a pixel buffer into Unicode Braille cells (2x4 pixels each)."""

from dataclasses import dataclass
from typing import List

import numpy as np
from numpy.typing import NDArray

from termarcade.core.geometry import Size

CELL_WIDTH = 2
CELL_HEIGHT = 4

BRAILLE_BASE = 0x2800

# Dot bit for each (row, column) inside a cell
DOT_WEIGHTS = np.array(
    [
        [0x01, 0x08],
        [0x02, 0x10],
        [0x04, 0x20],
        [0x40, 0x80],
    ],
    dtype=np.uint16,
)


@dataclass
class BrailleFrame:
    """Text rows plus the RGB colour of each cell."""

    lines: List[str]
    colors: NDArray[np.uint8]


def pixel_size(cells: Size) -> Size:
    """Canvas size in pixels for a panel of `cells` terminal cells."""
    return Size(cells.width * CELL_WIDTH, cells.height * CELL_HEIGHT)


def to_braille(buffer: NDArray[np.uint8]) -> BrailleFrame:
    """Convert an (h, w, 3) buffer.

    A dot is raised for every non-black pixel. A cell takes the per-channel
    maximum of its pixels, which is the colour of its lit pixels when they
    agree. Buffers whose size is not a multiple of the cell size are padded
    with black.
    """
    height, width = buffer.shape[:2]
    rows = -(-height // CELL_HEIGHT)
    cols = -(-width // CELL_WIDTH)

    padded = np.zeros((rows * CELL_HEIGHT, cols * CELL_WIDTH, 3), dtype=np.uint8)
    padded[:height, :width] = buffer

    cells = padded.reshape(rows, CELL_HEIGHT, cols, CELL_WIDTH, 3)
    lit = cells.any(axis=4)

    codes = (lit * DOT_WEIGHTS[None, :, None, :]).sum(axis=(1, 3))
    colors = cells.max(axis=(1, 3))

    lines = [
        "".join(chr(BRAILLE_BASE + int(code)) for code in row)
        for row in codes
    ]
    return BrailleFrame(lines=lines, colors=colors)
