"""Sprite tables for the runner game.

Bit i of a row is column i, so each literal below reads mirrored: the
rightmost digit is the leftmost pixel on screen.
"""

from termarcade.graphics.image import Image, ImageAnimation

TREX_COLOR = (220, 50, 50)
BIRD_COLOR = (120, 180, 255)
CACTUS_COLOR = (50, 190, 70)

TREX_RUNNING = ImageAnimation([
    Image(
        pixels=(
            0b_0_1_1_1_1_1_1_0_0_0_0_0_0_0,
            0b_1_1_1_1_0_0_1_1_0_0_0_0_0_0,
            0b_1_1_1_1_0_0_1_1_0_0_0_0_0_0,
            0b_1_1_1_1_1_1_1_1_0_0_0_0_0_0,
            0b_0_0_0_0_1_1_1_1_0_0_0_0_0_0,
            0b_0_0_1_1_1_1_1_1_0_0_0_0_0_0,
            0b_0_0_0_0_0_1_1_1_1_0_0_0_0_1,
            0b_0_0_0_1_1_1_1_1_1_1_0_0_1_1,
            0b_0_0_0_1_0_1_1_1_1_1_1_1_1_1,
            0b_0_0_0_0_0_1_1_1_1_1_1_1_1_1,
            0b_0_0_0_0_0_1_1_1_1_1_1_1_1_0,
            0b_0_0_0_0_0_0_1_1_1_1_1_1_0_0,
            0b_0_0_0_0_0_0_0_1_1_1_1_0_0_0,
            0b_0_0_0_0_0_0_1_1_0_1_1_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_0_1_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_1_1_0_0_0,
        ),
        width=14,
        color=TREX_COLOR,
    ),
    Image(
        pixels=(
            0b_0_1_1_1_1_1_1_0_0_0_0_0_0_0,
            0b_1_1_1_1_0_0_1_1_0_0_0_0_0_0,
            0b_1_1_1_1_0_0_1_1_0_0_0_0_0_0,
            0b_1_1_1_1_1_1_1_1_0_0_0_0_0_0,
            0b_0_0_0_0_1_1_1_1_0_0_0_0_0_0,
            0b_0_0_1_1_1_1_1_1_0_0_0_0_0_0,
            0b_0_0_0_0_0_1_1_1_1_0_0_0_0_1,
            0b_0_0_0_1_1_1_1_1_1_1_0_0_1_1,
            0b_0_0_0_1_0_1_1_1_1_1_1_1_1_1,
            0b_0_0_0_0_0_1_1_1_1_1_1_1_1_1,
            0b_0_0_0_0_0_1_1_1_1_1_1_1_1_0,
            0b_0_0_0_0_0_0_1_1_1_1_1_1_0_0,
            0b_0_0_0_0_0_0_0_1_1_1_1_0_0_0,
            0b_0_0_0_0_0_0_0_1_0_0_1_0_0_0,
            0b_0_0_0_0_0_0_0_1_0_1_1_0_0_0,
            0b_0_0_0_0_0_0_1_1_0_0_0_0_0_0,
        ),
        width=14,
        color=TREX_COLOR,
    ),
])

TREX_CROUCHING = ImageAnimation([
    Image(
        pixels=(
            0b_0_1_1_1_1_1_1_0_0_0_0_0_0_0_0_0_0_0,
            0b_1_1_1_1_0_0_1_1_0_1_1_1_1_0_0_0_0_1,
            0b_1_1_1_1_1_1_1_1_1_1_1_1_1_1_0_0_1_1,
            0b_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1,
            0b_0_0_0_0_1_1_1_1_1_1_1_1_1_1_1_1_1_1,
            0b_0_0_1_1_1_1_1_0_0_1_1_1_1_1_1_1_1_0,
            0b_0_0_0_0_0_0_0_0_1_1_1_1_1_1_1_1_0_0,
            0b_0_0_0_0_0_0_0_0_1_0_1_1_0_1_1_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_0_0_1_0_0_1_1_0_0,
            0b_0_0_0_0_0_0_0_0_0_0_1_1_0_0_0_1_0_0,
            0b_0_0_0_0_0_0_0_0_0_0_0_0_0_0_1_1_0_0,
        ),
        width=18,
        color=TREX_COLOR,
    ),
    Image(
        pixels=(
            0b_0_1_1_1_1_1_1_0_0_0_0_0_0_0_0_0_0_0,
            0b_1_1_1_1_0_0_1_1_0_1_1_1_1_0_0_0_0_1,
            0b_1_1_1_1_1_1_1_1_1_1_1_1_1_1_0_0_1_1,
            0b_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1,
            0b_0_0_0_0_1_1_1_1_1_1_1_1_1_1_1_1_1_1,
            0b_0_0_1_1_1_1_1_0_0_1_1_1_1_1_1_1_1_0,
            0b_0_0_0_0_0_0_0_0_1_1_1_1_1_1_1_1_0_0,
            0b_0_0_0_0_0_0_0_0_1_0_1_1_0_0_1_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_0_0_1_1_0_0_1_0_0,
            0b_0_0_0_0_0_0_0_0_0_0_0_0_1_0_1_1_0_0,
            0b_0_0_0_0_0_0_0_0_0_0_0_1_1_0_0_0_0_0,
        ),
        width=18,
        color=TREX_COLOR,
    ),
])

BIRD = ImageAnimation([
    Image(
        pixels=(
            0b_0_0_0_0_0_0_0_0_0_1_1_1_0_0_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_1_1_1_1_0_0_0_0,
            0b_0_0_0_0_0_0_1_1_0_1_1_1_1_1_0_0_0,
            0b_0_0_0_0_0_1_1_1_0_1_1_0_0_1_0_0_0,
            0b_0_0_1_1_1_1_1_1_1_1_1_0_0_1_1_1_1,
            0b_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1_0,
            0b_0_0_0_0_1_1_1_1_1_1_1_1_1_1_0_0_0,
            0b_0_0_1_1_1_1_1_1_1_1_1_1_1_1_0_0_0,
            0b_0_0_0_0_0_1_1_1_1_1_1_1_1_0_0_0_0,
        ),
        width=17,
        color=BIRD_COLOR,
    ),
    Image(
        pixels=(
            0b_0_0_0_0_0_0_0_0_0_1_1_1_0_0_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_1_1_1_1_0_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_1_1_1_1_1_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_1_1_0_0_1_0_0_0,
            0b_0_0_1_1_1_1_1_1_1_1_1_0_0_1_1_1_1,
            0b_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1_0,
            0b_0_0_0_0_1_1_1_1_1_1_1_1_1_1_0_0_0,
            0b_0_0_1_1_1_1_1_1_1_1_1_1_1_1_0_0_0,
            0b_0_0_0_0_0_1_1_1_1_1_1_1_1_0_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_0_0_0_0_0_0_0_0,
        ),
        width=17,
        color=BIRD_COLOR,
    ),
    Image(
        pixels=(
            0b_0_0_0_0_0_0_0_0_0_1_1_1_0_0_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_1_1_1_1_0_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_1_1_1_1_1_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_1_1_0_0_1_0_0_0,
            0b_0_0_1_1_1_1_1_1_1_1_1_0_0_1_1_1_1,
            0b_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1_0,
            0b_0_0_0_0_1_1_1_1_1_1_1_1_1_1_0_0_0,
            0b_0_0_1_1_1_1_1_1_1_1_1_1_1_1_0_0_0,
            0b_0_0_0_0_0_1_1_1_1_1_1_1_1_0_0_0_0,
            0b_0_0_0_0_0_1_1_1_0_0_0_0_0_0_0_0_0,
            0b_0_0_0_0_0_0_1_1_0_0_0_0_0_0_0_0_0,
        ),
        width=17,
        color=BIRD_COLOR,
    ),
    Image(
        pixels=(
            0b_0_0_0_0_0_0_0_0_0_1_1_1_0_0_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_1_1_1_1_0_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_1_1_1_1_1_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_1_1_0_0_1_0_0_0,
            0b_0_0_1_1_1_1_1_1_1_1_1_0_0_1_1_1_1,
            0b_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1_1_0,
            0b_0_0_0_0_1_1_1_1_1_1_1_1_1_1_0_0_0,
            0b_0_0_1_1_1_1_1_1_1_1_1_1_1_1_0_0_0,
            0b_0_0_0_0_0_1_1_1_1_1_1_1_1_0_0_0_0,
            0b_0_0_0_0_0_0_0_0_0_0_0_0_0_0_0_0_0,
        ),
        width=17,
        color=BIRD_COLOR,
    ),
])

CACTI = (
    Image(
        pixels=(
            0b_0_0_0_0_0_1_0_0_0_0_0,
            0b_0_0_0_0_1_1_1_0_0_0_0,
            0b_0_1_0_0_1_1_1_0_0_0_0,
            0b_1_1_0_0_1_1_1_0_0_1_0,
            0b_1_1_0_0_1_1_1_0_0_1_1,
            0b_1_1_0_0_1_1_1_0_0_1_1,
            0b_1_1_0_0_1_1_1_0_0_1_1,
            0b_1_1_0_0_1_1_1_0_0_1_1,
            0b_1_1_1_1_1_1_1_1_1_1_1,
            0b_0_1_1_1_1_1_1_1_1_1_0,
            0b_0_0_1_1_1_1_1_1_1_0_0,
            0b_0_0_0_0_1_1_1_0_0_0_0,
            0b_0_0_0_0_1_1_1_0_0_0_0,
            0b_0_0_0_0_1_1_1_0_0_0_0,
            0b_0_0_0_0_1_1_1_0_0_0_0,
        ),
        width=11,
        color=CACTUS_COLOR,
    ),
    Image(
        pixels=(
            0b_0_0_0_1_0_0_0,
            0b_0_0_1_1_1_0_0,
            0b_1_0_1_1_1_0_0,
            0b_1_0_1_1_1_0_1,
            0b_1_0_1_1_1_0_1,
            0b_1_1_1_1_1_0_1,
            0b_0_1_1_1_1_1_1,
            0b_0_0_1_1_1_1_0,
            0b_0_0_1_1_1_0_0,
            0b_0_0_1_1_1_0_0,
        ),
        width=7,
        color=CACTUS_COLOR,
    ),
    Image(
        pixels=(
            0b_0_0_0_1_0_0_0_0_0_0_1_0_0_0,
            0b_0_0_1_1_1_0_0_0_0_1_1_1_0_0,
            0b_1_0_1_1_1_0_0_1_0_1_1_1_0_0,
            0b_1_0_1_1_1_0_1_1_0_1_1_1_0_1,
            0b_1_0_1_1_1_0_1_1_0_1_1_1_0_1,
            0b_1_1_1_1_1_0_1_1_1_1_1_1_0_1,
            0b_0_1_1_1_1_1_1_0_1_1_1_1_1_1,
            0b_0_0_1_1_1_1_0_0_0_1_1_1_1_0,
            0b_0_0_1_1_1_0_0_0_0_1_1_1_0_0,
            0b_0_0_1_1_1_0_0_0_0_1_1_1_0_0,
        ),
        width=14,
        color=CACTUS_COLOR,
    ),
)
