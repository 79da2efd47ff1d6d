"""Shared pytest fixtures for autotile tests."""

import pytest
from PIL import Image

from autotile.core.constants import ATLAS_COLUMNS, ATLAS_ROWS
from autotile.core.terrain_autotile import TerrainAutotile
from autotile.core.tilemap import Position, Tilemap


def part_color(column: int, row: int) -> tuple[int, int, int, int]:
    """Color of the 1x1 reference atlas part at (column, row)."""
    return (column * 40, row * 40, 0, 255)


def build_atlas(part_size: int = 1) -> Image.Image:
    """
    Build a 4x6 part atlas whose pixels encode their own position.

    Rows count from the bottom of the image. For part_size > 1 the blue
    channel encodes the pixel's offset inside its part, so a flipped or
    shifted copy of a part never matches the original.
    """
    img = Image.new("RGBA", (ATLAS_COLUMNS * part_size, ATLAS_ROWS * part_size))
    for row in range(ATLAS_ROWS):
        for column in range(ATLAS_COLUMNS):
            r, g, _, a = part_color(column, row)
            for py in range(part_size):
                for px in range(part_size):
                    x = column * part_size + px
                    y = (ATLAS_ROWS - 1 - row) * part_size + py
                    img.putpixel((x, y), (r, g, py * part_size + px, a))
    return img


def quadrant_pixels(sprite: Image.Image) -> tuple:
    """Pixels of a 2x2 sprite as (bottom_left, bottom_right, top_left, top_right)."""
    return (
        sprite.getpixel((0, 1)),
        sprite.getpixel((1, 1)),
        sprite.getpixel((0, 0)),
        sprite.getpixel((1, 0)),
    )


@pytest.fixture
def reference_atlas():
    """4x6 pixel atlas, one pixel per part."""
    return build_atlas()


@pytest.fixture
def block_atlas():
    """16x24 pixel atlas, 4x4 pixels per part."""
    return build_atlas(part_size=4)


@pytest.fixture
def tilemap():
    return Tilemap()


@pytest.fixture
def autotile(reference_atlas):
    return TerrainAutotile(base_texture=reference_atlas)


@pytest.fixture
def origin():
    return Position(0, 0, 0)


@pytest.fixture
def color_of():
    """Lookup for reference atlas part colors."""
    return part_color


@pytest.fixture
def quadrants():
    """Reader for the four quadrant pixels of a sprite built from the reference atlas."""
    return quadrant_pixels
