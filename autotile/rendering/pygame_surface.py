"""
Terrain Autotile - Pygame Surfaces

Converts composed sprites into pygame Surfaces for hosts that draw with
pygame. Kept separate from the Pillow modules so the core library does
not need pygame installed.
"""

import pygame
from pygame import Surface
from PIL import Image

from ..core.terrain_autotile import TerrainAutotile
from ..core.tile_parts import TileParts
from ..core.tilemap import Position, TilemapAccessor


def to_surface(image: Image.Image, scale: int = 1) -> Surface:
    """Convert a PIL image to a pygame Surface with per-pixel alpha."""
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    if scale != 1:
        image = image.resize((image.width * scale, image.height * scale), Image.Resampling.NEAREST)
    return pygame.image.frombytes(image.tobytes(), image.size, "RGBA")


class TileSurfaces:
    """
    Pygame surfaces for one autotile.

    The autotile's sprite cache stays authoritative: a surface is reused
    only while the autotile still returns the same sprite object for
    those TileParts, so rebinding the atlas or cache eviction yields a
    fresh surface.
    """

    def __init__(self, autotile: TerrainAutotile, scale: int = 1):
        self.autotile = autotile
        self.scale = scale
        self._cache: dict[TileParts, tuple[Image.Image, Surface]] = {}

    def render_tile(self, position: Position, tilemap: TilemapAccessor) -> Surface | None:
        """
        Surface for the autotile at position.

        Returns:
            Surface, or None when the autotile's atlas is unavailable
        """
        tile_parts = self.autotile.tile_parts_at(position, tilemap)
        sprite = self.autotile.build_sprite(tile_parts)
        if sprite is None:
            self._cache.pop(tile_parts, None)
            return None

        cached = self._cache.get(tile_parts)
        if cached is not None and cached[0] is sprite:
            return cached[1]

        surf = to_surface(sprite, self.scale)
        self._cache[tile_parts] = (sprite, surf)
        return surf

    def clear(self):
        self._cache.clear()
