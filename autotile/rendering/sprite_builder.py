"""
Terrain Autotile - Sprite Composition

Assembles a tile sprite from four atlas parts.
"""

import logging

from PIL import Image

from ..core.constants import SPRITE_PARTS
from ..core.tile_parts import TileParts
from .atlas import AtlasError, AtlasSource, SourceAtlas, load_atlas

logger = logging.getLogger(__name__)


def compose_sprite(atlas: SourceAtlas, tile_parts: TileParts) -> Image.Image:
    """
    Copy the four parts named by tile_parts into a 2x2-part image.

    Quadrants are placed the same way up as the atlas: the bottom-left
    part lands in the bottom-left of the output, and so on.

    Args:
        atlas: Atlas to sample parts from
        tile_parts: Atlas cell for each quadrant

    Returns:
        New RGBA image of size (2 * part_width, 2 * part_height)
    """
    width, height = atlas.part_size
    sprite = Image.new(atlas.image.mode, (width * SPRITE_PARTS, height * SPRITE_PARTS), (0, 0, 0, 0))

    for quadrant, (column, row) in tile_parts.quadrants():
        quad_col, quad_row = quadrant.offset
        x = quad_col * width
        y = (SPRITE_PARTS - 1 - quad_row) * height
        sprite.paste(atlas.crop_part(column, row), (x, y))

    return sprite


class SpriteBuilder:
    """
    Builds sprites from a lazily loaded atlas.

    An atlas that cannot be loaded makes build() return None rather than
    raise, so a host renders an empty tile instead of failing.
    """

    def __init__(self, source: AtlasSource | SourceAtlas | None = None):
        self._source = source
        self._atlas: SourceAtlas | None = None

    @property
    def source(self):
        return self._source

    @source.setter
    def source(self, source: AtlasSource | SourceAtlas | None):
        self._source = source
        self._atlas = None

    def atlas(self) -> SourceAtlas:
        """
        Get the bound atlas, loading it on first use.

        Raises:
            AtlasError: If the atlas is unavailable
        """
        if self._atlas is None:
            self._atlas = load_atlas(self._source)
        return self._atlas

    def build(self, tile_parts: TileParts) -> Image.Image | None:
        """Compose a sprite, or return None if the atlas is unavailable."""
        try:
            atlas = self.atlas()
        except AtlasError as e:
            logger.warning("Cannot build sprite for %s: %s", tile_parts, e)
            return None
        return compose_sprite(atlas, tile_parts)

    __call__ = build
