"""
Terrain Autotile - Autotile Definition

A terrain tile whose sprite is assembled from a 4x6 part atlas depending
on which neighboring cells hold the same tile.
"""

import logging
from dataclasses import dataclass

from PIL import Image

from ..rendering.atlas import AtlasSource, SourceAtlas
from ..rendering.sprite_builder import SpriteBuilder
from ..rendering.sprite_cache import SpriteCache
from .classifier import classify
from .constants import IDENTITY_TRANSFORM, NEIGHBOR_PATTERNS, WHITE, ColliderType
from .neighborhood import Neighborhood
from .tile_parts import TileParts
from .tilemap import Position, TilemapAccessor

logger = logging.getLogger(__name__)


@dataclass
class TileData:
    """What the host renderer needs to draw one cell."""

    collider_type: ColliderType
    color: tuple[int, int, int, int]
    transform: tuple[tuple[float, ...], ...]
    sprite: Image.Image | None


class TerrainAutotile:
    """
    Autotiling terrain tile.

    Instances are compared by identity: a neighbor only connects when it
    holds this exact TerrainAutotile object.
    """

    def __init__(
        self,
        base_texture: AtlasSource | SourceAtlas | None = None,
        collider_type: ColliderType = ColliderType.SPRITE,
        cache_size: int | None = None,
    ):
        """
        Args:
            base_texture: Part atlas (image, path or SourceAtlas). May be bound later.
            collider_type: Collider reported for every cell
            cache_size: Maximum number of cached sprites, None for unbounded
        """
        self.collider_type = collider_type
        self._builder = SpriteBuilder(base_texture)
        self._cache = SpriteCache(self._builder, max_size=cache_size)

    @property
    def base_texture(self) -> AtlasSource | SourceAtlas | None:
        return self._builder.source

    @base_texture.setter
    def base_texture(self, texture: AtlasSource | SourceAtlas | None):
        """Bind a new atlas. Sprites built from the old one are dropped."""
        self._builder.source = texture
        self._cache.clear()

    @property
    def cache(self) -> SpriteCache:
        return self._cache

    @property
    def sprites(self) -> list[Image.Image]:
        """Distinct sprites built so far, one per TileParts value."""
        return self._cache.sprites()

    def refresh_tile(self, position: Position, tilemap: TilemapAccessor) -> None:
        """
        Request a refresh of every cell in the 3x3 block around position
        that holds this autotile. Neighbors are refreshed once; the
        refresh does not propagate further.
        """
        position = Position(*position)
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                neighbor_pos = position.offset(dx, dy)
                if tilemap.get_tile(neighbor_pos) is self:
                    tilemap.refresh_tile(neighbor_pos)

    def tile_parts_at(self, position: Position, tilemap: TilemapAccessor) -> TileParts:
        """Classify the cell at position as if it held this autotile."""
        neighborhood = Neighborhood.build(self, tilemap, position)
        return classify(neighborhood)

    def build_sprite(self, tile_parts: TileParts) -> Image.Image | None:
        """Cached sprite for tile_parts, or None if the atlas is unavailable."""
        return self._cache.get_or_build(tile_parts)

    def get_tile_data(self, position: Position, tilemap: TilemapAccessor) -> TileData:
        """
        Produce the tile data for one cell.

        Args:
            position: Cell being drawn
            tilemap: Grid the cell belongs to

        Returns:
            TileData with the composed sprite (None if the atlas is unavailable)
        """
        tile_parts = self.tile_parts_at(position, tilemap)
        return TileData(
            collider_type=self.collider_type,
            color=WHITE,
            transform=IDENTITY_TRANSFORM,
            sprite=self.build_sprite(tile_parts),
        )

    def calc_sprites(self) -> int:
        """
        Build the sprites for all 256 neighborhood patterns up front.

        Returns:
            Number of distinct sprites in the cache afterwards
        """
        distinct = {classify(Neighborhood.from_flags(flags)) for flags in range(NEIGHBOR_PATTERNS)}
        for tile_parts in distinct:
            self.build_sprite(tile_parts)

        logger.debug(
            "Precomputed %d neighborhood patterns into %d sprites",
            NEIGHBOR_PATTERNS,
            len(self._cache),
        )
        return len(self._cache)
