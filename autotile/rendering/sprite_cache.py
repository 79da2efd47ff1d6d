"""
Terrain Autotile - Sprite Cache

Composed sprites keyed by TileParts. Each autotile owns one cache; equal
TileParts values always map to the same image object.
"""

import logging
from collections import OrderedDict
from typing import Callable, Iterator

from PIL import Image

from ..core.tile_parts import TileParts

logger = logging.getLogger(__name__)

Builder = Callable[[TileParts], "Image.Image | None"]


class SpriteCache:
    """
    Lazily populated TileParts -> sprite mapping.

    Unbounded by default. With max_size set, the least recently used
    sprite is dropped once the cache grows past it. Failed builds (None)
    are not stored, so a later call retries.
    """

    def __init__(self, builder: Builder, max_size: int | None = None):
        if max_size is not None and max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.builder = builder
        self.max_size = max_size
        self._sprites: OrderedDict[TileParts, Image.Image] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get_or_build(self, tile_parts: TileParts) -> Image.Image | None:
        """Return the cached sprite for tile_parts, building it on a miss."""
        sprite = self._sprites.get(tile_parts)
        if sprite is not None:
            self.hits += 1
            logger.debug("Cache hit for %s", tile_parts)
            self._sprites.move_to_end(tile_parts)
            return sprite

        self.misses += 1
        logger.debug("Building sprite for %s", tile_parts)
        sprite = self.builder(tile_parts)
        if sprite is None:
            return None

        self._sprites[tile_parts] = sprite
        if self.max_size is not None and len(self._sprites) > self.max_size:
            evicted, _ = self._sprites.popitem(last=False)
            logger.debug("Evicted sprite for %s", evicted)
        return sprite

    def get(self, tile_parts: TileParts) -> Image.Image | None:
        """Cached sprite for tile_parts, without building."""
        return self._sprites.get(tile_parts)

    def clear(self):
        self._sprites.clear()
        self.hits = 0
        self.misses = 0

    def sprites(self) -> list[Image.Image]:
        return list(self._sprites.values())

    def __contains__(self, tile_parts: TileParts) -> bool:
        return tile_parts in self._sprites

    def __iter__(self) -> Iterator[TileParts]:
        return iter(list(self._sprites))

    def __len__(self) -> int:
        return len(self._sprites)
