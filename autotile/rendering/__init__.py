"""
Sprite rendering for terrain autotiles.

Atlas loading, sprite composition and caching with Pillow, plus
conversion of composed sprites for pygame hosts.
"""

from .atlas import AtlasError, SourceAtlas, load_atlas
from .sprite_builder import SpriteBuilder, compose_sprite
from .sprite_cache import SpriteCache

__all__ = [
    "AtlasError",
    "SourceAtlas",
    "SpriteBuilder",
    "SpriteCache",
    "compose_sprite",
    "load_atlas",
]
