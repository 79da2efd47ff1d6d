"""
Terrain Autotile

Neighbor-pattern classification and sprite composition for terrain tiles
drawn from a 4x6 part atlas.
"""

import logging

from .core.direction import Direction
from .core.neighborhood import Neighborhood
from .core.terrain_autotile import TerrainAutotile, TileData
from .core.tile_parts import TileParts

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Direction",
    "Neighborhood",
    "TerrainAutotile",
    "TileData",
    "TileParts",
]
