"""
Core autotiling functionality.

This package contains the direction algebra, neighborhood sampling,
tile part classification and the autotile definition itself.
"""

from .classifier import classify, classify_corner
from .direction import Direction
from .neighborhood import Neighborhood
from .terrain_autotile import TerrainAutotile, TileData
from .tile_parts import (
    AreaCenter,
    ConvexCorner,
    Corner,
    Edge,
    SingleTileCorner,
    TilePart,
    TileParts,
)
from .tilemap import Position, Tilemap, TilemapAccessor

__all__ = [
    "AreaCenter",
    "ConvexCorner",
    "Corner",
    "Direction",
    "Edge",
    "Neighborhood",
    "Position",
    "SingleTileCorner",
    "TerrainAutotile",
    "TileData",
    "TilePart",
    "TileParts",
    "Tilemap",
    "TilemapAccessor",
    "classify",
    "classify_corner",
]
