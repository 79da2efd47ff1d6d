"""
Terrain Autotile - Classifier

Chooses the atlas part for each quadrant of a tile from its neighborhood.

All four quadrants share one decision tree written for the top-left
quadrant. The other quadrants run the same tree with every direction
mirrored, and mirror the resulting part back.
"""

from .direction import Direction
from .neighborhood import Neighborhood
from .tile_parts import (
    AreaCenter,
    ConvexCorner,
    Corner,
    Edge,
    Quadrant,
    SingleTileCorner,
    TilePart,
    TileParts,
)

D = Direction


def classify_corner(
    neighborhood: Neighborhood, flip_horizontal: bool = False, flip_vertical: bool = False
) -> TilePart:
    """
    Classify one quadrant of a tile.

    Written for the top-left quadrant; flip_horizontal / flip_vertical
    select the quadrant to classify instead.

    Args:
        neighborhood: Occupancy around the tile
        flip_horizontal: Classify a right-hand quadrant
        flip_vertical: Classify a bottom quadrant

    Returns:
        Tile part to draw in that quadrant
    """

    def has(direction: Direction) -> bool:
        return neighborhood.has(direction.flip(flip_horizontal, flip_vertical))

    if has(D.UP) and has(D.LEFT):
        if has(D.UP_LEFT):
            part = AreaCenter(D.DOWN_RIGHT)
        else:
            part = ConvexCorner(D.UP_LEFT)
    elif has(D.UP):
        part = Edge(D.LEFT, D.DOWN)
    elif has(D.LEFT):
        part = Edge(D.UP, D.RIGHT)
    elif has(D.RIGHT) and has(D.DOWN):
        part = Corner(D.UP_LEFT)
    else:
        part = SingleTileCorner(D.UP_LEFT)

    return part.flip(flip_horizontal, flip_vertical)


def classify_quadrants(neighborhood: Neighborhood) -> dict[Quadrant, TilePart]:
    """Classify all four quadrants, keeping the part variants."""
    return {
        quadrant: classify_corner(neighborhood, *quadrant.mirror)
        for quadrant in Quadrant
    }


def classify(neighborhood: Neighborhood) -> TileParts:
    """Resolve a neighborhood to the atlas cells used by each quadrant."""
    parts = classify_quadrants(neighborhood)
    return TileParts.from_parts(
        top_left=parts[Quadrant.TOP_LEFT],
        top_right=parts[Quadrant.TOP_RIGHT],
        bottom_left=parts[Quadrant.BOTTOM_LEFT],
        bottom_right=parts[Quadrant.BOTTOM_RIGHT],
    )
