"""
Terrain Autotile - Tile Parts

The five kinds of atlas part a quadrant can be drawn with, and the
TileParts value naming the atlas cell for each quadrant of a tile.

Atlas cells are addressed as (column, row) in a 4x6 grid, with row 0
at the bottom of the atlas.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, Union

from .direction import Direction

D = Direction


# =============================================================================
# Part Variants
# =============================================================================

@dataclass(frozen=True)
class _CornerPart:
    """Shared behavior of the single-direction variants."""

    direction: Direction

    def __post_init__(self):
        assert self.direction.is_corner(), f"{type(self).__name__} needs a corner, got {self.direction}"

    def flip(self, horizontal: bool = False, vertical: bool = False):
        return replace(self, direction=self.direction.flip(horizontal, vertical))

    @property
    def _left(self) -> bool:
        return self.direction.contains(D.LEFT)

    @property
    def _up(self) -> bool:
        return self.direction.contains(D.UP)


@dataclass(frozen=True)
class Corner(_CornerPart):
    """Concave 90 degree corner."""

    def position(self) -> tuple[int, int]:
        return (0 if self._left else 3, 3 if self._up else 0)


@dataclass(frozen=True)
class ConvexCorner(_CornerPart):
    """Corner where both edges continue but the diagonal cell is empty."""

    def position(self) -> tuple[int, int]:
        return (2 if self._left else 3, 5 if self._up else 4)


@dataclass(frozen=True)
class AreaCenter(_CornerPart):
    """Interior fill, all surrounding cells of the quadrant occupied."""

    def position(self) -> tuple[int, int]:
        return (1 if self._left else 2, 2 if self._up else 1)


@dataclass(frozen=True)
class SingleTileCorner(_CornerPart):
    """Corner of an isolated single cell."""

    def position(self) -> tuple[int, int]:
        return (0 if self._left else 1, 5 if self._up else 4)


@dataclass(frozen=True)
class Edge:
    """
    Straight edge piece.

    main is the exposed side the edge runs along, secondary the direction
    towards the rest of the edge. Both must be cardinal and on different axes.
    """

    main: Direction
    secondary: Direction

    def __post_init__(self):
        assert not self.main.is_corner(), f"Edge main direction is a corner: {self.main}"
        assert not self.secondary.is_corner(), f"Edge secondary direction is a corner: {self.secondary}"
        assert not self.main.same_axis(self.secondary), (
            f"Edge directions share an axis: {self.main}, {self.secondary}"
        )

    def flip(self, horizontal: bool = False, vertical: bool = False) -> "Edge":
        return Edge(
            self.main.flip(horizontal, vertical),
            self.secondary.flip(horizontal, vertical),
        )

    def position(self) -> tuple[int, int]:
        if self.main in (D.UP, D.DOWN):
            return (1 if self.secondary == D.LEFT else 2, 3 if self.main == D.UP else 0)
        return (0 if self.main == D.LEFT else 3, 2 if self.secondary == D.UP else 1)


TilePart = Union[Corner, ConvexCorner, AreaCenter, SingleTileCorner, Edge]


# =============================================================================
# Quadrant Assignment
# =============================================================================

class Quadrant(Enum):
    """One of the four sub-regions of a rendered tile."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"

    @property
    def mirror(self) -> tuple[bool, bool]:
        """(horizontal, vertical) flips that map the top-left quadrant onto this one."""
        return QUADRANT_MIRRORS[self]

    @property
    def offset(self) -> tuple[int, int]:
        """(column, row) of this quadrant in the 2x2 output, row 0 at the bottom."""
        return QUADRANT_OFFSETS[self]


QUADRANT_MIRRORS = {
    Quadrant.TOP_LEFT: (False, False),
    Quadrant.TOP_RIGHT: (True, False),
    Quadrant.BOTTOM_LEFT: (False, True),
    Quadrant.BOTTOM_RIGHT: (True, True),
}

QUADRANT_OFFSETS = {
    Quadrant.TOP_LEFT: (0, 1),
    Quadrant.TOP_RIGHT: (1, 1),
    Quadrant.BOTTOM_LEFT: (0, 0),
    Quadrant.BOTTOM_RIGHT: (1, 0),
}


@dataclass(frozen=True)
class TileParts:
    """Atlas (column, row) used for each quadrant of one tile. Hashable, used as a cache key."""

    top_left: tuple[int, int]
    top_right: tuple[int, int]
    bottom_left: tuple[int, int]
    bottom_right: tuple[int, int]

    @classmethod
    def from_parts(
        cls,
        top_left: TilePart,
        top_right: TilePart,
        bottom_left: TilePart,
        bottom_right: TilePart,
    ) -> "TileParts":
        """Resolve four classified parts to their atlas coordinates."""
        return cls(
            top_left=top_left.position(),
            top_right=top_right.position(),
            bottom_left=bottom_left.position(),
            bottom_right=bottom_right.position(),
        )

    def __getitem__(self, quadrant: Quadrant) -> tuple[int, int]:
        return getattr(self, quadrant.value)

    def quadrants(self) -> Iterator[tuple[Quadrant, tuple[int, int]]]:
        """Yield (quadrant, atlas position) pairs."""
        for quadrant in Quadrant:
            yield quadrant, self[quadrant]
