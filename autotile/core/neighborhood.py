"""
Terrain Autotile - Neighborhood

Snapshot of which of a cell's eight neighbors hold the same tile.
"""

from typing import Any

from .direction import Direction
from .tilemap import Position, TilemapAccessor

# Bit assigned to each neighbor. Matches the scan order used by
# Neighborhood.build (top row first, right to left).
BITS = {
    Direction.UP_RIGHT: 0b_000_00_001,
    Direction.UP: 0b_000_00_010,
    Direction.UP_LEFT: 0b_000_00_100,
    Direction.RIGHT: 0b_000_01_000,
    Direction.LEFT: 0b_000_10_000,
    Direction.DOWN_RIGHT: 0b_001_00_000,
    Direction.DOWN: 0b_010_00_000,
    Direction.DOWN_LEFT: 0b_100_00_000,
}

ALL_NEIGHBORS = 0xFF


class Neighborhood:
    """
    Immutable 8-bit occupancy pattern around a cell.

    A neighbor counts as present only when it holds the very same tile
    as the cell being classified (equality on the tile handle, not a
    looser notion of terrain type).
    """

    __slots__ = ("_flags",)

    def __init__(self, flags: int = 0):
        if not 0 <= flags <= ALL_NEIGHBORS:
            raise ValueError(f"Neighborhood flags out of range: {flags}")
        self._flags = flags

    @classmethod
    def from_flags(cls, flags: int) -> "Neighborhood":
        return cls(flags)

    @classmethod
    def from_directions(cls, *directions: Direction) -> "Neighborhood":
        """Build a neighborhood with exactly the given neighbors present."""
        flags = 0
        for direction in directions:
            flags |= BITS[direction]
        return cls(flags)

    @classmethod
    def build(cls, tile: Any, tilemap: TilemapAccessor, position: Position) -> "Neighborhood":
        """
        Sample the 3x3 block around position.

        Args:
            tile: Tile being classified; neighbors must be equal to it
            tilemap: Grid to read neighbors from
            position: Cell being classified

        Returns:
            Neighborhood snapshot for that cell
        """
        position = Position(*position)
        flags = 0
        flag = 1
        for dy in (1, 0, -1):
            for dx in (1, 0, -1):
                if dx == 0 and dy == 0:
                    continue
                neighbor = tilemap.get_tile(position.offset(dx, dy))
                if neighbor is not None and neighbor == tile:
                    flags |= flag
                flag <<= 1
        return cls(flags)

    @property
    def flags(self) -> int:
        return self._flags

    def has(self, direction: Direction) -> bool:
        """Is the neighbor in this direction occupied? Unknown directions are never occupied."""
        bit = BITS.get(direction)
        if bit is None:
            return False
        return self._flags & bit == bit

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Neighborhood):
            return NotImplemented
        return self._flags == other._flags

    def __hash__(self) -> int:
        return hash(self._flags)

    def __repr__(self) -> str:
        return f"Neighborhood({self._flags:#010b})"
