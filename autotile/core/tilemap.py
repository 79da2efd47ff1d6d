"""
Terrain Autotile - Tilemap Access

The grid capability an autotile reads neighbors from, and a simple
in-memory grid implementing it.
"""

from typing import Any, NamedTuple, Protocol


class Position(NamedTuple):
    """Grid cell coordinates. y increases upwards."""

    x: int
    y: int
    layer: int = 0

    def offset(self, dx: int, dy: int) -> "Position":
        """Position of a cell on the same layer, dx/dy cells away."""
        return Position(self.x + dx, self.y + dy, self.layer)


class TilemapAccessor(Protocol):
    """Read and refresh access to the cells of a host grid.

    Any object with these two methods can back an autotile, Tilemap included.
    """

    def get_tile(self, position: Position) -> Any | None:
        """Return the tile stored at position, or None for an empty cell."""
        ...

    def refresh_tile(self, position: Position) -> None:
        """Ask the host to recompute the tile data at position."""
        ...


class Tilemap:
    """
    Sparse in-memory grid of tiles.

    Any object can be stored as a tile. Refresh requests are recorded in
    order so hosts (and tests) can see which cells need redrawing.
    """

    def __init__(self):
        self.tiles: dict[Position, Any] = {}
        self.refreshed: list[Position] = []

    def get_tile(self, position: Position) -> Any | None:
        return self.tiles.get(Position(*position))

    def set_tile(self, position: Position, tile: Any):
        """Place a tile, or clear the cell when tile is None."""
        position = Position(*position)
        if tile is None:
            self.tiles.pop(position, None)
        else:
            self.tiles[position] = tile

    def refresh_tile(self, position: Position) -> None:
        self.refreshed.append(Position(*position))

    def clear_refreshed(self):
        """Forget recorded refresh requests."""
        self.refreshed.clear()

    def fill(self, tile: Any, positions):
        """Place the same tile at every position in an iterable."""
        for position in positions:
            self.set_tile(position, tile)

    def __len__(self) -> int:
        return len(self.tiles)
