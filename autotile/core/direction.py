"""
Terrain Autotile - Direction Algebra

The eight compass directions around a grid cell, plus the mirror,
containment and axis helpers the classifier reasons with.
"""

from enum import Enum


class Direction(Enum):
    """Compass direction from a cell towards one of its eight neighbors."""

    UP = "up"
    UP_RIGHT = "up_right"
    RIGHT = "right"
    DOWN_RIGHT = "down_right"
    DOWN = "down"
    DOWN_LEFT = "down_left"
    LEFT = "left"
    UP_LEFT = "up_left"

    @property
    def offset(self) -> tuple[int, int]:
        """Grid offset (dx, dy) of this direction, with y increasing up."""
        return OFFSETS[self]

    def is_corner(self) -> bool:
        """True for the four diagonal directions."""
        return self in COMPONENTS

    def contains(self, direction: "Direction") -> bool:
        """
        Is the given direction contained in this one?

        A direction always contains itself, and a corner contains the two
        cardinal directions it is made of (UP_LEFT contains UP and LEFT).
        """
        if self is direction:
            return True
        return direction in COMPONENTS.get(self, ())

    def same_axis(self, direction: "Direction") -> bool:
        """True if both directions lie on the vertical or both on the horizontal axis."""
        axis = AXES.get(self)
        return axis is not None and axis == AXES.get(direction)

    def flip_horizontal(self) -> "Direction":
        return FLIP_HORIZONTAL.get(self, self)

    def flip_vertical(self) -> "Direction":
        return FLIP_VERTICAL.get(self, self)

    def flip(self, horizontal: bool = False, vertical: bool = False) -> "Direction":
        """Mirror this direction horizontally and/or vertically."""
        result = self
        if horizontal:
            result = result.flip_horizontal()
        if vertical:
            result = result.flip_vertical()
        return result


# =============================================================================
# Lookup Tables
# =============================================================================

OFFSETS = {
    Direction.UP: (0, 1),
    Direction.UP_RIGHT: (1, 1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN_RIGHT: (1, -1),
    Direction.DOWN: (0, -1),
    Direction.DOWN_LEFT: (-1, -1),
    Direction.LEFT: (-1, 0),
    Direction.UP_LEFT: (-1, 1),
}

# Cardinal components of each corner
COMPONENTS = {
    Direction.UP_RIGHT: (Direction.UP, Direction.RIGHT),
    Direction.DOWN_RIGHT: (Direction.DOWN, Direction.RIGHT),
    Direction.DOWN_LEFT: (Direction.DOWN, Direction.LEFT),
    Direction.UP_LEFT: (Direction.UP, Direction.LEFT),
}

AXES = {
    Direction.UP: "vertical",
    Direction.DOWN: "vertical",
    Direction.LEFT: "horizontal",
    Direction.RIGHT: "horizontal",
}

FLIP_HORIZONTAL = {
    Direction.UP_RIGHT: Direction.UP_LEFT,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN_RIGHT: Direction.DOWN_LEFT,
    Direction.DOWN_LEFT: Direction.DOWN_RIGHT,
    Direction.LEFT: Direction.RIGHT,
    Direction.UP_LEFT: Direction.UP_RIGHT,
}

FLIP_VERTICAL = {
    Direction.UP: Direction.DOWN,
    Direction.UP_RIGHT: Direction.DOWN_RIGHT,
    Direction.DOWN_RIGHT: Direction.UP_RIGHT,
    Direction.DOWN: Direction.UP,
    Direction.DOWN_LEFT: Direction.UP_LEFT,
    Direction.UP_LEFT: Direction.DOWN_LEFT,
}

CARDINALS = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)
CORNERS = (Direction.UP_RIGHT, Direction.DOWN_RIGHT, Direction.DOWN_LEFT, Direction.UP_LEFT)


def direction_from_offset(dx: int, dy: int) -> Direction:
    """
    Get the direction for a neighbor offset.

    Args:
        dx: Column offset (-1, 0 or 1)
        dy: Row offset (-1, 0 or 1), positive is up

    Returns:
        Direction pointing at that neighbor

    Raises:
        ValueError: If the offset is not one of the eight neighbor offsets
    """
    for direction, offset in OFFSETS.items():
        if offset == (dx, dy):
            return direction
    raise ValueError(f"Offset is not a neighbor offset: ({dx}, {dy})")
