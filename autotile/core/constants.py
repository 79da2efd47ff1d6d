"""
Terrain Autotile - Constants

Atlas layout and the static tile data values handed to host renderers.
"""

from enum import Enum

# Source atlas layout (columns x rows of square parts)
ATLAS_COLUMNS = 4
ATLAS_ROWS = 6

# Output sprite is 2x2 parts
SPRITE_PARTS = 2

# Number of distinct 8-neighbor occupancy patterns
NEIGHBOR_PATTERNS = 256

# Tint passed through to the host (RGBA)
WHITE = (255, 255, 255, 255)

# 4x4 identity matrix, row-major
IDENTITY_TRANSFORM = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


class ColliderType(Enum):
    """Collider shape reported with each tile."""

    NONE = "none"
    SPRITE = "sprite"
    GRID = "grid"
