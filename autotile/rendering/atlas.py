"""
Terrain Autotile - Source Atlas

Loads the 4x6 part atlas an autotile is drawn from and addresses its
parts. Atlas rows count from the bottom of the image, so row r covers
the pixel band (ATLAS_ROWS - 1 - r) * part_height from the top.
"""

import logging
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from ..core.constants import ATLAS_COLUMNS, ATLAS_ROWS

logger = logging.getLogger(__name__)


class AtlasError(Exception):
    """Raised when an atlas is missing, unreadable or has an unusable size."""

    pass


AtlasSource = Union[Image.Image, str, Path]


class SourceAtlas:
    """A validated part atlas."""

    def __init__(self, image: Image.Image):
        """
        Wrap an already loaded image.

        Args:
            image: Atlas image; width must be a multiple of 4 and height a multiple of 6

        Raises:
            AtlasError: If the image cannot be divided into 4x6 parts
        """
        width, height = image.size
        if width == 0 or height == 0 or width % ATLAS_COLUMNS or height % ATLAS_ROWS:
            raise AtlasError(
                f"Atlas size {width}x{height} is not a multiple of "
                f"{ATLAS_COLUMNS}x{ATLAS_ROWS} parts"
            )
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        self.image = image
        self.part_width = width // ATLAS_COLUMNS
        self.part_height = height // ATLAS_ROWS

    @classmethod
    def open(cls, path: Union[str, Path]) -> "SourceAtlas":
        """
        Load an atlas from an image file.

        Raises:
            AtlasError: If the file is missing or is not a readable image
        """
        path = Path(path)
        try:
            with Image.open(path) as img:
                img.load()
                image = img.convert("RGBA")
        except FileNotFoundError as e:
            raise AtlasError(f"Atlas file not found: {path}") from e
        except Image.DecompressionBombError as e:
            raise AtlasError(f"Atlas image is too large to load: {path}") from e
        except (UnidentifiedImageError, OSError) as e:
            raise AtlasError(f"Atlas file is not a readable image: {path}") from e

        logger.debug("Loaded atlas %s (%dx%d)", path, *image.size)
        return cls(image)

    @property
    def part_size(self) -> tuple[int, int]:
        return (self.part_width, self.part_height)

    def part_box(self, column: int, row: int) -> tuple[int, int, int, int]:
        """
        Pixel box (left, upper, right, lower) of an atlas part.

        Raises:
            ValueError: If column/row is outside the 4x6 grid
        """
        if not (0 <= column < ATLAS_COLUMNS and 0 <= row < ATLAS_ROWS):
            raise ValueError(f"Atlas part out of range: ({column}, {row})")

        left = column * self.part_width
        upper = (ATLAS_ROWS - 1 - row) * self.part_height
        return (left, upper, left + self.part_width, upper + self.part_height)

    def crop_part(self, column: int, row: int) -> Image.Image:
        """Copy one part out of the atlas."""
        return self.image.crop(self.part_box(column, row))


def load_atlas(source: AtlasSource | SourceAtlas | None) -> SourceAtlas:
    """
    Turn whatever a tile was configured with into a SourceAtlas.

    Args:
        source: SourceAtlas, PIL image, or path to an image file

    Raises:
        AtlasError: If no atlas is bound or it cannot be used
    """
    if source is None:
        raise AtlasError("No atlas bound")
    if isinstance(source, SourceAtlas):
        return source
    if isinstance(source, Image.Image):
        return SourceAtlas(source)
    return SourceAtlas.open(source)
