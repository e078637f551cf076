"""
Sprite sources for atlas building.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from PIL import Image

from .geometry import Size


@dataclass
class SpriteSource:
    """An image file and the size it occupies in the atlas."""

    file_path: Path
    width: int
    height: int
    index: int = 0

    def __post_init__(self):
        """Ensure file_path is a Path object."""
        if isinstance(self.file_path, str):
            self.file_path = Path(self.file_path)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @classmethod
    def from_path(cls, file_path: Path, index: int = 0) -> "SpriteSource":
        """Read the pixel dimensions of an image without decoding it."""
        with Image.open(file_path) as img:
            width, height = img.size
        return cls(file_path, width, height, index)


def load_sprites(paths: Iterable[Path]) -> List[SpriteSource]:
    return [SpriteSource.from_path(path, i) for i, path in enumerate(paths)]
