"""
Rectpack Core Package
Packs rectangle sizes into a single container rectangle.
"""

from .geometry import Size, Rectangle, total_area
from .packer import (PackerConfig, PackingResult, PackingError, PlacementMode,
                     RectanglePacker, check_sizes, pack)
from .height_packer import HeightRectPacker
from .sprite import SpriteSource, load_sprites
from .renderer import AtlasRenderer

__all__ = [
    'Size',
    'Rectangle',
    'total_area',
    'PackerConfig',
    'PackingResult',
    'PackingError',
    'PlacementMode',
    'RectanglePacker',
    'check_sizes',
    'pack',
    'HeightRectPacker',
    'SpriteSource',
    'load_sprites',
    'AtlasRenderer'
]
