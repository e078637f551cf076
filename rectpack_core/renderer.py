"""
Rendering for packed layouts.
Draws layout previews and composes sprite atlases with Pillow.
"""

import logging
from pathlib import Path
from typing import List, Sequence, Tuple

from PIL import Image, ImageDraw

from .packer import PackingResult
from .sprite import SpriteSource


class AtlasRenderer:
    """Turns a PackingResult into Pillow images."""

    def __init__(self, outline: str = 'black', fill: str = 'lightgray'):
        """
        Initialize the renderer.

        Args:
            outline: Outline color of rectangles in layout previews
            fill: Fill color of rectangles in layout previews
        """
        self.outline = outline
        self.fill = fill
        self.logger = logging.getLogger(__name__)

    def canvas_size(self, packing_result: PackingResult) -> Tuple[int, int]:
        """
        Size of a canvas that shows the container and every rectangle.

        Rectangles can extend past the reported container size, so the
        canvas covers both.
        """
        width = max([packing_result.size.width] + [r.right for r in packing_result.rectangles])
        height = max([packing_result.size.height] + [r.bottom for r in packing_result.rectangles])
        return max(width, 1), max(height, 1)

    def render_layout(self, packing_result: PackingResult, max_dimension: int = 4000,
                      color: bool = True) -> Image.Image:
        """
        Draw the outline of every placed rectangle.

        Args:
            packing_result: Packing layout result
            max_dimension: Maximum pixel dimension of the preview
            color: RGB preview (True) or grayscale (False)

        Returns:
            Preview image
        """
        mode = 'RGB' if color else 'L'
        bg_color = 'white' if color else 255
        outline = self.outline if color else 0
        fill = self.fill if color else 200

        canvas_width, canvas_height = self.canvas_size(packing_result)
        max_current = max(canvas_width, canvas_height)

        if max_current > max_dimension:
            scale_factor = max_dimension / max_current
        else:
            scale_factor = 1.0

        preview_width = max(int(canvas_width * scale_factor), 1)
        preview_height = max(int(canvas_height * scale_factor), 1)
        self.logger.info(f"Preview dimensions: {preview_width}x{preview_height} (scale {scale_factor:.3f})")

        canvas = Image.new(mode, (preview_width, preview_height), color=bg_color)
        draw = ImageDraw.Draw(canvas)

        for rect in packing_result.rectangles:
            if rect.area == 0:
                continue
            x = int(rect.x * scale_factor)
            y = int(rect.y * scale_factor)
            width = max(int(rect.width * scale_factor), 1)
            height = max(int(rect.height * scale_factor), 1)
            draw.rectangle([x, y, x + width - 1, y + height - 1], fill=fill, outline=outline)

        return canvas

    def compose_atlas(self, sprites: Sequence[SpriteSource], packing_result: PackingResult,
                      mode: str = 'RGBA') -> Image.Image:
        """
        Paste sprite images at their packed positions.

        Rectangles are emitted in size order, so sprites are matched to them
        after the same stable sort.

        Args:
            sprites: Sprites whose sizes were packed
            packing_result: Packing layout result for those sizes
            mode: Pillow mode of the atlas

        Returns:
            Atlas image
        """
        if len(sprites) != len(packing_result.rectangles):
            raise ValueError(f"Got {len(sprites)} sprites for {len(packing_result.rectangles)} rectangles")

        ordered: List[SpriteSource] = sorted(sprites, key=lambda sprite: sprite.size)
        canvas = Image.new(mode, self.canvas_size(packing_result))
        self.logger.info(f"Composing atlas {canvas.width}x{canvas.height} from {len(ordered)} sprites")

        images_placed = 0
        for sprite, rect in zip(ordered, packing_result.rectangles):
            if rect.to_size() != sprite.size:
                raise ValueError(f"Sprite {sprite.file_path} is {sprite.size}, rectangle is {rect.to_size()}")
            if rect.area == 0:
                continue

            try:
                with Image.open(sprite.file_path) as img:
                    if img.mode != mode:
                        img = img.convert(mode)
                    if img.mode == 'RGBA':
                        canvas.paste(img, (rect.x, rect.y), img)
                    else:
                        canvas.paste(img, (rect.x, rect.y))
                    images_placed += 1
            except OSError as e:
                self.logger.warning(f"Could not place image {sprite.file_path}: {e}")
                continue

        self.logger.info(f"Atlas composed ({images_placed} of {len(ordered)} images placed)")
        return canvas

    def save(self, image: Image.Image, output_path: Path, dpi: int = 300):
        """Save an image, as LZW-compressed TIFF for .tif/.tiff paths."""
        output_path = Path(output_path)
        if output_path.suffix.lower() in ('.tif', '.tiff'):
            image.save(output_path, format='TIFF', compression='tiff_lzw', dpi=(dpi, dpi))
        else:
            image.save(output_path)
        self.logger.info(f"Saved {output_path}")
