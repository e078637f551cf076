"""
Shelf packing by height.
Places rectangles left to right in rows, shortest rectangles first.
"""

import logging
import math
import sys
from typing import List, Sequence

from .geometry import Rectangle, Size
from .packer import PackerConfig, PackingError, PackingResult, PlacementMode, check_sizes


# Height of the container when no max size is configured
UNBOUNDED = sys.maxsize


class HeightRectPacker:
    """Single-pass shelf packer that sorts rectangles by height."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def pack(self, sizes: Sequence[Size], config: PackerConfig) -> PackingResult:
        """
        Pack sizes row by row into one container.

        Args:
            sizes: Sizes of the rectangles to pack
            config: Container limit, padding and placement mode

        Returns:
            PackingResult with one rectangle per input size, in placement order

        Raises:
            PackingError: If a size can never fit, or the rows run past the
                configured max height
        """
        container = config.max_size
        if container is None:
            container = self._row_container(sizes, config)
        height = 'unbounded' if container.height == UNBOUNDED else container.height
        self.logger.info(f"Packing {len(sizes)} rectangles into {container.width}x{height} container")

        check_sizes(sizes, config)

        # Shortest first; equal heights narrowest first
        ordered = sorted(sizes)

        if config.placement == PlacementMode.CORRECTED:
            return self._place_corrected(ordered, container, config)
        return self._place_compatible(ordered, container, config)

    def _row_container(self, sizes: Sequence[Size], config: PackerConfig) -> Size:
        """
        Pick a row width for an unbounded container.

        Without a width limit every rectangle would land in a single row, so
        the row is made wide enough for roughly sqrt(n) average rectangles
        and never narrower than the widest rectangle.
        """
        border = 2 * config.border_padding
        if not sizes:
            return Size(border, UNBOUNDED)

        widths = [size.width for size in sizes]
        max_width = max(widths) + 2 * config.rectangle_padding
        average_width = sum(widths) // len(widths)
        rectangles_per_row = math.isqrt(len(widths)) + 1

        row_width = max(average_width * rectangles_per_row, max_width) + border
        self.logger.debug(f"Row width {row_width} ({rectangles_per_row} rectangles of average width {average_width})")
        return Size(row_width, UNBOUNDED)

    def _place_compatible(self, ordered: List[Size], container: Size, config: PackerConfig) -> PackingResult:
        """Place rectangles at the cursor after advancing past them."""
        padding = config.rectangle_padding
        right_limit = container.width - config.border_padding
        bottom_limit = container.height - config.border_padding

        x = y = config.border_padding + padding
        row_height = 0
        rectangles = []

        for size in ordered:
            if x + size.width + padding > right_limit:
                # New rows start at x=0 and drop by the incoming height
                x = 0
                y += size.height + 2 * padding
                row_height = 0

            if y + size.height + padding > bottom_limit:
                self._overflow(rectangles, x, y, len(ordered))

            x += size.width + 2 * padding
            row_height = max(row_height, size.height)
            rectangles.append(Rectangle.from_size(x, y, size))

        result = PackingResult(rectangles, Size(x, y + row_height))
        self.logger.info(f"Packed {len(rectangles)} rectangles into {result.size} "
                         f"(ratio {result.packing_ratio:.3f})")
        return result

    def _place_corrected(self, ordered: List[Size], container: Size, config: PackerConfig) -> PackingResult:
        """Place rectangles at the cursor before advancing past them."""
        padding = config.rectangle_padding
        right_limit = container.width - config.border_padding
        bottom_limit = container.height - config.border_padding
        row_start = config.border_padding + padding

        x = y = row_start
        row_height = 0
        widest = x
        rectangles = []

        for size in ordered:
            if x > row_start and x + size.width + padding > right_limit:
                x = row_start
                y += row_height + 2 * padding
                row_height = 0

            if y + size.height + padding > bottom_limit:
                self._overflow(rectangles, x, y, len(ordered))

            rectangles.append(Rectangle.from_size(x, y, size))
            x += size.width + 2 * padding
            row_height = max(row_height, size.height)
            widest = max(widest, x)

        result = PackingResult(rectangles, Size(widest, y + row_height))
        self.logger.info(f"Packed {len(rectangles)} rectangles into {result.size} "
                         f"(ratio {result.packing_ratio:.3f})")
        return result

    def _overflow(self, rectangles: List[Rectangle], x: int, y: int, total: int):
        self.logger.warning(f"Container full after {len(rectangles)} of {total} rectangles")
        raise PackingError(
            "Could not fit all rectangles in max size",
            PackingResult(list(rectangles), Size(x, y))
        )
