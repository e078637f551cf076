"""
Packer contract for rectangle packing.
Configuration, results, errors and the capacity check shared by all packers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Sequence

from .geometry import Rectangle, Size, total_area


class PlacementMode(Enum):
    """How the shelf packer records rectangle positions."""
    # Rectangles are recorded at the cursor after advancing past them,
    # rows restart at x=0. Matches the historical output exactly.
    COMPATIBLE = "compatible"
    # Rectangles are recorded at the cursor before advancing and the
    # container bounds every placed rectangle.
    CORRECTED = "corrected"


@dataclass(frozen=True)
class PackerConfig:
    """Packer configuration."""
    max_size: Optional[Size] = None  # None: container grows to fit
    rectangle_padding: int = 0  # Gap reserved around every rectangle
    border_padding: int = 0  # Gap reserved along the container edge
    placement: PlacementMode = PlacementMode.COMPATIBLE

    def __post_init__(self):
        """Validate padding and limits."""
        if self.max_size is not None and not isinstance(self.max_size, Size):
            raise ValueError(f"max_size must be a Size or None, got {self.max_size!r}")
        for name in ('rectangle_padding', 'border_padding'):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        if not isinstance(self.placement, PlacementMode):
            raise ValueError(f"Unsupported placement mode: {self.placement!r}")


@dataclass(frozen=True)
class PackingResult:
    """Placed rectangles and the container that holds them."""
    rectangles: List[Rectangle] = field(default_factory=list)  # In placement order
    size: Size = Size(0, 0)

    @property
    def packing_ratio(self) -> float:
        """
        Fraction of the container area covered by packed rectangles.

        Returns 0.0 for a zero-area container.
        """
        container_area = self.size.area
        if container_area == 0:
            return 0.0
        return total_area(self.rectangles) / container_area


class PackingError(Exception):
    """Raised when packing fails; keeps the progress made before failing."""

    def __init__(self, message: str, partial_result: Optional[PackingResult] = None):
        super().__init__(message)
        self.message = message
        self.partial_result = partial_result if partial_result is not None else PackingResult()

    def __repr__(self) -> str:
        return f"PackingError({self.message!r}, partial_result={self.partial_result!r})"


class RectanglePacker(Protocol):
    """Anything that can pack a list of sizes into one container."""

    def pack(self, sizes: Sequence[Size], config: PackerConfig) -> PackingResult:
        """
        Pack sizes into a single container rectangle.

        Args:
            sizes: Sizes of the rectangles to pack
            config: Container limit and padding

        Returns:
            PackingResult with one rectangle per input size

        Raises:
            PackingError: If the sizes cannot be packed within config.max_size
        """
        ...


def check_sizes(sizes: Sequence[Size], config: PackerConfig) -> None:
    """
    Verify that every size fits on its own inside the configured limit.

    No arrangement can place a rectangle wider or taller than the usable
    interior (max size minus border and rectangle padding on both sides).
    Does nothing when the container is unbounded.

    Raises:
        PackingError: With an empty partial result of size 0x0
    """
    if config.max_size is None:
        return

    reserved = 2 * (config.border_padding + config.rectangle_padding)
    usable_width = config.max_size.width - reserved
    usable_height = config.max_size.height - reserved

    for size in sizes:
        if size.width > usable_width or size.height > usable_height:
            raise PackingError(
                f"Rectangle size {size} is greater than max size {usable_width}x{usable_height}",
                PackingResult([], Size(0, 0))
            )


def pack(sizes: Sequence[Size], config: Optional[PackerConfig] = None,
         packer: Optional[RectanglePacker] = None) -> PackingResult:
    """
    Pack sizes with the given packer, the shelf packer by default.

    Args:
        sizes: Sizes of the rectangles to pack
        config: Packer configuration, defaults to unbounded with no padding
        packer: Packing algorithm to use

    Returns:
        PackingResult with the layout
    """
    if config is None:
        config = PackerConfig()
    if packer is None:
        from .height_packer import HeightRectPacker
        packer = HeightRectPacker()

    sizes = list(sizes)
    for size in sizes:
        if not isinstance(size, Size):
            raise ValueError(f"Expected Size, got {size!r}")

    return packer.pack(sizes, config)
