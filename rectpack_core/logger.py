"""
Logging helpers for rectangle packing.
Basic logging setup and plain-text reports of packing runs.
"""

import logging
from datetime import datetime
from typing import Optional

from .packer import PackingResult


def setup_logging(log_level: int = logging.INFO) -> None:
    """Setup basic logging configuration."""
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def format_packing_report(result: PackingResult, num_sizes: int, elapsed: float,
                          error: Optional[str] = None) -> str:
    """
    Build a plain-text summary of a packing run.

    Args:
        result: Final result, or the partial result of a failed run
        num_sizes: Number of sizes requested
        elapsed: Packing time in seconds
        error: Error message if packing failed

    Returns:
        Multi-line report
    """
    placed = len(result.rectangles)

    report = f"""Rectangle Packing Report
{'=' * 50}

Layout:
    Container Size: {result.size.width} x {result.size.height}
    Container Area: {result.size.area:,}
    Rectangles Placed: {placed}/{num_sizes}
    Packing Ratio: {result.packing_ratio:.3f}

Process:
    Packing Time: {elapsed:.4f} seconds
    Completion Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}

"""

    if error:
        report += f"""Error Information:
    Error: {error}

"""

    if not error and placed == num_sizes:
        status = "SUCCESS"
    elif placed > 0:
        status = "PARTIAL"
    else:
        status = "FAILED"
    report += f"Final Status: {status}\n"
    return report


def log_packing_report(result: PackingResult, num_sizes: int, elapsed: float,
                       error: Optional[str] = None,
                       logger: Optional[logging.Logger] = None) -> None:
    """Emit a packing report, one log record per line."""
    logger = logger or logging.getLogger(__name__)
    level = logging.WARNING if error else logging.INFO
    for line in format_packing_report(result, num_sizes, elapsed, error).splitlines():
        if line.strip():
            logger.log(level, line)
