"""
grid_geometry.py — Column, row and module sizes for a grid on a frame.

All outputs are in PIXELS. Results are never clamped: an over-constrained
config (margins and gutters wider than the frame) yields a negative size,
which GridValidator is responsible for reporting.
"""

import math
from typing import List, Tuple, Union

from gridengine.dsl.schema import ColumnGridConfig, ModuleDimensions, RowGridConfig
from gridengine.engine.units import to_pixels


# =============================================================================
# TRACK SIZES
# =============================================================================

def _track_size(config: Union[ColumnGridConfig, RowGridConfig], total_size: float) -> float:
    """Size of one column/row along an axis of length total_size."""
    margin_px = to_pixels(config.margin, config.margin_unit, total_size)
    gutter_px = to_pixels(config.gutter_size, config.gutter_unit, total_size)

    available = total_size - (margin_px * 2)
    total_gutter = gutter_px * (config.count - 1)

    return _divide(available - total_gutter, config.count)


def _divide(numerator: float, count: int) -> float:
    """IEEE-style division: a zero count gives ±inf (or nan) instead of raising."""
    if count == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / count


def calculate_column_width(config: ColumnGridConfig, frame_width: float) -> float:
    """
    Width of each column in pixels.

    Args:
        config: Column grid configuration
        frame_width: Total frame width

    Returns:
        (frame_width - 2 * margin - gutter * (count - 1)) / count
    """
    return _track_size(config, frame_width)


def calculate_row_height(config: RowGridConfig, frame_height: float) -> float:
    """Height of each row in pixels (mirror of calculate_column_width)."""
    return _track_size(config, frame_height)


def calculate_module_dimensions(
    columns: ColumnGridConfig,
    rows: RowGridConfig,
    frame_width: float,
    frame_height: float,
) -> ModuleDimensions:
    """Size of one module of a modular (columns × rows) grid."""
    return ModuleDimensions(
        width=calculate_column_width(columns, frame_width),
        height=calculate_row_height(rows, frame_height),
    )


# =============================================================================
# TRACK POSITIONS
# =============================================================================

def track_positions(
    config: Union[ColumnGridConfig, RowGridConfig],
    total_size: float,
) -> List[Tuple[float, float]]:
    """
    (start, end) edges of every column/row, walking from the leading margin.

    Each track ends start + size later; the next one starts a gutter after that.
    """
    margin_px = to_pixels(config.margin, config.margin_unit, total_size)
    gutter_px = to_pixels(config.gutter_size, config.gutter_unit, total_size)
    size = _track_size(config, total_size)

    positions = []
    start = margin_px
    for _ in range(config.count):
        end = start + size
        positions.append((start, end))
        start = end + gutter_px
    return positions


def column_positions(config: ColumnGridConfig, frame_width: float) -> List[Tuple[float, float]]:
    """Left/right edges of every column."""
    return track_positions(config, frame_width)


def row_positions(config: RowGridConfig, frame_height: float) -> List[Tuple[float, float]]:
    """Top/bottom edges of every row."""
    return track_positions(config, frame_height)
