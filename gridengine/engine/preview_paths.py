"""
preview_paths.py — Line segments for grid previews.

Generators take a sub-grid config and a preview size and return a fresh
list of LineSegment each call. They hold no state, so identical inputs give
identical, identically ordered output (safe to cache or snapshot).

This module NEVER draws. Consumers render the segments however they like;
segments_to_svg_path() is provided for SVG-based previews.
"""

import math
from typing import List, Sequence

from gridengine.config import EngineSettings
from gridengine.dsl.schema import (
    BaselineGridConfig,
    ColumnGridConfig,
    GridConfig,
    LineSegment,
    RowGridConfig,
)
from gridengine.engine.grid_geometry import column_positions, row_positions
from gridengine.engine.units import format_number


# =============================================================================
# SEGMENT GENERATORS
# =============================================================================

def generate_column_segments(config: ColumnGridConfig, width: float, height: float) -> List[LineSegment]:
    """
    Full-height verticals at the left and right edge of every column.

    Produces 2 * count segments, left to right.
    """
    segments = []
    for left, right in column_positions(config, width):
        segments.append(LineSegment(x1=left, y1=0, x2=left, y2=height))
        segments.append(LineSegment(x1=right, y1=0, x2=right, y2=height))
    return segments


def generate_row_segments(config: RowGridConfig, width: float, height: float) -> List[LineSegment]:
    """
    Full-width horizontals at the top and bottom edge of every row.

    Produces 2 * count segments, top to bottom.
    """
    segments = []
    for top, bottom in row_positions(config, height):
        segments.append(LineSegment(x1=0, y1=top, x2=width, y2=top))
        segments.append(LineSegment(x1=0, y1=bottom, x2=width, y2=bottom))
    return segments


def generate_baseline_segments(config: BaselineGridConfig, width: float, height: float) -> List[LineSegment]:
    """
    Full-width horizontals at offset, offset + h, offset + 2h, ... below height.

    Produces max(0, ceil((height - offset) / h)) segments. A non-positive
    baseline height produces none (the series would never advance).
    """
    if config.height <= 0:
        return []

    count = max(0, math.ceil((height - config.offset) / config.height))
    segments = []
    for i in range(count):
        y = config.offset + i * config.height
        segments.append(LineSegment(x1=0, y1=y, x2=width, y2=y))
    return segments


def generate_grid_segments(config: GridConfig, width: float, height: float) -> List[LineSegment]:
    """All segments for a config: columns, then rows, then baseline."""
    segments: List[LineSegment] = []
    if config.columns is not None:
        segments.extend(generate_column_segments(config.columns, width, height))
    if config.rows is not None:
        segments.extend(generate_row_segments(config.rows, width, height))
    if config.baseline is not None:
        segments.extend(generate_baseline_segments(config.baseline, width, height))
    return segments


# =============================================================================
# SVG PATH DATA
# =============================================================================

def segments_to_svg_path(segments: Sequence[LineSegment]) -> str:
    """Encode segments as SVG path data: "M x1 y1 L x2 y2 " per segment."""
    return "".join(
        f"M {format_number(s.x1)} {format_number(s.y1)} "
        f"L {format_number(s.x2)} {format_number(s.y2)} "
        for s in segments
    )


def generate_column_grid_svg_path(config: ColumnGridConfig, width: float, height: float) -> str:
    return segments_to_svg_path(generate_column_segments(config, width, height))


def generate_row_grid_svg_path(config: RowGridConfig, width: float, height: float) -> str:
    return segments_to_svg_path(generate_row_segments(config, width, height))


def generate_baseline_grid_svg_path(config: BaselineGridConfig, width: float, height: float) -> str:
    return segments_to_svg_path(generate_baseline_segments(config, width, height))


# =============================================================================
# CONFIGURED PREVIEW SIZE
# =============================================================================

def generate_preview_segments(config: GridConfig, settings: EngineSettings) -> List[LineSegment]:
    """All segments for a config at the preview size from settings."""
    return generate_grid_segments(config, settings.preview_width, settings.preview_height)


def generate_preview_svg_path(config: GridConfig, settings: EngineSettings) -> str:
    """SVG path data for a config at the preview size from settings."""
    return segments_to_svg_path(generate_preview_segments(config, settings))
