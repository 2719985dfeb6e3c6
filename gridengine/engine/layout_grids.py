"""
layout_grids.py — GridConfig to host-neutral layout grids, and frame names.

Host editors describe a layout grid as pattern/alignment/gutter/count/offset
in absolute pixels. This module resolves units against the frame and
produces that shape; mapping it onto a specific host API is the integration
layer's job.
"""

from typing import List, Optional

from gridengine.dsl.schema import (
    BaselineGridConfig,
    ColumnGridConfig,
    GridAlignment,
    GridConfig,
    GridPreset,
    LayoutGrid,
    LayoutGridPattern,
    RowGridConfig,
)
from gridengine.engine.units import round_half_up, to_pixels


# =============================================================================
# LAYOUT GRID CONVERSION
# =============================================================================

def column_config_to_layout_grid(config: ColumnGridConfig, frame_width: float) -> LayoutGrid:
    """Column grid with margin/gutter resolved and rounded to whole pixels."""
    margin_px = to_pixels(config.margin, config.margin_unit, frame_width)
    gutter_px = to_pixels(config.gutter_size, config.gutter_unit, frame_width)

    return LayoutGrid(
        pattern=LayoutGridPattern.COLUMNS,
        alignment=config.alignment,
        gutter_size=round_half_up(gutter_px),
        count=config.count,
        offset=round_half_up(margin_px),
        visible=config.visible,
        color=config.color,
    )


def row_config_to_layout_grid(config: RowGridConfig, frame_height: float) -> LayoutGrid:
    """Row grid with margin/gutter resolved and rounded to whole pixels."""
    margin_px = to_pixels(config.margin, config.margin_unit, frame_height)
    gutter_px = to_pixels(config.gutter_size, config.gutter_unit, frame_height)

    return LayoutGrid(
        pattern=LayoutGridPattern.ROWS,
        alignment=config.alignment,
        gutter_size=round_half_up(gutter_px),
        count=config.count,
        offset=round_half_up(margin_px),
        visible=config.visible,
        color=config.color,
    )


def baseline_config_to_layout_grid(config: BaselineGridConfig) -> LayoutGrid:
    """Baselines become a single top-aligned GRID with section size = height."""
    return LayoutGrid(
        pattern=LayoutGridPattern.GRID,
        alignment=GridAlignment.MIN,
        gutter_size=0,
        count=1,
        section_size=config.height,
        offset=config.offset,
        visible=config.visible,
        color=config.color,
    )


def grid_config_to_layout_grids(
    config: GridConfig,
    frame_width: float,
    frame_height: float,
) -> List[LayoutGrid]:
    """Layout grids for every sub-grid present, in columns/rows/baseline order."""
    layout_grids = []

    if config.columns is not None:
        layout_grids.append(column_config_to_layout_grid(config.columns, frame_width))

    if config.rows is not None:
        layout_grids.append(row_config_to_layout_grid(config.rows, frame_height))

    if config.baseline is not None:
        layout_grids.append(baseline_config_to_layout_grid(config.baseline))

    return layout_grids


# =============================================================================
# FRAME NAMING
# =============================================================================

def generate_grid_frame_name(
    source: Optional[str] = None,
    preset_name: Optional[str] = None,
    columns: Optional[int] = None,
    rows: Optional[int] = None,
    is_modular: bool = False,
) -> str:
    """
    Standard frame name: "Grid - <name> - <N>col" (" × <M>row" when modular).

    The preset name wins over the source; "Custom" when neither is given.
    """
    parts = ["Grid", preset_name or source or "Custom"]

    specs = []
    if columns and columns > 0:
        specs.append(f"{columns}col")
    if is_modular and rows and rows > 0:
        specs.append(f"{rows}row")
    if specs:
        parts.append(" × ".join(specs))

    return " - ".join(parts)


def grid_config_to_frame_name(config: GridConfig, source: Optional[str] = None) -> str:
    return generate_grid_frame_name(
        source=source,
        columns=config.columns.count if config.columns else None,
        rows=config.rows.count if config.rows else None,
        is_modular=config.is_modular,
    )


def preset_to_frame_name(preset: GridPreset) -> str:
    return generate_grid_frame_name(
        preset_name=preset.name,
        columns=preset.config.columns.count if preset.config.columns else None,
        rows=preset.config.rows.count if preset.config.rows else None,
        is_modular=preset.config.is_modular,
    )
