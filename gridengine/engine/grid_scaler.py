"""
grid_scaler.py — Re-target a grid configuration to a different frame size.

Structural intent is preserved: counts, alignment, visibility and colors pass
through, percentage values are already resolution independent and are copied
unchanged. Only pixel values are multiplied.

Precondition: original_width and original_height are > 0.
"""

from typing import Optional, Union

from gridengine.dsl.schema import (
    BaselineGridConfig,
    ColumnGridConfig,
    GridConfig,
    GridUnit,
    RowGridConfig,
)


# =============================================================================
# SCALING
# =============================================================================

def _scale_tracks(
    config: Union[ColumnGridConfig, RowGridConfig],
    scale: float,
) -> Union[ColumnGridConfig, RowGridConfig]:
    """Scale pixel-unit gutter and margin of a column/row grid."""
    gutter_size = config.gutter_size
    if config.gutter_unit == GridUnit.PIXEL:
        gutter_size = gutter_size * scale

    margin = config.margin
    if config.margin_unit == GridUnit.PIXEL:
        margin = margin * scale

    return config.model_copy(update={"gutter_size": gutter_size, "margin": margin})


def _scale_baseline(config: BaselineGridConfig, scale: float) -> BaselineGridConfig:
    return config.model_copy(
        update={"height": config.height * scale, "offset": config.offset * scale}
    )


def scale_grid(
    config: GridConfig,
    original_width: float,
    original_height: float,
    new_width: float,
    new_height: float,
) -> GridConfig:
    """
    Scale a grid configuration from one frame size to another.

    Columns follow the width scale, rows the height scale. Baseline height
    and offset both follow min(width_scale, height_scale) so the rhythm never
    outgrows the more constrained axis.

    Args:
        config: Original grid configuration
        original_width: Frame width the config was authored for
        original_height: Frame height the config was authored for
        new_width: Target frame width
        new_height: Target frame height

    Returns:
        A new GridConfig; absent sub-grids stay absent
    """
    width_scale = new_width / original_width
    height_scale = new_height / original_height
    baseline_scale = min(width_scale, height_scale)

    columns: Optional[ColumnGridConfig] = None
    rows: Optional[RowGridConfig] = None
    baseline: Optional[BaselineGridConfig] = None

    if config.columns is not None:
        columns = _scale_tracks(config.columns, width_scale)

    if config.rows is not None:
        rows = _scale_tracks(config.rows, height_scale)

    if config.baseline is not None:
        baseline = _scale_baseline(config.baseline, baseline_scale)

    return GridConfig(columns=columns, rows=rows, baseline=baseline)


def scale_grid_for_frame_size(
    config: GridConfig,
    original_width: float,
    original_height: float,
    target_width: float,
    target_height: float,
) -> GridConfig:
    """
    Scale a grid authored for one frame onto a target frame.

    Column and row counts are never changed by scaling; only pixel-unit
    gutters, margins and baseline values follow the new size.
    """
    return scale_grid(config, original_width, original_height, target_width, target_height)


def needs_scaling(
    original_width: float,
    original_height: float,
    target_width: float,
    target_height: float,
    tolerance: float = 1,
) -> bool:
    """True when either dimension differs by more than tolerance pixels."""
    return (
        abs(original_width - target_width) > tolerance
        or abs(original_height - target_height) > tolerance
    )
