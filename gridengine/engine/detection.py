"""
detection.py — Normalize detected grid fields and turn them into a GridConfig.

A detection service (image analysis) reports a best-guess grid as loosely
typed numbers. Nothing here talks to that service or parses its text output;
this module only takes the already-decoded fields, clamps them to the bounds
the engine can work with, and builds a GridConfig from them.
"""

import logging
import math
from typing import Any, Mapping, Optional

from gridengine.dsl.schema import (
    ColumnGridConfig,
    DetectedGrid,
    GridAlignment,
    GridColor,
    GridConfig,
    GridPattern,
    GridSymmetry,
    GridUnit,
    RowGridConfig,
)
from gridengine.engine.units import clamp, round_half_up

logger = logging.getLogger(__name__)


# =============================================================================
# BOUNDS
# =============================================================================

MIN_TRACKS = 1
MAX_TRACKS = 24
MAX_GUTTER_PERCENT = 20
MAX_MARGIN_PERCENT = 30
DEFAULT_MARGIN_PERCENT = 5.0
DEFAULT_GUTTER_PERCENT = 2.5
DEFAULT_CONFIDENCE = 50.0

DETECTED_COLUMN_COLOR = GridColor(r=1.0, g=0.2, b=0.2, a=0.15)
DETECTED_ROW_COLOR = GridColor(r=0.2, g=0.4, b=1.0, a=0.15)


# =============================================================================
# NORMALIZATION
# =============================================================================

def normalize_number(value: Any, min_val: float, max_val: float) -> Optional[float]:
    """Coerce to float and clamp; None for missing or non-numeric values."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return clamp(number, min_val, max_val)


def normalize_grid_type(value: Any) -> GridPattern:
    """Known grid type (case-insensitive), otherwise 'none'."""
    if isinstance(value, str):
        try:
            return GridPattern(value.lower())
        except ValueError:
            pass
    return GridPattern.NONE


def normalize_symmetry(value: Any) -> GridSymmetry:
    """'asymmetric' (case-insensitive) or 'symmetric'."""
    if isinstance(value, str) and value.lower() == GridSymmetry.ASYMMETRIC.value:
        return GridSymmetry.ASYMMETRIC
    return GridSymmetry.SYMMETRIC


def _field(raw: Mapping[str, Any], name: str) -> Any:
    """Read a field by camelCase name, falling back to snake_case."""
    if name in raw:
        return raw[name]
    snake = "".join(f"_{c.lower()}" if c.isupper() else c for c in name)
    return raw.get(snake)


def _margin(raw: Mapping[str, Any], name: str) -> float:
    value = normalize_number(_field(raw, name), 0, MAX_MARGIN_PERCENT)
    return DEFAULT_MARGIN_PERCENT if value is None else value


def normalize_detected_grid(
    raw: Mapping[str, Any],
    source_width: Optional[float] = None,
    source_height: Optional[float] = None,
) -> DetectedGrid:
    """
    Clamp detection fields into the ranges the engine accepts.

    Args:
        raw: Decoded detection fields (camelCase or snake_case keys)
        source_width: Width of the analyzed image, if known
        source_height: Height of the analyzed image, if known

    Returns:
        DetectedGrid with counts in 1-24, gutters in 0-20 %, margins in
        0-30 % (5 % when missing) and confidence in 0-100 (50 when missing)
    """
    confidence = normalize_number(_field(raw, "confidence"), 0, 100)
    aspect_ratio = _field(raw, "aspectRatio")
    if not isinstance(aspect_ratio, str) or not aspect_ratio:
        if source_width and source_height:
            aspect_ratio = f"{source_width:g}:{source_height:g}"
        else:
            aspect_ratio = "4:3"
    notes = _field(raw, "notes")

    detected = DetectedGrid(
        grid_type=normalize_grid_type(_field(raw, "gridType")),
        columns=normalize_number(_field(raw, "columns"), MIN_TRACKS, MAX_TRACKS),
        gutter_percent=normalize_number(_field(raw, "gutterPercent"), 0, MAX_GUTTER_PERCENT),
        margin_left_percent=_margin(raw, "marginLeftPercent"),
        margin_right_percent=_margin(raw, "marginRightPercent"),
        margin_top_percent=_margin(raw, "marginTopPercent"),
        margin_bottom_percent=_margin(raw, "marginBottomPercent"),
        rows=normalize_number(_field(raw, "rows"), MIN_TRACKS, MAX_TRACKS),
        row_gutter_percent=normalize_number(_field(raw, "rowGutterPercent"), 0, MAX_GUTTER_PERCENT),
        aspect_ratio=aspect_ratio,
        symmetry=normalize_symmetry(_field(raw, "symmetry")),
        confidence=DEFAULT_CONFIDENCE if confidence is None else confidence,
        notes=notes if isinstance(notes, str) else "",
        source_width=source_width,
        source_height=source_height,
    )
    logger.debug(
        f"Normalized detected grid: {detected.grid_type.value}, "
        f"columns={detected.columns}, rows={detected.rows}, confidence={detected.confidence}"
    )
    return detected


# =============================================================================
# CONVERSION
# =============================================================================

def detected_grid_to_config(detected: DetectedGrid) -> GridConfig:
    """
    Build a percent-based GridConfig from a normalized detection.

    Columns are added unless the grid type is 'none'; rows only for modular
    grids. Each margin is the larger of its two opposing detected margins.
    """
    columns = None
    rows = None

    if detected.columns and detected.columns > 0 and detected.grid_type != GridPattern.NONE:
        columns = ColumnGridConfig(
            count=round_half_up(detected.columns),
            gutter_size=_or_default(detected.gutter_percent, DEFAULT_GUTTER_PERCENT),
            gutter_unit=GridUnit.PERCENT,
            margin=max(detected.margin_left_percent, detected.margin_right_percent),
            margin_unit=GridUnit.PERCENT,
            alignment=(
                GridAlignment.STRETCH
                if detected.symmetry == GridSymmetry.SYMMETRIC
                else GridAlignment.MIN
            ),
            visible=True,
            color=DETECTED_COLUMN_COLOR,
        )

    if detected.rows and detected.rows > 0 and detected.grid_type == GridPattern.MODULAR:
        rows = RowGridConfig(
            count=round_half_up(detected.rows),
            gutter_size=_or_default(detected.row_gutter_percent, DEFAULT_GUTTER_PERCENT),
            gutter_unit=GridUnit.PERCENT,
            margin=max(detected.margin_top_percent, detected.margin_bottom_percent),
            margin_unit=GridUnit.PERCENT,
            alignment=GridAlignment.STRETCH,
            visible=True,
            color=DETECTED_ROW_COLOR,
        )

    return GridConfig(columns=columns, rows=rows)


def _or_default(value: Optional[float], default: float) -> float:
    return default if value is None else value
