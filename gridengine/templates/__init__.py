"""Preset catalogue - built-in grid systems by category."""

from gridengine.templates.presets import (
    ALL_CATEGORIES,
    GRID_CATEGORIES,
    GRID_PRESETS,
    PRESETS_BY_CATEGORY,
    get_preset_by_id,
    get_preset_count,
    get_preset_count_by_category,
    get_preset_frame_dimensions,
    get_preset_or_raise,
    get_presets_by_category,
    search_presets,
)

__all__ = [
    "ALL_CATEGORIES",
    "GRID_CATEGORIES",
    "GRID_PRESETS",
    "PRESETS_BY_CATEGORY",
    "get_preset_by_id",
    "get_preset_count",
    "get_preset_count_by_category",
    "get_preset_frame_dimensions",
    "get_preset_or_raise",
    "get_presets_by_category",
    "search_presets",
]
