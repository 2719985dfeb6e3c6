"""Grid configuration data model."""

from gridengine.dsl.schema import (
    DEFAULT_BASELINE_COLOR,
    DEFAULT_COLUMN_COLOR,
    DEFAULT_ROW_COLOR,
    AspectRatioInfo,
    BaselineGridConfig,
    ColumnGridConfig,
    DetectedGrid,
    FrameDimensions,
    GridAlignment,
    GridCategory,
    GridCategoryInfo,
    GridColor,
    GridConfig,
    GridPattern,
    GridPreset,
    GridRole,
    GridSymmetry,
    GridUnit,
    LayoutGrid,
    LayoutGridPattern,
    LineSegment,
    ModuleDimensions,
    RowGridConfig,
    SubGridConfig,
)

__all__ = [
    # Enums
    "GridAlignment",
    "GridCategory",
    "GridPattern",
    "GridRole",
    "GridSymmetry",
    "GridUnit",
    "LayoutGridPattern",
    # Colors
    "GridColor",
    "DEFAULT_COLUMN_COLOR",
    "DEFAULT_ROW_COLOR",
    "DEFAULT_BASELINE_COLOR",
    # Configs
    "ColumnGridConfig",
    "RowGridConfig",
    "BaselineGridConfig",
    "GridConfig",
    "SubGridConfig",
    # Geometry
    "AspectRatioInfo",
    "FrameDimensions",
    "LineSegment",
    "ModuleDimensions",
    # Host / presets / detection
    "LayoutGrid",
    "GridPreset",
    "GridCategoryInfo",
    "DetectedGrid",
]
