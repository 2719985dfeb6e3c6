"""Pydantic v2 models for grid configurations.

This module defines the value types the grid engine computes over. All
lengths are in pixels unless a field's unit says otherwise. Models are
frozen: every engine operation returns a new model instead of mutating its
input.

JSON field names follow the add-on's camelCase wire format (``gutterSize``,
``marginUnit``, ...). Models accept either the alias or the Python field name.
"""

from enum import Enum
from typing import Iterator, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


_MODEL_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class GridUnit(str, Enum):
    """Measurement unit for gutters and margins."""

    PIXEL = "px"
    PERCENT = "percent"


class GridAlignment(str, Enum):
    """Which edge absorbs the remainder when divisions don't tile evenly."""

    MIN = "MIN"
    CENTER = "CENTER"
    MAX = "MAX"
    STRETCH = "STRETCH"


class GridRole(str, Enum):
    """The closed set of sub-grids a GridConfig can carry."""

    COLUMNS = "columns"
    ROWS = "rows"
    BASELINE = "baseline"


class GridCategory(str, Enum):
    """Preset catalogue categories."""

    CLASSIC_SWISS = "classic-swiss"
    EDITORIAL = "editorial"
    POSTER = "poster"
    WEB_UI = "web-ui"
    MODULAR = "modular"
    BASELINE = "baseline"
    COMBINED = "combined"
    CUSTOM = "custom"


class GridPattern(str, Enum):
    """Kind of grid reported by a detection service."""

    COLUMN = "column"
    MODULAR = "modular"
    BASELINE = "baseline"
    MANUSCRIPT = "manuscript"
    NONE = "none"


class GridSymmetry(str, Enum):
    """Symmetry of a detected layout."""

    SYMMETRIC = "symmetric"
    ASYMMETRIC = "asymmetric"


class LayoutGridPattern(str, Enum):
    """Host-neutral layout grid patterns."""

    COLUMNS = "COLUMNS"
    ROWS = "ROWS"
    GRID = "GRID"


# ============================================================================
# Color
# ============================================================================


class GridColor(BaseModel):
    """RGBA color with every channel normalized to [0, 1]."""

    model_config = _MODEL_CONFIG

    r: float = Field(ge=0.0, le=1.0, description="Red channel")
    g: float = Field(ge=0.0, le=1.0, description="Green channel")
    b: float = Field(ge=0.0, le=1.0, description="Blue channel")
    a: float = Field(default=1.0, ge=0.0, le=1.0, description="Alpha channel")

    @classmethod
    def clamped(cls, r: float, g: float, b: float, a: float = 1.0) -> "GridColor":
        """Build a color, clamping each channel into [0, 1]."""
        return cls(r=_clamp_unit(r), g=_clamp_unit(g), b=_clamp_unit(b), a=_clamp_unit(a))


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


# Shared instances are safe: GridColor is frozen.
DEFAULT_COLUMN_COLOR = GridColor(r=1.0, g=0.2, b=0.2, a=0.1)  # red
DEFAULT_ROW_COLOR = GridColor(r=0.2, g=0.4, b=1.0, a=0.1)  # blue
DEFAULT_BASELINE_COLOR = GridColor(r=0.2, g=0.8, b=0.9, a=0.15)  # cyan


# ============================================================================
# Grid configurations
# ============================================================================


class ColumnGridConfig(BaseModel):
    """Vertical divisions across the frame width.

    Counts and sizes are not range-checked here; out-of-range values are
    reported by ``gridengine.constraints.validator``.
    """

    model_config = _MODEL_CONFIG

    count: int = Field(description="Number of columns")
    gutter_size: float = Field(default=0.0, description="Space between adjacent columns")
    gutter_unit: GridUnit = Field(default=GridUnit.PIXEL)
    margin: float = Field(default=0.0, description="Inset from the left/right frame edges")
    margin_unit: GridUnit = Field(default=GridUnit.PIXEL)
    alignment: GridAlignment = Field(default=GridAlignment.STRETCH)
    visible: bool = Field(default=True)
    color: GridColor = Field(default=DEFAULT_COLUMN_COLOR)


class RowGridConfig(BaseModel):
    """Horizontal divisions across the frame height."""

    model_config = _MODEL_CONFIG

    count: int = Field(description="Number of rows")
    gutter_size: float = Field(default=0.0, description="Space between adjacent rows")
    gutter_unit: GridUnit = Field(default=GridUnit.PIXEL)
    margin: float = Field(default=0.0, description="Inset from the top/bottom frame edges")
    margin_unit: GridUnit = Field(default=GridUnit.PIXEL)
    alignment: GridAlignment = Field(default=GridAlignment.STRETCH)
    visible: bool = Field(default=True)
    color: GridColor = Field(default=DEFAULT_ROW_COLOR)


class BaselineGridConfig(BaseModel):
    """Repeating horizontal typographic rule, in pixels."""

    model_config = _MODEL_CONFIG

    height: float = Field(description="Distance between baselines in pixels")
    offset: float = Field(default=0.0, description="Position of the first baseline in pixels")
    visible: bool = Field(default=True)
    color: GridColor = Field(default=DEFAULT_BASELINE_COLOR)


SubGridConfig = Union[ColumnGridConfig, RowGridConfig, BaselineGridConfig]


class GridConfig(BaseModel):
    """Any combination of column, row and baseline grids (including none)."""

    model_config = _MODEL_CONFIG

    columns: Optional[ColumnGridConfig] = None
    rows: Optional[RowGridConfig] = None
    baseline: Optional[BaselineGridConfig] = None

    def get(self, role: GridRole) -> Optional[SubGridConfig]:
        """Return the sub-grid for a role, or None when absent."""
        return getattr(self, GridRole(role).value)

    def roles(self) -> list[GridRole]:
        """Roles present in this config, in columns/rows/baseline order."""
        return [role for role in GridRole if self.get(role) is not None]

    def items(self) -> Iterator[tuple[GridRole, SubGridConfig]]:
        """Iterate over (role, sub-grid) pairs that are present."""
        for role in self.roles():
            yield role, self.get(role)

    @property
    def is_empty(self) -> bool:
        return not self.roles()

    @property
    def is_modular(self) -> bool:
        """True when both columns and rows are present."""
        return self.columns is not None and self.rows is not None


# ============================================================================
# Derived geometry
# ============================================================================


class FrameDimensions(BaseModel):
    """Width and height of a frame in pixels."""

    model_config = _MODEL_CONFIG

    width: float
    height: float


class ModuleDimensions(BaseModel):
    """Size of a single column × row module in pixels (may be negative)."""

    model_config = _MODEL_CONFIG

    width: float
    height: float


class AspectRatioInfo(BaseModel):
    """A named aspect ratio (width / height in landscape orientation)."""

    model_config = _MODEL_CONFIG

    name: str
    ratio: float
    display: str


class LineSegment(BaseModel):
    """A straight guide line from (x1, y1) to (x2, y2)."""

    model_config = _MODEL_CONFIG

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def is_vertical(self) -> bool:
        return self.x1 == self.x2

    @property
    def is_horizontal(self) -> bool:
        return self.y1 == self.y2


# ============================================================================
# Host-neutral layout grids
# ============================================================================


class LayoutGrid(BaseModel):
    """A single layout grid in the shape host editors expect.

    Gutter and offset are absolute pixels; ``section_size`` is only set for
    the ``GRID`` pattern used by baselines.
    """

    model_config = _MODEL_CONFIG

    pattern: LayoutGridPattern
    alignment: GridAlignment
    gutter_size: float
    count: int
    offset: float
    visible: bool
    color: GridColor
    section_size: Optional[float] = None


# ============================================================================
# Presets
# ============================================================================


class GridPreset(BaseModel):
    """A named, categorized grid configuration from the preset catalogue."""

    model_config = _MODEL_CONFIG

    id: str = Field(description="Stable preset identifier")
    name: str = Field(description="Human-readable name")
    description: str = Field(default="")
    category: GridCategory
    tags: tuple[str, ...] = Field(default=())
    aspect_ratio: Optional[str] = Field(default=None, description="Recommended ratio, e.g. '1:√2'")
    config: GridConfig
    is_custom: bool = Field(default=False)


class GridCategoryInfo(BaseModel):
    """Display information for a preset category ('all' included)."""

    model_config = _MODEL_CONFIG

    id: str
    name: str
    description: str


# ============================================================================
# Detection results
# ============================================================================


class DetectedGrid(BaseModel):
    """Numeric fields of a grid reported by an external detection service.

    Percentages are relative to the analyzed image. Values are expected to
    be normalized (see ``gridengine.engine.detection``) before conversion.
    """

    model_config = _MODEL_CONFIG

    grid_type: GridPattern = GridPattern.NONE
    columns: Optional[float] = None
    gutter_percent: Optional[float] = None
    margin_left_percent: float = 5.0
    margin_right_percent: float = 5.0
    margin_top_percent: float = 5.0
    margin_bottom_percent: float = 5.0
    rows: Optional[float] = None
    row_gutter_percent: Optional[float] = None
    aspect_ratio: str = "4:3"
    symmetry: GridSymmetry = GridSymmetry.SYMMETRIC
    confidence: float = 50.0
    notes: str = ""
    source_width: Optional[float] = None
    source_height: Optional[float] = None
