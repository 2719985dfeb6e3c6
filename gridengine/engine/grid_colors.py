"""
grid_colors.py — Default grid colors per role and named color schemes.

Columns are red, rows blue and baselines cyan by default. Schemes are keyed
by closed enums, so an unknown role or scheme fails when it is converted to
the enum rather than at lookup time.
"""

from enum import Enum
from typing import Dict

from gridengine.config import EngineSettings
from gridengine.dsl.schema import (
    DEFAULT_BASELINE_COLOR,
    DEFAULT_COLUMN_COLOR,
    DEFAULT_ROW_COLOR,
    GridColor,
    GridRole,
)


class ColorScheme(str, Enum):
    """Named grid color schemes."""

    DEFAULT = "default"
    MONO = "mono"
    VIBRANT = "vibrant"


# =============================================================================
# SCHEMES
# =============================================================================

GRID_COLOR_SCHEMES: Dict[ColorScheme, Dict[GridRole, GridColor]] = {
    ColorScheme.DEFAULT: {
        GridRole.COLUMNS: DEFAULT_COLUMN_COLOR,
        GridRole.ROWS: DEFAULT_ROW_COLOR,
        GridRole.BASELINE: DEFAULT_BASELINE_COLOR,
    },
    ColorScheme.MONO: {
        GridRole.COLUMNS: GridColor(r=0.4, g=0.4, b=0.4, a=0.1),
        GridRole.ROWS: GridColor(r=0.3, g=0.3, b=0.3, a=0.1),
        GridRole.BASELINE: GridColor(r=0.5, g=0.5, b=0.5, a=0.15),
    },
    ColorScheme.VIBRANT: {
        GridRole.COLUMNS: GridColor(r=1.0, g=0.0, b=0.5, a=0.15),   # magenta
        GridRole.ROWS: GridColor(r=0.0, g=0.8, b=1.0, a=0.15),      # cyan
        GridRole.BASELINE: GridColor(r=1.0, g=0.8, b=0.0, a=0.2),   # yellow
    },
}


def default_color(role: GridRole, scheme: ColorScheme = ColorScheme.DEFAULT) -> GridColor:
    """Color for a grid role in a scheme.

    Raises:
        ValueError: If role or scheme is not a known value.
    """
    return GRID_COLOR_SCHEMES[ColorScheme(scheme)][GridRole(role)]


def scheme_colors(scheme: ColorScheme = ColorScheme.DEFAULT) -> Dict[GridRole, GridColor]:
    """All role colors of a scheme (a copy; the table itself is shared)."""
    return dict(GRID_COLOR_SCHEMES[ColorScheme(scheme)])


def scheme_from_settings(settings: EngineSettings) -> ColorScheme:
    """The color scheme selected by GRIDENGINE_COLOR_SCHEME."""
    return ColorScheme(settings.color_scheme)


def default_color_from_settings(role: GridRole, settings: EngineSettings) -> GridColor:
    """Color for a grid role in the configured scheme."""
    return default_color(role, scheme_from_settings(settings))
