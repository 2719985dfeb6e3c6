"""Tests for color conversion and default grid colors."""

import pytest

from gridengine.config import EngineSettings
from gridengine.dsl.schema import (
    DEFAULT_BASELINE_COLOR,
    DEFAULT_COLUMN_COLOR,
    DEFAULT_ROW_COLOR,
    GridColor,
    GridRole,
)
from gridengine.engine.colors import (
    css_to_grid_color,
    fallback_color,
    grid_color_to_css,
    grid_color_to_hex,
)
from gridengine.engine.grid_colors import (
    ColorScheme,
    default_color,
    default_color_from_settings,
    scheme_colors,
    scheme_from_settings,
)


class TestGridColorToCss:
    """Tests for grid_color_to_css."""

    def test_default_column_color(self) -> None:
        """Test channels are scaled to 0-255."""
        assert grid_color_to_css(DEFAULT_COLUMN_COLOR) == "rgba(255, 51, 51, 0.1)"

    def test_pure_red(self) -> None:
        """Test a half-transparent red."""
        assert grid_color_to_css(GridColor(r=1, g=0, b=0, a=0.5)) == "rgba(255, 0, 0, 0.5)"

    def test_opaque(self) -> None:
        """Test an integral alpha prints without a decimal."""
        assert grid_color_to_css(GridColor(r=0, g=0, b=0)) == "rgba(0, 0, 0, 1)"

    def test_hex(self) -> None:
        """Test hex output drops alpha."""
        assert grid_color_to_hex(GridColor(r=1, g=0.5, b=0, a=0.3)) == "#ff8000"


class TestCssToGridColor:
    """Tests for css_to_grid_color."""

    def test_hex(self) -> None:
        """Test #rrggbb uses the given alpha."""
        color = css_to_grid_color("#FF0000")
        assert (color.r, color.g, color.b, color.a) == (1, 0, 0, 0.1)

    def test_rgba(self) -> None:
        """Test rgba() carries its own alpha."""
        color = css_to_grid_color("rgba(0, 51, 255, 0.5)")
        assert color.g == pytest.approx(0.2)
        assert color.b == 1
        assert color.a == 0.5

    def test_rgb_uses_alpha_argument(self) -> None:
        """Test rgb() takes the caller's alpha."""
        assert css_to_grid_color("rgb(10, 20, 30)", alpha=0.3).a == 0.3

    def test_channels_are_clamped(self) -> None:
        """Test out-of-range channels clamp to 1."""
        assert css_to_grid_color("rgb(300, 0, 0)").r == 1

    def test_css_of_default_round_trips(self) -> None:
        """Test parsing the CSS of a default color recovers it."""
        color = css_to_grid_color(grid_color_to_css(DEFAULT_ROW_COLOR))
        assert color.r == pytest.approx(0.2)
        assert color.g == pytest.approx(0.4)
        assert color.b == 1
        assert color.a == pytest.approx(0.1)

    @pytest.mark.parametrize("css", ["not-a-color", "#fff", "", "hsl(0, 100%, 50%)"])
    def test_fallback_red(self, css: str) -> None:
        """Test unparsable input never raises."""
        assert css_to_grid_color(css) == GridColor(r=1, g=0.2, b=0.2, a=0.1)

    def test_fallback_keeps_alpha(self) -> None:
        """Test the fallback uses the requested alpha."""
        assert css_to_grid_color("nope", alpha=0.4) == fallback_color(0.4)


class TestDefaultColors:
    """Tests for per-role default colors."""

    def test_default_scheme(self) -> None:
        """Test columns red, rows blue, baseline cyan."""
        assert default_color(GridRole.COLUMNS) == DEFAULT_COLUMN_COLOR
        assert default_color(GridRole.ROWS) == DEFAULT_ROW_COLOR
        assert default_color(GridRole.BASELINE) == DEFAULT_BASELINE_COLOR

    def test_string_role(self) -> None:
        """Test string role names are accepted."""
        assert default_color("rows") == DEFAULT_ROW_COLOR

    def test_unknown_role(self) -> None:
        """Test unknown roles raise."""
        with pytest.raises(ValueError):
            default_color("gutters")

    def test_other_scheme(self) -> None:
        """Test a non-default scheme."""
        assert default_color(GridRole.COLUMNS, ColorScheme.MONO) != DEFAULT_COLUMN_COLOR

    def test_scheme_colors_is_a_copy(self) -> None:
        """Test callers cannot change the shared table."""
        colors = scheme_colors()
        colors[GridRole.COLUMNS] = GridColor(r=0, g=0, b=0)
        assert default_color(GridRole.COLUMNS) == DEFAULT_COLUMN_COLOR

    def test_scheme_from_settings(self) -> None:
        """Test the configured scheme picks the role colors."""
        settings = EngineSettings(color_scheme="vibrant", _env_file=None)
        assert scheme_from_settings(settings) == ColorScheme.VIBRANT
        assert default_color_from_settings(GridRole.ROWS, settings) == default_color(
            GridRole.ROWS, ColorScheme.VIBRANT
        )

    def test_default_settings_use_default_scheme(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test unset scheme falls back to the default colors."""
        monkeypatch.delenv("GRIDENGINE_COLOR_SCHEME", raising=False)
        settings = EngineSettings(_env_file=None)
        assert default_color_from_settings(GridRole.COLUMNS, settings) == DEFAULT_COLUMN_COLOR
