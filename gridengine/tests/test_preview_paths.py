"""Tests for preview line segments and SVG path data."""

from gridengine.config import EngineSettings
from gridengine.dsl.schema import (
    BaselineGridConfig,
    ColumnGridConfig,
    GridConfig,
    LineSegment,
    RowGridConfig,
)
from gridengine.engine.preview_paths import (
    generate_baseline_grid_svg_path,
    generate_baseline_segments,
    generate_column_grid_svg_path,
    generate_column_segments,
    generate_grid_segments,
    generate_preview_segments,
    generate_preview_svg_path,
    generate_row_segments,
    segments_to_svg_path,
)


class TestColumnSegments:
    """Tests for column segments."""

    def test_two_segments_per_column(self) -> None:
        """Test every column contributes a left and right edge."""
        config = ColumnGridConfig(count=2, gutter_size=20, margin=10)
        segments = generate_column_segments(config, 230, 100)
        assert [s.x1 for s in segments] == [10, 105, 125, 220]
        assert all(s.is_vertical for s in segments)
        assert all(s.y1 == 0 and s.y2 == 100 for s in segments)

    def test_count_matches_config(self, web_columns: ColumnGridConfig) -> None:
        """Test 2 * count segments."""
        assert len(generate_column_segments(web_columns, 240, 320)) == 24


class TestRowSegments:
    """Tests for row segments."""

    def test_full_width_horizontals(self) -> None:
        """Test row edges run across the whole preview."""
        config = RowGridConfig(count=2, gutter_size=0, margin=0)
        segments = generate_row_segments(config, 240, 100)
        assert [s.y1 for s in segments] == [0, 50, 50, 100]
        assert all(s.is_horizontal and s.x2 == 240 for s in segments)


class TestBaselineSegments:
    """Tests for baseline segments."""

    def test_lines_start_at_offset(self) -> None:
        """Test lines at offset + i * height below the preview height."""
        segments = generate_baseline_segments(BaselineGridConfig(height=10), 100, 35)
        assert [s.y1 for s in segments] == [0, 10, 20, 30]

    def test_with_offset(self) -> None:
        """Test a positive offset shifts and reduces the series."""
        segments = generate_baseline_segments(BaselineGridConfig(height=10, offset=5), 100, 35)
        assert [s.y1 for s in segments] == [5, 15, 25]

    def test_offset_beyond_height(self) -> None:
        """Test no lines when the offset is past the preview."""
        assert generate_baseline_segments(BaselineGridConfig(height=10, offset=50), 100, 35) == []

    def test_non_positive_height(self) -> None:
        """Test a zero height produces no lines."""
        assert generate_baseline_segments(BaselineGridConfig(height=0), 100, 35) == []


class TestGridSegments:
    """Tests for combined segments."""

    def test_order_and_total(self, modular_config: GridConfig) -> None:
        """Test columns, then rows, then baselines."""
        segments = generate_grid_segments(modular_config, 240, 320)
        assert len(segments) == 8 + 8 + 40
        assert all(s.is_vertical for s in segments[:8])
        assert all(s.is_horizontal for s in segments[8:])

    def test_deterministic(self, modular_config: GridConfig) -> None:
        """Test identical inputs give identical output."""
        first = generate_grid_segments(modular_config, 240, 320)
        second = generate_grid_segments(modular_config, 240, 320)
        assert first == second
        assert first is not second

    def test_empty_config(self) -> None:
        """Test no sub-grids, no segments."""
        assert generate_grid_segments(GridConfig(), 240, 320) == []


class TestSvgPath:
    """Tests for SVG path encoding."""

    def test_segment_encoding(self) -> None:
        """Test one move/line pair per segment."""
        segments = [
            LineSegment(x1=0, y1=0, x2=0, y2=100),
            LineSegment(x1=10.5, y1=0, x2=10.5, y2=100),
        ]
        assert segments_to_svg_path(segments) == "M 0 0 L 0 100 M 10.5 0 L 10.5 100 "

    def test_empty(self) -> None:
        """Test no segments encode to an empty string."""
        assert segments_to_svg_path([]) == ""

    def test_column_path(self) -> None:
        """Test the column wrapper."""
        config = ColumnGridConfig(count=1, margin=10)
        assert generate_column_grid_svg_path(config, 100, 50) == "M 10 0 L 10 50 M 90 0 L 90 50 "

    def test_baseline_path(self) -> None:
        """Test the baseline wrapper."""
        path = generate_baseline_grid_svg_path(BaselineGridConfig(height=20), 100, 40)
        assert path == "M 0 0 L 100 0 M 0 20 L 100 20 "


class TestConfiguredPreview:
    """Tests for previews at the configured size."""

    def test_uses_settings_size(self, modular_config: GridConfig) -> None:
        """Test the preview size comes from settings."""
        settings = EngineSettings(preview_width=480, preview_height=640, _env_file=None)
        segments = generate_preview_segments(modular_config, settings)
        assert segments == generate_grid_segments(modular_config, 480, 640)
        assert max(s.y2 for s in segments) == 640

    def test_svg_path(self) -> None:
        """Test SVG path data at the configured size."""
        settings = EngineSettings(preview_width=100, preview_height=40, _env_file=None)
        config = GridConfig(baseline=BaselineGridConfig(height=20))
        assert generate_preview_svg_path(config, settings) == "M 0 0 L 100 0 M 0 20 L 100 20 "
