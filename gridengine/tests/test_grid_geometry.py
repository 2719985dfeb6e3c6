"""Tests for column, row and module geometry."""

import math

import pytest

from gridengine.dsl.schema import ColumnGridConfig, GridUnit, RowGridConfig
from gridengine.engine.grid_geometry import (
    calculate_column_width,
    calculate_module_dimensions,
    calculate_row_height,
    column_positions,
    row_positions,
)


class TestColumnWidth:
    """Tests for calculate_column_width."""

    def test_pixel_grid(self, web_columns: ColumnGridConfig) -> None:
        """Test a 12-column web grid on a 1440px frame."""
        # (1440 - 2*32 - 11*24) / 12
        assert calculate_column_width(web_columns, 1440) == pytest.approx(1112 / 12)

    def test_percent_grid(self, percent_columns: ColumnGridConfig) -> None:
        """Test percent margins and gutters resolve against the frame width."""
        # margin 70px, gutter 35px
        assert calculate_column_width(percent_columns, 1000) == pytest.approx(188.75)

    def test_single_column_ignores_gutter(self) -> None:
        """Test one column has no gutters."""
        config = ColumnGridConfig(count=1, gutter_size=500, margin=50)
        assert calculate_column_width(config, 400) == 300

    def test_over_constrained_is_negative(self) -> None:
        """Test sizes are not clamped when margins exceed the frame."""
        config = ColumnGridConfig(count=2, gutter_size=10, margin=600)
        assert calculate_column_width(config, 1000) < 0

    def test_zero_count_does_not_raise(self) -> None:
        """Test a zero count yields an infinite width instead of an exception."""
        config = ColumnGridConfig(count=0)
        assert math.isinf(calculate_column_width(config, 100))

    def test_tracks_fill_available_space(self, web_columns: ColumnGridConfig) -> None:
        """Test count * width + gutters + margins equals the frame width."""
        width = calculate_column_width(web_columns, 1440)
        total = 12 * width + 11 * 24 + 2 * 32
        assert total == pytest.approx(1440)


class TestRowHeight:
    """Tests for calculate_row_height."""

    def test_row_height(self) -> None:
        """Test rows divide the frame height."""
        config = RowGridConfig(count=4, gutter_size=20, margin=40)
        assert calculate_row_height(config, 900) == pytest.approx(190)

    def test_percent_row_height(self) -> None:
        """Test percent values resolve against the frame height."""
        config = RowGridConfig(
            count=2,
            gutter_size=10,
            gutter_unit=GridUnit.PERCENT,
            margin=5,
            margin_unit=GridUnit.PERCENT,
        )
        # margin 50px, gutter 100px
        assert calculate_row_height(config, 1000) == pytest.approx(400)


class TestModuleDimensions:
    """Tests for calculate_module_dimensions."""

    def test_module(self) -> None:
        """Test a module combines column width and row height."""
        columns = ColumnGridConfig(count=4, gutter_size=20, margin=40)
        rows = RowGridConfig(count=3, gutter_size=30, margin=15)
        module = calculate_module_dimensions(columns, rows, 1000, 600)
        assert module.width == pytest.approx(215)
        assert module.height == pytest.approx(170)


class TestPositions:
    """Tests for track positions."""

    def test_column_positions(self) -> None:
        """Test edges walk from the left margin."""
        config = ColumnGridConfig(count=2, gutter_size=20, margin=10)
        assert column_positions(config, 230) == [(10, 105), (125, 220)]

    def test_row_positions(self) -> None:
        """Test edges walk from the top margin."""
        config = RowGridConfig(count=3, gutter_size=0, margin=0)
        assert row_positions(config, 300) == [(0, 100), (100, 200), (200, 300)]
