"""Tests for unit conversion helpers."""

import pytest

from gridengine.dsl.schema import GridUnit
from gridengine.engine.units import (
    clamp,
    format_number,
    from_pixels,
    percent_to_pixels,
    pixels_to_percent,
    round_half_up,
    to_pixels,
)


class TestPercentPixels:
    """Tests for percent/pixel conversion."""

    def test_percent_to_pixels(self) -> None:
        """Test percent of a total size."""
        assert percent_to_pixels(50, 200) == 100
        assert percent_to_pixels(3.5, 1000) == 35

    def test_pixels_to_percent(self) -> None:
        """Test pixels as a percentage of a total size."""
        assert pixels_to_percent(50, 200) == 25

    def test_percent_round_trip(self) -> None:
        """Test converting to pixels and back recovers the percentage."""
        for percent, total in ((3.5, 1440), (12.5, 333), (0.1, 7)):
            assert pixels_to_percent(percent_to_pixels(percent, total), total) == pytest.approx(percent)

    def test_pixels_to_percent_zero_total(self) -> None:
        """Test a zero total gives 0 instead of raising."""
        assert pixels_to_percent(10, 0) == 0

    def test_to_pixels_by_unit(self) -> None:
        """Test pixel values pass through and percent values resolve."""
        assert to_pixels(10, GridUnit.PIXEL, 500) == 10
        assert to_pixels(10, GridUnit.PERCENT, 500) == 50

    def test_from_pixels_by_unit(self) -> None:
        """Test expressing pixels in each unit."""
        assert from_pixels(50, GridUnit.PIXEL, 500) == 50
        assert from_pixels(50, GridUnit.PERCENT, 500) == 10


class TestHelpers:
    """Tests for numeric helpers."""

    def test_clamp(self) -> None:
        """Test clamping into a range."""
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10

    def test_round_half_up(self) -> None:
        """Test halves round towards positive infinity."""
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(-0.5) == 0
        assert round_half_up(1.49) == 1

    def test_format_number(self) -> None:
        """Test integral floats lose their trailing .0."""
        assert format_number(4.0) == "4"
        assert format_number(4.5) == "4.5"
        assert format_number(3) == "3"
