"""Pytest configuration and fixtures."""

import pytest

from gridengine.dsl.schema import (
    BaselineGridConfig,
    ColumnGridConfig,
    GridConfig,
    GridUnit,
    RowGridConfig,
)


@pytest.fixture
def web_columns() -> ColumnGridConfig:
    """12-column pixel grid with 24px gutters and 32px margins."""
    return ColumnGridConfig(count=12, gutter_size=24, margin=32)


@pytest.fixture
def percent_columns() -> ColumnGridConfig:
    """4-column Swiss grid in percent units."""
    return ColumnGridConfig(
        count=4,
        gutter_size=3.5,
        gutter_unit=GridUnit.PERCENT,
        margin=7,
        margin_unit=GridUnit.PERCENT,
    )


@pytest.fixture
def modular_config() -> GridConfig:
    """4 × 4 modular grid with an 8px baseline."""
    return GridConfig(
        columns=ColumnGridConfig(count=4, gutter_size=20, margin=40),
        rows=RowGridConfig(count=4, gutter_size=20, margin=40),
        baseline=BaselineGridConfig(height=8),
    )
