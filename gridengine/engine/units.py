"""
units.py — Percent/pixel conversions and shared numeric helpers.

This is the foundation module. Every gutter and margin passes through
to_pixels() before any geometry is computed, so a GridUnit is resolved in
exactly one place.
"""

import math

from gridengine.dsl.schema import GridUnit


# =============================================================================
# UNIT CONVERSIONS
# =============================================================================

def percent_to_pixels(percent: float, total_size: float) -> float:
    """Convert a percentage (0-100) of total_size to pixels."""
    return (percent / 100) * total_size


def pixels_to_percent(pixels: float, total_size: float) -> float:
    """Convert pixels to a percentage of total_size. Returns 0 for a zero total."""
    if total_size == 0:
        return 0
    return (pixels / total_size) * 100


def to_pixels(value: float, unit: GridUnit, total_size: float) -> float:
    """Resolve a grid value in the given unit to pixels."""
    if unit == GridUnit.PERCENT:
        return percent_to_pixels(value, total_size)
    return value


def from_pixels(pixels: float, unit: GridUnit, total_size: float) -> float:
    """Express a pixel value in the given unit."""
    if unit == GridUnit.PERCENT:
        return pixels_to_percent(pixels, total_size)
    return pixels


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a value between min and max."""
    return max(min_val, min(max_val, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity.

    Python's round() uses banker's rounding; pixel sizes and color channels
    round .5 upwards everywhere in this package.
    """
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """Format a number without a trailing '.0' for integral values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
