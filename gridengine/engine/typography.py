"""
typography.py — Baseline grid suggestions from type settings.
"""

from dataclasses import dataclass, field
from typing import List

from gridengine.engine.units import round_half_up


# Baseline heights designers actually pick
NICE_BASELINES = (4, 6, 8, 10, 12, 14, 16, 18, 20, 24, 28, 32, 36, 40, 48)

BODY_LINE_HEIGHT = 1.5
HEADING_SCALE = 1.25  # major third
HEADING_LEVELS = 4


@dataclass
class TypographySuggestion:
    """Body and heading sizes that sit on a baseline grid."""
    body_size: int
    body_line_height: float
    heading_sizes: List[int] = field(default_factory=list)


def calculate_baseline_from_typography(font_size: float, line_height: float) -> int:
    """
    Nearest nice baseline height to font_size * line_height.

    Ties keep the smaller candidate.
    """
    raw = font_size * line_height

    closest = NICE_BASELINES[0]
    closest_diff = abs(raw - closest)
    for candidate in NICE_BASELINES:
        diff = abs(raw - candidate)
        if diff < closest_diff:
            closest = candidate
            closest_diff = diff
    return closest


def get_typography_suggestions(baseline: float) -> TypographySuggestion:
    """Body size for a baseline at 1.5 line height, plus a 1.25 heading scale."""
    body_size = round_half_up(baseline / BODY_LINE_HEIGHT)
    heading_sizes = [
        round_half_up(body_size * HEADING_SCALE ** level)
        for level in range(1, HEADING_LEVELS + 1)
    ]
    return TypographySuggestion(
        body_size=body_size,
        body_line_height=BODY_LINE_HEIGHT,
        heading_sizes=heading_sizes,
    )
