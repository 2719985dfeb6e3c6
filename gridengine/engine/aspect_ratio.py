"""
aspect_ratio.py — Aspect ratio parsing and naming.

Two directions:
1. parse_aspect_ratio() turns a ratio expression ("16:9", "1:√2", "1:φ")
   into frame dimensions for a given base width.
2. get_aspect_ratio_name() labels an arbitrary width/height ratio with the
   closest named ratio or a simple a:b fraction.

Unparsable input never raises: it resolves to 4:3. Callers that need to know
whether the fallback was taken must compare against the input themselves.
"""

import logging
import math
import re
from typing import Optional

from gridengine.dsl.schema import AspectRatioInfo, FrameDimensions
from gridengine.engine.units import round_half_up

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

SQRT_TWO = math.sqrt(2)               # ISO 216 paper, ≈1.41421
GOLDEN_RATIO = (1 + math.sqrt(5)) / 2  # φ, ≈1.61803

DEFAULT_BASE_WIDTH = 800
FALLBACK_HEIGHT_RATIO = 0.75  # 4:3

NAME_TOLERANCE = 0.05
FRACTION_TOLERANCE = 0.02
MAX_DENOMINATOR = 20

# Ordered: the first entry within tolerance wins, not the closest one.
COMMON_ASPECT_RATIOS: tuple[AspectRatioInfo, ...] = (
    AspectRatioInfo(name="Square", ratio=1.0, display="1:1"),
    AspectRatioInfo(name="Golden Ratio", ratio=1.618, display="1:φ"),
    AspectRatioInfo(name="A-series (ISO 216)", ratio=1.414, display="1:√2"),
    AspectRatioInfo(name="Classic 2:3", ratio=1.5, display="2:3"),
    AspectRatioInfo(name="Photo 3:4", ratio=1.333, display="3:4"),
    AspectRatioInfo(name="Widescreen 16:9", ratio=1.778, display="16:9"),
    AspectRatioInfo(name="Cinema 2.35:1", ratio=2.35, display="2.35:1"),
    AspectRatioInfo(name="Letter (US)", ratio=1.294, display="8.5:11"),
)

_SQRT_TWO_TOKENS = ("√2", "1.414")
_GOLDEN_TOKENS = ("φ", "1.618")
_RATIO_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*:\s*(\d+(?:\.\d+)?)")


# =============================================================================
# PARSING
# =============================================================================

def parse_aspect_ratio(aspect_ratio: str, base_width: float = DEFAULT_BASE_WIDTH) -> FrameDimensions:
    """
    Resolve an aspect ratio expression to frame dimensions.

    Symbolic ratios (√2, φ, or their decimal spellings) always produce a
    portrait frame, base_width wide. "W:H" pairs give height = base_width * H / W.

    Args:
        aspect_ratio: Ratio expression, e.g. "16:9", "1:√2", "1:φ"
        base_width: Width of the resulting frame (default 800)

    Returns:
        FrameDimensions; 4:3 when the expression cannot be parsed
    """
    text = aspect_ratio if isinstance(aspect_ratio, str) else ""

    if any(token in text for token in _SQRT_TWO_TOKENS):
        return FrameDimensions(width=base_width, height=round_half_up(base_width * SQRT_TWO))

    if any(token in text for token in _GOLDEN_TOKENS):
        return FrameDimensions(width=base_width, height=round_half_up(base_width * GOLDEN_RATIO))

    match = _RATIO_PATTERN.search(text)
    if match:
        w = float(match.group(1))
        h = float(match.group(2))
        if w and h:
            return FrameDimensions(width=base_width, height=round_half_up(base_width * h / w))

    logger.debug(f"Unparsable aspect ratio {aspect_ratio!r}, falling back to 4:3")
    return FrameDimensions(width=base_width, height=round_half_up(base_width * FALLBACK_HEIGHT_RATIO))


def calculate_aspect_ratio(width: float, height: float) -> float:
    """Width / height, or 1 for a zero-height frame."""
    if height == 0:
        return 1
    return width / height


# =============================================================================
# NAMING
# =============================================================================

def get_aspect_ratio_name(ratio: float, tolerance: float = NAME_TOLERANCE) -> str:
    """
    Label a ratio with a common name, a simple fraction, or a decimal.

    Portrait and landscape share the table: the ratio is normalized to >= 1
    before matching. Table entries are returned as displayed ("2:3" for
    both 1.5 and 0.667); fractions found by search are flipped back for
    portrait input.

    Args:
        ratio: width / height
        tolerance: Maximum absolute difference for a table match

    Returns:
        Display string such as "16:9", "1:φ", "5:4" or "3.10"
    """
    if ratio <= 0:
        return f"{ratio:.2f}"

    normalized = ratio if ratio >= 1 else 1 / ratio

    for common in COMMON_ASPECT_RATIOS:
        if abs(normalized - common.ratio) < tolerance:
            return common.display

    fraction = _find_simple_fraction(normalized)
    if fraction is None:
        return f"{normalized:.2f}"

    a, b = fraction
    if ratio < 1:
        return f"{b}:{a}"
    return f"{a}:{b}"


def get_aspect_ratio_info(display: str) -> Optional[AspectRatioInfo]:
    """Look up a table entry by its display string."""
    for common in COMMON_ASPECT_RATIOS:
        if common.display == display:
            return common
    return None


def _find_simple_fraction(ratio: float) -> Optional[tuple[int, int]]:
    """Smallest-denominator a:b (a, b <= 20) within FRACTION_TOLERANCE of ratio."""
    for b in range(1, MAX_DENOMINATOR + 1):
        for a in range(1, MAX_DENOMINATOR + 1):
            if abs(a / b - ratio) < FRACTION_TOLERANCE:
                return a, b
    return None
