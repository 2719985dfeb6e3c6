"""
colors.py — GridColor <-> CSS string conversion.

GridColor channels are normalized floats; CSS uses 0-255 integers. Parsing
never raises: anything that is not "#rrggbb", "rgb(...)" or "rgba(...)"
becomes the warning red used for column grids, so calling code that never
checks for a parse failure still gets a visible grid.
"""

import logging
import re

from gridengine.dsl.schema import GridColor
from gridengine.engine.units import format_number, round_half_up

logger = logging.getLogger(__name__)


DEFAULT_FALLBACK_ALPHA = 0.1

_HEX_PATTERN = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")
_RGB_PATTERN = re.compile(r"rgba?\((\d+),\s*(\d+),\s*(\d+)(?:,\s*([\d.]+))?\)")


def grid_color_to_css(color: GridColor) -> str:
    """Format as "rgba(R, G, B, A)"; R/G/B rounded from channel * 255, A unrounded."""
    r = round_half_up(color.r * 255)
    g = round_half_up(color.g * 255)
    b = round_half_up(color.b * 255)
    return f"rgba({r}, {g}, {b}, {format_number(color.a)})"


def css_to_grid_color(css: str, alpha: float = DEFAULT_FALLBACK_ALPHA) -> GridColor:
    """
    Parse a CSS color into a GridColor.

    Args:
        css: "#rrggbb", "rgb(r, g, b)" or "rgba(r, g, b, a)"
        alpha: Alpha for hex and rgb() input, and for the fallback color

    Returns:
        Parsed color (channels clamped to [0, 1]), or red (1, 0.2, 0.2, alpha)
        when the string cannot be parsed
    """
    text = css.strip() if isinstance(css, str) else ""

    hex_match = _HEX_PATTERN.match(text)
    if hex_match:
        r, g, b = (int(part, 16) for part in hex_match.groups())
        return GridColor.clamped(r / 255, g / 255, b / 255, alpha)

    rgb_match = _RGB_PATTERN.search(text)
    if rgb_match:
        r, g, b, a = rgb_match.groups()
        try:
            parsed_alpha = float(a) if a is not None else alpha
        except ValueError:
            parsed_alpha = None
        if parsed_alpha is not None:
            return GridColor.clamped(int(r) / 255, int(g) / 255, int(b) / 255, parsed_alpha)

    logger.debug(f"Unparsable CSS color {css!r}, using fallback red")
    return fallback_color(alpha)


def fallback_color(alpha: float = DEFAULT_FALLBACK_ALPHA) -> GridColor:
    """The warning red returned for unparsable colors."""
    return GridColor.clamped(1, 0.2, 0.2, alpha)


def grid_color_to_hex(color: GridColor) -> str:
    """Format as "#rrggbb" (alpha is dropped)."""
    r = round_half_up(color.r * 255)
    g = round_half_up(color.g * 255)
    b = round_half_up(color.b * 255)
    return f"#{r:02x}{g:02x}{b:02x}"
