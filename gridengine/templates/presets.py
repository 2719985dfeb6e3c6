"""Built-in grid preset catalogue.

Classic and modern grid systems in the Swiss/International Typographic
tradition. The catalogue is an immutable tuple of frozen GridPreset models;
lookups return the shared instances.
"""

from typing import Optional, Union

from gridengine.dsl.schema import (
    BaselineGridConfig,
    ColumnGridConfig,
    FrameDimensions,
    GridAlignment,
    GridCategory,
    GridCategoryInfo,
    GridConfig,
    GridPreset,
    GridUnit,
    RowGridConfig,
)
from gridengine.engine.aspect_ratio import DEFAULT_BASE_WIDTH, SQRT_TWO, parse_aspect_ratio
from gridengine.engine.units import round_half_up


ALL_CATEGORIES = "all"


def _columns(
    count: int,
    gutter: float,
    margin: float,
    unit: GridUnit = GridUnit.PERCENT,
    alignment: GridAlignment = GridAlignment.STRETCH,
) -> ColumnGridConfig:
    return ColumnGridConfig(
        count=count,
        gutter_size=gutter,
        gutter_unit=unit,
        margin=margin,
        margin_unit=unit,
        alignment=alignment,
    )


def _rows(count: int, gutter: float, margin: float) -> RowGridConfig:
    return RowGridConfig(
        count=count,
        gutter_size=gutter,
        gutter_unit=GridUnit.PERCENT,
        margin=margin,
        margin_unit=GridUnit.PERCENT,
    )


def _baseline(height: float) -> BaselineGridConfig:
    return BaselineGridConfig(height=height, offset=0)


def _preset(
    id: str,
    name: str,
    description: str,
    category: GridCategory,
    tags: list[str],
    config: GridConfig,
    aspect_ratio: Optional[str] = None,
) -> GridPreset:
    return GridPreset(
        id=id,
        name=name,
        description=description,
        category=category,
        tags=tuple(tags),
        aspect_ratio=aspect_ratio,
        config=config,
        is_custom=False,
    )


# ============================================================================
# Classic Swiss (Müller-Brockmann inspired)
# ============================================================================

_CLASSIC_SWISS = (
    _preset(
        "swiss-4col", "4-Column Classic",
        "The foundational Müller-Brockmann grid. Clean, balanced, and versatile for posters and editorial.",
        GridCategory.CLASSIC_SWISS, ["müller-brockmann", "poster", "editorial", "balanced"],
        GridConfig(columns=_columns(4, 3.5, 7)), "1:√2",
    ),
    _preset(
        "swiss-6col", "6-Column Editorial",
        "Classic editorial grid with more flexibility. Ideal for magazines and multi-column layouts.",
        GridCategory.CLASSIC_SWISS, ["editorial", "magazine", "flexible", "multi-column"],
        GridConfig(columns=_columns(6, 2.5, 5)), "2:3",
    ),
    _preset(
        "swiss-8col-asym", "8-Column Asymmetric",
        "Asymmetric Swiss grid with wider left margin for annotations and notes.",
        GridCategory.CLASSIC_SWISS, ["asymmetric", "annotated", "academic", "notes"],
        GridConfig(columns=_columns(8, 2, 10, alignment=GridAlignment.MIN)), "1:√2",
    ),
    _preset(
        "swiss-3plus3", "3+3 Split Grid",
        "Two groups of 3 columns with a wider center gutter. Perfect for facing pages or comparison layouts.",
        GridCategory.CLASSIC_SWISS, ["split", "facing-pages", "comparison", "symmetrical"],
        GridConfig(columns=_columns(6, 4, 6)), "16:9",
    ),
    _preset(
        "swiss-golden", "Golden Ratio Grid",
        "Grid based on the golden ratio (φ). Creates naturally pleasing proportions.",
        GridCategory.CLASSIC_SWISS, ["golden-ratio", "phi", "proportional", "classic"],
        GridConfig(columns=_columns(5, 2.5, 6.18)), "1:φ",
    ),
    _preset(
        "swiss-poster", "Swiss Poster Grid",
        "Bold 3-column grid with generous margins. Designed for large-format posters.",
        GridCategory.CLASSIC_SWISS, ["poster", "bold", "large-format", "minimal"],
        GridConfig(columns=_columns(3, 5, 10)), "1:√2",
    ),
    _preset(
        "swiss-2col-wide", "2-Column Wide",
        "Simple two-column layout with wide gutters. Clean and impactful.",
        GridCategory.CLASSIC_SWISS, ["minimal", "simple", "wide-gutter", "impactful"],
        GridConfig(columns=_columns(2, 8, 8)), "1:1",
    ),
)

# ============================================================================
# Editorial
# ============================================================================

_EDITORIAL = (
    _preset(
        "editorial-magazine", "Magazine Standard",
        "9-column grid commonly used in contemporary magazine design.",
        GridCategory.EDITORIAL, ["magazine", "contemporary", "flexible", "standard"],
        GridConfig(columns=_columns(9, 2, 4)), "2:3",
    ),
    _preset(
        "editorial-newspaper", "Newspaper Grid",
        "Dense 5-column grid for news layouts with narrow gutters.",
        GridCategory.EDITORIAL, ["newspaper", "news", "dense", "information"],
        GridConfig(columns=_columns(5, 1.5, 3)), "3:4",
    ),
    _preset(
        "editorial-book", "Book Layout",
        "Traditional book grid with generous inner margin for binding.",
        GridCategory.EDITORIAL, ["book", "print", "binding", "traditional"],
        GridConfig(columns=_columns(1, 0, 12)), "2:3",
    ),
    _preset(
        "editorial-2col-text", "2-Column Text",
        "Classic two-column text layout for articles and essays.",
        GridCategory.EDITORIAL, ["text", "article", "essay", "readable"],
        GridConfig(columns=_columns(2, 4, 8)), "8.5:11",
    ),
)

# ============================================================================
# Poster
# ============================================================================

_POSTER = (
    _preset(
        "poster-dramatic", "Dramatic Poster",
        "Bold asymmetric grid for dramatic poster compositions.",
        GridCategory.POSTER, ["dramatic", "bold", "asymmetric", "expressive"],
        GridConfig(columns=_columns(4, 3, 5, alignment=GridAlignment.MIN)), "1:√2",
    ),
    _preset(
        "poster-cinema", "Cinema Poster",
        "Wide-format grid for cinematic posters and horizontal compositions.",
        GridCategory.POSTER, ["cinema", "wide", "horizontal", "film"],
        GridConfig(columns=_columns(6, 2, 4)), "2.35:1",
    ),
    _preset(
        "poster-minimal", "Minimal Poster",
        "Single-column grid with maximum whitespace for minimal designs.",
        GridCategory.POSTER, ["minimal", "whitespace", "simple", "clean"],
        GridConfig(columns=_columns(1, 0, 15, alignment=GridAlignment.CENTER)), "1:√2",
    ),
    _preset(
        "poster-event", "Event Poster",
        "Balanced grid for event posters with clear hierarchy zones.",
        GridCategory.POSTER, ["event", "concert", "exhibition", "hierarchy"],
        GridConfig(columns=_columns(4, 4, 8)), "1:√2",
    ),
)

# ============================================================================
# Web / UI (pixel based)
# ============================================================================

_WEB_UI = (
    _preset(
        "web-12col", "12-Column (Bootstrap)",
        "Industry-standard 12-column grid used in Bootstrap and most web frameworks.",
        GridCategory.WEB_UI, ["bootstrap", "web", "responsive", "standard"],
        GridConfig(columns=_columns(12, 24, 16, unit=GridUnit.PIXEL)), "16:9",
    ),
    _preset(
        "web-8col", "8-Column UI",
        "Clean 8-column grid for dashboard and application interfaces.",
        GridCategory.WEB_UI, ["dashboard", "app", "interface", "clean"],
        GridConfig(columns=_columns(8, 24, 24, unit=GridUnit.PIXEL)), "16:9",
    ),
    _preset(
        "web-16col", "16-Column Dense",
        "Dense 16-column grid for complex data-heavy interfaces.",
        GridCategory.WEB_UI, ["dense", "data", "complex", "detailed"],
        GridConfig(columns=_columns(16, 16, 16, unit=GridUnit.PIXEL)), "16:9",
    ),
    _preset(
        "web-4col-mobile", "4-Column Mobile",
        "Mobile-first 4-column grid for responsive designs.",
        GridCategory.WEB_UI, ["mobile", "responsive", "touch", "compact"],
        GridConfig(columns=_columns(4, 16, 16, unit=GridUnit.PIXEL)), "9:16",
    ),
    _preset(
        "web-6col-tablet", "6-Column Tablet",
        "Tablet-optimized 6-column grid for medium-sized screens.",
        GridCategory.WEB_UI, ["tablet", "medium", "responsive", "balanced"],
        GridConfig(columns=_columns(6, 20, 24, unit=GridUnit.PIXEL)), "4:3",
    ),
)

# ============================================================================
# Modular (columns + rows)
# ============================================================================

_MODULAR = (
    _preset(
        "modular-4x4", "4×4 Modular",
        "Square modular grid with 16 equal modules. Great for grid-based layouts.",
        GridCategory.MODULAR, ["square", "modular", "grid-based", "structured"],
        GridConfig(columns=_columns(4, 3, 5), rows=_rows(4, 3, 5)), "1:1",
    ),
    _preset(
        "modular-5x7", "5×7 Poster Module",
        "Modular grid optimized for A-series poster proportions.",
        GridCategory.MODULAR, ["poster", "a-series", "module", "flexible"],
        GridConfig(columns=_columns(5, 2.5, 5), rows=_rows(7, 2.5, 5)), "1:√2",
    ),
    _preset(
        "modular-6x8", "6×8 Editorial Module",
        "Versatile modular grid for complex editorial layouts.",
        GridCategory.MODULAR, ["editorial", "versatile", "complex", "detailed"],
        GridConfig(columns=_columns(6, 2, 4), rows=_rows(8, 2, 4)), "3:4",
    ),
    _preset(
        "modular-3x5", "3×5 Card Grid",
        "Simple modular grid ideal for card-based layouts and galleries.",
        GridCategory.MODULAR, ["card", "gallery", "simple", "photos"],
        GridConfig(columns=_columns(3, 4, 6), rows=_rows(5, 4, 6)), "3:5",
    ),
    _preset(
        "modular-8x8-dense", "8×8 Dense Module",
        "Dense modular grid for complex data visualization and dashboards.",
        GridCategory.MODULAR, ["dense", "data-viz", "dashboard", "complex"],
        GridConfig(columns=_columns(8, 1.5, 3), rows=_rows(8, 1.5, 3)), "1:1",
    ),
)

# ============================================================================
# Baseline
# ============================================================================

_BASELINE = (
    _preset(
        "baseline-4px", "4px Sub-Grid",
        "Fine-grained 4px baseline for precise spacing and icon alignment.",
        GridCategory.BASELINE, ["fine", "precise", "icons", "alignment"],
        GridConfig(baseline=_baseline(4)),
    ),
    _preset(
        "baseline-8px", "8px Web Standard",
        "Industry-standard 8px baseline grid for web and UI design.",
        GridCategory.BASELINE, ["web", "standard", "ui", "8-point"],
        GridConfig(baseline=_baseline(8)),
    ),
    _preset(
        "baseline-12px", "12px Print Standard",
        "Traditional 12px baseline for print typography and editorial.",
        GridCategory.BASELINE, ["print", "editorial", "traditional", "typography"],
        GridConfig(baseline=_baseline(12)),
    ),
    _preset(
        "baseline-16px", "16px Large Format",
        "Generous 16px baseline for large-format designs and posters.",
        GridCategory.BASELINE, ["large-format", "poster", "generous", "display"],
        GridConfig(baseline=_baseline(16)),
    ),
    _preset(
        "baseline-24px", "24px Display",
        "Large 24px baseline for display typography and headlines.",
        GridCategory.BASELINE, ["display", "headlines", "large", "impact"],
        GridConfig(baseline=_baseline(24)),
    ),
)

# ============================================================================
# Combined (columns + baseline)
# ============================================================================

_COMBINED = (
    _preset(
        "combined-6col-8px", "6-Column + 8px Baseline",
        "Editorial grid with 6 columns and 8px baseline for web typography.",
        GridCategory.COMBINED, ["editorial", "web", "typography", "complete"],
        GridConfig(columns=_columns(6, 24, 24, unit=GridUnit.PIXEL), baseline=_baseline(8)), "16:9",
    ),
    _preset(
        "combined-12col-8px", "12-Column + 8px Baseline",
        "Complete web grid system with Bootstrap columns and 8-point baseline.",
        GridCategory.COMBINED, ["bootstrap", "web", "complete", "standard"],
        GridConfig(columns=_columns(12, 24, 16, unit=GridUnit.PIXEL), baseline=_baseline(8)), "16:9",
    ),
    _preset(
        "combined-4col-12px", "4-Column + 12px Baseline",
        "Swiss poster grid with 4 columns and 12px baseline for print.",
        GridCategory.COMBINED, ["swiss", "poster", "print", "complete"],
        GridConfig(columns=_columns(4, 3.5, 7), baseline=_baseline(12)), "1:√2",
    ),
    _preset(
        "combined-modular-8px", "4×4 Modular + 8px Baseline",
        "Modular grid with columns, rows, and baseline for structured layouts.",
        GridCategory.COMBINED, ["modular", "structured", "complete", "systematic"],
        GridConfig(columns=_columns(4, 3, 5), rows=_rows(4, 3, 5), baseline=_baseline(8)), "1:1",
    ),
)


GRID_PRESETS: tuple[GridPreset, ...] = (
    _CLASSIC_SWISS + _EDITORIAL + _POSTER + _WEB_UI + _MODULAR + _BASELINE + _COMBINED
)

PRESETS_BY_CATEGORY: dict[GridCategory, tuple[GridPreset, ...]] = {
    GridCategory.CLASSIC_SWISS: _CLASSIC_SWISS,
    GridCategory.EDITORIAL: _EDITORIAL,
    GridCategory.POSTER: _POSTER,
    GridCategory.WEB_UI: _WEB_UI,
    GridCategory.MODULAR: _MODULAR,
    GridCategory.BASELINE: _BASELINE,
    GridCategory.COMBINED: _COMBINED,
    GridCategory.CUSTOM: (),
}

GRID_CATEGORIES: tuple[GridCategoryInfo, ...] = (
    GridCategoryInfo(id=ALL_CATEGORIES, name="All Grids", description="Browse all available grid presets"),
    GridCategoryInfo(id="classic-swiss", name="Classic Swiss", description="Müller-Brockmann inspired grids"),
    GridCategoryInfo(id="editorial", name="Editorial", description="Magazine and publication grids"),
    GridCategoryInfo(id="poster", name="Poster", description="Large format poster grids"),
    GridCategoryInfo(id="web-ui", name="Web/UI", description="Standard web and interface grids"),
    GridCategoryInfo(id="modular", name="Modular", description="Column + row modular grids"),
    GridCategoryInfo(id="baseline", name="Baseline", description="Typography baseline grids"),
    GridCategoryInfo(id="combined", name="Combined", description="Column + baseline complete systems"),
)

# Frame sizes for presets without a recommended aspect ratio
_CATEGORY_FRAME_SIZES: dict[GridCategory, tuple[int, int]] = {
    GridCategory.POSTER: (800, 1132),     # ~A2 proportion
    GridCategory.EDITORIAL: (800, 1040),  # magazine page
    GridCategory.WEB_UI: (1440, 900),     # desktop viewport
}


# ============================================================================
# Lookup
# ============================================================================


def get_preset_by_id(preset_id: str) -> Optional[GridPreset]:
    """Get a preset by ID.

    Args:
        preset_id: Preset ID.

    Returns:
        GridPreset or None if not found.
    """
    for preset in GRID_PRESETS:
        if preset.id == preset_id:
            return preset
    return None


def get_preset_or_raise(preset_id: str) -> GridPreset:
    """Get a preset by ID, raising if not found.

    Raises:
        KeyError: If the preset does not exist.
    """
    preset = get_preset_by_id(preset_id)
    if preset is None:
        raise KeyError(f"Preset '{preset_id}' not found")
    return preset


def get_presets_by_category(category: Union[GridCategory, str]) -> list[GridPreset]:
    """Presets in a category; 'all' returns the whole catalogue, unknown ones nothing."""
    if category == ALL_CATEGORIES:
        return list(GRID_PRESETS)
    try:
        return list(PRESETS_BY_CATEGORY[GridCategory(category)])
    except ValueError:
        return []


def search_presets(query: str) -> list[GridPreset]:
    """Case-insensitive substring search over name, description and tags.

    An empty query returns every preset.
    """
    normalized = query.lower().strip()
    if not normalized:
        return list(GRID_PRESETS)

    return [
        preset
        for preset in GRID_PRESETS
        if normalized in preset.name.lower()
        or normalized in preset.description.lower()
        or any(normalized in tag.lower() for tag in preset.tags)
    ]


def get_preset_count() -> int:
    return len(GRID_PRESETS)


def get_preset_count_by_category(category: Union[GridCategory, str]) -> int:
    return len(get_presets_by_category(category))


def get_preset_frame_dimensions(preset: GridPreset, base_width: float = DEFAULT_BASE_WIDTH) -> FrameDimensions:
    """Recommended frame size for a preset.

    Uses the preset's aspect ratio when it has one, otherwise a size typical
    for its category (A-series portrait at base_width for anything else).
    """
    if preset.aspect_ratio:
        return parse_aspect_ratio(preset.aspect_ratio, base_width)

    if preset.category in _CATEGORY_FRAME_SIZES:
        width, height = _CATEGORY_FRAME_SIZES[preset.category]
        return FrameDimensions(width=width, height=height)

    return FrameDimensions(width=base_width, height=round_half_up(base_width * SQRT_TWO))
