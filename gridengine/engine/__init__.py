# Grid configuration engine: pure computations over GridConfig values

from .units import (
    percent_to_pixels,
    pixels_to_percent,
    to_pixels,
    from_pixels,
)

from .aspect_ratio import (
    COMMON_ASPECT_RATIOS,
    GOLDEN_RATIO,
    SQRT_TWO,
    parse_aspect_ratio,
    calculate_aspect_ratio,
    get_aspect_ratio_name,
    get_aspect_ratio_info,
)

from .grid_geometry import (
    calculate_column_width,
    calculate_row_height,
    calculate_module_dimensions,
    column_positions,
    row_positions,
)

from .grid_scaler import (
    scale_grid,
    scale_grid_for_frame_size,
    needs_scaling,
)

from .preview_paths import (
    generate_column_segments,
    generate_row_segments,
    generate_baseline_segments,
    generate_grid_segments,
    segments_to_svg_path,
    generate_column_grid_svg_path,
    generate_row_grid_svg_path,
    generate_baseline_grid_svg_path,
    generate_preview_segments,
    generate_preview_svg_path,
)

from .colors import (
    grid_color_to_css,
    grid_color_to_hex,
    css_to_grid_color,
    fallback_color,
)

from .grid_colors import (
    ColorScheme,
    GRID_COLOR_SCHEMES,
    default_color,
    default_color_from_settings,
    scheme_colors,
    scheme_from_settings,
)

from .typography import (
    TypographySuggestion,
    calculate_baseline_from_typography,
    get_typography_suggestions,
)

from .layout_grids import (
    column_config_to_layout_grid,
    row_config_to_layout_grid,
    baseline_config_to_layout_grid,
    grid_config_to_layout_grids,
    generate_grid_frame_name,
    grid_config_to_frame_name,
    preset_to_frame_name,
)

from .detection import (
    normalize_detected_grid,
    detected_grid_to_config,
)
