"""Two-tier validation of grid configurations against a frame.

Structural checks decide whether a grid can be applied to a surface at all;
their errors must block the apply action. Advisory checks are usability
hints and never block. Neither tier raises for bad input: every triggered
check is collected into the result.
"""

from dataclasses import dataclass, field

from gridengine.config import EngineSettings, ValidationThresholds
from gridengine.dsl.schema import (
    BaselineGridConfig,
    ColumnGridConfig,
    GridConfig,
    GridRole,
    RowGridConfig,
)
from gridengine.engine.grid_geometry import calculate_column_width, calculate_row_height
from gridengine.engine.units import to_pixels


@dataclass
class Violation:
    """A single failed check."""

    rule: str
    message: str
    severity: str  # "error" or "warning"
    role: GridRole


@dataclass
class ValidationResult:
    """Outcome of a validation pass.

    For structural validation ``valid`` means "no errors"; for advisory
    validation it means "no suggestions".
    """

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    violations: list[Violation] = field(default_factory=list)

    @classmethod
    def from_violations(cls, violations: list[Violation], strict_warnings: bool = False) -> "ValidationResult":
        errors = [v.message for v in violations if v.severity == "error"]
        warnings = [v.message for v in violations if v.severity == "warning"]
        valid = not (errors or warnings) if strict_warnings else not errors
        return cls(valid=valid, errors=errors, warnings=warnings, violations=violations)


class GridValidator:
    """Validates grid configurations against a frame size."""

    def __init__(self, thresholds: ValidationThresholds | None = None) -> None:
        """Initialize the validator.

        Args:
            thresholds: Limits to check against. Defaults to the standard limits.
        """
        self.thresholds = thresholds or ValidationThresholds()

    @classmethod
    def from_settings(cls, settings: EngineSettings) -> "GridValidator":
        """Build a validator from engine settings."""
        return cls(settings.thresholds)

    # -------------------------------------------------------------------------
    # Structural tier
    # -------------------------------------------------------------------------

    def validate_structure(
        self, config: GridConfig, frame_width: float, frame_height: float
    ) -> ValidationResult:
        """Check that a grid can be applied to a frame of the given size.

        Args:
            config: Grid configuration.
            frame_width: Target frame width in pixels.
            frame_height: Target frame height in pixels.

        Returns:
            ValidationResult; valid when there are no errors.
        """
        violations: list[Violation] = []

        if config.columns is not None:
            violations.extend(
                self._check_tracks(config.columns, GridRole.COLUMNS, "Column", frame_width, "width")
            )

        if config.rows is not None:
            violations.extend(
                self._check_tracks(config.rows, GridRole.ROWS, "Row", frame_height, "height")
            )

        if config.baseline is not None:
            violations.extend(self._check_baseline(config.baseline, frame_height))

        return ValidationResult.from_violations(violations)

    def _check_tracks(
        self,
        config: ColumnGridConfig | RowGridConfig,
        role: GridRole,
        label: str,
        size: float,
        axis: str,
    ) -> list[Violation]:
        """Count, margin and gutter limits for a column or row grid."""
        violations = []
        limits = self.thresholds

        if config.count < limits.min_count:
            violations.append(Violation(
                rule="min_count",
                message=f"{label} count must be at least {limits.min_count}",
                severity="error",
                role=role,
            ))
        if config.count > limits.max_count:
            violations.append(Violation(
                rule="max_count",
                message=f"{label} count exceeds maximum ({limits.max_count})",
                severity="error",
                role=role,
            ))

        margin_px = to_pixels(config.margin, config.margin_unit, size)
        if margin_px * 2 > size:
            violations.append(Violation(
                rule="margin_overflow",
                message=f"{label} margins exceed frame {axis}",
                severity="error",
                role=role,
            ))

        gutter_px = to_pixels(config.gutter_size, config.gutter_unit, size)
        if gutter_px > size:
            violations.append(Violation(
                rule="gutter_overflow",
                message=f"{label} gutter exceeds frame {axis}",
                severity="error",
                role=role,
            ))

        return violations

    def _check_baseline(self, config: BaselineGridConfig, frame_height: float) -> list[Violation]:
        violations = []
        minimum = self.thresholds.min_baseline_height

        if config.height < minimum:
            violations.append(Violation(
                rule="min_baseline_height",
                message=f"Baseline height must be at least {minimum:g}px",
                severity="error",
                role=GridRole.BASELINE,
            ))
        if config.height > frame_height:
            violations.append(Violation(
                rule="baseline_overflow",
                message="Baseline height exceeds frame height",
                severity="warning",
                role=GridRole.BASELINE,
            ))
        if config.offset < 0:
            violations.append(Violation(
                rule="negative_offset",
                message="Baseline offset is negative",
                severity="warning",
                role=GridRole.BASELINE,
            ))

        return violations

    # -------------------------------------------------------------------------
    # Advisory tier
    # -------------------------------------------------------------------------

    def validate_usability(
        self, config: GridConfig, frame_width: float, frame_height: float
    ) -> ValidationResult:
        """Usability heuristics. Never produces errors.

        Args:
            config: Grid configuration.
            frame_width: Target frame width in pixels.
            frame_height: Target frame height in pixels.

        Returns:
            ValidationResult; valid only when there are no warnings.
        """
        violations: list[Violation] = []
        limits = self.thresholds

        if config.columns is not None:
            columns = config.columns
            if calculate_column_width(columns, frame_width) < limits.min_track_size:
                violations.append(self._advice(
                    "narrow_columns",
                    f"Columns may be too narrow (< {limits.min_track_size:g}px each)",
                    GridRole.COLUMNS,
                ))

            if columns.count > limits.high_column_count:
                violations.append(self._advice(
                    "high_column_count",
                    f"Very high column count (> {limits.high_column_count}) may be difficult to use",
                    GridRole.COLUMNS,
                ))

            margin_px = to_pixels(columns.margin, columns.margin_unit, frame_width)
            if margin_px > frame_width * limits.max_margin_ratio:
                violations.append(self._advice(
                    "wide_margins",
                    f"Margins exceed {limits.max_margin_ratio * 100:g}% of frame width",
                    GridRole.COLUMNS,
                ))

        if config.rows is not None:
            if calculate_row_height(config.rows, frame_height) < limits.min_track_size:
                violations.append(self._advice(
                    "short_rows",
                    f"Rows may be too short (< {limits.min_track_size:g}px each)",
                    GridRole.ROWS,
                ))

        if config.baseline is not None:
            height = config.baseline.height
            if height < limits.small_baseline_height:
                violations.append(self._advice(
                    "small_baseline",
                    f"Baseline height may be too small (< {limits.small_baseline_height:g}px)",
                    GridRole.BASELINE,
                ))
            if height > limits.large_baseline_height:
                violations.append(self._advice(
                    "large_baseline",
                    f"Baseline height is quite large (> {limits.large_baseline_height:g}px)",
                    GridRole.BASELINE,
                ))

        return ValidationResult.from_violations(violations, strict_warnings=True)

    @staticmethod
    def _advice(rule: str, message: str, role: GridRole) -> Violation:
        return Violation(rule=rule, message=message, severity="warning", role=role)


# =============================================================================
# Convenience functions
# =============================================================================


def validate_grid_structure(
    config: GridConfig, frame_width: float, frame_height: float
) -> ValidationResult:
    """Structural validation with the standard limits."""
    return GridValidator().validate_structure(config, frame_width, frame_height)


def validate_grid_config(
    config: GridConfig, frame_width: float, frame_height: float
) -> ValidationResult:
    """Advisory validation with the standard limits."""
    return GridValidator().validate_usability(config, frame_width, frame_height)
