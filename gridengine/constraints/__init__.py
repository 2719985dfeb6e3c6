"""Grid validation - structural limits and usability heuristics."""

from gridengine.constraints.validator import (
    GridValidator,
    ValidationResult,
    Violation,
    validate_grid_config,
    validate_grid_structure,
)

__all__ = [
    "GridValidator",
    "ValidationResult",
    "Violation",
    "validate_grid_config",
    "validate_grid_structure",
]
