"""
Gear Ratio Calculator - closest-ratio search and shift planning.

Example:
    >>> from cogshift.calculator import GearRatioCalculator, to_summary
    >>>
    >>> calc = GearRatioCalculator(front_cogs=[38, 30], rear_cogs=[28, 23, 19, 16], ratio=1.6)
    >>> calc.set_initial_combination(38, 28)
    >>> print(to_summary(calc.find_closest_combination(), calc.generate_shift_sequence()))
    Front: 30, Rear: 19, Ratio 1.579
    1 - F:38 R:28 Ratio 1.357
    2 - F:30 R:28 Ratio 1.071
    3 - F:30 R:23 Ratio 1.304
    4 - F:30 R:19 Ratio 1.579
"""

from .core import (
    # Calculator
    GearRatioCalculator,
    build_combination_table,
    CogPair,
    ShiftSequence,
    NO_COMBINATION,

    # Errors
    CogShiftError,
    EmptyCogSetError,
    InvalidInitialCombination,
    CombinationTableError,
)

from .constants import (
    DEFAULT_FRONT_COGS,
    DEFAULT_REAR_COGS,
    DEFAULT_TARGET_RATIO,
)

from .validation import (
    validate_drivetrain,
    Severity,
    ValidationMessage,
    ValidationResult,
)

from .output import (
    format_combination,
    format_shift_step,
    to_summary,
    to_json,
    to_markdown,
)

from ..enums import ShiftPhase

# Convenience imports
from ..io import GearCombination, DrivetrainConfig, ShiftPlan


__all__ = [
    # Constants
    "DEFAULT_FRONT_COGS",
    "DEFAULT_REAR_COGS",
    "DEFAULT_TARGET_RATIO",
    "NO_COMBINATION",

    # Enums
    "ShiftPhase",

    # Models
    "GearCombination",
    "DrivetrainConfig",
    "ShiftPlan",
    "CogPair",
    "ShiftSequence",

    # Calculator
    "GearRatioCalculator",
    "build_combination_table",

    # Errors
    "CogShiftError",
    "EmptyCogSetError",
    "InvalidInitialCombination",
    "CombinationTableError",

    # Validation
    "validate_drivetrain",
    "Severity",
    "ValidationMessage",
    "ValidationResult",

    # Output formatters
    "format_combination",
    "format_shift_step",
    "to_summary",
    "to_json",
    "to_markdown",
]
