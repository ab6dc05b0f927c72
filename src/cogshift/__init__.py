"""
Cogshift - closest-ratio gear search and shift planning for bicycle drivetrains.

Example:
    >>> from cogshift import GearRatioCalculator
    >>>
    >>> calc = GearRatioCalculator([38, 30], [28, 23, 19, 16], ratio=1.2)
    >>> calc.set_initial_combination(38, 23)
    >>> [step.cogs for step in calc.generate_shift_sequence()]
    [(38, 23), (30, 28), (30, 23)]

Note: All imports are lazy-loaded, so `import cogshift` stays cheap
until a calculator or IO name is actually used.
"""

__version__ = "1.0.0"

# Define which names come from which submodule

_ENUMS = {"ShiftPhase"}

_CALCULATOR = {
    "GearRatioCalculator",
    "ShiftSequence",
    "NO_COMBINATION",
    "CogShiftError",
    "EmptyCogSetError",
    "InvalidInitialCombination",
    "CombinationTableError",
    "validate_drivetrain",
    "Severity",
    "ValidationResult",
    "to_summary",
    "to_json",
    "to_markdown",
}

_IO = {
    "load_drivetrain_json",
    "save_drivetrain_json",
    "GearCombination",
    "DrivetrainConfig",
    "ShiftPlan",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    raise AttributeError(f"module 'cogshift' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums (lazy loaded from enums)
    "ShiftPhase",

    # Calculator (lazy loaded from calculator)
    "GearRatioCalculator",
    "ShiftSequence",
    "NO_COMBINATION",
    "CogShiftError",
    "EmptyCogSetError",
    "InvalidInitialCombination",
    "CombinationTableError",
    "validate_drivetrain",
    "Severity",
    "ValidationResult",
    "to_summary",
    "to_json",
    "to_markdown",

    # IO (lazy loaded from io)
    "load_drivetrain_json",
    "save_drivetrain_json",
    "GearCombination",
    "DrivetrainConfig",
    "ShiftPlan",
]
