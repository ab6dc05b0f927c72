"""
Cogshift IO - JSON schema, loaders, and exporters.

Example:
    >>> from cogshift.io import DrivetrainConfig, save_drivetrain_json, load_drivetrain_json
    >>>
    >>> config = DrivetrainConfig(front_cogs=[38, 30], rear_cogs=[28, 23, 19, 16])
    >>> save_drivetrain_json(config, "drivetrain.json")
    >>> loaded = load_drivetrain_json("drivetrain.json")
"""

from .loaders import (
    load_drivetrain_json,
    save_drivetrain_json,
    GearCombination,
    DrivetrainConfig,
    ShiftPlan,
)

from .schema import (
    SCHEMA_VERSION,
    validate_json_schema,
)

__all__ = [
    "load_drivetrain_json",
    "save_drivetrain_json",
    "GearCombination",
    "DrivetrainConfig",
    "ShiftPlan",
    "SCHEMA_VERSION",
    "validate_json_schema",
]
