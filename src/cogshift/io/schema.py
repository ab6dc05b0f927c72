"""
JSON schema definition for drivetrain files.

This defines the contract between the JSON configuration files and
the calculator. Pydantic does the type checking; this module provides
the version stamp and a light structural check that reports every
problem at once instead of stopping at the first.
"""

from typing import Any, Dict, List

SCHEMA_VERSION = "1.0"

REQUIRED_FIELDS = ("front_cogs", "rear_cogs")
OPTIONAL_FIELDS = ("target_ratio", "initial_combination", "schema_version")


def validate_json_schema(data: Dict[str, Any]) -> List[str]:
    """
    Check a drivetrain dict for structural problems.

    Args:
        data: Parsed JSON, optionally wrapped in a 'drivetrain' key

    Returns:
        List of problem descriptions, empty if the structure is usable
    """
    errors: List[str] = []

    if 'drivetrain' in data:
        data = data['drivetrain']

    for name in REQUIRED_FIELDS:
        if name not in data:
            errors.append(f"Missing required field: {name}")
            continue
        cogs = data[name]
        if not isinstance(cogs, list):
            errors.append(f"{name} must be a list of tooth counts")
        elif not all(isinstance(c, int) and not isinstance(c, bool) for c in cogs):
            errors.append(f"{name} must contain only integers")

    ratio = data.get('target_ratio')
    if ratio is not None and not isinstance(ratio, (int, float)):
        errors.append("target_ratio must be a number")

    initial = data.get('initial_combination')
    if initial is not None and not (isinstance(initial, (list, dict)) and len(initial) == 2):
        errors.append("initial_combination must be [front, rear]")

    version = data.get('schema_version')
    if version is not None and version != SCHEMA_VERSION:
        errors.append(f"Unsupported schema_version {version!r} (expected {SCHEMA_VERSION})")

    return errors
