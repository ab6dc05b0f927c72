"""
JSON input/output for drivetrain configurations.

Loads drivetrain descriptions (cog sets, target ratio, starting
combination) and saves them back in the same format.

Uses Pydantic for automatic validation and enum coercion.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..enums import ShiftPhase
from .schema import SCHEMA_VERSION

logger = logging.getLogger(__name__)


class GearCombination(BaseModel):
    """A front/rear cog pairing and its ratio."""
    model_config = ConfigDict(extra='ignore', frozen=True)

    front_cog: int
    rear_cog: int
    ratio: float
    phase: Optional[ShiftPhase] = None  # Only set for shift sequence steps

    @field_validator('phase', mode='before')
    @classmethod
    def coerce_phase(cls, v):
        if isinstance(v, str):
            return ShiftPhase(v.lower())
        return v

    @property
    def cogs(self) -> Tuple[int, int]:
        return (self.front_cog, self.rear_cog)


class DrivetrainConfig(BaseModel):
    """Drivetrain description: cog sets, target ratio and starting gear."""
    model_config = ConfigDict(extra='ignore')

    front_cogs: List[int]
    rear_cogs: List[int]
    target_ratio: float = 1.6
    initial_combination: Optional[Tuple[int, int]] = None  # (front, rear)

    @field_validator('initial_combination', mode='before')
    @classmethod
    def coerce_initial(cls, v):
        # Accept {"front_cog": 38, "rear_cog": 28} as well as [38, 28]
        if isinstance(v, dict):
            return (v.get('front_cog'), v.get('rear_cog'))
        return v


class ShiftPlan(BaseModel):
    """Result of planning a shift: closest combination and the steps to reach it."""
    model_config = ConfigDict(extra='ignore')

    drivetrain: DrivetrainConfig
    closest: GearCombination
    shift_sequence: List[GearCombination] = Field(default_factory=list)
    error: Optional[str] = None  # Validation code when no sequence could be produced


def load_drivetrain_json(filepath: Union[str, Path]) -> DrivetrainConfig:
    """
    Load a drivetrain configuration from JSON.

    Args:
        filepath: Path to JSON file

    Returns:
        DrivetrainConfig with all parameters

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If JSON is missing the cog sets
        ValidationError: If a field has the wrong type
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Drivetrain file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    # Check for 'drivetrain' wrapper (plan exports have this)
    if isinstance(data, dict) and 'drivetrain' in data:
        data = data['drivetrain']

    if not isinstance(data, dict) or 'front_cogs' not in data or 'rear_cogs' not in data:
        raise ValueError(
            "Invalid drivetrain JSON - must contain 'front_cogs' and 'rear_cogs'"
        )

    config = DrivetrainConfig.model_validate(data)
    logger.debug(f"Loaded drivetrain from {filepath}: {config}")
    return config


def save_drivetrain_json(config: DrivetrainConfig, filepath: Union[str, Path]) -> None:
    """
    Save a drivetrain configuration to a JSON file.

    Args:
        config: Drivetrain configuration
        filepath: Path to save JSON file
    """
    filepath = Path(filepath)

    data = config.model_dump(mode='json', exclude_none=True)
    data['schema_version'] = SCHEMA_VERSION

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=2)
    logger.debug(f"Saved drivetrain to {filepath}")
