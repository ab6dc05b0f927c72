"""Type-safe enums for the gear shift calculator."""

from enum import Enum


class ShiftPhase(Enum):
    """Where a combination sits in a shift sequence"""
    INITIAL = "initial"  # Starting combination, always the first step
    REAR_SWEEP = "rear_sweep"  # Front already on target cog, rear stepping through the cassette
