"""
Pytest configuration and shared fixtures for cogshift tests.
"""

import json

import pytest

from cogshift.calculator import GearRatioCalculator


# ─── Drivetrains ─────────────────────────────────────────────────────────


@pytest.fixture
def front_cogs():
    """Compact double chainring."""
    return [38, 30]


@pytest.fixture
def rear_cogs():
    """Four-position cassette in shifting order."""
    return [28, 23, 19, 16]


@pytest.fixture
def calc(front_cogs, rear_cogs):
    """Calculator on the compact drivetrain, target 1.6, starting at F:38 R:28."""
    return GearRatioCalculator(front_cogs, rear_cogs, ratio=1.6)


@pytest.fixture
def drivetrain_dict():
    """Drivetrain as it appears in a JSON file."""
    return {
        "front_cogs": [38, 30],
        "rear_cogs": [28, 23, 19, 16],
        "target_ratio": 1.2,
        "initial_combination": [38, 23],
    }




@pytest.fixture
def temp_json_file(tmp_path, drivetrain_dict):
    """Drivetrain JSON file on disk."""
    path = tmp_path / "drivetrain.json"
    path.write_text(json.dumps(drivetrain_dict))
    return path
