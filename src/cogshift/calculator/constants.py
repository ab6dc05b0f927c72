"""
Constants for drivetrain calculations.

Default drivetrain values describe a common compact road setup
(38/30 chainrings with a four-position cassette) and are what the
CLI and the example script fall back to.

Keep tooth counts as plain ints and ratios as floats; add new
constants here rather than hardcoding in functions.
"""

from typing import Tuple

# =============================================================================
# Default drivetrain
# =============================================================================

# Chainrings, largest first (tooth count)
DEFAULT_FRONT_COGS: Tuple[int, ...] = (38, 30)

# Cassette positions in shifting order (tooth count)
DEFAULT_REAR_COGS: Tuple[int, ...] = (28, 23, 19, 16)

# Target ratio when the caller does not supply one
DEFAULT_TARGET_RATIO: float = 1.6

# =============================================================================
# Queries
# =============================================================================

# Cogs reported by a closest-combination query on an empty table
NO_COMBINATION_COGS: Tuple[int, int] = (0, 0)
NO_COMBINATION_RATIO: float = 0.0

# =============================================================================
# Presentation
# =============================================================================

# Ratios are stored at full precision and rounded only for display
RATIO_DISPLAY_DECIMALS: int = 3
