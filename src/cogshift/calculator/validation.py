"""
Drivetrain Calculator - Validation Rules

Checks a drivetrain description before (or instead of) running the
shift calculation. Findings are reported as messages rather than
raised, so a caller sees every problem in one pass.

Accepts plain sequences so it can validate both calculator input and
loaded JSON configurations.
"""

from dataclasses import dataclass, field
from enum import Enum
from math import isfinite
from typing import List, Optional, Sequence, Tuple


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def empty_cog_set_message(front_cogs: Sequence[int], rear_cogs: Sequence[int]) -> ValidationMessage:
    """Build the EMPTY_COG_SET finding for whichever set is empty."""
    missing = [name for name, cogs in (("front", front_cogs), ("rear", rear_cogs)) if not cogs]
    return ValidationMessage(
        severity=Severity.ERROR,
        code="EMPTY_COG_SET",
        message=f"No {' or '.join(missing)} cogs supplied; there are no combinations to choose from",
        suggestion="Provide at least one tooth count for both the front and rear sets",
    )


def invalid_initial_message(initial: Tuple[int, int]) -> ValidationMessage:
    """Build the INVALID_INITIAL_COMBINATION finding."""
    front, rear = initial
    return ValidationMessage(
        severity=Severity.ERROR,
        code="INVALID_INITIAL_COMBINATION",
        message=f"Initial combination F:{front} R:{rear} is not part of this drivetrain",
        suggestion="Pick a front cog from the chainrings and a rear cog from the cassette",
    )


def validate_drivetrain(
    front_cogs: Sequence[int],
    rear_cogs: Sequence[int],
    target_ratio: float,
    initial: Optional[Tuple[int, int]] = None,
) -> ValidationResult:
    """
    Validate a drivetrain against the calculator's assumptions.

    Args:
        front_cogs: Chainring tooth counts
        rear_cogs: Cassette tooth counts, in shifting order
        target_ratio: Ratio the rider is aiming for
        initial: Optional (front, rear) starting combination

    Returns:
        ValidationResult with all findings
    """
    messages: List[ValidationMessage] = []

    messages.extend(_validate_cog_sets(front_cogs, rear_cogs))
    messages.extend(_validate_target_ratio(front_cogs, rear_cogs, target_ratio))
    messages.extend(_validate_initial(front_cogs, rear_cogs, initial))

    has_errors = any(m.severity == Severity.ERROR for m in messages)

    return ValidationResult(
        valid=not has_errors,
        messages=messages
    )


def _validate_cog_sets(front_cogs: Sequence[int], rear_cogs: Sequence[int]) -> List[ValidationMessage]:
    """Check both cog sets are usable for the cross product and rear sweep."""
    messages = []

    if not front_cogs or not rear_cogs:
        messages.append(empty_cog_set_message(front_cogs, rear_cogs))

    for name, cogs in (("front", front_cogs), ("rear", rear_cogs)):
        bad = [c for c in cogs if c < 1]
        if bad:
            messages.append(ValidationMessage(
                severity=Severity.ERROR,
                code="NON_POSITIVE_COG",
                message=f"{name.capitalize()} cogs must have at least one tooth (got {bad})",
                suggestion="Use tooth counts, e.g. 34 or 50",
            ))

        dupes = sorted({c for c in cogs if list(cogs).count(c) > 1})
        if dupes:
            messages.append(ValidationMessage(
                severity=Severity.WARNING,
                code="DUPLICATE_COG",
                message=f"{name.capitalize()} cogs repeat {dupes}; each combination is only counted once",
                suggestion="Remove the repeated tooth counts",
            ))

    # Shift sequences sweep the rear set only
    if front_cogs and rear_cogs and len(front_cogs) > len(rear_cogs):
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="FRONT_EXCEEDS_REAR",
            message=(
                f"{len(front_cogs)} front cogs but only {len(rear_cogs)} rear cogs; "
                "shift sequences only step through the rear set"
            ),
            suggestion="List the set with more positions as the rear cogs",
        ))

    return messages


def _validate_target_ratio(
    front_cogs: Sequence[int],
    rear_cogs: Sequence[int],
    target_ratio: float,
) -> List[ValidationMessage]:
    """Check the target ratio is positive and reachable."""
    messages = []

    if not isfinite(target_ratio):
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="NON_FINITE_RATIO",
            message=f"Target ratio {target_ratio} is not a finite number",
            suggestion="Ratios are front teeth divided by rear teeth, e.g. 1.6",
        ))
        return messages

    if target_ratio <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="NON_POSITIVE_RATIO",
            message=f"Target ratio {target_ratio} must be greater than zero",
            suggestion="Ratios are front teeth divided by rear teeth, e.g. 1.6",
        ))
        return messages

    usable_front = [c for c in front_cogs if c > 0]
    usable_rear = [c for c in rear_cogs if c > 0]
    if not usable_front or not usable_rear:
        return messages

    lowest = min(usable_front) / max(usable_rear)
    highest = max(usable_front) / min(usable_rear)
    if not lowest <= target_ratio <= highest:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="TARGET_OUT_OF_RANGE",
            message=(
                f"Target ratio {target_ratio:.3f} is outside the drivetrain range "
                f"{lowest:.3f}-{highest:.3f}; the nearest extreme gear will be used"
            ),
        ))

    return messages


def _validate_initial(
    front_cogs: Sequence[int],
    rear_cogs: Sequence[int],
    initial: Optional[Tuple[int, int]],
) -> List[ValidationMessage]:
    """Check the starting combination exists on this drivetrain."""
    if initial is None or not front_cogs or not rear_cogs:
        return []

    front, rear = initial
    if front in front_cogs and rear in rear_cogs:
        return []
    return [invalid_initial_message(initial)]
