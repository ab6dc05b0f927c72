"""
Drivetrain Calculator - Core Calculations

Finds the front/rear cog combination whose ratio is closest to a
target and the gear shifts that lead there from a starting combination.

Ratio = front tooth count / rear tooth count. Higher ratios are harder
to pedal and cover more ground per crank revolution.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from ..enums import ShiftPhase
from ..io import DrivetrainConfig, GearCombination, ShiftPlan
from .constants import DEFAULT_TARGET_RATIO, NO_COMBINATION_COGS, NO_COMBINATION_RATIO
from .validation import ValidationMessage, empty_cog_set_message, invalid_initial_message

logger = logging.getLogger(__name__)


class CogPair(NamedTuple):
    """Key of the combination table."""
    front: int
    rear: int


# Returned by find_closest_combination() when there is nothing to choose from
NO_COMBINATION = GearCombination(
    front_cog=NO_COMBINATION_COGS[0],
    rear_cog=NO_COMBINATION_COGS[1],
    ratio=NO_COMBINATION_RATIO,
)


class CogShiftError(Exception):
    """Base class for calculator errors."""


class EmptyCogSetError(CogShiftError, ValueError):
    """The front or rear cog set is empty, so no combination exists."""


class InvalidInitialCombination(CogShiftError, ValueError):
    """The starting combination is not on this drivetrain."""

    def __init__(self, front_cog: int, rear_cog: int):
        self.front_cog = front_cog
        self.rear_cog = rear_cog
        super().__init__(f"Initial combination F:{front_cog} R:{rear_cog} is not in the combination table")


class CombinationTableError(CogShiftError, RuntimeError):
    """A combination the shift sweep relies on is missing from the table.

    Only raised if the table and cog sets have drifted apart, which
    construction rules out.
    """


def build_combination_table(front_cogs: Sequence[int], rear_cogs: Sequence[int]) -> Dict[CogPair, float]:
    """
    Calculate the ratio of every front x rear pairing.

    Args:
        front_cogs: Chainring tooth counts
        rear_cogs: Cassette tooth counts

    Returns:
        Dict keyed by CogPair, in front-major then rear order.
        Empty if either set is empty.

    Raises:
        ValueError: If any tooth count is below 1
    """
    bad = [c for c in (*front_cogs, *rear_cogs) if c < 1]
    if bad:
        raise ValueError(f"Cog tooth counts must be positive integers, got {bad}")

    table: Dict[CogPair, float] = {}
    for front in front_cogs:
        for rear in rear_cogs:
            table[CogPair(front, rear)] = front / rear
    return table


def _target_ratio(ratio: float) -> float:
    """Coerce a target ratio to float, rejecting nan and infinity."""
    ratio = float(ratio)
    if not math.isfinite(ratio):
        raise ValueError(f"Target ratio must be a finite number, got {ratio}")
    return ratio


@dataclass
class ShiftSequence:
    """Ordered shift steps, or the reason there are none."""
    steps: List[GearCombination] = field(default_factory=list)
    error: Optional[ValidationMessage] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __iter__(self) -> Iterator[GearCombination]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> GearCombination:
        return self.steps[index]


class GearRatioCalculator:
    """
    Closest-ratio search and shift planning for one drivetrain.

    The combination table is built once from the cog sets. The target
    ratio and initial combination can be changed between queries.

    An instance is not thread-safe: setting the target or initial
    combination and then querying is not atomic.

    Example:
        >>> calc = GearRatioCalculator([38, 30], [28, 23, 19, 16], ratio=1.6)
        >>> calc.find_closest_combination().cogs
        (30, 19)
    """

    def __init__(self, front_cogs: Sequence[int], rear_cogs: Sequence[int], ratio: float = DEFAULT_TARGET_RATIO):
        self.front_cogs: Tuple[int, ...] = tuple(front_cogs)
        self.rear_cogs: Tuple[int, ...] = tuple(rear_cogs)
        self.target_ratio = _target_ratio(ratio)

        self.initial_combination: Optional[CogPair] = None
        if self.front_cogs and self.rear_cogs:
            self.initial_combination = CogPair(self.front_cogs[0], self.rear_cogs[0])

        self._table = build_combination_table(self.front_cogs, self.rear_cogs)
        if self._table:
            logger.debug(f"Built {len(self._table)} combinations from front={self.front_cogs} rear={self.rear_cogs}")
        else:
            logger.warning(f"Empty cog set (front={self.front_cogs}, rear={self.rear_cogs}); no combinations available")

    @classmethod
    def from_config(cls, config: DrivetrainConfig) -> "GearRatioCalculator":
        """Create a calculator from a loaded drivetrain configuration."""
        calc = cls(config.front_cogs, config.rear_cogs, ratio=config.target_ratio)
        if config.initial_combination is not None:
            calc.set_initial_combination(*config.initial_combination)
        return calc

    def to_config(self) -> DrivetrainConfig:
        """Snapshot the current drivetrain state as a configuration."""
        return DrivetrainConfig(
            front_cogs=list(self.front_cogs),
            rear_cogs=list(self.rear_cogs),
            target_ratio=self.target_ratio,
            initial_combination=tuple(self.initial_combination) if self.initial_combination else None,
        )

    def set_target_ratio(self, ratio: float) -> None:
        """Replace the target ratio. Ratios are precomputed, so nothing is rebuilt."""
        self.target_ratio = _target_ratio(ratio)

    def set_initial_combination(self, front_cog: int, rear_cog: int) -> None:
        """Replace the starting combination.

        Not checked here; generate_shift_sequence() reports a pair that
        is not on the drivetrain.
        """
        self.initial_combination = CogPair(front_cog, rear_cog)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, cogs) -> bool:
        try:
            return CogPair(*cogs) in self._table
        except TypeError:
            return False

    def ratio_for(self, front_cog: int, rear_cog: int) -> float:
        """Ratio of a combination on this drivetrain.

        Raises:
            KeyError: If the pair is not in the table
        """
        return self._table[CogPair(front_cog, rear_cog)]

    def combinations(self) -> List[GearCombination]:
        """Every combination in table order."""
        return [
            GearCombination(front_cog=key.front, rear_cog=key.rear, ratio=ratio)
            for key, ratio in self._table.items()
        ]

    def find_closest_combination(self) -> GearCombination:
        """
        Find the combination whose ratio is nearest the target.

        Only a strictly smaller difference replaces the current best, so
        among exact ties the first combination in table order wins
        (front cogs in supplied order, then rear cogs in supplied order).

        Returns:
            Closest GearCombination, or NO_COMBINATION if the table is empty
        """
        if not self._table:
            return NO_COMBINATION

        best_key: Optional[CogPair] = None
        best_ratio = NO_COMBINATION_RATIO
        min_diff = float('inf')
        for key, ratio in self._table.items():
            diff = abs(self.target_ratio - ratio)
            if diff < min_diff:
                min_diff = diff
                best_key = key
                best_ratio = ratio

        logger.debug(f"Closest to {self.target_ratio}: F:{best_key.front} R:{best_key.rear} ({best_ratio:.3f})")
        return GearCombination(front_cog=best_key.front, rear_cog=best_key.rear, ratio=best_ratio)

    def shift_sequence(self) -> List[GearCombination]:
        """
        Shift steps from the initial combination to the closest one.

        The first step is always the initial combination. If that is
        already the closest, it is the only step. Otherwise the front is
        moved straight to the closest front cog, then the rear steps
        through the cassette in its stored order until it reaches the
        closest rear cog.

        This is a fixed front-then-rear sweep, not a shortest path. It
        assumes the rear set has at least as many positions as the front
        set; with more front cogs than rear, the sequence still only
        walks the rear set.

        Returns:
            List of GearCombination with phase set on each step

        Raises:
            EmptyCogSetError: If either cog set is empty
            InvalidInitialCombination: If the initial pair is not in the table
            CombinationTableError: If a swept combination is missing (internal)
        """
        if not self._table:
            raise EmptyCogSetError("No combinations available: front or rear cog set is empty")

        initial = self.initial_combination
        if initial is None or initial not in self._table:
            front, rear = initial if initial is not None else NO_COMBINATION_COGS
            raise InvalidInitialCombination(front, rear)

        steps = [GearCombination(
            front_cog=initial.front,
            rear_cog=initial.rear,
            ratio=self._table[initial],
            phase=ShiftPhase.INITIAL,
        )]

        closest = self.find_closest_combination()
        if closest.cogs == initial:
            return steps

        for rear in self.rear_cogs:
            key = CogPair(closest.front_cog, rear)
            try:
                ratio = self._table[key]
            except KeyError as e:
                raise CombinationTableError(f"Combination F:{key.front} R:{key.rear} missing from table") from e
            steps.append(GearCombination(
                front_cog=key.front,
                rear_cog=key.rear,
                ratio=ratio,
                phase=ShiftPhase.REAR_SWEEP,
            ))
            if rear == closest.rear_cog:
                break

        return steps

    def generate_shift_sequence(self) -> ShiftSequence:
        """
        Shift steps from the initial combination to the closest one.

        Same walk as shift_sequence(), but an empty cog set or an
        initial combination that is not on the drivetrain is reported
        in ShiftSequence.error with no steps instead of being raised.
        """
        try:
            steps = self.shift_sequence()
        except EmptyCogSetError:
            return ShiftSequence(error=empty_cog_set_message(self.front_cogs, self.rear_cogs))
        except InvalidInitialCombination as e:
            logger.warning(str(e))
            return ShiftSequence(error=invalid_initial_message((e.front_cog, e.rear_cog)))

        logger.debug(f"Shift sequence has {len(steps)} step(s)")
        return ShiftSequence(steps=steps)

    def plan(self) -> ShiftPlan:
        """Closest combination and shift sequence bundled for output."""
        sequence = self.generate_shift_sequence()
        return ShiftPlan(
            drivetrain=self.to_config(),
            closest=self.find_closest_combination(),
            shift_sequence=sequence.steps,
            error=sequence.error.code if sequence.error else None,
        )
