"""Output formatters for shift plans.

Turns calculator results into console text, Markdown and JSON.
Ratios are rounded only here; the models keep full precision.
"""

import json
from typing import Iterable, Optional, TYPE_CHECKING

from ..io import GearCombination, ShiftPlan
from ..io.schema import SCHEMA_VERSION
from .constants import RATIO_DISPLAY_DECIMALS

if TYPE_CHECKING:
    from .validation import ValidationResult


def format_ratio(ratio: float) -> str:
    return f"{ratio:.{RATIO_DISPLAY_DECIMALS}f}"


def format_combination(combination: GearCombination) -> str:
    """One-line description, e.g. 'Front: 30, Rear: 19, Ratio 1.579'."""
    return (
        f"Front: {combination.front_cog}, Rear: {combination.rear_cog}, "
        f"Ratio {format_ratio(combination.ratio)}"
    )


def format_shift_step(order: int, combination: GearCombination) -> str:
    """Numbered step, e.g. '1 - F:38 R:28 Ratio 1.357'. ``order`` is 1-based."""
    return (
        f"{order} - F:{combination.front_cog} R:{combination.rear_cog} "
        f"Ratio {format_ratio(combination.ratio)}"
    )


def to_summary(closest: GearCombination, steps: Iterable[GearCombination]) -> str:
    """Closest combination followed by the numbered shift steps.

    Args:
        closest: Result of find_closest_combination()
        steps: Shift steps (a ShiftSequence or list of combinations)

    Returns:
        Multi-line text; the step list reads 'No shift gear!' when empty
    """
    lines = [format_combination(closest)]
    step_lines = [format_shift_step(i, c) for i, c in enumerate(steps, start=1)]
    lines.extend(step_lines or ["No shift gear!"])
    return "\n".join(lines)


def to_json(
    plan: ShiftPlan,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2,
) -> str:
    """Convert a ShiftPlan to a JSON string.

    Args:
        plan: Result of GearRatioCalculator.plan()
        validation: Optional validation results to include in output
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema version, plan and optional validation
    """
    data = plan.model_dump(mode='json', exclude_none=True)
    data['schema_version'] = SCHEMA_VERSION

    if validation is not None:
        data['validation'] = {
            'valid': validation.valid,
            'messages': [
                {
                    'severity': m.severity.value,
                    'code': m.code,
                    'message': m.message,
                    'suggestion': m.suggestion,
                }
                for m in validation.messages
            ],
        }

    return json.dumps(data, indent=indent)


def to_markdown(plan: ShiftPlan, validation: Optional["ValidationResult"] = None) -> str:
    """Convert a ShiftPlan to a Markdown report.

    Args:
        plan: Result of GearRatioCalculator.plan()
        validation: Optional validation results; findings are listed at the end

    Returns:
        Markdown string
    """
    drivetrain = plan.drivetrain
    front = "/".join(str(c) for c in drivetrain.front_cogs) or "-"
    rear = "/".join(str(c) for c in drivetrain.rear_cogs) or "-"

    lines = [
        "# Gear Shift Plan",
        "",
        "## Drivetrain",
        "",
        f"- **Front cogs:** {front}",
        f"- **Rear cogs:** {rear}",
        f"- **Target ratio:** {format_ratio(drivetrain.target_ratio)}",
    ]
    if drivetrain.initial_combination is not None:
        f_cog, r_cog = drivetrain.initial_combination
        lines.append(f"- **Initial combination:** F:{f_cog} R:{r_cog}")

    lines.extend([
        "",
        "## Closest Combination",
        "",
        format_combination(plan.closest),
        "",
        "## Shift Sequence",
        "",
    ])

    if plan.shift_sequence:
        lines.extend([
            "| Step | Front | Rear | Ratio | Phase |",
            "|------|-------|------|-------|-------|",
        ])
        for i, step in enumerate(plan.shift_sequence, start=1):
            phase = step.phase.value if step.phase else ""
            lines.append(
                f"| {i} | {step.front_cog} | {step.rear_cog} | {format_ratio(step.ratio)} | {phase} |"
            )
    else:
        reason = f" ({plan.error})" if plan.error else ""
        lines.append(f"No shift gear!{reason}")

    if validation is not None and validation.messages:
        lines.extend(["", "## Validation", ""])
        for m in validation.messages:
            lines.append(f"- **{m.severity.value.upper()}** `{m.code}`: {m.message}")
            if m.suggestion:
                lines.append(f"  - {m.suggestion}")

    return "\n".join(lines) + "\n"
