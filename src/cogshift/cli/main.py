"""
Command-line interface for gear shift planning.
"""

import argparse
import logging
import sys
from pathlib import Path

from ..io.loaders import (
    load_drivetrain_json,
    save_drivetrain_json,
    DrivetrainConfig,
)
from ..calculator.core import GearRatioCalculator
from ..calculator.constants import DEFAULT_FRONT_COGS, DEFAULT_REAR_COGS, DEFAULT_TARGET_RATIO
from ..calculator.validation import validate_drivetrain
from ..calculator.output import to_summary, to_json, to_markdown

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cogshift',
        description="Find the gear combination closest to a target ratio and the shifts to reach it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default drivetrain (38/30 x 28/23/19/16), target ratio 1.6
  cogshift

  # Different target and starting gear
  cogshift --ratio 1.2 --initial 38 23

  # Custom drivetrain
  cogshift --front 50 34 --rear 32 28 25 21 19 17 15 13 11 --ratio 2.5

  # Read a drivetrain file, override the ratio, write Markdown
  cogshift drivetrain.json --ratio 1.4 --format markdown -o plan.md

  # Save the drivetrain used for this run
  cogshift --front 50 34 --rear 28 24 21 --save-config drivetrain.json
        """
    )

    parser.add_argument(
        'config_file',
        nargs='?',
        default=None,
        help='Drivetrain JSON file (optional; command-line values override it)'
    )

    parser.add_argument(
        '--front',
        type=int,
        nargs='+',
        default=None,
        metavar='TEETH',
        help=f"Front cog tooth counts (default: {' '.join(map(str, DEFAULT_FRONT_COGS))})"
    )

    parser.add_argument(
        '--rear',
        type=int,
        nargs='+',
        default=None,
        metavar='TEETH',
        help=f"Rear cog tooth counts in shifting order (default: {' '.join(map(str, DEFAULT_REAR_COGS))})"
    )

    parser.add_argument(
        '--ratio',
        type=float,
        default=None,
        help=f'Target ratio, front teeth / rear teeth (default: {DEFAULT_TARGET_RATIO})'
    )

    parser.add_argument(
        '--initial',
        type=int,
        nargs=2,
        default=None,
        metavar=('FRONT', 'REAR'),
        help='Starting combination (default: first front and first rear cog)'
    )

    parser.add_argument(
        '--format',
        choices=['summary', 'markdown', 'json'],
        default='summary',
        help='Output format (default: summary)'
    )

    parser.add_argument(
        '-o', '--output',
        type=str,
        default=None,
        help='Write output to this file instead of stdout'
    )

    parser.add_argument(
        '--save-config',
        type=str,
        default=None,
        help='Save the resolved drivetrain as JSON'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser


def resolve_config(args: argparse.Namespace) -> DrivetrainConfig:
    """Merge the optional config file with command-line overrides."""
    if args.config_file:
        config = load_drivetrain_json(args.config_file)
    else:
        config = DrivetrainConfig(
            front_cogs=list(DEFAULT_FRONT_COGS),
            rear_cogs=list(DEFAULT_REAR_COGS),
            target_ratio=DEFAULT_TARGET_RATIO,
        )

    overrides = {}
    if args.front is not None:
        overrides['front_cogs'] = args.front
    if args.rear is not None:
        overrides['rear_cogs'] = args.rear
    if args.ratio is not None:
        overrides['target_ratio'] = args.ratio
    if args.initial is not None:
        overrides['initial_combination'] = tuple(args.initial)

    if overrides:
        config = config.model_copy(update=overrides)
    return config


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        config = resolve_config(args)
        calc = GearRatioCalculator.from_config(config)
    except (OSError, ValueError) as e:
        print(f"Error loading drivetrain: {e}", file=sys.stderr)
        return 1

    plan = calc.plan()
    validation = validate_drivetrain(
        calc.front_cogs,
        calc.rear_cogs,
        calc.target_ratio,
        initial=calc.initial_combination,
    )
    for m in validation.warnings:
        logger.warning(f"{m.code}: {m.message}")

    if args.format == 'json':
        text = to_json(plan, validation)
    elif args.format == 'markdown':
        text = to_markdown(plan, validation)
    else:
        text = to_summary(plan.closest, plan.shift_sequence)

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(text if text.endswith("\n") else text + "\n")
        print(f"Saved {args.format} output: {output_path}")
    else:
        print(text)

    if args.save_config:
        save_drivetrain_json(calc.to_config(), args.save_config)
        print(f"Saved drivetrain: {args.save_config}")

    if not validation.valid or plan.error:
        for m in validation.errors:
            print(f"Error: {m.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
