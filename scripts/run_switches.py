#!/usr/bin/env python3
"""Count the switches in a random circle with every strategy.

Builds one circle, runs each strategy on its own copy of it, and prints
whether each strategy found the right count and how many steps it took.

Usage:
    python scripts/run_switches.py [COUNT] [--seed S] [--layout NAME] [--json PATH]
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv(project_root / ".env")

from src.circle.validation import CircleError
from src.discovery.strategies import StrategyKind
from src.harness import Harness, HarnessConfig, format_report, parse_count
from src.harness.layouts import LayoutRegistry


def setup_logging(verbose: bool = False) -> None:
    """Configure logging.

    Args:
        verbose: If True, set DEBUG level
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Discover the number of switches in a circle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 100 random switches
  python scripts/run_switches.py

  # Reproducible 500-switch circle
  python scripts/run_switches.py 500 --seed 7

  # Only the fast strategies, all switches ON
  python scripts/run_switches.py 50 --layout all_on --strategy enhanced --strategy bidirectional
        """,
    )

    parser.add_argument(
        "count",
        nargs="?",
        default=None,
        help="Number of switches (default: $SWITCHES_COUNT or 100)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the initial layout (default: unseeded)",
    )

    parser.add_argument(
        "--layout",
        default=None,
        choices=LayoutRegistry.list_available(),
        help="Initial layout (default: random_coin)",
    )

    parser.add_argument(
        "--on-probability",
        type=float,
        default=None,
        help="Chance of a switch starting ON for random layouts (default: 0.5)",
    )

    parser.add_argument(
        "--strategy",
        action="append",
        choices=[k.value for k in StrategyKind],
        help="Strategy to run; repeat for several (default: all)",
    )

    parser.add_argument(
        "--json",
        metavar="PATH",
        help="Also write the run report as JSON",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print the report without ANSI colors",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 if every strategy was correct, 1 otherwise)
    """
    args = parse_args()
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    try:
        config = HarnessConfig.from_env(
            count=parse_count(args.count) if args.count is not None else None,
            seed=args.seed,
            layout=args.layout,
            on_probability=args.on_probability,
            strategies=[StrategyKind(s) for s in args.strategy] if args.strategy else None,
        )
        report = Harness(config).run()
    except (CircleError, ValueError) as e:
        logger.error(f"Run failed: {e}")
        return 1

    print(format_report(report, color=not args.no_color))

    if args.json:
        Path(args.json).write_text(report.model_dump_json(indent=2), encoding="utf-8")
        logger.info(f"Report written to {args.json}")

    return 0 if report.all_correct else 1


if __name__ == "__main__":
    sys.exit(main())
