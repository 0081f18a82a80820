#!/usr/bin/env python3
"""Compare mean step costs of the strategies over many random circles.

Usage:
    python scripts/run_benchmark.py [--sizes 10 50 100] [--seeds 50] [--base-seed 0]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv
load_dotenv(project_root / ".env")

from src.circle.validation import CircleError
from src.harness.benchmark import DOMINANCE_ORDER, benchmark


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Benchmark switch counting strategies over random layouts",
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=[10, 50, 100],
        help="Ring sizes to measure (default: 10 50 100)",
    )
    parser.add_argument(
        "--seeds",
        type=int,
        default=50,
        help="Number of random layouts per size (default: 50)",
    )
    parser.add_argument(
        "--base-seed",
        type=int,
        default=0,
        help="First layout seed (default: 0)",
    )
    parser.add_argument(
        "--on-probability",
        type=float,
        default=0.5,
        help="Chance of a switch starting ON (default: 0.5)",
    )
    parser.add_argument(
        "--json",
        metavar="PATH",
        help="Also write the statistics as JSON",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    seeds = range(args.base_seed, args.base_seed + args.seeds)
    try:
        summary = benchmark(args.sizes, seeds, on_probability=args.on_probability)
    except (CircleError, ValueError) as e:
        logger.error(f"Benchmark failed: {e}")
        return 1

    print(f"{'size':>6}  {'strategy':<14} {'mean':>10} {'std':>9} {'min':>7} {'max':>7}")
    for size in summary.sizes:
        by_kind = summary.for_size(size)
        for kind in DOMINANCE_ORDER:
            s = by_kind[kind]
            print(f"{size:>6}  {kind.value:<14} {s.mean:>10.1f} {s.std:>9.1f} {s.min:>7} {s.max:>7}")
        if not summary.dominance_holds(size):
            logger.warning(f"Mean step costs at size {size} are not in the expected order")

    if args.json:
        Path(args.json).write_text(json.dumps(summary.to_dict(), indent=2), encoding="utf-8")

    return 0 if summary.total_failures == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
