"""Average step costs over many random layouts.

Single layouts say little about which strategy is cheaper: an all-OFF
ring costs `enhanced` two more steps than `basic`, for example. The
ordering primitive >= basic >= enhanced >= bidirectional is expected to
hold on the mean step cost over many seeds.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

import numpy as np

from src.discovery.strategies import StrategyKind
from src.harness.config import HarnessConfig
from src.harness.harness import Harness

logger = logging.getLogger(__name__)

# Expected cost order, most expensive first.
DOMINANCE_ORDER: tuple[StrategyKind, ...] = (
    StrategyKind.PRIMITIVE,
    StrategyKind.BASIC,
    StrategyKind.ENHANCED,
    StrategyKind.BIDIRECTIONAL,
)


@dataclass
class StepStats:
    """Step cost statistics for one strategy at one ring size.

    Attributes:
        strategy: Strategy measured
        size: Ring size
        runs: Number of layouts measured
        mean: Mean steps
        std: Standard deviation of steps
        min: Fewest steps on any layout
        max: Most steps on any layout
        failures: Layouts where the reported count was wrong
    """

    strategy: StrategyKind
    size: int
    runs: int
    mean: float
    std: float
    min: int
    max: int
    failures: int = 0

    @classmethod
    def from_steps(
        cls, strategy: StrategyKind, size: int, steps: list[int], failures: int = 0
    ) -> "StepStats":
        values = np.asarray(steps, dtype=float)
        return cls(
            strategy=strategy,
            size=size,
            runs=len(steps),
            mean=float(values.mean()),
            std=float(values.std()),
            min=int(values.min()),
            max=int(values.max()),
            failures=failures,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "strategy": self.strategy.value,
            "size": self.size,
            "runs": self.runs,
            "mean": self.mean,
            "std": self.std,
            "min": self.min,
            "max": self.max,
            "failures": self.failures,
        }


@dataclass
class BenchmarkSummary:
    """Statistics for every (size, strategy) pair measured."""

    stats: list[StepStats] = field(default_factory=list)

    def for_size(self, size: int) -> dict[StrategyKind, StepStats]:
        return {s.strategy: s for s in self.stats if s.size == size}

    @property
    def sizes(self) -> list[int]:
        return sorted({s.size for s in self.stats})

    @property
    def total_failures(self) -> int:
        return sum(s.failures for s in self.stats)

    def dominance_holds(self, size: int) -> bool:
        """Check that mean cost never increases along DOMINANCE_ORDER.

        Strategies that were not measured are skipped.
        """
        by_kind = self.for_size(size)
        means = [by_kind[k].mean for k in DOMINANCE_ORDER if k in by_kind]
        return all(a >= b for a, b in zip(means, means[1:]))

    def to_dict(self) -> dict[str, Any]:
        return {"stats": [s.to_dict() for s in self.stats]}


def benchmark(
    sizes: Iterable[int],
    seeds: Iterable[int],
    strategies: Iterable[StrategyKind] | None = None,
    on_probability: float = 0.5,
) -> BenchmarkSummary:
    """Run every strategy on random layouts for each size and seed.

    Args:
        sizes: Ring sizes to measure
        seeds: Layout seeds; each seed gives one layout per size
        strategies: Strategies to measure (default: all)
        on_probability: Chance of a switch starting ON

    Returns:
        BenchmarkSummary with one StepStats per (size, strategy)
    """
    seeds = list(seeds)
    if not seeds:
        raise ValueError("benchmark needs at least one seed")
    kinds = [StrategyKind(k) for k in (strategies or list(StrategyKind))]

    summary = BenchmarkSummary()
    for size in sizes:
        steps: dict[StrategyKind, list[int]] = {k: [] for k in kinds}
        failures: dict[StrategyKind, int] = {k: 0 for k in kinds}

        for seed in seeds:
            config = HarnessConfig(
                count=size,
                seed=seed,
                on_probability=on_probability,
                strategies=kinds,
            )
            report = Harness(config).run()
            for outcome in report.outcomes:
                steps[outcome.strategy].append(outcome.steps)
                if not outcome.correct:
                    failures[outcome.strategy] += 1

        for kind in kinds:
            stats = StepStats.from_steps(kind, size, steps[kind], failures[kind])
            logger.info(
                f"size={size} {kind.value}: mean={stats.mean:.1f} std={stats.std:.1f} "
                f"min={stats.min} max={stats.max} failures={stats.failures}"
            )
            summary.stats.append(stats)

    return summary
