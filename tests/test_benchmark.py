"""Tests for step cost benchmarking across many layouts."""

import pytest

from src.discovery.strategies import StrategyKind
from src.harness.benchmark import BenchmarkSummary, StepStats, benchmark


class TestStepStats:
    def test_from_steps(self):
        stats = StepStats.from_steps(StrategyKind.BASIC, 10, [2, 4, 6])
        assert stats.runs == 3
        assert stats.mean == pytest.approx(4.0)
        assert stats.std == pytest.approx(1.632993, rel=1e-5)
        assert stats.min == 2
        assert stats.max == 6
        assert stats.failures == 0

    def test_to_dict(self):
        stats = StepStats.from_steps(StrategyKind.ENHANCED, 5, [12])
        d = stats.to_dict()
        assert d["strategy"] == "enhanced"
        assert d["size"] == 5
        assert d["mean"] == 12.0


class TestDominance:
    def test_ordered_means(self):
        summary = BenchmarkSummary(stats=[
            StepStats(StrategyKind.PRIMITIVE, 10, 1, 110.0, 0.0, 110, 110),
            StepStats(StrategyKind.BASIC, 10, 1, 60.0, 0.0, 60, 60),
            StepStats(StrategyKind.ENHANCED, 10, 1, 40.0, 0.0, 40, 40),
            StepStats(StrategyKind.BIDIRECTIONAL, 10, 1, 30.0, 0.0, 30, 30),
        ])
        assert summary.dominance_holds(10)

    def test_out_of_order_means(self):
        summary = BenchmarkSummary(stats=[
            StepStats(StrategyKind.BASIC, 10, 1, 40.0, 0.0, 40, 40),
            StepStats(StrategyKind.ENHANCED, 10, 1, 60.0, 0.0, 60, 60),
        ])
        assert not summary.dominance_holds(10)


@pytest.fixture(scope="module")
def summary():
    return benchmark(sizes=[40, 60], seeds=range(20))


class TestBenchmark:
    def test_every_run_correct(self, summary):
        assert summary.total_failures == 0

    def test_one_entry_per_size_and_strategy(self, summary):
        assert summary.sizes == [40, 60]
        assert len(summary.stats) == 2 * len(StrategyKind)
        for stats in summary.stats:
            assert stats.runs == 20

    def test_primitive_cost_is_fixed(self, summary):
        primitive = summary.for_size(40)[StrategyKind.PRIMITIVE]
        assert primitive.mean == 40 * 41
        assert primitive.std == 0.0

    @pytest.mark.parametrize("size", [40, 60])
    def test_mean_costs_dominate(self, size, summary):
        assert summary.dominance_holds(size)
        by_kind = summary.for_size(size)
        assert by_kind[StrategyKind.BIDIRECTIONAL].mean < by_kind[StrategyKind.ENHANCED].mean
        assert by_kind[StrategyKind.ENHANCED].mean < by_kind[StrategyKind.BASIC].mean

    def test_subset_of_strategies(self):
        summary = benchmark(sizes=[8], seeds=[1, 2], strategies=[StrategyKind.BASIC])
        assert [s.strategy for s in summary.stats] == [StrategyKind.BASIC]

    def test_needs_seeds(self):
        with pytest.raises(ValueError):
            benchmark(sizes=[8], seeds=[])
