from src.harness.benchmark import BenchmarkSummary, StepStats, benchmark
from src.harness.config import HarnessConfig, parse_count
from src.harness.harness import Harness
from src.harness.report import RunReport, StrategyOutcome, format_report

__all__ = [
    "HarnessConfig",
    "parse_count",
    "Harness",
    "RunReport",
    "StrategyOutcome",
    "format_report",
    "benchmark",
    "BenchmarkSummary",
    "StepStats",
]
