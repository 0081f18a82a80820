"""Report models for harness runs.

These Pydantic models are the exported record of a run. The text report
is what the scripts print to the terminal.
"""

from pydantic import BaseModel, Field

from src.discovery.strategies import StrategyKind

_GREEN = "\033[32m"
_RED = "\033[31m"
_RESET = "\033[0m"


class StrategyOutcome(BaseModel):
    """How one strategy did on the shared initial layout."""

    strategy: StrategyKind = Field(description="Strategy that was run")
    count: int = Field(description="Number of switches the strategy reported")
    steps: int = Field(ge=0, description="Steps walked")
    correct: bool = Field(description="Whether count matched the real size")


class RunReport(BaseModel):
    """Result of running every configured strategy on one circle."""

    size: int = Field(ge=1, description="Real number of switches")
    seed: int | None = Field(default=None, description="Layout seed, if any")
    layout: str = Field(description="Layout generator family")
    initial: str = Field(description="Initial switch glyphs walked right from the start")
    config_hash: str = Field(default="", description="HarnessConfig.content_hash()")
    outcomes: list[StrategyOutcome] = Field(default_factory=list)

    @property
    def all_correct(self) -> bool:
        return all(o.correct for o in self.outcomes)

    def outcome(self, strategy: StrategyKind | str) -> StrategyOutcome | None:
        kind = StrategyKind(strategy)
        for o in self.outcomes:
            if o.strategy == kind:
                return o
        return None


def format_outcome(outcome: StrategyOutcome, color: bool = True) -> str:
    """One report line, e.g. 'basic is correct and took 22 steps'."""
    status = "correct" if outcome.correct else "incorrect"
    if color:
        status = f"{_GREEN if outcome.correct else _RED}{status}{_RESET}"
    return f"{outcome.strategy.value} is {status} and took {outcome.steps} steps"


def format_report(report: RunReport, color: bool = True) -> str:
    """Render a run as the multi-line terminal report."""
    lines = [f"{report.size} switches: {report.initial}"]
    lines.extend(format_outcome(o, color=color) for o in report.outcomes)
    return "\n".join(lines)
