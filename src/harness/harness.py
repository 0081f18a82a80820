"""Harness for comparing discovery strategies.

The harness:
- Builds one circle from the configured layout
- Gives every strategy its own clone of that circle
- Checks each reported count against the real size
- Collects step costs into a RunReport
"""

import logging

from src.circle.circle import SwitchCircle, clone
from src.circle.observables import render_states
from src.discovery.runner import run
from src.discovery.strategies import StrategyKind
from src.harness.config import HarnessConfig
from src.harness.layouts import LayoutGenerator, LayoutRegistry
from src.harness.report import RunReport, StrategyOutcome

logger = logging.getLogger(__name__)

# Layout name recorded for circles handed to Harness.run() directly.
PREBUILT_LAYOUT = "prebuilt"


class Harness:
    """Runs all configured strategies against one shared layout.

    Usage:
        harness = Harness(HarnessConfig(count=50, seed=1))
        report = harness.run()
    """

    def __init__(self, config: HarnessConfig | None = None):
        self.config = config or HarnessConfig()

    def _layout(self) -> LayoutGenerator:
        layout = LayoutRegistry.create(self.config.layout)
        if layout is None:
            raise ValueError(
                f"Unknown layout '{self.config.layout}'. "
                f"Available: {LayoutRegistry.list_available()}"
            )
        return layout

    def build_circle(self) -> SwitchCircle:
        """Build the circle every strategy starts from.

        Raises:
            ValueError: If the configured layout is unknown
            InvalidSizeError: If the configured count is < 1
        """
        params = {"on_probability": self.config.on_probability}
        return self._layout().build(self.config.count, seed=self.config.seed, params=params)

    def run(self, circle: SwitchCircle | None = None) -> RunReport:
        """Run every strategy and report how each one did.

        Args:
            circle: Optional prebuilt circle; built from the config if omitted.
                It is never mutated, and the report records it as "prebuilt"
                with no seed or config hash.

        Returns:
            RunReport with one outcome per strategy, in config order
        """
        if circle is None:
            layout_name = self._layout().family_name()
            circle = self.build_circle()
            seed = self.config.seed
            config_hash = self.config.content_hash()
        else:
            layout_name = PREBUILT_LAYOUT
            seed = None
            config_hash = ""
        size = len(circle)
        initial = render_states(circle)
        logger.info(f"{size} switches ({layout_name}): {initial}")

        report = RunReport(
            size=size,
            seed=seed,
            layout=layout_name,
            initial=initial,
            config_hash=config_hash,
        )

        for kind in self.config.strategies:
            kind = StrategyKind(kind)
            answer = run(kind, clone(circle))
            correct = answer.count == size
            if correct:
                logger.info(f"{kind.value} is correct and took {answer.steps} steps")
            else:
                logger.error(
                    f"{kind.value} reported {answer.count} switches but there are {size}"
                )
            report.outcomes.append(StrategyOutcome(
                strategy=kind,
                count=answer.count,
                steps=answer.steps,
                correct=correct,
            ))

        return report
