"""Run a single strategy against a circle."""

import logging

from src.circle.circle import SwitchCircle
from src.circle.cursor import CircleCursor
from src.discovery.answer import Answer
from src.discovery.strategies import Strategy, StrategyKind, get_strategy

logger = logging.getLogger(__name__)


def run(strategy: Strategy | StrategyKind | str, circle: SwitchCircle) -> Answer:
    """Run a strategy on a circle and return what it found.

    The circle is frozen first and the strategy only ever sees a fresh
    cursor on its start cell. Switch states are mutated in place, so pass
    a clone if the layout is needed afterwards.

    Args:
        strategy: A strategy function, or the kind/name of a registered one
        circle: The circle to explore

    Returns:
        Answer with the discovered count and the steps walked
    """
    if not callable(strategy):
        strategy = get_strategy(strategy)

    circle.freeze()
    cursor = CircleCursor(circle)
    answer = strategy(cursor)

    logger.debug(
        f"{getattr(strategy, '__name__', strategy)} found {answer.count} switches "
        f"in {answer.steps} steps"
    )
    return answer
