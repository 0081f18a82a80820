from src.discovery.answer import Answer
from src.discovery.runner import run
from src.discovery.strategies import (
    STRATEGIES,
    Strategy,
    StrategyKind,
    basic,
    bidirectional,
    enhanced,
    get_strategy,
    list_strategies,
    primitive,
)

__all__ = [
    "Answer",
    "run",
    # Strategies
    "Strategy",
    "StrategyKind",
    "STRATEGIES",
    "get_strategy",
    "list_strategies",
    "primitive",
    "basic",
    "enhanced",
    "bidirectional",
]
