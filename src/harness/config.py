"""Configuration for the discovery harness."""

import hashlib
import json
import os
from dataclasses import dataclass, field

from src.discovery.strategies import StrategyKind

DEFAULT_COUNT = 100


def parse_count(raw: str | None, default: int = DEFAULT_COUNT) -> int:
    """Read a switch count from a command-line argument.

    Anything that is not an integer falls back to the default. Range checks
    are left to circle construction.
    """
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass
class HarnessConfig:
    """Configuration for one harness run.

    Attributes:
        count: Number of switches in the circle (N)
        seed: Random seed for the initial layout; None means unseeded
        layout: Name of the layout generator used to build the circle
        on_probability: Chance of a switch starting ON (random layouts only)
        strategies: Strategies to run, in order
    """

    count: int = DEFAULT_COUNT
    seed: int | None = None
    layout: str = "random_coin"
    on_probability: float = 0.5
    strategies: list[StrategyKind] = field(default_factory=lambda: list(StrategyKind))

    def content_hash(self) -> str:
        """Compute a hash of the configuration for reproducibility."""
        content = {
            "count": self.count,
            "seed": self.seed,
            "layout": self.layout,
            "on_probability": self.on_probability,
            "strategies": [StrategyKind(s).value for s in self.strategies],
        }
        content_str = json.dumps(content, sort_keys=True)
        return hashlib.sha256(content_str.encode()).hexdigest()[:16]

    @classmethod
    def from_env(cls, **overrides) -> "HarnessConfig":
        """Build a config from SWITCHES_* environment variables.

        Recognised variables: SWITCHES_COUNT, SWITCHES_SEED, SWITCHES_LAYOUT,
        SWITCHES_ON_PROBABILITY. Keyword overrides that are not None win
        over the environment.
        """
        config = cls()
        if "SWITCHES_COUNT" in os.environ:
            config.count = parse_count(os.environ["SWITCHES_COUNT"])
        if os.environ.get("SWITCHES_SEED"):
            config.seed = int(os.environ["SWITCHES_SEED"])
        if os.environ.get("SWITCHES_LAYOUT"):
            config.layout = os.environ["SWITCHES_LAYOUT"]
        if os.environ.get("SWITCHES_ON_PROBABILITY"):
            config.on_probability = float(os.environ["SWITCHES_ON_PROBABILITY"])

        for name, value in overrides.items():
            if not hasattr(config, name):
                raise TypeError(f"Unknown HarnessConfig field '{name}'")
            if value is not None:
                setattr(config, name, value)
        return config
