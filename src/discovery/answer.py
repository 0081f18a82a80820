"""Result of one strategy run."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Answer:
    """What a strategy reports.

    Attributes:
        count: Number of switches the strategy discovered
        steps: Total steps walked to discover it
    """

    count: int
    steps: int

    def to_dict(self) -> dict[str, Any]:
        return {"count": self.count, "steps": self.steps}
