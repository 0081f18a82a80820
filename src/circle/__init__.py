from src.circle.circle import SwitchCircle, build, clone
from src.circle.cursor import CircleCursor
from src.circle.observables import count_off, count_on, on_density, render_states
from src.circle.types import CircleConfig, SwitchCell, SwitchState
from src.circle.validation import (
    CircleError,
    InvalidArgumentError,
    InvalidSizeError,
    StructuralViolationError,
)

__all__ = [
    # Types
    "SwitchState",
    "SwitchCell",
    "CircleConfig",
    # Ring
    "SwitchCircle",
    "build",
    "clone",
    # Cursor
    "CircleCursor",
    # Observables
    "count_on",
    "count_off",
    "on_density",
    "render_states",
    # Errors
    "CircleError",
    "InvalidSizeError",
    "InvalidArgumentError",
    "StructuralViolationError",
]
