"""Precondition checks for the switch circle.

All of these are programmer errors. None of them can be triggered by a
strategy that only uses the cursor, so they are raised and never retried.
"""


class CircleError(Exception):
    """Base class for switch circle errors."""

    pass


class InvalidSizeError(CircleError, ValueError):
    """Raised when a circle is requested with fewer than one switch."""

    pass


class InvalidArgumentError(CircleError, ValueError):
    """Raised when the cursor is asked to move a non-positive distance."""

    pass


class StructuralViolationError(CircleError):
    """Raised when ring adjacency is changed after the circle was frozen.

    A circle is frozen once it is handed to a strategy run. From then on
    only switch states may change.
    """

    pass


def validate_size(n: int) -> None:
    """Validate a requested ring size.

    Args:
        n: Number of switches

    Raises:
        InvalidSizeError: If n is not an integer >= 1
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidSizeError(f"Circle size must be an integer, got {n!r}")
    if n < 1:
        raise InvalidSizeError(f"Circle size must be >= 1, got {n}")


def validate_step_count(k: int) -> None:
    """Validate a movement distance.

    Raises:
        InvalidArgumentError: If k is not an integer >= 1
    """
    if isinstance(k, bool) or not isinstance(k, int):
        raise InvalidArgumentError(f"Step count must be an integer, got {k!r}")
    if k < 1:
        raise InvalidArgumentError(f"Step count must be positive, got {k}")
