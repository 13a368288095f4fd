"""
Contract violations — programmer errors raised by the containers.

Absence, domain failures and captured exceptions live INSIDE the containers
and never raise. The exceptions below are raised only when calling code
breaks the contract: reading the unpopulated side of a container, or
unwrapping with or_throw() while on the unhappy track.

Every exception here derives from MonadError, so callers can catch the whole
family, and from ValueError, the same type the railway `value()` accessor
has always raised on a failure.
"""

from __future__ import annotations

from typing import Any


class MonadError(Exception):
    """Base class for every contract violation raised by railmonads."""


class InvalidAccessError(MonadError, ValueError):
    """The requested side of a union is not the populated one."""

    side: str

    def __init__(self, side: str) -> None:
        self.side = side
        other = "Right" if side == "Left" else "Left"
        super().__init__(f"Cannot access {side} when value is {other}.")


class UnexpectedAbsenceError(MonadError, ValueError):
    """An Option was unwrapped while absent."""

    def __init__(self) -> None:
        super().__init__("Expected some value but was none.")


class ExpectedSuccessError(MonadError, ValueError):
    """A Result (or Try) was unwrapped while in the error state."""

    error: Any

    def __init__(self, error: Any, rendered: str) -> None:
        self.error = error
        super().__init__(f"Expected a successful value but was {rendered}.")


class ExpectedRightError(MonadError, ValueError):
    """An Either was unwrapped while holding a left value."""

    left: Any

    def __init__(self, left: Any, rendered: str) -> None:
        self.left = left
        super().__init__(f"Expected a right value but was left: {rendered}.")


__all__ = [
    "MonadError",
    "InvalidAccessError",
    "UnexpectedAbsenceError",
    "ExpectedSuccessError",
    "ExpectedRightError",
]
