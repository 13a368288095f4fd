"""
railmonads — Railway-Oriented Programming containers for Python.

Explicit, composable handling of absence, failure and exceptions — no nested
conditionals, no exception-driven control flow.

    from railmonads import Option, Result, Try

    def divide(a: int, b: int) -> Result[str, int]:
        if b == 0:
            return Result.error("division by zero")
        return Result.success(a // b)

    answer = (
        divide(12, 3)
        .bind(lambda r: divide(r, 2))
        .map(lambda r: f"answer: {r}")
        .default_with_fn(lambda err: f"failed: {err}")
    )
"""

from railmonads.union import Union
from railmonads.option import NOTHING, Nothing, Option, to_option
from railmonads.result import Result
from railmonads.try_ import Try
from railmonads.either import Either
from railmonads.errors import (
    ExpectedRightError,
    ExpectedSuccessError,
    InvalidAccessError,
    MonadError,
    UnexpectedAbsenceError,
)
from railmonads.config import MonadSettings, get_settings
from railmonads.log import configure_structlog
from railmonads.assertions import MonadAssertions
from railmonads import aio

__all__ = [
    "Union",
    "Option",
    "Nothing",
    "NOTHING",
    "to_option",
    "Result",
    "Try",
    "Either",
    "MonadError",
    "InvalidAccessError",
    "UnexpectedAbsenceError",
    "ExpectedSuccessError",
    "ExpectedRightError",
    "MonadSettings",
    "get_settings",
    "configure_structlog",
    "MonadAssertions",
    "aio",
]

__version__ = "1.0.0"
