"""
Test assertions for Option, Result, Try and Either values.

Expressive assert helpers that produce clear failure messages and hand back
the unwrapped payload for further checks.

Usage in tests:
    from railmonads import MonadAssertions

    def test_parse_port():
        value = MonadAssertions.assert_success(parse_port("8080"))
        assert value == 8080

    def test_missing_user():
        MonadAssertions.assert_none(find_user(404))
"""

from __future__ import annotations

from typing import Any, TypeVar

from railmonads.either import Either
from railmonads.option import Option
from railmonads.result import Result
from railmonads.try_ import Try

T = TypeVar("T")


def _context(message: str) -> str:
    return f" — {message}" if message else ""


class MonadAssertions:
    """Expressive test assertions for container values."""

    @staticmethod
    def assert_some(option: Option[T], message: str = "") -> T:
        """
        Assert the Option is present and return the value.

            value = MonadAssertions.assert_some(option)
        """
        assert option.is_some(), f"Expected Some but got Nothing{_context(message)}"
        return option.value()

    @staticmethod
    def assert_none(option: Option[Any], message: str = "") -> None:
        assert option.is_none(), f"Expected Nothing but got {option!r}{_context(message)}"

    @staticmethod
    def assert_success(result: Result[Any, T] | Try[T], message: str = "") -> T:
        """
        Assert the Result (or Try) is a Success and return the value.

        Raises AssertionError with clear message on failure.
        """
        assert result.is_success(), (
            f"Expected Success but got Error({result.error_value()!r}){_context(message)}"
        )
        return result.success_value()

    @staticmethod
    def assert_error(result: Result[T, Any] | Try[Any], message: str = "") -> T:
        """
        Assert the Result (or Try) is an Error and return the error value.

            error = MonadAssertions.assert_error(result)
        """
        assert result.is_error(), (
            f"Expected Error but got Success({result.success_value()!r}){_context(message)}"
        )
        return result.error_value()

    @staticmethod
    def assert_success_value(result: Result[Any, Any] | Try[Any], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = MonadAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_error_value(result: Result[Any, Any], expected_error: Any) -> None:
        """Assert the Result is an Error with the specific error value."""
        error = MonadAssertions.assert_error(result)
        assert error == expected_error, (
            f"Expected error value {expected_error!r} but got {error!r}"
        )

    @staticmethod
    def assert_exception(
        attempt: Try[Any],
        expected_type: type[BaseException] = Exception,
        match: str = "",
    ) -> Exception:
        """Assert the Try captured an exception of the given type, optionally containing text."""
        exc = MonadAssertions.assert_error(attempt)
        assert isinstance(exc, expected_type), (
            f"Expected captured {expected_type.__name__} but got {type(exc).__name__}: {exc}"
        )
        assert match.lower() in str(exc).lower(), (
            f"Expected captured exception message to contain {match!r} but message was: {str(exc)!r}"
        )
        return exc

    @staticmethod
    def assert_right(either: Either[Any, T], message: str = "") -> T:
        assert either.is_right(), f"Expected Right but got {either!r}{_context(message)}"
        return either.right_value()

    @staticmethod
    def assert_left(either: Either[T, Any], message: str = "") -> T:
        assert either.is_left(), f"Expected Left but got {either!r}{_context(message)}"
        return either.left_value()
