"""Tests for the MonadAssertions test helpers."""

from __future__ import annotations

import pytest

from railmonads import Either, MonadAssertions, Option, Result, Try


class TestOptionAssertions:
    def test_assert_some_returns_value(self):
        assert MonadAssertions.assert_some(Option.some(3)) == 3

    def test_assert_some_fails_on_none(self):
        with pytest.raises(AssertionError, match="Expected Some but got Nothing — user lookup"):
            MonadAssertions.assert_some(Option.none(), "user lookup")

    def test_assert_none(self):
        MonadAssertions.assert_none(Option.none())
        with pytest.raises(AssertionError, match=r"got Some\(1\)"):
            MonadAssertions.assert_none(Option.some(1))


class TestResultAssertions:
    def test_assert_success(self):
        assert MonadAssertions.assert_success(Result.success("ok")) == "ok"

    def test_assert_success_shows_error(self):
        with pytest.raises(AssertionError, match=r"Expected Success but got Error\('bad'\)"):
            MonadAssertions.assert_success(Result.error("bad"))

    def test_assert_error(self):
        assert MonadAssertions.assert_error(Result.error("bad")) == "bad"
        with pytest.raises(AssertionError, match=r"got Success\(1\)"):
            MonadAssertions.assert_error(Result.success(1))

    def test_assert_success_value(self):
        MonadAssertions.assert_success_value(Result.success(2), 2)
        with pytest.raises(AssertionError, match="Expected success value 3 but got 2"):
            MonadAssertions.assert_success_value(Result.success(2), 3)

    def test_assert_error_value(self):
        MonadAssertions.assert_error_value(Result.error("e"), "e")
        with pytest.raises(AssertionError):
            MonadAssertions.assert_error_value(Result.error("e"), "other")


class TestTryAssertions:
    def test_assert_success_accepts_try(self):
        assert MonadAssertions.assert_success(Try.catching(lambda: 5)) == 5

    def test_assert_exception(self):
        exc = MonadAssertions.assert_exception(
            Try.catching(lambda: int("x")), ValueError, match="INVALID LITERAL"
        )
        assert isinstance(exc, ValueError)

    def test_assert_exception_wrong_type(self):
        with pytest.raises(AssertionError, match="Expected captured KeyError but got ValueError"):
            MonadAssertions.assert_exception(Try.catching(lambda: int("x")), KeyError)


class TestEitherAssertions:
    def test_assert_right(self):
        assert MonadAssertions.assert_right(Either.right(1)) == 1
        with pytest.raises(AssertionError, match=r"got Left\('l'\)"):
            MonadAssertions.assert_right(Either.left("l"))

    def test_assert_left(self):
        assert MonadAssertions.assert_left(Either.left("l")) == "l"
        with pytest.raises(AssertionError, match="Expected Left"):
            MonadAssertions.assert_left(Either.right(1))
