"""
Try — a Result whose failure track always carries an exception.

Try[S] wraps a Result[Exception, S] (composition, not a subclass) and adds
the operations that convert imperative, exception-raising code into the
railway model:

    Try.catching(lambda: int(raw))          # the sole entry point from raising code
        .map_catching(lambda n: 100 // n)   # exceptions raised by the step are captured
        .map(str)                           # exceptions raised here propagate

The caller chooses per step: the *_catching variants trap any Exception the
step raises and put it on the failure track; plain map/bind let it escape.
Only Exception subclasses are trapped — KeyboardInterrupt, SystemExit and
asyncio.CancelledError always propagate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Awaitable,
    Callable,
    Generic,
    Iterable,
    TypeVar,
    overload,
)

from railmonads._combine import as_tuple, iter_unions, sequence_unions, split_combine, zip_unions
from railmonads.config import render_payload
from railmonads.errors import ExpectedSuccessError
from railmonads.log import log_captured, log_violation
from railmonads.result import Result
from railmonads.union import Union

if TYPE_CHECKING:
    from railmonads.option import Option

S = TypeVar("S")
F = TypeVar("F")
U = TypeVar("U")
R = TypeVar("R")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


@dataclass(frozen=True, slots=True)
class Try(Generic[S]):
    """
    Result[Exception, S] with exception-catching operations.

    Usage:
        >>> Try.catching(lambda: int("42")).success_value()
        42

        >>> Try.catching(lambda: int("x")).error_value()
        ValueError("invalid literal for int() with base 10: 'x'")
    """

    _result: Result[Exception, S]

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: S) -> Try[S]:
        """Create a successful Try wrapping the given value."""
        return Try(Result.success(value))

    @staticmethod
    def exception(exc: Exception) -> Try[Any]:
        """Create a failed Try holding the given exception."""
        if not isinstance(exc, Exception):
            raise TypeError(f"Try.exception() expects an Exception, got {type(exc).__name__}")
        return Try(Result.error(exc))

    @staticmethod
    def catching(computation: Callable[[], S]) -> Try[S]:
        """
        Run a computation that may raise.

        A normal return becomes the success value; any Exception raised
        becomes the failure value. Eliminates try/except boilerplate.

        Before:
            try:
                return Try.success(repo.find(user_id))
            except Exception as e:
                return Try.exception(e)

        After:
            return Try.catching(lambda: repo.find(user_id))
        """
        try:
            return Try.success(computation())
        except Exception as exc:
            log_captured("Try.catching", exc)
            return Try.exception(exc)

    # ──────────────────────── Introspection ────────────────────────

    @property
    def _union(self) -> Union[Exception, S]:
        return self._result._union

    def is_success(self) -> bool:
        return self._result.is_success()

    def is_error(self) -> bool:
        return self._result.is_error()

    def success_value(self) -> S:
        """Extract the success value. Raises InvalidAccessError on an error."""
        return self._result.success_value()

    def error_value(self) -> Exception:
        """Extract the captured exception. Raises InvalidAccessError on a success."""
        return self._result.error_value()

    # ──────────────────────── Core Transformations ────────────────────────

    def fold(self, on_error: Callable[[Exception], R], on_success: Callable[[S], R]) -> R:
        return self._result.fold(on_error, on_success)

    def map(self, mapper: Callable[[S], U]) -> Try[U]:
        """
        Transform the success value. Short-circuits on error.

        Exceptions raised by the mapper propagate; use map_catching() to capture them.
        """
        return Try(self._result.map(mapper))

    def bind(self, binder: Callable[[S], Try[U]]) -> Try[U]:
        """
        Chain a Try-returning function. Short-circuits on error.

        Exceptions raised by the binder propagate; use bind_catching() to capture them.
        """
        if self.is_error():
            return Try(Result(self._union))
        return binder(self.success_value())

    def map_catching(self, mapper: Callable[[S], U]) -> Try[U]:
        """Transform the success value, capturing any exception the mapper raises."""
        if self.is_error():
            return Try(Result(self._union))
        value = self.success_value()
        try:
            return Try.success(mapper(value))
        except Exception as exc:
            log_captured("Try.map_catching", exc)
            return Try.exception(exc)

    def bind_catching(self, binder: Callable[[S], Try[U]]) -> Try[U]:
        """
        Chain a Try-returning function, capturing any exception the binder raises.

        A captured exception replaces the prior success on the failure track.
        """
        if self.is_error():
            return Try(Result(self._union))
        value = self.success_value()
        try:
            return binder(value)
        except Exception as exc:
            log_captured("Try.bind_catching", exc)
            return Try.exception(exc)

    def map_error(self, mapper: Callable[[Exception], F]) -> Result[F, S]:
        """Transform the exception into another error type. The result is a plain Result."""
        return self._result.map_error(mapper)

    def bind_error(self, binder: Callable[[Exception], Result[F, S]]) -> Result[F, S]:
        """Chain a Result-returning function on the exception. Leaves the Try family."""
        return self._result.bind_error(binder)

    def recover(self, recovery: Callable[[Exception], Try[S]]) -> Try[S]:
        """
        Recover from a captured exception, staying inside Try.

            fetch().recover(lambda exc: Try.success(cached_value))
        """
        if self.is_success():
            return self
        return recovery(self.error_value())

    def ensure(self, predicate: Callable[[S], bool], on_false: Callable[[S], Exception]) -> Try[S]:
        """Keep the success only if the predicate holds, otherwise fail with on_false(value)."""
        return self.bind(
            lambda value: Try.success(value) if predicate(value) else Try.exception(on_false(value))
        )

    # ──────────────────────── Side Effects ────────────────────────

    def do(self, action: Callable[[S], Any]) -> Try[S]:
        """Execute a side effect on the success value without altering the Try."""
        self._result.do(action)
        return self

    def do_if_error(self, action: Callable[[Exception], Any]) -> Try[S]:
        """Execute a side effect on the captured exception without altering the Try."""
        self._result.do_if_error(action)
        return self

    # ──────────────────────── Unwrapping ────────────────────────

    def default_with(self, fallback: S) -> S:
        return self._result.default_with(fallback)

    def default_with_fn(self, fallback: Callable[[Exception], S]) -> S:
        return self._result.default_with_fn(fallback)

    def or_throw(self) -> S:
        """
        Extract the value or raise ExpectedSuccessError.

        The captured exception is chained as __cause__, so the original
        traceback stays visible.
        """
        if self.is_error():
            exc = self.error_value()
            log_violation("Try.or_throw", "expected_success")
            raise ExpectedSuccessError(exc, render_payload(exc)) from exc
        return self.success_value()

    # ──────────────────────── Combination ────────────────────────

    @overload
    def zip(self, first: Try[A], combine: Callable[[S, A], U], /) -> Try[U]: ...

    @overload
    def zip(self, first: Try[A], second: Try[B], combine: Callable[[S, A, B], U], /) -> Try[U]: ...

    @overload
    def zip(
        self,
        first: Try[A],
        second: Try[B],
        third: Try[C],
        combine: Callable[[S, A, B, C], U],
        /,
    ) -> Try[U]: ...

    @overload
    def zip(
        self,
        first: Try[A],
        second: Try[B],
        third: Try[C],
        fourth: Try[D],
        combine: Callable[[S, A, B, C, D], U],
        /,
    ) -> Try[U]: ...

    def zip(self, *args: Any) -> Try[Any]:
        """Combine several Tries. Returns the first captured exception in argument order."""
        others, combine = split_combine(args, "Try.zip")
        unions = [self._union, *iter_unions(Try, others, "zip")]
        return Try(Result(zip_unions(unions, combine)))

    @overload
    def merge(self, first: Try[A], /) -> Try[tuple[S, A]]: ...

    @overload
    def merge(self, first: Try[A], second: Try[B], /) -> Try[tuple[S, A, B]]: ...

    @overload
    def merge(self, first: Try[A], second: Try[B], third: Try[C], /) -> Try[tuple[S, A, B, C]]: ...

    @overload
    def merge(
        self, first: Try[A], second: Try[B], third: Try[C], fourth: Try[D], /
    ) -> Try[tuple[S, A, B, C, D]]: ...

    def merge(self, *others: Try[Any]) -> Try[tuple[Any, ...]]:
        return self.zip(*others, as_tuple)

    @staticmethod
    def sequence(tries: Iterable[Try[S]]) -> Try[list[S]]:
        """Success with all values if every Try succeeds, or the first captured exception."""
        return Try(Result(sequence_unions(iter_unions(Try, tries, "sequence"))))

    def flatten(self: Try[Try[U]]) -> Try[U]:
        """Collapse Try[Try[U]] into Try[U]. An outer exception always wins."""
        if self.is_error():
            return Try(Result(self._union))
        inner = self.success_value()
        if not isinstance(inner, Try):
            raise TypeError(f"Try.flatten() expects a nested Try, got {type(inner).__name__}")
        return inner

    # ──────────────────────── Conversion ────────────────────────

    def to_result(self) -> Result[Exception, S]:
        """Upcast to a plain Result[Exception, S]."""
        return self._result

    def to_option(self) -> Option[S]:
        return self._result.to_option()

    # ──────────────────────── Async Support ────────────────────────

    async def sequence_async(self: Try[Awaitable[U]]) -> Try[U]:
        """
        Flip Try[Awaitable[U]] into an awaitable Try[U].

        An error resolves immediately without awaiting. Unlike the other
        containers, an exception raised by the inner awaitable is captured
        on the failure track.
        """
        if self.is_error():
            return Try(Result(self._union))
        try:
            return Try.success(await self.success_value())
        except Exception as exc:
            log_captured("Try.sequence_async", exc)
            return Try.exception(exc)

    async def bind_async(self, binder: Callable[[S], Awaitable[Try[U]]]) -> Try[U]:
        """Chain an async Try-returning step. Exceptions from the step propagate."""
        if self.is_error():
            return Try(Result(self._union))
        return await binder(self.success_value())

    async def map_async(self, mapper: Callable[[S], Awaitable[U]]) -> Try[U]:
        """Transform the success value asynchronously. Exceptions from the step propagate."""
        if self.is_error():
            return Try(Result(self._union))
        return Try.success(await mapper(self.success_value()))

    async def bind_catching_async(self, binder: Callable[[S], Awaitable[Try[U]]]) -> Try[U]:
        """Chain an async Try-returning step, capturing exceptions raised while it runs."""
        if self.is_error():
            return Try(Result(self._union))
        value = self.success_value()
        try:
            return await binder(value)
        except Exception as exc:
            log_captured("Try.bind_catching_async", exc)
            return Try.exception(exc)

    async def map_catching_async(self, mapper: Callable[[S], Awaitable[U]]) -> Try[U]:
        """Transform the success value asynchronously, capturing exceptions raised while it runs."""
        if self.is_error():
            return Try(Result(self._union))
        value = self.success_value()
        try:
            return Try.success(await mapper(value))
        except Exception as exc:
            log_captured("Try.map_catching_async", exc)
            return Try.exception(exc)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        return self.is_success()

    def __repr__(self) -> str:
        if self.is_error():
            return f"Failure({self.error_value()!r})"
        return f"Success({self.success_value()!r})"
