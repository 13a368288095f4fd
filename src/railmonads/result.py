"""
Result monad — the core of Railway-Oriented Programming.

A Result[E, S] is either Success(value: S) or Error(value: E). It wraps a
Union whose left slot means failure and whose right slot means success.
Errors propagate automatically through the failure track via .bind()
short-circuiting; only .map_error(), .bind_error() and .recover() ever touch
the failure value.

    ┌───────────┐     bind      ┌───────────┐     bind      ┌──────────┐
    │ validate  │──Success──────│  enrich   │──Success──────│ persist  │──→ Result[E, S]
    │           │               │           │               │          │
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Error                     │ Error                     │ Error
          └───────────────────────────┴───────────────────────────┴──→ Result[E, S]

The failure payload is caller-defined and never inspected by the container.
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
    Optional,
    TypeVar,
    overload,
)

from railmonads._combine import as_tuple, iter_unions, sequence_unions, split_combine, zip_unions
from railmonads.config import render_payload
from railmonads.errors import ExpectedSuccessError
from railmonads.log import log_violation
from railmonads.union import Union

if TYPE_CHECKING:
    from railmonads.option import Option

E = TypeVar("E")
S = TypeVar("S")
F = TypeVar("F")
U = TypeVar("U")
R = TypeVar("R")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


@dataclass(frozen=True, slots=True)
class Result(Generic[E, S]):
    """
    Railway-Oriented Programming Result monad.

    Two possible states:
      - Success(value: S)  — the happy path
      - Error(value: E)    — the error track

    All transformations short-circuit on error, so you only write
    the success path and errors propagate automatically.

    Usage:
        >>> Result.success(42).map(lambda x: x * 2).success_value()
        84

        >>> Result.error("bad input").map(lambda x: x * 2).is_error()
        True
    """

    _union: Union[E, S]

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: S) -> Result[Any, S]:
        """Create a successful Result wrapping the given value."""
        return Result(Union.right(value))

    @staticmethod
    def error(value: E) -> Result[E, Any]:
        """Create a failed Result wrapping the given error value."""
        return Result(Union.left(value))

    @staticmethod
    def from_nullable(value: Optional[S], on_none: Callable[[], E]) -> Result[E, S]:
        """
        Create a Result from a nullable value.

            Result.from_nullable(config.get("url"), lambda: "url is required")
        """
        if value is not None:
            return Result.success(value)
        return Result.error(on_none())

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is a Success."""
        return self._union.is_right

    def is_error(self) -> bool:
        """Check if this Result is an Error."""
        return self._union.is_left

    def success_value(self) -> S:
        """
        Extract the success value. Raises InvalidAccessError on an Error.

        Prefer .fold() or .default_with() for safe access.
        """
        return self._union.right_value()

    def error_value(self) -> E:
        """Extract the error value. Raises InvalidAccessError on a Success."""
        return self._union.left_value()

    # ──────────────────────── Core Transformations ────────────────────────

    def fold(self, on_error: Callable[[E], R], on_success: Callable[[S], R]) -> R:
        """
        Apply one of two functions depending on the state.

        This is the fundamental destructor.

            result.fold(
                on_error=lambda err: f"Error: {err}",
                on_success=lambda user: f"Hello {user.name}",
            )
        """
        return self._union.match(on_error, on_success)

    def map(self, mapper: Callable[[S], U]) -> Result[E, U]:
        """
        Transform the success value. Short-circuits on error.

            Result.success(5).map(lambda x: x * 2)  # → Success(10)
            Result.error(...).map(lambda x: x * 2)  # → same Error
        """
        return self._union.match(
            Result.error,
            lambda value: Result.success(mapper(value)),
        )

    def map_error(self, mapper: Callable[[E], F]) -> Result[F, S]:
        """
        Transform the error value. Passes through success unchanged.

            result.map_error(lambda err: LookupFailed(f"Could not get league: {err}"))
        """
        return self._union.match(
            lambda error: Result.error(mapper(error)),
            Result.success,
        )

    def bind(self, binder: Callable[[S], Result[E, U]]) -> Result[E, U]:
        """
        Chain a Result-returning function. Short-circuits on error.

        This is the KEY operator of ROP — it connects railway segments.

            def divide(a: int, b: int) -> Result[str, int]:
                if b == 0:
                    return Result.error("division by zero")
                return Result.success(a // b)

            divide(12, 0).bind(lambda r: divide(r, 2))  # → the original Error
        """
        return self._union.match(Result.error, binder)

    def bind_error(self, binder: Callable[[E], Result[F, S]]) -> Result[F, S]:
        """Chain a Result-returning function on the error. Passes through success."""
        return self._union.match(binder, Result.success)

    def recover(self, recovery: Callable[[E], Result[F, S]]) -> Result[F, S]:
        """
        Turn an error into a success, or into a different error type.

            result.recover(lambda err: Result.success(default_user))
        """
        return self.bind_error(recovery)

    def ensure(self, predicate: Callable[[S], bool], on_false: Callable[[S], E]) -> Result[E, S]:
        """
        Validate the success value against a condition.
        Short-circuits on existing error.

            Result.success(order).ensure(
                lambda o: o.total > 0,
                lambda o: f"Order {o.id} total must be positive",
            )
        """
        return self.bind(
            lambda value: Result.success(value) if predicate(value) else Result.error(on_false(value))
        )

    # ──────────────────────── Side Effects ────────────────────────

    def do(self, action: Callable[[S], Any]) -> Result[E, S]:
        """
        Execute a side effect on the success value without altering the Result.

            result.do(lambda user: log.info("user_created", user_id=user.id))
        """
        if self._union.is_right:
            action(self._union.right_value())
        return self

    def do_if_error(self, action: Callable[[E], Any]) -> Result[E, S]:
        """Execute a side effect on the error without altering the Result."""
        if self._union.is_left:
            action(self._union.left_value())
        return self

    # ──────────────────────── Unwrapping ────────────────────────

    def default_with(self, fallback: S) -> S:
        """Extract the value or return a fallback on error."""
        return self._union.match(lambda _: fallback, lambda value: value)

    def default_with_fn(self, fallback: Callable[[E], S]) -> S:
        """Extract the value or compute a fallback from the error."""
        return self._union.match(fallback, lambda value: value)

    def or_throw(self) -> S:
        """
        Extract the value or raise ExpectedSuccessError.

        The exception carries the error payload in `.error`; its message
        renders the payload unless RAILMONADS_RENDER_PAYLOADS is off.
        """
        if self._union.is_left:
            error = self._union.left_value()
            log_violation("Result.or_throw", "expected_success")
            raise ExpectedSuccessError(error, render_payload(error))
        return self._union.right_value()

    # ──────────────────────── Combination ────────────────────────

    @overload
    def zip(self, first: Result[E, A], combine: Callable[[S, A], U], /) -> Result[E, U]: ...

    @overload
    def zip(
        self, first: Result[E, A], second: Result[E, B], combine: Callable[[S, A, B], U], /
    ) -> Result[E, U]: ...

    @overload
    def zip(
        self,
        first: Result[E, A],
        second: Result[E, B],
        third: Result[E, C],
        combine: Callable[[S, A, B, C], U],
        /,
    ) -> Result[E, U]: ...

    @overload
    def zip(
        self,
        first: Result[E, A],
        second: Result[E, B],
        third: Result[E, C],
        fourth: Result[E, D],
        combine: Callable[[S, A, B, C, D], U],
        /,
    ) -> Result[E, U]: ...

    def zip(self, *args: Any) -> Result[E, Any]:
        """
        Combine several Results. All must succeed for the combination to succeed.

        On failure the FIRST error in argument order is returned; later
        errors are discarded.

            order = validate_customer(cmd).zip(
                validate_products(cmd),
                lambda customer, products: Order(customer, products),
            )
        """
        others, combine = split_combine(args, "Result.zip")
        unions = [self._union, *iter_unions(Result, others, "zip")]
        return Result(zip_unions(unions, combine))

    @overload
    def merge(self, first: Result[E, A], /) -> Result[E, tuple[S, A]]: ...

    @overload
    def merge(self, first: Result[E, A], second: Result[E, B], /) -> Result[E, tuple[S, A, B]]: ...

    @overload
    def merge(
        self, first: Result[E, A], second: Result[E, B], third: Result[E, C], /
    ) -> Result[E, tuple[S, A, B, C]]: ...

    @overload
    def merge(
        self,
        first: Result[E, A],
        second: Result[E, B],
        third: Result[E, C],
        fourth: Result[E, D],
        /,
    ) -> Result[E, tuple[S, A, B, C, D]]: ...

    def merge(self, *others: Result[E, Any]) -> Result[E, tuple[Any, ...]]:
        """Merge Results into a Result of a tuple. Only performed if all succeed."""
        return self.zip(*others, as_tuple)

    @staticmethod
    def sequence(results: Iterable[Result[E, S]]) -> Result[E, list[S]]:
        """
        Collect an iterable of Results into a Result of list.
        Returns the first error encountered, or Success with all values.

            results = [validate(item) for item in items]
            all_valid = Result.sequence(results)  # Result[E, list[Item]]
        """
        return Result(sequence_unions(iter_unions(Result, results, "sequence")))

    def flatten(self: Result[E, Result[E, U]]) -> Result[E, U]:
        """
        Collapse Result[E, Result[E, U]] into Result[E, U].

        An outer error always wins; otherwise the inner Result is returned.
        """
        if self._union.is_left:
            return Result(self._union)
        inner = self._union.right_value()
        if not isinstance(inner, Result):
            raise TypeError(f"Result.flatten() expects a nested Result, got {type(inner).__name__}")
        return inner

    # ──────────────────────── Conversion ────────────────────────

    def to_option(self) -> Option[S]:
        """Downgrade to an Option. The error value is discarded."""
        from railmonads.option import Option

        return self._union.match(lambda _: Option.none(), Option.some)

    # ──────────────────────── Async Support ────────────────────────

    async def sequence_async(self: Result[E, Awaitable[U]]) -> Result[E, U]:
        """
        Flip Result[E, Awaitable[U]] into an awaitable Result[E, U].

        An Error resolves immediately, the inner awaitable is never awaited.
        If the awaitable raises, the exception propagates to the caller.
        """
        if self._union.is_left:
            return Result(self._union)
        return Result.success(await self._union.right_value())

    async def bind_async(self, binder: Callable[[S], Awaitable[Result[E, U]]]) -> Result[E, U]:
        """
        Async bind — chain an async Result-returning function.

            result = await Result.success(order).bind_async(persist_order)
        """
        if self._union.is_left:
            return Result(self._union)
        return await binder(self._union.right_value())

    async def map_async(self, mapper: Callable[[S], Awaitable[U]]) -> Result[E, U]:
        """
        Async map — apply an async function to the success value.

            result = await Result.success(user_id).map_async(fetch_user_from_api)
        """
        if self._union.is_left:
            return Result(self._union)
        return Result.success(await mapper(self._union.right_value()))

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self._union.is_right

    def __repr__(self) -> str:
        if self._union.is_left:
            return f"Error({self._union.left_value()!r})"
        return f"Success({self._union.right_value()!r})"
