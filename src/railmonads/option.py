"""
Option — a value of T that may or may not be present.

An Option[T] is either Some(value) or Nothing. It wraps a Union whose left
slot holds the payload-less NOTHING marker and whose right slot holds T.
Every transformation passes absence through untouched, so only the
"present" path has to be written:

    ┌──────────┐    bind     ┌──────────┐    map     ┌──────────┐
    │  lookup  │──Some───────│ validate │──Some──────│  format  │──→ Option[U]
    └────┬─────┘             └────┬─────┘            └────┬─────┘
         │ Nothing                │ Nothing               │ Nothing
         └────────────────────────┴───────────────────────┴──→ Option[U]

Construction is always explicit: Option.some(), Option.none(), or the
nullable coercion to_option() that treats a Python None as absence.
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
from railmonads.errors import UnexpectedAbsenceError
from railmonads.log import log_violation
from railmonads.union import Union

if TYPE_CHECKING:
    from railmonads.result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


@dataclass(frozen=True, slots=True)
class Nothing:
    """Payload of an absent Option. Carries no information."""

    def __repr__(self) -> str:
        return "Nothing"


NOTHING = Nothing()


@dataclass(frozen=True, slots=True)
class Option(Generic[T]):
    """
    Optional value with monad features for the Maybe flow control.

    Usage:
        >>> Option.some(21).map(lambda x: x * 2).value()
        42

        >>> Option.none().map(lambda x: x * 2).is_none()
        True
    """

    _union: Union[Nothing, T]

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def some(value: T) -> Option[T]:
        """Create a present Option wrapping the given value."""
        return Option(Union.right(value))

    @staticmethod
    def none() -> Option[Any]:
        """Create an absent Option."""
        return Option(Union.left(NOTHING))

    @staticmethod
    def from_nullable(value: Optional[T]) -> Option[T]:
        """None becomes absence, any other value becomes present."""
        if value is None:
            return Option.none()
        return Option.some(value)

    # ──────────────────────── Introspection ────────────────────────

    def is_some(self) -> bool:
        return self._union.is_right

    def is_none(self) -> bool:
        return self._union.is_left

    def value(self) -> T:
        """
        Extract the present value. Raises UnexpectedAbsenceError on Nothing.

        Prefer .fold() or .default_with() for safe access.
        """
        if self._union.is_left:
            raise UnexpectedAbsenceError()
        return self._union.right_value()

    # ──────────────────────── Core Transformations ────────────────────────

    def bind(self, binder: Callable[[T], Option[U]]) -> Option[U]:
        """
        Chain an Option-returning function. Not called when absent.

            Option.some("42").bind(parse_int)   # → Some(42)
            Option.some("x").bind(parse_int)    # → Nothing
        """
        return self._union.match(lambda _: Option.none(), binder)

    def map(self, mapper: Callable[[T], U]) -> Option[U]:
        """Transform the present value. Not called when absent."""
        return self._union.match(
            lambda _: Option.none(),
            lambda value: Option.some(mapper(value)),
        )

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the present value only if the predicate holds."""
        return self._union.match(
            lambda _: Option.none(),
            lambda value: Option.some(value) if predicate(value) else Option.none(),
        )

    def fold(self, on_none: Callable[[], U], on_some: Callable[[T], U]) -> U:
        """
        Reduce to a single value with one function per state.

            name.fold(lambda: "anonymous", str.upper)
        """
        return self._union.match(lambda _: on_none(), on_some)

    # ──────────────────────── Side Effects ────────────────────────

    def do(self, action: Callable[[T], Any]) -> Option[T]:
        """Run an action on the present value and return this Option unchanged."""
        if self._union.is_right:
            action(self._union.right_value())
        return self

    def do_if_none(self, action: Callable[[], Any]) -> Option[T]:
        """Run an action when absent and return this Option unchanged."""
        if self._union.is_left:
            action()
        return self

    # ──────────────────────── Unwrapping ────────────────────────

    def default_with(self, fallback: T) -> T:
        """Extract the value or return the fallback."""
        return self.fold(lambda: fallback, lambda value: value)

    def default_with_fn(self, fallback: Callable[[], T]) -> T:
        """Extract the value or compute a fallback. The function only runs when absent."""
        return self.fold(fallback, lambda value: value)

    def or_throw(self) -> T:
        """Extract the value or raise UnexpectedAbsenceError."""
        if self._union.is_left:
            log_violation("Option.or_throw", "unexpected_absence")
            raise UnexpectedAbsenceError()
        return self._union.right_value()

    # ──────────────────────── Combination ────────────────────────

    @overload
    def zip(self, first: Option[A], combine: Callable[[T, A], U], /) -> Option[U]: ...

    @overload
    def zip(
        self, first: Option[A], second: Option[B], combine: Callable[[T, A, B], U], /
    ) -> Option[U]: ...

    @overload
    def zip(
        self,
        first: Option[A],
        second: Option[B],
        third: Option[C],
        combine: Callable[[T, A, B, C], U],
        /,
    ) -> Option[U]: ...

    @overload
    def zip(
        self,
        first: Option[A],
        second: Option[B],
        third: Option[C],
        fourth: Option[D],
        combine: Callable[[T, A, B, C, D], U],
        /,
    ) -> Option[U]: ...

    def zip(self, *args: Any) -> Option[Any]:
        """
        Combine several options with a function. Nothing if any operand is absent.

            Option.some(2).zip(Option.some(3), lambda a, b: a * b)  # → Some(6)
        """
        others, combine = split_combine(args, "Option.zip")
        unions = [self._union, *iter_unions(Option, others, "zip")]
        return Option(zip_unions(unions, combine))

    @overload
    def merge(self, first: Option[A], /) -> Option[tuple[T, A]]: ...

    @overload
    def merge(self, first: Option[A], second: Option[B], /) -> Option[tuple[T, A, B]]: ...

    @overload
    def merge(
        self, first: Option[A], second: Option[B], third: Option[C], /
    ) -> Option[tuple[T, A, B, C]]: ...

    @overload
    def merge(
        self, first: Option[A], second: Option[B], third: Option[C], fourth: Option[D], /
    ) -> Option[tuple[T, A, B, C, D]]: ...

    def merge(self, *others: Option[Any]) -> Option[tuple[Any, ...]]:
        """Merge options into an Option of a tuple. Only performed if all are present."""
        return self.zip(*others, as_tuple)

    @staticmethod
    def sequence(options: Iterable[Option[T]]) -> Option[list[T]]:
        """
        Turn an iterable of options into an option of a list.

        Returns Nothing at the first absent element; later elements are not inspected.
        """
        return Option(sequence_unions(iter_unions(Option, options, "sequence")))

    def flatten(self: Option[Option[U]]) -> Option[U]:
        """Collapse Option[Option[U]] into Option[U]. Outer or inner absence both give Nothing."""
        if self._union.is_left:
            return Option.none()
        inner = self._union.right_value()
        if not isinstance(inner, Option):
            raise TypeError(f"Option.flatten() expects a nested Option, got {type(inner).__name__}")
        return inner

    # ──────────────────────── Conversion ────────────────────────

    def to_result(self, on_none: Callable[[], E]) -> Result[E, T]:
        """Present becomes success; absence becomes an error computed by on_none."""
        from railmonads.result import Result

        return self.fold(lambda: Result.error(on_none()), Result.success)

    # ──────────────────────── Async Support ────────────────────────

    async def sequence_async(self: Option[Awaitable[U]]) -> Option[U]:
        """
        Flip Option[Awaitable[U]] into an awaitable Option[U].

        Nothing resolves immediately without suspending; a failure of the
        inner awaitable propagates to the caller.
        """
        if self._union.is_left:
            return Option.none()
        return Option.some(await self._union.right_value())

    async def bind_async(self, binder: Callable[[T], Awaitable[Option[U]]]) -> Option[U]:
        """Chain an async Option-returning step. Not called when absent."""
        if self._union.is_left:
            return Option.none()
        return await binder(self._union.right_value())

    async def map_async(self, mapper: Callable[[T], Awaitable[U]]) -> Option[U]:
        """Transform the present value with an async function. Not called when absent."""
        if self._union.is_left:
            return Option.none()
        return Option.some(await mapper(self._union.right_value()))

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if option: ...` succeeds only when present."""
        return self._union.is_right

    def __repr__(self) -> str:
        if self._union.is_left:
            return "Nothing"
        return f"Some({self._union.right_value()!r})"


def to_option(value: Optional[T]) -> Option[T]:
    """
    Coerce a nullable value into an Option.

        to_option(user_by_id.get(42))   # → Some(user) or Nothing
    """
    return Option.from_nullable(value)
