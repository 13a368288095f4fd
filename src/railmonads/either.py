"""
Either — a two-sided union where both sides carry meaning.

Either[L, R] holds a left or a right value with no error/success
connotation. Chaining is right-biased (map, bind, do work on the right
side) to mirror Result, while map_left, bind_left and do_if_left give the
left side the same treatment. swap() exchanges the sides and their types.
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
from railmonads.errors import ExpectedRightError
from railmonads.log import log_violation
from railmonads.union import Union

if TYPE_CHECKING:
    from railmonads.option import Option
    from railmonads.result import Result

L = TypeVar("L")
R = TypeVar("R")
M = TypeVar("M")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


@dataclass(frozen=True, slots=True)
class Either(Generic[L, R]):
    """
    General-purpose left/right container, right-biased for pipelines.

        >>> Either.right(3).map(lambda x: x + 1)
        Right(4)
        >>> Either.left("cached").swap()
        Right('cached')
    """

    _union: Union[L, R]

    @staticmethod
    def left(value: L) -> Either[L, Any]:
        return Either(Union.left(value))

    @staticmethod
    def right(value: R) -> Either[Any, R]:
        return Either(Union.right(value))

    def is_left(self) -> bool:
        return self._union.is_left

    def is_right(self) -> bool:
        return self._union.is_right

    def left_value(self) -> L:
        """Raises InvalidAccessError when the value is Right."""
        return self._union.left_value()

    def right_value(self) -> R:
        """Raises InvalidAccessError when the value is Left."""
        return self._union.right_value()

    # ──────────────────────── Right side ────────────────────────

    def map(self, mapper: Callable[[R], U]) -> Either[L, U]:
        return self._union.match(Either.left, lambda value: Either.right(mapper(value)))

    def bind(self, binder: Callable[[R], Either[L, U]]) -> Either[L, U]:
        return self._union.match(Either.left, binder)

    def do(self, action: Callable[[R], Any]) -> Either[L, R]:
        if self._union.is_right:
            action(self._union.right_value())
        return self

    # ──────────────────────── Left side ────────────────────────

    def map_left(self, mapper: Callable[[L], M]) -> Either[M, R]:
        return self._union.match(lambda value: Either.left(mapper(value)), Either.right)

    def bind_left(self, binder: Callable[[L], Either[M, R]]) -> Either[M, R]:
        return self._union.match(binder, Either.right)

    def do_if_left(self, action: Callable[[L], Any]) -> Either[L, R]:
        if self._union.is_left:
            action(self._union.left_value())
        return self

    # ──────────────────────── Reduction ────────────────────────

    def fold(self, on_left: Callable[[L], U], on_right: Callable[[R], U]) -> U:
        return self._union.match(on_left, on_right)

    def swap(self) -> Either[R, L]:
        """Exchange the sides: Left(x) becomes Right(x) and vice versa."""
        return self._union.match(Either.right, Either.left)

    def default_with(self, fallback: R) -> R:
        """Get the right value or a fallback value."""
        return self._union.match(lambda _: fallback, lambda value: value)

    def default_with_fn(self, fallback: Callable[[L], R]) -> R:
        """Get the right value or a fallback derived from the left value."""
        return self._union.match(fallback, lambda value: value)

    def or_throw(self) -> R:
        """Get the right value or raise ExpectedRightError."""
        if self._union.is_left:
            left = self._union.left_value()
            log_violation("Either.or_throw", "expected_right")
            raise ExpectedRightError(left, render_payload(left))
        return self._union.right_value()

    # ──────────────────────── Combination ────────────────────────

    @overload
    def zip(self, first: Either[L, A], combine: Callable[[R, A], U], /) -> Either[L, U]: ...

    @overload
    def zip(
        self, first: Either[L, A], second: Either[L, B], combine: Callable[[R, A, B], U], /
    ) -> Either[L, U]: ...

    @overload
    def zip(
        self,
        first: Either[L, A],
        second: Either[L, B],
        third: Either[L, C],
        combine: Callable[[R, A, B, C], U],
        /,
    ) -> Either[L, U]: ...

    @overload
    def zip(
        self,
        first: Either[L, A],
        second: Either[L, B],
        third: Either[L, C],
        fourth: Either[L, D],
        combine: Callable[[R, A, B, C, D], U],
        /,
    ) -> Either[L, U]: ...

    def zip(self, *args: Any) -> Either[L, Any]:
        """Combine right values of several eithers. Returns the first Left encountered."""
        others, combine = split_combine(args, "Either.zip")
        unions = [self._union, *iter_unions(Either, others, "zip")]
        return Either(zip_unions(unions, combine))

    @overload
    def merge(self, first: Either[L, A], /) -> Either[L, tuple[R, A]]: ...

    @overload
    def merge(self, first: Either[L, A], second: Either[L, B], /) -> Either[L, tuple[R, A, B]]: ...

    @overload
    def merge(
        self, first: Either[L, A], second: Either[L, B], third: Either[L, C], /
    ) -> Either[L, tuple[R, A, B, C]]: ...

    @overload
    def merge(
        self,
        first: Either[L, A],
        second: Either[L, B],
        third: Either[L, C],
        fourth: Either[L, D],
        /,
    ) -> Either[L, tuple[R, A, B, C, D]]: ...

    def merge(self, *others: Either[L, Any]) -> Either[L, tuple[Any, ...]]:
        return self.zip(*others, as_tuple)

    @staticmethod
    def sequence(eithers: Iterable[Either[L, R]]) -> Either[L, list[R]]:
        """Right with all values if every either is Right, or the first Left encountered."""
        return Either(sequence_unions(iter_unions(Either, eithers, "sequence")))

    def flatten(self: Either[L, Either[L, U]]) -> Either[L, U]:
        """Collapse Either[L, Either[L, U]]; an outer Left always wins."""
        if self._union.is_left:
            return Either(self._union)
        inner = self._union.right_value()
        if not isinstance(inner, Either):
            raise TypeError(f"Either.flatten() expects a nested Either, got {type(inner).__name__}")
        return inner

    # ──────────────────────── Conversion ────────────────────────

    def to_option(self) -> Option[R]:
        """Left becomes Nothing, Right becomes Some."""
        from railmonads.option import Option

        return self._union.match(lambda _: Option.none(), Option.some)

    def to_result(self) -> Result[L, R]:
        """Left becomes Error, Right becomes Success."""
        from railmonads.result import Result

        return Result(self._union)

    # ──────────────────────── Async Support ────────────────────────

    async def sequence_async(self: Either[L, Awaitable[U]]) -> Either[L, U]:
        """Flip Either[L, Awaitable[U]]; a Left resolves without awaiting anything."""
        if self._union.is_left:
            return Either(self._union)
        return Either.right(await self._union.right_value())

    async def bind_async(self, binder: Callable[[R], Awaitable[Either[L, U]]]) -> Either[L, U]:
        if self._union.is_left:
            return Either(self._union)
        return await binder(self._union.right_value())

    async def map_async(self, mapper: Callable[[R], Awaitable[U]]) -> Either[L, U]:
        if self._union.is_left:
            return Either(self._union)
        return Either.right(await mapper(self._union.right_value()))

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        return self._union.is_right

    def __repr__(self) -> str:
        return repr(self._union)
