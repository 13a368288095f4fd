"""
Union — the binary tagged union every container is built on.

A Union[L, R] holds a discriminant and exactly ONE populated slot:

    Union.left(value)   → is_left,  only the left slot is readable
    Union.right(value)  → is_right, only the right slot is readable

match() is the single primitive: every combinator on Option, Result, Try and
Either is derived from it. Reading the wrong slot directly is a programming
error and raises InvalidAccessError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from railmonads.errors import InvalidAccessError

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")

_EMPTY: Any = object()


@dataclass(frozen=True, slots=True)
class Union(Generic[L, R]):
    """Immutable container holding either a left or a right value."""

    _is_left: bool
    _left: L
    _right: R

    def __post_init__(self) -> None:
        unused = self._right if self._is_left else self._left
        if unused is not _EMPTY:
            raise ValueError("A Union populates exactly one slot; build it with Union.left() or Union.right()")

    @staticmethod
    def left(value: L) -> Union[L, Any]:
        """Create a Union with the left slot populated."""
        return Union(True, value, _EMPTY)

    @staticmethod
    def right(value: R) -> Union[Any, R]:
        """Create a Union with the right slot populated."""
        return Union(False, _EMPTY, value)

    @property
    def is_left(self) -> bool:
        return self._is_left

    @property
    def is_right(self) -> bool:
        return not self._is_left

    def match(self, on_left: Callable[[L], U], on_right: Callable[[R], U]) -> U:
        """
        Apply exactly one of two functions depending on the populated side.

        The function for the other side is never called.
        """
        if self._is_left:
            return on_left(self._left)
        return on_right(self._right)

    def left_value(self) -> L:
        """Read the left slot. Raises InvalidAccessError when the union is right."""
        if not self._is_left:
            raise InvalidAccessError("Left")
        return self._left

    def right_value(self) -> R:
        """Read the right slot. Raises InvalidAccessError when the union is left."""
        if self._is_left:
            raise InvalidAccessError("Right")
        return self._right

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Union):
            return NotImplemented
        if self._is_left != other._is_left:
            return False
        if self._is_left:
            return self._left == other._left
        return self._right == other._right

    def __hash__(self) -> int:
        if self._is_left:
            return hash(("Left", self._left))
        return hash(("Right", self._right))

    def __repr__(self) -> str:
        if self._is_left:
            return f"Left({self._left!r})"
        return f"Right({self._right!r})"
