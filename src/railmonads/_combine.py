"""Internal helpers shared by every container kind.

zip/merge and sequence are one algorithm regardless of container or arity:
scan left to right, the first left-populated union wins, otherwise combine
the right values. The domain types only wrap and unwrap unions around it."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Sequence

from railmonads.union import Union


def zip_unions(unions: Sequence[Union[Any, Any]], combine: Callable[..., Any]) -> Union[Any, Any]:
    """
    Combine the right values of all unions, or return the first left one.

    Operands are already evaluated by the caller; only the combination step
    is skipped when a left union is found.
    """
    for union in unions:
        if union.is_left:
            return union
    return Union.right(combine(*(union.right_value() for union in unions)))


def sequence_unions(unions: Iterable[Union[Any, Any]]) -> Union[Any, list[Any]]:
    """Collect right values into a list, stopping at the first left union."""
    values: list[Any] = []
    for union in unions:
        if union.is_left:
            return union
        values.append(union.right_value())
    return Union.right(values)


def as_tuple(*values: Any) -> tuple[Any, ...]:
    """Combine function used by merge()."""
    return values


def iter_unions(kind: type, containers: Iterable[Any], operation: str) -> Iterator[Union[Any, Any]]:
    """Lazily yield the unions of same-kind containers; mixing kinds is a TypeError."""
    for container in containers:
        if not isinstance(container, kind):
            raise TypeError(
                f"{kind.__name__}.{operation}() expects {kind.__name__} operands, "
                f"got {type(container).__name__}"
            )
        yield container._union


def split_combine(args: tuple[Any, ...], operation: str) -> tuple[tuple[Any, ...], Callable[..., Any]]:
    """Split zip(*others, combine) positional arguments into operands and function."""
    if len(args) < 2 or not callable(args[-1]):
        raise TypeError(f"{operation}() expects one or more operands followed by a combine function")
    return args[:-1], args[-1]
