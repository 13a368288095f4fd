"""
Async bridge — continue a railway from a container that is still pending.

Every function here accepts an awaitable that resolves to a container
(Option, Result, Try or Either), typically the coroutine returned by an
async source operation, and returns a coroutine. Because the output is
itself awaitable, steps nest without awaiting at each link:

    result = await map_async(
        bind_async(parse_number("10"), safe_divide),
        format_result,
    )

Each operation moves through two states, pending then settled:

  1. await the pending container
  2. unhappy side (Nothing / Error / Left): resolve at once, the step is
     never invoked
  3. happy side: invoke the async step and await it, strictly one step at a
     time

The combinators never observe cancellation; cancelling the surrounding
task cancels whichever await is in flight.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

from railmonads.try_ import Try

C = TypeVar("C")


async def sequence(container: Any) -> Any:
    """
    Flip a container of an awaitable into an awaitable container.

        await sequence(Option.some(fetch_user(42)))   # → Some(user)
        await sequence(Result.error("offline"))       # → Error('offline'), nothing awaited

    Only Try captures an exception raised by the inner awaitable; the other
    containers let it propagate.
    """
    return await container.sequence_async()


async def bind_async(pending: Awaitable[Any], binder: Callable[[Any], Awaitable[C]]) -> C:
    """Await the container, then chain an async container-returning step on its happy side."""
    container = await pending
    return await container.bind_async(binder)


async def map_async(pending: Awaitable[Any], mapper: Callable[[Any], Awaitable[Any]]) -> Any:
    """Await the container, then transform its happy-side value with an async function."""
    container = await pending
    return await container.map_async(mapper)


async def bind_catching_async(
    pending: Awaitable[Try[Any]], binder: Callable[[Any], Awaitable[Try[C]]]
) -> Try[C]:
    """
    Await a pending Try, then chain an async step that may raise.

    Exceptions raised while the step runs land on the failure track. An
    exception raised by the pending Try itself still propagates.
    """
    container = _expect_try(await pending, "bind_catching_async")
    return await container.bind_catching_async(binder)


async def map_catching_async(
    pending: Awaitable[Try[Any]], mapper: Callable[[Any], Awaitable[C]]
) -> Try[C]:
    """Await a pending Try, then transform its success value, capturing step exceptions."""
    container = _expect_try(await pending, "map_catching_async")
    return await container.map_catching_async(mapper)


def _expect_try(container: object, operation: str) -> Try[Any]:
    if not isinstance(container, Try):
        raise TypeError(f"{operation}() expects a pending Try, got {type(container).__name__}")
    return container
