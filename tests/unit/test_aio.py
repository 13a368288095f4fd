"""
Tests for the async bridge — container methods and the pending-container
functions in railmonads.aio.

Unhappy-side short-circuits are verified with futures that never resolve:
awaiting one would hang, so wait_for() turns a regression into a timeout.
"""

from __future__ import annotations

import asyncio

import pytest

from railmonads import Either, Option, Result, Try, aio

NEVER_TIMEOUT = 0.5


class Boom(Exception):
    pass


async def parse_number(raw: str) -> Try[int]:
    await asyncio.sleep(0)
    return Try.catching(lambda: int(raw))


async def safe_divide(value: int) -> Try[int]:
    await asyncio.sleep(0)
    return Try.catching(lambda: 100 // value)


async def format_result(value: int) -> str:
    await asyncio.sleep(0)
    return f"result: {value}"


async def crash(_: object) -> object:
    await asyncio.sleep(0)
    raise Boom("async boom")


def never_resolving() -> asyncio.Future[int]:
    return asyncio.get_running_loop().create_future()


class AsyncCounter:
    def __init__(self) -> None:
        self.count = 0

    async def __call__(self, value: object) -> object:
        self.count += 1
        return value


# ═══════════════════════════════════════════════════════════════
# 1. sequence_async: flip container-of-awaitable
# ═══════════════════════════════════════════════════════════════


class TestSequenceAsync:
    @pytest.mark.asyncio
    async def test_option_some_awaits_inner(self):
        assert await Option.some(format_result(1)).sequence_async() == Option.some("result: 1")

    @pytest.mark.asyncio
    async def test_option_none_resolves_immediately(self):
        result = await asyncio.wait_for(Option.none().sequence_async(), NEVER_TIMEOUT)
        assert result.is_none()

    @pytest.mark.asyncio
    async def test_result_error_resolves_immediately(self):
        result = await asyncio.wait_for(Result.error("offline").sequence_async(), NEVER_TIMEOUT)
        assert result == Result.error("offline")

    @pytest.mark.asyncio
    async def test_unhappy_step_is_never_awaited(self):
        async def offline() -> Result[str, int]:
            return Result.error("offline")

        pending = never_resolving()
        result = await asyncio.wait_for(aio.bind_async(offline(), lambda _: pending), NEVER_TIMEOUT)
        assert result == Result.error("offline")
        assert not pending.done()

    @pytest.mark.asyncio
    async def test_result_success_propagates_inner_exception(self):
        with pytest.raises(Boom):
            await Result.success(crash(None)).sequence_async()

    @pytest.mark.asyncio
    async def test_either_right_awaits_inner(self):
        assert await Either.right(format_result(2)).sequence_async() == Either.right("result: 2")

    @pytest.mark.asyncio
    async def test_either_left_resolves_immediately(self):
        result = await asyncio.wait_for(Either.left("l").sequence_async(), NEVER_TIMEOUT)
        assert result == Either.left("l")

    @pytest.mark.asyncio
    async def test_try_captures_inner_exception(self):
        attempt = await Try.success(crash(None)).sequence_async()
        assert isinstance(attempt.error_value(), Boom)

    @pytest.mark.asyncio
    async def test_module_sequence_dispatches(self):
        assert await aio.sequence(Option.some(format_result(3))) == Option.some("result: 3")


# ═══════════════════════════════════════════════════════════════
# 2. Container methods on settled values
# ═══════════════════════════════════════════════════════════════


class TestSettledContainerMethods:
    @pytest.mark.asyncio
    async def test_option_map_async(self):
        assert await Option.some(5).map_async(format_result) == Option.some("result: 5")

    @pytest.mark.asyncio
    async def test_option_bind_async_skips_on_none(self):
        step = AsyncCounter()
        assert (await Option.none().bind_async(step)).is_none()
        assert step.count == 0

    @pytest.mark.asyncio
    async def test_result_bind_async(self):
        async def validate(x: int) -> Result[str, int]:
            return Result.success(x) if x > 0 else Result.error("negative")

        assert await Result.success(5).bind_async(validate) == Result.success(5)
        assert await Result.success(-1).bind_async(validate) == Result.error("negative")

    @pytest.mark.asyncio
    async def test_result_map_async_propagates_step_exception(self):
        with pytest.raises(Boom):
            await Result.success(1).map_async(crash)

    @pytest.mark.asyncio
    async def test_either_map_async_skips_left(self):
        step = AsyncCounter()
        assert await Either.left("l").map_async(step) == Either.left("l")
        assert step.count == 0


# ═══════════════════════════════════════════════════════════════
# 3. Pending containers in railmonads.aio
# ═══════════════════════════════════════════════════════════════


class TestPendingBindAndMap:
    @pytest.mark.asyncio
    async def test_bind_async_chains(self):
        attempt = await aio.bind_async(parse_number("10"), safe_divide)
        assert attempt.success_value() == 10

    @pytest.mark.asyncio
    async def test_nested_chain_without_intermediate_awaits(self):
        attempt = await aio.map_async(aio.bind_async(parse_number("4"), safe_divide), format_result)
        assert attempt == Try.success("result: 25")

    @pytest.mark.asyncio
    async def test_bind_async_skips_step_on_failure(self):
        step = AsyncCounter()
        attempt = await aio.bind_async(parse_number("not a number"), step)
        assert isinstance(attempt.error_value(), ValueError)
        assert step.count == 0

    @pytest.mark.asyncio
    async def test_step_failure_is_captured_by_inner_catching(self):
        attempt = await aio.bind_async(parse_number("0"), safe_divide)
        assert isinstance(attempt.error_value(), ZeroDivisionError)

    @pytest.mark.asyncio
    async def test_map_async_on_pending_option(self):
        async def lookup() -> Option[int]:
            return Option.some(7)

        assert await aio.map_async(lookup(), format_result) == Option.some("result: 7")

    @pytest.mark.asyncio
    async def test_map_async_on_pending_error(self):
        async def lookup() -> Result[str, int]:
            return Result.error("missing")

        step = AsyncCounter()
        assert await aio.map_async(lookup(), step) == Result.error("missing")
        assert step.count == 0

    @pytest.mark.asyncio
    async def test_non_catching_variants_propagate(self):
        with pytest.raises(Boom):
            await aio.map_async(parse_number("1"), crash)


class TestPendingCatching:
    @pytest.mark.asyncio
    async def test_map_catching_async_captures(self):
        attempt = await aio.map_catching_async(parse_number("1"), crash)
        assert isinstance(attempt.error_value(), Boom)

    @pytest.mark.asyncio
    async def test_bind_catching_async_captures(self):
        attempt = await aio.bind_catching_async(parse_number("1"), crash)
        assert isinstance(attempt.error_value(), Boom)

    @pytest.mark.asyncio
    async def test_bind_catching_async_success(self):
        attempt = await aio.bind_catching_async(parse_number("50"), safe_divide)
        assert attempt == Try.success(2)

    @pytest.mark.asyncio
    async def test_catching_variants_skip_step_on_failure(self):
        step = AsyncCounter()
        attempt = await aio.map_catching_async(parse_number("x"), step)
        assert attempt.is_error()
        assert step.count == 0

    @pytest.mark.asyncio
    async def test_catching_variants_require_try(self):
        async def lookup() -> Result[str, int]:
            return Result.success(1)

        with pytest.raises(TypeError, match="expects a pending Try"):
            await aio.map_catching_async(lookup(), format_result)

    @pytest.mark.asyncio
    async def test_cancellation_is_not_captured(self):
        async def cancelled(_: int) -> int:
            raise asyncio.CancelledError

        with pytest.raises(asyncio.CancelledError):
            await aio.map_catching_async(parse_number("1"), cancelled)
