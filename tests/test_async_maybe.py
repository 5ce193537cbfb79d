"""Tests for AsyncMaybe resolution and matching."""

import asyncio
import gc
import warnings
from typing import Any

import pytest

import maybechain as mc


async def _match_some(some: int) -> int:
    return some + 1


async def _match_none() -> int:
    return 0


async def _delayed[T](value: mc.Maybe[T]) -> mc.Maybe[T]:
    await asyncio.sleep(0)
    return value


@pytest.mark.asyncio
async def test_none_value_with_lambdas() -> None:
    """Test that only the none handler runs on NONE."""
    invocations = 0

    async def _on_none() -> int:
        nonlocal invocations
        invocations += 1
        return 0

    source = mc.AsyncMaybe[int].none()
    result = await source.match_async(lambda some: _match_some(some), _on_none)
    assert result == 0
    assert invocations == 1


@pytest.mark.asyncio
async def test_with_lambdas() -> None:
    """Test match_async with lambdas returning awaitables."""
    source = mc.AsyncMaybe.some(1)
    result = await source.match_async(
        lambda some: _match_some(some), lambda: _match_none()
    )
    assert result == 2


@pytest.mark.asyncio
async def test_with_references() -> None:
    """Test match_async with named coroutine functions."""
    result = await mc.AsyncMaybe.some(1).match_async(_match_some, _match_none)
    assert result == 2


@pytest.mark.asyncio
async def test_some_does_not_call_none_handler() -> None:
    """Test that the none handler stays untouched on Some."""
    calls: list[None] = []

    async def _on_none() -> int:
        calls.append(None)
        return 0

    assert await mc.AsyncMaybe.some(1).match_async(_match_some, _on_none) == 2
    assert calls == []


@pytest.mark.asyncio
async def test_pending_source_is_resolved_before_dispatch() -> None:
    """Test that a pending source is awaited before choosing a branch."""
    source = mc.AsyncMaybe(_delayed(mc.Some(41)))
    assert await source.match_async(_match_some, _match_none) == 42
    source = mc.AsyncMaybe(_delayed(mc.NONE))
    assert await source.match_async(_match_some, _match_none) == 0


@pytest.mark.asyncio
async def test_match_with_sync_handlers() -> None:
    """Test match with plain functions."""
    assert await mc.AsyncMaybe.some(1).match(lambda v: v * 3, lambda: 0) == 3
    assert await mc.AsyncMaybe.none().match(lambda v: v * 3, lambda: -1) == -1


@pytest.mark.asyncio
async def test_await_returns_maybe() -> None:
    """Test awaiting an AsyncMaybe directly."""
    assert await mc.AsyncMaybe.some("a") == mc.Some("a")
    assert await mc.AsyncMaybe(_delayed(mc.NONE)) == mc.NONE


def test_some_rejects_none() -> None:
    """Test that AsyncMaybe.some fails fast on None."""
    with pytest.raises(mc.MaybeValueError):
        mc.AsyncMaybe.some(None)


@pytest.mark.asyncio
async def test_from_optional_awaitable() -> None:
    """Test building from an awaitable of an optional value."""

    async def _lookup(key: str) -> int | None:
        return {"a": 1}.get(key)

    assert await mc.AsyncMaybe.from_(_lookup("a")) == mc.Some(1)
    assert await mc.AsyncMaybe.from_(_lookup("b")) == mc.NONE


@pytest.mark.asyncio
async def test_chained_combinators() -> None:
    """Test lazy map, filter and flat_map chains."""

    async def _double(x: int) -> int:
        return x * 2

    async def _positive(x: int) -> mc.Maybe[int]:
        return mc.Some(x) if x > 0 else mc.NONE

    result = (
        mc.AsyncMaybe(_delayed(mc.Some(3)))
        .map(lambda x: x + 1)
        .map_async(_double)
        .filter(lambda x: x > 5)
        .flat_map(lambda x: mc.Some(str(x)))
    )
    assert await result == mc.Some("8")
    assert await mc.AsyncMaybe.some(-1).flat_map_async(_positive) == mc.NONE


@pytest.mark.asyncio
async def test_map_async_on_none_does_not_call() -> None:
    """Test that map_async skips its function on NONE."""
    calls: list[int] = []

    async def _record(x: int) -> int:
        calls.append(x)
        return x

    assert await mc.AsyncMaybe.none().map_async(_record) == mc.NONE
    assert calls == []


@pytest.mark.asyncio
async def test_terminal_operations() -> None:
    """Test or_return, or_get and or_throw."""
    assert await mc.AsyncMaybe.some(1).or_return(0) == 1
    assert await mc.AsyncMaybe.none().or_return(0) == 0
    assert await mc.AsyncMaybe.none().or_get(lambda: 5) == 5
    with pytest.raises(LookupError):
        await mc.AsyncMaybe.none().or_throw(LookupError)


@pytest.mark.asyncio
async def test_source_errors_propagate() -> None:
    """Test that a failing source surfaces through match_async."""

    async def _broken() -> mc.Maybe[int]:
        msg = "boom"
        raise RuntimeError(msg)

    with pytest.raises(RuntimeError, match="boom"):
        await mc.AsyncMaybe(_broken()).match_async(_match_some, _match_none)


@pytest.mark.asyncio
async def test_to_async() -> None:
    """Test converting a Maybe into an AsyncMaybe."""
    assert await mc.Some(2).to_async().map(lambda x: x * 2) == mc.Some(4)
    assert await mc.NONE.to_async() == mc.NONE


def _fail(*_: object) -> Any:
    msg = "should not be called"
    raise AssertionError(msg)


def test_unawaited_chain_starts_nothing() -> None:
    """Test that building a chain without awaiting it leaves no coroutine behind."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        chain = (
            mc.AsyncMaybe.some(1)
            .map(_fail)
            .filter(_fail)
            .map_async(_fail)
            .flat_map(_fail)
            .flat_map_async(_fail)
        )
        del chain
        gc.collect()
    assert [w for w in caught if issubclass(w.category, RuntimeWarning)] == []


@pytest.mark.asyncio
async def test_callbacks_run_only_when_awaited() -> None:
    """Test that chained callbacks are deferred until the chain is awaited."""
    calls: list[int] = []

    def _record(x: int) -> int:
        calls.append(x)
        return x + 1

    async def _record_async(x: int) -> int:
        calls.append(x)
        return x * 10

    chain = mc.AsyncMaybe.some(1).map(_record).map_async(_record_async)
    assert calls == []
    assert repr(chain) == "AsyncMaybe(<pending>)"
    assert await chain == mc.Some(20)
    assert calls == [1, 2]
