from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import overload


@dataclass(slots=True, frozen=True)
class Unit:
    """A value carrying no information.

    Signals a successful completion with no payload, so that actions can be used where a function returning a value is expected.

    All instances are equal.

    Example:
    ```python
    >>> import maybechain as mc
    >>> mc.Unit() == mc.UNIT == mc.unit()
    True

    ```
    """


UNIT = Unit()
"""The shared `Unit` instance."""


@overload
def unit() -> Unit: ...
@overload
def unit[**P](action: Callable[P, object]) -> Callable[P, Unit]: ...
def unit[**P](action: Callable[P, object] | None = None) -> Unit | Callable[P, Unit]:
    """Return `UNIT`, or wrap an action into a function returning `UNIT`.

    The wrapped function takes the same arguments as `action`, calls it, discards its result and returns `UNIT`.
    Exceptions raised by `action` propagate unchanged.

    Args:
        action (Callable[P, object] | None): The action to wrap. Defaults to None.

    Returns:
        Unit | Callable[P, Unit]: `UNIT` if no action is given, the wrapped action otherwise.

    Example:
    ```python
    >>> import maybechain as mc
    >>> mc.unit()
    Unit()
    >>> log: list[int] = []
    >>> record = mc.unit(log.append)
    >>> mc.Some(3).map(record)
    Some(value=Unit())
    >>> log
    [3]

    ```
    """
    if action is None:
        return UNIT

    @functools.wraps(action)
    def _wrapped(*args: P.args, **kwargs: P.kwargs) -> Unit:
        action(*args, **kwargs)
        return UNIT

    return _wrapped


def unit_async[**P](action: Callable[P, Awaitable[object]]) -> Callable[P, Awaitable[Unit]]:
    """Wrap an asynchronous action into an async function returning `UNIT`.

    The wrapped function awaits `action` to completion, then returns `UNIT`.

    Args:
        action (Callable[P, Awaitable[object]]): The asynchronous action to wrap.

    Returns:
        Callable[P, Awaitable[Unit]]: The wrapped action.

    Example:
    ```python
    >>> import asyncio
    >>> import maybechain as mc
    >>> async def notify(user: str) -> None:
    ...     await asyncio.sleep(0)
    >>>
    >>> asyncio.run(mc.unit_async(notify)("alice"))
    Unit()

    ```
    """

    @functools.wraps(action)
    async def _wrapped(*args: P.args, **kwargs: P.kwargs) -> Unit:
        await action(*args, **kwargs)
        return UNIT

    return _wrapped
