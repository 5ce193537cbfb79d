from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator
from typing import Any

from .._core import Pipeable
from ._maybe import NONE, Maybe, Some


class AsyncMaybe[T](Pipeable):
    """An asynchronous computation resolving to a `Maybe[T]`.

    The asynchronous part only delays *when* the `Some`/`NONE` state is known, not *whether* a value is present.

    An `AsyncMaybe` is built from an already known `Maybe`, or from an awaitable producing one.
    Awaiting it gives back the underlying `Maybe`.

    Combinators like `map` or `filter` are lazy: they return a new `AsyncMaybe`, and no coroutine is created until it is awaited.
    An `AsyncMaybe` built from a coroutine can only be resolved once.

    Args:
        source (Maybe[T] | Awaitable[Maybe[T]]): The resolved maybe, or an awaitable producing it.

    Example:
    ```python
    >>> import asyncio
    >>> import maybechain as mc
    >>> async def fetch(key: str) -> mc.Maybe[int]:
    ...     return mc.Some(len(key))
    >>>
    >>> asyncio.run(mc.AsyncMaybe(fetch("abc")).map(lambda x: x * 10).or_return(0))
    30

    ```
    """

    _inner: Maybe[T] | Callable[[], Awaitable[Maybe[T]]]

    __slots__ = ("_inner",)

    def __init__(self, source: Maybe[T] | Awaitable[Maybe[T]]) -> None:
        match source:
            case Maybe():
                self._inner = source
            case _:
                self._inner = lambda: source

    @classmethod
    def _deferred(cls, factory: Callable[[], Awaitable[Maybe[T]]]) -> AsyncMaybe[T]:
        deferred = cls.__new__(cls)
        deferred._inner = factory
        return deferred

    def __repr__(self) -> str:
        match self._inner:
            case Maybe():
                return f"AsyncMaybe({self._inner!r})"
            case _:
                return "AsyncMaybe(<pending>)"

    def __await__(self) -> Generator[Any, Any, Maybe[T]]:
        return self.resolve().__await__()

    @staticmethod
    def some[V](value: V) -> AsyncMaybe[V]:
        """Build an already resolved `AsyncMaybe` holding `value`.

        Raises:
            MaybeValueError: If `value` is `None`.

        Example:
        ```python
        >>> import asyncio
        >>> import maybechain as mc
        >>> asyncio.run(mc.AsyncMaybe.some(1).resolve())
        Some(value=1)

        ```
        """
        return AsyncMaybe(Some(value))

    @staticmethod
    def none() -> AsyncMaybe[Any]:
        """Build an already resolved, empty `AsyncMaybe`.

        Example:
        ```python
        >>> import asyncio
        >>> import maybechain as mc
        >>> asyncio.run(mc.AsyncMaybe.none().resolve())
        NONE

        ```
        """
        return AsyncMaybe(NONE)

    @staticmethod
    def from_[V](source: Awaitable[V | None]) -> AsyncMaybe[V]:
        """Build an `AsyncMaybe` from an awaitable that may produce `None`.

        Args:
            source (Awaitable[V | None]): The awaitable to wrap.

        Returns:
            AsyncMaybe[V]: Resolves to `NONE` if `source` produces `None`, to `Some` otherwise.

        Example:
        ```python
        >>> import asyncio
        >>> import maybechain as mc
        >>> async def lookup(key: str) -> int | None:
        ...     return {"a": 1}.get(key)
        >>>
        >>> asyncio.run(mc.AsyncMaybe.from_(lookup("a")).resolve())
        Some(value=1)
        >>> asyncio.run(mc.AsyncMaybe.from_(lookup("z")).resolve())
        NONE

        ```
        """

        async def _from() -> Maybe[V]:
            return Maybe.from_(await source)

        return AsyncMaybe._deferred(_from)

    async def resolve(self) -> Maybe[T]:
        """Wait for the source and return the underlying `Maybe`."""
        match self._inner:
            case Maybe():
                return self._inner
            case _:
                return await self._inner()

    def _then[U](self, f: Callable[[Maybe[T]], Maybe[U]]) -> AsyncMaybe[U]:
        async def _chained() -> Maybe[U]:
            return f(await self.resolve())

        return AsyncMaybe._deferred(_chained)

    def map[U](self, f: Callable[[T], U]) -> AsyncMaybe[U]:
        """Lazily apply `f` to the value once resolved, see `Maybe.map`.

        Example:
        ```python
        >>> import asyncio
        >>> import maybechain as mc
        >>> asyncio.run(mc.AsyncMaybe.some("abc").map(len).resolve())
        Some(value=3)
        >>> asyncio.run(mc.AsyncMaybe.none().map(len).resolve())
        NONE

        ```
        """
        return self._then(lambda m: m.map(f))

    def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> AsyncMaybe[U]:
        """Lazily apply the async function `f` to the value once resolved.

        `f` is neither called nor awaited if the source resolves to `NONE`.

        Example:
        ```python
        >>> import asyncio
        >>> import maybechain as mc
        >>> async def double(x: int) -> int:
        ...     return x * 2
        >>>
        >>> asyncio.run(mc.AsyncMaybe.some(21).map_async(double).resolve())
        Some(value=42)

        ```
        """

        async def _map() -> Maybe[U]:
            resolved = await self.resolve()
            if resolved.is_some():
                return Some(await f(resolved.unwrap()))
            return NONE

        return AsyncMaybe._deferred(_map)

    def flat_map[U](self, f: Callable[[T], Maybe[U]]) -> AsyncMaybe[U]:
        """Lazily chain a function returning a `Maybe`, see `Maybe.flat_map`."""
        return self._then(lambda m: m.flat_map(f))

    def flat_map_async[U](self, f: Callable[[T], Awaitable[Maybe[U]]]) -> AsyncMaybe[U]:
        """Lazily chain an async function returning a `Maybe`.

        Example:
        ```python
        >>> import asyncio
        >>> import maybechain as mc
        >>> async def half(x: int) -> mc.Maybe[int]:
        ...     return mc.Some(x // 2) if x % 2 == 0 else mc.NONE
        >>>
        >>> asyncio.run(mc.AsyncMaybe.some(8).flat_map_async(half).resolve())
        Some(value=4)
        >>> asyncio.run(mc.AsyncMaybe.some(7).flat_map_async(half).resolve())
        NONE

        ```
        """

        async def _flat_map() -> Maybe[U]:
            resolved = await self.resolve()
            if resolved.is_some():
                return await f(resolved.unwrap())
            return NONE

        return AsyncMaybe._deferred(_flat_map)

    def filter(self, predicate: Callable[[T], bool]) -> AsyncMaybe[T]:
        """Lazily keep the value only if it satisfies `predicate`, see `Maybe.filter`."""
        return self._then(lambda m: m.filter(predicate))

    async def match[R](self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        """Wait for the source, then call exactly one of two synchronous functions.

        Args:
            on_some (Callable[[T], R]): Called with the value if the source resolves to `Some`.
            on_none (Callable[[], R]): Called without argument if the source resolves to `NONE`.

        Returns:
            R: The result of the function that was called.

        Example:
        ```python
        >>> import asyncio
        >>> import maybechain as mc
        >>> asyncio.run(mc.AsyncMaybe.some(1).match(lambda x: x + 1, lambda: 0))
        2

        ```
        """
        return (await self.resolve()).match(on_some, on_none)

    async def match_async[R](
        self,
        on_some: Callable[[T], Awaitable[R]],
        on_none: Callable[[], Awaitable[R]],
    ) -> R:
        """Wait for the source, then await exactly one of two asynchronous functions.

        The handler that is not taken is never called.

        Args:
            on_some (Callable[[T], Awaitable[R]]): Called with the value if the source resolves to `Some`.
            on_none (Callable[[], Awaitable[R]]): Called without argument if the source resolves to `NONE`.

        Returns:
            R: The awaited result of the handler that was called.

        Example:
        ```python
        >>> import asyncio
        >>> import maybechain as mc
        >>> async def on_some(x: int) -> int:
        ...     return x + 1
        >>> async def on_none() -> int:
        ...     return 0
        >>>
        >>> asyncio.run(mc.AsyncMaybe.some(1).match_async(on_some, on_none))
        2
        >>> asyncio.run(mc.AsyncMaybe.none().match_async(on_some, on_none))
        0

        ```
        """
        return await (await self.resolve()).match(on_some, on_none)

    async def or_return(self, fallback: T) -> T:
        """Wait for the source and return its value, or `fallback`."""
        return (await self.resolve()).or_return(fallback)

    async def or_get(self, supplier: Callable[[], T]) -> T:
        """Wait for the source and return its value, or the result of `supplier`."""
        return (await self.resolve()).or_get(supplier)

    async def or_throw(self, error: BaseException | Callable[[], BaseException]) -> T:
        """Wait for the source and return its value, or raise `error`.

        Example:
        ```python
        >>> import asyncio
        >>> import maybechain as mc
        >>> asyncio.run(mc.AsyncMaybe.none().or_throw(LookupError("no user")))
        Traceback (most recent call last):
            ...
        LookupError: no user

        ```
        """
        return (await self.resolve()).or_throw(error)
