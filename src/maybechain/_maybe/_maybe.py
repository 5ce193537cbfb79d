from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Never, TypeIs, overload

from .._core import Pipeable, get_config

if TYPE_CHECKING:
    from ._async import AsyncMaybe


class MaybeUnwrapError(RuntimeError): ...


class MaybeValueError(ValueError): ...


class Maybe[T](ABC, Pipeable):
    """A value that may or may not be present.

    A `Maybe` is always exactly one of two variants:

    - `Some(value)`, holding one value that is never `None`.
    - `NONE`, holding nothing.

    Every combinator returns a new `Maybe` and only ever calls the function it was given on the `Some` path.

    Example:
    ```python
    >>> import maybechain as mc
    >>> mc.Some(1).map(lambda x: x + 1).filter(lambda x: x > 1).or_return(0)
    2
    >>> mc.NONE.map(lambda x: x + 1).or_return(0)
    0

    ```
    """

    __slots__ = ()

    @staticmethod
    def from_[V](value: V | None) -> Maybe[V]:
        """Build a `Maybe` from a value that may be `None`.

        Args:
            value (V | None): The value to wrap.

        Returns:
            Maybe[V]: `NONE` if `value` is `None`, `Some(value)` otherwise.

        Example:
        ```python
        >>> import maybechain as mc
        >>> mc.Maybe.from_(3)
        Some(value=3)
        >>> mc.Maybe.from_(None)
        NONE
        >>> mc.Maybe.from_(0)
        Some(value=0)

        ```
        """
        if value is None:
            return NONE
        return Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the maybe is a `Some` value.

        Example:
        ```python
        >>> import maybechain as mc
        >>> mc.Some(2).is_some()
        True
        >>> mc.NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneMaybe]:  # type: ignore[misc]
        """Returns `True` if the maybe is `NONE`.

        Example:
        ```python
        >>> import maybechain as mc
        >>> mc.Some(2).is_none()
        False
        >>> mc.NONE.is_none()
        True

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Returns:
            T: The contained value.

        Raises:
            MaybeUnwrapError: If the maybe is `NONE`.

        Example:
        ```python
        >>> import maybechain as mc
        >>> mc.Some("car").unwrap()
        'car'
        >>> mc.NONE.unwrap()
        Traceback (most recent call last):
            ...
        maybechain._maybe._maybe.MaybeUnwrapError: called `unwrap` on a `NONE`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises with the provided message.

        Args:
            msg (str): The message to include in the exception if the maybe is `NONE`.

        Returns:
            T: The contained value.

        Raises:
            MaybeUnwrapError: If the maybe is `NONE`.

        Example:
        ```python
        >>> import maybechain as mc
        >>> mc.Some("value").expect("fruits are healthy")
        'value'
        >>> mc.NONE.expect("fruits are healthy")
        Traceback (most recent call last):
            ...
        maybechain._maybe._maybe.MaybeUnwrapError: fruits are healthy (called `expect` on a `NONE`)

        ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `NONE`)"
        raise MaybeUnwrapError(msg)

    def map[U](self, f: Callable[[T], U]) -> Maybe[U]:
        """Maps a `Maybe[T]` to `Maybe[U]` by applying a function to a contained `Some` value.

        `NONE` is returned untouched, and `f` is not called.

        Args:
            f (Callable[[T], U]): The function to apply to the `Some` value.

        Returns:
            Maybe[U]: `Some(f(value))` if `Some`, otherwise `NONE`.

        Raises:
            MaybeValueError: If `f` returns `None`.

        Example:
        ```python
        >>> import maybechain as mc
        >>> mc.Some("Hello, World!").map(len)
        Some(value=13)
        >>> mc.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def flat_map[U](self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Calls a function returning a `Maybe` if the maybe is `Some`, otherwise returns `NONE`.

        The result of `f` is returned as is, without any extra wrapping.

        Args:
            f (Callable[[T], Maybe[U]]): The function to call with the `Some` value.

        Returns:
            Maybe[U]: The result of the function if `Some`, otherwise `NONE`.

        Example:
        ```python
        >>> import maybechain as mc
        >>> def sq(x: int) -> mc.Maybe[int]:
        ...     return mc.Some(x * x)
        >>> def nope(x: int) -> mc.Maybe[int]:
        ...     return mc.NONE
        >>> mc.Some(2).flat_map(sq).flat_map(sq)
        Some(value=16)
        >>> mc.Some(2).flat_map(sq).flat_map(nope)
        NONE
        >>> mc.NONE.flat_map(sq)
        NONE

        ```
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Keep the `Some` value only if it satisfies the predicate.

        Args:
            predicate (Callable[[T], bool]): Function evaluated on the `Some` value.

        Returns:
            Maybe[T]: This same instance if `Some` and the predicate holds, otherwise `NONE`.

        Example:
        ```python
        >>> import maybechain as mc
        >>> mc.Some(4).filter(lambda x: x % 2 == 0)
        Some(value=4)
        >>> mc.Some(3).filter(lambda x: x % 2 == 0)
        NONE
        >>> mc.NONE.filter(lambda x: True)
        NONE

        ```
        """
        if self.is_some() and predicate(self.unwrap()):
            return self
        return NONE

    def zip[U, R](self, other: Maybe[U], combine: Callable[[T, U], R]) -> Maybe[R]:
        """Combine two `Some` values with a function.

        If either side is `NONE`, `combine` is never called.

        Args:
            other (Maybe[U]): The maybe to combine with.
            combine (Callable[[T, U], R]): Function receiving both values.

        Returns:
            Maybe[R]: `Some(combine(left, right))` if both are `Some`, otherwise `NONE`.

        Example:
        ```python
        >>> import maybechain as mc
        >>> mc.Some(1).zip(mc.Some(True), lambda f, s: (f, s))
        Some(value=(1, True))
        >>> mc.Some(1).zip(mc.NONE, lambda f, s: (f, s))
        NONE

        ```
        """
        if self.is_some() and other.is_some():
            return Some(combine(self.unwrap(), other.unwrap()))
        return NONE

    def or_else(self, f: Callable[[], Maybe[T]]) -> Maybe[T]:
        """Returns the maybe if it contains a value, otherwise calls `f` and returns its result.

        Example:
        ```python
        >>> import maybechain as mc
        >>> mc.Some("barbarians").or_else(lambda: mc.Some("vikings"))
        Some(value='barbarians')
        >>> mc.NONE.or_else(lambda: mc.Some("vikings"))
        Some(value='vikings')

        ```
        """
        return self if self.is_some() else f()

    def or_return(self, fallback: T) -> T:
        """Returns the contained `Some` value or the provided fallback.

        Args:
            fallback (T): The value to return if the maybe is `NONE`.

        Returns:
            T: The contained value or `fallback`.

        Example:
        ```python
        >>> import maybechain as mc
        >>> mc.Some("car").or_return("bike")
        'car'
        >>> mc.NONE.or_return("bike")
        'bike'

        ```
        """
        return self.unwrap() if self.is_some() else fallback

    @overload
    def or_default(self, factory: None = None) -> T | None: ...
    @overload
    def or_default(self, factory: Callable[[], T]) -> T: ...
    def or_default(self, factory: Callable[[], T] | None = None) -> T | None:
        """Returns the contained `Some` value or a default value.

        The default is `factory()` when a type or factory is given, and `None` otherwise.

        Args:
            factory (Callable[[], T] | None): Builds the default value. Defaults to None.

        Returns:
            T | None: The contained value or the default.

        Example:
        ```python
        >>> import maybechain as mc
        >>> mc.Some(5).or_default(int)
        5
        >>> mc.NONE.or_default(int)
        0
        >>> mc.NONE.or_default(list)
        []
        >>> mc.NONE.or_default() is None
        True

        ```
        """
        if self.is_some():
            return self.unwrap()
        return None if factory is None else factory()

    def or_get(self, supplier: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes one from `supplier`.

        Args:
            supplier (Callable[[], T]): Called only if the maybe is `NONE`.

        Returns:
            T: The contained value or the result of `supplier`.

        Example:
        ```python
        >>> import maybechain as mc
        >>> k = 10
        >>> mc.Some(4).or_get(lambda: 2 * k)
        4
        >>> mc.NONE.or_get(lambda: 2 * k)
        20

        ```
        """
        return self.unwrap() if self.is_some() else supplier()

    def or_throw(self, error: BaseException | Callable[[], BaseException]) -> T:
        """Returns the contained `Some` value or raises the given error.

        Args:
            error (BaseException | Callable[[], BaseException]): The exception to raise, or a function producing it.
                The function is only called if the maybe is `NONE`.

        Returns:
            T: The contained value.

        Example:
        ```python
        >>> import maybechain as mc
        >>> mc.Some(1).or_throw(KeyError("missing"))
        1
        >>> mc.NONE.or_throw(lambda: KeyError("missing"))
        Traceback (most recent call last):
            ...
        KeyError: 'missing'

        ```
        """
        if self.is_some():
            return self.unwrap()
        if isinstance(error, BaseException):
            raise error
        raise error()

    def match[R](self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        """Dispatch to exactly one of two functions, depending on the variant.

        Args:
            on_some (Callable[[T], R]): Called with the value if `Some`.
            on_none (Callable[[], R]): Called without argument if `NONE`.

        Returns:
            R: The result of the function that was called.

        Example:
        ```python
        >>> import maybechain as mc
        >>> mc.Some(3).match(lambda x: x * 2, lambda: -1)
        6
        >>> mc.NONE.match(lambda x: x * 2, lambda: -1)
        -1

        ```
        """
        if self.is_some():
            return on_some(self.unwrap())
        return on_none()

    def to_async(self) -> AsyncMaybe[T]:
        """Wrap this maybe into an already resolved `AsyncMaybe`.

        Example:
        ```python
        >>> import asyncio
        >>> import maybechain as mc
        >>> asyncio.run(mc.Some(1).to_async().map(lambda x: x + 1).resolve())
        Some(value=2)

        ```
        """
        from ._async import AsyncMaybe

        return AsyncMaybe(self)


@dataclass(slots=True, frozen=True)
class Some[T](Maybe[T]):
    """Maybe variant representing the presence of a value.

    Args:
        value (T): The contained value. Must not be `None`.

    Raises:
        MaybeValueError: If `value` is `None`.

    Example:
    ```python
    >>> import maybechain as mc
    >>> mc.Some(42)
    Some(value=42)
    >>> mc.Some(None)
    Traceback (most recent call last):
        ...
    maybechain._maybe._maybe.MaybeValueError: `Some` cannot hold `None`, use `NONE` instead

    ```
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            msg = "`Some` cannot hold `None`, use `NONE` instead"
            raise MaybeValueError(msg)

    def __repr__(self) -> str:
        return f"Some(value={get_config().value_repr(self.value)})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` for `Some`."""
        return True

    def is_none(self) -> TypeIs[NoneMaybe]:  # type: ignore[misc]
        """Returns `False` for `Some`."""
        return False

    def unwrap(self) -> T:
        """Returns the contained value."""
        return self.value


@dataclass(slots=True, frozen=True)
class NoneMaybe(Maybe[Any]):
    """Maybe variant representing the absence of a value.

    All instances are equal to each other and to `NONE`.
    """

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        """Returns `False` for `NONE`."""
        return False

    def is_none(self) -> TypeIs[NoneMaybe]:  # type: ignore[misc]
        """Returns `True` for `NONE`."""
        return True

    def unwrap(self) -> Never:
        """Raises `MaybeUnwrapError`, since `NONE` contains no value."""
        raise MaybeUnwrapError("called `unwrap` on a `NONE`")


NONE: Maybe[Any] = NoneMaybe()
"""Singleton instance representing the absence of a value."""
