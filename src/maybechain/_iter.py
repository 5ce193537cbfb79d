"""Sequence helpers returning a `Maybe` instead of raising on missing elements."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from typing import Any, Final, overload

import cytoolz as cz
import more_itertools as mit

from ._maybe import NONE, Maybe


class MoreThanOneError(RuntimeError): ...


class _NoPredicate:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<no predicate>"


_NO_PREDICATE: Final = _NoPredicate()


def _select[T](
    source: Iterable[T] | None,
    predicate: Callable[[T], bool] | _NoPredicate,
) -> Iterable[T]:
    if source is None or not cz.itertoolz.isiterable(source):
        msg = f"source must be an iterable, got {type(source).__name__}"
        raise TypeError(msg)
    match predicate:
        case _NoPredicate():
            return source
        case _ if callable(predicate):
            return filter(predicate, source)
        case _:
            msg = f"predicate must be callable, got {type(predicate).__name__}"
            raise TypeError(msg)


@overload
def single_or_none[T](source: Iterable[T]) -> Maybe[T]: ...
@overload
def single_or_none[T](source: Iterable[T], predicate: Callable[[T], bool]) -> Maybe[T]: ...
def single_or_none[T](
    source: Iterable[T], predicate: Callable[[T], bool] | Any = _NO_PREDICATE
) -> Maybe[T]:
    """Return the only element of `source` satisfying `predicate`, if any.

    Elements are read one by one, and reading stops as soon as a second match is found.
    Without a predicate, every element matches.

    Elements equal to `None` are treated as missing.

    Args:
        source (Iterable[T]): The elements to search.
        predicate (Callable[[T], bool]): Function to evaluate each element. Defaults to matching everything.

    Returns:
        Maybe[T]: `Some(element)` if exactly one element matches, `NONE` if none does.

    Raises:
        TypeError: If `source` is not iterable, or if `predicate` is given but not callable.
        MoreThanOneError: If more than one element matches.

    Example:
    ```python
    >>> import maybechain as mc
    >>> mc.single_or_none([])
    NONE
    >>> mc.single_or_none([7])
    Some(value=7)
    >>> mc.single_or_none(range(10), lambda x: x > 8)
    Some(value=9)
    >>> mc.single_or_none(range(10), lambda x: x > 7)
    Traceback (most recent call last):
        ...
    maybechain._iter.MoreThanOneError: source contains more than one matching element

    ```
    """
    too_long = MoreThanOneError("source contains more than one matching element")
    return Maybe.from_(mit.only(_select(source, predicate), default=None, too_long=too_long))


@overload
def first_or_none[T](source: Iterable[T]) -> Maybe[T]: ...
@overload
def first_or_none[T](source: Iterable[T], predicate: Callable[[T], bool]) -> Maybe[T]: ...
def first_or_none[T](
    source: Iterable[T], predicate: Callable[[T], bool] | Any = _NO_PREDICATE
) -> Maybe[T]:
    """Return the first element of `source` satisfying `predicate`, if any.

    Reading stops at the first match.

    Example:
    ```python
    >>> import maybechain as mc
    >>> mc.first_or_none([3, 4, 5], lambda x: x % 2 == 0)
    Some(value=4)
    >>> mc.first_or_none([])
    NONE

    ```
    """
    return Maybe.from_(mit.first(_select(source, predicate), default=None))


@overload
def last_or_none[T](source: Iterable[T]) -> Maybe[T]: ...
@overload
def last_or_none[T](source: Iterable[T], predicate: Callable[[T], bool]) -> Maybe[T]: ...
def last_or_none[T](
    source: Iterable[T], predicate: Callable[[T], bool] | Any = _NO_PREDICATE
) -> Maybe[T]:
    """Return the last element of `source` satisfying `predicate`, if any.

    This has to consume the whole iterable.

    Example:
    ```python
    >>> import maybechain as mc
    >>> mc.last_or_none([3, 4, 5, 6, 7], lambda x: x % 2 == 0)
    Some(value=6)
    >>> mc.last_or_none(iter([]))
    NONE

    ```
    """
    last = deque(_select(source, predicate), maxlen=1)
    return Maybe.from_(last[0] if last else None)


def element_at_or_none[T](source: Iterable[T], index: int) -> Maybe[T]:
    """Return the element at `index`, if `source` is long enough.

    Negative indexes never match.

    Example:
    ```python
    >>> import maybechain as mc
    >>> mc.element_at_or_none("abc", 1)
    Some(value='b')
    >>> mc.element_at_or_none("abc", 3)
    NONE
    >>> mc.element_at_or_none("abc", -1)
    NONE

    ```
    """
    data = _select(source, _NO_PREDICATE)
    if index < 0:
        return NONE
    return Maybe.from_(mit.nth(data, index, default=None))
