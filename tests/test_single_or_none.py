"""Tests for the sequence helpers returning a Maybe."""

from collections.abc import Callable, Iterator

import pytest

import maybechain as mc


def _counting(
    predicate: Callable[[int], bool], calls: list[int]
) -> Callable[[int], bool]:
    def _wrapped(x: int) -> bool:
        calls.append(x)
        return predicate(x)

    return _wrapped


def test_when_source_is_none_raises() -> None:
    """Test the source guard, with and without predicate."""
    with pytest.raises(TypeError):
        mc.single_or_none(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        mc.single_or_none(None, lambda _: True)  # type: ignore[arg-type]


def test_when_predicate_is_none_raises() -> None:
    """Test that an explicit None predicate is rejected."""
    with pytest.raises(TypeError):
        mc.single_or_none([], None)  # type: ignore[arg-type]


def test_guards_run_before_reading() -> None:
    """Test that no element is read when the predicate is invalid."""
    read: list[int] = []

    def _source() -> Iterator[int]:
        for x in range(3):
            read.append(x)
            yield x

    with pytest.raises(TypeError):
        mc.single_or_none(_source(), 42)  # type: ignore[arg-type]
    assert read == []


@pytest.mark.parametrize("source", [set(), [], ()])
def test_when_empty_returns_none(source: list[int]) -> None:
    """Test empty sources of various kinds."""
    assert mc.single_or_none(source).is_none()


def test_when_one_element_returns_some() -> None:
    """Test a single element source."""
    assert mc.single_or_none(range(1, 2)) == mc.Some(1)
    assert mc.single_or_none([1]) == mc.Some(1)


def test_when_two_elements_raises() -> None:
    """Test that two elements violate the constraint."""
    with pytest.raises(mc.MoreThanOneError):
        mc.single_or_none(range(1, 3))
    with pytest.raises(mc.MoreThanOneError):
        mc.single_or_none([1, 2])


def test_with_predicate_when_empty_does_not_call_predicate() -> None:
    """Test that an empty source never calls the predicate."""
    calls: list[int] = []
    assert mc.single_or_none([], _counting(lambda _: False, calls)).is_none()
    assert calls == []


def test_with_predicate_when_one_element() -> None:
    """Test true and false predicates on a single element."""
    calls: list[int] = []
    assert mc.single_or_none(range(1), _counting(lambda _: True, calls)).is_some()
    assert calls == [0]
    assert mc.single_or_none(range(1), lambda _: False).is_none()


def test_with_predicate_when_two_elements() -> None:
    """Test true and false predicates on two elements."""
    with pytest.raises(mc.MoreThanOneError):
        mc.single_or_none(range(2), lambda _: True)
    assert mc.single_or_none(range(2), lambda _: False).is_none()


@pytest.mark.parametrize("target", [0, 1, 2])
def test_with_predicate_matching_one_of_three(target: int) -> None:
    """Test that the single match is found wherever it is."""
    assert mc.single_or_none(range(3), lambda x: x == target) == mc.Some(target)


def test_with_predicate_when_three_elements_calls_predicate_twice() -> None:
    """Test that reading stops at the second match."""
    calls: list[int] = []
    with pytest.raises(mc.MoreThanOneError):
        mc.single_or_none([1, 2, 3], _counting(lambda _: True, calls))
    assert len(calls) == 2


def test_first_or_none() -> None:
    """Test first_or_none stops at the first match."""
    calls: list[int] = []
    assert mc.first_or_none(range(10), _counting(lambda x: x > 2, calls)) == mc.Some(3)
    assert calls == [0, 1, 2, 3]
    assert mc.first_or_none([]).is_none()
    assert mc.first_or_none([None, 1]).is_none()


def test_last_or_none() -> None:
    """Test last_or_none on lists and iterators."""
    assert mc.last_or_none([1, 2, 3]) == mc.Some(3)
    assert mc.last_or_none(iter(range(10)), lambda x: x < 5) == mc.Some(4)
    assert mc.last_or_none([1, 3], lambda x: x % 2 == 0).is_none()


def test_element_at_or_none() -> None:
    """Test element_at_or_none bounds."""
    assert mc.element_at_or_none(iter("abc"), 0) == mc.Some("a")
    assert mc.element_at_or_none("abc", 2) == mc.Some("c")
    assert mc.element_at_or_none("abc", 3).is_none()
    assert mc.element_at_or_none("abc", -1).is_none()
    with pytest.raises(TypeError):
        mc.element_at_or_none(None, 0)  # type: ignore[arg-type]


class DummyError(TypeError): ...


def _raising_predicate(_: int) -> bool:
    msg = "predicate boom"
    raise DummyError(msg)


def _raising_source() -> Iterator[int]:
    yield 1
    msg = "source boom"
    raise DummyError(msg)


@pytest.mark.parametrize(
    "helper", [mc.single_or_none, mc.first_or_none, mc.last_or_none]
)
def test_predicate_errors_propagate(
    helper: Callable[[list[int], Callable[[int], bool]], mc.Maybe[int]],
) -> None:
    """Test that an error raised by the predicate reaches the caller."""
    with pytest.raises(DummyError, match="predicate boom"):
        helper([1, 2], _raising_predicate)


@pytest.mark.parametrize(
    "helper",
    [
        mc.single_or_none,
        mc.last_or_none,
        lambda source: mc.element_at_or_none(source, 5),
    ],
)
def test_source_errors_propagate(
    helper: Callable[[Iterator[int]], mc.Maybe[int]],
) -> None:
    """Test that an error raised while iterating the source reaches the caller."""
    with pytest.raises(DummyError, match="source boom"):
        helper(_raising_source())


def test_first_or_none_source_error_after_match_is_not_read() -> None:
    """Test that first_or_none stops before the failing part of the source."""
    assert mc.first_or_none(_raising_source()) == mc.Some(1)
    with pytest.raises(DummyError, match="source boom"):
        mc.first_or_none(_raising_source(), lambda x: x > 1)
