"""Tests for slot usage in maybechain classes."""

import maybechain as mc


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(mc.Some(42))
    assert _check_slots(mc.NoneMaybe())
    assert _check_slots(mc.AsyncMaybe.none())
    assert _check_slots(mc.UNIT)
    assert _check_slots(mc.get_config())
