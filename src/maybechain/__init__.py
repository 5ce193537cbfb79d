from ._core import Config, Pipeable, get_config
from ._iter import (
    MoreThanOneError,
    element_at_or_none,
    first_or_none,
    last_or_none,
    single_or_none,
)
from ._maybe import (
    NONE,
    AsyncMaybe,
    Maybe,
    MaybeUnwrapError,
    MaybeValueError,
    NoneMaybe,
    Some,
)
from ._units import UNIT, Unit, unit, unit_async

__all__ = [
    "NONE",
    "UNIT",
    "AsyncMaybe",
    "Config",
    "Maybe",
    "MaybeUnwrapError",
    "MaybeValueError",
    "MoreThanOneError",
    "NoneMaybe",
    "Pipeable",
    "Some",
    "Unit",
    "element_at_or_none",
    "first_or_none",
    "get_config",
    "last_or_none",
    "single_or_none",
    "unit",
    "unit_async",
]
