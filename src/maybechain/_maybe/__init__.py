from ._async import AsyncMaybe
from ._maybe import NONE, Maybe, MaybeUnwrapError, MaybeValueError, NoneMaybe, Some

__all__ = [
    "NONE",
    "AsyncMaybe",
    "Maybe",
    "MaybeUnwrapError",
    "MaybeValueError",
    "NoneMaybe",
    "Some",
]
