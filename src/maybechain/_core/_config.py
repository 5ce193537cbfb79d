from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from ._format import value_repr

_DEFAULT_WIDTH = 80
_DEFAULT_DEPTH = 3


@dataclass(slots=True)
class Config:
    """Process-wide settings for the reprs of maybechain wrappers.

    Attributes can be changed in place, and restored with `reset`.

    Example:
    ```python
    >>> import maybechain as mc
    >>> mc.get_config().depth = 1
    >>> mc.Some({"a": {"b": 1}})
    Some(value={'a': {...}})
    >>> mc.get_config().reset()
    >>> mc.Some({"a": {"b": 1}})
    Some(value={'a': {'b': 1}})

    ```
    """

    max_width: int = _DEFAULT_WIDTH
    depth: int = _DEFAULT_DEPTH
    compact: bool = True

    def value_repr(self, v: Any) -> str:
        """Format `v` with the current settings."""
        return value_repr(v, depth=self.depth, width=self.max_width, compact=self.compact)

    def reset(self) -> None:
        """Restore every setting to its default value."""
        for f in fields(self):
            setattr(self, f.name, f.default)


_CONFIG = Config()


def get_config() -> Config:
    """Return the shared `Config` instance."""
    return _CONFIG
