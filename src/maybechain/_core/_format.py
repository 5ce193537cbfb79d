from pprint import pformat
from typing import Any


def value_repr(
    v: Any,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    """Format `v` for reprs, truncating nested containers past `depth`."""
    return pformat(v, depth=depth, width=width, compact=compact)
