"""
Moving between plain Python values and Resource.

    from resourceful import lift as L

- L.up.*    - build a Resource: the four states, None, kungfu Option/Result,
              or a call that may raise
- L.down.*  - leave a Resource: value or None, value or default, Option,
              or value-or-UnwrapError

Examples:
    from resourceful import lift as L

    cached = L.up.from_nullable(cache.get(key))   # initial on a miss
    stored = L.up.from_result(repo.load(key))     # Ok/Error -> Succeded/Failed
    loaded = L.up.catching(lambda: read_config(path))

    L.down.to_nullable(cached)                    # value or None
    L.down.get_or_else(lambda: defaults)(loaded)  # value or fallback
"""

from __future__ import annotations

from . import down, up

# Most common functions in root for easy access
from .down import get_or_else, to_nullable, to_option, to_undefined, unsafe
from .up import (
    catching,
    failed,
    from_nullable,
    from_option,
    from_result,
    of,
    succeded,
    succeeded,
)

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "succeded",
    "succeeded",
    "failed",
    "of",
    "from_nullable",
    "from_option",
    "from_result",
    "catching",
    # Down
    "to_nullable",
    "to_undefined",
    "to_option",
    "get_or_else",
    "unsafe",
)
