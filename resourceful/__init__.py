"""
Resource algebra for asynchronously produced data.

A Resource is exactly one of four states:

- initial            - not requested yet
- pending            - in flight
- failed(error)      - finished with an error
- succeded(value)    - finished with a value

Pure combinators transform and inspect resources without branching
on their state in calling code.

Architecture:
- Curried functions (`map(f)(r)`), composable with `pipe`
- Flipped object-style surface (`ops.map(r, f)`, also exported as `resource`)
- `lift.up.*` / `lift.down.*` bridge plain values, kungfu Option/Result
  and exception-raising code

Example:
    from resourceful import chain, map, pipe, succeded

    pipe(succeded(42), map(lambda n: n + 1), chain(validate))
"""

import logging

# Core types
from .variants import (
    TAGS,
    AnyResource,
    Failed,
    Initial,
    Pending,
    Resource,
    Succeded,
    Tag,
    initial,
    pending,
)
from ._types import Eliminator, NoError, Thunk, Transform

# Internal helpers
from . import _helpers
from ._helpers import pipe

# Guards (`is` is a keyword, hence `is_`)
from . import guards as is_
from .guards import failed as is_failed
from .guards import initial as is_initial
from .guards import pending as is_pending
from .guards import succeded as is_succeded
from .guards import succeeded as is_succeeded

# Lift helpers
from . import lift
from .lift import (
    catching,
    failed,
    from_nullable,
    from_option,
    from_result,
    get_or_else,
    of,
    succeded,
    succeeded,
    to_nullable,
    to_option,
    to_undefined,
    unsafe,
)

# Functor / elimination / effects
from .transform import bimap, cata, fold, map, map_error, tap

# Applicative
from .combine import ap, concat, concat3, concat4, lift2, lift3, lift4, sequence

# Monad / alternative / recovery
from .control import alt, chain, recover

# Equality
from .compare import eq

# Flipped surface
from . import ops
from . import ops as resource

# Errors
from ._errors import UnwrapError

# Library-level NullHandler: silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Tag",
    "TAGS",
    "Initial",
    "Pending",
    "Failed",
    "Succeded",
    "Resource",
    "AnyResource",
    "Thunk",
    "Transform",
    "Eliminator",
    "NoError",
    # Helpers
    "_helpers",
    "pipe",
    # Constructors and constants
    "initial",
    "pending",
    "failed",
    "succeded",
    "succeeded",
    "of",
    "from_nullable",
    "from_option",
    "from_result",
    "catching",
    # Guards
    "is_",
    "is_initial",
    "is_pending",
    "is_failed",
    "is_succeded",
    "is_succeeded",
    # Lift module
    "lift",
    # Functor
    "map",
    "map_error",
    "bimap",
    # Applicative
    "ap",
    "lift2",
    "lift3",
    "lift4",
    "concat",
    "concat3",
    "concat4",
    "sequence",
    # Monad / alternative / recovery
    "chain",
    "alt",
    "recover",
    # Elimination
    "fold",
    "cata",
    "tap",
    "get_or_else",
    "to_nullable",
    "to_undefined",
    "to_option",
    "unsafe",
    # Equality
    "eq",
    # Flipped surface
    "ops",
    "resource",
    # Errors
    "UnwrapError",
)
