"""
Core type definitions for resourceful.

Aliases for the callables accepted by combinators.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .variants import Resource

# ============================================================================
# Type aliases
# ============================================================================

# Thunk = zero-argument callable, evaluated lazily (alt, get_or_else)
type Thunk[T] = Callable[[], T]

# Transform = curried combinator applied to a Resource
type Transform[D, E, R, F] = Callable[[Resource[D, E]], Resource[R, F]]

# Eliminator = curried combinator collapsing a Resource into a plain value
type Eliminator[D, E, R] = Callable[[Resource[D, E]], R]

# NoError = error type of a Resource that cannot be Failed
type NoError = typing.Never

__all__ = (
    "Thunk",
    "Transform",
    "Eliminator",
    "NoError",
)
