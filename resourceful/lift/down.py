"""
Lowering Resource into plain values.

Projections that collapse a Resource into a value, a default, or an Option.
"""

from __future__ import annotations

from kungfu import Nothing, Option, Some

from .._errors import UnwrapError
from .._types import Eliminator, Thunk
from ..variants import Resource, Succeded


def to_nullable[D, E](r: Resource[D, E]) -> D | None:
    """
    Succeded value or None.

    Example:
        to_nullable(succeded(5))  # 5
        to_nullable(pending)      # None
    """
    match r:
        case Succeded(value):
            return value
        case _:
            return None


def to_undefined[D, E](r: Resource[D, E]) -> D | None:
    """
    Same as to_nullable().

    Python has a single "absent" sentinel, so both projections give None.
    """
    return to_nullable(r)


def to_option[D, E](r: Resource[D, E]) -> Option[D]:
    """Succeded value as Some, every other state as Nothing."""
    match r:
        case Succeded(value):
            return Some(value)
        case _:
            return Nothing()


def get_or_else[D, E](f: Thunk[D]) -> Eliminator[D, E, D]:
    """
    Succeded value, or f() for any other state.

    f is evaluated lazily: it is not called for Succeded.

    Example:
        name = get_or_else(lambda: "Guest")(user_name)
    """

    def run(r: Resource[D, E]) -> D:
        match r:
            case Succeded(value):
                return value
            case _:
                return f()

    return run


def unsafe[D, E](r: Resource[D, E]) -> D:
    """
    Succeded value, raises UnwrapError otherwise.

    The one projection that raises. The exception keeps the resource,
    so a Failed payload is still reachable from the handler.
    """
    match r:
        case Succeded(value):
            return value
        case _:
            raise UnwrapError(r)


__all__ = (
    "to_nullable",
    "to_undefined",
    "to_option",
    "get_or_else",
    "unsafe",
)
