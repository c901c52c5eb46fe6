"""
Lifting values into Resource.

Constructors for the four states plus bridges from None, kungfu Option,
kungfu Result and exception-raising code.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable

from kungfu import Error, Ok, Option, Result, Some

from .._helpers import identity
from .._types import NoError
from ..variants import Failed, Resource, Succeded, initial, pending

log = logging.getLogger(__name__)


def succeded[D](value: D) -> Resource[D, NoError]:
    """
    Wrap a value into Succeded.

    Example:
        from resourceful import lift as L

        user = L.up.succeded(User(id=42))  # Succeded(User(id=42))
    """
    return Succeded(value)


def failed[E](error: E) -> Resource[typing.Never, E]:
    """
    Wrap an error into Failed. Dual of succeded().

    Any value is a legal error: exceptions, strings, domain objects.
    """
    return Failed(error)


def of[D](value: D) -> Resource[D, NoError]:
    """Same as succeded(); the applicative "pure" for Resource."""
    return Succeded(value)


# Correctly spelled alias
succeeded = succeded


def from_nullable[D](value: D | None) -> Resource[D, NoError]:
    """
    Convert Optional to Resource. None becomes initial.

    Only None counts as absent: 0, "" and False are values.

    Example:
        from_nullable(cache.get(key))  # initial on miss, Succeded(hit) otherwise

    NOTE: Absence always maps to initial, never to Failed. Use
          lift.up.failed explicitly when a missing value is an error.
    """
    if value is None:
        return initial
    return Succeded(value)


def from_option[D](option: Option[D]) -> Resource[D, NoError]:
    """Convert kungfu Option. Some(v) -> Succeded(v), Nothing -> initial."""
    match option:
        case Some(value):
            return Succeded(value)
        case _:
            return initial


def from_result[D, E](result: Result[D, E]) -> Resource[D, E]:
    """
    Convert a completed kungfu Result.

    Ok(v) -> Succeded(v), Error(e) -> Failed(e).
    """
    match result:
        case Ok(value):
            return Succeded(value)
        case Error(error):
            return Failed(error)
        case _ as unreachable:
            typing.assert_never(unreachable)


def catching[D, E](
    thunk: Callable[[], D],
    *,
    on_error: Callable[[Exception], E] = identity,  # type: ignore[assignment]
) -> Resource[D, E]:
    """
    Call thunk once and record how it ended.

    A returned value becomes Succeded. A raised Exception is data, not
    control flow: it lands in the Failed payload (through on_error when
    given), so downstream map/chain pass it along untouched and only
    map_error, bimap or recover can look at it.

    Example:
        from resourceful import lift as L

        port = L.up.catching(
            lambda: int(env["PORT"]),
            on_error=lambda e: f"bad PORT: {e!r}",
        )
        # Succeded(8080) or Failed("bad PORT: KeyError('PORT')")

    NOTE: Only Exception subclasses are captured. KeyboardInterrupt and
          SystemExit still propagate.
    """
    try:
        return Succeded(thunk())
    except Exception as exc:
        log.debug("catching: %s converted to Failed", type(exc).__name__)
        return Failed(on_error(exc))


__all__ = (
    "succeded",
    "succeeded",
    "failed",
    "of",
    "initial",
    "pending",
    "from_nullable",
    "from_option",
    "from_result",
    "catching",
)
