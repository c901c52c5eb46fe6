"""Elimination combinators

Collapse a Resource into a plain value by pattern matching on its state."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import noop
from .._types import Eliminator, Thunk
from ..variants import Failed, Initial, Pending, Resource, Succeded


def fold[D, E, R](
    on_initial: Thunk[R],
    on_pending: Thunk[R],
    on_failed: Callable[[E], R],
    on_succeded: Callable[[D], R],
    /,
) -> Eliminator[D, E, R]:
    """
    Total pattern match. Exactly one branch is invoked.

    Example:
        render = fold(
            lambda: "idle",
            lambda: "loading...",
            lambda e: f"error: {e}",
            lambda user: f"hello, {user.name}",
        )
        render(pending)  # "loading..."
    """

    def run(r: Resource[D, E]) -> R:
        match r:
            case Initial():
                return on_initial()
            case Pending():
                return on_pending()
            case Failed(error):
                return on_failed(error)
            case Succeded(value):
                return on_succeded(value)
            case _ as unreachable:
                typing.assert_never(unreachable)

    return run


def cata[D, E, R](
    *,
    initial: Thunk[R] | None = None,
    pending: Thunk[R] | None = None,
    failed: Callable[[E], R] | None = None,
    succeded: Callable[[D], R] | None = None,
) -> Eliminator[D, E, R | None]:
    """
    Partial pattern match. Every handler is optional.

    A missing handler returns None, so cata is handy for dispatching
    side effects without listing every state.

    Example:
        cata(failed=report_error, succeded=store)(r)
    """
    return fold(
        initial or noop,
        pending or noop,
        failed or noop,
        succeded or noop,
    )


__all__ = ("fold", "cata")
