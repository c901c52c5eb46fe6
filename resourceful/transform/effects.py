"""Side effects combinators

Observe the current state of a resource without transforming it."""

from __future__ import annotations

from collections.abc import Callable

from .._types import Thunk, Transform
from ..variants import Resource
from .fold import cata


def tap[D, E](
    *,
    initial: Thunk[object] | None = None,
    pending: Thunk[object] | None = None,
    failed: Callable[[E], object] | None = None,
    succeded: Callable[[D], object] | None = None,
) -> Transform[D, E, D, E]:
    """
    Run the handler for the current state, return the resource unchanged.

    Handler results are discarded.

    Example:
        pipe(
            load_user(),
            tap(failed=lambda e: log.warning("load failed: %s", e)),
            map(render),
        )
    """
    handle = cata(initial=initial, pending=pending, failed=failed, succeded=succeded)

    def run(r: Resource[D, E]) -> Resource[D, E]:
        handle(r)
        return r

    return run


__all__ = ("tap",)
