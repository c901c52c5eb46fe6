"""Recover combinator

The only way to turn a Failed resource into a Succeded one."""

from __future__ import annotations

import logging
from collections.abc import Callable

from kungfu import Option, Some

from .._types import Transform
from ..variants import Failed, Resource, Succeded

log = logging.getLogger(__name__)


def recover[D, E](
    on_error: Callable[[E], Option[D]],
    /,
) -> Transform[D, E, D, E]:
    """
    Turn Failed into Succeded when on_error supplies a value.

    - on_error returns Some(v): Succeded(v)
    - on_error returns Nothing: the original Failed, unchanged
    - Initial, Pending, Succeded: passed through, on_error not called

    Option keeps "no recovery" apart from "recovered to a falsy value":
    Some(0) and Some(None) are both recoveries.

    Example:
        from kungfu import Nothing, Some

        recover(lambda e: Some(0) if isinstance(e, NotFound) else Nothing())
    """

    def run(r: Resource[D, E]) -> Resource[D, E]:
        match r:
            case Failed(error):
                match on_error(error):
                    case Some(value):
                        log.debug("recover: failed resource recovered")
                        return Succeded(value)
                    case _:
                        return r
            case _:
                return r

    return run


__all__ = ("recover",)
