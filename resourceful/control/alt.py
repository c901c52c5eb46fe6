"""Alternative combinator

Fall back to another resource unless the current one has succeeded."""

from __future__ import annotations

import logging

from .._types import Thunk, Transform
from ..variants import Resource, Succeded

log = logging.getLogger(__name__)


def alt[D, E](
    other: Thunk[Resource[D, E]],
    /,
) -> Transform[D, E, D, E]:
    """
    Keep a Succeded resource, otherwise evaluate other().

    other is a thunk: it runs only when needed.

    Laws:
    - Associativity: alt(c)(alt(b)(r)) == alt(lambda: alt(c)(b()))(r)
    - Distributivity: map(f)(alt(b)(r)) == alt(lambda: map(f)(b()))(map(f)(r))

    Example:
        alt(lambda: succeded("cached"))(failed(err))  # Succeded("cached")
    """

    def run(r: Resource[D, E]) -> Resource[D, E]:
        match r:
            case Succeded():
                return r
            case _:
                log.debug("alt: %s resource, using alternative", r.tag)
                return other()

    return run


__all__ = ("alt",)
