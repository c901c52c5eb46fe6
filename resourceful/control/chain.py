"""Monadic sequencing."""

from __future__ import annotations

from collections.abc import Callable

from .._types import Transform
from ..variants import Resource, Succeded


def chain[D, E, R](
    f: Callable[[D], Resource[R, E]],
    /,
) -> Transform[D, E, R, E]:
    """
    Monadic bind (>>=).

    - On Succeded: replaced by f(value)
    - Otherwise: passed through unchanged, f is not called

    Laws:
    - Left identity: chain(f)(succeded(a)) == f(a)
    - Associativity: chain(f)(chain(g)(r)) == chain(lambda x: chain(f)(g(x)))(r)

    Example:
        chain(lambda n: succeded(n * 2))(succeded(50))  # Succeded(100)
    """

    def run(r: Resource[D, E]) -> Resource[R, E]:
        match r:
            case Succeded(value):
                return f(value)
            case _:
                return r

    return run


__all__ = ("chain",)
