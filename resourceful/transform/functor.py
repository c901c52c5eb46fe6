"""Functor and bifunctor combinators

Transform the payload of exactly one state. Every other state is
returned as the very same object."""

from __future__ import annotations

from collections.abc import Callable

from .._types import Transform
from ..variants import Failed, Resource, Succeded


def map[D, E, R](f: Callable[[D], R], /) -> Transform[D, E, R, E]:
    """
    Functor fmap - apply f to the Succeded value.

    Laws:
    - Identity: map(identity) == identity
    - Composition: map(f) . map(g) == map(lambda x: f(g(x)))

    Example:
        map(lambda n: n + 8)(succeded(10))  # Succeded(18)
        map(lambda n: n + 8)(pending)       # pending
    """

    def run(r: Resource[D, E]) -> Resource[R, E]:
        match r:
            case Succeded(value):
                return Succeded(f(value))
            case _:
                return r

    return run


def map_error[D, E, F](f: Callable[[E], F], /) -> Transform[D, E, D, F]:
    """Map over the Failed error. Symmetric to map()."""

    def run(r: Resource[D, E]) -> Resource[D, F]:
        match r:
            case Failed(error):
                return Failed(f(error))
            case _:
                return r

    return run


def bimap[D, E, R, F](
    on_succeded: Callable[[D], R],
    on_failed: Callable[[E], F],
    /,
) -> Transform[D, E, R, F]:
    """
    Map value and error in a single pass.

    Equivalent to map(on_succeded) composed with map_error(on_failed).
    Initial and Pending pass through unchanged.
    """

    def run(r: Resource[D, E]) -> Resource[R, F]:
        match r:
            case Succeded(value):
                return Succeded(on_succeded(value))
            case Failed(error):
                return Failed(on_failed(error))
            case _:
                return r

    return run


__all__ = ("map", "map_error", "bimap")
