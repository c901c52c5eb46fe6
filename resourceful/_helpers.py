"""Internal helpers for resourceful.

Small function utilities shared across combinator modules.
`pipe` is re-exported publicly for the curried calling convention."""

from __future__ import annotations

import typing
from collections.abc import Callable


def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def noop(*_: typing.Any) -> None:
    """Accept anything, return None. Stands in for missing cata handlers."""
    return None


def pipe(value: typing.Any, *fns: Callable[[typing.Any], typing.Any]) -> typing.Any:
    """
    Thread value through functions left to right.

    Usage:
        pipe(succeded(10), map(lambda n: n + 8), chain(validate))
        # same as chain(validate)(map(lambda n: n + 8)(succeded(10)))
    """
    for fn in fns:
        value = fn(value)
    return value


# Currying (n-ary -> chain of unary functions), used by lift2..lift4
def curry2[A, B, R](f: Callable[[A, B], R]) -> Callable[[A], Callable[[B], R]]:
    return lambda a: lambda b: f(a, b)


def curry3[A, B, C, R](
    f: Callable[[A, B, C], R],
) -> Callable[[A], Callable[[B], Callable[[C], R]]]:
    return lambda a: lambda b: lambda c: f(a, b, c)


def curry4[A, B, C, D, R](
    f: Callable[[A, B, C, D], R],
) -> Callable[[A], Callable[[B], Callable[[C], Callable[[D], R]]]]:
    return lambda a: lambda b: lambda c: lambda d: f(a, b, c, d)


__all__ = (
    "identity",
    "noop",
    "pipe",
    "curry2",
    "curry3",
    "curry4",
)
