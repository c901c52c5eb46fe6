"""Concat combinators

Pair resources into a Resource of a tuple, in argument order."""

from __future__ import annotations

from collections.abc import Callable

from ..variants import Resource
from .apply import lift2, lift3, lift4


def concat[A, B](
    r2: Resource[B, object],
    /,
) -> Callable[[Resource[A, object]], Resource[tuple[A, B], object]]:
    """
    Pair r1 with r2.

    Example:
        concat(succeded("b"))(succeded("a"))  # Succeded(("a", "b"))
    """

    def run(r1: Resource[A, object]) -> Resource[tuple[A, B], object]:
        return lift2(lambda a, b: (a, b), r1, r2)

    return run


def concat3[A, B, C](
    r2: Resource[B, object],
    r3: Resource[C, object],
    /,
) -> Callable[[Resource[A, object]], Resource[tuple[A, B, C], object]]:
    """Combine r1 with r2 and r3 into a triple."""

    def run(r1: Resource[A, object]) -> Resource[tuple[A, B, C], object]:
        return lift3(lambda a, b, c: (a, b, c), r1, r2, r3)

    return run


def concat4[A, B, C, D](
    r2: Resource[B, object],
    r3: Resource[C, object],
    r4: Resource[D, object],
    /,
) -> Callable[[Resource[A, object]], Resource[tuple[A, B, C, D], object]]:
    """Combine r1 with r2, r3 and r4 into a quadruple."""

    def run(r1: Resource[A, object]) -> Resource[tuple[A, B, C, D], object]:
        return lift4(lambda a, b, c, d: (a, b, c, d), r1, r2, r3, r4)

    return run


__all__ = ("concat", "concat3", "concat4")
