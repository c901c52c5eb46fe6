"""Applicative combinators

Combine independently obtained resources. When not every side is
Succeded, the worst known state wins:

    Failed > Pending > Initial > Succeded
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from .._helpers import curry2, curry3, curry4, pipe
from ..transform.functor import map
from ..variants import Failed, Initial, Pending, Resource, Succeded


def ap[D, R, E1, E2](
    r: Resource[D, E2],
    /,
) -> Callable[[Resource[Callable[[D], R], E1]], Resource[R, E1 | E2]]:
    """
    Apply a Resource-wrapped function to a Resource-wrapped argument.

    Resolution when the function side (rf) is not Succeded:
    - rf Failed  -> rf
    - rf Pending -> r if r is Failed, else rf
    - rf Initial -> r if r is Failed or Pending, else rf

    When rf is Succeded the argument decides: Succeded applies the
    function, any other state passes r through.

    Example:
        ap(failed("boom"))(pending)  # Failed("boom")
    """

    def run(rf: Resource[Callable[[D], R], E1]) -> Resource[R, E1 | E2]:
        match rf:
            case Failed():
                return rf
            case Pending():
                match r:
                    case Failed():
                        return r
                    case _:
                        return rf
            case Initial():
                match r:
                    case Failed() | Pending():
                        return r
                    case _:
                        return rf
            case Succeded(f):
                return map(f)(r)
            case _ as unreachable:
                assert_never(unreachable)

    return run


def lift2[A, B, C](
    f: Callable[[A, B], C],
    a: Resource[A, object],
    b: Resource[B, object],
) -> Resource[C, object]:
    """
    Combine two resources with a binary function.

    f receives plain values and is only called when both are Succeded.

    Example:
        lift2(operator.add, succeded(1), succeded(2))  # Succeded(3)
    """
    return pipe(a, map(curry2(f)), ap(b))


def lift3[A, B, C, R](
    f: Callable[[A, B, C], R],
    a: Resource[A, object],
    b: Resource[B, object],
    c: Resource[C, object],
) -> Resource[R, object]:
    """Combine three resources with a ternary function."""
    return pipe(a, map(curry3(f)), ap(b), ap(c))


def lift4[A, B, C, D, R](
    f: Callable[[A, B, C, D], R],
    a: Resource[A, object],
    b: Resource[B, object],
    c: Resource[C, object],
    d: Resource[D, object],
) -> Resource[R, object]:
    """Combine four resources with a quaternary function."""
    return pipe(a, map(curry4(f)), ap(b), ap(c), ap(d))


__all__ = ("ap", "lift2", "lift3", "lift4")
