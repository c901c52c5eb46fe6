"""
Flipped, object-style surface.

Same operations as the curried API with the resource as the first
argument. Every function here is a thin adapter over the curried
implementation, so both conventions always agree:

    from resourceful import ops as R   # or: from resourceful import resource as R

    R.map(r, lambda n: n + 1)          # == map(lambda n: n + 1)(r)
    R.ap(rf, r)                        # == ap(r)(rf)
    R.concat3(r1, r2, r3)              # == concat3(r2, r3)(r1)
    R.cata(r, failed=report)           # == cata(failed=report)(r)
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Option

from . import guards as is_
from ._types import Thunk
from .combine.apply import ap as _ap
from .combine.concat import concat as _concat
from .combine.concat import concat3 as _concat3
from .combine.concat import concat4 as _concat4
from .compare import eq
from .control.alt import alt as _alt
from .control.chain import chain as _chain
from .control.recover import recover as _recover
from .lift.down import get_or_else as _get_or_else
from .lift.down import to_nullable, to_option, to_undefined, unsafe
from .lift.up import (
    catching,
    failed,
    from_nullable,
    from_option,
    from_result,
    of,
    succeded,
    succeeded,
)
from .transform.effects import tap as _tap
from .transform.fold import cata as _cata
from .transform.fold import fold as _fold
from .transform.functor import bimap as _bimap
from .transform.functor import map as _map
from .transform.functor import map_error as _map_error
from .variants import Resource, initial, pending


# Functor


def map[D, E, R](r: Resource[D, E], f: Callable[[D], R], /) -> Resource[R, E]:
    """Flipped map(): map(f)(r)."""
    return _map(f)(r)


def map_error[D, E, F](r: Resource[D, E], f: Callable[[E], F], /) -> Resource[D, F]:
    """Flipped map_error(): map_error(f)(r)."""
    return _map_error(f)(r)


def bimap[D, E, R, F](
    r: Resource[D, E],
    on_succeded: Callable[[D], R],
    on_failed: Callable[[E], F],
    /,
) -> Resource[R, F]:
    """Flipped bimap(): bimap(on_succeded, on_failed)(r)."""
    return _bimap(on_succeded, on_failed)(r)


# Applicative


def ap[D, R, E1, E2](
    rf: Resource[Callable[[D], R], E1],
    r: Resource[D, E2],
    /,
) -> Resource[R, E1 | E2]:
    """Flipped ap(): ap(r)(rf), function side first."""
    return _ap(r)(rf)


def concat[A, B](
    r1: Resource[A, object],
    r2: Resource[B, object],
    /,
) -> Resource[tuple[A, B], object]:
    """Flipped concat(): concat(r2)(r1)."""
    return _concat(r2)(r1)


def concat3[A, B, C](
    r1: Resource[A, object],
    r2: Resource[B, object],
    r3: Resource[C, object],
    /,
) -> Resource[tuple[A, B, C], object]:
    """Flipped concat3(): concat3(r2, r3)(r1)."""
    return _concat3(r2, r3)(r1)


def concat4[A, B, C, D](
    r1: Resource[A, object],
    r2: Resource[B, object],
    r3: Resource[C, object],
    r4: Resource[D, object],
    /,
) -> Resource[tuple[A, B, C, D], object]:
    """Flipped concat4(): concat4(r2, r3, r4)(r1)."""
    return _concat4(r2, r3, r4)(r1)


# Monad / alternative / recovery


def chain[D, E, R](r: Resource[D, E], f: Callable[[D], Resource[R, E]], /) -> Resource[R, E]:
    """Flipped chain(): chain(f)(r)."""
    return _chain(f)(r)


def alt[D, E](r: Resource[D, E], other: Thunk[Resource[D, E]], /) -> Resource[D, E]:
    """Flipped alt(): alt(other)(r)."""
    return _alt(other)(r)


def recover[D, E](r: Resource[D, E], on_error: Callable[[E], Option[D]], /) -> Resource[D, E]:
    """Flipped recover(): recover(on_error)(r)."""
    return _recover(on_error)(r)


# Elimination


def fold[D, E, R](
    r: Resource[D, E],
    on_initial: Thunk[R],
    on_pending: Thunk[R],
    on_failed: Callable[[E], R],
    on_succeded: Callable[[D], R],
    /,
) -> R:
    """Flipped fold(): fold(on_initial, on_pending, on_failed, on_succeded)(r)."""
    return _fold(on_initial, on_pending, on_failed, on_succeded)(r)


def cata[D, E, R](
    r: Resource[D, E],
    /,
    *,
    initial: Thunk[R] | None = None,
    pending: Thunk[R] | None = None,
    failed: Callable[[E], R] | None = None,
    succeded: Callable[[D], R] | None = None,
) -> R | None:
    """Flipped cata(): cata(**handlers)(r)."""
    return _cata(initial=initial, pending=pending, failed=failed, succeded=succeded)(r)


def tap[D, E](
    r: Resource[D, E],
    /,
    *,
    initial: Thunk[object] | None = None,
    pending: Thunk[object] | None = None,
    failed: Callable[[E], object] | None = None,
    succeded: Callable[[D], object] | None = None,
) -> Resource[D, E]:
    """Flipped tap(): tap(**handlers)(r)."""
    return _tap(initial=initial, pending=pending, failed=failed, succeded=succeded)(r)


def get_or_else[D, E](r: Resource[D, E], f: Thunk[D], /) -> D:
    """Flipped get_or_else(): get_or_else(f)(r)."""
    return _get_or_else(f)(r)


__all__ = (
    # Constructors and constants
    "initial",
    "pending",
    "failed",
    "succeded",
    "succeeded",
    "of",
    "from_nullable",
    "from_option",
    "from_result",
    "catching",
    # Guards
    "is_",
    # Functor
    "map",
    "map_error",
    "bimap",
    # Applicative
    "ap",
    "concat",
    "concat3",
    "concat4",
    # Monad / alternative / recovery
    "chain",
    "alt",
    "recover",
    # Elimination
    "fold",
    "cata",
    "tap",
    "get_or_else",
    "to_nullable",
    "to_undefined",
    "to_option",
    "unsafe",
    # Equality
    "eq",
)
