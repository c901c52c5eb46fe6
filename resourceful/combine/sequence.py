"""Sequence combinator

Collect many resources into one resource holding a list."""

from __future__ import annotations

from collections.abc import Sequence

from ..transform.functor import map
from ..variants import Resource, Succeded
from .apply import ap


def sequence[T](resources: Sequence[Resource[T, object]]) -> Resource[list[T], object]:
    """
    Turn [Resource[T]] into Resource[list[T]].

    Folds ap left to right, so the state precedence is the same as
    for lift2..lift4. An empty sequence gives Succeded([]).

    Example:
        sequence([succeded(1), succeded(2)])  # Succeded([1, 2])
        sequence([succeded(1), pending])      # pending
    """
    acc: Resource[list[T], object] = Succeded([])
    for r in resources:
        acc = ap(r)(map(lambda xs: lambda x: [*xs, x])(acc))
    return acc


__all__ = ("sequence",)
