"""Structural equality across Resource states."""

from __future__ import annotations

from .variants import AnyResource, Failed, Initial, Pending, Succeded


def eq(a: AnyResource, b: AnyResource, /) -> bool:
    """
    True when both resources are in the same state with equal payloads.

    Payloads are compared with ==. Different states are never equal,
    and neither are equal states holding different payloads.

    Example:
        eq(succeded(1), succeded(1))  # True
        eq(initial, pending)          # False
    """
    match a, b:
        case Initial(), Initial():
            return True
        case Pending(), Pending():
            return True
        case Failed(e1), Failed(e2):
            return bool(e1 == e2)
        case Succeded(v1), Succeded(v2):
            return bool(v1 == v2)
        case _:
            return False


__all__ = ("eq",)
