"""
Type guards for Resource.

Exposed as the `is_` namespace (`is` is a keyword):

    from resourceful import is_

    if is_.succeded(r):
        use(r.value)

Exactly one guard holds for any Resource.
"""

from __future__ import annotations

import typing
from typing import TypeGuard

from .variants import AnyResource, Failed, Initial, Pending, Succeded


def initial(r: AnyResource) -> TypeGuard[Initial]:
    """True if resource is Initial."""
    return r.tag == "initial"


def pending(r: AnyResource) -> TypeGuard[Pending]:
    """True if resource is Pending."""
    return r.tag == "pending"


def failed(r: AnyResource) -> TypeGuard[Failed[typing.Any]]:
    """True if resource is Failed."""
    return r.tag == "failed"


def succeded(r: AnyResource) -> TypeGuard[Succeded[typing.Any]]:
    """True if resource is Succeded."""
    return r.tag == "succeded"


# Correctly spelled alias
succeeded = succeded


__all__ = (
    "initial",
    "pending",
    "failed",
    "succeded",
    "succeeded",
)
