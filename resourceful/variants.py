"""
Resource variants
=================

Four-state value describing the lifecycle of asynchronously produced data:

- Initial   - operation not started yet
- Pending   - operation in flight
- Failed    - finished with an error
- Succeded  - finished with a value

Variants are frozen and slotted, so combinators never mutate them.
Use pattern matching to inspect a Resource:

    match r:
        case Succeded(value): ...
        case Failed(error): ...
        case Pending(): ...
        case Initial(): ...
"""

from __future__ import annotations

import typing
from dataclasses import dataclass
from typing import Literal

type Tag = Literal["initial", "pending", "failed", "succeded"]

TAGS: tuple[Tag, ...] = ("initial", "pending", "failed", "succeded")


@dataclass(frozen=True, slots=True)
class Initial:
    """Operation not yet started. Carries no payload."""

    tag: typing.ClassVar[Tag] = "initial"

    def __repr__(self) -> str:
        return "Initial()"


@dataclass(frozen=True, slots=True)
class Pending:
    """Operation in flight. Carries no payload."""

    tag: typing.ClassVar[Tag] = "pending"

    def __repr__(self) -> str:
        return "Pending()"


@dataclass(frozen=True, slots=True)
class Failed[E]:
    """Operation completed with an error."""

    error: E
    tag: typing.ClassVar[Tag] = "failed"

    def __repr__(self) -> str:
        return f"Failed({self.error!r})"


@dataclass(frozen=True, slots=True)
class Succeded[D]:
    """Operation completed with a value."""

    value: D
    tag: typing.ClassVar[Tag] = "succeded"

    def __repr__(self) -> str:
        return f"Succeded({self.value!r})"


type Resource[D, E] = Initial | Pending | Failed[E] | Succeded[D]

type AnyResource = Resource[typing.Any, typing.Any]

# Shared instances for the payload-less states
initial: Resource[typing.Never, typing.Never] = Initial()
pending: Resource[typing.Never, typing.Never] = Pending()


__all__ = (
    "Tag",
    "TAGS",
    "Initial",
    "Pending",
    "Failed",
    "Succeded",
    "Resource",
    "AnyResource",
    "initial",
    "pending",
)
