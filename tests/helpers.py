"""Test helpers: hypothesis strategies and per-state fixtures."""

from __future__ import annotations

from dataclasses import dataclass

from hypothesis import strategies as st

from resourceful import AnyResource, failed, initial, pending, succeded


@dataclass(frozen=True)
class States:
    """One resource per state, sharing a value and an error."""

    value: object
    error: object
    initial: AnyResource
    pending: AnyResource
    failed: AnyResource
    succeded: AnyResource

    def all(self) -> list[AnyResource]:
        return [self.initial, self.pending, self.failed, self.succeded]


def make_states(value: object, error: object) -> States:
    return States(
        value=value,
        error=error,
        initial=initial,
        pending=pending,
        failed=failed(error),
        succeded=succeded(value),
    )


def resources(
    values: st.SearchStrategy = st.integers(),
    errors: st.SearchStrategy = st.text(max_size=10),
) -> st.SearchStrategy:
    """Any of the four states, payloads drawn from values / errors."""
    return st.one_of(
        st.just(initial),
        st.just(pending),
        errors.map(failed),
        values.map(succeded),
    )


# Functions int -> Resource[int, str], one per outcome
resource_fns = st.sampled_from(
    [
        lambda n: succeded(n * 2),
        lambda n: succeded(n + 8),
        lambda n: failed(f"rejected {n}"),
        lambda n: pending,
        lambda n: initial,
    ]
)

# Thunks returning a fixed resource
resource_thunks = resources().map(lambda r: lambda: r)
