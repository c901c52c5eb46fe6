"""Shared fixtures."""

from __future__ import annotations

import pytest

from helpers import States, make_states


@pytest.fixture
def states() -> States:
    return make_states(42, ValueError("oops"))
