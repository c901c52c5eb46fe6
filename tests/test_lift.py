from __future__ import annotations

import json
import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st
from kungfu import Error, Nothing, Ok, Some

from resourceful import (
    UnwrapError,
    catching,
    chain,
    failed,
    from_nullable,
    from_option,
    from_result,
    get_or_else,
    initial,
    lift as L,
    map,
    pending,
    succeded,
    to_nullable,
    to_option,
    to_undefined,
    unsafe,
)


class TestUp:
    def test_from_nullable_none_is_initial(self):
        assert from_nullable(None) is initial

    def test_from_nullable_value_is_succeded(self):
        assert from_nullable(5) == succeded(5)

    @pytest.mark.parametrize("falsy", [0, "", False, []])
    def test_from_nullable_falsy_values_are_present(self, falsy):
        assert from_nullable(falsy) == succeded(falsy)

    def test_from_option(self):
        assert from_option(Some(3)) == succeded(3)
        assert from_option(Nothing()) is initial

    def test_from_result(self):
        assert from_result(Ok(1)) == succeded(1)
        assert from_result(Error("bad")) == failed("bad")

    def test_catching_value(self):
        assert catching(lambda: json.loads("[1, 2]")) == succeded([1, 2])

    def test_catching_exception_becomes_failed(self):
        r = catching(lambda: json.loads("{"))
        assert isinstance(r.error, json.JSONDecodeError)

    def test_catching_on_error(self):
        r = catching(lambda: int("x"), on_error=lambda e: type(e).__name__)
        assert r == failed("ValueError")

    def test_catching_failure_flows_past_map_and_chain(self):
        env: dict[str, str] = {}
        port = catching(lambda: int(env["PORT"]), on_error=lambda e: f"bad PORT: {e!r}")
        assert port == failed("bad PORT: KeyError('PORT')")
        assert map(lambda n: n + 1)(port) is port
        assert chain(lambda n: succeded(n))(port) is port

    def test_catching_does_not_swallow_base_exceptions(self):
        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            catching(interrupt)

    def test_catching_logs(self, caplog):
        caplog.set_level(logging.DEBUG, logger="resourceful")
        catching(lambda: 1 / 0)
        assert "ZeroDivisionError converted to Failed" in caplog.text

    def test_namespace(self):
        assert L.up.succeded(1) == succeded(1)
        assert L.up.of(1) == succeded(1)
        assert L.up.failed("e") == failed("e")
        assert L.up.initial is initial
        assert L.up.pending is pending


class TestDown:
    def test_to_nullable(self, states):
        assert to_nullable(states.succeded) == states.value
        assert to_nullable(states.initial) is None
        assert to_nullable(states.pending) is None
        assert to_nullable(states.failed) is None

    def test_to_undefined_matches_to_nullable(self, states):
        for r in states.all():
            assert to_undefined(r) == to_nullable(r)

    def test_to_option(self, states):
        match to_option(states.succeded):
            case Some(value):
                assert value == states.value
            case _:
                pytest.fail("expected Some")
        for r in (states.initial, states.pending, states.failed):
            assert not isinstance(to_option(r), Some)

    @given(st.integers())
    def test_option_round_trip_of_succeded(self, n):
        assert from_option(to_option(succeded(n))) == succeded(n)

    def test_option_round_trip_of_initial(self):
        assert from_option(to_option(initial)) is initial

    def test_get_or_else(self, states):
        fallback = get_or_else(lambda: 0)
        assert fallback(states.succeded) == states.value
        for r in (states.initial, states.pending, states.failed):
            assert fallback(r) == 0

    def test_get_or_else_is_lazy(self):
        calls = []

        def default():
            calls.append(1)
            return 0

        get_or_else(default)(succeded(1))
        assert calls == []

    def test_unsafe(self):
        assert unsafe(succeded(1)) == 1

    @pytest.mark.parametrize("r", [initial, pending, failed("e")], ids=["initial", "pending", "failed"])
    def test_unsafe_raises(self, r):
        with pytest.raises(UnwrapError) as exc:
            unsafe(r)
        assert exc.value.resource is r
        assert exc.value.tag == r.tag

    def test_namespace(self):
        assert L.down.to_nullable(succeded(1)) == 1
        assert L.down.unsafe(succeded(1)) == 1
