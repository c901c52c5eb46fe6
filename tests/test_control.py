from __future__ import annotations

import logging

import pytest
from hypothesis import given
from kungfu import Nothing, Some

from resourceful import alt, chain, failed, initial, map, pending, recover, succeded

from helpers import resource_fns, resource_thunks, resources


class TestChain:
    @given(resources(), resource_fns, resource_fns)
    def test_associativity_law(self, r, f, g):
        assert chain(f)(chain(g)(r)) == chain(lambda x: chain(f)(g(x)))(r)

    @given(resource_fns)
    def test_left_identity_law(self, f):
        assert chain(f)(succeded(5)) == f(5)

    @given(resources())
    def test_right_identity_law(self, r):
        assert chain(succeded)(r) == r

    def test_chain_over_value(self, states):
        double = lambda n: succeded(n * 2)  # noqa: E731
        assert chain(double)(succeded(50)) == succeded(100)
        assert chain(double)(states.initial) is states.initial
        assert chain(double)(states.pending) is states.pending
        assert chain(double)(states.failed) is states.failed

    def test_can_change_state(self):
        reject = lambda n: failed(f"{n} too small") if n < 10 else succeded(n)  # noqa: E731
        assert chain(reject)(succeded(3)) == failed("3 too small")
        assert chain(reject)(succeded(30)) == succeded(30)


class TestAlt:
    @given(resources(), resource_thunks, resource_thunks)
    def test_associativity_law(self, r, b, c):
        assert alt(c)(alt(b)(r)) == alt(lambda: alt(c)(b()))(r)

    @given(resources(), resource_thunks)
    def test_distributivity_law(self, r, b):
        f = lambda n: n * 2  # noqa: E731
        assert map(f)(alt(b)(r)) == alt(lambda: map(f)(b()))(map(f)(r))

    def test_alt_over_failed(self):
        assert alt(lambda: succeded("b"))(failed(ValueError("e"))) == succeded("b")

    def test_keeps_succeded(self):
        r = succeded("a")
        assert alt(lambda: succeded("b"))(r) is r

    def test_replaces_every_other_state(self, states):
        replacement = succeded(100)
        for r in (states.initial, states.pending, states.failed):
            assert alt(lambda: replacement)(r) is replacement

    def test_alternative_is_lazy(self):
        calls = []

        def other():
            calls.append(1)
            return succeded(0)

        alt(other)(succeded(1))
        assert calls == []
        alt(other)(pending)
        assert calls == [1]

    def test_logs_fallback(self, caplog):
        caplog.set_level(logging.DEBUG, logger="resourceful")
        alt(lambda: succeded(1))(pending)
        assert "pending resource, using alternative" in caplog.text


class TestRecover:
    def test_some_recovers(self):
        assert recover(lambda e: Some(0))(failed(ValueError("e"))) == succeded(0)

    def test_nothing_keeps_failure(self):
        r = failed(ValueError("e"))
        assert recover(lambda e: Nothing())(r) is r

    def test_falsy_recovery_is_still_a_recovery(self):
        assert recover(lambda e: Some(None))(failed("e")) == succeded(None)
        assert recover(lambda e: Some(False))(failed("e")) == succeded(False)

    def test_handler_receives_error(self):
        seen = []

        def handler(e):
            seen.append(e)
            return Nothing()

        error = KeyError("missing")
        recover(handler)(failed(error))
        assert seen == [error]

    @pytest.mark.parametrize("r", [initial, pending, succeded(1)], ids=["initial", "pending", "succeded"])
    def test_other_states_pass_through(self, r):
        calls = []

        def handler(e):
            calls.append(e)
            return Some(0)

        assert recover(handler)(r) is r
        assert calls == []

    def test_selective_recovery(self):
        only_missing = lambda e: Some([]) if isinstance(e, KeyError) else Nothing()  # noqa: E731
        assert recover(only_missing)(failed(KeyError("k"))) == succeded([])
        timeout = failed(TimeoutError())
        assert recover(only_missing)(timeout) is timeout

    def test_logs_recovery(self, caplog):
        caplog.set_level(logging.DEBUG, logger="resourceful")
        recover(lambda e: Some(0))(failed("e"))
        assert "failed resource recovered" in caplog.text

    def test_handler_exceptions_propagate(self):
        def handler(e):
            raise RuntimeError("handler broke")

        with pytest.raises(RuntimeError, match="handler broke"):
            recover(handler)(failed("e"))
