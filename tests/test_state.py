"""Tests for presentation state transitions."""

import dataclasses

import pytest

from lookup.models import SearchResult
from lookup.state import LookupState, Phase, begin, dismiss, fail, select, succeed


def _results(n=2):
    return [SearchResult(title=f"Paper {i}", url=f"U{i}", summary=f"A{i}") for i in range(n)]


class TestTransitions:
    def test_initial_state_is_idle(self):
        state = LookupState()
        assert state.phase is Phase.IDLE
        assert not state.is_loading
        assert state.results == ()
        assert state.error is None
        assert state.selected is None

    def test_begin_clears_previous_results(self):
        state = succeed(begin(LookupState(), "first"), _results())
        state = select(state, state.results[0].id)

        state = begin(state, "second")

        assert state.is_loading
        assert state.query == "second"
        assert state.results == ()
        assert state.selected_id is None

    def test_begin_clears_previous_error(self):
        state = fail(begin(LookupState(), "q"), "boom")
        assert begin(state, "q").error is None

    def test_succeed(self):
        results = _results(3)
        state = succeed(begin(LookupState(), "q"), results)
        assert state.phase is Phase.IDLE
        assert list(state.results) == results

    def test_fail(self):
        state = fail(begin(LookupState(), "q"), "Could not parse response.")
        assert state.phase is Phase.IDLE
        assert state.results == ()
        assert state.error == "Could not parse response."

    def test_states_are_immutable(self):
        state = LookupState()
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.phase = Phase.LOADING
        begin(state, "q")
        assert state.phase is Phase.IDLE


class TestSelection:
    def test_select_and_dismiss(self):
        state = succeed(begin(LookupState(), "q"), _results())
        target = state.results[1]

        state = select(state, target.id)
        assert state.selected is target

        state = dismiss(state)
        assert state.selected is None
        assert len(state.results) == 2

    def test_select_unknown_id(self):
        state = succeed(begin(LookupState(), "q"), _results())
        with pytest.raises(KeyError):
            select(state, "does-not-exist")
