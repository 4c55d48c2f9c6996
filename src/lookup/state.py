"""Presentation state for the lookup screen.

A single immutable ``LookupState`` value is owned by the presentation layer
and replaced through the transition functions below:

    Idle --begin--> Loading --succeed--> Idle (results)
                            --fail-----> Idle (error)

``select`` and ``dismiss`` open and close the detail view of one result.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Optional

from lookup.models import SearchResult


class Phase(enum.Enum):
    IDLE = "idle"
    LOADING = "loading"


@dataclass(frozen=True)
class LookupState:
    phase: Phase = Phase.IDLE
    query: str = ""
    results: tuple[SearchResult, ...] = ()
    error: Optional[str] = None
    selected_id: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.phase is Phase.LOADING

    @property
    def selected(self) -> Optional[SearchResult]:
        if self.selected_id is None:
            return None
        for result in self.results:
            if result.id == self.selected_id:
                return result
        return None


def begin(state: LookupState, query: str) -> LookupState:
    """Enter Loading; the previous results are cleared before the fetch."""
    return replace(
        state,
        phase=Phase.LOADING,
        query=query,
        results=(),
        error=None,
        selected_id=None,
    )


def succeed(state: LookupState, results: list[SearchResult]) -> LookupState:
    return replace(state, phase=Phase.IDLE, results=tuple(results), error=None)


def fail(state: LookupState, message: str) -> LookupState:
    return replace(state, phase=Phase.IDLE, results=(), error=message)


def select(state: LookupState, result_id: str) -> LookupState:
    if not any(r.id == result_id for r in state.results):
        raise KeyError(result_id)
    return replace(state, selected_id=result_id)


def dismiss(state: LookupState) -> LookupState:
    return replace(state, selected_id=None)
