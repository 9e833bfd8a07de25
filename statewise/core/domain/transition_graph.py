"""Transition lookup over a validated state table.

Responsibilities:
  - Compute the next state for a (current state, transition name) pair.
  - Expose the transitions registered under a state.

Invariants:
  - Pure and total: unknown states and unregistered transitions are no-ops,
    never errors.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .table import StateTable


def resolve_next(
    current_state: str,
    transition_name: Optional[str],
    table: Optional[StateTable] = None,
) -> str:
    if not table or transition_name is None:
        return current_state
    try:
        registered = table.get(current_state)
    except TypeError:
        # unhashable state
        return current_state
    if not isinstance(registered, Mapping):
        return current_state
    try:
        target: Any = registered.get(transition_name)
    except TypeError:
        return current_state
    return target or current_state


def registered_transitions(state: str, table: StateTable) -> dict[str, str]:
    registered = table.get(state) if isinstance(state, str) else None
    if not isinstance(registered, Mapping):
        return {}
    return dict(registered)


__all__ = ["registered_transitions", "resolve_next"]
