"""State-transition tables: structural validation and starting state.

Responsibilities:
  - Reject tables that are not mappings of mappings.
  - Reject transitions whose target is not a declared state.
  - Resolve the starting state (explicit, or the first declared key).

Inputs/Outputs:
  - Inputs: a StateTable, i.e. state name -> {transition name -> target state}.
  - Outputs: None on success; typed errors from .errors on failure.

Invariants:
  - Never mutates the table.
  - Declaration order of the table is significant for the default state.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .errors import InvalidInitialState, InvalidTableKind, UnreachableTargetState

TransitionMap = Mapping[str, str]
StateTable = Mapping[str, TransitionMap]


def _is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def _is_state_name(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def validate_table(table: Any) -> None:
    if not _is_mapping(table):
        raise InvalidTableKind(
            "A state table must be a mapping",
            {"table_type": type(table).__name__},
        )

    for state, transitions in table.items():
        if not _is_state_name(state):
            raise InvalidTableKind(
                f"State names must be non-empty strings, got {state!r}",
                {"source_state": state},
            )
        if not _is_mapping(transitions):
            raise InvalidTableKind(
                f"A state table must be a mapping of (only) mappings; '{state}' is {type(transitions).__name__}",
                {"source_state": state},
            )

    for state, transitions in table.items():
        for transition, target in transitions.items():
            if not (isinstance(target, str) and target in table):
                raise UnreachableTargetState(
                    "All the registered transitions (for each possible state) must lead to another "
                    f"state in the table: '{state}' --{transition}--> {target!r}",
                    {"source_state": state, "transition": transition, "target_state": target},
                )


def first_state(table: StateTable) -> Optional[str]:
    for state in table:
        return state
    return None


def resolve_initial_state(table: StateTable, initial_state: Optional[str] = None) -> str:
    state = first_state(table) if initial_state is None else initial_state
    if not (_is_state_name(state) and state in table):
        raise InvalidInitialState(
            f"The initial state must be one of the states in the table, got {state!r}",
            {"initial_state": state},
        )
    return state


__all__ = [
    "StateTable",
    "TransitionMap",
    "first_state",
    "resolve_initial_state",
    "validate_table",
]
