"""Stateful machine over a state-transition table.

Responsibilities:
  - Validate the table and resolve the starting state.
  - Own the single mutable field `current_state` for one machine.

Inputs/Outputs:
  - Inputs: a StateTable and an optional initial state.
  - Outputs: a callable Machine; `machine()` polls, `machine(name)` steps.

Invariants:
  - current_state is always a key of the machine's table.
  - Machines built from the same table never share state.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..domain.table import StateTable, resolve_initial_state, validate_table
from ..domain.transition_graph import resolve_next

logger = logging.getLogger(__name__)


class Machine:
    __slots__ = ("_table", "current_state")

    def __init__(self, table: StateTable, current_state: str) -> None:
        self._table = table
        self.current_state = current_state

    @property
    def table(self) -> StateTable:
        return self._table

    def __call__(self, transition_name: Optional[str] = None) -> str:
        if transition_name is None:
            return self.current_state
        next_state = resolve_next(self.current_state, transition_name, self._table)
        if next_state != self.current_state:
            logger.debug("transition %s: %s -> %s", transition_name, self.current_state, next_state)
        self.current_state = next_state
        return next_state

    def __repr__(self) -> str:
        return f"Machine(current_state={self.current_state!r})"


def create_machine(table: StateTable, initial_state: Optional[str] = None) -> Machine:
    validate_table(table)
    return Machine(table, resolve_initial_state(table, initial_state))


__all__ = ["Machine", "create_machine"]
