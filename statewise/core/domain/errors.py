"""Error taxonomy for tables, machines and runners.

Responsibilities:
  - Define one exception class per failure kind.
  - Carry a diagnostics mapping (`data`) that runners merge into TransitionError.

Invariants:
  - Every engine error derives from StateMachineError.
  - TransitionError.data always holds the failing state under "state".
"""

from __future__ import annotations

from typing import Any, Mapping, Optional


class StateMachineError(Exception):
    def __init__(self, message: str, data: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.data: dict[str, Any] = dict(data or {})


class InvalidTableKind(StateMachineError, TypeError):
    pass


class UnreachableTargetState(StateMachineError, ValueError):
    pass


class InvalidInitialState(StateMachineError, ValueError):
    pass


class MissingMachine(StateMachineError, TypeError):
    pass


class MissingHandler(StateMachineError, TypeError):
    pass


class InvalidHandler(StateMachineError, TypeError):
    pass


class UnhandledState(StateMachineError, LookupError):
    def __init__(self, state: object) -> None:
        super().__init__(
            f"No handler was defined for the current state of '{state}'",
            {"unhandled_state": state},
        )
        self.state = state


class HandlerFailure(StateMachineError):
    """Raised for a failure a handler returned instead of raising."""


class TransitionError(StateMachineError):
    """Runtime failure surfaced by a transition runner.

    `state` is whatever the machine reported when the failure surfaced.
    `data` merges the original failure's diagnostics; its "state" key is
    always the failing state, never a merged value.
    """

    def __init__(
        self,
        message: str,
        state: Optional[str],
        data: Optional[Mapping[str, Any]] = None,
    ) -> None:
        merged = dict(data or {})
        merged["state"] = state
        super().__init__(message, merged)
        self.state = state


NormalizedError = TransitionError

__all__ = [
    "HandlerFailure",
    "InvalidHandler",
    "InvalidInitialState",
    "InvalidTableKind",
    "MissingHandler",
    "MissingMachine",
    "NormalizedError",
    "StateMachineError",
    "TransitionError",
    "UnhandledState",
    "UnreachableTargetState",
]
