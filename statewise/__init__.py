"""In-memory finite-state machines driven by declarative transition tables."""

from __future__ import annotations

from .core.domain.errors import (
    HandlerFailure,
    InvalidHandler,
    InvalidInitialState,
    InvalidTableKind,
    MissingHandler,
    MissingMachine,
    NormalizedError,
    StateMachineError,
    TransitionError,
    UnhandledState,
    UnreachableTargetState,
)
from .core.domain.table import StateTable, first_state, resolve_initial_state, validate_table
from .core.domain.transition_graph import registered_transitions, resolve_next
from .core.engine.config import CHAINED, SEQUENTIAL, RunnerConfig
from .core.engine.handlers import PerStateHandler, SingleHandler, as_handler_spec
from .core.engine.machine import Machine, create_machine
from .core.engine.result import Failure, Success, check_outcome, is_error_like
from .core.engine.runner import TransitionRunner, create_transition_runner, normalize_error

__all__ = [
    "CHAINED",
    "Failure",
    "HandlerFailure",
    "InvalidHandler",
    "InvalidInitialState",
    "InvalidTableKind",
    "Machine",
    "MissingHandler",
    "MissingMachine",
    "NormalizedError",
    "PerStateHandler",
    "RunnerConfig",
    "SEQUENTIAL",
    "SingleHandler",
    "StateMachineError",
    "StateTable",
    "Success",
    "TransitionError",
    "TransitionRunner",
    "UnhandledState",
    "UnreachableTargetState",
    "as_handler_spec",
    "check_outcome",
    "create_machine",
    "create_transition_runner",
    "first_state",
    "is_error_like",
    "normalize_error",
    "registered_transitions",
    "resolve_initial_state",
    "resolve_next",
    "validate_table",
]
