"""Handler outcomes threaded through a transition run.

Responsibilities:
  - Provide explicit Success/Failure outcomes for handlers.
  - Recognize returned error-like values (type name ending in "Error").
  - Turn a handler outcome into the next run result, or raise HandlerFailure.

Invariants:
  - A plain value that is not error-like passes through unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..domain.errors import HandlerFailure

ERROR_SUFFIX = "Error"


@dataclass(frozen=True)
class Success:
    value: Any = None


@dataclass(frozen=True)
class Failure:
    message: str
    data: Mapping[str, Any] = field(default_factory=dict)


def is_error_like(value: Any) -> bool:
    if value is None:
        return False
    return type(value).__name__.endswith(ERROR_SUFFIX)


def diagnostics_of(value: Any) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for attr in ("data", "extensions"):
        extra = getattr(value, attr, None)
        if isinstance(extra, Mapping):
            merged.update(extra)
    return merged


def message_of(value: Any) -> str:
    message = getattr(value, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(value) or type(value).__name__


def check_outcome(outcome: Any) -> Any:
    if isinstance(outcome, Success):
        return outcome.value
    if isinstance(outcome, Failure):
        raise HandlerFailure(outcome.message, outcome.data)
    if isinstance(outcome, Exception) and is_error_like(outcome):
        raise outcome
    if is_error_like(outcome):
        raise HandlerFailure(message_of(outcome), diagnostics_of(outcome))
    return outcome


__all__ = [
    "ERROR_SUFFIX",
    "Failure",
    "Success",
    "check_outcome",
    "diagnostics_of",
    "is_error_like",
    "message_of",
]
