"""Handler specifications for transition runners.

A runner accepts either one callable for every state or a mapping from
state name to callable. Both shapes are normalized once, at runner
construction, into SingleHandler or PerStateHandler.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Union

from ..domain.errors import InvalidHandler, MissingHandler, UnhandledState

# handler(result, machine, context) -> value | awaitable
StateHandler = Callable[[Any, Callable[..., str], Any], Any]


@dataclass(frozen=True)
class SingleHandler:
    handler: StateHandler

    def resolve(self, state: str) -> StateHandler:
        return self.handler


@dataclass(frozen=True)
class PerStateHandler:
    handlers: Mapping[str, StateHandler]

    def resolve(self, state: str) -> StateHandler:
        handler = self.handlers.get(state)
        if not callable(handler):
            raise UnhandledState(state)
        return handler


HandlerSpec = Union[SingleHandler, PerStateHandler]


def as_handler_spec(handler: Any) -> HandlerSpec:
    if isinstance(handler, (SingleHandler, PerStateHandler)):
        return handler
    if handler is None:
        raise MissingHandler("A handler is required for the state machine transitions")
    if callable(handler):
        return SingleHandler(handler)
    if isinstance(handler, Mapping):
        # entries are checked per visited state, see PerStateHandler.resolve
        return PerStateHandler(MappingProxyType(dict(handler)))
    raise InvalidHandler(
        "handler must be a callable or a mapping whose keys are state names and whose values are callables",
        {"handler_type": type(handler).__name__},
    )


__all__ = ["HandlerSpec", "PerStateHandler", "SingleHandler", "StateHandler", "as_handler_spec"]
