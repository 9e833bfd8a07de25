"""Transition runner: drive a machine with handlers until it settles.

Responsibilities:
  - Build a fresh Machine per run and invoke the handler for each distinct
    state entered, starting with the initial state.
  - Stop when two consecutive polls of the machine report the same state.
  - Normalize every runtime failure into TransitionError.

Inputs/Outputs:
  - Inputs: handler spec, StateTable, RunnerConfig; per run the initial data,
    an optional initial state and an opaque context.
  - Outputs: the last handler's result, or TransitionError.

Invariants:
  - Handler i+1 is never invoked before handler i's outcome is available.
  - "Handler did not step" and "handler stepped back to the same state" both
    end the run.
  - Both strategies produce identical results and errors.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Optional

from ..domain.errors import MissingMachine, TransitionError
from ..domain.table import StateTable, validate_table
from .config import CHAINED, RunnerConfig
from .handlers import HandlerSpec, as_handler_spec
from .machine import Machine, create_machine
from .result import check_outcome, diagnostics_of, message_of

logger = logging.getLogger(__name__)

_UNSEEN = object()


def normalize_error(err: BaseException, state: Optional[str]) -> TransitionError:
    return TransitionError(message_of(err), state, diagnostics_of(err))


class TransitionRunner:
    def __init__(self, spec: HandlerSpec, table: StateTable, config: RunnerConfig) -> None:
        self._spec = spec
        self._table = table
        self._config = config

    @property
    def config(self) -> RunnerConfig:
        return self._config

    async def __call__(
        self,
        initial_data: Any = None,
        initial_state: Optional[str] = None,
        context: Any = None,
    ) -> Any:
        requested_state = initial_state or self._config.default_initial_state
        machine: Optional[Machine] = None
        try:
            machine = create_machine(self._table, requested_state)
            if self._config.strategy == CHAINED:
                result = await self._run_chained(machine, initial_data, context)
            else:
                result = await self._run_sequential(machine, initial_data, context)
        except Exception as err:
            state = machine() if machine is not None else requested_state
            logger.debug("run failed at state=%s: %s: %s", state, type(err).__name__, err)
            raise normalize_error(err, state) from err
        logger.debug("run settled at state=%s", machine())
        return result

    async def _run_sequential(self, machine: Machine, result: Any, context: Any) -> Any:
        last_seen: Any = _UNSEEN
        while True:
            state = machine()
            if state == last_seen:
                return result
            last_seen = state
            logger.debug("entering state=%s", state)
            outcome = self._spec.resolve(state)(result, machine, context)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            result = check_outcome(outcome)

    def _run_chained(self, machine: Machine, initial_data: Any, context: Any) -> asyncio.Future:
        loop = asyncio.get_running_loop()
        settled: asyncio.Future = loop.create_future()
        last_seen: Any = _UNSEEN
        in_flight: Optional[asyncio.Future] = None

        def fail(err: BaseException) -> None:
            if isinstance(err, asyncio.CancelledError):
                settled.cancel()
                return
            if isinstance(err, StopIteration):
                # futures reject StopIteration
                err = RuntimeError("coroutine raised StopIteration")
            settled.set_exception(err)
            if isinstance(err, (KeyboardInterrupt, SystemExit)):
                raise err

        def advance(result: Any) -> None:
            nonlocal last_seen, in_flight
            if settled.done():
                return
            try:
                state = machine()
                if state == last_seen:
                    settled.set_result(result)
                    return
                last_seen = state
                logger.debug("entering state=%s", state)
                outcome = self._spec.resolve(state)(result, machine, context)
                if inspect.isawaitable(outcome):
                    in_flight = asyncio.ensure_future(outcome)
                    in_flight.add_done_callback(resume)
                else:
                    loop.call_soon(advance, check_outcome(outcome))
            except BaseException as err:
                fail(err)

        def resume(pending: asyncio.Future) -> None:
            if settled.done():
                return
            if pending.cancelled():
                settled.cancel()
                return
            err = pending.exception()
            if err is not None:
                fail(err)
                return
            try:
                value = check_outcome(pending.result())
            except BaseException as failure:
                fail(failure)
                return
            advance(value)

        def on_settled(fut: asyncio.Future) -> None:
            if fut.cancelled() and in_flight is not None and not in_flight.done():
                in_flight.cancel()

        settled.add_done_callback(on_settled)
        loop.call_soon(advance, initial_data)
        return settled


def create_transition_runner(
    handler: Any,
    table: Optional[StateTable],
    config: Optional[RunnerConfig] = None,
) -> TransitionRunner:
    if table is None:
        raise MissingMachine("A state table is required but was not provided")
    spec = as_handler_spec(handler)
    validate_table(table)
    return TransitionRunner(spec, table, config or RunnerConfig())


__all__ = ["TransitionRunner", "create_transition_runner", "normalize_error"]
