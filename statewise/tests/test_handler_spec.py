"""Tests for handler specification normalization."""

from __future__ import annotations

import pytest

from statewise.core.domain.errors import InvalidHandler, MissingHandler, UnhandledState
from statewise.core.engine.handlers import PerStateHandler, SingleHandler, as_handler_spec


def _noop(result, machine, context):
    return result


def test_callable_becomes_single_handler() -> None:
    spec = as_handler_spec(_noop)

    assert spec == SingleHandler(_noop)
    assert spec.resolve("anything") is _noop


def test_mapping_becomes_per_state_handler() -> None:
    handlers = {"initial": _noop}
    spec = as_handler_spec(handlers)

    assert isinstance(spec, PerStateHandler)
    assert spec.resolve("initial") is _noop

    handlers["later"] = _noop
    with pytest.raises(UnhandledState) as excinfo:
        spec.resolve("later")
    assert excinfo.value.state == "later"
    assert "later" in str(excinfo.value)


def test_existing_spec_is_returned_as_is() -> None:
    spec = SingleHandler(_noop)

    assert as_handler_spec(spec) is spec


def test_missing_handler() -> None:
    with pytest.raises(MissingHandler):
        as_handler_spec(None)


@pytest.mark.parametrize("handler", ["handler", 3, [_noop]])
def test_unsupported_handler_shape(handler) -> None:
    with pytest.raises(InvalidHandler):
        as_handler_spec(handler)


def test_mapping_entries_are_checked_when_visited() -> None:
    spec = as_handler_spec({"initial": _noop, "error": "not callable", "done": None})

    assert spec.resolve("initial") is _noop
    for state in ("error", "done"):
        with pytest.raises(UnhandledState) as excinfo:
            spec.resolve(state)
        assert excinfo.value.state == state


def test_empty_mapping_is_accepted_but_handles_nothing() -> None:
    spec = as_handler_spec({})

    assert isinstance(spec, PerStateHandler)
    with pytest.raises(UnhandledState):
        spec.resolve("initial")
