"""Tests for handler outcome checks."""

from __future__ import annotations

import pytest

from statewise.core.domain.errors import HandlerFailure
from statewise.core.engine.result import Failure, Success, check_outcome, diagnostics_of, is_error_like, message_of


class ValidationError:
    def __init__(self, message: str) -> None:
        self.message = message
        self.extensions = {"code": "BAD_INPUT"}


class LookupFailed(Exception):
    pass


def test_plain_values_pass_through() -> None:
    for value in (None, 0, "", "Error", {"error": True}, [1, 2], LookupFailed("x")):
        assert check_outcome(value) is value


def test_success_is_unwrapped() -> None:
    assert check_outcome(Success({"user": "ann"})) == {"user": "ann"}
    assert check_outcome(Success()) is None


def test_failure_raises_with_data() -> None:
    with pytest.raises(HandlerFailure) as excinfo:
        check_outcome(Failure("declined", {"reason": "limit"}))

    assert excinfo.value.message == "declined"
    assert excinfo.value.data == {"reason": "limit"}


def test_returned_exception_is_raised() -> None:
    err = KeyError("token")

    with pytest.raises(KeyError) as excinfo:
        check_outcome(err)
    assert excinfo.value is err


def test_returned_error_like_value_raises() -> None:
    with pytest.raises(HandlerFailure) as excinfo:
        check_outcome(ValidationError("bad password"))

    assert excinfo.value.message == "bad password"
    assert excinfo.value.data == {"code": "BAD_INPUT"}


def test_returned_base_exception_error_becomes_handler_failure() -> None:
    class AbortError(BaseException):
        pass

    with pytest.raises(HandlerFailure) as excinfo:
        check_outcome(AbortError("returned abort"))

    assert excinfo.value.message == "returned abort"


def test_is_error_like() -> None:
    assert is_error_like(ValueError())
    assert is_error_like(ValidationError("x"))
    assert not is_error_like(LookupFailed())
    assert not is_error_like(None)
    assert not is_error_like("ValueError")


def test_diagnostics_merge_extensions_over_data() -> None:
    class Err(Exception):
        data = {"a": 1, "b": 1}
        extensions = {"b": 2}

    assert diagnostics_of(Err()) == {"a": 1, "b": 2}
    assert diagnostics_of(ValueError("x")) == {}


def test_diagnostics_ignore_non_mapping_fields() -> None:
    class Err(Exception):
        data = "not a mapping"
        extensions = ["nope"]

    assert diagnostics_of(Err()) == {}


def test_message_of() -> None:
    assert message_of(ValueError("boom")) == "boom"
    assert message_of(RuntimeError()) == "RuntimeError"
    assert message_of(ValidationError("bad")) == "bad"
