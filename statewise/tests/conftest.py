from __future__ import annotations

import pytest


@pytest.fixture
def auth_table() -> dict[str, dict[str, str]]:
    return {
        "initial": {"ATTEMPT_LOGIN": "inProgress"},
        "inProgress": {
            "LOGIN_ERROR": "error",
            "LOGOUT_ERROR": "error",
            "LOGIN_SUCCESSFUL": "loggedIn",
            "LOGOUT_SUCCESSFUL": "loggedOut",
        },
        "loggedIn": {"ATTEMPT_LOGOUT": "inProgress"},
        "loggedOut": {"ATTEMPT_LOGIN": "inProgress"},
        "error": {"ATTEMPT_LOGIN": "inProgress", "CLEAR_ERROR": "loggedOut"},
    }


@pytest.fixture
def terms_table() -> dict[str, dict[str, str]]:
    return {
        "initial": {"AGREE_TO_TERMS": "agreed", "REJECTED_TERMS": "rejected"},
        "agreed": {},
        "rejected": {},
    }
