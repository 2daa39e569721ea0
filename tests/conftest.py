"""
Global pytest fixtures for the pipeline_auth test suite.

Responsibilities:
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
    - Provide a validator that accepts a fixed set of users and records its calls
    - Provide a factory for RequestContext objects built from raw headers, so
      hooks can be unit tested without a running app

LLM Prompt Example:
    "Show how to structure pytest fixtures so request hooks can be tested
    both in isolation and through a real FastAPI app."
"""

import base64
from typing import Dict, List, Tuple

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from main import create_app
from pipeline_auth.authentication import BasicAuthenticationConfiguration, UserValidator
from pipeline_auth.pipelines import RequestContext

REALM = "test-realm"


class RecordingValidator(UserValidator):
    """Accepts the given users and remembers every (username, password) it was asked about."""

    def __init__(self, users: Dict[str, str]):
        self.users = dict(users)
        self.calls: List[Tuple[str, str]] = []

    def validate(self, username: str, password: str) -> bool:
        self.calls.append((username, password))
        return self.users.get(username) == password


def basic_header(user_pass: str) -> str:
    """Build an Authorization header value for the given 'user:pass' text."""
    return "Basic " + base64.b64encode(user_pass.encode("utf-8")).decode("ascii")


@pytest.fixture
def validator() -> RecordingValidator:
    return RecordingValidator({"alice": "secret", "bob": "hunter2"})


@pytest.fixture
def configuration(validator) -> BasicAuthenticationConfiguration:
    return BasicAuthenticationConfiguration(user_validator=validator, realm=REALM)


@pytest.fixture
def make_context():
    """
    Return a factory building a RequestContext from (name, value) header pairs.

    Header values are encoded as latin-1, like an ASGI server would.
    """

    def _make(*headers: Tuple[str, str]) -> RequestContext:
        raw = [(name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in headers]
        scope = {
            "type": "http",
            "method": "GET",
            "path": "/",
            "query_string": b"",
            "headers": raw,
        }
        return RequestContext(request=Request(scope))

    return _make


@pytest.fixture
def client(validator) -> TestClient:
    """
    Provide a fresh TestClient with a new app instance wired to the recording validator.

    Notes:
        - Uses the app factory to ensure clean, isolated state per test invocation.
    """
    app = create_app(user_validator=validator, realm=REALM)
    return TestClient(app)
