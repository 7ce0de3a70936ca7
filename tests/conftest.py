"""Shared fixtures: a configured client and canned requests.Response objects."""

import json

import pytest
import requests

from clockify_client import ClockifyClient


@pytest.fixture
def client():
    return ClockifyClient("test-api-key", "ws-1", user_id="user-1")


@pytest.fixture
def make_response():
    def _make(status_code=200, payload=None, raw=None):
        response = requests.Response()
        response.status_code = status_code
        if raw is not None:
            response._content = raw
        elif payload is not None:
            response._content = json.dumps(payload).encode("utf-8")
        else:
            response._content = b""
        response.encoding = "utf-8"
        return response
    return _make


@pytest.fixture(autouse=True)
def clean_clockify_env(monkeypatch):
    for var in ("CLOCKIFY_API_KEY", "CLOCKIFY_WORKSPACE_ID", "CLOCKIFY_USER_ID",
                "CLOCKIFY_DEBUG", "CLOCKIFY_ERROR_LOG"):
        monkeypatch.delenv(var, raising=False)
