"""
Shared pytest fixtures.

The only I/O in this project is urllib.request.urlopen, so the `upstream`
fixture replaces it with a scripted fake and records every request made.
"""

import json
import urllib.error
import urllib.request
from typing import Any, List

import pytest


class FakeResponse:
    """Minimal stand-in for the object urlopen returns."""

    def __init__(self, body: bytes):
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeUpstream:
    """Scripted replacement for urlopen.

    Queue a JSON payload with `reply()`, a raw body with `reply_raw()`, or an
    exception with `fail()`.  The last queued outcome is reused when the
    queue runs dry, so one `reply()` serves repeated calls.
    """

    def __init__(self):
        self.requests: List[urllib.request.Request] = []
        self._outcomes: List[Any] = []

    def reply(self, payload: Any) -> "FakeUpstream":
        return self.reply_raw(json.dumps(payload).encode("utf-8"))

    def reply_raw(self, body: bytes) -> "FakeUpstream":
        self._outcomes.append(body)
        return self

    def fail(self, exc: BaseException) -> "FakeUpstream":
        self._outcomes.append(exc)
        return self

    def fail_status(self, status: int, reason: str = "Error") -> "FakeUpstream":
        return self.fail(urllib.error.HTTPError("http://upstream", status, reason, None, None))

    @property
    def last_url(self) -> str:
        return self.requests[-1].full_url

    def __call__(self, req, *args, **kwargs):
        self.requests.append(req)
        if not self._outcomes:
            raise AssertionError(f"Unexpected upstream request: {req.full_url}")
        outcome = self._outcomes.pop(0) if len(self._outcomes) > 1 else self._outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return FakeResponse(outcome)


@pytest.fixture
def upstream(monkeypatch) -> FakeUpstream:
    """Patch urlopen; any request made without a scripted outcome fails the test."""
    fake = FakeUpstream()
    monkeypatch.setattr(urllib.request, "urlopen", fake)
    return fake


@pytest.fixture
def seoul_search_result():
    return [{"lat": "37.5665", "lon": "126.9780", "display_name": "Seoul"}]


@pytest.fixture
def clear_sky_forecast():
    return {
        "latitude": 37.5665,
        "longitude": 126.978,
        "current": {
            "time": "2026-10-19T09:00",
            "temperature_2m": 21.3,
            "weather_code": 0,
            "relative_humidity_2m": 45,
            "wind_speed_10m": 7.2,
        },
    }
