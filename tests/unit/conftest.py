"""
Unit test configuration.

Shared fixtures: a scripted in-memory transport that records every request,
a `requests.Response` builder, and an isolated config directory so tests
never read or write the user's real ~/.config/gapihub.
"""

import json
from typing import List, Optional

import pytest
import requests
from requests.structures import CaseInsensitiveDict


def build_response(status: int = 200, body=None, headers: Optional[dict] = None,
                  reason: str = "") -> requests.Response:
    """Build a `requests.Response` without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason or {200: "OK", 400: "Bad Request", 404: "Not Found",
                                 500: "Internal Server Error", 503: "Service Unavailable"}.get(status, "")
    if body is None:
        text = ""
    elif isinstance(body, str):
        text = body
    else:
        text = json.dumps(body)
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    response.headers = CaseInsensitiveDict(headers or {"Content-Type": "application/json"})
    return response


class FakeTransport:
    """
    Transport double returning scripted outcomes in order.

    Each outcome is a `requests.Response` or an exception to raise. The last
    outcome repeats once the script is exhausted.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes) or [build_response(200, {})]
        self.requests: List[dict] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> dict:
        return self.requests[-1]

    def request(self, method, url, headers, data=None):
        self.requests.append({"method": method, "url": url, "headers": dict(headers), "data": data})
        index = min(len(self.requests) - 1, len(self.outcomes) - 1)
        outcome = self.outcomes[index]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def fake_transport():
    """Factory: fake_transport(*outcomes) -> FakeTransport."""
    return FakeTransport


@pytest.fixture
def no_sleep():
    """Sleep replacement that records the requested delays."""
    delays = []

    def sleep(seconds):
        delays.append(seconds)

    sleep.delays = delays
    return sleep


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point GAPIHUB_CONFIG_DIR/GAPIHUB_CONFIG_FILE at a temp directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    config_file = config_dir / "config.yaml"
    monkeypatch.setenv("GAPIHUB_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("GAPIHUB_CONFIG_FILE", str(config_file))
    return {"config_dir": config_dir, "config_file": config_file}


@pytest.fixture
def make_response():
    """Factory: make_response(status, body, headers) -> requests.Response."""
    return build_response
