"""Pytest configuration and shared fixtures."""

import json
from dataclasses import dataclass
from typing import Any, List, Optional

import pytest

from remote_webdriver.driver.api import APIService
from remote_webdriver.driver.capabilities import Capabilities
from remote_webdriver.driver.remote import RemoteWebDriver

SERVER_URL = "http://localhost:4444"
SESSION_ID = "abc123"
SESSION_URL = f"{SERVER_URL}/session/{SESSION_ID}"


@dataclass
class RecordedCall:
    url: str
    method: str
    body: Optional[bytes]

    @property
    def json(self) -> Any:
        return json.loads(self.body) if self.body is not None else None


class RecordingAPIService(APIService):
    """Scripted transport: replays queued replies and records every request.

    A queued ``dict``/``list`` is sent as JSON, ``bytes`` verbatim, and an
    exception instance is raised.
    """

    def __init__(self, *replies: Any):
        self.replies: List[Any] = list(replies)
        self.calls: List[RecordedCall] = []

    def queue(self, *replies: Any) -> "RecordingAPIService":
        self.replies.extend(replies)
        return self

    def perform_request(self, url: str, method: str, body: Optional[bytes] = None) -> bytes:
        self.calls.append(RecordedCall(url, method, body))
        if not self.replies:
            raise AssertionError(f"Unexpected request: {method} {url}")
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        if isinstance(reply, (dict, list)):
            return json.dumps(reply).encode("utf-8")
        return reply

    @property
    def last_call(self) -> RecordedCall:
        return self.calls[-1]


@pytest.fixture
def api() -> RecordingAPIService:
    return RecordingAPIService()


@pytest.fixture
def capabilities() -> Capabilities:
    return Capabilities(browser_name="firefox")


@pytest.fixture
def driver(api: RecordingAPIService, capabilities: Capabilities) -> RemoteWebDriver:
    """Driver with no active session."""
    return RemoteWebDriver(SERVER_URL, capabilities, api)


@pytest.fixture
def session_driver(driver: RemoteWebDriver, api: RecordingAPIService) -> RemoteWebDriver:
    """Driver whose session has been created; the creation call is cleared."""
    api.queue({"state": "success", "value": {"sessionId": SESSION_ID, "capabilities": {}}})
    driver.create_session()
    api.calls.clear()
    return driver
