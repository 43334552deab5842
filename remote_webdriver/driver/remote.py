"""Remote WebDriver client speaking the W3C HTTP/JSON protocol."""

import functools
import json
import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, StrictStr, ValidationError

from remote_webdriver.core.config import DriverConfig
from remote_webdriver.core.exceptions import (
    CommunicationError,
    InvalidArgumentError,
    InvalidURLError,
    MarshallingError,
    MissingSessionError,
    TransportError,
    UnmarshallingError,
    WebDriverError,
)
from remote_webdriver.core.logging import log_command
from remote_webdriver.driver.api import APIService, HttpxAPIService
from remote_webdriver.driver.base import WebDriver
from remote_webdriver.driver.capabilities import Capabilities
from remote_webdriver.driver.values import By, ByKind, Timeout
from remote_webdriver.driver.views import (
    BackResponse,
    CloseWindowResponse,
    CreateSessionResponse,
    CurrentURLResponse,
    DeleteSessionResponse,
    ForwardResponse,
    GoResponse,
    NewSessionValue,
    RefreshResponse,
    SessionStatusResponse,
    SetSessionTimeoutResponse,
    StateEnvelope,
    StatusValue,
    SwitchToFrameResponse,
    SwitchToParentFrameResponse,
    SwitchToWindowResponse,
    TitleResponse,
    ValueEnvelope,
    WindowHandleResponse,
    WindowHandlesResponse,
    WindowRect,
    WindowSizeResponse,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

HTTP_SCHEMES = ("http://", "https://")


@dataclass(frozen=True)
class Request:
    """One HTTP call made on behalf of a command."""
    url: str
    method: str
    command: str
    body: Optional[bytes] = None


def validate_url(url: str) -> str:
    """Return ``url`` if it is a non-empty http(s) URL, else raise ``InvalidURLError``."""
    if not isinstance(url, str) or url == "":
        raise InvalidURLError(url, ValueError("URL is empty"))
    if not url.startswith(HTTP_SCHEMES):
        raise InvalidURLError(url, ValueError("URL scheme must be http or https"))
    return url


def _synchronized(method):
    """Run a command while holding the driver's lock."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


class RemoteWebDriver(WebDriver):
    """
    Client for a remote end implementing the W3C WebDriver protocol.

    Holds the server URL, the desired capabilities and the identifier of the
    active session. Each command validates its preconditions, performs a
    single request through the ``APIService``, decodes the reply and returns
    a typed response. Any failure is raised as a ``WebDriverError`` subclass
    and leaves the driver usable; nothing is retried.

    Commands on one driver are serialized by an internal lock, since the
    remote session processes one command at a time.
    """

    def __init__(
        self,
        server_url: str,
        capabilities: Capabilities,
        api_service: APIService,
    ):
        """
        Args:
            server_url: Base URL of the remote end (http or https)
            capabilities: Desired capabilities; ``browser_name`` is required
            api_service: Transport used for every request (not owned)
        """
        validate_url(server_url)

        if not isinstance(capabilities, Capabilities) or not capabilities.browser_name:
            raise InvalidArgumentError(
                "capabilities",
                capabilities,
                "RemoteWebDriver",
                message="An invalid capabilities object was provided (browser_name is required)",
            )

        if server_url.endswith("/"):
            server_url = server_url[:-1]

        self._url = server_url
        self._capabilities = capabilities
        self._api_service = api_service
        self._session_id = ""
        self._lock = threading.RLock()

    @classmethod
    def from_config(
        cls,
        config: Optional[DriverConfig] = None,
        api_service: Optional[APIService] = None,
    ) -> "RemoteWebDriver":
        """Build a driver (and an httpx transport if none is given) from configuration."""
        config = config or DriverConfig.from_env()
        if api_service is None:
            api_service = HttpxAPIService(
                timeout=config.request_timeout,
                verify=config.verify_tls,
            )
        return cls(
            config.url,
            Capabilities(browser_name=config.browser_name),
            api_service,
        )

    # Properties

    @property
    def driver_url(self) -> str:
        return self._url

    @property
    def session_id(self) -> str:
        """Identifier of the active session, or an empty string."""
        return self._session_id

    @property
    def has_session(self) -> bool:
        return self._session_id != ""

    @property
    def capabilities(self) -> Capabilities:
        return self._capabilities

    def __enter__(self) -> "RemoteWebDriver":
        self.create_session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if not self.has_session:
            return False
        if exc_type is None:
            self.delete_session()
            return False
        # Keep the error raised inside the block; a failed cleanup is only logged.
        try:
            self.delete_session()
        except WebDriverError as e:
            logger.warning(f"Could not delete session {self._session_id} after error: {e.message}")
        return False

    # Request plumbing

    def _session_url(self, command: str, suffix: str = "") -> str:
        if not self._session_id:
            raise MissingSessionError(command)
        return f"{self._url}/session/{self._session_id}{suffix}"

    @staticmethod
    def _encode(command: str, params: Dict[str, Any]) -> bytes:
        try:
            return json.dumps(params, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise MarshallingError(e, command, params) from e

    def _send(self, request: Request) -> bytes:
        log_command(request.command, request.method, request.url, has_body=request.body is not None)
        try:
            return self._api_service.perform_request(request.url, request.method, request.body)
        except TransportError as e:
            raise CommunicationError(e, request.command, request.url, e.response) from e
        except Exception as e:
            raise CommunicationError(e, request.command, request.url) from e

    @staticmethod
    def _decode(model: Type[M], raw: bytes, command: str) -> M:
        try:
            return model.model_validate_json(raw)
        except ValidationError as e:
            raise UnmarshallingError(e, command, raw) from e

    def _state_request(self, request: Request) -> StateEnvelope:
        raw = self._send(request)
        return self._decode(StateEnvelope, raw, request.command)

    def _value_request(self, request: Request, value_type: Any = StrictStr) -> ValueEnvelope:
        raw = self._send(request)
        return self._decode(ValueEnvelope[value_type], raw, request.command)

    # Sessions

    @_synchronized
    def create_session(self) -> CreateSessionResponse:
        command = "create_session"
        if self._session_id:
            logger.warning(f"Replacing active session {self._session_id}")

        resp = self._value_request(
            Request(
                url=f"{self._url}/session",
                method="POST",
                command=command,
                body=self._encode(command, self._capabilities.to_payload()),
            ),
            NewSessionValue,
        )

        self._session_id = resp.value.session_id
        logger.info(f"Session created: {self._session_id}")
        return CreateSessionResponse(
            state=resp.state,
            session_id=resp.value.session_id,
            capabilities=resp.value.capabilities,
        )

    @_synchronized
    def delete_session(self) -> DeleteSessionResponse:
        command = "delete_session"
        resp = self._state_request(Request(
            url=self._session_url(command),
            method="DELETE",
            command=command,
        ))

        logger.info(f"Session deleted: {self._session_id}")
        self._session_id = ""
        return DeleteSessionResponse(state=resp.state)

    @_synchronized
    def session_status(self) -> SessionStatusResponse:
        resp = self._value_request(
            Request(url=f"{self._url}/status", method="GET", command="session_status"),
            StatusValue,
        )
        return SessionStatusResponse(
            state=resp.state,
            ready=resp.value.ready,
            message=resp.value.message,
        )

    @_synchronized
    def set_session_timeout(self, timeout: Timeout) -> SetSessionTimeoutResponse:
        command = "set_session_timeout"
        if not isinstance(timeout, Timeout):
            raise InvalidArgumentError("timeout", timeout, command)

        url = self._session_url(command, "/timeouts")
        resp = self._state_request(Request(
            url=url,
            method="POST",
            command=command,
            body=self._encode(command, {timeout.wire_key: timeout.milliseconds}),
        ))
        return SetSessionTimeoutResponse(state=resp.state)

    # Navigation

    @_synchronized
    def go(self, url: str) -> GoResponse:
        command = "go"
        validate_url(url)

        resp = self._state_request(Request(
            url=self._session_url(command, "/url"),
            method="POST",
            command=command,
            body=self._encode(command, {"url": url}),
        ))
        return GoResponse(state=resp.state)

    @_synchronized
    def current_url(self) -> CurrentURLResponse:
        command = "current_url"
        resp = self._value_request(Request(
            url=self._session_url(command, "/url"),
            method="GET",
            command=command,
        ))
        return CurrentURLResponse(state=resp.state, url=resp.value)

    @_synchronized
    def back(self) -> BackResponse:
        command = "back"
        resp = self._state_request(Request(
            url=self._session_url(command, "/back"),
            method="POST",
            command=command,
        ))
        return BackResponse(state=resp.state)

    @_synchronized
    def forward(self) -> ForwardResponse:
        command = "forward"
        resp = self._state_request(Request(
            url=self._session_url(command, "/forward"),
            method="POST",
            command=command,
        ))
        return ForwardResponse(state=resp.state)

    @_synchronized
    def refresh(self) -> RefreshResponse:
        command = "refresh"
        resp = self._state_request(Request(
            url=self._session_url(command, "/refresh"),
            method="POST",
            command=command,
        ))
        return RefreshResponse(state=resp.state)

    @_synchronized
    def title(self) -> TitleResponse:
        command = "title"
        resp = self._value_request(Request(
            url=self._session_url(command, "/title"),
            method="GET",
            command=command,
        ))
        return TitleResponse(state=resp.state, title=resp.value)

    # Windows and frames

    @_synchronized
    def window_handle(self) -> WindowHandleResponse:
        command = "window_handle"
        resp = self._value_request(Request(
            url=self._session_url(command, "/window"),
            method="GET",
            command=command,
        ))
        return WindowHandleResponse(state=resp.state, handle=resp.value)

    @_synchronized
    def close_window(self) -> CloseWindowResponse:
        command = "close_window"
        resp = self._state_request(Request(
            url=self._session_url(command, "/window"),
            method="DELETE",
            command=command,
        ))
        return CloseWindowResponse(state=resp.state)

    @_synchronized
    def switch_to_window(self, handle: str) -> SwitchToWindowResponse:
        command = "switch_to_window"
        if not isinstance(handle, str) or handle == "":
            raise InvalidArgumentError(
                "handle",
                handle,
                command,
                message="Argument empty in switch_to_window()",
            )

        resp = self._state_request(Request(
            url=self._session_url(command, "/window"),
            method="POST",
            command=command,
            body=self._encode(command, {"handle": handle}),
        ))
        return SwitchToWindowResponse(state=resp.state)

    @_synchronized
    def window_handles(self) -> WindowHandlesResponse:
        command = "window_handles"
        resp = self._value_request(
            Request(
                url=self._session_url(command, "/window/handles"),
                method="GET",
                command=command,
            ),
            List[StrictStr],
        )
        return WindowHandlesResponse(state=resp.state, handles=resp.value)

    @_synchronized
    def switch_to_frame(self, by: By) -> SwitchToFrameResponse:
        command = "switch_to_frame"
        if not isinstance(by, By) or by.kind is not ByKind.INDEX:
            raise InvalidArgumentError(
                "by",
                by,
                command,
                message="switch_to_frame() only accepts a by_index() locator",
            )

        resp = self._state_request(Request(
            url=self._session_url(command, "/frame"),
            method="POST",
            command=command,
            body=self._encode(command, {"id": by.value}),
        ))
        return SwitchToFrameResponse(state=resp.state)

    @_synchronized
    def switch_to_parent_frame(self) -> SwitchToParentFrameResponse:
        command = "switch_to_parent_frame"
        resp = self._state_request(Request(
            url=self._session_url(command, "/frame/parent"),
            method="POST",
            command=command,
        ))
        return SwitchToParentFrameResponse(state=resp.state)

    @_synchronized
    def window_size(self) -> WindowSizeResponse:
        command = "window_size"
        resp = self._value_request(
            Request(
                url=self._session_url(command, "/window/rect"),
                method="GET",
                command=command,
            ),
            WindowRect,
        )
        return WindowSizeResponse(
            state=resp.state,
            width=resp.value.width,
            height=resp.value.height,
        )
