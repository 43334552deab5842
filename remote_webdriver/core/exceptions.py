"""Exceptions raised by the remote WebDriver client."""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Classification of every failure a command can produce."""
    INVALID_ARGUMENT = "invalid_argument"
    INVALID_URL = "invalid_url"
    MISSING_SESSION = "missing_session"
    COMMUNICATION = "communication"
    MARSHALLING = "marshalling"
    UNMARSHALLING = "unmarshalling"
    TRANSPORT = "transport"


class WebDriverError(Exception):
    """Base exception for all remote WebDriver errors."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        recoverable: bool = True
    ):
        self.message = message
        self.details = details
        self.recoverable = recoverable
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class InvalidArgumentError(WebDriverError):
    """A value constructor or command received an out-of-range or empty input."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(
        self,
        parameter: str,
        value: Any,
        function: str,
        message: Optional[str] = None,
        **kwargs
    ):
        self.parameter = parameter
        self.value = value
        self.function = function
        msg = message or f"Invalid argument '{parameter}' in {function}: {value!r}"
        super().__init__(msg, **kwargs)


class InvalidURLError(WebDriverError):
    """A server URL or navigation target is empty or not http/https."""

    kind = ErrorKind.INVALID_URL

    def __init__(self, url: str, cause: Optional[BaseException] = None, **kwargs):
        self.url = url
        self.cause = cause
        super().__init__(
            f"Invalid URL: {url!r}",
            details=str(cause) if cause else None,
            **kwargs
        )


class MissingSessionError(WebDriverError):
    """A session-scoped command was issued without an active session."""

    kind = ErrorKind.MISSING_SESSION

    def __init__(self, command: str, **kwargs):
        self.command = command
        super().__init__(
            f"No active session for {command}(); call create_session() first",
            **kwargs
        )


class TransportError(WebDriverError):
    """Raised by an API service when a single HTTP round trip fails."""

    kind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[bytes] = None,
        **kwargs
    ):
        self.status_code = status_code
        self.response = response
        super().__init__(message, **kwargs)


class CommunicationError(WebDriverError):
    """The transport failed while executing a command."""

    kind = ErrorKind.COMMUNICATION

    def __init__(
        self,
        cause: BaseException,
        command: str,
        url: str,
        response: Optional[bytes] = None,
        **kwargs
    ):
        self.cause = cause
        self.command = command
        self.url = url
        self.response = response
        super().__init__(
            f"Communication with the remote end failed in {command}() ({url})",
            details=str(cause),
            **kwargs
        )

    @property
    def status_code(self) -> Optional[int]:
        """HTTP status reported by the transport, when it had one."""
        return getattr(self.cause, "status_code", None)


class MarshallingError(WebDriverError):
    """Encoding outgoing command parameters as JSON failed."""

    kind = ErrorKind.MARSHALLING

    def __init__(self, cause: BaseException, command: str, value: Any, **kwargs):
        self.cause = cause
        self.command = command
        self.value = value
        super().__init__(
            f"Could not encode parameters for {command}()",
            details=str(cause),
            recoverable=False,
            **kwargs
        )


class UnmarshallingError(WebDriverError):
    """The remote end replied with malformed JSON or an unexpected shape."""

    kind = ErrorKind.UNMARSHALLING

    def __init__(self, cause: BaseException, command: str, payload: bytes, **kwargs):
        self.cause = cause
        self.command = command
        self.payload = payload
        super().__init__(
            f"Could not decode the response to {command}()",
            details=str(cause),
            recoverable=False,
            **kwargs
        )

    @property
    def text(self) -> str:
        """The raw payload as text."""
        return self.payload.decode("utf-8", errors="replace")
