"""Core client components - configuration, logging, and exceptions."""

from remote_webdriver.core.config import Config, DriverConfig
from remote_webdriver.core.exceptions import (
    WebDriverError,
    ErrorKind,
    InvalidArgumentError,
    InvalidURLError,
    MissingSessionError,
    TransportError,
    CommunicationError,
    MarshallingError,
    UnmarshallingError,
)
from remote_webdriver.core.logging import setup_logging, get_logger

__all__ = [
    "Config",
    "DriverConfig",
    "WebDriverError",
    "ErrorKind",
    "InvalidArgumentError",
    "InvalidURLError",
    "MissingSessionError",
    "TransportError",
    "CommunicationError",
    "MarshallingError",
    "UnmarshallingError",
    "setup_logging",
    "get_logger",
]
