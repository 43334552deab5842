"""Tests for the classified error hierarchy."""

import pytest

from remote_webdriver.core.exceptions import (
    CommunicationError,
    ErrorKind,
    InvalidArgumentError,
    InvalidURLError,
    MarshallingError,
    MissingSessionError,
    TransportError,
    UnmarshallingError,
    WebDriverError,
)


class TestErrorKinds:
    """Each error carries its kind and structured context."""

    @pytest.mark.parametrize(
        "error, kind, recoverable",
        [
            (InvalidArgumentError("index", 70000, "by_index"), ErrorKind.INVALID_ARGUMENT, True),
            (InvalidURLError("ftp://x", ValueError("bad scheme")), ErrorKind.INVALID_URL, True),
            (MissingSessionError("title"), ErrorKind.MISSING_SESSION, True),
            (CommunicationError(TransportError("down"), "back", "http://wd/back"), ErrorKind.COMMUNICATION, True),
            (MarshallingError(TypeError("no"), "go", {"url": 1}), ErrorKind.MARSHALLING, False),
            (UnmarshallingError(ValueError("no"), "title", b"{"), ErrorKind.UNMARSHALLING, False),
        ],
    )
    def test_kind_and_recoverability(self, error: WebDriverError, kind: ErrorKind, recoverable: bool) -> None:
        assert isinstance(error, WebDriverError)
        assert error.kind is kind
        assert error.recoverable is recoverable

    def test_details_in_string(self) -> None:
        err = InvalidURLError("ftp://x", ValueError("URL scheme must be http or https"))

        assert str(err) == "Invalid URL: 'ftp://x'\nDetails: URL scheme must be http or https"

    def test_missing_session_names_command(self) -> None:
        assert "title()" in str(MissingSessionError("title"))

    def test_invalid_argument_default_message(self) -> None:
        err = InvalidArgumentError("selector", "", "by_css_selector")

        assert str(err) == "Invalid argument 'selector' in by_css_selector: ''"

    def test_unmarshalling_text_keeps_payload(self) -> None:
        err = UnmarshallingError(ValueError("bad"), "title", b"\xffnot json")

        assert err.payload == b"\xffnot json"
        assert err.text.endswith("not json")
