"""Abstract interface for a W3C WebDriver client."""

from abc import ABC, abstractmethod

from remote_webdriver.driver.values import By, Timeout
from remote_webdriver.driver.views import (
    BackResponse,
    CloseWindowResponse,
    CreateSessionResponse,
    CurrentURLResponse,
    DeleteSessionResponse,
    ForwardResponse,
    GoResponse,
    RefreshResponse,
    SessionStatusResponse,
    SetSessionTimeoutResponse,
    SwitchToFrameResponse,
    SwitchToParentFrameResponse,
    SwitchToWindowResponse,
    TitleResponse,
    WindowHandleResponse,
    WindowHandlesResponse,
    WindowSizeResponse,
)


class WebDriver(ABC):
    """
    Commands of the W3C WebDriver specification
    (https://w3c.github.io/webdriver/).

    Every command returns a typed response or raises a ``WebDriverError``
    subclass describing why it failed.
    """

    # Property access

    @property
    @abstractmethod
    def driver_url(self) -> str:
        """URL where the remote end is hosted."""

    # Sessions

    @abstractmethod
    def create_session(self) -> CreateSessionResponse:
        """Create a session on the remote end with the desired capabilities."""

    @abstractmethod
    def delete_session(self) -> DeleteSessionResponse:
        """Delete the session associated with this driver."""

    @abstractmethod
    def session_status(self) -> SessionStatusResponse:
        """Report whether the remote end is able to create new sessions."""

    @abstractmethod
    def set_session_timeout(self, timeout: Timeout) -> SetSessionTimeoutResponse:
        """
        Configure one of the session timeouts.

        Build the argument with ``session_script_timeout()``,
        ``session_page_load_timeout()`` or ``session_implicit_wait_timeout()``.
        """

    # Navigation

    @abstractmethod
    def go(self, url: str) -> GoResponse:
        """Navigate the top-level browsing context to ``url``."""

    @abstractmethod
    def current_url(self) -> CurrentURLResponse:
        """URL of the top-level browsing context."""

    @abstractmethod
    def back(self) -> BackResponse:
        """Go one step back in the page history."""

    @abstractmethod
    def forward(self) -> ForwardResponse:
        """Go one step forward in the page history."""

    @abstractmethod
    def refresh(self) -> RefreshResponse:
        """Reload the current page."""

    @abstractmethod
    def title(self) -> TitleResponse:
        """Title of the current page."""

    # Windows and frames

    @abstractmethod
    def window_handle(self) -> WindowHandleResponse:
        """Handle of the current window."""

    @abstractmethod
    def close_window(self) -> CloseWindowResponse:
        """Close the current window."""

    @abstractmethod
    def switch_to_window(self, handle: str) -> SwitchToWindowResponse:
        """Make the window identified by ``handle`` current."""

    @abstractmethod
    def window_handles(self) -> WindowHandlesResponse:
        """Handles of every window in the session."""

    @abstractmethod
    def switch_to_frame(self, by: By) -> SwitchToFrameResponse:
        """Switch to a frame. Only ``by_index()`` locators are accepted."""

    @abstractmethod
    def switch_to_parent_frame(self) -> SwitchToParentFrameResponse:
        """Switch to the parent of the current browsing context."""

    @abstractmethod
    def window_size(self) -> WindowSizeResponse:
        """Size of the current window."""
