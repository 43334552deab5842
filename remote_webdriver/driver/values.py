"""Locator and timeout value types used to parameterize commands."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from remote_webdriver.core.exceptions import InvalidArgumentError

# Largest frame index accepted by the W3C protocol (2^16 - 1).
MAX_INDEX = 65535


class ByKind(str, Enum):
    """Locator strategies."""
    INDEX = "index"
    CSS_SELECTOR = "css selector"
    ID = "id"
    NAME = "name"
    XPATH = "xpath"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"
    TAG_NAME = "tag name"


class TimeoutKind(str, Enum):
    """Session timeouts that can be configured on the remote end."""
    SCRIPT = "script"
    PAGE_LOAD = "page load"
    IMPLICIT = "implicit"


_TIMEOUT_WIRE_KEYS = {
    TimeoutKind.SCRIPT: "script",
    TimeoutKind.PAGE_LOAD: "pageLoad",
    TimeoutKind.IMPLICIT: "implicit",
}


@dataclass(frozen=True)
class By:
    """
    How the remote end should find a frame or element.

    Build instances with the ``by_*`` factories. Direct construction is
    validated the same way.
    """
    kind: ByKind
    value: Union[int, str]

    def __post_init__(self):
        if not isinstance(self.kind, ByKind):
            raise InvalidArgumentError("kind", self.kind, "By")
        if self.kind is ByKind.INDEX:
            if not _is_int(self.value) or not 0 <= self.value <= MAX_INDEX:
                raise InvalidArgumentError(
                    "value",
                    self.value,
                    "By",
                    message=f"Index out of range in By: {self.value!r} (expected 0..{MAX_INDEX})",
                )
        elif not isinstance(self.value, str) or self.value == "":
            raise InvalidArgumentError("value", self.value, "By", message="Argument empty in By")


@dataclass(frozen=True)
class Timeout:
    """A session timeout in milliseconds."""
    kind: TimeoutKind
    milliseconds: int

    def __post_init__(self):
        if not isinstance(self.kind, TimeoutKind):
            raise InvalidArgumentError("kind", self.kind, "Timeout")
        if not _is_int(self.milliseconds) or self.milliseconds < 0:
            raise InvalidArgumentError("milliseconds", self.milliseconds, "Timeout")

    @property
    def wire_key(self) -> str:
        """Key used for this timeout in the request body."""
        return _TIMEOUT_WIRE_KEYS[self.kind]


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def by_index(index: int) -> By:
    """
    Locate a frame by its index.

    Indices above 65535 are rejected rather than clamped.
    """
    if not _is_int(index) or index < 0 or index > MAX_INDEX:
        raise InvalidArgumentError(
            "index",
            index,
            "by_index",
            message=f"Index out of range in by_index(): {index!r} (expected 0..{MAX_INDEX})",
        )
    return By(ByKind.INDEX, index)


def _string_locator(kind: ByKind, parameter: str, value: str, function: str) -> By:
    if not isinstance(value, str) or value == "":
        raise InvalidArgumentError(
            parameter,
            value,
            function,
            message=f"Argument empty in {function}()",
        )
    return By(kind, value)


def by_css_selector(selector: str) -> By:
    """Locate by CSS selector. The selector is kept exactly as given."""
    return _string_locator(ByKind.CSS_SELECTOR, "selector", selector, "by_css_selector")


def by_id(element_id: str) -> By:
    return _string_locator(ByKind.ID, "element_id", element_id, "by_id")


def by_name(name: str) -> By:
    return _string_locator(ByKind.NAME, "name", name, "by_name")


def by_xpath(expression: str) -> By:
    return _string_locator(ByKind.XPATH, "expression", expression, "by_xpath")


def by_link_text(text: str) -> By:
    return _string_locator(ByKind.LINK_TEXT, "text", text, "by_link_text")


def by_partial_link_text(text: str) -> By:
    return _string_locator(ByKind.PARTIAL_LINK_TEXT, "text", text, "by_partial_link_text")


def by_tag_name(tag: str) -> By:
    return _string_locator(ByKind.TAG_NAME, "tag", tag, "by_tag_name")


def _timeout(kind: TimeoutKind, milliseconds: int, function: str) -> Timeout:
    if not _is_int(milliseconds) or milliseconds < 0:
        raise InvalidArgumentError(
            "milliseconds",
            milliseconds,
            function,
            message=f"Timeout must be a non-negative integer in {function}(): {milliseconds!r}",
        )
    return Timeout(kind, milliseconds)


def session_script_timeout(milliseconds: int) -> Timeout:
    """Timeout for scripts injected with execute script."""
    return _timeout(TimeoutKind.SCRIPT, milliseconds, "session_script_timeout")


def session_page_load_timeout(milliseconds: int) -> Timeout:
    """Timeout for a navigation to complete."""
    return _timeout(TimeoutKind.PAGE_LOAD, milliseconds, "session_page_load_timeout")


def session_implicit_wait_timeout(milliseconds: int) -> Timeout:
    """Implicit wait applied when locating elements."""
    return _timeout(TimeoutKind.IMPLICIT, milliseconds, "session_implicit_wait_timeout")
