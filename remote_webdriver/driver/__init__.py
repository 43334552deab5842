"""WebDriver commands - transport, value types, responses and the remote driver."""

from remote_webdriver.driver.api import APIService, HttpxAPIService
from remote_webdriver.driver.base import WebDriver
from remote_webdriver.driver.capabilities import Capabilities
from remote_webdriver.driver.remote import RemoteWebDriver, Request
from remote_webdriver.driver.values import (
    By,
    ByKind,
    Timeout,
    TimeoutKind,
    by_index,
    by_css_selector,
    by_id,
    by_name,
    by_xpath,
    by_link_text,
    by_partial_link_text,
    by_tag_name,
    session_script_timeout,
    session_page_load_timeout,
    session_implicit_wait_timeout,
)

__all__ = [
    "APIService",
    "HttpxAPIService",
    "WebDriver",
    "Capabilities",
    "RemoteWebDriver",
    "Request",
    "By",
    "ByKind",
    "Timeout",
    "TimeoutKind",
    "by_index",
    "by_css_selector",
    "by_id",
    "by_name",
    "by_xpath",
    "by_link_text",
    "by_partial_link_text",
    "by_tag_name",
    "session_script_timeout",
    "session_page_load_timeout",
    "session_implicit_wait_timeout",
]
