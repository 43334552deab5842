"""
Remote WebDriver Client
=======================

A typed client for remote browser-automation servers speaking the W3C
WebDriver HTTP/JSON protocol.

Main Components:
- RemoteWebDriver: Session lifecycle, navigation and window commands
- HttpxAPIService: Default transport built on httpx
- By / Timeout: Validated command parameters
- WebDriverError: Root of the classified error hierarchy

Quick Start:
    >>> from remote_webdriver import RemoteWebDriver, Capabilities, HttpxAPIService
    >>>
    >>> with HttpxAPIService() as api:
    ...     driver = RemoteWebDriver("http://localhost:4444", Capabilities(browser_name="firefox"), api)
    ...     with driver:
    ...         driver.go("https://example.com")
    ...         print(driver.title().title)
"""

__version__ = "1.0.0"
__author__ = "Browser Automation Team"

# Lazy imports for better performance
_LAZY_IMPORTS = {
    "RemoteWebDriver": ("remote_webdriver.driver.remote", "RemoteWebDriver"),
    "WebDriver": ("remote_webdriver.driver.base", "WebDriver"),
    "APIService": ("remote_webdriver.driver.api", "APIService"),
    "HttpxAPIService": ("remote_webdriver.driver.api", "HttpxAPIService"),
    "Capabilities": ("remote_webdriver.driver.capabilities", "Capabilities"),
    "By": ("remote_webdriver.driver.values", "By"),
    "Timeout": ("remote_webdriver.driver.values", "Timeout"),
    "by_index": ("remote_webdriver.driver.values", "by_index"),
    "by_css_selector": ("remote_webdriver.driver.values", "by_css_selector"),
    "session_script_timeout": ("remote_webdriver.driver.values", "session_script_timeout"),
    "session_page_load_timeout": ("remote_webdriver.driver.values", "session_page_load_timeout"),
    "session_implicit_wait_timeout": ("remote_webdriver.driver.values", "session_implicit_wait_timeout"),
    "Config": ("remote_webdriver.core.config", "Config"),
    "WebDriverError": ("remote_webdriver.core.exceptions", "WebDriverError"),
    "ErrorKind": ("remote_webdriver.core.exceptions", "ErrorKind"),
}


def __getattr__(name: str):
    """Lazy import mechanism for main components."""
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        from importlib import import_module
        module = import_module(module_path)
        attr = getattr(module, attr_name)
        globals()[name] = attr
        return attr
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "RemoteWebDriver",
    "WebDriver",
    "APIService",
    "HttpxAPIService",
    "Capabilities",
    "By",
    "Timeout",
    "by_index",
    "by_css_selector",
    "session_script_timeout",
    "session_page_load_timeout",
    "session_implicit_wait_timeout",
    "Config",
    "WebDriverError",
    "ErrorKind",
    "__version__",
]
