"""Tests for configuration loading and logging setup."""

import logging

from remote_webdriver.core.config import Config, DriverConfig
from remote_webdriver.core.logging import get_logger, log_command, setup_logging


class TestDriverConfig:
    """Tests for DriverConfig.from_env()."""

    def test_defaults(self, monkeypatch) -> None:
        for name in ("WEBDRIVER_URL", "WEBDRIVER_BROWSER", "WEBDRIVER_REQUEST_TIMEOUT", "WEBDRIVER_VERIFY_TLS"):
            monkeypatch.delenv(name, raising=False)

        config = DriverConfig.from_env()

        assert config.url == "http://localhost:4444"
        assert config.browser_name == "firefox"
        assert config.request_timeout == 30.0
        assert config.verify_tls is True

    def test_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("WEBDRIVER_URL", "https://grid:4444")
        monkeypatch.setenv("WEBDRIVER_BROWSER", "chrome")
        monkeypatch.setenv("WEBDRIVER_REQUEST_TIMEOUT", "5")
        monkeypatch.setenv("WEBDRIVER_VERIFY_TLS", "false")

        config = DriverConfig.from_env()

        assert config.url == "https://grid:4444"
        assert config.browser_name == "chrome"
        assert config.request_timeout == 5.0
        assert config.verify_tls is False


class TestConfig:
    """Tests for Config.from_env()."""

    def test_logging_settings(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_JSON", "true")
        monkeypatch.delenv("LOG_FILE", raising=False)

        config = Config.from_env()

        assert config.log_level == "DEBUG"
        assert config.json_logs is True
        assert config.log_file is None


class TestLogging:
    """Tests for logging setup."""

    def test_setup_logging_writes_file(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "webdriver.log"

        logger = setup_logging(level="DEBUG", log_file=str(log_file))
        log_command("back", "POST", "http://wd/session/1/back")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert logger.name == "remote_webdriver"
        assert "http://wd/session/1/back" in log_file.read_text(encoding="utf-8")

        root = logging.getLogger()
        for handler in list(root.handlers):
            handler.close()
        root.handlers.clear()

    def test_get_logger_binds_context(self) -> None:
        logger = get_logger("remote_webdriver.test").bind(command="title")

        assert logger._context == {"command": "title"}
