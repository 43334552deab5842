"""Configuration management for the remote WebDriver client."""

import os
from typing import Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class DriverConfig(BaseModel):
    """Remote end and transport configuration."""

    url: str = Field(
        default="http://localhost:4444",
        description="Base URL of the remote WebDriver server"
    )
    browser_name: str = Field(
        default="firefox",
        description="Browser requested when creating a session"
    )
    request_timeout: float = Field(
        default=30.0,
        description="Timeout for a single HTTP round trip in seconds"
    )
    verify_tls: bool = Field(
        default=True,
        description="Verify TLS certificates of an https remote end"
    )

    @classmethod
    def from_env(cls) -> "DriverConfig":
        """Create config from environment variables."""
        return cls(
            url=os.getenv("WEBDRIVER_URL", "http://localhost:4444"),
            browser_name=os.getenv("WEBDRIVER_BROWSER", "firefox"),
            request_timeout=float(os.getenv("WEBDRIVER_REQUEST_TIMEOUT", "30.0")),
            verify_tls=_env_flag("WEBDRIVER_VERIFY_TLS", "true"),
        )


class Config(BaseModel):
    """Main configuration container."""

    driver: DriverConfig = Field(default_factory=DriverConfig.from_env)

    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Log file path"
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON formatted logs"
    )

    @classmethod
    def from_env(cls) -> "Config":
        """Create complete config from environment variables."""
        return cls(
            driver=DriverConfig.from_env(),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE"),
            json_logs=_env_flag("LOG_JSON", "false"),
        )
