"""Desired browser capabilities sent when creating a session."""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class Capabilities(BaseModel):
    """Descriptor of the browser and environment a session should use."""

    model_config = ConfigDict(frozen=True)

    browser_name: str = Field(description="Browser to start (firefox, chrome, ...)")
    browser_version: Optional[str] = Field(default=None, description="Requested browser version")
    platform_name: Optional[str] = Field(default=None, description="Requested platform")
    accept_insecure_certs: Optional[bool] = Field(
        default=None,
        description="Accept untrusted and self-signed TLS certificates"
    )
    page_load_strategy: Optional[str] = Field(
        default=None,
        description="normal, eager or none"
    )
    extra: Dict[str, Any] = Field(
        default_factory=dict,
        description="Vendor capabilities passed through unchanged"
    )

    def to_w3c(self) -> Dict[str, Any]:
        """Capabilities keyed by their W3C names, omitting unset values."""
        caps: Dict[str, Any] = {"browserName": self.browser_name}
        optional = {
            "browserVersion": self.browser_version,
            "platformName": self.platform_name,
            "acceptInsecureCerts": self.accept_insecure_certs,
            "pageLoadStrategy": self.page_load_strategy,
        }
        caps.update({key: value for key, value in optional.items() if value is not None})
        caps.update(self.extra)
        return caps

    def to_payload(self) -> Dict[str, Any]:
        """Body of the new session request."""
        caps = self.to_w3c()
        return {
            "capabilities": {"alwaysMatch": caps},
            "desiredCapabilities": dict(caps),
        }
