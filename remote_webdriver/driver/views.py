"""Response envelopes and typed command responses."""

from typing import Any, Dict, Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

T = TypeVar("T")


# Envelopes returned by the remote end

class StateEnvelope(BaseModel):
    """Reply to a command with no meaningful return value."""

    state: StrictStr


class ValueEnvelope(BaseModel, Generic[T]):
    """Reply to a command that returns a value."""

    state: StrictStr
    value: T


class NewSessionValue(BaseModel):
    """Value of a successful new session reply."""

    session_id: StrictStr = Field(alias="sessionId", min_length=1)
    capabilities: Dict[str, Any] = Field(default_factory=dict)


class StatusValue(BaseModel):
    """Value of a status reply."""

    ready: StrictBool
    message: StrictStr = ""


class WindowRect(BaseModel):
    """Value of a window rect reply."""

    width: StrictInt
    height: StrictInt
    x: Optional[StrictInt] = None
    y: Optional[StrictInt] = None


# Typed responses handed back to callers

class CommandResponse(BaseModel):
    """Snapshot of a single reply from the remote end."""

    model_config = ConfigDict(frozen=True)

    state: str


class CreateSessionResponse(CommandResponse):
    session_id: str
    capabilities: Dict[str, Any] = Field(default_factory=dict)


class DeleteSessionResponse(CommandResponse):
    pass


class SessionStatusResponse(CommandResponse):
    """Whether the remote end can create new sessions."""

    ready: bool
    message: str = ""


class SetSessionTimeoutResponse(CommandResponse):
    pass


class GoResponse(CommandResponse):
    """
    Reply to a navigation.

    Only reports whether the navigation succeeded. Redirects are not
    reflected here; call ``current_url()`` to find where the browser ended up.
    """


class CurrentURLResponse(CommandResponse):
    url: str


class BackResponse(CommandResponse):
    pass


class ForwardResponse(CommandResponse):
    pass


class RefreshResponse(CommandResponse):
    pass


class TitleResponse(CommandResponse):
    title: str


class WindowHandleResponse(CommandResponse):
    handle: str


class CloseWindowResponse(CommandResponse):
    pass


class SwitchToWindowResponse(CommandResponse):
    pass


class WindowHandlesResponse(CommandResponse):
    handles: List[str] = Field(default_factory=list)


class SwitchToFrameResponse(CommandResponse):
    pass


class SwitchToParentFrameResponse(CommandResponse):
    pass


class WindowSizeResponse(CommandResponse):
    width: int
    height: int
