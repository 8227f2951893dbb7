"""
Pydantic models for the gateway's HTTP request and response bodies.

Request fields are optional at the schema level: presence is checked by the
handlers so that a missing field is reported as a 400 listing what is required,
rather than as a generic schema error.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from agent_gateway.config.constants import REQUIRED_USER_INFO_FIELDS


class UserInfo(BaseModel):
    """Identities of the human user and the AI participant in a TRTC room."""

    model_config = ConfigDict(extra="ignore")

    sdkAppId: Optional[int] = Field(None, description="TRTC application id")
    roomId: Optional[Union[int, str]] = Field(None, description="Room to join")
    robotId: Optional[Union[int, str]] = Field(None, description="User id of the AI participant")
    robotSig: Optional[Union[int, str]] = Field(None, description="UserSig of the AI participant")
    userId: Optional[Union[int, str]] = Field(None, description="User id of the human participant")
    voiceId: Optional[str] = Field(None, description="TTS voice overriding the default")

    def missing_fields(self) -> List[str]:
        """Return required fields that are absent or empty."""
        return [name for name in REQUIRED_USER_INFO_FIELDS if not getattr(self, name)]


class StartConversationRequest(BaseModel):
    """Body of POST /conversations."""

    model_config = ConfigDict(extra="ignore")

    userInfo: Optional[UserInfo] = None


class StopConversationRequest(BaseModel):
    """Body of DELETE /conversations."""

    model_config = ConfigDict(extra="ignore")

    TaskId: Optional[Union[int, str]] = Field(None, description="Task returned when the conversation started")


class Credentials(BaseModel):
    """Freshly generated identities and signatures for one session."""

    sdkAppId: int
    userSig: str
    robotSig: str
    userId: str
    robotId: str
    roomId: int


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str
    required: Optional[List[str]] = None
    missing: Optional[List[str]] = None
    code: Optional[str] = None
    requestId: Optional[str] = None
    detail: Optional[List[Dict[str, Any]]] = None
