"""
Pydantic models for request and response bodies.
"""

from agent_gateway.models.request_schemas import (
    Credentials,
    ErrorResponse,
    StartConversationRequest,
    StopConversationRequest,
    UserInfo,
)
