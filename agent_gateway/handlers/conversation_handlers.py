"""
Handlers for starting and stopping AI conversations.

These functions validate the request bodies, assemble the StartAIConversation
parameters from the request and the static configuration, and delegate to the
``ConversationClient``. Errors propagate as ``GatewayError`` subclasses.
"""

import json
import logging
from typing import Any, Dict, Optional

from agent_gateway.config.constants import LOGGER_NAME, REQUIRED_USER_INFO_FIELDS
from agent_gateway.config.settings import AgentConfig
from agent_gateway.errors import ValidationError
from agent_gateway.models.request_schemas import (
    StartConversationRequest,
    StopConversationRequest,
    UserInfo,
)
from agent_gateway.services.trtc_client import ConversationClient

logger = logging.getLogger(LOGGER_NAME)


def build_start_params(user_info: UserInfo, config: AgentConfig) -> Dict[str, Any]:
    """
    Assemble StartAIConversation parameters.

    Room and participant ids are always sent as strings. LLMConfig and TTSConfig travel as
    JSON strings, STTConfig as a structure. A ``voiceId`` in the request
    replaces the configured TTS voice.

    Args:
        user_info: Validated identities from the request
        config: Static agent configuration

    Returns:
        Parameter dictionary ready for the provider
    """
    tts_config = config.tts.model_dump()
    tts_config["VoiceId"] = user_info.voiceId or config.tts.VoiceId

    return {
        "SdkAppId": user_info.sdkAppId,
        "RoomId": str(user_info.roomId),
        "AgentConfig": {
            "UserId": str(user_info.robotId),
            "UserSig": str(user_info.robotSig),
            "TargetUserId": str(user_info.userId),
            **config.agent.model_dump(),
        },
        "STTConfig": config.stt.model_dump(),
        "LLMConfig": json.dumps(config.llm.model_dump(), ensure_ascii=False),
        "TTSConfig": json.dumps(tts_config, ensure_ascii=False),
    }


def start_conversation(
    request: Optional[StartConversationRequest],
    config: AgentConfig,
    client: ConversationClient,
) -> Dict[str, Any]:
    """
    Handle POST /conversations.

    Args:
        request: Parsed request body, None if the body was empty
        config: Static agent configuration
        client: Provider client

    Returns:
        The provider response

    Raises:
        ValidationError: If userInfo or any of its required fields is missing
        RemoteError: If the provider call fails
    """
    user_info = request.userInfo if request else None
    missing = user_info.missing_fields() if user_info else list(REQUIRED_USER_INFO_FIELDS)
    if missing:
        logger.warning(f"Rejecting start request, missing fields: {missing}")
        raise ValidationError(
            "Missing required fields in userInfo",
            required=list(REQUIRED_USER_INFO_FIELDS),
            missing=missing,
        )

    params = build_start_params(user_info, config)
    logger.info(
        f"Starting AI conversation: room={params['RoomId']} "
        f"robot={user_info.robotId} user={user_info.userId}"
    )
    return client.start_conversation(params)


def stop_conversation(
    request: Optional[StopConversationRequest],
    client: ConversationClient,
) -> Dict[str, Any]:
    """
    Handle DELETE /conversations.

    Raises:
        ValidationError: If TaskId is missing
        RemoteError: If the provider call fails
    """
    task_id = request.TaskId if request else None
    if not task_id:
        logger.warning("Rejecting stop request without TaskId")
        raise ValidationError("Missing required TaskId field")

    logger.info(f"Stopping AI conversation task {task_id}")
    return client.stop_conversation(str(task_id))
