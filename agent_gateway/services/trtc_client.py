"""
Client for the TRTC conversational-AI API.

This module wraps the official Tencent Cloud SDK to start and stop AI
conversations. The wrapper is stateless: it keeps only the account
configuration and builds a fresh SDK client for each call. SDK failures are
converted to ``RemoteError`` and never retried.
"""

import json
import logging
from typing import Any, Dict

from tencentcloud.common import credential
from tencentcloud.common.exception.tencent_cloud_sdk_exception import TencentCloudSDKException
from tencentcloud.common.profile.client_profile import ClientProfile
from tencentcloud.common.profile.http_profile import HttpProfile
from tencentcloud.trtc.v20190722 import models, trtc_client

from agent_gateway.config.constants import LOGGER_NAME
from agent_gateway.config.settings import ApiConfig
from agent_gateway.errors import RemoteError

logger = logging.getLogger(LOGGER_NAME)


class ConversationClient:
    """
    Issues StartAIConversation and StopAIConversation calls.

    Authentication uses the account's SecretId/SecretKey, which is separate
    from the per-user UserSig carried inside the request parameters.
    """

    def __init__(self, api_config: ApiConfig):
        """
        Initialize the client.

        Args:
            api_config: Account credentials, region and endpoint
        """
        self.api_config = api_config

    def _create_client(self) -> trtc_client.TrtcClient:
        cred = credential.Credential(self.api_config.secret_id, self.api_config.secret_key)
        http_profile = HttpProfile()
        http_profile.endpoint = self.api_config.endpoint
        client_profile = ClientProfile()
        client_profile.httpProfile = http_profile
        return trtc_client.TrtcClient(cred, self.api_config.region, client_profile)

    def start_conversation(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Start an AI conversation in a TRTC room.

        Args:
            params: StartAIConversation parameters (SdkAppId, RoomId, AgentConfig,
                STTConfig, LLMConfig, TTSConfig)

        Returns:
            The provider response, including TaskId and RequestId

        Raises:
            RemoteError: If the provider rejects the call or cannot be reached
        """
        try:
            client = self._create_client()
            request = models.StartAIConversationRequest()
            request.from_json_string(json.dumps(params, ensure_ascii=False))
            response = client.StartAIConversation(request)
        except TencentCloudSDKException as e:
            logger.error(f"Failed to start AI conversation: {e}")
            raise RemoteError(e.get_code(), e.get_message(), e.get_request_id()) from e

        data = json.loads(response.to_json_string())
        logger.info(f"Started AI conversation in room {params.get('RoomId')}: task {data.get('TaskId')}")
        return data

    def stop_conversation(self, task_id: str) -> Dict[str, Any]:
        """
        Stop a running AI conversation.

        Args:
            task_id: The TaskId returned by ``start_conversation``

        Returns:
            The provider acknowledgement

        Raises:
            RemoteError: If the provider rejects the call or cannot be reached
        """
        try:
            client = self._create_client()
            request = models.StopAIConversationRequest()
            request.from_json_string(json.dumps({"TaskId": task_id}))
            response = client.StopAIConversation(request)
        except TencentCloudSDKException as e:
            logger.error(f"Failed to stop AI conversation {task_id}: {e}")
            raise RemoteError(e.get_code(), e.get_message(), e.get_request_id()) from e

        logger.info(f"Stopped AI conversation task {task_id}")
        return json.loads(response.to_json_string())
