import logging
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from agent_gateway.config.settings import (
    AgentConfig,
    ApiConfig,
    LLMConfig,
    TrtcConfig,
    TTSConfig,
)
from agent_gateway.main import create_app, get_conversation_client
from agent_gateway.services.trtc_client import ConversationClient

TEST_SDK_APP_ID = 1400000001
TEST_SECRET_KEY = "test-trtc-secret"


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before each test"""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    logging.basicConfig(level=logging.NOTSET)
    yield


@pytest.fixture
def agent_config():
    """Fully configured agent settings without static files"""
    return AgentConfig(
        api=ApiConfig(secret_id="test-secret-id", secret_key="test-secret-key"),
        trtc=TrtcConfig(sdk_app_id=TEST_SDK_APP_ID, secret_key=TEST_SECRET_KEY),
        llm=LLMConfig(Model="gpt-4o-mini", APIUrl="https://llm.example.com/v1", APIKey="llm-key"),
        tts=TTSConfig(APIKey="tts-key", APIUrl="https://tts.example.com", VoiceId="default-voice"),
        static_dir="does-not-exist",
    )


@pytest.fixture
def user_info():
    """A complete userInfo block for POST /conversations"""
    return {
        "sdkAppId": TEST_SDK_APP_ID,
        "roomId": 123456,
        "robotId": "ai_123456",
        "robotSig": "robot-sig",
        "userId": "user_123456",
    }


@pytest.fixture
def mock_conversation_client():
    client = MagicMock(spec=ConversationClient)
    client.start_conversation.return_value = {"TaskId": "task-123", "RequestId": "req-1"}
    client.stop_conversation.return_value = {"RequestId": "req-2"}
    return client


@pytest.fixture
def test_app(agent_config, mock_conversation_client):
    application = create_app(agent_config)
    application.dependency_overrides[get_conversation_client] = lambda: mock_conversation_client
    return application


@pytest.fixture
def test_client(test_app):
    return TestClient(test_app)
