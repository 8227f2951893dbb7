import pytest
from fastapi.testclient import TestClient

from agent_gateway.config.settings import AgentConfig
from agent_gateway.errors import RemoteError
from agent_gateway.main import app, create_app


class TestStartConversationEndpoint:

    def test_start_conversation(self, test_client, mock_conversation_client, user_info):
        response = test_client.post("/conversations", json={"userInfo": user_info})

        assert response.status_code == 200
        assert response.json() == {"TaskId": "task-123", "RequestId": "req-1"}
        mock_conversation_client.start_conversation.assert_called_once()
        params = mock_conversation_client.start_conversation.call_args.args[0]
        assert params["RoomId"] == "123456"

    def test_string_room_id(self, test_client, mock_conversation_client, user_info):
        user_info["roomId"] = "room-42"
        response = test_client.post("/conversations", json={"userInfo": user_info})

        assert response.status_code == 200
        params = mock_conversation_client.start_conversation.call_args.args[0]
        assert params["RoomId"] == "room-42"

    def test_missing_room_id(self, test_client, mock_conversation_client, user_info):
        del user_info["roomId"]
        response = test_client.post("/conversations", json={"userInfo": user_info})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Missing required fields in userInfo"
        assert body["required"] == ["sdkAppId", "roomId", "robotId", "robotSig", "userId"]
        assert body["missing"] == ["roomId"]
        mock_conversation_client.start_conversation.assert_not_called()

    def test_missing_body(self, test_client, mock_conversation_client):
        response = test_client.post("/conversations")

        assert response.status_code == 400
        mock_conversation_client.start_conversation.assert_not_called()

    def test_invalid_json(self, test_client, mock_conversation_client):
        response = test_client.post(
            "/conversations",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"
        mock_conversation_client.start_conversation.assert_not_called()

    def test_non_numeric_sdk_app_id(self, test_client, user_info):
        user_info["sdkAppId"] = "not-a-number"
        response = test_client.post("/conversations", json={"userInfo": user_info})

        assert response.status_code == 400

    def test_remote_error(self, test_client, mock_conversation_client, user_info):
        mock_conversation_client.start_conversation.side_effect = RemoteError(
            "AuthFailure.SecretIdNotFound", "The SecretId is not found", "req-7"
        )
        response = test_client.post("/conversations", json={"userInfo": user_info})

        assert response.status_code == 500
        assert response.json() == {
            "error": "The SecretId is not found",
            "code": "AuthFailure.SecretIdNotFound",
            "requestId": "req-7",
        }

    def test_numeric_identities_are_sent_as_strings(self, test_client, mock_conversation_client, user_info):
        user_info.update({"robotId": 9001, "robotSig": 42, "userId": 1001})
        response = test_client.post("/conversations", json={"userInfo": user_info})

        assert response.status_code == 200
        agent = mock_conversation_client.start_conversation.call_args.args[0]["AgentConfig"]
        assert agent["UserId"] == "9001"
        assert agent["UserSig"] == "42"
        assert agent["TargetUserId"] == "1001"

    def test_unexpected_error_returns_json(self, test_app, mock_conversation_client, user_info):
        mock_conversation_client.start_conversation.side_effect = RuntimeError("boom")
        client = TestClient(test_app, raise_server_exceptions=False)

        response = client.post("/conversations", json={"userInfo": user_info})

        assert response.status_code == 500
        assert response.json() == {"error": "boom"}


class TestStopConversationEndpoint:

    def test_stop_conversation(self, test_client, mock_conversation_client):
        response = test_client.request("DELETE", "/conversations", json={"TaskId": "task-123"})

        assert response.status_code == 200
        assert response.json() == {"RequestId": "req-2"}
        mock_conversation_client.stop_conversation.assert_called_once_with("task-123")

    def test_numeric_task_id(self, test_client, mock_conversation_client):
        response = test_client.request("DELETE", "/conversations", json={"TaskId": 12345})

        assert response.status_code == 200
        mock_conversation_client.stop_conversation.assert_called_once_with("12345")

    def test_unexpected_error_returns_json(self, test_app, mock_conversation_client):
        mock_conversation_client.stop_conversation.side_effect = ConnectionResetError("connection reset")
        client = TestClient(test_app, raise_server_exceptions=False)

        response = client.request("DELETE", "/conversations", json={"TaskId": "task-123"})

        assert response.status_code == 500
        assert response.json() == {"error": "connection reset"}

    def test_missing_task_id(self, test_client, mock_conversation_client):
        response = test_client.request("DELETE", "/conversations", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required TaskId field"}
        mock_conversation_client.stop_conversation.assert_not_called()

    def test_remote_error(self, test_client, mock_conversation_client):
        mock_conversation_client.stop_conversation.side_effect = RemoteError(
            "FailedOperation", "task not exist"
        )
        response = test_client.request("DELETE", "/conversations", json={"TaskId": "gone"})

        assert response.status_code == 500
        assert response.json()["error"] == "task not exist"


class TestCredentialsEndpoint:

    def test_returns_six_fields(self, test_client, agent_config):
        response = test_client.post("/credentials")

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"sdkAppId", "userSig", "robotSig", "userId", "robotId", "roomId"}
        assert body["sdkAppId"] == agent_config.trtc.sdk_app_id
        assert isinstance(body["roomId"], int)
        assert body["userSig"] != body["robotSig"]

    def test_unconfigured_signing(self):
        client = TestClient(create_app(AgentConfig(static_dir="does-not-exist")))
        response = client.post("/credentials")

        assert response.status_code == 500
        assert "error" in response.json()


def test_health_check(test_client):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "provider_configured": True,
        "signing_configured": True,
    }


def test_root_endpoint(test_client, agent_config):
    response = test_client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "AI Conversation Gateway"
    assert body["version"] == "1.0.0"
    assert body["agent"]["name"] == agent_config.card.name
    assert "POST /conversations" in body["endpoints"]


def test_cors_headers(test_client):
    response = test_client.get("/health", headers={"Origin": "http://example.com"})

    assert "access-control-allow-origin" in response.headers


def test_static_files(tmp_path, agent_config):
    (tmp_path / "conversation.html").write_text("<html>conversation</html>")
    config = agent_config.model_copy(update={"static_dir": str(tmp_path)})
    client = TestClient(create_app(config))

    response = client.get("/conversation.html")

    assert response.status_code == 200
    assert "conversation" in response.text
    assert response.headers["cache-control"] == "public, max-age=60"
    assert "etag" in response.headers

    # API routes still take precedence over the static mount
    assert client.get("/health").status_code == 200
    assert client.get("/missing.html").status_code == 404


def test_module_app_configuration():
    assert app.title == "AI Conversation Gateway"
    assert isinstance(app.state.config, AgentConfig)

    route_paths = app.openapi()["paths"]
    assert "/conversations" in route_paths
    assert "/credentials" in route_paths
    assert "/health" in route_paths


def test_openapi_documents_error_responses(test_client):
    schema = test_client.get("/openapi.json").json()

    start = schema["paths"]["/conversations"]["post"]["responses"]
    assert "400" in start
    assert "500" in start
    assert "ErrorResponse" in schema["components"]["schemas"]
