"""
AI Conversation Gateway - HTTP front end for the TRTC conversational-AI API

This application lets a browser client hold a voice conversation with an AI
agent in a Tencent Cloud TRTC room. The browser asks the gateway for
credentials, joins the room, and then asks the gateway to start the AI
participant; the provider runs speech recognition, the language model and
speech synthesis.

Key Components:
- config: Constants, logging setup and the immutable AgentConfig loaded from the environment
- handlers: Request handlers for conversations and credentials
- models: Pydantic schemas for request and response bodies
- services: The TRTC API client and UserSig generation
- main: FastAPI application, middleware and routes

Getting Started:
1. Set up environment variables (or a .env file):
   - TENCENT_SECRET_ID / TENCENT_SECRET_KEY: Tencent Cloud API credentials
   - TRTC_SDK_APP_ID / TRTC_SECRET_KEY: TRTC application id and signing key
   - LLM_MODEL, LLM_API_URL, LLM_API_KEY: OpenAI-compatible language model
   - TTS_API_KEY, TTS_API_URL, TTS_VOICE_ID: Speech synthesis
   - HOST / PORT: Bind address (default 127.0.0.1:3000)

2. Start the server:
   ```bash
   python run.py
   ```
"""
