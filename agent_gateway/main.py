"""
FastAPI server for the TRTC conversational-AI gateway.

This module builds the FastAPI application that fronts the Tencent Cloud TRTC
conversational-AI API. It exposes endpoints to start and stop an AI
conversation in a TRTC room and to mint UserSig credentials for a browser
client, and serves the client's static files.

The configuration is loaded once from the environment (and an optional .env
file) and attached to the application; handlers receive it through FastAPI
dependencies.
"""

import os
import time
from pathlib import Path
from typing import Optional

import dotenv
from fastapi import APIRouter, Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from agent_gateway.config.constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    STATIC_MAX_AGE_SECONDS,
)
from agent_gateway.config.logging_config import configure_logging
from agent_gateway.config.settings import AgentConfig
from agent_gateway.errors import GatewayError
from agent_gateway.handlers import conversation_handlers, credential_handlers
from agent_gateway.models.request_schemas import (
    Credentials,
    ErrorResponse,
    StartConversationRequest,
    StopConversationRequest,
)
from agent_gateway.services.trtc_client import ConversationClient

# Load environment variables from .env file if it exists
env_path = Path(".") / ".env"
if env_path.exists():
    dotenv.load_dotenv(env_path)

# Configure logging
logger = configure_logging()

APP_NAME = "AI Conversation Gateway"
APP_DESCRIPTION = "HTTP gateway for the Tencent Cloud TRTC conversational-AI API"
APP_VERSION = "1.0.0"


def get_config(request: Request) -> AgentConfig:
    """Return the configuration attached to the running application."""
    return request.app.state.config


def get_conversation_client(config: AgentConfig = Depends(get_config)) -> ConversationClient:
    """Build a provider client for the current request."""
    return ConversationClient(config.api)


router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid request fields"},
    500: {"model": ErrorResponse, "description": "Signing or provider failure"},
}


@router.post("/conversations", responses=ERROR_RESPONSES)
def start_ai_conversation(
    body: Optional[StartConversationRequest] = Body(None),
    config: AgentConfig = Depends(get_config),
    client: ConversationClient = Depends(get_conversation_client),
):
    """Start an AI conversation in the room described by ``userInfo``.

    Returns:
        dict: The provider response, including the TaskId needed to stop it.
    """
    return conversation_handlers.start_conversation(body, config, client)


@router.delete("/conversations", responses=ERROR_RESPONSES)
def stop_ai_conversation(
    body: Optional[StopConversationRequest] = Body(None),
    client: ConversationClient = Depends(get_conversation_client),
):
    """Stop the AI conversation identified by ``TaskId``."""
    return conversation_handlers.stop_conversation(body, client)


@router.post("/credentials", response_model=Credentials, responses={500: ERROR_RESPONSES[500]})
def create_credentials(config: AgentConfig = Depends(get_config)):
    """Generate a room id, user and robot identities, and their UserSigs."""
    return credential_handlers.generate_credentials(config)


@router.get("/health")
def health_check(config: AgentConfig = Depends(get_config)):
    """Health check endpoint for monitoring system status.

    Returns:
        dict: Status information, including whether provider and signing
        credentials are configured.
    """
    return {
        "status": "healthy",
        "provider_configured": config.provider_configured,
        "signing_configured": config.signing_configured,
    }


@router.get("/")
def root(config: AgentConfig = Depends(get_config)):
    """Root endpoint to display basic information about the API and the agent."""
    return {
        "name": APP_NAME,
        "description": APP_DESCRIPTION,
        "version": APP_VERSION,
        "agent": config.card.model_dump(),
        "endpoints": {
            "POST /conversations": "Start an AI conversation",
            "DELETE /conversations": "Stop an AI conversation",
            "POST /credentials": "Generate user and robot credentials",
            "/health": "Health check endpoint",
        },
    }


class CachedStaticFiles(StaticFiles):
    """Static files served with a short public cache lifetime."""

    def file_response(self, *args, **kwargs):
        response = super().file_response(*args, **kwargs)
        response.headers.setdefault("Cache-Control", f"public, max-age={STATIC_MAX_AGE_SECONDS}")
        return response


async def gateway_error_handler(request: Request, exc: GatewayError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"{request.method} {request.url.path} invalid body: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "detail": jsonable_errors(exc)},
    )


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"{request.method} {request.url.path} failed unexpectedly: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


def jsonable_errors(exc: RequestValidationError):
    # ctx may hold exception instances that are not JSON serializable
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


def create_app(config: AgentConfig) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        config: Immutable configuration shared by all requests

    Returns:
        FastAPI: The configured application
    """
    application = FastAPI(
        title=APP_NAME,
        description=APP_DESCRIPTION,
        version=APP_VERSION,
    )
    application.state.config = config

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} "
            f"{response.headers.get('content-length', '-')} - {elapsed_ms:.3f} ms"
        )
        return response

    application.add_exception_handler(GatewayError, gateway_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_error_handler)
    application.add_exception_handler(Exception, unexpected_error_handler)
    application.include_router(router)

    # Mounted last so API routes take precedence
    static_dir = Path(config.static_dir)
    if static_dir.is_dir():
        application.mount("/", CachedStaticFiles(directory=static_dir, html=True), name="static")
        logger.info(f"Serving static files from {static_dir.resolve()}")
    else:
        logger.info(f"Static directory {static_dir} not found, static files disabled")

    missing = config.missing_settings()
    if missing:
        logger.warning(f"Missing configuration: {', '.join(missing)}")

    return application


app = create_app(AgentConfig.from_env())


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", DEFAULT_HOST)
    port = int(os.getenv("PORT", str(DEFAULT_PORT)))
    logger.info(f"Starting server on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_config=None)
