"""
Run script for starting the AI Conversation Gateway server.

This script checks that the provider and signing credentials are configured
and starts the FastAPI application with uvicorn.

Usage:
    python run.py [--port PORT] [--host HOST] [--log-level LEVEL]
"""

import argparse
import os
import sys
from pathlib import Path

import dotenv
import uvicorn

from agent_gateway.config.constants import DEFAULT_HOST, DEFAULT_PORT
from agent_gateway.config.logging_config import configure_logging
from agent_gateway.config.settings import AgentConfig

# Load environment variables from .env file if it exists
env_path = Path(".") / ".env"
if env_path.exists():
    dotenv.load_dotenv(env_path)

logger = configure_logging()


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Start the AI Conversation Gateway server"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", str(DEFAULT_PORT))),
        help=f"Port to run the server on (default: {DEFAULT_PORT} or PORT env var)",
    )
    parser.add_argument(
        "--host",
        default=os.getenv("HOST", DEFAULT_HOST),
        help=f"Host to bind the server to (default: {DEFAULT_HOST} or HOST env var)",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO").upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO or LOG_LEVEL env var)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for starting the server."""
    args = parse_args(argv)
    configure_logging(args.log_level)

    config = AgentConfig.from_env()
    missing = config.missing_settings()
    if missing:
        logger.error(f"Required environment variables not set: {', '.join(missing)}")
        print(f"Error: {', '.join(missing)} must be set in the environment or a .env file")
        sys.exit(1)

    logger.info(f"Starting server on http://{args.host}:{args.port}")
    logger.info(f"Log level: {args.log_level}")
    logger.info(f"Provider region: {config.api.region}, endpoint: {config.api.endpoint}")
    logger.info(f"TRTC SDK app id: {config.trtc.sdk_app_id}")

    uvicorn.run(
        "agent_gateway.main:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
        # Keep the handlers installed by configure_logging
        log_config=None,
        # Requests are logged by our own middleware
        access_log=False,
        reload=os.getenv("ENV", "production").lower() == "development",
    )


if __name__ == "__main__":
    main()
