"""
Logging setup for the gateway.

The ``agent_gateway`` logger writes to stdout and to a rotating file. The
server's own ``uvicorn.error`` logger is given the same handlers, so startup
and shutdown messages land in the same file as request logs; uvicorn's access
log is disabled in favour of the gateway's request middleware.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from agent_gateway.config.constants import LOGGER_NAME

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_NAME = "agent_gateway.log"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5

# Third-party loggers that share the gateway's handlers
SHARED_LOGGERS = ["uvicorn.error"]


def _build_handlers(log_dir: Path) -> List[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    handlers: List[logging.Handler] = [console_handler]

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
    except OSError as e:
        sys.stderr.write(f"Could not set up file logging in {log_dir}: {e}\n")

    return handlers


def _install(logger: logging.Logger, handlers: List[logging.Handler], level: int):
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def configure_logging(level: Optional[str] = None, log_dir: Optional[str] = None):
    """
    Configure the gateway logger and the loggers that share its output.

    Args:
        level: Level name; defaults to the LOG_LEVEL environment variable, then INFO
        log_dir: Directory for the rotating log file; defaults to LOG_DIR, then ./logs

    Returns:
        logging.Logger: The configured ``agent_gateway`` logger
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    handlers = _build_handlers(Path(log_dir or os.getenv("LOG_DIR", "logs")))

    logger = logging.getLogger(LOGGER_NAME)
    _install(logger, handlers, numeric_level)
    for name in SHARED_LOGGERS:
        _install(logging.getLogger(name), handlers, numeric_level)

    logger.info(f"Logging configured at {logging.getLevelName(numeric_level)}")
    return logger
