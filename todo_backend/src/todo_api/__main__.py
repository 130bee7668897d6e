"""
Run the Todo API with uvicorn.

Usage:
    python -m todo_api
    todo-api

Host, port and log level come from the HOST, PORT and LOG_LEVEL env vars.
"""
from __future__ import annotations

import logging

import uvicorn

from .logging_setup import setup_logging
from .settings import get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def main() -> None:
    """Configure logging and serve the default application."""
    settings = get_settings()
    setup_logging(settings.log_level)

    from .main import app

    logger.info("Todo API server is running on port %d", settings.port)
    logger.info("Health check: http://localhost:%d/health", settings.port)
    logger.info("API base URL: http://localhost:%d/api", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
