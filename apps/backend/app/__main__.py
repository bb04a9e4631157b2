"""Proxy service entry point."""

import logging

import uvicorn

from app.config import settings

logger = logging.getLogger(__name__)


if __name__ == "__main__":
    logger.info("Starting proxy service...")

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
