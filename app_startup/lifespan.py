"""FastAPI lifespan management."""

import os
import logging
from typing import AsyncIterator
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from fastapi import FastAPI

from app_startup.state import AppStateManager

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
        ]
    )
    # Set uvicorn logger to use the same configuration
    logging.getLogger("uvicorn").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(level)


# Global state manager
state_manager = AppStateManager()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage FastAPI application lifespan."""
    load_dotenv()
    configure_logging(os.getenv("LOG_LEVEL", "INFO").upper())
    logger.info("Starting the application...")

    app_state = await state_manager.startup()
    app.state = app_state

    try:
        yield
    finally:
        await state_manager.shutdown()
        logger.info("Application shutdown complete")
