"""Content creator agent FastAPI application."""

import sys
import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from pydantic import ValidationError

from app_startup.dependencies import get_app_state
from app_startup.lifespan import configure_logging, lifespan
from api.content.router import router as content_router
from configs.config import MissingConfigurationError, Settings
from testing_endpoints.router import get_testing_router

logger = logging.getLogger(__name__)

# Create FastAPI app with lifespan management
app = FastAPI(title="Content Creator Agent", lifespan=lifespan)
app.include_router(content_router)
app.include_router(get_testing_router(get_app_state))


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


def main() -> None:
    """Validate configuration and serve the app."""
    import uvicorn

    load_dotenv()
    try:
        settings = Settings.from_env()
    except ValidationError as e:
        configure_logging()
        logger.critical(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(settings.log_level)

    try:
        settings.require()
    except MissingConfigurationError as e:
        logger.critical(str(e))
        sys.exit(1)

    uvicorn.run(app, host="0.0.0.0", port=settings.port, use_colors=True)


if __name__ == "__main__":
    main()
