"""FastAPI dependencies."""

from fastapi import Request
from app_startup.state import AppState


def get_app_state(request: Request) -> AppState:
    """AppState installed on the app by the lifespan (overridden in tests)."""
    return request.app.state
