"""API router for content creation endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse

from app_startup.state import AppState
from app_startup.dependencies import get_app_state
from api.content.schemas import ContentRequest, ContentResponse
from api.content.runners import run_content_network, run_content_network_stream

router = APIRouter(prefix="/content", tags=["content"])


@router.post("/create", response_model=ContentResponse)
async def create_content(
    request: ContentRequest,
    session_id: Optional[str] = Query(None, alias="session-id"),
    app_state: AppState = Depends(get_app_state),
):
    """
    Research, write and store content, returning once the agent signals completion.

    Args:
        request: Contains the natural-language content request
        session_id: Optional session ID for log correlation
        app_state: Application state with the content network

    Returns:
        Network outcome with the completion confirmation and result metadata
    """
    return await run_content_network(request, app_state, session_id)


@router.post("/stream")
async def stream_content(
    request: ContentRequest,
    session_id: Optional[str] = Query(None, alias="session-id"),
    app_state: AppState = Depends(get_app_state),
):
    """Same as /create, streaming tool calls and outputs as Server-Sent Events."""
    return StreamingResponse(
        run_content_network_stream(request, app_state, session_id),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "Connection": "keep-alive"}
    )
