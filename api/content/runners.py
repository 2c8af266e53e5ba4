"""Business logic for content network execution."""

import uuid
import asyncio
import logging
from contextlib import suppress
from functools import partial
from typing import AsyncGenerator, Optional

from fastapi import HTTPException

from app_startup.state import AppState
from api.content.schemas import ContentRequest, ContentResponse
from content_agents.network import LoopStatus
from runner.stream import run_agent_turn_streamed
from utils.sse import json_event

logger = logging.getLogger(__name__)


def new_session_id() -> str:
    return f"session_{uuid.uuid4().hex}"


async def run_content_network(
    request: ContentRequest,
    app_state: AppState,
    session_id: Optional[str] = None,
) -> ContentResponse:
    """
    Run the content network to completion and return its outcome.

    Args:
        request: Content request with the user message
        app_state: Application state holding the network
        session_id: Session ID for logging, generated when absent

    Returns:
        ContentResponse built from the network outcome
    """
    session_id = session_id or new_session_id()
    try:
        outcome = await app_state.network.run(request.user_message, session_id=session_id)
    except Exception as e:
        logger.error("Content network error - session_id: %s, error: %s", session_id, str(e))
        raise HTTPException(status_code=502, detail=str(e))

    return ContentResponse(session_id=session_id, **outcome.model_dump())


async def run_content_network_stream(
    request: ContentRequest,
    app_state: AppState,
    session_id: Optional[str] = None,
) -> AsyncGenerator[str, None]:
    """
    Run the content network, streaming agent progress as SSE events.

    Yields:
        SSE formatted events: start, agent events, completed or aborted
        (or error), then done
    """
    session_id = session_id or new_session_id()
    event_queue: asyncio.Queue = asyncio.Queue()

    yield json_event("start", {"status": "started", "session_id": session_id})

    async def process_network():
        """Run the network and put events in the queue"""
        try:
            turn_runner = partial(
                run_agent_turn_streamed,
                event_queue=event_queue,
                session_id=session_id,
            )
            outcome = await app_state.network.run(
                request.user_message,
                turn_runner=turn_runner,
                session_id=session_id,
            )
            event_type = "completed" if outcome.status is LoopStatus.STOPPED else "aborted"
            await event_queue.put((event_type, outcome.model_dump(mode="json")))

        except Exception as e:
            error_msg = str(e)
            logger.error("Content network stream error - session_id: %s, error: %s", session_id, error_msg)
            await event_queue.put(("error", {"message": error_msg}))

        finally:
            await event_queue.put(("done", {}))

    process_task = asyncio.create_task(process_network())

    try:
        while True:
            event_type, event_data = await event_queue.get()

            # include session_id in each event payload
            payload = {"session_id": session_id, **(event_data or {})}
            yield json_event(event_type, payload)

            if event_type == "done":
                break
    finally:
        # a disconnected client closes the generator early; the run must not outlive it
        if not process_task.done():
            logger.info("Client disconnected, cancelling content network - session_id: %s", session_id)
            process_task.cancel()
        with suppress(asyncio.CancelledError):
            await process_task
