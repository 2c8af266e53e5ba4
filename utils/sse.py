from __future__ import annotations

import json
import uuid
from typing import Any

__all__ = ["format_sse", "json_event"]


def format_sse(event: str, data: str, *, event_id: str | None = None) -> str:
    """Return one Server-Sent Events frame; multi-line data is split across data lines."""

    if event_id is None:
        event_id = uuid.uuid4().hex
    lines = [f"id: {event_id}", f"event: {event}"]
    lines.extend(f"data: {line}" for line in data.splitlines() or [""])
    return "\n".join(lines) + "\n\n"


def json_event(event: str, payload: Any, *, event_id: str | None = None) -> str:
    """JSON-encode *payload* (pydantic models included) into an SSE frame."""

    if hasattr(payload, "model_dump"):
        payload = payload.model_dump(mode="json")

    return format_sse(event, json.dumps(payload, ensure_ascii=False, default=str), event_id=event_id)
