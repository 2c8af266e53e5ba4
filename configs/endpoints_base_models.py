from pydantic import BaseModel, Field
from typing import Optional, Union

from content_agents.network import LoopStatus


class ContentRequest(BaseModel):
    user_message: str = Field(min_length=1, description="Natural-language content request")


class ContentResponse(BaseModel):
    session_id: str = Field(..., description="Session ID for tracking the run")
    status: LoopStatus = Field(..., description="stopped when the agent signalled completion, aborted otherwise")
    output: str = Field("", description="Final output of the last agent run")
    rounds: int = Field(0, description="Number of agent runs")
    title: Optional[str] = None
    word_count: Optional[Union[int, float]] = None
    summary: Optional[str] = None
    reason: Optional[str] = Field(None, description="Why the run was aborted")


class SQLQueryRequest(BaseModel):
    """Request model for executing SQL statements in testing endpoints"""
    sql: str = Field(description="SQL statement to execute")
