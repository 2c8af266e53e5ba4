import json
import logging

from agents import RunContextWrapper, function_tool

from content_agents.state import ContentRunContext, RunState, WordCount, format_completion_message
from utils.database_service import DatabaseService


logger = logging.getLogger(__name__)


def complete_content(state: RunState, title: str, word_count: WordCount, summary: str) -> str:
    """Record completion on the run state and build the confirmation for the agent."""
    state.record_completion(title, word_count, summary)

    logger.info(f"Content completed: {state.title} ({state.word_count} words)")
    logger.info(f"Summary: {state.summary}")

    return format_completion_message(state.title, state.word_count, state.summary)


@function_tool
async def run_sql(ctx: RunContextWrapper[ContentRunContext], sql: str) -> str:
    """
    Execute a single SQL statement against the PostgreSQL content database.

    Use it to create tables, insert content and query stored rows. Each call
    runs on its own connection.

    Args:
        sql: One complete SQL statement, e.g. "CREATE TABLE IF NOT EXISTS ..." or
            "INSERT ... RETURNING id"

    Returns:
        JSON object with success flag and rows/rowCount, message/insertedId or
        message/command; on failure error and suggestion
    """
    result = await DatabaseService.execute_sql(sql, ctx.context.database)
    return json.dumps(result, default=str)


@function_tool
async def test_connection(ctx: RunContextWrapper[ContentRunContext]) -> str:
    """
    Check that the PostgreSQL database is reachable.

    Returns:
        JSON object with success flag, server time and PostgreSQL version, or error
    """
    result = await DatabaseService.test_connection(ctx.context.database)
    return json.dumps(result, default=str)


@function_tool
def done(ctx: RunContextWrapper[ContentRunContext], title: str, word_count: float, summary: str) -> str:
    """
    Call this tool when content creation is finished.

    Args:
        title: Title of the created content
        word_count: How many words in the content
        summary: Brief summary of what was created

    Returns:
        Confirmation message
    """
    return complete_content(ctx.context.state, title, word_count, summary)
