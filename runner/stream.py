import logging
import asyncio
from typing import Any

from agents import Agent, Runner, RunConfig
from agents.items import TResponseInputItem

from content_agents.state import ContentRunContext
from runner.turns import TurnResult


logger = logging.getLogger(__name__)


def describe_tool_call(raw_item: Any) -> tuple[str | None, Any]:
    """Extract a tool name and its arguments from a raw tool call item."""
    tool_name = None
    tool_args = None
    # ResponseFunctionToolCall and McpCall have 'name' and 'arguments'
    if hasattr(raw_item, "name"):
        tool_name = getattr(raw_item, "name", None)
    if hasattr(raw_item, "arguments"):
        tool_args = getattr(raw_item, "arguments", None)
    elif isinstance(raw_item, dict):
        tool_name = raw_item.get("name")
        tool_args = raw_item.get("arguments")
    return tool_name, tool_args


async def run_agent_turn_streamed(
    agent: Agent,
    input_items: list[TResponseInputItem],
    *,
    context: ContentRunContext,
    run_config: RunConfig,
    max_turns: int,
    event_queue: asyncio.Queue,
    session_id: str,
) -> TurnResult:
    """
    Run the agent once with streaming, forwarding progress to a queue.

    Args:
        agent: The agent to run
        input_items: Conversation to continue
        context: Per-invocation context handed to the tools
        run_config: Run configuration
        max_turns: Model calls allowed inside this run
        event_queue: Queue receiving (event_type, payload) tuples
        session_id: Session ID for logging

    Returns:
        TurnResult with the final output and the extended conversation
    """
    await event_queue.put(("agent_run", {"agent": agent.name}))

    result = Runner.run_streamed(
        agent,
        input=input_items,
        context=context,
        run_config=run_config,
        max_turns=max_turns,
    )

    tool_call_count = 0

    async for event in result.stream_events():
        if event.type == "raw_response_event":
            if (
                hasattr(event.data, "type")
                and event.data.type == "response.reasoning_summary_text.delta"
            ):
                await event_queue.put(("reasoning_delta", {"content": event.data.delta}))

        elif event.type == "run_item_stream_event":
            if event.item.type == "tool_call_item":
                tool_name, tool_args = describe_tool_call(getattr(event.item, "raw_item", None))
                tool_call_count += 1

                logger.info(
                    "Tool called - session_id: %s, tool: %s, tool_call_count: %d, args: %s",
                    session_id, tool_name, tool_call_count, tool_args
                )
                await event_queue.put(("tool_call", {"tool": tool_name, "arguments": tool_args}))

            elif event.item.type == "tool_call_output_item":
                output = event.item.output

                logger.debug(
                    "Tool output received - session_id: %s, output_preview: %s",
                    session_id, str(output)[:200]
                )
                await event_queue.put(("tool_output", {"content": str(output)}))

    logger.info(
        "Agent run completed - session_id: %s, tool_calls: %d",
        session_id, tool_call_count
    )

    final_output_text = str(result.final_output) if result.final_output else ""
    await event_queue.put(("final_response", {"content": final_output_text}))

    return TurnResult(final_output=result.final_output, input_items=result.to_input_list())
