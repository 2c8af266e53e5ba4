import logging
from dataclasses import dataclass
from typing import Any

from agents import Agent, Runner, RunConfig
from agents.items import TResponseInputItem

from content_agents.state import ContentRunContext


logger = logging.getLogger(__name__)


@dataclass
class TurnResult:
    """Outcome of one agent run: its final output and the conversation so far."""

    final_output: Any
    input_items: list[TResponseInputItem]


async def run_agent_turn(
    agent: Agent,
    input_items: list[TResponseInputItem],
    *,
    context: ContentRunContext,
    run_config: RunConfig,
    max_turns: int,
) -> TurnResult:
    """
    Run the agent once without streaming.

    Args:
        agent: The agent to run
        input_items: Conversation to continue
        context: Per-invocation context handed to the tools
        run_config: Run configuration
        max_turns: Model calls allowed inside this run

    Returns:
        TurnResult with the final output and the extended conversation
    """
    result = await Runner.run(
        agent,
        input=input_items,
        context=context,
        run_config=run_config,
        max_turns=max_turns,
    )
    logger.debug("Agent run finished - agent: %s, items: %d", agent.name, len(result.new_items))
    return TurnResult(final_output=result.final_output, input_items=result.to_input_list())
