"""Content creator agent: research, write, persist, signal completion."""

from agents import RunConfig

import content_agents.prompts as prompts
from content_agents.base import BaseContentAgent
from tools.content_tools import done, run_sql, test_connection


COMPLETION_TOOL_NAME = "done"


class ContentCreatorAgent(BaseContentAgent):
    """
    Single agent driving the content workflow.

    Capabilities:
    - Check and prepare the PostgreSQL database
    - Research through the capability proxy's MCP tools
    - Store the written content
    - Signal completion through the done tool, which ends the run
    """

    def __init__(self, run_config: RunConfig, mcp_servers: list = None):
        """
        Initialize the Content Creator agent.

        Args:
            run_config: Run configuration with model settings
            mcp_servers: Connected capability proxy servers, if any
        """
        super().__init__(
            name="Content Creator Agent",
            instructions=prompts.CONTENT_CREATOR_INSTRUCTIONS,
            run_config=run_config,
            tools=[
                test_connection,
                run_sql,
                done,
            ],
            mcp_servers=mcp_servers,
            tool_use_behavior={"stop_at_tool_names": [COMPLETION_TOOL_NAME]},
        )
