"""Base agent class for content agents."""

from agents import Agent, RunConfig
from typing import Optional


class BaseContentAgent(Agent):
    """
    Base class for all content agents.

    Binds the model and model settings from a run config so every agent built
    from the same config talks to the same provider.
    """

    def __init__(
        self,
        name: str,
        instructions: str,
        run_config: RunConfig,
        tools: list = None,
        mcp_servers: list = None,
        tool_use_behavior=None,
        output_type: Optional[type] = None,
    ):
        """
        Initialize a base content agent.

        Args:
            name: Agent name
            instructions: Agent instructions/prompt
            run_config: Run configuration with model and model settings
            tools: List of tools available to the agent
            mcp_servers: Connected MCP servers whose tools the agent may call
            tool_use_behavior: How tool results end a run (see agents.Agent)
            output_type: Expected output type/schema
        """
        agent_kwargs = {
            "name": name,
            "instructions": instructions,
            "tools": tools or [],
            "mcp_servers": mcp_servers or [],
            "model": run_config.model,
            "reset_tool_choice": True,
        }

        if tool_use_behavior is not None:
            agent_kwargs["tool_use_behavior"] = tool_use_behavior

        if output_type:
            agent_kwargs["output_type"] = output_type

        if run_config.model_settings is not None:
            agent_kwargs["model_settings"] = run_config.model_settings

        super().__init__(**agent_kwargs)
