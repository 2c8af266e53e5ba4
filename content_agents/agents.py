"""Agent factory functions."""

from agents import Agent, RunConfig

from content_agents.content_creator import ContentCreatorAgent


def create_content_creator_agent(run_config: RunConfig, mcp_servers: list = None) -> Agent:
    """
    Create the Content Creator agent.

    Args:
        run_config: Run configuration with model settings
        mcp_servers: Connected MCP servers to expose to the agent

    Returns:
        Configured Content Creator agent
    """
    return ContentCreatorAgent(run_config=run_config, mcp_servers=mcp_servers)
