"""Remote MCP capability proxy (research and database-assist tools)."""

import logging
from urllib.parse import urlencode

from agents.mcp import MCPServerStreamableHttp

from configs.config import Settings


logger = logging.getLogger(__name__)

CAPABILITY_PROXY_NAME = "capability-proxy"


def build_capability_proxy_url(base_url: str, api_key: str, profile: str) -> str:
    """Append the API key and routing profile to the proxy base URL as query parameters."""
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{urlencode({'api_key': api_key, 'profile': profile})}"


def create_capability_proxy(settings: Settings) -> MCPServerStreamableHttp:
    url = build_capability_proxy_url(
        settings.capability_proxy_url,
        settings.capability_proxy_api_key or "",
        settings.capability_proxy_profile,
    )
    return MCPServerStreamableHttp(
        params={"url": url, "timeout": 30},
        name=CAPABILITY_PROXY_NAME,
        cache_tools_list=True,
        client_session_timeout_seconds=60,
    )


async def connect_capability_proxy(server: MCPServerStreamableHttp) -> bool:
    """Connect to the proxy; returns False (and logs) when it is unreachable."""
    try:
        await server.connect()
    except Exception as e:
        logger.warning(f"Capability proxy unavailable, continuing without research tools: {str(e)}")
        return False
    logger.info(f"Connected to capability proxy: {server.name}")
    return True
