"""Application state management."""

import logging
from typing import Optional
from pydantic import BaseModel, ConfigDict
from openai import AsyncOpenAI
from agents.mcp import MCPServerStreamableHttp

from configs.config import Settings
from configs.database import Database
from content_agents.agents import create_content_creator_agent
from content_agents.network import ContentNetwork
from utils.capability_proxy import connect_capability_proxy, create_capability_proxy
from utils.create_config import (
    create_llm_client,
    create_model,
    create_model_settings,
    create_run_config,
)

logger = logging.getLogger(__name__)


class AppState(BaseModel):
    """FastAPI application state."""

    settings: Settings
    openai_client: Optional[AsyncOpenAI] = None
    database: Database
    network: ContentNetwork
    capability_proxy: Optional[MCPServerStreamableHttp] = None
    port: int

    model_config = ConfigDict(arbitrary_types_allowed=True)


class AppStateManager:
    """Manages the application state lifecycle."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._state: Optional[AppState] = None

    @property
    def state(self) -> Optional[AppState]:
        return self._state

    async def startup(self) -> AppState:
        """Initialize application state."""
        if self._state is not None:
            return self._state

        logger.info("Starting application state initialization...")

        settings = (self._settings or Settings.from_env()).require()

        openai_client = create_llm_client(settings)
        logger.info(f"LLM client created - provider: {settings.llm_provider}, model: {settings.llm_model}")

        database = Database(settings.database_url, policy=settings.db_connection_policy)
        logger.info(f"Database configured - host: {database.url.host}, policy: {settings.db_connection_policy}")

        capability_proxy = create_capability_proxy(settings)
        if not await connect_capability_proxy(capability_proxy):
            capability_proxy = None

        run_config = create_run_config(
            model=create_model(settings, openai_client),
            model_settings=create_model_settings(settings),
        )
        agent = create_content_creator_agent(
            run_config,
            mcp_servers=[capability_proxy] if capability_proxy else [],
        )
        network = ContentNetwork(
            agent=agent,
            database=database,
            run_config=run_config,
            max_rounds=settings.max_network_rounds,
            max_agent_turns=settings.max_agent_turns,
            timeout_seconds=settings.network_timeout_seconds,
        )

        self._state = AppState(
            settings=settings,
            openai_client=openai_client,
            database=database,
            network=network,
            capability_proxy=capability_proxy,
            port=settings.port,
        )

        logger.info("Application state initialized successfully")
        return self._state

    async def shutdown(self) -> None:
        """Clean up application state."""
        if self._state is None:
            return

        logger.info("Shutting down application state...")

        if self._state.capability_proxy is not None:
            try:
                await self._state.capability_proxy.cleanup()
                logger.info("Capability proxy disconnected")
            except Exception as e:
                logger.warning(f"Error disconnecting capability proxy: {str(e)}")

        await self._state.database.dispose()

        if self._state.openai_client is not None:
            await self._state.openai_client.close()
            logger.info("LLM client closed")

        self._state = None
        logger.info("Application state shutdown complete")
