"""Service settings read from the process environment."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from configs.types import ConnectionPolicy, LLMProvider


GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"

DEFAULT_MODELS: dict[str, str] = {
    "gemini": "gemini-2.5-flash",
    "openai": "gpt-5-mini",
}

PROVIDER_KEY_VARS: dict[str, str] = {
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
}

DEFAULT_CAPABILITY_PROXY_URL = "https://server.smithery.ai/neon/mcp"
DEFAULT_CAPABILITY_PROXY_PROFILE = "international-ladybug-KAgGBh"
DEFAULT_PORT = 3010


class MissingConfigurationError(RuntimeError):
    """Raised when required environment variables are absent."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            "Missing required environment variables: " + ", ".join(missing)
        )


class Settings(BaseModel):
    """Runtime configuration for the content creator service."""

    llm_provider: LLMProvider = "gemini"
    llm_api_key: Optional[str] = None
    llm_model: str = DEFAULT_MODELS["gemini"]
    llm_base_url: Optional[str] = None

    capability_proxy_api_key: Optional[str] = None
    capability_proxy_url: str = DEFAULT_CAPABILITY_PROXY_URL
    capability_proxy_profile: str = DEFAULT_CAPABILITY_PROXY_PROFILE

    database_url: Optional[str] = None
    db_connection_policy: ConnectionPolicy = "per_call"

    port: int = DEFAULT_PORT
    max_network_rounds: int = Field(default=10, ge=1)
    max_agent_turns: int = Field(default=30, ge=1)
    network_timeout_seconds: float = Field(default=600.0, gt=0)
    log_level: str = "INFO"

    @property
    def llm_key_var(self) -> str:
        return PROVIDER_KEY_VARS[self.llm_provider]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Missing credentials are left as None so callers can report all of
        them at once via missing_required().
        """
        env = os.environ if environ is None else environ
        provider = env.get("LLM_PROVIDER", "gemini").strip().lower()

        values = {
            "llm_provider": provider,
            "llm_api_key": env.get("LLM_API_KEY") or env.get(PROVIDER_KEY_VARS.get(provider, "")),
            "llm_model": env.get("LLM_MODEL") or DEFAULT_MODELS.get(provider, DEFAULT_MODELS["gemini"]),
            "llm_base_url": env.get("LLM_BASE_URL") or (GEMINI_OPENAI_BASE_URL if provider == "gemini" else None),
            "capability_proxy_api_key": env.get("SMITHERY_API_KEY"),
            "capability_proxy_url": env.get("CAPABILITY_PROXY_URL", DEFAULT_CAPABILITY_PROXY_URL),
            "capability_proxy_profile": env.get("CAPABILITY_PROXY_PROFILE", DEFAULT_CAPABILITY_PROXY_PROFILE),
            "database_url": env.get("DATABASE_URL"),
            "db_connection_policy": env.get("DB_CONNECTION_POLICY", "per_call").strip().lower(),
            "port": env.get("PORT", DEFAULT_PORT),
            "max_network_rounds": env.get("NETWORK_MAX_ROUNDS", 10),
            "max_agent_turns": env.get("AGENT_MAX_TURNS", 30),
            "network_timeout_seconds": env.get("NETWORK_TIMEOUT_SECONDS", 600.0),
            "log_level": env.get("LOG_LEVEL", "INFO").upper(),
        }
        return cls(**values)

    def missing_required(self) -> list[str]:
        missing = []
        if not self.llm_api_key:
            missing.append(self.llm_key_var)
        if not self.capability_proxy_api_key:
            missing.append("SMITHERY_API_KEY")
        if not self.database_url:
            missing.append("DATABASE_URL")
        return missing

    def require(self) -> "Settings":
        missing = self.missing_required()
        if missing:
            raise MissingConfigurationError(missing)
        return self
