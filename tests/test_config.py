"""
Tests for settings parsing and the capability proxy URL.
"""
from urllib.parse import parse_qs, urlparse

import pytest
from pydantic import ValidationError

from configs.config import (
    DEFAULT_PORT,
    GEMINI_OPENAI_BASE_URL,
    MissingConfigurationError,
    Settings,
)
from utils.capability_proxy import (
    build_capability_proxy_url,
    connect_capability_proxy,
    create_capability_proxy,
)


FULL_ENV = {
    "GEMINI_API_KEY": "gemini-key",
    "SMITHERY_API_KEY": "smithery-key",
    "DATABASE_URL": "postgresql://u:p@host/db?sslmode=require",
}


class TestSettings:

    def test_defaults(self):
        settings = Settings.from_env(FULL_ENV)

        assert settings.llm_provider == "gemini"
        assert settings.llm_api_key == "gemini-key"
        assert settings.llm_model == "gemini-2.5-flash"
        assert settings.llm_base_url == GEMINI_OPENAI_BASE_URL
        assert settings.port == DEFAULT_PORT == 3010
        assert settings.db_connection_policy == "per_call"
        assert settings.missing_required() == []

    def test_openai_provider(self):
        env = {**FULL_ENV, "LLM_PROVIDER": "openai", "OPENAI_API_KEY": "sk-test"}

        settings = Settings.from_env(env)

        assert settings.llm_api_key == "sk-test"
        assert settings.llm_base_url is None
        assert settings.llm_model == "gpt-5-mini"

    def test_overrides(self):
        env = {
            **FULL_ENV,
            "LLM_API_KEY": "override",
            "LLM_MODEL": "gemini-2.5-pro",
            "PORT": "8080",
            "DB_CONNECTION_POLICY": "pooled",
            "NETWORK_MAX_ROUNDS": "4",
            "NETWORK_TIMEOUT_SECONDS": "90",
            "LOG_LEVEL": "debug",
        }

        settings = Settings.from_env(env)

        assert settings.llm_api_key == "override"
        assert settings.llm_model == "gemini-2.5-pro"
        assert settings.port == 8080
        assert settings.db_connection_policy == "pooled"
        assert settings.max_network_rounds == 4
        assert settings.network_timeout_seconds == 90.0
        assert settings.log_level == "DEBUG"

    def test_missing_required_lists_every_variable(self):
        settings = Settings.from_env({})

        assert settings.missing_required() == ["GEMINI_API_KEY", "SMITHERY_API_KEY", "DATABASE_URL"]
        with pytest.raises(MissingConfigurationError) as exc_info:
            settings.require()
        assert exc_info.value.missing == ["GEMINI_API_KEY", "SMITHERY_API_KEY", "DATABASE_URL"]
        assert "DATABASE_URL" in str(exc_info.value)

    def test_require_returns_settings_when_complete(self):
        settings = Settings.from_env(FULL_ENV)
        assert settings.require() is settings

    @pytest.mark.parametrize("key, value", [
        ("PORT", "not-a-port"),
        ("DB_CONNECTION_POLICY", "sometimes"),
        ("LLM_PROVIDER", "unknown"),
        ("NETWORK_MAX_ROUNDS", "0"),
    ])
    def test_invalid_values_rejected(self, key, value):
        with pytest.raises(ValidationError):
            Settings.from_env({**FULL_ENV, key: value})


class TestCapabilityProxyUrl:

    def test_query_parameters(self):
        url = build_capability_proxy_url("https://server.smithery.ai/neon/mcp", "key 123", "profile-a")

        parsed = urlparse(url)
        assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == "https://server.smithery.ai/neon/mcp"
        assert parse_qs(parsed.query) == {"api_key": ["key 123"], "profile": ["profile-a"]}

    def test_base_with_existing_query(self):
        url = build_capability_proxy_url("https://proxy.example/mcp?region=eu", "k", "p")
        assert parse_qs(urlparse(url).query) == {"region": ["eu"], "api_key": ["k"], "profile": ["p"]}


class _UnreachableProxy:
    name = "capability-proxy"

    async def connect(self):
        raise ConnectionError("proxy unreachable")


class _ReachableProxy:
    name = "capability-proxy"

    def __init__(self):
        self.connected = False

    async def connect(self):
        self.connected = True


class TestCapabilityProxyConnection:

    @pytest.mark.asyncio
    async def test_unreachable_proxy_is_reported_not_raised(self, caplog):
        assert await connect_capability_proxy(_UnreachableProxy()) is False
        assert "proxy unreachable" in caplog.text

    @pytest.mark.asyncio
    async def test_reachable_proxy(self):
        proxy = _ReachableProxy()
        assert await connect_capability_proxy(proxy) is True
        assert proxy.connected is True

    def test_server_uses_built_url(self):
        settings = Settings.from_env(FULL_ENV)

        server = create_capability_proxy(settings)

        assert server.name == "capability-proxy"
        assert server.params["url"].startswith("https://server.smithery.ai/neon/mcp?api_key=smithery-key")
