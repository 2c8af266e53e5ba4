from openai import AsyncOpenAI, DefaultAioHttpClient
from agents import ModelSettings, RunConfig
from agents.models.interface import Model
from agents.models.openai_chatcompletions import OpenAIChatCompletionsModel
from agents.models.openai_responses import OpenAIResponsesModel

from configs.config import Settings


def create_llm_client(settings: Settings) -> AsyncOpenAI:
    # Gemini is reached through its OpenAI-compatible endpoint
    return AsyncOpenAI(
        api_key=settings.llm_api_key,
        base_url=settings.llm_base_url,
        http_client=DefaultAioHttpClient(),
    )


def create_model(settings: Settings, openai_client: AsyncOpenAI) -> Model:
    if settings.llm_provider == "openai":
        return OpenAIResponsesModel(settings.llm_model, openai_client=openai_client)
    return OpenAIChatCompletionsModel(settings.llm_model, openai_client=openai_client)


def create_model_settings(settings: Settings) -> ModelSettings:
    # Tool calls are issued one at a time; the Gemini endpoint rejects the flag
    if settings.llm_provider == "openai":
        return ModelSettings(parallel_tool_calls=False, truncation="auto")
    return ModelSettings()


def create_run_config(
    model: Model,
    model_settings: ModelSettings | None = None,
    session_id: str | None = None,
) -> RunConfig:

    metadata = {
        "trace_name": "content-creation",
        "tags": ["content-creator"],
    }
    if session_id:
        metadata["session_id"] = session_id

    return RunConfig(
        model=model,
        model_settings=model_settings,
        workflow_name="content-creation",
        trace_metadata=metadata,
        tracing_disabled=True,
    )
