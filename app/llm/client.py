"""Factories for the structured-output chat model."""

from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_ollama import ChatOllama

from app.config import settings
from app.schemas.planner import PLANNER_RESPONSE_SCHEMA


def get_chat_model():
    """Return a chat model configured from settings.

    Both providers are constrained to ``PLANNER_RESPONSE_SCHEMA`` so the
    response body is the planner array itself.

    Returns
    -------
    langchain_core.language_models.BaseChatModel
        ``ChatGoogleGenerativeAI`` for Gemini, ``ChatOllama`` for a local model.

    Raises
    ------
    RuntimeError
        If Gemini is selected and no API key is configured.
    ValueError
        If ``LLM_PROVIDER`` names an unknown provider.
    """
    provider = settings.llm_provider.lower()
    if provider == "gemini":
        if not settings.gemini_api_key:
            raise RuntimeError("GEMINI_API_KEY is not configured")
        return ChatGoogleGenerativeAI(
            model=settings.gemini_model,
            google_api_key=settings.gemini_api_key,
            temperature=settings.llm_temperature,
            timeout=settings.llm_timeout_seconds,
            max_retries=settings.llm_max_retries,
            response_mime_type="application/json",
            response_schema=PLANNER_RESPONSE_SCHEMA,
        )
    if provider == "ollama":
        return ChatOllama(
            base_url=settings.ollama_base_url,
            model=settings.ollama_model,
            temperature=settings.llm_temperature,
            format=PLANNER_RESPONSE_SCHEMA,
            client_kwargs={"timeout": settings.llm_timeout_seconds},
        )
    raise ValueError(f"Unknown LLM provider: {settings.llm_provider}")


def describe_model() -> dict:
    """Return the provider/model pair currently configured."""
    provider = settings.llm_provider.lower()
    model = settings.ollama_model if provider == "ollama" else settings.gemini_model
    return {"provider": provider, "model": model}
