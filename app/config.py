"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Type-safe configuration sourced from .env / environment."""

    # LLM provider
    llm_provider: str = "gemini"  # gemini | ollama
    llm_timeout_seconds: int = 30
    llm_max_retries: int = 2
    llm_temperature: float = 0.2

    # Gemini
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"

    # Ollama (local development without an API key)
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.2"

    # /generate-plan
    plan_timeout_seconds: int = 45

    # Latest plan storage
    persist_latest_plan: bool = True
    plan_store_path: str = "./.planner/latest_plan.json"

    # HTTP server
    server_host: str = "127.0.0.1"
    server_port: int = 5000
    cors_origins: list[str] = ["http://localhost:5173"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
