from __future__ import annotations

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from complaint_assistant.core.errors import ConfigError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # LLM
    llm_provider: str = "openai"
    llm_model: str = "gpt-4"
    llm_base_url: str = "https://api.openai.com/v1"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 2000
    llm_timeout: Optional[float] = None  # None = transport default
    llm_startup_check: bool = True

    # API keys
    OPENAI_API_KEY: Optional[str] = None
    GEMINI_API_KEY: Optional[str] = None

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    @field_validator("OPENAI_API_KEY", "GEMINI_API_KEY")
    @classmethod
    def _strip_key(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None

    def api_key(self) -> Optional[str]:
        provider = (self.llm_provider or "").lower().strip()
        if provider == "openai":
            return self.OPENAI_API_KEY
        if provider == "gemini":
            return self.GEMINI_API_KEY
        return None


def load_settings(**overrides) -> Settings:
    """Read settings and check the completion-service credential is present.

    Raises ConfigError instead of exiting so the caller decides what to do
    before any socket is opened.
    """
    settings = Settings(**overrides)
    provider = (settings.llm_provider or "").lower().strip()

    if provider not in ("openai", "gemini"):
        raise ConfigError(f"Unsupported llm provider: {settings.llm_provider}. Use openai or gemini")

    if not settings.api_key():
        raise ConfigError(f"{provider.upper()}_API_KEY is required but not set")

    return settings
