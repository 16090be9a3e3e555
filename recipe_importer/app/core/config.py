import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    llm_base_url: str = Field(
        "https://generativelanguage.googleapis.com/v1beta/openai", alias="LLM_BASE_URL"
    )
    llm_model_name: str = Field("gemini-2.0-flash", alias="LLM_MODEL_NAME")
    llm_api_key: str | None = Field(None, alias="GEMINI_API_KEY")
    llm_timeout_seconds: float = Field(60.0, alias="LLM_TIMEOUT_SECONDS")
    llm_max_tokens: int = Field(2048, alias="LLM_MAX_TOKENS")
    scraper_user_agent: str = Field(
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        alias="SCRAPER_USER_AGENT",
    )
    fetch_timeout_seconds: float = Field(10.0, alias="FETCH_TIMEOUT_SECONDS")
    page_text_max_chars: int = Field(40000, alias="PAGE_TEXT_MAX_CHARS")
    jsonld_max_depth: int = Field(10, alias="JSONLD_MAX_DEPTH")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    try:
        settings = Settings()
    except PermissionError:
        logger.warning("Unable to read .env; continuing with environment variables only")
        settings = Settings(_env_file=None)
    return settings
