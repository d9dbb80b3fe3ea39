from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    openai_api_key: Optional[str] = Field(default=None, validation_alias="OPENAI_API_KEY")
    llm_model: str = Field(default="gpt-4o-mini", validation_alias="LLM_MODEL")
    llm_max_retries: int = Field(default=2, validation_alias="LLM_MAX_RETRIES")
    llm_timeout: Optional[float] = Field(default=None, validation_alias="LLM_TIMEOUT")
    redis_url: Optional[str] = Field(default=None, validation_alias="REDIS_URL")
    cache_prefix: str = Field(default="movistore_cache_v1_", validation_alias="CACHE_PREFIX")
    cache_ttl_seconds: int = Field(default=60 * 60, validation_alias="CACHE_TTL_SECONDS")
    log_json: bool = Field(default=False, validation_alias="LOG_JSON")

    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()
