from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ANNOQUERY_", case_sensitive=False)

    log_level: str = "INFO"

    # api
    host: str = "127.0.0.1"
    port: int = 8000
    max_query_length: int = 2000


settings = Settings()
