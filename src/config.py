"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    # Empty disables auth on the tool endpoints.
    tool_bearer_token: str = ""

    fetch_timeout_seconds: float = 15.0
    fetch_connect_timeout_seconds: float = 5.0
    fetch_max_redirects: int = 5
    user_agent: str = "speed-heuristics-checker/0.1"

    port: int = 3000
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
