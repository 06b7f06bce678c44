from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    seed_tasks: bool = True
    # Keep 400 for not-found and get-by-id serialization failures.
    legacy_status_codes: bool = True

    model_config = SettingsConfigDict(env_prefix="TASKS_API_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
