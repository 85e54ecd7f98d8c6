# qa_service/app/config.py

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from environment variables or a .env file."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    database_url: str = "postgresql+asyncpg://postgres:postgres@db:5432/questions"
    database_pool_size: int = 5
    database_echo: bool = False

    # "database" or "memory"
    store_backend: str = "database"
    seed_questions: bool = True
    require_question_text: bool = True

    cors_origins: list[str] = ["*"]

    log_level: str = "INFO"
    log_format: str = "text"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_asyncpg_driver(cls, v):
        # postgres:// and postgresql:// both need the async driver spelled out
        if isinstance(v, str):
            for prefix in ("postgres://", "postgresql://"):
                if v.startswith(prefix):
                    return "postgresql+asyncpg://" + v[len(prefix):]
        return v

    @field_validator("store_backend")
    @classmethod
    def known_backend(cls, v: str) -> str:
        v = v.lower()
        if v not in ("database", "memory"):
            raise ValueError("store_backend must be 'database' or 'memory'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
