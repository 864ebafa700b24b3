import os
from dataclasses import dataclass, field
from functools import lru_cache

import redis.asyncio as redis
from dotenv import load_dotenv

load_dotenv()


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Origin (Supabase / PostgREST)
    origin_url: str = os.getenv("SUPABASE_URL", "http://localhost:54321")
    origin_key: str = os.getenv("SUPABASE_ANON_KEY", "")
    articles_table: str = os.getenv("ARTICLES_TABLE", "articles")
    origin_timeout: float = float(os.getenv("ORIGIN_TIMEOUT", "30"))

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    cache_namespace: str = os.getenv("CACHE_NAMESPACE", "articles")

    # CORS
    cors_allow_origins: tuple[str, ...] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ALLOW_ORIGINS", "*"))
    )

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "info")
    log_format: str = os.getenv("LOG_FORMAT", "console")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.origin_timeout <= 0:
            raise ValueError("ORIGIN_TIMEOUT must be a positive number of seconds")

        if not self.articles_table:
            raise ValueError("ARTICLES_TABLE must not be empty")

        if self.log_format not in ("console", "json"):
            raise ValueError(f"LOG_FORMAT must be 'console' or 'json', got {self.log_format!r}")

    @property
    def rest_url(self) -> str:
        """Base URL of the PostgREST API exposed by the origin."""
        return f"{self.origin_url.rstrip('/')}/rest/v1"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_redis_client(settings: Settings) -> redis.Redis:
    """Create an asyncio Redis client from settings."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )
