import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()

STORE_KINDS = ("memory", "redis")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Storage
    whisky_store: str = os.getenv("WHISKY_STORE", "memory").lower()
    seed_data: bool = os.getenv("SEED_DATA", "true").lower() == "true"

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    redis_key_prefix: str = os.getenv("REDIS_KEY_PREFIX", "whisky")

    # HTTP
    api_prefix: str = os.getenv("API_PREFIX", "/rest/whiskys")
    max_body_size: int = int(os.getenv("MAX_BODY_SIZE", "-1"))  # -1 = unlimited

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8080"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    @property
    def uses_redis(self) -> bool:
        """Check if whiskies are persisted in Redis."""
        return self.whisky_store == "redis"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.whisky_store not in STORE_KINDS:
            raise ValueError(f"WHISKY_STORE must be one of {list(STORE_KINDS)}, got {self.whisky_store!r}")

        if not self.api_prefix.startswith("/") or self.api_prefix.endswith("/"):
            raise ValueError(f"API_PREFIX must start with '/' and not end with one, got {self.api_prefix!r}")

        if self.max_body_size < -1:
            raise ValueError("MAX_BODY_SIZE must be -1 (unlimited) or a byte count")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client(app_settings: Settings | None = None) -> redis.Redis:
    """Create a Redis client instance."""
    app_settings = app_settings or settings
    return redis.from_url(
        app_settings.redis_url,
        password=app_settings.redis_password,
        decode_responses=True,
    )
