"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3000
    covergen_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["*"]

    # Keyword photo service A
    pixabay_api_key: str = ""

    # Outbound services
    icon_service_url: str = "https://api.iconify.design"
    picsum_url: str = "https://picsum.photos"
    pixabay_api_url: str = "https://pixabay.com/api/"
    pexels_search_url: str = "https://www.pexels.com/search"
    http_timeout: float = Field(default=10.0, gt=0)

    # Icon cache
    icon_cache_capacity: int = Field(default=512, ge=1)
    icon_cache_ttl_seconds: float = Field(default=86400.0, gt=0)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
