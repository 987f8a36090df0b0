"""Catalog Browser Configuration"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Catalog Browser"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001

    # Catalog views
    related_limit: int = 4
    default_view_kind: str = "catalog"
    view_max_age_hours: int = 24

    # CORS
    cors_origins: list[str] = ["*"]

    class Config:
        env_file = "config/.env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
