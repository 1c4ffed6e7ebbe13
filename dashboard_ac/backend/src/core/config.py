"""Application configuration utilities."""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings derived from environment variables."""

    environment: str = Field(default="development", alias="ENVIRONMENT")
    database_url: str = Field(
        default="sqlite:///./dashboard_ac.db", alias="DATABASE_URL"
    )
    jwt_secret: str = Field(default="your-secret-key", alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_ttl_minutes: int = Field(
        default=15, alias="ACCESS_TOKEN_TTL_MINUTES"
    )
    refresh_token_ttl_minutes: int = Field(
        default=60 * 24 * 7, alias="REFRESH_TOKEN_TTL_MINUTES"
    )
    bcrypt_rounds: int = Field(default=12, alias="BCRYPT_ROUNDS")
    seed_admin_email: str = Field(
        default="admin@dashboardac.com", alias="SEED_ADMIN_EMAIL"
    )
    seed_admin_password: str = Field(default="admin123", alias="SEED_ADMIN_PASSWORD")
    seed_admin_name: str = Field(default="Administrator", alias="SEED_ADMIN_NAME")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @property
    def access_token_ttl(self) -> timedelta:
        return timedelta(minutes=self.access_token_ttl_minutes)

    @property
    def refresh_token_ttl(self) -> timedelta:
        return timedelta(minutes=self.refresh_token_ttl_minutes)

    @property
    def allowed_origins(self) -> list[str]:
        """Return the configured CORS origins as a list."""

        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
