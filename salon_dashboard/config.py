from functools import lru_cache
from typing import Annotated, List
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = Field(default="Pride Barbers Dashboard API")
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "*",
        ]
    )
    backend_base_url: AnyHttpUrl | None = Field(
        default=None
    )
    backend_timeout: float = Field(
        default=10.0
    )
    use_local_store: bool = Field(
        default=True
    )
    shop_timezone: str | None = Field(
        default=None,
        description="IANA zone used to evaluate 'today' and 'this week'.",
    )
    jwt_secret: str = Field(
        default="pride_barbers_secret_key"
    )
    jwt_algorithm: str = Field(
        default="HS256"
    )
    token_expire_minutes: int = Field(
        default=60
    )
    admin_email: str = Field(
        default="admin@admin.com"
    )
    admin_password: str = Field(
        default="123456"
    )

    model_config = SettingsConfigDict(env_prefix="SALON_", case_sensitive=False)

    @field_validator("cors_origins", mode="before")
    def _split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("shop_timezone")
    def _check_timezone(cls, value):
        if value:
            try:
                ZoneInfo(value)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ValueError(f"Unknown timezone '{value}'") from exc
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()
