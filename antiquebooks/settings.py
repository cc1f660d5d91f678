"""Application settings via Pydantic Settings."""

from functools import lru_cache
import json
from typing import Annotated, Literal

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


def _parse_str_list(v: object) -> list[str]:
    """
    Accept either:
    - JSON array string: '["en","sk"]'
    - Comma-separated string: "en,sk"
    - Already-parsed list[str]
    """
    if v is None:
        return []
    if isinstance(v, list):
        return [str(x).strip() for x in v if str(x).strip()]
    if isinstance(v, str):
        s = v.strip()
        if not s:
            return []
        if s.startswith("["):
            try:
                parsed = json.loads(s)
            except json.JSONDecodeError:
                # Fall back to comma split if env var isn't valid JSON.
                parsed = s.split(",")
            if isinstance(parsed, list):
                return [str(x).strip() for x in parsed if str(x).strip()]
            return [str(parsed).strip()]
        return [part.strip() for part in s.split(",") if part.strip()]
    return [str(v).strip()] if str(v).strip() else []


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Antique Books API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Redis (cart persistence)
    redis_url: str = "redis://localhost:6379/0"

    # Cart
    cart_backend: Literal["redis", "memory"] = Field(
        default="redis",
        description="Persistence backend for carts. Falls back to memory if Redis is unreachable.",
    )
    cart_namespace: str = "antiquebooks_cart_v1"
    cart_currency: str = Field(default="EUR", min_length=3, max_length=3)

    # Static documents
    data_dir: str = "data"
    i18n_dir: str = "i18n"
    catalog_base_url: str = Field(
        default="",
        validation_alias=AliasChoices("CATALOG_BASE_URL"),
        description="If set, catalog and i18n documents are fetched from this URL once at startup",
    )

    # Locales
    supported_locales: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["en", "sk", "de"])
    default_locale: str = "en"

    placeholder_image: str = "assets/images/placeholder.jpg"

    # CORS
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        validation_alias=AliasChoices("CORS_ORIGINS", "ALLOWED_ORIGINS"),
    )

    @field_validator("cors_origins", "supported_locales", mode="before")
    @classmethod
    def _parse_lists(cls, v: object) -> list[str]:
        return _parse_str_list(v)

    @field_validator("cart_currency")
    @classmethod
    def _upper_currency(cls, v: str) -> str:
        return v.upper()

    @model_validator(mode="after")
    def _check_default_locale(self) -> "Settings":
        """Default locale must be servable; it terminates every fallback chain."""
        self.supported_locales = [loc.lower() for loc in self.supported_locales]
        self.default_locale = self.default_locale.lower()
        if not self.supported_locales:
            self.supported_locales = [self.default_locale]
        if self.default_locale not in self.supported_locales:
            raise ValueError(
                f"default_locale={self.default_locale!r} is not in supported_locales={self.supported_locales}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
