"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL: embedded SQLite file or networked PostgreSQL.
VALID_DATABASE_URL_PREFIXES = (
    "sqlite://",
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
    "postgres+psycopg2://",
)


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "127.0.0.1"
    PORT: int = 3000
    API_V1_PREFIX: str = "/api/v1"

    DATABASE_URL: str = "sqlite:///./data.db"

    # Session cookie. SESSION_SECRET is mandatory in prod; see resolve_session_secret().
    SESSION_SECRET: SecretStr | None = None
    SESSION_ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "pacs_session"
    SESSION_COOKIE_SECURE: bool = False
    SESSION_TTL_HOURS: int = 24

    # Bootstrap
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: SecretStr = SecretStr("admin")
    SEED_DEMO_CONTENT: bool = True

    # Shop checkout is an email draft addressed here.
    SHOP_CONTACT_EMAIL: str = "contact@pacs-simpa.org"

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a SQLite or PostgreSQL URL "
                "(e.g. sqlite:///./data.db or postgresql+psycopg2://...)"
            )
        return v.strip()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = (v or "").strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("SESSION_TTL_HOURS")
    @classmethod
    def validate_session_ttl(cls, v: int) -> int:
        if v < 1 or v > 720:
            raise ValueError(
                "SESSION_TTL_HOURS must be between 1 and 720 (1 hour to 30 days)"
            )
        return v

    @field_validator("SESSION_ALGORITHM")
    @classmethod
    def validate_session_algorithm(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("SESSION_ALGORITHM must be set and non-empty")
        return v.strip()

    @field_validator("SESSION_SECRET")
    @classmethod
    def validate_session_secret(cls, v: SecretStr | None) -> SecretStr | None:
        if v is not None and not v.get_secret_value().strip():
            return None
        return v

    @field_validator("DEFAULT_ADMIN_USERNAME")
    @classmethod
    def validate_default_admin_username(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DEFAULT_ADMIN_USERNAME must be set and non-empty")
        return v.strip()

    @model_validator(mode="after")
    def require_session_secret_in_prod(self) -> "Settings":
        if self.APP_ENV == "prod" and self.SESSION_SECRET is None:
            raise ValueError("SESSION_SECRET must be set when APP_ENV=prod")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
