"""Application configuration management."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Centralised application settings derived from environment variables."""

    anthropic_api_key: str | None = Field(
        default=None,
        description="Anthropic API key. When unset every plan request is served by the fallback generator.",
    )
    anthropic_model: str = Field(default="claude-sonnet-4-5-20250929")
    ai_max_tokens: int = Field(default=4096, ge=256)
    ai_temperature: float = Field(default=0.7, ge=0.0, le=1.0)
    ai_request_timeout_seconds: float = Field(default=60.0, gt=0)
    prompt_config_path: Path = Field(
        default=PACKAGE_DIR / "prompts" / "weekly_plan.yaml",
        description="YAML file holding the weekly plan prompt template.",
    )

    app_host: str = Field(default="0.0.0.0")
    app_port: int = Field(default=3000, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    debug: bool = Field(default=False)

    log_level: str = Field(default="INFO")
    log_dir: Path = Field(default=Path("logs"))
    log_to_file: bool = Field(default=True, description="Also write logs to LOG_DIR/fitplan.log.")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("anthropic_api_key")
    @classmethod
    def blank_key_is_unset(cls, value: str | None) -> str | None:
        """Treat empty or placeholder keys as missing."""

        if value is None or value.strip().lower() in {"", "change-me", "changeme"}:
            return None
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        valid = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        upper = value.upper()
        if upper not in valid:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(sorted(valid))}")
        return upper

    @property
    def ai_configured(self) -> bool:
        return self.anthropic_api_key is not None


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance so it can be reused across the app."""

    settings = Settings()
    if settings.log_to_file:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
    return settings
