from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


PRODUCTION_ORIGIN = "https://heros20.github.io"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_body_limit: int = Field(500, ge=0)

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8000
    root_path: str = ""

    debug: bool = False
    reload: bool = False

    discord_webhook_url: str

    recaptcha_secret: str
    recaptcha_verify_url: str = "https://www.google.com/recaptcha/api/siteverify"
    recaptcha_min_score: float = Field(0.5, ge=0, le=1)

    allowed_origins: list[str] = [PRODUCTION_ORIGIN, "http://localhost:3000", "http://localhost"]
    default_origin: str = PRODUCTION_ORIGIN

    sentry_dsn: str | None = None
    sentry_environment: str = "test"
