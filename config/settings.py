import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.sf_common.enums import EpochMode, SequenceBackend
from src.sf_common.errors import ConfigError

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    # Snowflake — MACHINE_ID has no default, MUST be set per instance
    MACHINE_ID: int = Field(ge=0, le=1023)
    TIMEZONE: EpochMode = EpochMode.UTC
    # Unix ms. Ids stay positive for signed int64 readers until EPOCH_MS + 2**41 ms
    # (year 2039 with the default 0); a later epoch pushes that out.
    EPOCH_MS: int = Field(default=0, ge=0)

    # Sequence store
    SEQUENCE_BACKEND: SequenceBackend = SequenceBackend.REDIS
    REDIS_URL: str = "redis://localhost:6379/0"
    SEQUENCE_TTL_MS: int = Field(default=1000, gt=0)
    STORE_TIMEOUT_SECONDS: float = Field(default=0.5, gt=0)
    MAX_SEQUENCE_ATTEMPTS: int = Field(default=16, ge=1)

    # App
    APP_NAME: str = "Snowflake ID Service"
    PORT: int = Field(default=7878, ge=1, le=65535)
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    @field_validator("TIMEZONE", mode="before")
    @classmethod
    def _fallback_to_utc(cls, value: object) -> object:
        # Unknown timezone modes are not fatal: fall back to UTC
        if isinstance(value, str) and value not in {m.value for m in EpochMode}:
            logger.warning("Invalid timezone '%s' provided. Defaulting to UTC.", value)
            return EpochMode.UTC
        return value


def load_settings(**overrides: object) -> Settings:
    """Build Settings from env/.env, converting validation failures to ConfigError."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


settings = load_settings()
