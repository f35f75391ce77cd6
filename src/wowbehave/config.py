"""Configuration system using pydantic-settings with environment variable loading."""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):
    """Upstash Redis REST connection settings.

    Env names match the ones the Upstash console hands out:
    UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN.
    """

    model_config = SettingsConfigDict(env_prefix="UPSTASH_REDIS_REST_")

    url: str = "http://localhost:8079"
    token: SecretStr = SecretStr("")
    timeout_seconds: float = 5.0
    scan_count: int = 1000  # COUNT hint per SCAN round trip


class ServerSettings(BaseSettings):
    """HTTP server configuration."""

    model_config = SettingsConfigDict(env_prefix="SERVER_")

    host: str = "0.0.0.0"
    port: int = 3001


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    store: StoreSettings = StoreSettings()
    server: ServerSettings = ServerSettings()
