"""Runtime configuration — env-driven via pydantic-settings.

Reads ``NOTIFYHUB_*`` environment variables and an optional ``.env`` file.
Only the CLI consults this module; library code receives everything it
needs through constructor arguments.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class HubConfig(BaseSettings):
    """notifyhub configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export NOTIFYHUB_LOG_LEVEL=DEBUG
        export NOTIFYHUB_DEFAULT_CHANNELS='["email", "push"]'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="NOTIFYHUB_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = "development"
    log_level: str = "WARNING"
    debug: bool = False

    # Built-in channels registered by the CLI hub
    default_channels: list[str] = ["email", "sms", "push"]

    @property
    def is_production(self) -> bool:
        """Whether running in production mode."""
        return self.environment == "production"

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()


# Module-level instance — import as `from notifyhub.config import config`
config = HubConfig()
