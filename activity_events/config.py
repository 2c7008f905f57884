"""Runtime configuration — env-driven.

Reads from a .env file and ACTIVITY_EVENTS_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class EventsConfig(BaseSettings):
    """Activity events configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export ACTIVITY_EVENTS_LOG_LEVEL=DEBUG
        export ACTIVITY_EVENTS_HANDLER_PRIORITY=250
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ACTIVITY_EVENTS_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Runtime environment
    environment: str = "development"
    log_level: str = "INFO"
    debug: bool = False

    # Global registry key is "<registry_namespace>@<version>"
    registry_namespace: str = "ActivityEvents"

    # Host message handler; must run after arousal processing (210)
    # and before sensory deprivation filtering (300)
    handler_priority: int = 290
    handler_description: str = "Activity Handler"

    @property
    def effective_log_level(self) -> str:
        """``DEBUG`` when debug is on, otherwise ``log_level``."""
        return "DEBUG" if self.debug else self.log_level.upper()


config = EventsConfig()
