"""Environment-driven defaults for the lifecycle manager.

``LifecycleSettings`` lets a deployment switch lifecycle phases on or off
without touching code. Every field maps to a ``LIFECYCLE_*`` environment
variable (``LIFECYCLE_ASYNC_INIT=true``) or a ``.env`` entry.

Examples:
    >>> from lifecycle_manager.core.settings import LifecycleSettings
    >>> LifecycleSettings(async_init=True).async_init
    True

Tags:
    settings, configuration, pydantic, environment
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LifecycleSettings(BaseSettings):
    """Lifecycle phase toggles and logging options.

    Fields
    ──────
    eager_inject                 : Run the eager materializer in execute_init
    async_init                   : Run async init in execute_init
    async_dispose                : Run async dispose in execute_dispose
    strict_boolean_enforced      : Reject non-bool ``enabled`` values
    debug                        : Emit per-component init log lines
    prevent_repeated_inits       : Skip registrations that already initialized
    prevent_dispose_without_init : Only dispose initialized components
    log_level                    : Structlog log level
    log_json                     : JSON log lines (None: JSON when stdout is not a tty)
    """

    model_config = SettingsConfigDict(
        env_prefix="LIFECYCLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Phases ───────────────────────────────────────────────────
    eager_inject: bool = False
    async_init: bool = False
    async_dispose: bool = True

    # ── Validation ───────────────────────────────────────────────
    strict_boolean_enforced: bool = False

    # ── Repeat guards ────────────────────────────────────────────
    prevent_repeated_inits: bool = False
    prevent_dispose_without_init: bool = False

    # ── Observability ────────────────────────────────────────────
    debug: bool = False
    log_level: str = Field(default="INFO", description="Structlog log level")
    log_json: bool | None = Field(default=None, description="Render logs as JSON lines")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> LifecycleSettings:
    """Return the cached settings built from the environment."""
    return LifecycleSettings()


def clear_settings_cache() -> None:
    """Drop the cached settings (for testing)."""
    get_settings.cache_clear()
