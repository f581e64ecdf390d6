"""Core primitives: errors, logging, settings and protocols."""

from lifecycle_manager.core.errors import (
    ComponentNotFoundError,
    ConfigValidationError,
    ErrorCategory,
    LifecycleError,
    MissingMethodError,
)
from lifecycle_manager.core.logging import configure_logging, get_logger
from lifecycle_manager.core.protocols import (
    DEFAULT_DISPOSE_METHOD,
    DEFAULT_INIT_METHOD,
    ErrorSink,
    LogSink,
    Registry,
    SupportsAsyncDispose,
    SupportsAsyncInit,
)
from lifecycle_manager.core.settings import LifecycleSettings, clear_settings_cache, get_settings

__all__ = [
    "ComponentNotFoundError",
    "ConfigValidationError",
    "ErrorCategory",
    "LifecycleError",
    "MissingMethodError",
    "configure_logging",
    "get_logger",
    "DEFAULT_DISPOSE_METHOD",
    "DEFAULT_INIT_METHOD",
    "ErrorSink",
    "LogSink",
    "Registry",
    "SupportsAsyncDispose",
    "SupportsAsyncInit",
    "LifecycleSettings",
    "clear_settings_cache",
    "get_settings",
]
