"""
LifecycleManager - facade over the lifecycle orchestration functions.

Manifesto:
    Application bootstrap code wants two calls: bring everything up, bring
    everything down. :class:`LifecycleManager` captures a registry and a
    frozen configuration once, validates the registrations if asked to, and
    then exposes ``execute_init`` / ``execute_dispose`` plus the query
    helpers bound to that registry.

Architecture:
    ::

        LifecycleManager(config)
        ├── __init__          strict? → validate_registrations
        ├── execute_init()    eager_inject? → async_init?   (returns non-blocking tasks)
        ├── execute_dispose() async_dispose?
        ├── eager_inject()
        ├── get_with_tags(tags)
        └── get_by_predicate(predicate)

Examples:
    >>> manager = LifecycleManager(
    ...     LifecycleManagerConfig(registry=container, async_init=True, eager_inject=True)
    ... )
    >>> await manager.execute_init()
    >>> ...
    >>> await manager.execute_dispose()

    Flags from the environment (``LIFECYCLE_*``)::

        manager = LifecycleManager(LifecycleManagerConfig.from_settings(container))

Tags:
    lifecycle, facade, bootstrap, shutdown
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from lifecycle_manager.core.logging import configure_logging, get_logger
from lifecycle_manager.core.protocols import ErrorSink, LogSink, Registry
from lifecycle_manager.core.settings import LifecycleSettings, get_settings
from lifecycle_manager.orchestration.dispose import async_dispose
from lifecycle_manager.orchestration.eager import eager_inject
from lifecycle_manager.orchestration.init import async_init
from lifecycle_manager.orchestration.queries import get_by_predicate, get_with_tags
from lifecycle_manager.orchestration.validation import validate_registrations

logger = get_logger(__name__)


@dataclass(frozen=True)
class LifecycleManagerConfig:
    """Configuration captured by a :class:`LifecycleManager` at construction."""

    registry: Registry
    eager_inject: bool = False
    async_init: bool = False
    async_dispose: bool = True
    strict_boolean_enforced: bool = False
    debug: bool = False
    log_sink: LogSink | None = None
    error_sink: ErrorSink | None = None
    prevent_repeated_inits: bool = False
    prevent_dispose_without_init: bool = False

    @classmethod
    def from_settings(
        cls,
        registry: Registry,
        settings: LifecycleSettings | None = None,
        *,
        setup_logging: bool = True,
        **overrides: Any,
    ) -> LifecycleManagerConfig:
        """Build a config from :class:`LifecycleSettings`, then apply ``overrides``.

        Unless ``setup_logging`` is False, structlog is configured from
        ``settings.log_level`` and ``settings.log_json`` as well.
        """
        settings = settings or get_settings()
        if setup_logging:
            configure_logging(level=settings.log_level, json_format=settings.log_json)
        values: dict[str, Any] = {
            "eager_inject": settings.eager_inject,
            "async_init": settings.async_init,
            "async_dispose": settings.async_dispose,
            "strict_boolean_enforced": settings.strict_boolean_enforced,
            "debug": settings.debug,
            "prevent_repeated_inits": settings.prevent_repeated_inits,
            "prevent_dispose_without_init": settings.prevent_dispose_without_init,
        }
        values.update(overrides)
        return cls(registry=registry, **values)


class LifecycleManager:
    """Drives init and dispose for the components of one registry."""

    def __init__(self, config: LifecycleManagerConfig) -> None:
        if config.strict_boolean_enforced:
            validate_registrations(config.registry)
        self._config = config

    @property
    def config(self) -> LifecycleManagerConfig:
        return self._config

    @property
    def registry(self) -> Registry:
        return self._config.registry

    async def execute_init(self) -> list[asyncio.Task[None]]:
        """Eager injection (if enabled), then async init (if enabled).

        Returns the tasks of non-blocking inits, which are started but not
        awaited.
        """
        if self._config.eager_inject:
            eager_inject(self._config.registry)

        if not self._config.async_init:
            return []

        return await async_init(
            self._config.registry,
            debug=self._config.debug,
            log_sink=self._config.log_sink,
            error_sink=self._config.error_sink,
            prevent_repeated_inits=self._config.prevent_repeated_inits,
        )

    async def execute_dispose(self) -> None:
        """Async dispose (if enabled)."""
        if not self._config.async_dispose:
            logger.debug("async_dispose_disabled")
            return

        await async_dispose(
            self._config.registry,
            prevent_dispose_without_init=self._config.prevent_dispose_without_init,
        )

    def eager_inject(self) -> None:
        eager_inject(self._config.registry)

    def get_with_tags(self, tags: Iterable[str]) -> dict[str, Any]:
        return get_with_tags(self._config.registry, tags)

    def get_by_predicate(self, predicate: Callable[[Any], Any]) -> dict[str, Any]:
        return get_by_predicate(self._config.registry, predicate)


__all__ = ["LifecycleManager", "LifecycleManagerConfig"]
