"""Eager materialization of components flagged with ``eager_inject``."""

from __future__ import annotations

from lifecycle_manager.core.logging import get_logger
from lifecycle_manager.core.protocols import Registry
from lifecycle_manager.orchestration.methods import resolve_eager_call
from lifecycle_manager.orchestration.ordering import select

logger = get_logger(__name__)


def eager_inject(registry: Registry) -> None:
    """Resolve every enabled registration with a truthy ``eager_inject``.

    Registrations are processed once each, in registry iteration order. A
    string directive names a no-argument method called right after
    construction; its return value is not awaited.

    Raises:
        MissingMethodError: The named post-construction method does not exist
    """
    for name, registration in select(registry.registrations, "eager_inject"):
        instance = registry.resolve(name)
        if isinstance(registration.eager_inject, str):
            resolve_eager_call(name, registration.eager_inject, instance)()
        logger.debug("eager_inject_resolved", name=name)


__all__ = ["eager_inject"]
