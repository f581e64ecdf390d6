"""Async dispose orchestration.

Disposal mirrors init: enabled registrations with a truthy
``async_dispose`` run in ``(async_dispose_priority, name)`` order, one at a
time, and the first failure stops the pass. There is no non-blocking mode.
"""

from __future__ import annotations

from lifecycle_manager.core.logging import get_logger
from lifecycle_manager.core.protocols import Registry
from lifecycle_manager.orchestration.methods import resolve_dispose_call, settle
from lifecycle_manager.orchestration.ordering import is_initialized, select, set_initialized

logger = get_logger(__name__)


async def async_dispose(
    registry: Registry,
    *,
    prevent_dispose_without_init: bool = False,
) -> None:
    """Run ``async_dispose`` on every eligible registration, in priority order.

    A disposed registration is removed from its instance's init marker, so
    a later guarded init pass runs its init again. With
    ``prevent_dispose_without_init`` only registrations recorded in the
    marker are disposed, which makes a second dispose pass a no-op.

    Raises:
        MissingMethodError: A directive names a method the instance lacks
        Exception: Whatever a dispose routine raised
    """
    entries = select(registry.registrations, "async_dispose", "async_dispose_priority")
    logger.debug("async_dispose_selected", names=[name for name, _ in entries])

    for name, registration in entries:
        instance = registry.resolve(name)
        if prevent_dispose_without_init and not is_initialized(name, instance):
            logger.debug("async_dispose_skipped", name=name, reason="not_initialized")
            continue

        call = resolve_dispose_call(name, registration.async_dispose, instance)
        await settle(call())
        if is_initialized(name, instance):
            set_initialized(name, instance, False)

    logger.debug("async_dispose_completed", count=len(entries))


__all__ = ["async_dispose"]
