"""Selection, ordering and per-instance lifecycle markers.

Every orchestration pass starts the same way: take the registry's
registrations, keep the enabled ones that carry a directive, and (for init
and dispose) sort them by ``(priority, name)``. The name tie-break makes the
order total, so two runs over the same registrations always agree. An
explicit ``None`` priority sorts like the default of 1.

Which registrations have initialized a component is recorded on the
component instance itself, as a frozenset of registration names. Two
registrations sharing one instance are tracked separately, and the
orchestrator keeps nothing between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lifecycle_manager.core.logging import get_logger
from lifecycle_manager.registry.registration import Registration

logger = get_logger(__name__)

INITIALIZED_MARKER = "_lifecycle_initialized"
DEFAULT_PRIORITY = 1


def _priority(value: Any) -> Any:
    return DEFAULT_PRIORITY if value is None else value


def select(
    registrations: Mapping[str, Registration],
    directive: str,
    priority: str | None = None,
) -> list[tuple[str, Registration]]:
    """Enabled registrations with a truthy ``directive`` attribute.

    When ``priority`` names a field, the result is sorted by that field and
    then by registration name; otherwise registry iteration order is kept.
    """
    selected = [
        (name, registration)
        for name, registration in registrations.items()
        if registration.is_enabled and getattr(registration, directive)
    ]
    if priority is not None:
        selected.sort(key=lambda entry: (_priority(getattr(entry[1], priority)), entry[0]))
    return selected


def initialized_names(instance: Any) -> frozenset[str]:
    """Names of the registrations that have initialized ``instance``."""
    marker = getattr(instance, INITIALIZED_MARKER, None)
    if isinstance(marker, (set, frozenset)):
        return frozenset(marker)
    return frozenset()


def is_initialized(name: str, instance: Any) -> bool:
    return name in initialized_names(instance)


def set_initialized(name: str, instance: Any, value: bool) -> bool:
    """Add or remove ``name`` in the marker on ``instance``.

    Returns False when the instance cannot hold attributes.
    """
    names = set(initialized_names(instance))
    if value:
        names.add(name)
    else:
        names.discard(name)
    try:
        setattr(instance, INITIALIZED_MARKER, frozenset(names))
    except (AttributeError, TypeError):
        logger.debug("init_marker_unsupported", name=name, type=type(instance).__name__)
        return False
    return True
