"""
Lookups over resolved, enabled components.

Two ways to pick a subset of components out of a registry:

- :func:`get_with_tags` reads metadata first and resolves only the
  registrations whose tags cover the request.
- :func:`get_by_predicate` has to look at instances, so it resolves *every*
  enabled registration before filtering. Components that were never needed
  before get constructed as a byproduct.

Both return a fresh ``{name: instance}`` dict; an empty dict means nothing
matched.

Examples:
    >>> get_with_tags(container, ["queue", "low-priority"])
    {'low_consumer': <LowPriorityConsumer ...>}
    >>> get_by_predicate(container, lambda c: isinstance(c, Consumer))
    {'high_consumer': ..., 'low_consumer': ...}

Tags:
    lookup, tags, predicate, discovery
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from lifecycle_manager.core.protocols import Registry


def get_with_tags(registry: Registry, tags: Iterable[str]) -> dict[str, Any]:
    """Enabled components whose tags include every tag in ``tags``."""
    if isinstance(tags, str):
        raise TypeError("tags must be a sequence of strings, not a string")
    wanted = list(tags)
    return {
        name: registry.resolve(name)
        for name, registration in registry.registrations.items()
        if registration.is_enabled and registration.has_tags(wanted)
    }


def get_by_predicate(registry: Registry, predicate: Callable[[Any], Any]) -> dict[str, Any]:
    """Enabled components for which ``predicate(instance)`` is truthy."""
    result: dict[str, Any] = {}
    for name, registration in registry.registrations.items():
        if not registration.is_enabled:
            continue
        instance = registry.resolve(name)
        if predicate(instance):
            result[name] = instance
    return result


__all__ = ["get_with_tags", "get_by_predicate"]
