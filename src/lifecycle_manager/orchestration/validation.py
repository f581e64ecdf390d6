"""Up-front validation of registration metadata."""

from __future__ import annotations

from lifecycle_manager.core.errors import ConfigValidationError
from lifecycle_manager.core.protocols import Registry


def validate_registrations(registry: Registry) -> None:
    """Reject ``enabled`` values that are present but not exactly a bool.

    Absent ``enabled`` is fine; an explicit ``None``, ``0`` or ``"yes"`` is
    not.

    Raises:
        ConfigValidationError: Naming the first offending registration
    """
    for name, registration in registry.registrations.items():
        if registration.has_enabled and not isinstance(registration.enabled, bool):
            raise ConfigValidationError(name)


__all__ = ["validate_registrations"]
