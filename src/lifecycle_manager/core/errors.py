"""
Structured error types for lifecycle orchestration.

Every failure raised by the orchestrator is a :class:`LifecycleError`
carrying a category and a small context mapping, so callers can route
configuration mistakes separately from failures raised by components.

Manifesto:
    - **Typed hierarchy:** One error type per failure mode
    - **Fail fast:** Configuration errors surface before any side effect
    - **Rich context:** Errors name the offending registration
    - **Pass-through:** Errors raised by components are never wrapped

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────┐
        │                    LifecycleError                        │
        │              (category, context, to_dict)                │
        ├─────────────────────────────────────────────────────────┤
        │                                                          │
        │  ConfigValidationError   MissingMethodError              │
        │  (CONFIG)                (CONFIG)                        │
        │                                                          │
        │  ComponentNotFoundError                                  │
        │  (REGISTRY, also a KeyError)                             │
        └─────────────────────────────────────────────────────────┘

Examples:
    >>> error = MissingMethodError("db", "connect")
    >>> error.registration
    'db'
    >>> error.to_dict()["category"]
    'CONFIG'

Tags:
    error-handling, exception-hierarchy, lifecycle, validation

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Categories used to classify lifecycle errors."""

    CONFIG = "CONFIG"  # Malformed registration metadata
    REGISTRY = "REGISTRY"  # Unknown component, duplicate name
    LIFECYCLE = "LIFECYCLE"  # Init/dispose pass failures


class LifecycleError(Exception):
    """
    Base exception for all lifecycle-manager errors.

    Subclasses set ``default_category``. Extra keyword arguments passed to
    the constructor end up in :attr:`context` and in :meth:`to_dict`.
    """

    default_category: ErrorCategory = ErrorCategory.LIFECYCLE

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        cause: Exception | None = None,
        **context: Any,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context: dict[str, Any] = dict(context)
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> LifecycleError:
        """Add context to this error (fluent API)."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class ConfigValidationError(LifecycleError):
    """Raised when registration metadata fails strict validation."""

    default_category = ErrorCategory.CONFIG

    def __init__(self, registration: str, message: str | None = None):
        self.registration = registration
        super().__init__(
            message
            or (
                f"Invalid config for {registration}. "
                '"enabled" field can only be set to True or False, or omitted'
            ),
            registration=registration,
        )


class MissingMethodError(LifecycleError):
    """Raised when an init/dispose directive names a method the instance lacks."""

    default_category = ErrorCategory.CONFIG

    def __init__(self, registration: str, method: str, *, default: bool = False):
        self.registration = registration
        self.method = method
        kind = "default" if default else "custom"
        super().__init__(
            f"Method {method} ({kind}) does not exist on dependency {registration}",
            registration=registration,
            method=method,
        )


class ComponentNotFoundError(LifecycleError, KeyError):
    """Raised when a registry is asked for a name it does not know."""

    default_category = ErrorCategory.REGISTRY

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        listing = ", ".join(sorted(available)) if available else "(none)"
        super().__init__(
            f"Component '{name}' is not registered. Available: {listing}",
            name=name,
        )


__all__ = [
    "ErrorCategory",
    "LifecycleError",
    "ConfigValidationError",
    "MissingMethodError",
    "ComponentNotFoundError",
]
