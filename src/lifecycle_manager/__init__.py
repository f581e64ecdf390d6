"""
lifecycle-manager - async init/dispose orchestration over a DI registry.

Components registered in a container declare lifecycle metadata
(``async_init``, ``async_dispose``, priorities, ``eager_inject``, tags,
``enabled``). :class:`LifecycleManager` walks that metadata to bring the
components up and down in a deterministic order.
"""

__version__ = "0.1.0"

from lifecycle_manager.core.errors import (
    ComponentNotFoundError,
    ConfigValidationError,
    LifecycleError,
    MissingMethodError,
)
from lifecycle_manager.core.protocols import Registry
from lifecycle_manager.core.settings import LifecycleSettings
from lifecycle_manager.manager import LifecycleManager, LifecycleManagerConfig
from lifecycle_manager.orchestration import (
    async_dispose,
    async_init,
    eager_inject,
    get_by_predicate,
    get_with_tags,
    validate_registrations,
)
from lifecycle_manager.registry import (
    MISSING,
    Container,
    InitConfig,
    Lifetime,
    Registration,
    as_class,
    as_function,
    as_value,
)

__all__ = [
    "__version__",
    "ComponentNotFoundError",
    "ConfigValidationError",
    "LifecycleError",
    "MissingMethodError",
    "Registry",
    "LifecycleSettings",
    "LifecycleManager",
    "LifecycleManagerConfig",
    "async_dispose",
    "async_init",
    "eager_inject",
    "get_by_predicate",
    "get_with_tags",
    "validate_registrations",
    "MISSING",
    "Container",
    "InitConfig",
    "Lifetime",
    "Registration",
    "as_class",
    "as_function",
    "as_value",
]
