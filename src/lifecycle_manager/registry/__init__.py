"""Registration metadata and the in-process reference registry."""

from lifecycle_manager.registry.container import (
    Container,
    Cradle,
    Lifetime,
    Provider,
    as_class,
    as_function,
    as_value,
)
from lifecycle_manager.registry.registration import MISSING, InitConfig, Registration

__all__ = [
    "Container",
    "Cradle",
    "Lifetime",
    "Provider",
    "as_class",
    "as_function",
    "as_value",
    "MISSING",
    "InitConfig",
    "Registration",
]
