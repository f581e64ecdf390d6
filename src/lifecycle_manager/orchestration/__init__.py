"""Lifecycle orchestration: init, dispose, eager injection, queries, validation.

Every operation is a free function taking the registry explicitly, so it
can be used without constructing a :class:`~lifecycle_manager.LifecycleManager`.
"""

from lifecycle_manager.orchestration.dispose import async_dispose
from lifecycle_manager.orchestration.eager import eager_inject
from lifecycle_manager.orchestration.init import async_init
from lifecycle_manager.orchestration.methods import (
    MethodCall,
    normalize_init_directive,
    resolve_dispose_call,
    resolve_init_call,
)
from lifecycle_manager.orchestration.queries import get_by_predicate, get_with_tags
from lifecycle_manager.orchestration.validation import validate_registrations

__all__ = [
    "async_dispose",
    "async_init",
    "eager_inject",
    "get_by_predicate",
    "get_with_tags",
    "validate_registrations",
    "MethodCall",
    "normalize_init_directive",
    "resolve_dispose_call",
    "resolve_init_call",
]
