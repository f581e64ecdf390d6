"""
Method resolution - turn an init/dispose directive into a checked call.

Manifesto:
    A directive is data (``True``, ``"start"``, a function). Before anything
    runs, the resolver checks that the instance actually has the method the
    directive points at and fails with :class:`MissingMethodError` otherwise.
    The check is synchronous so a misconfigured registration is reported at
    its own position in the pass, never later because an earlier component
    happened to be slow.

Architecture:
    ::

        directive                   check                         call
        ─────────                   ─────                         ────
        True                        SupportsAsyncInit / Dispose   instance.async_init(cradle)
        "name"                      callable attribute "name"     instance.name(cradle)
        fn                          none                          fn(instance, registry)
        InitConfig(method, nb)      per ``method``                per ``method``

    Dispose calls take no cradle: ``instance.async_dispose()``,
    ``instance.name()``, ``fn(instance)``.

Tags:
    lifecycle, method-resolution, validation
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lifecycle_manager.core.errors import ConfigValidationError, MissingMethodError
from lifecycle_manager.core.protocols import (
    DEFAULT_DISPOSE_METHOD,
    DEFAULT_INIT_METHOD,
    Registry,
    SupportsAsyncDispose,
    SupportsAsyncInit,
)
from lifecycle_manager.registry.registration import InitConfig


@dataclass(frozen=True, slots=True)
class MethodCall:
    """A validated, not yet started, lifecycle invocation."""

    registration: str
    method: str
    invoke: Callable[[], Any]

    def __call__(self) -> Any:
        return self.invoke()


def normalize_init_directive(directive: Any) -> tuple[Any, bool]:
    """Unwrap an :class:`InitConfig` into ``(method, non_blocking)``."""
    if isinstance(directive, InitConfig):
        return directive.method, directive.non_blocking
    return directive, False


def _target(
    registration: str,
    instance: Any,
    method: str,
    *,
    default: bool,
    capability: type | None = None,
) -> Callable[..., Any]:
    if capability is not None and not isinstance(instance, capability):
        raise MissingMethodError(registration, method, default=default)
    target = getattr(instance, method, None)
    if not callable(target):
        raise MissingMethodError(registration, method, default=default)
    return target


def _invalid(registration: str, kind: str, directive: Any) -> ConfigValidationError:
    return ConfigValidationError(
        registration,
        f"Invalid config for {registration}. Unsupported {kind} directive: {directive!r}",
    )


def resolve_init_call(
    registration: str,
    directive: Any,
    instance: Any,
    registry: Registry,
) -> MethodCall:
    """Validate an init directive against ``instance`` and bind the call.

    Raises:
        MissingMethodError: The default or named method does not exist
        ConfigValidationError: The directive has an unsupported shape
    """
    method, _ = normalize_init_directive(directive)

    if method is True:
        target = _target(
            registration,
            instance,
            DEFAULT_INIT_METHOD,
            default=True,
            capability=SupportsAsyncInit,
        )
        return MethodCall(registration, DEFAULT_INIT_METHOD, lambda: target(registry.cradle))

    if isinstance(method, str) and method:
        target = _target(registration, instance, method, default=False)
        return MethodCall(registration, method, lambda: target(registry.cradle))

    if callable(method):
        label = getattr(method, "__name__", "<callable>")
        return MethodCall(registration, label, lambda: method(instance, registry))

    raise _invalid(registration, "async_init", directive)


def resolve_dispose_call(registration: str, directive: Any, instance: Any) -> MethodCall:
    """Validate a dispose directive against ``instance`` and bind the call.

    Raises:
        MissingMethodError: The default or named method does not exist
        ConfigValidationError: The directive has an unsupported shape
    """
    if directive is True:
        target = _target(
            registration,
            instance,
            DEFAULT_DISPOSE_METHOD,
            default=True,
            capability=SupportsAsyncDispose,
        )
        return MethodCall(registration, DEFAULT_DISPOSE_METHOD, target)

    if isinstance(directive, str) and directive:
        target = _target(registration, instance, directive, default=False)
        return MethodCall(registration, directive, target)

    if callable(directive):
        label = getattr(directive, "__name__", "<callable>")
        return MethodCall(registration, label, lambda: directive(instance))

    raise _invalid(registration, "async_dispose", directive)


def resolve_eager_call(registration: str, directive: str, instance: Any) -> MethodCall:
    """Bind the no-argument post-construction method named by ``eager_inject``."""
    target = _target(registration, instance, directive, default=False)
    return MethodCall(registration, directive, target)


async def settle(result: Any) -> Any:
    """Await ``result`` if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(result):
        return await result
    return result


__all__ = [
    "MethodCall",
    "normalize_init_directive",
    "resolve_init_call",
    "resolve_dispose_call",
    "resolve_eager_call",
    "settle",
]
