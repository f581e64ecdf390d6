"""
Structural protocols shared by the orchestrator and its collaborators.

Manifesto:
    The orchestrator never imports a concrete container. It depends on the
    shape of a registry (registrations, resolve, cradle) and on the shape of
    the components it drives (an optional ``async_init`` / ``async_dispose``).
    Any container or component matching those shapes works.

Architecture:
    ::

        protocols.py
        ├── Registry              - registrations + resolve(name) + cradle
        ├── SupportsAsyncInit     - default init method (receives the cradle)
        ├── SupportsAsyncDispose  - default dispose method
        ├── LogSink               - receives literal debug log lines
        └── ErrorSink             - receives non-blocking init failures

Tags:
    protocol, registry, lifecycle, contracts
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lifecycle_manager.registry.registration import Registration


DEFAULT_INIT_METHOD = "async_init"
DEFAULT_DISPOSE_METHOD = "async_dispose"


@runtime_checkable
class Registry(Protocol):
    """
    Adapter surface the orchestrator consumes from a DI container.

    ``registrations`` maps every registered name to its lifecycle metadata
    and is treated as read-only. ``resolve`` returns (constructing on first
    call, memoized per the container's own lifetime rules) the instance for a
    name. ``cradle`` resolves any registered component by attribute or item
    access and is handed to default/named init methods.
    """

    @property
    def registrations(self) -> Mapping[str, Registration]:
        ...

    def resolve(self, name: str) -> Any:
        ...

    @property
    def cradle(self) -> Any:
        ...


@runtime_checkable
class SupportsAsyncInit(Protocol):
    """Component exposing the default init method."""

    def async_init(self, cradle: Any) -> Any:
        ...


@runtime_checkable
class SupportsAsyncDispose(Protocol):
    """Component exposing the default dispose method."""

    def async_dispose(self) -> Any:
        ...


class LogSink(Protocol):
    def __call__(self, message: str) -> Any: ...


class ErrorSink(Protocol):
    def __call__(self, name: str, error: BaseException) -> Any: ...


__all__ = [
    "DEFAULT_INIT_METHOD",
    "DEFAULT_DISPOSE_METHOD",
    "Registry",
    "SupportsAsyncInit",
    "SupportsAsyncDispose",
    "LogSink",
    "ErrorSink",
]
