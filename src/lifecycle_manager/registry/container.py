"""
In-process reference registry.

:class:`Container` is a deliberately small DI container that satisfies the
:class:`~lifecycle_manager.core.protocols.Registry` protocol. Components are
registered under a unique name together with a :class:`Provider` (how to
build them) and a :class:`Registration` (what the orchestrator does with
them). Instances are created on first resolve and, for singletons, cached.

Usage::

    from lifecycle_manager.registry import Container, as_class, as_value

    container = Container()
    container.register("config", as_value({"dsn": "sqlite://"}))
    container.register("db", as_class(Database, async_init="connect", async_dispose="close"))

    db = container.resolve("db")        # Database(container.cradle)
    db is container.cradle.db           # singleton → True

Factories receive the container's :class:`Cradle`, so a component reads its
siblings as ``cradle.config`` or ``cradle["config"]``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from lifecycle_manager.core.errors import ComponentNotFoundError
from lifecycle_manager.core.logging import get_logger
from lifecycle_manager.registry.registration import Registration

logger = get_logger(__name__)


class Lifetime(str, Enum):
    """How long a resolved instance lives inside its container."""

    SINGLETON = "singleton"
    TRANSIENT = "transient"


@dataclass(frozen=True, slots=True)
class Provider:
    """Factory plus lifetime plus lifecycle metadata for one component."""

    factory: Callable[[Cradle], Any]
    lifetime: Lifetime = Lifetime.SINGLETON
    registration: Registration = field(default_factory=Registration)


def as_class(
    cls: type,
    *,
    lifetime: Lifetime = Lifetime.SINGLETON,
    **metadata: Any,
) -> Provider:
    """Provider constructing ``cls(cradle)``."""
    return Provider(factory=cls, lifetime=lifetime, registration=Registration(**metadata))


def as_function(
    fn: Callable[[Cradle], Any],
    *,
    lifetime: Lifetime = Lifetime.SINGLETON,
    **metadata: Any,
) -> Provider:
    """Provider calling ``fn(cradle)``."""
    return Provider(factory=fn, lifetime=lifetime, registration=Registration(**metadata))


def as_value(value: Any, **metadata: Any) -> Provider:
    """Provider returning ``value`` unchanged."""
    return Provider(
        factory=lambda _cradle: value,
        lifetime=Lifetime.SINGLETON,
        registration=Registration(**metadata),
    )


class Cradle:
    """Lazy view resolving registered components by name."""

    __slots__ = ("_container",)

    def __init__(self, container: Container) -> None:
        self._container = container

    def __getattr__(self, name: str) -> Any:
        # private names go through __getitem__
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._container.resolve(name)
        except ComponentNotFoundError as exc:
            raise AttributeError(str(exc)) from exc

    def __getitem__(self, name: str) -> Any:
        return self._container.resolve(name)

    def __contains__(self, name: object) -> bool:
        return name in self._container

    def __iter__(self) -> Iterator[str]:
        return iter(self._container.registrations)

    def __repr__(self) -> str:
        return f"Cradle({list(self._container.registrations)!r})"


class Container:
    """Name-keyed DI container exposing ``registrations``, ``resolve`` and ``cradle``."""

    def __init__(self) -> None:
        self._providers: dict[str, Provider] = {}
        self._registrations: dict[str, Registration] = {}
        self._singletons: dict[str, Any] = {}
        self._cradle = Cradle(self)

    # ── Registration ─────────────────────────────────────────────

    def register(self, name: str, provider: Provider, *, override: bool = False) -> Container:
        """Register ``provider`` under ``name``.

        Raises:
            ValueError: If ``name`` is already registered and ``override`` is False
        """
        if name in self._providers and not override:
            raise ValueError(f"Component '{name}' is already registered")

        self._providers[name] = provider
        self._registrations[name] = provider.registration
        self._singletons.pop(name, None)

        logger.debug("component_registered", name=name, lifetime=provider.lifetime.value)
        return self

    # ── Registry protocol ────────────────────────────────────────

    @property
    def registrations(self) -> Mapping[str, Registration]:
        return MappingProxyType(self._registrations)

    @property
    def cradle(self) -> Cradle:
        return self._cradle

    def resolve(self, name: str) -> Any:
        provider = self._providers.get(name)
        if provider is None:
            raise ComponentNotFoundError(name, list(self._providers))

        if provider.lifetime is Lifetime.SINGLETON:
            if name not in self._singletons:
                self._singletons[name] = provider.factory(self._cradle)
            return self._singletons[name]

        return provider.factory(self._cradle)

    # ── Introspection ────────────────────────────────────────────

    def is_resolved(self, name: str) -> bool:
        """Whether a singleton instance for ``name`` has been built."""
        return name in self._singletons

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __len__(self) -> int:
        return len(self._providers)


__all__ = [
    "Lifetime",
    "Provider",
    "Cradle",
    "Container",
    "as_class",
    "as_function",
    "as_value",
]
