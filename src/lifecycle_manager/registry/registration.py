"""
Registration metadata - the lifecycle attributes attached to a component.

Manifesto:
    The container decides *how* a component is built. A
    :class:`Registration` only says *what happens around it*: whether it is
    enabled, how it is initialized and disposed, in which order, whether it
    is built eagerly, and which tags it answers to. The orchestrator reads
    this metadata and never writes it.

Architecture:
    ::

        Registration (frozen)
        ├── enabled                 True | False | MISSING (absent)
        ├── async_init              None | True | "method" | fn(instance, registry) | InitConfig
        ├── async_init_priority     int (None means 1), lower runs earlier
        ├── async_dispose           None | True | "method" | fn(instance)
        ├── async_dispose_priority  int (None means 1), lower disposes earlier
        ├── eager_inject            None | True | "method"
        └── tags                    tuple[str, ...]

        InitConfig(method=True, non_blocking=False)

Examples:
    >>> reg = Registration(async_init="start", async_init_priority=0, tags=["db"])
    >>> reg.is_enabled
    True
    >>> reg.has_tags(["db"])
    True

Tags:
    registration, metadata, lifecycle, tags
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Final, Union


class _Missing:
    """Sentinel type for attributes that were never set."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()

InitFunction = Callable[[Any, Any], Awaitable[Any]]
DisposeFunction = Callable[[Any], Awaitable[Any]]
MethodDirective = Union[bool, str, InitFunction]


@dataclass(frozen=True, slots=True)
class InitConfig:
    """Structured init directive.

    ``method`` accepts the same shapes as a plain directive (``True`` for the
    default method, a method name, or a callable); ``non_blocking`` starts the
    init without awaiting it.
    """

    method: MethodDirective = True
    non_blocking: bool = False


@dataclass(frozen=True, slots=True)
class Registration:
    """Lifecycle metadata for one registered component."""

    enabled: Any = MISSING
    async_init: MethodDirective | InitConfig | None = None
    async_init_priority: int | None = 1
    async_dispose: bool | str | DisposeFunction | None = None
    async_dispose_priority: int | None = 1
    eager_inject: bool | str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if isinstance(self.tags, str):
            raise TypeError("tags must be a sequence of strings, not a string")
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags))

    @property
    def has_enabled(self) -> bool:
        """Whether ``enabled`` was set at all (even to a non-bool)."""
        return self.enabled is not MISSING

    @property
    def is_enabled(self) -> bool:
        """Absent or anything other than ``False`` counts as enabled."""
        return self.enabled is not False

    def has_tags(self, tags: Iterable[str]) -> bool:
        """True when every requested tag is present on this registration."""
        return set(tags).issubset(self.tags)


__all__ = [
    "MISSING",
    "InitConfig",
    "Registration",
    "InitFunction",
    "DisposeFunction",
    "MethodDirective",
]
