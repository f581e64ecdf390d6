"""
Recording components for ordering and side-effect assertions.

Every component receives a shared :class:`Recorder` (registered in the
container as ``recorder``) and appends ``(event, name)`` pairs to it, so a
test asserts on the exact sequence instead of on global flags.
"""

from __future__ import annotations

import asyncio
from typing import Any

from lifecycle_manager.registry import Provider, as_function


class Recorder:
    """Ordered log of ``(event, name)`` pairs."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def record(self, event: str, name: str) -> None:
        self.events.append((event, name))

    def names(self, event: str) -> list[str]:
        return [name for kind, name in self.events if kind == event]


class Bare:
    """Component with no lifecycle methods at all."""

    def __init__(self, name: str, recorder: Recorder) -> None:
        self.name = name
        self.recorder = recorder
        recorder.record("construct", name)


class Component(Bare):
    """Component exposing the default and a few custom lifecycle methods."""

    def __init__(self, name: str, recorder: Recorder) -> None:
        super().__init__(name, recorder)
        self.initialized = False
        self.disposed = False
        self.init_count = 0
        self.cradle: Any = None

    async def async_init(self, cradle: Any) -> None:
        await asyncio.sleep(0)
        self.cradle = cradle
        self.init_count += 1
        self.initialized = True
        self.recorder.record("init", self.name)

    async def async_dispose(self) -> None:
        await asyncio.sleep(0)
        self.disposed = True
        self.recorder.record("dispose", self.name)

    async def start(self, cradle: Any) -> None:
        await asyncio.sleep(0)
        self.recorder.record("start", self.name)

    async def close(self) -> None:
        await asyncio.sleep(0)
        self.recorder.record("close", self.name)

    def warm_up(self) -> None:
        self.recorder.record("warm_up", self.name)


def component(name: str, cls: type = Component, **metadata: Any) -> Provider:
    """Provider building ``cls(name, cradle.recorder)``."""
    return as_function(lambda cradle: cls(name, cradle.recorder), **metadata)
