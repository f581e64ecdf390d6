"""
Async init orchestration.

Manifesto:
    Components that need async setup (open pools, warm caches, subscribe to
    queues) declare it through ``Registration.async_init``. This module runs
    those routines in a total, reproducible order and stops at the first
    blocking failure, leaving later components untouched.

Architecture:
    ::

        registrations ──select──▶ enabled + async_init
                      ──sort────▶ (async_init_priority, name)
                      ──for each─▶ resolve → skip if initialized (guard on)?
                                   → resolve_init_call (MissingMethodError)
                                   → "started" → invoke
                                   ├── blocking:     await → mark → "finished"
                                   └── non-blocking: task  → continue
                                                     task done → mark → "finished (non-blocking)"

Behaviour:
    - Validation and blocking-init errors propagate; no later registration
      is initialized.
    - Non-blocking failures never abort the pass. They go to ``error_sink``
      when one is given; otherwise the exception stays on the returned task.
    - With ``prevent_repeated_inits`` a registration that already
      initialized its instance is skipped. The guard is off by default, so
      every pass runs every eligible init. A non-blocking init marks its
      instance only once it has succeeded.

Examples:
    >>> tasks = await async_init(container, debug=True, log_sink=print)
    asyncInit: db - started
    asyncInit: db - finished
    >>> await asyncio.gather(*tasks)  # optional: wait for non-blocking inits

Tags:
    lifecycle, async-init, orchestration, ordering
"""

from __future__ import annotations

import asyncio
from typing import Any

from lifecycle_manager.core.logging import get_logger
from lifecycle_manager.core.protocols import ErrorSink, LogSink, Registry
from lifecycle_manager.orchestration.methods import (
    normalize_init_directive,
    resolve_init_call,
    settle,
)
from lifecycle_manager.orchestration.ordering import is_initialized, select, set_initialized

logger = get_logger(__name__)


def _default_log_sink(message: str) -> None:
    logger.info(message)


async def _run_non_blocking(
    name: str,
    instance: Any,
    result: Any,
    debug: bool,
    log_sink: LogSink,
    error_sink: ErrorSink | None,
) -> None:
    try:
        await settle(result)
    except Exception as exc:
        if error_sink is None:
            raise
        error_sink(name, exc)
        return
    set_initialized(name, instance, True)
    if debug:
        log_sink(f"asyncInit: {name} - finished (non-blocking)")


async def async_init(
    registry: Registry,
    *,
    debug: bool = False,
    log_sink: LogSink | None = None,
    error_sink: ErrorSink | None = None,
    prevent_repeated_inits: bool = False,
) -> list[asyncio.Task[None]]:
    """Run ``async_init`` on every eligible registration, in priority order.

    Args:
        registry: Registry to walk
        debug: Emit "started"/"finished" lines to ``log_sink``
        log_sink: Receives debug lines (default: structlog at info level)
        error_sink: Receives ``(name, exc)`` for failed non-blocking inits
        prevent_repeated_inits: Skip registrations that already initialized their instance

    Returns:
        Tasks for the non-blocking inits started by this pass

    Raises:
        MissingMethodError: A directive names a method the instance lacks
        Exception: Whatever a blocking init routine raised
    """
    sink = log_sink or _default_log_sink
    entries = select(registry.registrations, "async_init", "async_init_priority")
    logger.debug("async_init_selected", names=[name for name, _ in entries])

    started: list[asyncio.Task[None]] = []
    for name, registration in entries:
        instance = registry.resolve(name)
        if prevent_repeated_inits and is_initialized(name, instance):
            logger.debug("async_init_skipped", name=name, reason="already_initialized")
            continue

        _, non_blocking = normalize_init_directive(registration.async_init)
        call = resolve_init_call(name, registration.async_init, instance, registry)

        if debug:
            sink(f"asyncInit: {name} - started")
        result = call()

        if non_blocking:
            started.append(
                asyncio.create_task(
                    _run_non_blocking(name, instance, result, debug, sink, error_sink),
                    name=f"async_init:{name}",
                )
            )
            continue

        await settle(result)
        set_initialized(name, instance, True)
        if debug:
            sink(f"asyncInit: {name} - finished")

    logger.debug("async_init_completed", count=len(entries), non_blocking=len(started))
    return started


__all__ = ["async_init"]
