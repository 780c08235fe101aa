"""Bounded, cooperative waiting."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from webscope.config import DEFAULT_POLL_INTERVAL_MS, DEFAULT_TIMEOUT_MS, EngineConfig
from webscope.exceptions import LookupTimeout
from webscope.logger import get_logger
from webscope.models import StateKind
from webscope.states import StatePredicate

if TYPE_CHECKING:
    from webscope.handle import Handle

log = get_logger(__name__)


async def poll_until(
    check: Callable[[], Awaitable[bool]],
    *,
    timeout_ms: int,
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
    target: str = "",
    state: str = "",
) -> bool:
    """Re-evaluate ``check`` until it returns True, bounded by ``timeout_ms``.

    Errors raised by ``check`` propagate immediately.

    Raises:
        LookupTimeout: When ``check`` never returned True in time.
    """
    start = time.monotonic()

    async def _poll() -> bool:
        while True:
            if await check():
                return True
            await asyncio.sleep(poll_interval_ms / 1000)

    if timeout_ms <= 0:
        if await check():
            return True
    else:
        try:
            return await asyncio.wait_for(_poll(), timeout=timeout_ms / 1000)
        except asyncio.TimeoutError:
            pass

    elapsed_ms = (time.monotonic() - start) * 1000
    log.debug(
        "wait_timed_out",
        target=target,
        state=state,
        elapsed_ms=round(elapsed_ms, 1),
        timeout_ms=timeout_ms,
    )
    raise LookupTimeout(target, state, elapsed_ms, timeout_ms)


@dataclass(frozen=True)
class WaitPolicy:
    """Waits for a resolved handle to reach a state."""

    default_timeout_ms: int = DEFAULT_TIMEOUT_MS
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    strict: bool = True

    @classmethod
    def from_config(cls, config: EngineConfig) -> WaitPolicy:
        return cls(
            default_timeout_ms=config.default_timeout_ms,
            poll_interval_ms=config.poll_interval_ms,
            strict=config.strict,
        )

    async def wait(
        self,
        handle: Handle,
        state: StateKind | str,
        expected: Any = None,
        *,
        negate: bool = False,
        timeout_ms: int | None = None,
    ) -> bool:
        """Block until ``handle`` satisfies ``state``.

        The limit is ``timeout_ms`` if given, else the handle's own
        timeout, else the policy default.

        Raises:
            InvalidSpec: If the state needs an expected value it did not get.
            LookupTimeout: If the state never held in time.
            ResolutionError: If strict and the handle matches several nodes.
        """
        predicate = StatePredicate.build(
            state, expected, negate=negate, strict=self.strict
        )
        if timeout_ms is None:
            timeout_ms = handle.timeout_ms
        if timeout_ms is None:
            timeout_ms = self.default_timeout_ms
        log.debug(
            "wait_started",
            target=handle.describe(),
            state=str(predicate),
            timeout_ms=timeout_ms,
        )
        return await handle.provider.wait_for_predicate(
            handle, predicate, timeout_ms, self.poll_interval_ms
        )
