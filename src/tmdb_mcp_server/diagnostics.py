"""Best-effort diagnostics reported to the MCP caller.

Diagnostics are operational messages (tool called, tool finished, tool failed)
that the server forwards to the connected client. Delivery is not guaranteed:
``notify`` never blocks the calling coroutine and never raises, whatever the
state of the underlying channel.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Literal

logger = logging.getLogger(__name__)

Severity = Literal["info", "error"]

_LOG_LEVELS: dict[str, int] = {"info": logging.INFO, "error": logging.ERROR}


class DiagnosticsSink:
    """Fire-and-forget destination for diagnostics."""

    def notify(self, level: Severity, message: str) -> None:
        """Queue ``message`` for delivery; delivery is not guaranteed."""
        raise NotImplementedError


class LoggingDiagnostics(DiagnosticsSink):
    """Sink that only writes diagnostics to the local log."""

    def notify(self, level: Severity, message: str) -> None:
        logger.log(_LOG_LEVELS.get(level, logging.INFO), message)


class ChannelDiagnostics(LoggingDiagnostics):
    """Sink that forwards diagnostics to an asynchronous channel.

    Each message is logged locally, then handed to ``send`` as a background
    task on the running event loop. Failures of the channel are discarded.
    """

    def __init__(self, send: Callable[[Severity, str], Awaitable[None]]) -> None:
        """Create a sink around the coroutine function ``send``."""
        self._send = send
        self._pending: set[asyncio.Task[None]] = set()

    def notify(self, level: Severity, message: str) -> None:
        super().notify(level, message)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, dropping diagnostic: %s", message)
            return
        task = loop.create_task(self._deliver(level, message))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _deliver(self, level: Severity, message: str) -> None:
        try:
            await self._send(level, message)
        except Exception as exc:
            logger.debug("Diagnostic delivery failed: %s", exc)

    async def drain(self) -> None:
        """Wait for diagnostics that are still in flight."""
        while self._pending:
            await asyncio.gather(*list(self._pending))
