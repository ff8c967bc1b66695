"""Background storage health probe.

A :class:`HealthMonitor` periodically issues ``SELECT 1`` against the engine
and records whether the service can reach its store. It holds only a
read-only reference to the engine; no request path depends on it running.
"""

from __future__ import annotations

import asyncio
import contextlib
from enum import StrEnum

import structlog
from sqlalchemy import text
from sqlalchemy.engine import Engine

logger = structlog.get_logger(__name__)


class HealthStatus(StrEnum):
    """Serving status reported to the transport layer."""

    UNKNOWN = "UNKNOWN"
    SERVING = "SERVING"
    NOT_SERVING = "NOT_SERVING"


class HealthMonitor:
    """Independently cancellable polling loop over a shared engine.

    Usage::

        monitor = HealthMonitor(engine, interval=2.0)
        monitor.start()      # inside a running event loop
        ...
        await monitor.stop()
    """

    def __init__(self, engine: Engine, *, interval: float = 2.0) -> None:
        self._engine = engine
        self._interval = interval
        self._status = HealthStatus.UNKNOWN
        self._task: asyncio.Task[None] | None = None

    @property
    def status(self) -> HealthStatus:
        return self._status

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def check(self) -> HealthStatus:
        """Run one probe query (blocking) and record the outcome."""
        logger.debug("health.check")
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1")).scalar_one()
        except Exception as exc:
            logger.error("health.check_failed", error=str(exc))
            self._status = HealthStatus.NOT_SERVING
        else:
            self._status = HealthStatus.SERVING
        return self._status

    async def run(self) -> None:
        """Poll forever; the blocking probe runs in a worker thread."""
        logger.info("health.loop_started", interval=self._interval)
        while True:
            await asyncio.sleep(self._interval)
            await asyncio.to_thread(self.check)

    def start(self) -> None:
        """Spawn the polling loop on the running event loop (no-op if running)."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self.run(), name="gsdx-health")

    async def stop(self) -> None:
        """Cancel the polling loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("health.loop_stopped")
