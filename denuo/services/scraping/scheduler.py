"""Periodic trigger that runs the scraper on a fixed interval."""
from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from denuo.application import ScrapeService

ServiceProvider = Callable[[], Optional[ScrapeService]]


class ScrapeScheduler:
    """Run ``ScrapeService.run`` every ``interval_hours`` on the current loop.

    The first run happens one interval after :meth:`start`. A tick without a
    service (no store configured) is logged and skipped.
    """

    def __init__(self, provider: ServiceProvider, interval_hours: float) -> None:
        self._provider = provider
        self._interval_seconds = interval_hours * 3600
        self._task: asyncio.Task[None] | None = None
        self._log = logging.getLogger("denuo.api")

    @property
    def enabled(self) -> bool:
        return self._interval_seconds > 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if not self.enabled:
            self._log.info("Scheduled scraping disabled")
            return
        if self.running:
            return
        self._task = asyncio.create_task(self._loop(), name="denuo-scrape-scheduler")
        self._log.info(
            "Scheduled scraping every %.2f hours", self._interval_seconds / 3600
        )

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    async def tick(self) -> bool:
        """Run one scheduled scrape; returns ``False`` when it was skipped."""

        service = self._provider()
        if service is None:
            self._log.error("Database not available, skipping scheduled scrape")
            return False
        self._log.info("Starting scheduled scrape of denuo.be content")
        result = await service.run()
        self._log.info(
            "Scheduled scrape finished: %d items, failed sections: %s",
            result.total_items,
            ", ".join(result.failed_sections) or "none",
        )
        return True

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self._interval_seconds)
            await self.tick()


__all__ = ["ScrapeScheduler", "ServiceProvider"]
