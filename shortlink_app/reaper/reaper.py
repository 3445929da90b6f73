"""
Expired Link Reaper

Background task that periodically sweeps expired links out of the registry.

Architecture:
- Started once from the application lifespan, lives as long as the process
- Sleeps for a fixed interval, then calls Registry.sweep()
- Owns no state beyond its interval and a few counters
- Cancelled at shutdown
"""

import asyncio
import logging
from typing import Optional

from shortlink_app.registry import Registry


logger = logging.getLogger(__name__)


class ExpiredLinkReaper:
    """
    Periodic sweeper for the link registry.

    Redirects already refuse expired links; this only reclaims the memory
    and frees the names of links nobody asked for again.
    """

    def __init__(self, registry: Registry, interval: float = 300):
        """
        Args:
            registry: Registry to sweep
            interval: Seconds between sweeps
        """
        if interval <= 0:
            raise ValueError("Reaper interval must be positive")
        self.registry = registry
        self.interval = interval
        self.running = False
        self.sweep_count = 0
        self.removed_count = 0
        self._task: Optional[asyncio.Task] = None

    def run_once(self) -> int:
        """Sweep once, returning how many links were removed"""
        removed = self.registry.sweep()
        self.sweep_count += 1
        self.removed_count += removed
        if removed:
            logger.info("Reaped %d expired link(s). Total: %d", removed, self.removed_count)
        return removed

    async def start(self):
        """Run the sweep loop until stopped or cancelled"""
        self.running = True
        logger.info("Expired link reaper started (interval: %ss)", self.interval)

        while self.running:
            try:
                await asyncio.sleep(self.interval)
                if not self.running:
                    break
                # Off the event loop: the registry lock is a blocking threading lock
                await asyncio.to_thread(self.run_once)

            except asyncio.CancelledError:
                logger.info("Reaper task cancelled.")
                break
            except Exception:
                # A failed sweep must not kill the loop; the next one retries
                logger.exception("Error while sweeping expired links")

        self.running = False
        logger.info("Expired link reaper stopped")

    def launch(self) -> asyncio.Task:
        """Schedule start() on the running event loop"""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self.start())
        return self._task

    async def shutdown(self):
        """Stop the loop and wait for the task to finish"""
        self.stop()
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

    def stop(self):
        """Stop the reaper"""
        self.running = False
