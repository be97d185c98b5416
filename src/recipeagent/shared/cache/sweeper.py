from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional

from recipeagent.shared.cache.ttl_cache import TTLCache

log = logging.getLogger("cache")


class CacheSweeper:
    """
    Periodically sweeps expired entries out of the registered caches.
    """

    def __init__(self, caches: Dict[str, TTLCache], interval_seconds: float) -> None:
        self.caches = caches
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    def sweep_all(self) -> Dict[str, int]:
        return {name: cache.sweep() for name, cache in self.caches.items()}

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            removed = self.sweep_all()
            log.debug("Periodic sweep removed %s", removed)

    def start(self) -> None:
        if self.interval_seconds <= 0 or self._task is not None:
            return
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()
