"""Clock ticker advancing the virtual clock at a steady cadence."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from departure_board.domain.contracts.board_broadcaster import BoardBroadcasterProtocol
    from departure_board.domain.ports.schedule_repository import ScheduleRepository
    from departure_board.domain.ports.schedule_store import ScheduleStorePort

logger = logging.getLogger(__name__)


class ClockTicker:
    """Ticks the schedule store, saves it and broadcasts the board.

    Each tick runs to completion, including saving and broadcasting, before the
    next one is scheduled, so ticks never overlap.
    """

    def __init__(
        self,
        store: ScheduleStorePort,
        broadcaster: BoardBroadcasterProtocol,
        repository: ScheduleRepository | None = None,
        tick_interval_seconds: float = 0.25,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the clock ticker.

        Args:
            store: The schedule store to advance.
            broadcaster: Receives the store after every tick.
            repository: Optional repository the store is saved to after every tick.
            tick_interval_seconds: Real seconds to sleep between ticks.
            monotonic: Source of monotonic time in seconds.
        """
        self.store = store
        self.broadcaster = broadcaster
        self.repository = repository
        self.tick_interval_seconds = tick_interval_seconds
        self.monotonic = monotonic
        self.tick_count = 0
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the ticker."""
        if self.running:
            logger.warning("Clock ticker already running")
            return

        # Establish the tick reference so the first real tick has a sane delta
        self.store.tick(self.monotonic())
        self._task = asyncio.create_task(self._tick_loop())
        logger.info(f"Started clock ticker (every {self.tick_interval_seconds}s)")

    async def stop(self) -> None:
        """Stop the ticker, reporting an error that ended the loop early."""
        if self._task and self._task.done():
            if not self._task.cancelled() and self._task.exception() is not None:
                logger.error(f"Clock ticker stopped with error: {self._task.exception()}")
            self._task = None
        elif self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Clock ticker cancelled")
            logger.info("Stopped clock ticker")

    async def _tick_loop(self) -> None:
        """Main ticking loop."""
        try:
            while True:
                await asyncio.sleep(self.tick_interval_seconds)
                await self.tick_once()
        except asyncio.CancelledError:
            logger.info("Clock ticker cancelled")
            raise

    async def tick_once(self) -> list[str]:
        """Run a single tick: advance, persist, broadcast."""
        emitted = self.store.tick(self.monotonic())
        self.tick_count += 1

        if self.repository is not None:
            try:
                self.repository.save(
                    self.store.trains, self.store.settings, self.store.announcements
                )
            except Exception as e:
                logger.error(f"Failed to save board state: {e}")

        await self.broadcaster.broadcast_update(self.store)
        return emitted
