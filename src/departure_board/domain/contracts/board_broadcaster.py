"""Protocol for broadcasting board updates."""

from typing import Protocol

from departure_board.domain.ports.schedule_store import ScheduleStorePort


class BoardBroadcasterProtocol(Protocol):
    """Protocol for pushing the recomputed board to a display surface."""

    async def broadcast_update(self, store: ScheduleStorePort) -> None:
        """Publish the current board state.

        Args:
            store: The schedule store to read trains, announcements and clock from.
        """
        ...
