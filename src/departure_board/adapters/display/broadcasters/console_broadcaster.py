"""Broadcaster writing the board to a text stream."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from departure_board.adapters.display.formatters.board_formatter import BoardFormatter
from departure_board.domain.contracts.board_broadcaster import BoardBroadcasterProtocol

if TYPE_CHECKING:
    from departure_board.domain.ports.schedule_store import ScheduleStorePort

logger = logging.getLogger(__name__)


class ConsoleBoardBroadcaster(BoardBroadcasterProtocol):
    """Renders the board to a stream whenever the visible minute changes."""

    def __init__(
        self,
        stream: TextIO | None = None,
        formatter: BoardFormatter | None = None,
        only_on_change: bool = True,
    ) -> None:
        self.stream = stream or sys.stdout
        self.formatter = formatter or BoardFormatter()
        self.only_on_change = only_on_change
        self._last_rendered: str | None = None

    async def broadcast_update(self, store: ScheduleStorePort) -> None:
        """Write the current board if it differs from the last one written.

        Args:
            store: The schedule store to render.
        """
        board = self.formatter.format_board(
            store.clock_display,
            store.trains,
            store.settings.num_platforms,
            store.announcements,
        )
        if self.only_on_change and board == self._last_rendered:
            return
        self._last_rendered = board
        self.stream.write(board + "\n\n")
        self.stream.flush()
        logger.debug(f"Rendered board at {store.clock_display}")
