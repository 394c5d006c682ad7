"""Broadcasters for the console board."""

from departure_board.adapters.display.broadcasters.console_broadcaster import (
    ConsoleBoardBroadcaster,
)

__all__ = ["ConsoleBoardBroadcaster"]
