"""Console display adapters."""

from departure_board.adapters.display.broadcasters import ConsoleBoardBroadcaster
from departure_board.adapters.display.formatters import BoardFormatter

__all__ = ["BoardFormatter", "ConsoleBoardBroadcaster"]
