"""Domain contracts (protocols) for collaborators."""

from departure_board.domain.contracts.board_broadcaster import BoardBroadcasterProtocol

__all__ = ["BoardBroadcasterProtocol"]
