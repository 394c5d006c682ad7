"""Formatters for the console board."""

from departure_board.adapters.display.formatters.board_formatter import BoardFormatter

__all__ = ["BoardFormatter"]
