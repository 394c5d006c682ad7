"""Pollers driving the schedule store."""

from departure_board.adapters.pollers.clock_ticker import ClockTicker

__all__ = ["ClockTicker"]
