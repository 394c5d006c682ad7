"""Persistence adapters."""

from departure_board.adapters.persistence.json_schedule_repository import (
    ANNOUNCEMENTS_KEY,
    SETTINGS_KEY,
    TRAINS_KEY,
    JsonScheduleRepository,
)

__all__ = ["ANNOUNCEMENTS_KEY", "SETTINGS_KEY", "TRAINS_KEY", "JsonScheduleRepository"]
