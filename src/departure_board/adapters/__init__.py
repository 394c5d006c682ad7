"""Adapters layer - configuration, storage and display integrations."""

from departure_board.adapters.config import AppConfig
from departure_board.adapters.persistence import JsonScheduleRepository

__all__ = ["AppConfig", "JsonScheduleRepository"]
