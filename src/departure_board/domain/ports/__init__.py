"""Domain ports (interfaces) for the departure board."""

from departure_board.domain.ports.schedule_repository import (
    PersistedSchedule,
    ScheduleRepository,
)
from departure_board.domain.ports.schedule_store import ScheduleStorePort

__all__ = ["PersistedSchedule", "ScheduleRepository", "ScheduleStorePort"]
