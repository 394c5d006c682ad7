"""Domain layer - core scheduling models and ports."""

from departure_board.domain.models import (
    AnnouncementLog,
    BoardSettings,
    SimulationSettings,
    TimeWindow,
    Train,
    TrainStatus,
)
from departure_board.domain.ports import ScheduleRepository, ScheduleStorePort

__all__ = [
    "AnnouncementLog",
    "BoardSettings",
    "ScheduleRepository",
    "ScheduleStorePort",
    "SimulationSettings",
    "TimeWindow",
    "Train",
    "TrainStatus",
]
