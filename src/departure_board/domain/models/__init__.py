"""Domain models for the departure board."""

from departure_board.domain.models.announcement_log import AnnouncementLog
from departure_board.domain.models.board_settings import BoardSettings, SimulationSettings
from departure_board.domain.models.boundary_crossing import BoundaryCrossing, CrossingKind
from departure_board.domain.models.train import TimeWindow, Train, TrainStatus

__all__ = [
    "AnnouncementLog",
    "BoardSettings",
    "BoundaryCrossing",
    "CrossingKind",
    "SimulationSettings",
    "TimeWindow",
    "Train",
    "TrainStatus",
]
