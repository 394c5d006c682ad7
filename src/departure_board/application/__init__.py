"""Application layer - the scheduling engine."""

from departure_board.application.interval_assigner import assign_platforms
from departure_board.application.schedule_store import ScheduleStore
from departure_board.application.simulation_clock import ClockAdvance, SimulationClock
from departure_board.application.status_deriver import apply_statuses, derive_status

__all__ = [
    "ClockAdvance",
    "ScheduleStore",
    "SimulationClock",
    "apply_statuses",
    "assign_platforms",
    "derive_status",
]
