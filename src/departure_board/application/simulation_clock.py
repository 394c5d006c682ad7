"""Scaled virtual clock and boundary-crossing detection."""

import logging
from dataclasses import dataclass
from typing import Literal

from departure_board.domain.models.board_settings import SimulationSettings
from departure_board.domain.models.boundary_crossing import BoundaryCrossing, CrossingKind
from departure_board.domain.models.train import Train
from departure_board.domain.time_math import MINUTES_PER_DAY, effective_window, to_hhmm

logger = logging.getLogger(__name__)

EventDetection = Literal["edge", "tolerance"]

BOARDING_CALL_LEAD_MINUTES = 5
TOLERANCE_MINUTES = 0.1


@dataclass(frozen=True)
class ClockAdvance:
    """Virtual time before and after one clock step."""

    previous: float
    current: float
    elapsed: float  # virtual minutes advanced, before wrapping


class SimulationClock:
    """Advances virtual minute-of-day at ``speed`` virtual minutes per real second.

    Operates on a ``SimulationSettings`` instance owned by the schedule store.
    """

    def __init__(self, sim: SimulationSettings) -> None:
        self.sim = sim

    @property
    def virtual_minutes(self) -> float:
        return self.sim.virtual_minutes

    @property
    def display(self) -> str:
        return to_hhmm(self.sim.virtual_minutes)

    def advance(self, now: float) -> ClockAdvance | None:
        """Advance virtual time to the real-time instant ``now`` (seconds).

        The last-tick timestamp is refreshed on every call, including when
        auto-advance is off, so re-enabling it never produces a jump.

        Returns:
            The step taken, or None if auto-advance is disabled or this is the
            first tick.
        """
        last_tick = self.sim.last_tick
        self.sim.last_tick = now
        if not self.sim.auto_advance or last_tick is None:
            return None

        delta_seconds = max(0.0, now - last_tick)
        elapsed = delta_seconds * self.sim.speed
        previous = self.sim.virtual_minutes
        self.sim.virtual_minutes = (previous + elapsed) % MINUTES_PER_DAY
        return ClockAdvance(previous=previous, current=self.sim.virtual_minutes, elapsed=elapsed)

    def advance_by(self, minutes: float) -> ClockAdvance:
        """Advance virtual time by ``minutes`` regardless of auto-advance."""
        previous = self.sim.virtual_minutes
        self.sim.virtual_minutes = (previous + minutes) % MINUTES_PER_DAY
        return ClockAdvance(previous=previous, current=self.sim.virtual_minutes, elapsed=minutes)

    def set_virtual_minutes(self, minutes: float) -> None:
        self.sim.virtual_minutes = minutes % MINUTES_PER_DAY

    def set_auto_advance(self, enabled: bool, now: float | None = None) -> None:
        """Toggle auto-advance, restarting the tick reference at ``now``."""
        self.sim.auto_advance = enabled
        self.sim.last_tick = now
        logger.info(f"Auto-advance {'enabled' if enabled else 'disabled'}")

    def set_speed(self, speed: float) -> None:
        self.sim.speed = speed
        logger.info(f"Simulation speed set to {speed} virtual min/s")


def _crossed(boundary: float, step: ClockAdvance) -> bool:
    """Check whether ``boundary`` lies in ``(previous, current]``, wrapping at midnight."""
    if step.elapsed >= MINUTES_PER_DAY:
        return True
    if step.elapsed <= 0:
        return False
    target = boundary % MINUTES_PER_DAY
    if step.previous < step.current:
        return step.previous < target <= step.current
    # Wrapped past midnight
    return target > step.previous or target <= step.current


def _near(boundary: float, step: ClockAdvance) -> bool:
    return abs(step.current - boundary) < TOLERANCE_MINUTES


def find_crossings(
    trains: list[Train],
    step: ClockAdvance,
    detection: EventDetection = "edge",
) -> list[BoundaryCrossing]:
    """Find boarding-call and departure boundaries passed during ``step``.

    With ``"edge"`` detection a boundary fires when it lies in
    ``(previous, current]``, independent of the step size. ``"tolerance"``
    fires when the clock lands within 0.1 minutes of the boundary and can miss
    events when a single step exceeds about 0.2 minutes.
    """
    check = _crossed if detection == "edge" else _near
    crossings: list[BoundaryCrossing] = []
    for train in trains:
        depart = effective_window(train).depart
        boarding_call = depart - BOARDING_CALL_LEAD_MINUTES
        if check(boarding_call, step):
            crossings.append(BoundaryCrossing(train, CrossingKind.BOARDING_CALL, boarding_call))
        if check(depart, step):
            crossings.append(BoundaryCrossing(train, CrossingKind.DEPARTURE, depart))
    return crossings
