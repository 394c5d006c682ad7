"""Boundary crossing domain model."""

from dataclasses import dataclass
from enum import Enum

from departure_board.domain.models.train import Train


class CrossingKind(str, Enum):
    """Announcement-worthy boundary on a train's timeline."""

    BOARDING_CALL = "boarding"
    DEPARTURE = "departing"


@dataclass(frozen=True)
class BoundaryCrossing:
    """A train boundary passed by the virtual clock during one tick."""

    train: Train
    kind: CrossingKind
    boundary: float
