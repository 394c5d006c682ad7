"""Train domain model."""

from dataclasses import dataclass
from enum import Enum


class TrainStatus(str, Enum):
    """Lifecycle status of a train on the board."""

    ON_TIME = "ON_TIME"
    DELAYED = "DELAYED"
    BOARDING = "BOARDING"
    DEPARTED = "DEPARTED"
    ARRIVED = "ARRIVED"
    CANCELLED = "CANCELLED"

    @property
    def label(self) -> str:
        """Human readable label (e.g. "ON TIME")."""
        return self.value.replace("_", " ")


@dataclass(frozen=True)
class TimeWindow:
    """Effective platform occupancy window in minutes since midnight."""

    arrive: float
    depart: float


@dataclass
class Train:
    """A scheduled train.

    Mutated in place by the schedule store; ``assigned_platform`` is derived on
    every recomputation and never treated as authoritative input.
    """

    id: str
    train_no: str
    origin: str
    destination: str
    arrive: int  # minutes since midnight
    depart: int  # minutes since midnight
    delay_min: int = 0
    status: TrainStatus = TrainStatus.ON_TIME
    platform: int | None = None  # Manually requested platform (advisory)
    assigned_platform: int | None = None

    @property
    def display_platform(self) -> int | None:
        """Platform shown to passengers: the manual request wins over the assignment."""
        return self.platform if self.platform is not None else self.assigned_platform

    @property
    def is_cancelled(self) -> bool:
        return self.status is TrainStatus.CANCELLED
