"""Schedule store port."""

from typing import Protocol

from departure_board.domain.models.board_settings import BoardSettings
from departure_board.domain.models.train import Train


class ScheduleStorePort(Protocol):
    """Port through which drivers advance and read the schedule."""

    def tick(self, now: float) -> list[str]:
        """Advance the virtual clock to real time ``now`` and return new announcements."""
        ...

    @property
    def trains(self) -> list[Train]:
        """Trains in display order."""
        ...

    @property
    def announcements(self) -> list[str]:
        """Announcements, newest first."""
        ...

    @property
    def clock_display(self) -> str:
        """Current virtual time as ``HH:MM``."""
        ...

    @property
    def settings(self) -> BoardSettings:
        """Current board settings."""
        ...
