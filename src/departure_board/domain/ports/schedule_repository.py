"""Schedule repository port."""

from dataclasses import dataclass, field
from typing import Protocol

from departure_board.domain.models.board_settings import BoardSettings
from departure_board.domain.models.train import Train


@dataclass
class PersistedSchedule:
    """Trains and settings as restored from storage."""

    trains: list[Train] = field(default_factory=list)
    settings: BoardSettings = field(default_factory=BoardSettings)
    announcements: list[str] = field(default_factory=list)  # Newest first


class ScheduleRepository(Protocol):
    """Port for loading and saving the schedule to a key-value store."""

    def load(self) -> PersistedSchedule | None:
        """Load the saved schedule, or None when nothing usable is stored."""
        ...

    def save(
        self,
        trains: list[Train],
        settings: BoardSettings,
        announcements: list[str] | None = None,
    ) -> None:
        """Persist trains, settings and optionally the announcement log."""
        ...
