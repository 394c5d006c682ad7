"""JSON file key-value repository for trains and settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter, ValidationError

from departure_board.adapters.persistence.schemas import SettingsRecord, TrainRecord
from departure_board.domain.models.board_settings import BoardSettings, SimulationSettings
from departure_board.domain.ports.schedule_repository import (
    PersistedSchedule,
    ScheduleRepository,
)

if TYPE_CHECKING:
    from departure_board.domain.models.train import Train

logger = logging.getLogger(__name__)

TRAINS_KEY = "rds.trains"
SETTINGS_KEY = "rds.settings"
ANNOUNCEMENTS_KEY = "rds.announcements"

_train_list = TypeAdapter(list[TrainRecord])
_announcement_list = TypeAdapter(list[str])


class JsonScheduleRepository(ScheduleRepository):
    """Stores trains, settings and announcements under separate keys of a JSON document."""

    def __init__(self, path: str | Path, defaults: BoardSettings | None = None) -> None:
        """Initialize the repository.

        Args:
            path: Location of the JSON document.
            defaults: Settings to fall back to for keys missing from the file.
        """
        self.path = Path(path)
        self.defaults = defaults

    def _read_document(self) -> dict[str, Any] | None:
        if not self.path.exists():
            logger.debug(f"No saved state at {self.path}")
            return None
        with open(self.path, encoding="utf-8") as f:
            document = json.load(f)
        if not isinstance(document, dict):
            raise ValueError("saved state must be a JSON object")
        return document

    def load(self) -> PersistedSchedule | None:
        """Load trains and settings, or None if the file is missing or unusable."""
        try:
            document = self._read_document()
            if document is None:
                return None
            records = _train_list.validate_python(document.get(TRAINS_KEY) or [])
            settings_record = SettingsRecord.model_validate(document.get(SETTINGS_KEY) or {})
            announcements = _announcement_list.validate_python(
                document.get(ANNOUNCEMENTS_KEY) or []
            )
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"Failed to load saved state from {self.path}: {e}")
            return None

        base = self.defaults or BoardSettings()
        settings = settings_record.apply_to(
            BoardSettings(
                num_platforms=base.num_platforms,
                sim=SimulationSettings(
                    virtual_minutes=base.sim.virtual_minutes,
                    auto_advance=base.sim.auto_advance,
                    speed=base.sim.speed,
                ),
            )
        )
        logger.info(f"Loaded {len(records)} train(s) from {self.path}")
        return PersistedSchedule(
            trains=[r.to_train() for r in records],
            settings=settings,
            announcements=announcements,
        )

    def save(
        self,
        trains: list[Train],
        settings: BoardSettings,
        announcements: list[str] | None = None,
    ) -> None:
        """Write trains, settings and announcements, replacing the file atomically."""
        document: dict[str, Any] = {
            TRAINS_KEY: [
                TrainRecord.from_train(t).model_dump(mode="json", by_alias=True) for t in trains
            ],
            SETTINGS_KEY: SettingsRecord.from_settings(settings).model_dump(
                mode="json", by_alias=True
            ),
        }
        if announcements is not None:
            document[ANNOUNCEMENTS_KEY] = list(announcements)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
        tmp_path.replace(self.path)
        logger.debug(f"Saved {len(trains)} train(s) to {self.path}")
