"""Train seed loader."""

import logging
from dataclasses import dataclass

from departure_board.adapters.config.app_config import AppConfig

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("train_no", "from", "to", "arrive", "depart")


@dataclass(frozen=True)
class TrainSeed:
    """Fields of a train to add at startup."""

    train_no: str
    origin: str
    destination: str
    arrive: str | int
    depart: str | int
    delay: int = 0
    status: str | None = None
    platform: int | None = None


class TrainSeedLoader:
    """Loads seed trains from app config."""

    @staticmethod
    def load(config: AppConfig) -> list[TrainSeed]:
        """Load seed trains from the [[trains]] entries of the TOML file.

        Entries missing a required field are skipped with a warning.
        """
        if not config.config_file:
            return []

        seeds: list[TrainSeed] = []
        for index, entry in enumerate(config.get_trains_config()):
            missing = [name for name in REQUIRED_FIELDS if entry.get(name) in (None, "")]
            if missing:
                logger.warning(f"Skipping train entry #{index + 1}: missing {', '.join(missing)}")
                continue

            platform = entry.get("platform")
            seeds.append(
                TrainSeed(
                    train_no=str(entry["train_no"]),
                    origin=str(entry["from"]),
                    destination=str(entry["to"]),
                    arrive=entry["arrive"],
                    depart=entry["depart"],
                    delay=int(entry.get("delay", 0) or 0),
                    status=entry.get("status"),
                    platform=int(platform) if platform else None,
                )
            )
        return seeds
