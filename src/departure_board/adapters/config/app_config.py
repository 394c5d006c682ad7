"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BOARD_KEYS = (
    "num_platforms",
    "speed",
    "auto_advance",
    "start_time",
    "tick_interval_seconds",
    "event_detection",
    "reserve_manual_platforms",
    "departed_grace_minutes",
    "announcement_limit",
    "state_file",
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Board configuration
    num_platforms: int = Field(
        default=6, ge=1, le=20, description="Number of physical platforms (1-20)"
    )
    announcement_limit: int = Field(
        default=6, ge=1, description="Maximum number of announcements kept in the log"
    )

    # Simulation configuration
    speed: float = Field(
        default=1.0, ge=0, description="Virtual minutes that pass per real second"
    )
    auto_advance: bool = Field(default=True, description="Advance the virtual clock automatically")
    start_time: str = Field(default="08:00", description="Initial virtual time (HH:MM)")
    tick_interval_seconds: float = Field(
        default=0.25, gt=0, description="Real seconds between clock ticks"
    )
    event_detection: str = Field(
        default="edge",
        description="Boarding/departure detection: 'edge' (step-size independent) or 'tolerance'",
    )

    # Scheduling behaviour
    reserve_manual_platforms: bool = Field(
        default=False,
        description="Honored manual platform requests also block automatic assignment",
    )
    departed_grace_minutes: float = Field(
        default=0,
        ge=0,
        description="Minutes a train keeps BOARDING after its departure time",
    )

    # Storage
    state_file: str = Field(
        default="departure_board_state.json",
        description="JSON file holding the saved trains and settings",
    )

    # TOML config file path (optional)
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [board] settings and [[trains]] seeds",
    )

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config that ignores any .env file."""
        return cls(_env_file=None, **overrides)

    @field_validator("event_detection")
    @classmethod
    def validate_event_detection(cls, v: str) -> str:
        """Validate event detection is either 'edge' or 'tolerance'."""
        if v.lower() not in ("edge", "tolerance"):
            raise ValueError("event_detection must be either 'edge' or 'tolerance'")
        return v.lower()

    @field_validator("start_time")
    @classmethod
    def validate_start_time(cls, v: str) -> str:
        """Validate start time looks like HH:MM."""
        parts = v.strip().split(":")
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            raise ValueError("start_time must be in HH:MM format")
        return v.strip()

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, updating board settings."""
        if not self.config_file:
            raise ValueError("config_file must be set to load the TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        # Update board settings from TOML if present
        board = toml_data.get("board", {})
        if not isinstance(board, dict):
            raise ValueError("TOML config 'board' must be a table")
        for key in BOARD_KEYS:
            if key in board:
                setattr(self, key, board[key])

        return toml_data

    def apply_toml(self) -> None:
        """Apply the [board] table of the TOML file, if one is configured."""
        if self.config_file:
            self._load_toml_data()

    def get_trains_config(self) -> list[dict[str, Any]]:
        """Parse and return the [[trains]] seed entries from the TOML file."""
        toml_data = self._load_toml_data()

        trains = toml_data.get("trains", [])
        if not isinstance(trains, list):
            raise ValueError("TOML config 'trains' must be a list")
        return [t for t in trains if isinstance(t, dict)]
