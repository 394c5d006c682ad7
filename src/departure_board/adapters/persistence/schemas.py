"""Wire schemas for the saved trains and settings."""

from pydantic import BaseModel, ConfigDict, Field

from departure_board.domain.models.board_settings import BoardSettings, SimulationSettings
from departure_board.domain.models.train import Train, TrainStatus


class TrainRecord(BaseModel):
    """A train as stored under the trains key."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    train_no: str = Field(alias="trainNo")
    origin: str = Field(alias="from")
    destination: str = Field(alias="to")
    arrive: int
    depart: int
    delay_min: int = Field(default=0, ge=0, alias="delayMin")
    status: TrainStatus = TrainStatus.ON_TIME
    platform: int | None = None
    # Written for display only, never read back as authoritative
    assigned_platform: int | None = Field(default=None, alias="assignedPlatform")

    @classmethod
    def from_train(cls, train: Train) -> "TrainRecord":
        return cls(
            id=train.id,
            train_no=train.train_no,
            origin=train.origin,
            destination=train.destination,
            arrive=train.arrive,
            depart=train.depart,
            delay_min=train.delay_min,
            status=train.status,
            platform=train.platform,
            assigned_platform=train.assigned_platform,
        )

    def to_train(self) -> Train:
        return Train(
            id=self.id,
            train_no=self.train_no,
            origin=self.origin,
            destination=self.destination,
            arrive=self.arrive,
            depart=self.depart,
            delay_min=self.delay_min,
            status=self.status,
            platform=self.platform,
        )


class SimRecord(BaseModel):
    """Simulation clock settings as stored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    virtual_minutes: float | None = Field(default=None, alias="virtualMinutes")
    auto_advance: bool | None = Field(default=None, alias="autoAdvance")
    speed: float | None = None


class SettingsRecord(BaseModel):
    """Board settings as stored under the settings key."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    num_platforms: int | None = Field(default=None, alias="numPlatforms")
    sim: SimRecord | None = None

    @classmethod
    def from_settings(cls, settings: BoardSettings) -> "SettingsRecord":
        return cls(
            num_platforms=settings.num_platforms,
            sim=SimRecord(
                virtual_minutes=settings.sim.virtual_minutes,
                auto_advance=settings.sim.auto_advance,
                speed=settings.sim.speed,
            ),
        )

    def apply_to(self, settings: BoardSettings) -> BoardSettings:
        """Overlay stored values onto ``settings``; absent keys keep their defaults."""
        if self.num_platforms is not None:
            settings.num_platforms = self.num_platforms
        if self.sim is not None:
            sim: SimulationSettings = settings.sim
            if self.sim.virtual_minutes is not None:
                sim.virtual_minutes = self.sim.virtual_minutes
            if self.sim.auto_advance is not None:
                sim.auto_advance = self.sim.auto_advance
            if self.sim.speed is not None:
                sim.speed = self.sim.speed
        return settings
