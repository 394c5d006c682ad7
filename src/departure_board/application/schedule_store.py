"""Schedule store: authoritative train list, settings and announcements."""

import logging
import math
import uuid
from collections.abc import Callable
from typing import Any

from departure_board.application.interval_assigner import assign_platforms
from departure_board.application.simulation_clock import (
    ClockAdvance,
    EventDetection,
    SimulationClock,
    find_crossings,
)
from departure_board.application.status_deriver import (
    DEFAULT_DEPARTED_GRACE_MINUTES,
    apply_statuses,
)
from departure_board.domain.models.announcement_log import (
    DEFAULT_ANNOUNCEMENT_LIMIT,
    AnnouncementLog,
)
from departure_board.domain.models.board_settings import BoardSettings, clamp_platform_count
from departure_board.domain.models.boundary_crossing import CrossingKind
from departure_board.domain.models.train import Train, TrainStatus
from departure_board.domain.time_math import effective_window, to_hhmm, to_minutes

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {
        "train_no",
        "origin",
        "destination",
        "arrive",
        "depart",
        "delay_min",
        "status",
        "platform",
    }
)

# (train_no, origin, destination, arrive offset, depart offset, delay, status, platform)
SAMPLE_TRAINS: tuple[tuple[str, str, str, int, int, int, TrainStatus, int | None], ...] = (
    ("12001", "Central", "Harbor", 10, 20, 0, TrainStatus.ON_TIME, 1),
    ("12002", "Uptown", "Lakeside", 15, 30, 0, TrainStatus.ON_TIME, None),
    ("12003", "Valley", "Central", 25, 40, 5, TrainStatus.DELAYED, 2),
    ("12004", "Harbor", "Uptown", 35, 50, 0, TrainStatus.ON_TIME, None),
    ("12005", "Lakeside", "Valley", 55, 70, 0, TrainStatus.ON_TIME, None),
)
SAMPLE_BASE_TIME = "08:00"


def _default_id_factory() -> str:
    return uuid.uuid4().hex[:8]


def _optional_platform(value: Any) -> int | None:
    """Normalize a platform request; empty values and numbers below 1 mean "no request"."""
    if value is None or value == "":
        return None
    platform = int(value)
    return platform if platform >= 1 else None


def _schedule_minutes(value: int | float | str) -> int:
    """Parse a scheduled time into whole minutes since midnight.

    Raises:
        ValueError: If the value is not a whole number of minutes.
    """
    minutes = to_minutes(value)
    if not float(minutes).is_integer():
        raise ValueError(f"scheduled times must be whole minutes, got {value!r}")
    return int(minutes)


def _delay_minutes(value: Any) -> int:
    """Parse a delay; negative delays are rejected."""
    minutes = int(value or 0)
    if minutes < 0:
        raise ValueError(f"delay must not be negative, got {value!r}")
    return minutes


class ScheduleStore:
    """Owns the trains, settings and announcement log of one departure board.

    Every mutating operation finishes with a full recomputation (statuses,
    platform assignment, ordering by effective departure) so callers never
    observe stale derived values. Unknown ids are ignored.
    """

    def __init__(
        self,
        settings: BoardSettings | None = None,
        trains: list[Train] | None = None,
        announcements: list[str] | None = None,
        announcement_limit: int = DEFAULT_ANNOUNCEMENT_LIMIT,
        event_detection: EventDetection = "edge",
        reserve_manual_platforms: bool = False,
        departed_grace_minutes: float = DEFAULT_DEPARTED_GRACE_MINUTES,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            settings: Board settings; defaults to 6 platforms starting at 08:00.
            trains: Initial trains, e.g. restored from storage.
            announcements: Initial announcements, newest first.
            announcement_limit: Maximum number of announcements kept.
            event_detection: "edge" or "tolerance" boundary detection on ticks.
            reserve_manual_platforms: Honored manual platforms also block automatic assignment.
            departed_grace_minutes: Minutes after departure time a train keeps BOARDING.
            id_factory: Generator for new train ids.
        """
        self._settings = settings or BoardSettings()
        self._settings.num_platforms = clamp_platform_count(self._settings.num_platforms)
        self._trains: list[Train] = list(trains or [])
        self._log = AnnouncementLog(limit=announcement_limit, entries=announcements)
        self.clock = SimulationClock(self._settings.sim)
        self.event_detection = event_detection
        self.reserve_manual_platforms = reserve_manual_platforms
        self.departed_grace_minutes = departed_grace_minutes
        self._id_factory = id_factory or _default_id_factory
        self.recompute()

    # Read side

    @property
    def trains(self) -> list[Train]:
        """Trains ordered by effective departure time."""
        return list(self._trains)

    @property
    def announcements(self) -> list[str]:
        return self._log.entries

    @property
    def settings(self) -> BoardSettings:
        return self._settings

    @property
    def clock_display(self) -> str:
        return self.clock.display

    def get(self, train_id: str) -> Train | None:
        return next((t for t in self._trains if t.id == train_id), None)

    def trains_with_status(self, status: TrainStatus | None = None) -> list[Train]:
        """Trains filtered by status; None returns all of them."""
        if status is None:
            return self.trains
        return [t for t in self._trains if t.status is status]

    # Recomputation

    def recompute(self) -> None:
        """Derive statuses, assign platforms and re-sort by effective departure."""
        apply_statuses(self._trains, self.clock.virtual_minutes, self.departed_grace_minutes)
        assign_platforms(
            self._trains,
            self._settings.num_platforms,
            reserve_manual_platforms=self.reserve_manual_platforms,
        )
        self._trains.sort(key=lambda t: effective_window(t).depart)

    def announce(self, message: str) -> str:
        """Add a message to the log, stamped with the virtual time."""
        entry = f"[{self.clock.display}] {message}"
        self._log.add(entry)
        logger.info(f"Announcement: {entry}")
        return entry

    # Mutations

    def _new_id(self) -> str:
        existing = {t.id for t in self._trains}
        train_id = self._id_factory()
        while train_id in existing:
            train_id = self._id_factory()
        return train_id

    def add(
        self,
        train_no: str,
        origin: str,
        destination: str,
        arrive: int | str,
        depart: int | str,
        delay: int = 0,
        status: TrainStatus | str | None = None,
        platform: int | str | None = None,
    ) -> Train:
        """Add a train with a fresh id and announce it.

        Args:
            train_no: Display number of the train (not necessarily unique).
            origin: Origin station name.
            destination: Destination station name.
            arrive: Scheduled arrival, minutes or "HH:MM".
            depart: Scheduled departure, minutes or "HH:MM".
            delay: Accumulated delay in minutes.
            status: Initial status, ON_TIME when unset.
            platform: Manually requested platform, or None.

        Returns:
            The stored train after recomputation.

        Raises:
            ValueError: If a time is not whole minutes or the delay is negative.
        """
        train = Train(
            id=self._new_id(),
            train_no=str(train_no).strip(),
            origin=str(origin).strip(),
            destination=str(destination).strip(),
            arrive=_schedule_minutes(arrive),
            depart=_schedule_minutes(depart),
            delay_min=_delay_minutes(delay),
            status=TrainStatus(status) if status else TrainStatus.ON_TIME,
            platform=_optional_platform(platform),
        )
        self._trains.append(train)
        requested = train.platform if train.platform is not None else "TBD"
        self.announce(f"Train {train.train_no} scheduled for platform {requested}.")
        self.recompute()
        return train

    def update(self, train_id: str, **updates: Any) -> Train | None:
        """Merge ``updates`` into a train and announce the change.

        All values are validated before any field is changed.

        Raises:
            TypeError: If an update names a field that cannot be edited.
            ValueError: If a value is invalid, or the status change would enter
                or leave CANCELLED (use ``cancel`` for that).
        """
        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise TypeError(f"Cannot update train fields: {', '.join(sorted(unknown))}")

        train = self.get(train_id)
        if train is None:
            logger.debug(f"Ignoring update for unknown train id {train_id}")
            return None

        changes: dict[str, Any] = {}
        for name, value in updates.items():
            if name in ("arrive", "depart"):
                value = _schedule_minutes(value)
            elif name == "status":
                value = TrainStatus(value)
                if (value is TrainStatus.CANCELLED) != train.is_cancelled:
                    raise ValueError(
                        f"Cannot change status of train {train.train_no} "
                        f"from {train.status.value} to {value.value}"
                    )
            elif name == "platform":
                value = _optional_platform(value)
            elif name == "delay_min":
                value = _delay_minutes(value)
            else:
                value = str(value).strip()
            changes[name] = value

        for name, value in changes.items():
            setattr(train, name, value)

        self.announce(f"Train {train.train_no} updated.")
        self.recompute()
        return train

    def delay(self, train_id: str, minutes: int) -> Train | None:
        """Add ``minutes`` of delay and mark the train DELAYED until its window is reached.

        A cancelled train keeps its status.

        Raises:
            ValueError: If ``minutes`` is negative.
        """
        minutes = _delay_minutes(minutes)
        train = self.get(train_id)
        if train is None:
            logger.debug(f"Ignoring delay for unknown train id {train_id}")
            return None
        train.delay_min = (train.delay_min or 0) + minutes
        if not train.is_cancelled:
            train.status = TrainStatus.DELAYED
        self.announce(f"Train {train.train_no} delayed by {minutes} minutes.")
        self.recompute()
        return train

    def cancel(self, train_id: str) -> Train | None:
        """Cancel a train. Cancellation is permanent."""
        train = self.get(train_id)
        if train is None:
            logger.debug(f"Ignoring cancel for unknown train id {train_id}")
            return None
        train.status = TrainStatus.CANCELLED
        self.announce(f"Train {train.train_no} has been cancelled.")
        self.recompute()
        return train

    def clear(self) -> None:
        """Remove all trains and announcements."""
        count = len(self._trains)
        self._trains = []
        self._log.clear()
        logger.info(f"Cleared {count} train(s)")
        self.recompute()

    def seed(self) -> list[Train]:
        """Replace the schedule with the sample trains around 08:00."""
        base = to_minutes(SAMPLE_BASE_TIME)
        self._trains = []
        for train_no, origin, destination, arrive, depart, delay, status, platform in SAMPLE_TRAINS:
            self._trains.append(
                Train(
                    id=self._new_id(),
                    train_no=train_no,
                    origin=origin,
                    destination=destination,
                    arrive=base + arrive,
                    depart=base + depart,
                    delay_min=delay,
                    status=status,
                    platform=platform,
                )
            )
        self.announce("Sample data seeded.")
        self.recompute()
        return self.trains

    # Settings

    def set_num_platforms(self, count: int | str) -> int:
        """Set the platform count, clamped into 1..20."""
        self._settings.num_platforms = clamp_platform_count(int(count or 1))
        logger.info(f"Platform count set to {self._settings.num_platforms}")
        self.recompute()
        return self._settings.num_platforms

    def set_speed(self, speed: float | str) -> None:
        """Set virtual minutes per real second.

        Raises:
            ValueError: If ``speed`` is negative or not a finite number.
        """
        value = float(speed)
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"speed must be a non-negative number, got {speed!r}")
        self.clock.set_speed(value)

    def set_auto_advance(self, enabled: bool, now: float | None = None) -> None:
        self.clock.set_auto_advance(enabled, now)

    def set_virtual_time(self, value: int | float | str) -> None:
        """Jump the virtual clock to a minute count or "HH:MM" and recompute."""
        self.clock.set_virtual_minutes(to_minutes(value))
        self.recompute()

    # Clock

    def tick(self, now: float) -> list[str]:
        """Advance the clock to real time ``now`` (seconds, monotonic).

        Returns:
            Announcements emitted during this tick, in emission order.
        """
        step = self.clock.advance(now)
        if step is None:
            return []
        return self._after_step(step)

    def advance(self, minutes: float) -> list[str]:
        """Advance the virtual clock by ``minutes`` in a single step."""
        return self._after_step(self.clock.advance_by(minutes))

    def _after_step(self, step: ClockAdvance) -> list[str]:
        self.recompute()
        emitted: list[str] = []
        for crossing in find_crossings(self._trains, step, self.event_detection):
            train = crossing.train
            if crossing.kind is CrossingKind.BOARDING_CALL:
                message = f"Train {train.train_no} boarding at platform {train.display_platform}."
            else:
                message = f"Train {train.train_no} departing from platform {train.display_platform}."
            emitted.append(self.announce(message))
        if emitted:
            logger.debug(
                f"Tick {to_hhmm(step.previous)} -> {to_hhmm(step.current)}: "
                f"{len(emitted)} event(s)"
            )
        return emitted
