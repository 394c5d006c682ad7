"""Minute-of-day arithmetic and formatting.

Times are minutes since midnight and wrap at 1440. Parsing is deliberately
lenient: ``"HH:MM"`` is read as ``H * 60 + M`` without range checks, so
``"25:99"`` becomes 1599. Non-numeric parts raise ``ValueError``.
"""

import math

from departure_board.domain.models.train import TimeWindow, Train, TrainStatus

MINUTES_PER_DAY = 24 * 60


def to_minutes(value: int | float | str) -> int | float:
    """Convert a minute count or an ``"HH:MM"`` string to minutes since midnight."""
    if isinstance(value, (int, float)):
        return value
    hours, minutes = (int(part) for part in value.strip().split(":")[:2])
    return hours * 60 + minutes


def to_hhmm(minutes: int | float) -> str:
    """Format minutes as zero-padded ``HH:MM``, wrapping into ``[0, 1440)``.

    Fractional minutes are floored, so a virtual clock at 480.9 reads ``08:00``.
    """
    m = ((math.floor(minutes) % MINUTES_PER_DAY) + MINUTES_PER_DAY) % MINUTES_PER_DAY
    return f"{m // 60:02d}:{m % 60:02d}"


def effective_window(train: Train) -> TimeWindow:
    """Return the train's occupancy window, shifted by its delay while DELAYED."""
    shift = train.delay_min if train.status is TrainStatus.DELAYED else 0
    return TimeWindow(arrive=train.arrive + shift, depart=train.depart + shift)


def intervals_overlap(a_start: float, a_end: float, b_start: float, b_end: float) -> bool:
    """Open-interval overlap test; touching intervals do not overlap."""
    return a_start < b_end and b_start < a_end
