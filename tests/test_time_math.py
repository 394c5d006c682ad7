"""Tests for minute-of-day arithmetic."""

import pytest

from departure_board.domain.models import TrainStatus
from departure_board.domain.time_math import (
    effective_window,
    intervals_overlap,
    to_hhmm,
    to_minutes,
)
from tests.factories import make_train


def test_to_minutes_parses_hhmm() -> None:
    """Given an HH:MM string, when converting, then hours and minutes are combined."""
    assert to_minutes("08:00") == 480
    assert to_minutes("23:59") == 1439
    assert to_minutes(" 7:05 ") == 425


def test_to_minutes_passes_numbers_through() -> None:
    """Given a minute count, when converting, then it is returned unchanged."""
    assert to_minutes(615) == 615
    assert to_minutes(12.5) == 12.5


def test_to_minutes_does_not_validate_ranges() -> None:
    """Given out-of-range parts, when converting, then the arithmetic is applied as is."""
    assert to_minutes("25:99") == 25 * 60 + 99


def test_to_minutes_rejects_non_numeric_parts() -> None:
    """Given non-numeric parts, when converting, then ValueError is raised."""
    with pytest.raises(ValueError):
        to_minutes("ab:cd")


def test_to_hhmm_round_trips_and_wraps() -> None:
    """Given minute values, when formatting, then values wrap into a single day."""
    assert to_hhmm(to_minutes("08:00")) == "08:00"
    assert to_hhmm(-5) == "23:55"
    assert to_hhmm(1440) == "00:00"
    assert to_hhmm(1441 + 1440) == "00:01"


def test_to_hhmm_floors_fractional_minutes() -> None:
    """Given a fractional virtual time, when formatting, then the minute is floored."""
    assert to_hhmm(480.9) == "08:00"
    assert to_hhmm(-0.5) == "23:59"


def test_effective_window_shifts_only_while_delayed() -> None:
    """Given a delayed train, when computing its window, then delay shifts it only while DELAYED."""
    delayed = make_train(arrive=505, depart=520, delay_min=5, status=TrainStatus.DELAYED)
    boarding = make_train(arrive=505, depart=520, delay_min=5, status=TrainStatus.BOARDING)

    assert (effective_window(delayed).arrive, effective_window(delayed).depart) == (510, 525)
    assert (effective_window(boarding).arrive, effective_window(boarding).depart) == (505, 520)


def test_intervals_overlap_is_open() -> None:
    """Given touching and overlapping intervals, when testing overlap, then only true overlap counts."""
    assert intervals_overlap(480, 500, 490, 510)
    assert not intervals_overlap(480, 500, 500, 520)
    assert not intervals_overlap(480, 500, 510, 520)
