"""Tests for status derivation."""

import pytest

from departure_board.application.status_deriver import apply_statuses, derive_status
from departure_board.domain.models import TrainStatus
from tests.factories import make_train


@pytest.mark.parametrize(
    ("virtual_minutes", "expected"),
    [
        (479, TrainStatus.ON_TIME),
        (480, TrainStatus.ARRIVED),
        (494, TrainStatus.ARRIVED),
        (495, TrainStatus.BOARDING),
        (499.9, TrainStatus.BOARDING),
        (500, TrainStatus.DEPARTED),
        (700, TrainStatus.DEPARTED),
    ],
)
def test_status_boundaries(virtual_minutes: float, expected: TrainStatus) -> None:
    """Given a 08:00-08:20 window, when deriving status, then boundaries are exact."""
    train = make_train(arrive=480, depart=500)
    assert derive_status(train, virtual_minutes) is expected


def test_departed_grace_keeps_boarding_after_departure_time() -> None:
    """Given a five minute grace, when the departure time passes, then the train keeps BOARDING."""
    train = make_train(arrive=480, depart=500)

    assert derive_status(train, 500, departed_grace=5) is TrainStatus.BOARDING
    assert derive_status(train, 504.9, departed_grace=5) is TrainStatus.BOARDING
    assert derive_status(train, 505, departed_grace=5) is TrainStatus.DEPARTED


def test_delayed_train_before_window_stays_delayed() -> None:
    """Given a delay and a clock before the shifted window, when deriving, then status is DELAYED."""
    train = make_train(arrive=505, depart=520, delay_min=5, status=TrainStatus.DELAYED)
    assert derive_status(train, 507) is TrainStatus.DELAYED


def test_delayed_train_reaches_shifted_window() -> None:
    """Given a DELAYED train, when the shifted window is reached, then it shows ARRIVED/BOARDING."""
    train = make_train(arrive=505, depart=520, delay_min=5, status=TrainStatus.DELAYED)

    assert derive_status(train, 510) is TrainStatus.ARRIVED
    assert derive_status(train, 520) is TrainStatus.BOARDING


def test_positive_delay_without_delayed_status_uses_schedule() -> None:
    """Given a delay on an ON_TIME train, when deriving before arrival, then status becomes DELAYED."""
    train = make_train(arrive=505, depart=520, delay_min=3)
    assert derive_status(train, 500) is TrainStatus.DELAYED


def test_cancelled_is_absorbing() -> None:
    """Given a cancelled train, when deriving at any time, then it stays CANCELLED."""
    train = make_train(status=TrainStatus.CANCELLED, delay_min=10)
    for vm in (0, 479, 495, 500, 1439):
        assert derive_status(train, vm) is TrainStatus.CANCELLED


def test_apply_statuses_is_deterministic() -> None:
    """Given identical inputs, when applying statuses twice, then results are identical."""
    trains = [
        make_train("a", arrive=470, depart=490),
        make_train("b", arrive=480, depart=500),
        make_train("c", arrive=520, depart=540, delay_min=5),
        make_train("d", arrive=400, depart=420, status=TrainStatus.CANCELLED),
    ]

    apply_statuses(trains, 492)
    first = [t.status for t in trains]
    apply_statuses(trains, 492)

    assert [t.status for t in trains] == first
    assert first == [
        TrainStatus.DEPARTED,
        TrainStatus.ARRIVED,
        TrainStatus.DELAYED,
        TrainStatus.CANCELLED,
    ]
