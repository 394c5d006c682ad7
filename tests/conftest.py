"""Shared fixtures for departure board tests."""

import pytest

from departure_board.application.schedule_store import ScheduleStore
from departure_board.domain.models import BoardSettings, SimulationSettings
from tests.factories import counting_ids


@pytest.fixture
def store() -> ScheduleStore:
    """A store at 08:00 with six platforms and no trains."""
    settings = BoardSettings(
        num_platforms=6, sim=SimulationSettings(virtual_minutes=480, auto_advance=True, speed=1.0)
    )
    return ScheduleStore(settings=settings, id_factory=counting_ids())


@pytest.fixture
def seeded_store(store: ScheduleStore) -> ScheduleStore:
    """The store loaded with the five sample trains."""
    store.seed()
    return store
