"""Tests for application wiring."""

from pathlib import Path

import pytest

from departure_board.adapters.config import AppConfig
from departure_board.adapters.persistence import JsonScheduleRepository
from departure_board.domain.models import TrainStatus
from departure_board.main import build_store, run


def test_build_store_seeds_sample_trains() -> None:
    """Given no saved state and no TOML trains, when building, then sample trains are seeded."""
    store = build_store(AppConfig.for_testing())

    assert len(store.trains) == 5
    assert store.clock_display == "08:00"


def test_build_store_without_seeding() -> None:
    """Given seeding disabled, when building, then the board starts empty."""
    store = build_store(AppConfig.for_testing(), seed_when_empty=False)
    assert store.trains == []


def test_build_store_uses_config_values() -> None:
    """Given configured values, when building, then the store uses them."""
    config = AppConfig.for_testing(
        num_platforms=2, start_time="09:30", speed=4, reserve_manual_platforms=True
    )

    store = build_store(config)

    assert store.settings.num_platforms == 2
    assert store.clock_display == "09:30"
    assert store.settings.sim.speed == 4
    assert store.reserve_manual_platforms is True
    assert all(t.status is TrainStatus.DEPARTED for t in store.trains)


def test_build_store_seeds_from_toml(tmp_path: Path) -> None:
    """Given [[trains]] in TOML, when building, then those trains are added."""
    path = tmp_path / "board.toml"
    path.write_text(
        '[[trains]]\ntrain_no = "7"\nfrom = "A"\nto = "B"\narrive = "08:30"\ndepart = "08:40"\n',
        encoding="utf-8",
    )

    store = build_store(AppConfig.for_testing(config_file=str(path)))

    assert [t.train_no for t in store.trains] == ["7"]


def test_build_store_skips_invalid_toml_trains(tmp_path: Path) -> None:
    """Given a TOML train with a negative delay, when building, then only valid trains remain."""
    path = tmp_path / "board.toml"
    path.write_text(
        '[[trains]]\ntrain_no = "7"\nfrom = "A"\nto = "B"\narrive = "08:30"\ndepart = "08:40"\n'
        'delay = -3\n\n'
        '[[trains]]\ntrain_no = "8"\nfrom = "B"\nto = "C"\narrive = "08:50"\ndepart = "09:00"\n',
        encoding="utf-8",
    )

    store = build_store(AppConfig.for_testing(config_file=str(path)))

    assert [t.train_no for t in store.trains] == ["8"]


def test_build_store_prefers_saved_state(tmp_path: Path) -> None:
    """Given saved state, when building, then it is restored instead of seeding."""
    repository = JsonScheduleRepository(tmp_path / "state.json")
    original = build_store(AppConfig.for_testing(), seed_when_empty=False)
    original.add("42", "A", "B", "10:00", "10:10")
    repository.save(original.trains, original.settings)

    store = build_store(AppConfig.for_testing(), repository)

    assert [t.train_no for t in store.trains] == ["42"]


@pytest.mark.asyncio
async def test_run_for_duration_saves_state(tmp_path: Path) -> None:
    """Given a short duration, when running the board, then the state file is written."""
    config = AppConfig.for_testing(
        state_file=str(tmp_path / "state.json"), tick_interval_seconds=0.01
    )

    await run(config, duration=0.05)

    restored = JsonScheduleRepository(config.state_file).load()
    assert restored is not None
    assert len(restored.trains) == 5
