"""Tests for the JSON schedule repository."""

import json
import logging
from pathlib import Path

import pytest

from departure_board.adapters.persistence import (
    SETTINGS_KEY,
    TRAINS_KEY,
    JsonScheduleRepository,
)
from departure_board.application.schedule_store import ScheduleStore
from departure_board.domain.models import BoardSettings, TrainStatus


def test_load_missing_file_returns_none(tmp_path: Path) -> None:
    """Given no saved file, when loading, then None is returned."""
    assert JsonScheduleRepository(tmp_path / "state.json").load() is None


def test_save_writes_wire_format(tmp_path: Path, seeded_store: ScheduleStore) -> None:
    """Given a seeded store, when saving, then the document uses the camelCase wire names."""
    path = tmp_path / "state.json"

    JsonScheduleRepository(path).save(seeded_store.trains, seeded_store.settings)

    document = json.loads(path.read_text(encoding="utf-8"))
    first = document[TRAINS_KEY][0]
    assert first["trainNo"] == "12001"
    assert first["from"] == "Central"
    assert first["to"] == "Harbor"
    assert first["delayMin"] == 0
    assert first["status"] == "ON_TIME"
    assert first["platform"] == 1
    assert document[SETTINGS_KEY] == {
        "numPlatforms": 6,
        "sim": {"virtualMinutes": 480, "autoAdvance": True, "speed": 1.0},
    }


def test_saved_schedule_restores_into_store(tmp_path: Path, seeded_store: ScheduleStore) -> None:
    """Given a saved schedule, when loading it into a new store, then trains and settings return."""
    repository = JsonScheduleRepository(tmp_path / "state.json")
    seeded_store.set_num_platforms(3)
    seeded_store.set_virtual_time("08:16")
    repository.save(seeded_store.trains, seeded_store.settings)

    restored = repository.load()

    assert restored is not None
    assert restored.settings.num_platforms == 3
    assert restored.settings.sim.virtual_minutes == 496
    store = ScheduleStore(settings=restored.settings, trains=restored.trains)
    assert [t.id for t in store.trains] == [t.id for t in seeded_store.trains]
    assert [t.status for t in store.trains] == [t.status for t in seeded_store.trains]
    assert store.get(seeded_store.trains[2].id).status is TrainStatus.DELAYED


def test_assigned_platform_is_not_authoritative(tmp_path: Path) -> None:
    """Given a stored assignedPlatform, when loading, then it is ignored."""
    path = tmp_path / "state.json"
    path.write_text(
        json.dumps(
            {
                TRAINS_KEY: [
                    {
                        "id": "x1",
                        "trainNo": "1",
                        "from": "A",
                        "to": "B",
                        "arrive": 600,
                        "depart": 610,
                        "delayMin": 0,
                        "status": "ON_TIME",
                        "platform": None,
                        "assignedPlatform": 5,
                    }
                ]
            }
        ),
        encoding="utf-8",
    )

    restored = JsonScheduleRepository(path).load()

    assert restored is not None
    assert restored.trains[0].assigned_platform is None


def test_partial_settings_keep_defaults(tmp_path: Path) -> None:
    """Given settings missing keys, when loading, then the defaults fill in."""
    path = tmp_path / "state.json"
    path.write_text(json.dumps({SETTINGS_KEY: {"sim": {"speed": 3}}}), encoding="utf-8")
    defaults = BoardSettings(num_platforms=8)

    restored = JsonScheduleRepository(path, defaults=defaults).load()

    assert restored is not None
    assert restored.trains == []
    assert restored.settings.num_platforms == 8
    assert restored.settings.sim.speed == 3
    assert restored.settings.sim.virtual_minutes == 480
    assert restored.settings is not defaults


def test_corrupt_file_is_logged_and_ignored(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Given an unreadable file, when loading, then a warning is logged and None returned."""
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        assert JsonScheduleRepository(path).load() is None

    assert "Failed to load saved state" in caplog.text


def test_invalid_train_record_is_logged_and_ignored(tmp_path: Path) -> None:
    """Given a train record with a bad status, when loading, then None is returned."""
    path = tmp_path / "state.json"
    path.write_text(
        json.dumps(
            {
                TRAINS_KEY: [
                    {"id": "x", "trainNo": "1", "from": "A", "to": "B", "arrive": 1, "depart": 2,
                     "status": "LOST"}
                ]
            }
        ),
        encoding="utf-8",
    )

    assert JsonScheduleRepository(path).load() is None


def test_announcements_are_saved_when_given(tmp_path: Path, seeded_store: ScheduleStore) -> None:
    """Given announcements, when saving and loading, then the log comes back newest first."""
    repository = JsonScheduleRepository(tmp_path / "state.json")
    seeded_store.advance(21)

    repository.save(seeded_store.trains, seeded_store.settings, seeded_store.announcements)
    restored = repository.load()

    assert restored is not None
    assert restored.announcements == seeded_store.announcements
    store = ScheduleStore(trains=restored.trains, announcements=restored.announcements)
    assert store.announcements[0] == "[08:21] Train 12001 departing from platform 1."
