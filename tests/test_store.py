import json

import pytest

from schedbot.errors import StoreError
from schedbot.schemas import ScheduleEntry, StoreState
from schedbot.store import JsonStore


def _entry():
    return ScheduleEntry(id=1, activity="rapat", date="19-10-2026", time="09:00", created="2026-10-19T08:00:00")


def test_load_initializes_missing_file(tmp_path):
    path = tmp_path / "data" / "data.json"
    store = JsonStore(path)
    state = store.load()
    assert state.schedules == []
    assert state.settings.reminder_enabled is True
    assert path.exists()


def test_save_and_load(tmp_path):
    store = JsonStore(tmp_path / "data.json")
    assert store.save(StoreState(schedules=[_entry()]))
    loaded = store.load()
    assert len(loaded.schedules) == 1
    assert loaded.schedules[0].activity == "rapat"


def test_file_uses_camel_case_settings(tmp_path):
    path = tmp_path / "data.json"
    store = JsonStore(path)
    store.initialize()
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload == {
        "schedules": [],
        "settings": {"reminderEnabled": True, "defaultReminderMinutes": 30},
    }


def test_reads_existing_document(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(
        json.dumps({
            "schedules": [
                {"id": 5, "activity": "gym", "date": "20-10-2026", "time": "18:00", "created": "2026-10-19T08:00:00"}
            ],
            "settings": {"reminderEnabled": False, "defaultReminderMinutes": 15},
        }),
        encoding="utf-8",
    )
    state = JsonStore(path).load()
    assert state.schedules[0].id == 5
    assert state.settings.reminder_enabled is False
    assert state.settings.default_reminder_minutes == 15


def test_malformed_file_degrades_to_empty_state(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonStore(path)
    with pytest.raises(StoreError):
        store.read()
    assert store.load().schedules == []
    assert not store.is_reachable()


def test_invalid_entry_is_rejected(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"schedules": [{"id": 1, "activity": "x", "date": "2026-10-19"}]}), encoding="utf-8")
    with pytest.raises(StoreError):
        JsonStore(path).read()


def test_save_failure_returns_false(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = JsonStore(blocker / "data.json")
    assert store.save(StoreState()) is False


def test_reset(tmp_path):
    store = JsonStore(tmp_path / "data.json")
    store.save(StoreState(schedules=[_entry()]))
    assert store.reset()
    assert store.load().schedules == []
