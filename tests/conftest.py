from datetime import datetime

import pytest

from schedbot.bot import ScheduleBot
from schedbot.exporter import Exporter
from schedbot.schemas import ScheduleEntry, StoreState
from schedbot.settings import Settings
from schedbot.store import JsonStore

# A Monday afternoon.
NOW = datetime(2026, 10, 19, 13, 0)
TODAY = "19-10-2026"
TOMORROW = "20-10-2026"


def make_entry(entry_id, activity, date=TODAY, time="09:00"):
    return ScheduleEntry(id=entry_id, activity=activity, date=date, time=time, created="2026-10-19T08:00:00")


@pytest.fixture
def store(tmp_path):
    return JsonStore(tmp_path / "data.json")


@pytest.fixture
def settings(tmp_path):
    return Settings(
        data_file=tmp_path / "data.json",
        export_dir=tmp_path / "exports",
        backup_dir=tmp_path / "backups",
    )


@pytest.fixture
def bot(store, settings, tmp_path):
    return ScheduleBot(
        store=store,
        settings=settings,
        exporter=Exporter(tmp_path / "exports", tmp_path / "backups"),
        clock=lambda: NOW,
    )


@pytest.fixture
def seed(store):
    def _seed(*entries):
        store.save(StoreState(schedules=list(entries)))

    return _seed
