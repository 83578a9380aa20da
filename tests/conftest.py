# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# This file contains shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - clock           → FakeClock, advances one second per call
# - storage         → empty InMemoryStorage
# - backup_writer   → BackupWriter writing into tmp_path/backups
# - notifier        → fresh EventNotifier
# - store           → RecordStore wired from the fixtures above
#
# NOTES:
# ------
# - No test needs a running MongoDB or MySQL server; backend
#   tests use unittest.mock doubles for the drivers.
# - Use tmp_path for every file the code writes.
# ==============================================

from datetime import datetime, timedelta, timezone

import pytest

from record_vault.events.notifier import EventNotifier
from record_vault.persistence.backup_writer import BackupWriter
from record_vault.record_store import RecordStore
from record_vault.storage.memory import InMemoryStorage


class FakeClock:
    """Deterministic clock: every call returns a time one step later."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.current = start or datetime(2026, 10, 19, 10, 0, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        value = self.current
        self.current = self.current + self.step
        return value


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def backup_dir(tmp_path):
    return tmp_path / "backups"


@pytest.fixture
def backup_writer(backup_dir, clock):
    return BackupWriter(str(backup_dir), clock=clock)


@pytest.fixture
def notifier():
    return EventNotifier()


@pytest.fixture
def store(storage, backup_writer, notifier, clock, tmp_path):
    return RecordStore(
        storage=storage,
        backup_writer=backup_writer,
        notifier=notifier,
        export_path=tmp_path / "export.txt",
        clock=clock
    )
