# ==============================================
# Tests for Events Module
# ==============================================

import logging
from unittest.mock import MagicMock

import pytest

from record_vault.events import EventLogger, EventNotifier, VaultEvent
from record_vault.records.record import Record


@pytest.fixture
def record():
    return Record(id=42, name="Alpha", value="1")


class TestEventNotifier:

    def test_listeners_called_in_registration_order(self, notifier, record):
        calls = []
        notifier.subscribe(VaultEvent.RECORD_ADDED, lambda r: calls.append("first"))
        notifier.subscribe(VaultEvent.RECORD_ADDED, lambda r: calls.append("second"))
        notifier.publish(VaultEvent.RECORD_ADDED, record)
        assert calls == ["first", "second"]

    def test_only_matching_event_is_delivered(self, notifier, record):
        added, deleted = MagicMock(), MagicMock()
        notifier.subscribe(VaultEvent.RECORD_ADDED, added)
        notifier.subscribe(VaultEvent.RECORD_DELETED, deleted)
        notifier.publish(VaultEvent.RECORD_ADDED, record)
        added.assert_called_once_with(record)
        deleted.assert_not_called()

    def test_subscribe_by_event_name(self, notifier, record):
        listener = MagicMock()
        notifier.subscribe("recordUpdated", listener)
        notifier.publish(VaultEvent.RECORD_UPDATED, record)
        listener.assert_called_once()

    def test_unknown_event_name_rejected(self, notifier):
        with pytest.raises(ValueError):
            notifier.subscribe("recordExploded", MagicMock())

    def test_listener_gets_a_copy(self, notifier, record):
        notifier.subscribe(VaultEvent.RECORD_ADDED, lambda r: setattr(r, "name", "mutated"))
        seen = MagicMock()
        notifier.subscribe(VaultEvent.RECORD_ADDED, seen)
        notifier.publish(VaultEvent.RECORD_ADDED, record)
        assert record.name == "Alpha"
        assert seen.call_args.args[0].name == "Alpha"

    def test_failing_listener_is_logged_and_skipped(self, notifier, record, caplog):
        after = MagicMock()
        notifier.subscribe(VaultEvent.RECORD_DELETED, MagicMock(side_effect=RuntimeError("boom")))
        notifier.subscribe(VaultEvent.RECORD_DELETED, after)

        with caplog.at_level(logging.ERROR, logger="record_vault.events.notifier"):
            notifier.publish(VaultEvent.RECORD_DELETED, record)

        after.assert_called_once()
        assert "recordDeleted" in caplog.text
        assert "boom" in caplog.text

    def test_unsubscribe(self, notifier, record):
        listener = MagicMock()
        notifier.subscribe(VaultEvent.RECORD_ADDED, listener)
        notifier.unsubscribe(VaultEvent.RECORD_ADDED, listener)
        notifier.publish(VaultEvent.RECORD_ADDED, record)
        listener.assert_not_called()
        assert notifier.listener_count(VaultEvent.RECORD_ADDED) == 0


class TestEventLogger:

    def test_logs_each_event(self, notifier, record, caplog):
        EventLogger().attach(notifier)
        with caplog.at_level(logging.INFO, logger="record_vault.events"):
            notifier.publish(VaultEvent.RECORD_ADDED, record)
            notifier.publish(VaultEvent.RECORD_UPDATED, record)
            notifier.publish(VaultEvent.RECORD_DELETED, record)
        assert "[EVENT] Record added: ID 42, Name Alpha" in caplog.text
        assert "[EVENT] Record updated: ID 42, Name Alpha" in caplog.text
        assert "[EVENT] Record deleted: ID 42, Name Alpha" in caplog.text

    def test_detach(self, notifier):
        event_logger = EventLogger().attach(notifier)
        assert notifier.listener_count(VaultEvent.RECORD_ADDED) == 1
        event_logger.detach(notifier)
        assert notifier.listener_count(VaultEvent.RECORD_ADDED) == 0
