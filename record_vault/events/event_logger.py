# ==============================================
# EventLogger
# ==============================================
#
# A ready-made listener that writes one log line per lifecycle
# event. The CLI attaches it at startup:
#
#   notifier = EventNotifier()
#   EventLogger().attach(notifier)
#
# Output:
#   [EVENT] Record added: ID 1729332000000, Name Alpha
#
# ==============================================

import logging
from typing import Optional

from record_vault.events.notifier import EventNotifier, VaultEvent
from record_vault.records.record import Record

_ACTIONS = {
    VaultEvent.RECORD_ADDED: "added",
    VaultEvent.RECORD_UPDATED: "updated",
    VaultEvent.RECORD_DELETED: "deleted",
}


class EventLogger:
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("record_vault.events")

    def attach(self, notifier: EventNotifier) -> "EventLogger":
        notifier.subscribe(VaultEvent.RECORD_ADDED, self.on_added)
        notifier.subscribe(VaultEvent.RECORD_UPDATED, self.on_updated)
        notifier.subscribe(VaultEvent.RECORD_DELETED, self.on_deleted)
        return self

    def detach(self, notifier: EventNotifier) -> None:
        notifier.unsubscribe(VaultEvent.RECORD_ADDED, self.on_added)
        notifier.unsubscribe(VaultEvent.RECORD_UPDATED, self.on_updated)
        notifier.unsubscribe(VaultEvent.RECORD_DELETED, self.on_deleted)

    def _log(self, event: VaultEvent, record: Record) -> None:
        self.logger.info("[EVENT] Record %s: ID %s, Name %s", _ACTIONS[event], record.id, record.name)

    def on_added(self, record: Record) -> None:
        self._log(VaultEvent.RECORD_ADDED, record)

    def on_updated(self, record: Record) -> None:
        self._log(VaultEvent.RECORD_UPDATED, record)

    def on_deleted(self, record: Record) -> None:
        self._log(VaultEvent.RECORD_DELETED, record)
