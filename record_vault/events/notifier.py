# ==============================================
# EventNotifier
# ==============================================
#
# PURPOSE:
#   Announce record lifecycle events to any number of
#   independent listeners.
#
# WHY THIS CLASS EXISTS:
#   The store should not know who cares about a new record
#   (an event logger, an audit trail, a UI refresh). Listeners
#   register here; the store only publishes.
#
# ENUM: VaultEvent
# ----------------
#   RECORD_ADDED   = "recordAdded"
#   RECORD_UPDATED = "recordUpdated"
#   RECORD_DELETED = "recordDeleted"
#
# CLASS: EventNotifier
# --------------------
#   - subscribe(event, listener) -> None
#   - unsubscribe(event, listener) -> None
#   - listener_count(event) -> int
#   - publish(event, record) -> None
#       Synchronous. Listeners run in registration order and each
#       gets its own copy of the record. A listener that raises is
#       logged and skipped; the rest still run and publish() never
#       raises because of a listener.
#
# ==============================================

import copy
import logging
from enum import Enum
from typing import Callable, Dict, List, Union

from record_vault.records.record import Record

logger = logging.getLogger(__name__)

Listener = Callable[[Record], None]


class VaultEvent(Enum):
    """Lifecycle events published by the record store."""
    RECORD_ADDED = "recordAdded"
    RECORD_UPDATED = "recordUpdated"
    RECORD_DELETED = "recordDeleted"


class EventNotifier:
    def __init__(self):
        self._listeners: Dict[VaultEvent, List[Listener]] = {event: [] for event in VaultEvent}

    def subscribe(self, event: Union[VaultEvent, str], listener: Listener) -> None:
        self._listeners[VaultEvent(event)].append(listener)

    def unsubscribe(self, event: Union[VaultEvent, str], listener: Listener) -> None:
        listeners = self._listeners[VaultEvent(event)]
        if listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event: Union[VaultEvent, str]) -> int:
        return len(self._listeners[VaultEvent(event)])

    def publish(self, event: VaultEvent, record: Record) -> None:
        # Snapshot the list so a listener may unsubscribe itself mid-publish
        for listener in list(self._listeners[event]):
            try:
                listener(copy.deepcopy(record))
            except Exception:
                logger.exception("Listener %r failed while handling %s for record %s",
                                 listener, event.value, record.id)
