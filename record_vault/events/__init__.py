# ==============================================
# TOPIC 4: EVENTS (Lifecycle notifications)
# ==============================================
#
# This package publishes recordAdded / recordUpdated /
# recordDeleted to in-process listeners.
#
# Modules:
# --------
# - notifier.py      → VaultEvent enum + EventNotifier registry
# - event_logger.py  → Listener that logs every event
#
# ==============================================

from .notifier import EventNotifier, VaultEvent
from .event_logger import EventLogger

__all__ = ["EventNotifier", "VaultEvent", "EventLogger"]
