# ==============================================
# RecordStorage (Persistence Port)
# ==============================================
#
# PURPOSE:
#   The read-all / write-all contract every persistence backend
#   satisfies. RecordStore only ever talks to this interface.
#
# CONTRACT:
# ---------
#   - read_all() -> list[Record]
#       Whole collection, in stored order.
#       Raises StorageUnavailable if the backend cannot be reached.
#
#   - write_all(records: list[Record]) -> None
#       Replace the whole collection. No partial writes.
#       Raises StorageUnavailable or StorageWriteRejected.
#
#   - connect() / disconnect()
#       Scoped acquisition of the backend connection.
#       read_all / write_all connect lazily when needed.
#
#   Context Manager:
#   ----------------
#   - __enter__ / __exit__ for `with MongoRecordStorage(...) as storage:` usage.
#
# ==============================================

from abc import ABC, abstractmethod
from typing import List, Sequence

from record_vault.records.record import Record


class RecordStorage(ABC):

    @abstractmethod
    def connect(self) -> None:
        """Acquire the backend connection."""

    @abstractmethod
    def disconnect(self) -> None:
        """Release the backend connection. Safe to call twice."""

    @abstractmethod
    def read_all(self) -> List[Record]:
        """Return every stored record in stored order."""

    @abstractmethod
    def write_all(self, records: Sequence[Record]) -> None:
        """Replace the stored collection with `records`."""

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
