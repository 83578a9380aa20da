# ==============================================
# InMemoryStorage
# ==============================================
#
# List-backed RecordStorage. Used by the test-suite and for
# throwaway sessions (STORAGE_BACKEND=memory). Records are
# copied on the way in and out so callers can never mutate
# the stored state behind the store's back.
#
# ==============================================

import copy
from typing import List, Optional, Sequence

from record_vault.records.record import Record
from record_vault.storage.base import RecordStorage


class InMemoryStorage(RecordStorage):
    def __init__(self, records: Optional[Sequence[Record]] = None):
        self._records: List[Record] = copy.deepcopy(list(records or []))
        self.connected = False
        self.write_count = 0

    def connect(self) -> None:
        self.connected = True

    def disconnect(self) -> None:
        self.connected = False

    def read_all(self) -> List[Record]:
        return copy.deepcopy(self._records)

    def write_all(self, records: Sequence[Record]) -> None:
        self._records = copy.deepcopy(list(records))
        self.write_count += 1
