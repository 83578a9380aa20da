# ==============================================
# RecordStore — Final Orchestrator
# ==============================================
#
# PURPOSE:
#   This is the MAIN CLASS that ties all 4 topics together.
#   The CLI (and any other front-end) talks to this class only.
#
# HOW IT CONNECTS THE 4 TOPICS:
#
#   ┌──────────────────────────────────────────────────────────┐
#   │                       RecordStore                        │
#   │                                                          │
#   │   add / update / delete                                  │
#   │        │                                                 │
#   │        ▼                                                 │
#   │  ┌──────────────────────────────────────────────┐        │
#   │  │ TOPIC 2: STORAGE   read_all()                │        │
#   │  └──────────────┬───────────────────────────────┘        │
#   │                 │ full collection                        │
#   │                 ▼                                        │
#   │  ┌──────────────────────────────────────────────┐        │
#   │  │ TOPIC 1: RECORDS   validate / stamp / mutate │        │
#   │  └──────────────┬───────────────────────────────┘        │
#   │                 │ new collection                         │
#   │                 ▼                                        │
#   │  ┌──────────────────────────────────────────────┐        │
#   │  │ TOPIC 2: STORAGE   write_all()               │        │
#   │  └──────────────┬───────────────────────────────┘        │
#   │                 │ only after the write succeeded         │
#   │                 ▼                                        │
#   │  ┌──────────────────────────────────────────────┐        │
#   │  │ TOPIC 3: PERSISTENCE  BackupWriter.snapshot()│        │
#   │  │          (add + delete only)                 │        │
#   │  └──────────────┬───────────────────────────────┘        │
#   │                 ▼                                        │
#   │  ┌──────────────────────────────────────────────┐        │
#   │  │ TOPIC 4: EVENTS   EventNotifier.publish()    │        │
#   │  └──────────────────────────────────────────────┘        │
#   │                                                          │
#   │   list / search / sort / statistics / export             │
#   │        → read_all() + derived view, no write             │
#   └──────────────────────────────────────────────────────────┘
#
#
# CLASS: RecordStore
# ------------------
#
#   Constructor:
#   ------------
#   - __init__(storage, backup_writer=None, notifier=None,
#              export_path="export.txt", clock=None)
#       All collaborators are injected. A missing notifier gets a
#       private EventNotifier; a missing backup_writer disables backups.
#
#   Public Methods (User-facing API):
#   ---------------------------------
#   - add(name, value) -> Record
#   - list_records() -> list[Record]
#   - get(record_id) -> Record | None
#   - update(record_id, new_name, new_value) -> Record | None
#   - delete(record_id) -> Record | None
#   - search(keyword) -> list[Record]
#   - sort(field, order) -> list[Record]
#   - statistics() -> VaultStatistics
#   - export_to_text() -> str
#   - export_to_file(path=None) -> Path
#
#   NOTES:
#   ------
#   - update() does NOT take a backup. Only add() and delete(), which
#     change the size of the collection, are snapshotted.
#   - Ids are never reissued: the store remembers the highest id it has
#     issued or seen, so deleting the newest record frees nothing.
#   - last_backup holds the snapshot file name written by the latest
#     add/delete, or None when no snapshot was taken.
#   - Every call is a full read-modify-write. Two stores sharing one
#     backend concurrently would race (last writer wins); the vault
#     assumes a single session.
#
# ==============================================

import logging
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Union

from pyuca import Collator

from record_vault.errors import BackupError
from record_vault.events.notifier import EventNotifier, VaultEvent
from record_vault.export.formatter import render_export
from record_vault.persistence.backup_writer import BackupWriter
from record_vault.records.options import SortField, SortOrder
from record_vault.records.record import Record, generate_id, validate_record
from record_vault.records.statistics import VaultStatistics, compute_statistics
from record_vault.storage.base import RecordStorage

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@lru_cache(maxsize=None)
def _name_collator() -> Collator:
    # Loads the Unicode collation table once per process
    return Collator()


def _name_sort_key(record: Record):
    return _name_collator().sort_key((record.name or "").casefold())


class RecordStore:
    """
    Owns the vault's record collection and implements every
    operation on it by composing storage, backups and events.
    """

    def __init__(
        self,
        storage: RecordStorage,
        backup_writer: Optional[BackupWriter] = None,
        notifier: Optional[EventNotifier] = None,
        export_path: Union[str, Path] = "export.txt",
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Args:
            storage: Persistence backend (read_all / write_all)
            backup_writer: Snapshot writer; None disables backups
            notifier: Event registry; a private one is created if None
            export_path: Default target of export_to_file()
            clock: Returns the current aware datetime; defaults to UTC now
        """
        self._storage = storage
        self._backup_writer = backup_writer
        self.notifier = notifier or EventNotifier()
        self._export_path = Path(export_path)
        self._clock = clock or _utc_now
        # Highest id ever issued or observed; deleted ids stay below it
        self._highest_id: Optional[int] = None
        self.last_backup: Optional[str] = None

    # ------------------------------------------
    # Connection scope
    # ------------------------------------------

    def open(self) -> None:
        self._storage.connect()

    def close(self) -> None:
        self._storage.disconnect()

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # ------------------------------------------
    # Mutations
    # ------------------------------------------

    def add(self, name: str, value: str) -> Record:
        """
        Create a record and append it to the collection.

        Raises:
            ValidationError: if name or value is empty
            StorageError: if the backend read or write fails
        """
        validate_record(name, value)
        data = self._storage.read_all()

        now = self._clock()
        record = Record(
            id=generate_id((r.id for r in data), now, issued_floor=self._highest_id),
            name=name,
            value=value,
            created_date=now,
        )
        self._remember_ids([record.id])
        data.append(record)
        self._storage.write_all(data)

        self._take_backup(data)
        self.notifier.publish(VaultEvent.RECORD_ADDED, record)
        return record

    def update(self, record_id: Any, new_name: str, new_value: str) -> Optional[Record]:
        """
        Replace a record's name and value.

        Returns:
            The updated record, or None if no record has that id
            (nothing is written in that case)
        """
        validate_record(new_name, new_value)
        data = self._storage.read_all()
        record = self._find(data, record_id)
        if record is None:
            return None

        record.name = new_name
        record.value = new_value
        record.modified_date = self._clock()
        self._storage.write_all(data)

        # No backup on update: only size-changing operations are snapshotted
        self.notifier.publish(VaultEvent.RECORD_UPDATED, record)
        return record

    def delete(self, record_id: Any) -> Optional[Record]:
        """
        Remove a record permanently.

        Returns:
            The removed record as it was before deletion, or None
            if no record has that id
        """
        data = self._storage.read_all()
        record = self._find(data, record_id)
        if record is None:
            return None
        self._remember_ids(r.id for r in data)

        remaining = [r for r in data if r.id != record.id]
        self._storage.write_all(remaining)

        self._take_backup(remaining)
        self.notifier.publish(VaultEvent.RECORD_DELETED, record)
        return record

    # ------------------------------------------
    # Derived views (read-only)
    # ------------------------------------------

    def list_records(self) -> List[Record]:
        return self._storage.read_all()

    def get(self, record_id: Any) -> Optional[Record]:
        return self._find(self._storage.read_all(), record_id)

    def search(self, keyword: str) -> List[Record]:
        """
        Case-insensitive substring match on name, or substring match
        on the id's string form. Results keep stored order.

        An empty or whitespace-only keyword matches every record.
        """
        term = (keyword or "").strip().lower()
        data = self._storage.read_all()
        return [
            r for r in data
            if (r.name and term in r.name.lower()) or term in str(r.id)
        ]

    def sort(self, field: Union[SortField, str], order: Union[SortOrder, str]) -> List[Record]:
        """
        Return a sorted copy of the collection. Stored order is untouched.

        Ties keep their stored order in both directions. Records with
        no created_date count as the earliest possible instant.

        Raises:
            ValidationError: for an unknown field or order (checked
            before storage is read)
        """
        sort_field = SortField.parse(field)
        sort_order = SortOrder.parse(order)
        data = self._storage.read_all()

        if sort_field is SortField.NAME:
            key = _name_sort_key
        else:
            key = lambda r: r.created_date.timestamp() if r.created_date else float("-inf")

        # sorted() keeps equal keys in original order even with reverse=True
        return sorted(data, key=key, reverse=sort_order is SortOrder.DESCENDING)

    def statistics(self) -> VaultStatistics:
        return compute_statistics(self._storage.read_all())

    def export_to_text(self) -> str:
        """Render the full collection as an export document."""
        data = self._storage.read_all()
        exported_at = self._clock().astimezone()
        return render_export(data, exported_at, self._export_path.name)

    def export_to_file(self, path: Optional[Union[str, Path]] = None) -> Path:
        """
        Render the export document and overwrite the export file.

        Returns:
            Path the document was written to
        """
        target = Path(path) if path is not None else self._export_path
        data = self._storage.read_all()
        content = render_export(data, self._clock().astimezone(), target.name)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        logger.info("Exported %d records to %s", len(data), target)
        return target

    # ------------------------------------------
    # Internal helpers
    # ------------------------------------------

    @staticmethod
    def _find(data: List[Record], record_id: Any) -> Optional[Record]:
        for record in data:
            if record.id == record_id:
                return record
        return None

    def _remember_ids(self, ids: Iterable[Any]) -> None:
        numeric = [i for i in ids if isinstance(i, int) and not isinstance(i, bool)]
        if self._highest_id is not None:
            numeric.append(self._highest_id)
        if numeric:
            self._highest_id = max(numeric)

    def _take_backup(self, data: List[Record]) -> Optional[str]:
        # Best effort: the primary write already succeeded
        self.last_backup = None
        if self._backup_writer is None:
            return None
        try:
            self.last_backup = self._backup_writer.snapshot(data)
        except BackupError as e:
            logger.warning("Backup failed, continuing without it: %s", e)
        return self.last_backup
