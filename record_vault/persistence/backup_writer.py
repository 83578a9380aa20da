import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from record_vault.errors import BackupError
from record_vault.records.record import Record

logger = logging.getLogger(__name__)


# ==============================================
# BackupWriter
# ==============================================
#
# PURPOSE:
#   Snapshot the entire vault to a timestamped JSON file after
#   every add and delete, so any earlier state can be recovered
#   by hand.
#
# WHY THIS CLASS EXISTS:
#   The primary store is rewritten wholesale on every mutation.
#   A bad write (or a bad delete) would otherwise leave no trace
#   of what was there before. Snapshots are write-once and are
#   never pruned.
#
# CLASS: BackupWriter
# -------------------
#   Stateful — holds a reference to the backup directory.
#
#   Constructor:
#   ------------
#   - __init__(backup_dir: str = "backups/", clock=None)
#       Directory is created lazily on the first snapshot.
#
#   Methods:
#   --------
#   - snapshot(records: list[Record]) -> str
#       Write backup_YYYY-MM-DD_HH-MM-SS.json, return its file name.
#
#   - list_backups() -> list[Path]
#       All snapshot files, oldest first.
#
BACKUP_PREFIX = "backup_"
BACKUP_TIME_FORMAT = "%Y-%m-%d_%H-%M-%S"


class BackupWriter:
    """
    Writes immutable full-collection snapshots.

    File names encode the local time at second precision. When two
    snapshots land in the same second, the later one gets a numeric
    suffix (backup_..._1.json) instead of overwriting the first.
    """

    def __init__(self, backup_dir: str = "backups/", clock: Optional[Callable[[], datetime]] = None):
        """
        Args:
            backup_dir: Directory to write snapshot files into
            clock: Returns "now"; defaults to datetime.now (local time)
        """
        self.backup_dir = Path(backup_dir)
        self._clock = clock or datetime.now

    def _next_path(self, stamp: str) -> Path:
        path = self.backup_dir / f"{BACKUP_PREFIX}{stamp}.json"
        counter = 1
        while path.exists():
            path = self.backup_dir / f"{BACKUP_PREFIX}{stamp}_{counter}.json"
            counter += 1
        return path

    def snapshot(self, records: Sequence[Record]) -> str:
        """
        Save the complete collection to a new backup file.

        Args:
            records: Full collection state right after the write

        Returns:
            The backup file name (not the full path)

        Raises:
            BackupError: if the directory or file cannot be written
        """
        payload = [record.to_dict() for record in records]
        stamp = self._clock().strftime(BACKUP_TIME_FORMAT)
        created = False
        try:
            self.backup_dir.mkdir(parents=True, exist_ok=True)
            path = self._next_path(stamp)
            # "x" refuses to overwrite an existing snapshot
            with open(path, 'x', encoding='utf-8') as f:
                created = True
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except OSError as e:
            # A half-written snapshot must not be left behind
            if created:
                path.unlink(missing_ok=True)
            raise BackupError(f"Could not write backup in {self.backup_dir}: {e}") from e

        logger.info("Backup created: %s (%d records)", path.name, len(payload))
        return path.name

    def list_backups(self) -> List[Path]:
        """
        Returns:
            Snapshot paths sorted by name, which is chronological
        """
        if not self.backup_dir.exists():
            return []
        return sorted(self.backup_dir.glob(f"{BACKUP_PREFIX}*.json"))
# FILE STRUCTURE:
# ---------------
#   backups/
#   ├── backup_2026-10-19_10-00-00.json    → [{id, name, value, createdDate}, ...]
#   ├── backup_2026-10-19_10-00-00_1.json  → same second, second snapshot
#   └── backup_2026-10-19_10-05-12.json
#
# =============================================
