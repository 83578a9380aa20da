# ==============================================
# VaultStatistics
# ==============================================
#
# PURPOSE:
#   Summary figures over the whole collection, computed on demand
#   by RecordStore.statistics(). Nothing here is persisted.
#
# DATA CLASS: VaultStatistics
# ---------------------------
#   - total_records: int
#   - last_modified: str        → "YYYY-MM-DD HH:MM:SS" (UTC) or "N/A"
#   - longest_name: str         → first longest name, or "N/A"
#   - longest_name_length: int  → 0 when the vault is empty
#   - earliest_record: str      → "YYYY-MM-DD" or "N/A"
#   - latest_record: str        → "YYYY-MM-DD" or "N/A"
#
# FUNCTION:
# ---------
# - compute_statistics(records: list[Record]) -> VaultStatistics
#
# ==============================================

from dataclasses import dataclass, asdict
from datetime import timezone
from typing import Any, Dict, List

from record_vault.records.record import Record

NOT_AVAILABLE = "N/A"


@dataclass
class VaultStatistics:
    total_records: int = 0
    last_modified: str = NOT_AVAILABLE
    longest_name: str = NOT_AVAILABLE
    longest_name_length: int = 0
    earliest_record: str = NOT_AVAILABLE
    latest_record: str = NOT_AVAILABLE

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def compute_statistics(records: List[Record]) -> VaultStatistics:
    """
    Build a VaultStatistics for the given collection.

    last_modified prefers the newest modified_date; when no record was
    ever updated it falls back to the newest created_date.
    """
    stats = VaultStatistics(total_records=len(records))
    if not records:
        return stats

    modified = [r.modified_date for r in records if r.modified_date is not None]
    created = [r.created_date for r in records if r.created_date is not None]

    latest_change = max(modified) if modified else (max(created) if created else None)
    if latest_change is not None:
        stats.last_modified = latest_change.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")

    # Strictly longer wins, so the first of several equal names is kept
    for record in records:
        if record.name and len(record.name) > stats.longest_name_length:
            stats.longest_name = record.name
            stats.longest_name_length = len(record.name)

    if created:
        stats.earliest_record = min(created).astimezone(timezone.utc).strftime("%Y-%m-%d")
        stats.latest_record = max(created).astimezone(timezone.utc).strftime("%Y-%m-%d")

    return stats
