# ==============================================
# TOPIC 1: RECORDS
# ==============================================
#
# This package holds the vault's entity model and the pure
# helpers that operate on it. Nothing here touches storage.
#
# Modules:
# --------
# - record.py      → Record dataclass, wire format, validation, id generation
# - options.py     → SortField / SortOrder enums
# - statistics.py  → VaultStatistics dataclass and its computation
#
# ==============================================

from .record import Record, validate_record, generate_id, format_timestamp, parse_timestamp
from .options import SortField, SortOrder
from .statistics import VaultStatistics, compute_statistics, NOT_AVAILABLE

__all__ = [
    "Record",
    "validate_record",
    "generate_id",
    "format_timestamp",
    "parse_timestamp",
    "SortField",
    "SortOrder",
    "VaultStatistics",
    "compute_statistics",
    "NOT_AVAILABLE",
]
