# ==============================================
# Export / Report Formatter
# ==============================================
#
# PURPOSE:
#   Turn the collection (or its statistics) into a stable,
#   human-readable text document.
#
# FUNCTIONS:
# ----------
# - render_export(records, exported_at, filename="export.txt") -> str
#     Header block followed by one block per record, in stored order.
#
# - render_statistics(stats: VaultStatistics) -> str
#     The "Vault Statistics" report shown by the CLI.
#
# - parse_total_records(text: str) -> int
#     Read "Total Records: N" back out of an export document.
#
# EXPORT LAYOUT:
# --------------
#   ========================================
#   Record Vault Data Export
#   ========================================
#   Export Date/Time: 2026-10-19 10:00:00
#   Total Records: 2
#   Filename: export.txt
#   ========================================
#
#   Record 1:
#     ID: 1729332000000
#     Name: Alpha
#     Value: 1
#     Created Date: 2026-10-19
#     Modified Date: 2026-10-20      ← only when updated
#
# ==============================================

import re
from datetime import datetime, timezone
from typing import List, Optional

from record_vault.records.record import Record
from record_vault.records.statistics import NOT_AVAILABLE, VaultStatistics

RULE = "=" * 40
TITLE = "Record Vault Data Export"

_TOTAL_PATTERN = re.compile(r"^Total Records: (\d+)$", re.MULTILINE)


def _day(dt: Optional[datetime]) -> str:
    if dt is None:
        return NOT_AVAILABLE
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%d")


def render_export(records: List[Record], exported_at: datetime, filename: str = "export.txt") -> str:
    lines = [
        RULE,
        TITLE,
        RULE,
        f"Export Date/Time: {exported_at.strftime('%Y-%m-%d %H:%M:%S')}",
        f"Total Records: {len(records)}",
        f"Filename: {filename}",
        RULE,
        "",
    ]

    if not records:
        lines.append("No records found.")
    else:
        for index, record in enumerate(records, start=1):
            lines.append(f"Record {index}:")
            lines.append(f"  ID: {record.id}")
            lines.append(f"  Name: {record.name}")
            lines.append(f"  Value: {record.value}")
            lines.append(f"  Created Date: {_day(record.created_date)}")
            if record.modified_date is not None:
                lines.append(f"  Modified Date: {_day(record.modified_date)}")
            lines.append("")

    return "\n".join(lines) + "\n"


def render_statistics(stats: VaultStatistics) -> str:
    if stats.longest_name != NOT_AVAILABLE:
        longest = f"{stats.longest_name} ({stats.longest_name_length} characters)"
    else:
        longest = stats.longest_name
    lines = [
        "Vault Statistics:",
        "--------------------------",
        f"Total Records: {stats.total_records}",
        f"Last Modified: {stats.last_modified}",
        f"Longest Name: {longest}",
        f"Earliest Record: {stats.earliest_record}",
        f"Latest Record: {stats.latest_record}",
    ]
    return "\n".join(lines) + "\n"


def parse_total_records(text: str) -> int:
    """
    Raises:
        ValueError: if the text has no "Total Records:" header line
    """
    match = _TOTAL_PATTERN.search(text)
    if match is None:
        raise ValueError("Not an export document: missing 'Total Records' header")
    return int(match.group(1))
