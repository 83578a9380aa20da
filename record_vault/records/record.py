# ==============================================
# Record (Data Class)
# ==============================================
#
# PURPOSE:
#   The one entity the vault stores: a named key/value entry
#   with creation and modification timestamps.
#
# WHY THIS FILE EXISTS:
#   Every topic passes Records around. Storage backends
#   serialize them, the backup writer snapshots them, the
#   notifier publishes them, the formatter renders them.
#   Keeping the entity and its wire format in one place means
#   all of them agree on the shape.
#
# CLASSES:
# --------
# - Record (dataclass)
#     Attributes:
#     -----------
#     - id: int                         → Assigned by the store, never reused
#     - name: str                       → Non-empty label
#     - value: str                      → Non-empty payload
#     - created_date: datetime | None   → Set once at creation (UTC)
#     - modified_date: datetime | None  → None until the first update
#
#     Methods:
#     --------
#     - to_dict() -> dict               → JSON-shaped, camelCase keys
#     - from_dict(data) -> Record       (classmethod) → Deserialize
#
# FUNCTIONS:
# ----------
# - validate_record(name, value) -> None
# - generate_id(existing_ids, now, issued_floor=None) -> int
# - format_timestamp(dt) / parse_timestamp(text)
#
# WIRE FORMAT:
# ------------
#   {"id": 1729332000000, "name": "Alpha", "value": "1",
#    "createdDate": "2026-10-19T10:00:00.000Z",
#    "modifiedDate": "2026-10-19T11:00:00.000Z"}   ← omitted until updated
#
# ==============================================

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

from record_vault.errors import ValidationError


def format_timestamp(dt: datetime) -> str:
    """Render a datetime as an ISO-8601 UTC string with millisecond precision."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a stored timestamp back into an aware UTC datetime.

    Accepts ISO strings (with or without a trailing "Z"), datetime
    objects (as returned by pymongo / pymysql) and None.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


@dataclass
class Record:
    """
    A single vault entry.

    Records are created by RecordStore.add() and mutated only by
    RecordStore.update(). Backends never build Records themselves
    except through from_dict().
    """

    id: int
    name: str
    value: str
    created_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the record to a JSON-shaped dictionary.

        Returns:
            Dictionary using the camelCase keys of the stored format
        """
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "value": self.value,
            "createdDate": format_timestamp(self.created_date) if self.created_date else None,
        }
        if self.modified_date is not None:
            data["modifiedDate"] = format_timestamp(self.modified_date)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Record":
        """
        Reconstruct a Record from a stored document.

        Backend-private keys (MongoDB's "_id", MySQL's "position")
        are ignored.
        """
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            value=data.get("value", ""),
            created_date=parse_timestamp(data.get("createdDate")),
            modified_date=parse_timestamp(data.get("modifiedDate")),
        )


def validate_record(name: Any, value: Any) -> None:
    """
    Check that name and value are present and non-blank.

    Raises:
        ValidationError: if either field is missing or empty
    """
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Name is required and cannot be empty.")
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Value is required and cannot be empty.")


def generate_id(existing_ids: Iterable[Any], now: datetime, issued_floor: Optional[int] = None) -> int:
    """
    Produce a fresh integer id.

    The id is the creation instant in epoch milliseconds, bumped past
    the highest integer id already present so two records created in
    the same millisecond never collide.

    Args:
        existing_ids: Ids currently in the collection
        now: Creation instant
        issued_floor: Highest id ever handed out, including ids of
            records deleted since; the result is always above it
    """
    taken = set(existing_ids)
    candidate = int(now.timestamp() * 1000)
    if issued_floor is not None:
        candidate = max(candidate, issued_floor + 1)
    numeric_ids = [i for i in taken if isinstance(i, int) and not isinstance(i, bool)]
    if numeric_ids:
        candidate = max(candidate, max(numeric_ids) + 1)
    # Legacy string ids ("1729332000000") must not collide either
    while candidate in taken or str(candidate) in taken:
        candidate += 1
    return candidate
