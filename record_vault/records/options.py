# ==============================================
# Sort Options (Enums)
# ==============================================
#
# ENUMS:
# ------
# - SortField(Enum): NAME, CREATION_DATE
# - SortOrder(Enum): ASCENDING, DESCENDING
#
# Both expose parse(value) which accepts the enum itself or the
# menu strings ("Name", "CreationDate", "Creation Date",
# "Ascending", "Descending"), ignoring case and spaces.
# Anything else raises ValidationError.
#
# ==============================================

from enum import Enum
from typing import Union

from record_vault.errors import ValidationError


def _normalize(value: str) -> str:
    return value.replace(" ", "").replace("_", "").strip().lower()


class SortField(Enum):
    """Fields a sorted view can be ordered by."""
    NAME = "Name"
    CREATION_DATE = "CreationDate"

    @classmethod
    def parse(cls, value: Union["SortField", str]) -> "SortField":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = _normalize(value)
            for member in cls:
                if _normalize(member.value) == wanted:
                    return member
        raise ValidationError(f"Invalid sort field {value!r}. Please choose Name or Creation Date.")


class SortOrder(Enum):
    """Direction of a sorted view."""
    ASCENDING = "Ascending"
    DESCENDING = "Descending"

    @classmethod
    def parse(cls, value: Union["SortOrder", str]) -> "SortOrder":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = _normalize(value)
            for member in cls:
                if _normalize(member.value) == wanted:
                    return member
        raise ValidationError(f"Invalid sort order {value!r}. Please choose Ascending or Descending.")
