"""Closed enumerations for parliament records."""

from enum import Enum
from typing import Self


class SubjectStatus(Enum):
    """Review state of a submitted subject."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown subject status: {value!r}") from None


class HistoryKind(Enum):
    """Type of record kept in the parliament history."""

    DATE = "date"
    SUBJECT = "subject"
    NOTE = "note"
