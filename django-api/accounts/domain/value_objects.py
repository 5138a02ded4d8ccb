"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from datetime import date
from typing import Self
from uuid import UUID

_BIRTHDAY_FORMAT = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class UserId:
    """Unique identifier for an AppUser."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Username:
    """Login name; lookups use its lower-case form."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or self.value != self.value.strip():
            raise ValueError("Username must be non-empty and trimmed")

    @property
    def lower(self) -> str:
        return self.value.lower()


@dataclass(frozen=True)
class Birthday:
    """Calendar date kept as YYYY-MM-DD text, or empty when unknown."""

    value: str = ""

    def __post_init__(self) -> None:
        if not self.value:
            return
        if not _BIRTHDAY_FORMAT.match(self.value):
            raise ValueError("Birthday must use the YYYY-MM-DD format")
        date.fromisoformat(self.value)

    def as_date(self) -> date | None:
        return date.fromisoformat(self.value) if self.value else None


@dataclass(frozen=True)
class PasswordHash:
    """Encoded password hash in ``algorithm$...`` form; never plaintext."""

    value: str

    def __post_init__(self) -> None:
        algorithm, sep, rest = self.value.partition("$")
        if not (algorithm and sep and rest):
            raise ValueError("Password hash must be an encoded hash")

    def __repr__(self) -> str:
        return "PasswordHash(***)"
