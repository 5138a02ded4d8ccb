"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class DateId:
    """Unique identifier for a parliament date (session)."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SubjectId:
    """Unique identifier for a ParliamentSubject."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class NoteId:
    """Unique identifier for a ParliamentNote."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Author:
    """Denormalized reference to the user who created a record."""

    uid: str
    name: str


@dataclass(frozen=True)
class NotesCount:
    """Cached number of notes attached to a subject."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Notes count cannot be negative")
