"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in parliament/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from parliament.domain.enums import HistoryKind, SubjectStatus
from parliament.domain.value_objects import Author, DateId, NoteId, NotesCount, SubjectId


@dataclass(frozen=True)
class ParliamentDate:
    """A scheduled parliament session."""

    id: DateId
    title: str
    date: datetime
    is_open: bool
    created_at: datetime
    created_by: Author


@dataclass(frozen=True)
class ParliamentSubject:
    """A proposal submitted for discussion in a session.

    ``date_title`` and ``notes_count`` are denormalized copies kept in sync
    by the service layer.
    """

    id: SubjectId
    title: str
    description: str
    created_by: Author
    created_at: datetime
    status: SubjectStatus
    status_reason: str
    date_id: DateId
    date_title: str
    notes_count: NotesCount


@dataclass(frozen=True)
class ParliamentNote:
    """A comment attached to a subject."""

    id: NoteId
    text: str
    created_at: datetime
    created_by: Author
    subject_id: SubjectId
    parent_note_id: NoteId | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Decision:
    """A decision recorded on an archived subject or session."""

    text: str
    created_at: datetime
    created_by: Author


@dataclass(frozen=True)
class HistoryEntry:
    """An archived session, subject or note."""

    id: int
    kind: HistoryKind
    original_id: str
    parliament_id: str
    archived_at: datetime
    data: dict[str, Any]
    decisions: tuple[Decision, ...] = ()
    summary: str = ""


@dataclass(frozen=True)
class ArchiveResult:
    """Number of records moved to history by one archive run."""

    dates: int
    subjects: int
    notes: int


@dataclass(frozen=True)
class IntegrityViolation:
    """A subject whose denormalized fields disagree with their source."""

    subject_id: SubjectId
    field: str
    stored: Any
    expected: Any
