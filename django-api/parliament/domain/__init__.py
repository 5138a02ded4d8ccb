from parliament.domain.enums import HistoryKind, SubjectStatus
from parliament.domain.models import (
    ArchiveResult,
    Decision,
    HistoryEntry,
    IntegrityViolation,
    ParliamentDate,
    ParliamentNote,
    ParliamentSubject,
)
from parliament.domain.value_objects import Author, DateId, NoteId, NotesCount, SubjectId

__all__ = [
    "ParliamentDate",
    "ParliamentSubject",
    "ParliamentNote",
    "HistoryEntry",
    "Decision",
    "ArchiveResult",
    "IntegrityViolation",
    "SubjectStatus",
    "HistoryKind",
    "DateId",
    "SubjectId",
    "NoteId",
    "Author",
    "NotesCount",
]
