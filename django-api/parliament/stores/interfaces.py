"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from parliament.domain import (
    ArchiveResult,
    Author,
    DateId,
    Decision,
    HistoryEntry,
    NoteId,
    ParliamentDate,
    ParliamentNote,
    ParliamentSubject,
    SubjectId,
    SubjectStatus,
)


class ParliamentStore(ABC):
    """Interface for parliament persistence operations."""

    # Dates

    @abstractmethod
    def list_dates(self) -> list[ParliamentDate]:
        """Return all dates ordered by date ascending."""
        ...

    @abstractmethod
    def get_date(self, date_id: DateId) -> ParliamentDate | None:
        """Return a date by ID, or None if not found."""
        ...

    @abstractmethod
    def create_date(
        self, title: str, date: datetime, is_open: bool, author: Author
    ) -> ParliamentDate:
        ...

    @abstractmethod
    def update_date(
        self, date_id: DateId, title: str | None, date: datetime | None
    ) -> ParliamentDate | None:
        """Apply the given fields and copy a new title onto the date's subjects."""
        ...

    @abstractmethod
    def set_date_open(self, date_id: DateId, is_open: bool) -> ParliamentDate | None:
        ...

    @abstractmethod
    def count_subjects_for_date(self, date_id: DateId) -> int:
        ...

    @abstractmethod
    def delete_date(self, date_id: DateId) -> bool:
        """Delete a date with no subjects. Return False if it did not exist.

        Raises:
            DateHasSubjectsError: If subjects still reference the date.
        """
        ...

    @abstractmethod
    def archive_date(self, date_id: DateId) -> ArchiveResult | None:
        """Move a date with its subjects and notes to history atomically."""
        ...

    # Subjects

    @abstractmethod
    def list_subjects(self, status: SubjectStatus | None = None) -> list[ParliamentSubject]:
        ...

    @abstractmethod
    def list_subjects_by_author(self, uid: str) -> list[ParliamentSubject]:
        ...

    @abstractmethod
    def get_subject(self, subject_id: SubjectId) -> ParliamentSubject | None:
        ...

    @abstractmethod
    def create_subject(
        self, title: str, description: str, author: Author, date: ParliamentDate
    ) -> ParliamentSubject:
        """Create a pending subject with zero notes, copying the date title."""
        ...

    @abstractmethod
    def update_subject(
        self,
        subject_id: SubjectId,
        title: str | None,
        description: str | None,
        date: ParliamentDate | None,
    ) -> ParliamentSubject | None:
        ...

    @abstractmethod
    def set_subject_status(
        self, subject_id: SubjectId, status: SubjectStatus, status_reason: str | None
    ) -> ParliamentSubject | None:
        """Set the status; a None reason leaves the stored reason unchanged."""
        ...

    @abstractmethod
    def delete_subject(self, subject_id: SubjectId) -> int | None:
        """Delete a subject and its notes. Return the number of notes deleted."""
        ...

    @abstractmethod
    def recount_notes(self, subject_id: SubjectId) -> ParliamentSubject | None:
        ...

    @abstractmethod
    def count_notes_by_subject(self) -> dict[SubjectId, int]:
        ...

    # Notes

    @abstractmethod
    def list_notes(self, subject_id: SubjectId) -> list[ParliamentNote]:
        """Return notes for a subject ordered by created_at ascending."""
        ...

    @abstractmethod
    def get_note(self, note_id: NoteId) -> ParliamentNote | None:
        ...

    @abstractmethod
    def add_note(
        self,
        subject_id: SubjectId,
        text: str,
        author: Author,
        parent_note_id: NoteId | None,
    ) -> ParliamentNote:
        """Create a note and increment the subject's notes count in one transaction."""
        ...

    @abstractmethod
    def update_note(self, note_id: NoteId, text: str) -> ParliamentNote | None:
        ...

    @abstractmethod
    def delete_note(self, note_id: NoteId) -> bool:
        """Delete a note and decrement the subject's notes count in one transaction."""
        ...

    # History

    @abstractmethod
    def list_history(self) -> list[HistoryEntry]:
        """Return archived entries, newest first."""
        ...

    @abstractmethod
    def add_subject_decision(
        self, original_subject_id: str, decision: Decision
    ) -> HistoryEntry | None:
        ...

    @abstractmethod
    def update_parliament_summary(
        self, parliament_id: str, summary: str
    ) -> HistoryEntry | None:
        ...
