"""Parliament service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Denormalized fields (``date_title``, ``notes_count``) are only ever written
through the store operations called from here.
"""

import logging
from datetime import datetime

from django.utils import timezone

from parliament.domain import (
    ArchiveResult,
    Author,
    DateId,
    Decision,
    HistoryEntry,
    IntegrityViolation,
    NoteId,
    ParliamentDate,
    ParliamentNote,
    ParliamentSubject,
    SubjectId,
    SubjectStatus,
)
from parliament.domain.errors import (
    DateClosedError,
    DateHasSubjectsError,
    DateNotFoundError,
    HistoryNotFoundError,
    InvalidIdError,
    InvalidInputError,
    InvalidStatusError,
    NoFieldsToUpdateError,
    NoteNotFoundError,
    SubjectNotFoundError,
)
from parliament.stores.interfaces import ParliamentStore

logger = logging.getLogger(__name__)


def _parse_id(id_type, value: str):
    try:
        return id_type.from_string(str(value))
    except ValueError:
        raise InvalidIdError() from None


def _require_text(value: str, field_name: str) -> str:
    text = (value or "").strip()
    if not text:
        raise InvalidInputError(f"{field_name} is required")
    return text


def parse_status(value: str) -> SubjectStatus:
    """Parse a status string, rejecting anything outside the closed set."""
    try:
        return SubjectStatus.from_string(value or "")
    except ValueError:
        raise InvalidStatusError(value) from None


class ParliamentService:
    """Service for parliament dates, subjects, notes and history."""

    def __init__(self, store: ParliamentStore) -> None:
        self._store = store

    # Dates

    def list_dates(self) -> list[ParliamentDate]:
        """Return all dates ordered by date."""
        return self._store.list_dates()

    def get_date(self, date_id: str) -> ParliamentDate:
        """Return a date by ID.

        Raises:
            InvalidIdError: If the date_id is not a valid UUID.
            DateNotFoundError: If the date does not exist.
        """
        date = self._store.get_date(_parse_id(DateId, date_id))
        if date is None:
            raise DateNotFoundError(date_id)
        return date

    def create_date(
        self, title: str, date: datetime, author: Author, is_open: bool = True
    ) -> ParliamentDate:
        created = self._store.create_date(
            title=_require_text(title, "title"),
            date=date,
            is_open=is_open,
            author=author,
        )
        logger.info("Created parliament date %s", created.id)
        return created

    def update_date(
        self, date_id: str, title: str | None = None, date: datetime | None = None
    ) -> ParliamentDate:
        """Change the title and/or date of a session.

        A new title is copied onto every subject of the session.

        Raises:
            NoFieldsToUpdateError: If neither title nor date is given.
        """
        if title is None and date is None:
            raise NoFieldsToUpdateError()
        if title is not None:
            title = _require_text(title, "title")
        updated = self._store.update_date(_parse_id(DateId, date_id), title, date)
        if updated is None:
            raise DateNotFoundError(date_id)
        logger.info("Updated parliament date %s", updated.id)
        return updated

    def set_date_open(self, date_id: str, is_open: bool) -> ParliamentDate:
        updated = self._store.set_date_open(_parse_id(DateId, date_id), is_open)
        if updated is None:
            raise DateNotFoundError(date_id)
        logger.info("Parliament date %s is now %s", updated.id, "open" if is_open else "closed")
        return updated

    def delete_date(self, date_id: str) -> None:
        """Delete a session that has no subjects.

        Raises:
            DateHasSubjectsError: If subjects still reference the date.
        """
        parsed = _parse_id(DateId, date_id)
        linked = self._store.count_subjects_for_date(parsed)
        if linked:
            raise DateHasSubjectsError(date_id, linked)
        if not self._store.delete_date(parsed):
            raise DateNotFoundError(date_id)
        logger.info("Deleted parliament date %s", parsed)

    def archive_date(self, date_id: str) -> ArchiveResult:
        """Move a session with all its subjects and notes to history."""
        result = self._store.archive_date(_parse_id(DateId, date_id))
        if result is None:
            raise DateNotFoundError(date_id)
        logger.info(
            "Archived parliament date %s (%d subjects, %d notes)",
            date_id,
            result.subjects,
            result.notes,
        )
        return result

    # Subjects

    def list_subjects(self, status: str | None = None) -> list[ParliamentSubject]:
        """Return subjects, optionally only those with the given status."""
        parsed = parse_status(status) if status else None
        return self._store.list_subjects(parsed)

    def list_subjects_for_author(self, uid: str) -> list[ParliamentSubject]:
        if not uid:
            return []
        return self._store.list_subjects_by_author(uid)

    def get_subject(self, subject_id: str) -> ParliamentSubject:
        subject = self._store.get_subject(_parse_id(SubjectId, subject_id))
        if subject is None:
            raise SubjectNotFoundError(subject_id)
        return subject

    def submit_subject(
        self, title: str, description: str, author: Author, date_id: str
    ) -> ParliamentSubject:
        """Submit a new pending subject for an open session.

        Raises:
            DateNotFoundError: If the session does not exist.
            DateClosedError: If the session no longer accepts subjects.
        """
        title = _require_text(title, "title")
        date = self.get_date(date_id)
        if not date.is_open:
            raise DateClosedError(date_id)
        subject = self._store.create_subject(
            title=title,
            description=(description or "").strip(),
            author=author,
            date=date,
        )
        logger.info("Subject %s submitted for date %s", subject.id, date.id)
        return subject

    def update_subject(
        self,
        subject_id: str,
        title: str | None = None,
        description: str | None = None,
        date_id: str | None = None,
    ) -> ParliamentSubject:
        """Edit a subject; moving it to another date re-copies the date title."""
        if title is None and description is None and date_id is None:
            raise NoFieldsToUpdateError()
        if title is not None:
            title = _require_text(title, "title")
        date = self.get_date(date_id) if date_id is not None else None
        updated = self._store.update_subject(
            _parse_id(SubjectId, subject_id),
            title,
            description.strip() if description is not None else None,
            date,
        )
        if updated is None:
            raise SubjectNotFoundError(subject_id)
        logger.info("Updated subject %s", updated.id)
        return updated

    def set_subject_status(
        self, subject_id: str, status: str, reason: str = ""
    ) -> ParliamentSubject:
        """Move a subject to a new review status.

        A non-empty reason is stored. Approving without a reason clears any
        previous reason; otherwise the previous reason is kept.
        """
        parsed_status = parse_status(status)
        reason = (reason or "").strip()
        if reason:
            stored_reason = reason
        elif parsed_status is SubjectStatus.APPROVED:
            stored_reason = ""
        else:
            stored_reason = None
        updated = self._store.set_subject_status(
            _parse_id(SubjectId, subject_id), parsed_status, stored_reason
        )
        if updated is None:
            raise SubjectNotFoundError(subject_id)
        logger.info("Subject %s marked %s", updated.id, parsed_status.value)
        return updated

    def delete_subject(self, subject_id: str) -> int:
        """Delete a subject with all its notes. Return the number of deleted notes."""
        deleted_notes = self._store.delete_subject(_parse_id(SubjectId, subject_id))
        if deleted_notes is None:
            raise SubjectNotFoundError(subject_id)
        logger.info("Deleted subject %s with %d notes", subject_id, deleted_notes)
        return deleted_notes

    def recount_notes(self, subject_id: str) -> ParliamentSubject:
        repaired = self._store.recount_notes(_parse_id(SubjectId, subject_id))
        if repaired is None:
            raise SubjectNotFoundError(subject_id)
        return repaired

    def find_integrity_violations(self) -> list[IntegrityViolation]:
        """Report subjects whose denormalized fields disagree with their source."""
        date_titles = {date.id: date.title for date in self._store.list_dates()}
        note_counts = self._store.count_notes_by_subject()
        violations = []
        for subject in self._store.list_subjects():
            expected_count = note_counts.get(subject.id, 0)
            if subject.notes_count.value != expected_count:
                violations.append(
                    IntegrityViolation(
                        subject_id=subject.id,
                        field="notesCount",
                        stored=subject.notes_count.value,
                        expected=expected_count,
                    )
                )
            expected_title = date_titles.get(subject.date_id)
            if subject.date_title != expected_title:
                violations.append(
                    IntegrityViolation(
                        subject_id=subject.id,
                        field="dateTitle",
                        stored=subject.date_title,
                        expected=expected_title,
                    )
                )
        if violations:
            logger.warning("Found %d denormalization mismatches", len(violations))
        return violations

    # Notes

    def list_notes(self, subject_id: str) -> list[ParliamentNote]:
        return self._store.list_notes(_parse_id(SubjectId, subject_id))

    def add_note(
        self,
        subject_id: str,
        text: str,
        author: Author,
        parent_note_id: str | None = None,
    ) -> ParliamentNote:
        """Attach a note (or a reply to another note) to a subject.

        Raises:
            SubjectNotFoundError: If the subject does not exist.
            NoteNotFoundError: If the parent note is missing or belongs to another subject.
        """
        text = _require_text(text, "text")
        subject = self.get_subject(subject_id)
        parent_id = None
        if parent_note_id:
            parent_id = _parse_id(NoteId, parent_note_id)
            parent = self._store.get_note(parent_id)
            if parent is None or parent.subject_id != subject.id:
                raise NoteNotFoundError(parent_note_id)
        note = self._store.add_note(subject.id, text, author, parent_id)
        logger.info("Added note %s to subject %s", note.id, subject.id)
        return note

    def update_note(self, note_id: str, text: str) -> ParliamentNote:
        updated = self._store.update_note(
            _parse_id(NoteId, note_id), _require_text(text, "text")
        )
        if updated is None:
            raise NoteNotFoundError(note_id)
        return updated

    def delete_note(self, note_id: str) -> None:
        if not self._store.delete_note(_parse_id(NoteId, note_id)):
            raise NoteNotFoundError(note_id)
        logger.info("Deleted note %s", note_id)

    # History

    def list_history(self) -> list[HistoryEntry]:
        return self._store.list_history()

    def add_subject_decision(
        self, original_subject_id: str, text: str, author: Author
    ) -> HistoryEntry:
        decision = Decision(
            text=_require_text(text, "text"),
            created_at=timezone.now(),
            created_by=author,
        )
        entry = self._store.add_subject_decision(original_subject_id, decision)
        if entry is None:
            raise HistoryNotFoundError(original_subject_id)
        return entry

    def update_parliament_summary(self, parliament_id: str, summary: str) -> HistoryEntry:
        entry = self._store.update_parliament_summary(
            parliament_id, (summary or "").strip()
        )
        if entry is None:
            raise HistoryNotFoundError(parliament_id)
        return entry
