"""Django ORM implementation of the ParliamentStore."""

import logging
from datetime import datetime
from typing import Any

from django.conf import settings
from django.db import transaction
from django.db.models import Count, F, ProtectedError
from django.utils import timezone

from parliament import models
from parliament.domain import (
    ArchiveResult,
    Author,
    DateId,
    Decision,
    HistoryEntry,
    HistoryKind,
    NoteId,
    NotesCount,
    ParliamentDate,
    ParliamentNote,
    ParliamentSubject,
    SubjectId,
    SubjectStatus,
)
from parliament.domain.errors import DateHasSubjectsError
from parliament.stores.interfaces import ParliamentStore

logger = logging.getLogger(__name__)


def _to_date(row: models.ParliamentDate) -> ParliamentDate:
    return ParliamentDate(
        id=DateId(row.id),
        title=row.title,
        date=row.date,
        is_open=row.is_open,
        created_at=row.created_at,
        created_by=Author(uid=row.created_by_uid, name=row.created_by_name),
    )


def _to_subject(row: models.ParliamentSubject) -> ParliamentSubject:
    return ParliamentSubject(
        id=SubjectId(row.id),
        title=row.title,
        description=row.description,
        created_by=Author(uid=row.created_by_uid, name=row.created_by_name),
        created_at=row.created_at,
        status=SubjectStatus(row.status),
        status_reason=row.status_reason,
        date_id=DateId(row.date_id),
        date_title=row.date_title,
        notes_count=NotesCount(row.notes_count),
    )


def _to_note(row: models.ParliamentNote) -> ParliamentNote:
    return ParliamentNote(
        id=NoteId(row.id),
        text=row.text,
        created_at=row.created_at,
        created_by=Author(uid=row.created_by_uid, name=row.created_by_name),
        subject_id=SubjectId(row.subject_id),
        parent_note_id=NoteId(row.parent_note_id) if row.parent_note_id else None,
        updated_at=row.updated_at,
    )


def _to_decision(raw: dict[str, Any]) -> Decision:
    return Decision(
        text=raw.get("text", ""),
        created_at=datetime.fromisoformat(raw["createdAt"]),
        created_by=Author(
            uid=raw.get("createdByUid", ""), name=raw.get("createdByName", "")
        ),
    )


def _to_history(row: models.HistoryEntry) -> HistoryEntry:
    return HistoryEntry(
        id=row.id,
        kind=HistoryKind(row.kind),
        original_id=row.original_id,
        parliament_id=row.parliament_id,
        archived_at=row.archived_at,
        data=row.data,
        decisions=tuple(_to_decision(d) for d in row.decisions),
        summary=row.summary,
    )


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def _snapshot_date(row: models.ParliamentDate) -> dict[str, Any]:
    return {
        "title": row.title,
        "date": _isoformat(row.date),
        "isOpen": row.is_open,
        "createdAt": _isoformat(row.created_at),
        "createdByUid": row.created_by_uid,
        "createdByName": row.created_by_name,
    }


def _snapshot_subject(row: models.ParliamentSubject) -> dict[str, Any]:
    return {
        "title": row.title,
        "description": row.description,
        "createdByUid": row.created_by_uid,
        "createdByName": row.created_by_name,
        "createdAt": _isoformat(row.created_at),
        "status": row.status,
        "statusReason": row.status_reason,
        "dateId": str(row.date_id),
        "dateTitle": row.date_title,
        "notesCount": row.notes_count,
    }


def _snapshot_note(row: models.ParliamentNote) -> dict[str, Any]:
    return {
        "text": row.text,
        "createdAt": _isoformat(row.created_at),
        "updatedAt": _isoformat(row.updated_at),
        "createdByUid": row.created_by_uid,
        "createdByName": row.created_by_name,
        "subjectId": str(row.subject_id),
        "parentNoteId": str(row.parent_note_id) if row.parent_note_id else None,
    }


class DjangoParliamentStore(ParliamentStore):
    """Relational parliament store using Django ORM."""

    # Dates

    def list_dates(self) -> list[ParliamentDate]:
        return [_to_date(row) for row in models.ParliamentDate.objects.order_by("date")]

    def get_date(self, date_id: DateId) -> ParliamentDate | None:
        row = models.ParliamentDate.objects.filter(pk=date_id.value).first()
        return _to_date(row) if row else None

    def create_date(
        self, title: str, date: datetime, is_open: bool, author: Author
    ) -> ParliamentDate:
        row = models.ParliamentDate.objects.create(
            title=title,
            date=date,
            is_open=is_open,
            created_by_uid=author.uid,
            created_by_name=author.name,
        )
        return _to_date(row)

    @transaction.atomic
    def update_date(
        self, date_id: DateId, title: str | None, date: datetime | None
    ) -> ParliamentDate | None:
        row = models.ParliamentDate.objects.select_for_update().filter(pk=date_id.value).first()
        if row is None:
            return None
        if title is not None:
            row.title = title
        if date is not None:
            row.date = date
        row.save()
        if title is not None:
            synced = models.ParliamentSubject.objects.filter(date=row).update(date_title=title)
            logger.debug("Copied new title of date %s onto %d subjects", row.pk, synced)
        return _to_date(row)

    def set_date_open(self, date_id: DateId, is_open: bool) -> ParliamentDate | None:
        row = models.ParliamentDate.objects.filter(pk=date_id.value).first()
        if row is None:
            return None
        row.is_open = is_open
        row.save(update_fields=["is_open"])
        return _to_date(row)

    def count_subjects_for_date(self, date_id: DateId) -> int:
        return models.ParliamentSubject.objects.filter(date_id=date_id.value).count()

    def delete_date(self, date_id: DateId) -> bool:
        row = models.ParliamentDate.objects.filter(pk=date_id.value).first()
        if row is None:
            return False
        try:
            row.delete()
        except ProtectedError as error:
            # A subject was submitted after the service checked the count.
            raise DateHasSubjectsError(str(date_id), len(error.protected_objects)) from None
        return True

    @transaction.atomic
    def archive_date(self, date_id: DateId) -> ArchiveResult | None:
        date_row = models.ParliamentDate.objects.select_for_update().filter(pk=date_id.value).first()
        if date_row is None:
            return None

        parliament_id = str(date_row.pk)
        subjects = list(models.ParliamentSubject.objects.filter(date=date_row))
        notes = list(models.ParliamentNote.objects.filter(subject__in=subjects))

        entries = [
            models.HistoryEntry(
                kind=models.HistoryKind.DATE,
                original_id=parliament_id,
                parliament_id=parliament_id,
                data=_snapshot_date(date_row),
            )
        ]
        entries.extend(
            models.HistoryEntry(
                kind=models.HistoryKind.SUBJECT,
                original_id=str(subject.pk),
                parliament_id=parliament_id,
                data=_snapshot_subject(subject),
            )
            for subject in subjects
        )
        entries.extend(
            models.HistoryEntry(
                kind=models.HistoryKind.NOTE,
                original_id=str(note.pk),
                data=_snapshot_note(note),
            )
            for note in notes
        )
        models.HistoryEntry.objects.bulk_create(
            entries, batch_size=settings.PARLIAMENT["ARCHIVE_BATCH_SIZE"]
        )

        # Subjects protect their date, so they go first; notes cascade with them.
        models.ParliamentSubject.objects.filter(date=date_row).delete()
        date_row.delete()
        return ArchiveResult(dates=1, subjects=len(subjects), notes=len(notes))

    # Subjects

    def list_subjects(self, status: SubjectStatus | None = None) -> list[ParliamentSubject]:
        rows = models.ParliamentSubject.objects.all()
        if status is not None:
            rows = rows.filter(status=status.value)
        return [_to_subject(row) for row in rows]

    def list_subjects_by_author(self, uid: str) -> list[ParliamentSubject]:
        rows = models.ParliamentSubject.objects.filter(created_by_uid=uid)
        return [_to_subject(row) for row in rows]

    def get_subject(self, subject_id: SubjectId) -> ParliamentSubject | None:
        row = models.ParliamentSubject.objects.filter(pk=subject_id.value).first()
        return _to_subject(row) if row else None

    def create_subject(
        self, title: str, description: str, author: Author, date: ParliamentDate
    ) -> ParliamentSubject:
        row = models.ParliamentSubject.objects.create(
            title=title,
            description=description,
            created_by_uid=author.uid,
            created_by_name=author.name,
            status=models.SubjectStatus.PENDING,
            date_id=date.id.value,
            date_title=date.title,
            notes_count=0,
        )
        return _to_subject(row)

    def update_subject(
        self,
        subject_id: SubjectId,
        title: str | None,
        description: str | None,
        date: ParliamentDate | None,
    ) -> ParliamentSubject | None:
        row = models.ParliamentSubject.objects.filter(pk=subject_id.value).first()
        if row is None:
            return None
        if title is not None:
            row.title = title
        if description is not None:
            row.description = description
        if date is not None:
            row.date_id = date.id.value
            row.date_title = date.title
        row.save()
        return _to_subject(row)

    def set_subject_status(
        self, subject_id: SubjectId, status: SubjectStatus, status_reason: str | None
    ) -> ParliamentSubject | None:
        row = models.ParliamentSubject.objects.filter(pk=subject_id.value).first()
        if row is None:
            return None
        row.status = status.value
        fields = ["status"]
        if status_reason is not None:
            row.status_reason = status_reason
            fields.append("status_reason")
        row.save(update_fields=fields)
        return _to_subject(row)

    @transaction.atomic
    def delete_subject(self, subject_id: SubjectId) -> int | None:
        row = models.ParliamentSubject.objects.filter(pk=subject_id.value).first()
        if row is None:
            return None
        deleted_notes = row.notes.count()
        row.delete()
        return deleted_notes

    @transaction.atomic
    def recount_notes(self, subject_id: SubjectId) -> ParliamentSubject | None:
        row = models.ParliamentSubject.objects.select_for_update().filter(pk=subject_id.value).first()
        if row is None:
            return None
        row.notes_count = row.notes.count()
        row.save(update_fields=["notes_count"])
        return _to_subject(row)

    def count_notes_by_subject(self) -> dict[SubjectId, int]:
        counts = models.ParliamentNote.objects.values("subject_id").annotate(total=Count("id"))
        return {SubjectId(item["subject_id"]): item["total"] for item in counts}

    # Notes

    def list_notes(self, subject_id: SubjectId) -> list[ParliamentNote]:
        rows = models.ParliamentNote.objects.filter(subject_id=subject_id.value).order_by("created_at")
        return [_to_note(row) for row in rows]

    def get_note(self, note_id: NoteId) -> ParliamentNote | None:
        row = models.ParliamentNote.objects.filter(pk=note_id.value).first()
        return _to_note(row) if row else None

    @transaction.atomic
    def add_note(
        self,
        subject_id: SubjectId,
        text: str,
        author: Author,
        parent_note_id: NoteId | None,
    ) -> ParliamentNote:
        row = models.ParliamentNote.objects.create(
            subject_id=subject_id.value,
            text=text,
            created_by_uid=author.uid,
            created_by_name=author.name,
            parent_note_id=parent_note_id.value if parent_note_id else None,
        )
        models.ParliamentSubject.objects.filter(pk=subject_id.value).update(
            notes_count=F("notes_count") + 1
        )
        return _to_note(row)

    def update_note(self, note_id: NoteId, text: str) -> ParliamentNote | None:
        row = models.ParliamentNote.objects.filter(pk=note_id.value).first()
        if row is None:
            return None
        row.text = text
        row.updated_at = timezone.now()
        row.save(update_fields=["text", "updated_at"])
        return _to_note(row)

    @transaction.atomic
    def delete_note(self, note_id: NoteId) -> bool:
        row = models.ParliamentNote.objects.filter(pk=note_id.value).first()
        if row is None:
            return False
        subject_id = row.subject_id
        row.delete()
        models.ParliamentSubject.objects.filter(pk=subject_id, notes_count__gt=0).update(
            notes_count=F("notes_count") - 1
        )
        return True

    # History

    def list_history(self) -> list[HistoryEntry]:
        return [_to_history(row) for row in models.HistoryEntry.objects.all()]

    def add_subject_decision(
        self, original_subject_id: str, decision: Decision
    ) -> HistoryEntry | None:
        row = models.HistoryEntry.objects.filter(
            kind=models.HistoryKind.SUBJECT, original_id=original_subject_id
        ).first()
        if row is None:
            return None
        row.decisions = [
            *row.decisions,
            {
                "text": decision.text,
                "createdAt": decision.created_at.isoformat(),
                "createdByUid": decision.created_by.uid,
                "createdByName": decision.created_by.name,
            },
        ]
        row.save(update_fields=["decisions"])
        return _to_history(row)

    def update_parliament_summary(
        self, parliament_id: str, summary: str
    ) -> HistoryEntry | None:
        row = models.HistoryEntry.objects.filter(
            kind=models.HistoryKind.DATE, parliament_id=parliament_id
        ).first()
        if row is None:
            return None
        row.summary = summary
        row.save(update_fields=["summary"])
        return _to_history(row)
