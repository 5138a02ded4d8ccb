"""Serializers for transforming domain models to API responses.

Output field names are the wire names of the record schemas (camelCase).
Input serializers only check payload shape; business rules live in services.
"""

from rest_framework import serializers


class ParliamentDateSerializer(serializers.Serializer):
    """Serializer for ParliamentDate domain model."""

    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    date = serializers.DateTimeField()
    isOpen = serializers.BooleanField(source="is_open")
    createdAt = serializers.DateTimeField(source="created_at")
    createdByUid = serializers.CharField(source="created_by.uid")
    createdByName = serializers.CharField(source="created_by.name")


class ParliamentSubjectSerializer(serializers.Serializer):
    """Serializer for ParliamentSubject domain model."""

    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    createdByUid = serializers.CharField(source="created_by.uid")
    createdByName = serializers.CharField(source="created_by.name")
    createdAt = serializers.DateTimeField(source="created_at")
    status = serializers.CharField(source="status.value")
    statusReason = serializers.CharField(source="status_reason")
    dateId = serializers.CharField(source="date_id.value")
    dateTitle = serializers.CharField(source="date_title")
    notesCount = serializers.IntegerField(source="notes_count.value")


class ParliamentNoteSerializer(serializers.Serializer):
    """Serializer for ParliamentNote domain model."""

    id = serializers.CharField(source="id.value")
    text = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")
    createdByUid = serializers.CharField(source="created_by.uid")
    createdByName = serializers.CharField(source="created_by.name")
    subjectId = serializers.CharField(source="subject_id.value")
    parentNoteId = serializers.SerializerMethodField()

    def get_parentNoteId(self, note) -> str | None:
        return str(note.parent_note_id) if note.parent_note_id else None


class DecisionSerializer(serializers.Serializer):
    text = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    createdByUid = serializers.CharField(source="created_by.uid")
    createdByName = serializers.CharField(source="created_by.name")


class HistoryEntrySerializer(serializers.Serializer):
    """Serializer for archived history entries."""

    id = serializers.IntegerField()
    type = serializers.CharField(source="kind.value")
    originalId = serializers.CharField(source="original_id")
    parliamentId = serializers.CharField(source="parliament_id")
    archivedAt = serializers.DateTimeField(source="archived_at")
    data = serializers.DictField()
    decisions = DecisionSerializer(many=True)
    summary = serializers.CharField()


class ArchiveResultSerializer(serializers.Serializer):
    dates = serializers.IntegerField()
    subjects = serializers.IntegerField()
    notes = serializers.IntegerField()


class IntegrityViolationSerializer(serializers.Serializer):
    subjectId = serializers.CharField(source="subject_id.value")
    field = serializers.CharField()
    stored = serializers.JSONField()
    expected = serializers.JSONField()


# Request payloads


class AuthorInput(serializers.Serializer):
    createdByUid = serializers.CharField(required=False, allow_blank=True, default="")
    createdByName = serializers.CharField(required=False, allow_blank=True, default="Admin")


class DateCreateInput(AuthorInput):
    title = serializers.CharField()
    date = serializers.DateTimeField()
    isOpen = serializers.BooleanField(required=False, default=True)


class DateUpdateInput(serializers.Serializer):
    title = serializers.CharField(required=False)
    date = serializers.DateTimeField(required=False)


class DateOpenInput(serializers.Serializer):
    isOpen = serializers.BooleanField()


class SubjectCreateInput(serializers.Serializer):
    title = serializers.CharField()
    description = serializers.CharField(required=False, allow_blank=True, default="")
    dateId = serializers.CharField()
    createdByUid = serializers.CharField()
    createdByName = serializers.CharField()


class SubjectUpdateInput(serializers.Serializer):
    title = serializers.CharField(required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    dateId = serializers.CharField(required=False)


class SubjectStatusInput(serializers.Serializer):
    status = serializers.CharField()
    statusReason = serializers.CharField(required=False, allow_blank=True, default="")


class NoteCreateInput(serializers.Serializer):
    text = serializers.CharField()
    createdByUid = serializers.CharField()
    createdByName = serializers.CharField()
    parentNoteId = serializers.CharField(required=False, allow_null=True, default=None)


class NoteUpdateInput(serializers.Serializer):
    text = serializers.CharField()


class DecisionInput(AuthorInput):
    text = serializers.CharField()


class SummaryInput(serializers.Serializer):
    summary = serializers.CharField(allow_blank=True)
