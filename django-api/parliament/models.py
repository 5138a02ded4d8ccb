"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class SubjectStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    APPROVED = "approved", "Approved"
    REJECTED = "rejected", "Rejected"


class HistoryKind(models.TextChoices):
    DATE = "date", "Date"
    SUBJECT = "subject", "Subject"
    NOTE = "note", "Note"


class ParliamentDate(models.Model):
    """Persistence model for parliament sessions."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    date = models.DateTimeField()
    is_open = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    created_by_uid = models.CharField(max_length=128, blank=True)
    created_by_name = models.CharField(max_length=255, blank=True, default="Admin")

    class Meta:
        ordering = ["date"]
        indexes = [
            models.Index(fields=["date"], name="parliament__date_5b1c1e_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class ParliamentSubject(models.Model):
    """Persistence model for proposed subjects."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    created_by_uid = models.CharField(max_length=128)
    created_by_name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    status = models.CharField(
        max_length=16, choices=SubjectStatus.choices, default=SubjectStatus.PENDING
    )
    status_reason = models.TextField(blank=True)
    date = models.ForeignKey(
        ParliamentDate, on_delete=models.PROTECT, related_name="subjects"
    )
    date_title = models.CharField(max_length=255, blank=True)
    notes_count = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["status"], name="parliament__status_a41b6d_idx"),
            models.Index(fields=["created_by_uid"], name="parliament__created_9d0e52_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(status__in=SubjectStatus.values),
                name="parliament_subject_status_valid",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.title} ({self.status})"


class ParliamentNote(models.Model):
    """Persistence model for notes attached to subjects."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    text = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(null=True, blank=True)
    created_by_uid = models.CharField(max_length=128)
    created_by_name = models.CharField(max_length=255)
    subject = models.ForeignKey(
        ParliamentSubject, on_delete=models.CASCADE, related_name="notes"
    )
    parent_note = models.ForeignKey(
        "self", on_delete=models.SET_NULL, null=True, blank=True, related_name="replies"
    )

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["subject", "created_at"], name="parliament__subject_6f1a27_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.created_by_name}: {self.text[:40]}"


class HistoryEntry(models.Model):
    """Archived copy of a date, subject or note."""

    kind = models.CharField(max_length=16, choices=HistoryKind.choices)
    original_id = models.CharField(max_length=64)
    parliament_id = models.CharField(max_length=64, blank=True)
    archived_at = models.DateTimeField(auto_now_add=True)
    data = models.JSONField(default=dict)
    decisions = models.JSONField(default=list)
    summary = models.TextField(blank=True)

    class Meta:
        verbose_name_plural = "history entries"
        ordering = ["-archived_at", "-id"]
        indexes = [
            models.Index(fields=["kind", "original_id"], name="parliament__kind_8e2f4a_idx"),
            models.Index(fields=["kind", "parliament_id"], name="parliament__kind_3c7d90_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.kind} {self.original_id}"
