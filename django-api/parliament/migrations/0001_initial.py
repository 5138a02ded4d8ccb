import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ParliamentDate",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("date", models.DateTimeField()),
                ("is_open", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("created_by_uid", models.CharField(blank=True, max_length=128)),
                ("created_by_name", models.CharField(blank=True, default="Admin", max_length=255)),
            ],
            options={
                "ordering": ["date"],
                "indexes": [models.Index(fields=["date"], name="parliament__date_5b1c1e_idx")],
            },
        ),
        migrations.CreateModel(
            name="HistoryEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("kind", models.CharField(choices=[("date", "Date"), ("subject", "Subject"), ("note", "Note")], max_length=16)),
                ("original_id", models.CharField(max_length=64)),
                ("parliament_id", models.CharField(blank=True, max_length=64)),
                ("archived_at", models.DateTimeField(auto_now_add=True)),
                ("data", models.JSONField(default=dict)),
                ("decisions", models.JSONField(default=list)),
                ("summary", models.TextField(blank=True)),
            ],
            options={
                "verbose_name_plural": "history entries",
                "ordering": ["-archived_at", "-id"],
                "indexes": [
                    models.Index(fields=["kind", "original_id"], name="parliament__kind_8e2f4a_idx"),
                    models.Index(fields=["kind", "parliament_id"], name="parliament__kind_3c7d90_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ParliamentSubject",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("created_by_uid", models.CharField(max_length=128)),
                ("created_by_name", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("approved", "Approved"), ("rejected", "Rejected")],
                        default="pending",
                        max_length=16,
                    ),
                ),
                ("status_reason", models.TextField(blank=True)),
                ("date_title", models.CharField(blank=True, max_length=255)),
                ("notes_count", models.PositiveIntegerField(default=0)),
                (
                    "date",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="subjects",
                        to="parliament.parliamentdate",
                    ),
                ),
            ],
            options={
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(fields=["status"], name="parliament__status_a41b6d_idx"),
                    models.Index(fields=["created_by_uid"], name="parliament__created_9d0e52_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("status__in", ["pending", "approved", "rejected"])),
                        name="parliament_subject_status_valid",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="ParliamentNote",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("text", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(blank=True, null=True)),
                ("created_by_uid", models.CharField(max_length=128)),
                ("created_by_name", models.CharField(max_length=255)),
                (
                    "parent_note",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="replies",
                        to="parliament.parliamentnote",
                    ),
                ),
                (
                    "subject",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="notes",
                        to="parliament.parliamentsubject",
                    ),
                ),
            ],
            options={
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(fields=["subject", "created_at"], name="parliament__subject_6f1a27_idx"),
                ],
            },
        ),
    ]
