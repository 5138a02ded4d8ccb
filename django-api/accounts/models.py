"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class UserRole(models.TextChoices):
    ADMIN = "admin", "Admin"
    TEACHER = "teacher", "Teacher"
    STUDENT = "student", "Student"
    KIOSK = "kiosk", "Kiosk"


class AppUser(models.Model):
    """Persistence model for application users.

    Separate from django.contrib.auth users; passwords are stored as
    Django-encoded hashes in ``password_hash``.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = models.CharField(max_length=150)
    username_lower = models.CharField(max_length=150, unique=True)
    first_name = models.CharField(max_length=150, blank=True)
    last_name = models.CharField(max_length=150, blank=True)
    role = models.CharField(max_length=16, choices=UserRole.choices, default=UserRole.STUDENT)
    birthday = models.CharField(max_length=10, blank=True)
    class_id = models.CharField(max_length=32, blank=True)
    password_hash = models.CharField(max_length=256)
    created_at = models.DateTimeField(auto_now_add=True)
    email = models.EmailField(blank=True)
    uid = models.CharField(max_length=128, blank=True)

    class Meta:
        ordering = ["username_lower"]
        indexes = [
            models.Index(fields=["uid"], name="accounts_ap_uid_4e9a1c_idx"),
            models.Index(fields=["email"], name="accounts_ap_email_7b3d25_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(role__in=UserRole.values),
                name="accounts_appuser_role_valid",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"
