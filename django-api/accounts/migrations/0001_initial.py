import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AppUser",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("username", models.CharField(max_length=150)),
                ("username_lower", models.CharField(max_length=150, unique=True)),
                ("first_name", models.CharField(blank=True, max_length=150)),
                ("last_name", models.CharField(blank=True, max_length=150)),
                (
                    "role",
                    models.CharField(
                        choices=[
                            ("admin", "Admin"),
                            ("teacher", "Teacher"),
                            ("student", "Student"),
                            ("kiosk", "Kiosk"),
                        ],
                        default="student",
                        max_length=16,
                    ),
                ),
                ("birthday", models.CharField(blank=True, max_length=10)),
                ("class_id", models.CharField(blank=True, max_length=32)),
                ("password_hash", models.CharField(max_length=256)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("email", models.EmailField(blank=True, max_length=254)),
                ("uid", models.CharField(blank=True, max_length=128)),
            ],
            options={
                "ordering": ["username_lower"],
                "indexes": [
                    models.Index(fields=["uid"], name="accounts_ap_uid_4e9a1c_idx"),
                    models.Index(fields=["email"], name="accounts_ap_email_7b3d25_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("role__in", ["admin", "teacher", "student", "kiosk"])),
                        name="accounts_appuser_role_valid",
                    )
                ],
            },
        ),
    ]
