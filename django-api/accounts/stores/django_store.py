"""Django ORM implementation of the UserStore."""

from typing import Any

from django.db import transaction

from accounts import models
from accounts.domain import AppUser, Birthday, PasswordHash, UserId, UserRole
from accounts.stores.interfaces import LOOKUP_FIELDS, UserStore


def _to_user(row: models.AppUser) -> AppUser:
    return AppUser(
        id=UserId(row.id),
        username=row.username,
        username_lower=row.username_lower,
        first_name=row.first_name,
        last_name=row.last_name,
        role=UserRole(row.role),
        birthday=Birthday(row.birthday),
        class_id=row.class_id,
        password_hash=PasswordHash(row.password_hash),
        created_at=row.created_at,
        email=row.email,
        uid=row.uid,
    )


def _to_columns(fields: dict[str, Any]) -> dict[str, Any]:
    columns = dict(fields)
    if isinstance(columns.get("role"), UserRole):
        columns["role"] = columns["role"].value
    if isinstance(columns.get("birthday"), Birthday):
        columns["birthday"] = columns["birthday"].value
    if isinstance(columns.get("password_hash"), PasswordHash):
        columns["password_hash"] = columns["password_hash"].value
    return columns


class DjangoUserStore(UserStore):
    """Relational user store using Django ORM."""

    def list_users(self) -> list[AppUser]:
        return [_to_user(row) for row in models.AppUser.objects.order_by("username_lower")]

    def get_user(self, user_id: UserId) -> AppUser | None:
        row = models.AppUser.objects.filter(pk=user_id.value).first()
        return _to_user(row) if row else None

    def find_by_field(self, field: str, value: str) -> AppUser | None:
        if field not in LOOKUP_FIELDS:
            raise ValueError(f"Users cannot be looked up by {field!r}")
        row = models.AppUser.objects.filter(**{field: value}).first()
        return _to_user(row) if row else None

    def username_lower_exists(self, username_lower: str, exclude: UserId | None = None) -> bool:
        rows = models.AppUser.objects.filter(username_lower=username_lower)
        if exclude is not None:
            rows = rows.exclude(pk=exclude.value)
        return rows.exists()

    def create_user(self, **fields: Any) -> AppUser:
        with transaction.atomic():
            row = models.AppUser.objects.create(**_to_columns(fields))
        return _to_user(row)

    def update_user(self, user_id: UserId, **changes: Any) -> AppUser | None:
        row = models.AppUser.objects.filter(pk=user_id.value).first()
        if row is None:
            return None
        columns = _to_columns(changes)
        for name, value in columns.items():
            setattr(row, name, value)
        with transaction.atomic():
            row.save(update_fields=list(columns))
        return _to_user(row)

    def delete_user(self, user_id: UserId) -> bool:
        deleted, _ = models.AppUser.objects.filter(pk=user_id.value).delete()
        return deleted > 0
