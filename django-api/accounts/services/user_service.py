"""User service - all account business logic lives here.

``username_lower`` is derived here on every write path; callers never
supply it. Passwords are trimmed and hashed with Django's configured
password hasher before they reach a store.
"""

import logging

from django.contrib.auth.hashers import check_password, make_password
from django.db import IntegrityError

from accounts.domain import AppUser, Birthday, PasswordHash, UserId, Username, UserRole
from accounts.domain.errors import (
    InvalidCredentialsError,
    InvalidRoleError,
    InvalidUserIdError,
    InvalidUserInputError,
    UsernameTakenError,
    UserNotFoundError,
)
from accounts.stores.interfaces import UserStore

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = {"first_name", "last_name", "class_id", "email", "uid"}


def _parse_user_id(value: str) -> UserId:
    try:
        return UserId.from_string(str(value))
    except ValueError:
        raise InvalidUserIdError() from None


def _parse_username(value: str) -> Username:
    try:
        return Username((value or "").strip())
    except ValueError:
        raise InvalidUserInputError("Username is required") from None


def _parse_role(value: str | UserRole) -> UserRole:
    if isinstance(value, UserRole):
        return value
    try:
        return UserRole.from_string(value)
    except ValueError:
        raise InvalidRoleError(value) from None


def _parse_birthday(value: str) -> Birthday:
    try:
        return Birthday((value or "").strip())
    except ValueError:
        raise InvalidUserInputError("Birthday must be a valid YYYY-MM-DD date") from None


def _hash_password(raw: str) -> PasswordHash:
    password = (raw or "").strip()
    if not password:
        raise InvalidUserInputError("Password is required")
    return PasswordHash(make_password(password))


class UserService:
    """Service for application users and roles."""

    def __init__(self, store: UserStore) -> None:
        self._store = store

    def list_users(self) -> list[AppUser]:
        """Return all users ordered by lower-cased username."""
        return self._store.list_users()

    def get_user(self, user_id: str) -> AppUser:
        """Return a user by ID.

        Raises:
            InvalidUserIdError: If the user_id is not a valid UUID.
            UserNotFoundError: If the user does not exist.
        """
        user = self._store.get_user(_parse_user_id(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def find_by_username(self, username: str) -> AppUser | None:
        """Case-insensitive lookup; returns None for blank or unknown names."""
        lookup = (username or "").strip().lower()
        if not lookup:
            return None
        return self._store.find_by_field("username_lower", lookup)

    def username_exists(self, username: str, exclude_id: str | None = None) -> bool:
        lookup = (username or "").strip().lower()
        if not lookup:
            return False
        exclude = _parse_user_id(exclude_id) if exclude_id else None
        return self._store.username_lower_exists(lookup, exclude)

    def create_user(
        self,
        username: str,
        password: str,
        first_name: str = "",
        last_name: str = "",
        role: str | UserRole = UserRole.STUDENT,
        birthday: str = "",
        class_id: str = "",
        email: str = "",
        uid: str = "",
    ) -> AppUser:
        """Create a user with a unique (case-insensitive) username.

        Raises:
            UsernameTakenError: If another user has the same username ignoring case.
            InvalidRoleError: If role is outside the closed role set.
        """
        name = _parse_username(username)
        parsed_role = _parse_role(role)
        parsed_birthday = _parse_birthday(birthday)
        password_hash = _hash_password(password)
        if self._store.username_lower_exists(name.lower):
            raise UsernameTakenError(name.value)
        try:
            user = self._store.create_user(
                username=name.value,
                username_lower=name.lower,
                first_name=(first_name or "").strip(),
                last_name=(last_name or "").strip(),
                role=parsed_role,
                birthday=parsed_birthday,
                class_id=(class_id or "").strip(),
                password_hash=password_hash,
                email=(email or "").strip(),
                uid=(uid or "").strip(),
            )
        except IntegrityError:
            raise UsernameTakenError(name.value) from None
        logger.info("Created user %s with role %s", user.id, user.role.value)
        return user

    def update_user(self, user_id: str, **changes) -> AppUser:
        """Apply changes to a user.

        Accepts ``username``, ``password``, ``role``, ``birthday`` and the
        plain text fields. A new username re-derives ``username_lower``; a new
        password is hashed.
        """
        parsed_id = _parse_user_id(user_id)
        unknown = set(changes) - _EDITABLE_FIELDS - {"username", "password", "role", "birthday"}
        if unknown:
            raise InvalidUserInputError(f"Unknown user fields: {', '.join(sorted(unknown))}")
        if not changes:
            raise InvalidUserInputError("No fields were provided to update")

        columns = {
            name: (value or "").strip()
            for name, value in changes.items()
            if name in _EDITABLE_FIELDS
        }
        if "username" in changes:
            name = _parse_username(changes["username"])
            if self._store.username_lower_exists(name.lower, exclude=parsed_id):
                raise UsernameTakenError(name.value)
            columns["username"] = name.value
            columns["username_lower"] = name.lower
        if "role" in changes:
            columns["role"] = _parse_role(changes["role"])
        if "birthday" in changes:
            columns["birthday"] = _parse_birthday(changes["birthday"])
        if "password" in changes:
            columns["password_hash"] = _hash_password(changes["password"])

        try:
            user = self._store.update_user(parsed_id, **columns)
        except IntegrityError:
            raise UsernameTakenError(columns.get("username", "")) from None
        if user is None:
            raise UserNotFoundError(user_id)
        logger.info("Updated user %s (%s)", user.id, ", ".join(sorted(columns)))
        return user

    def delete_user(self, user_id: str) -> None:
        if not self._store.delete_user(_parse_user_id(user_id)):
            raise UserNotFoundError(user_id)
        logger.info("Deleted user %s", user_id)

    def authenticate(self, username: str, password: str) -> AppUser:
        """Return the user matching the credentials.

        Raises:
            InvalidCredentialsError: For an unknown user or a wrong password.
        """
        user = self.find_by_username(username)
        if user is None or not check_password(
            (password or "").strip(), user.password_hash.value
        ):
            logger.info("Rejected login for %r", (username or "").strip().lower())
            raise InvalidCredentialsError()
        return user

    def resolve_role(
        self, uid: str | None = None, email: str | None = None, username: str | None = None
    ) -> UserRole | None:
        """Find the role of an identity.

        Tries the record ID, then the ``uid``, ``email`` and lower-cased
        username fields, and returns the first match.
        """
        candidates = []
        if uid:
            try:
                record_id = UserId.from_string(uid)
            except ValueError:
                record_id = None
            if record_id is not None:
                candidates.append(lambda: self._store.get_user(record_id))
            candidates.append(lambda: self._store.find_by_field("uid", uid))
        if email:
            candidates.append(lambda: self._store.find_by_field("email", email.strip()))
        if username and username.strip():
            candidates.append(
                lambda: self._store.find_by_field("username_lower", username.strip().lower())
            )
        for lookup in candidates:
            user = lookup()
            if user is not None:
                return user.role
        return None
