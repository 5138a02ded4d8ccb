"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from typing import Any

from accounts.domain import AppUser, UserId

LOOKUP_FIELDS = ("uid", "email", "username_lower")


class UserStore(ABC):
    """Interface for user persistence operations."""

    @abstractmethod
    def list_users(self) -> list[AppUser]:
        """Return all users ordered by username_lower ascending."""
        ...

    @abstractmethod
    def get_user(self, user_id: UserId) -> AppUser | None:
        """Return a user by ID, or None if not found."""
        ...

    @abstractmethod
    def find_by_field(self, field: str, value: str) -> AppUser | None:
        """Return the first user whose ``field`` (one of LOOKUP_FIELDS) equals value."""
        ...

    @abstractmethod
    def username_lower_exists(self, username_lower: str, exclude: UserId | None = None) -> bool:
        ...

    @abstractmethod
    def create_user(self, **fields: Any) -> AppUser:
        """Insert a user. Raises IntegrityError when username_lower is taken."""
        ...

    @abstractmethod
    def update_user(self, user_id: UserId, **changes: Any) -> AppUser | None:
        ...

    @abstractmethod
    def delete_user(self, user_id: UserId) -> bool:
        ...
