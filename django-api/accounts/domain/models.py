"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in accounts/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from accounts.domain.enums import UserRole
from accounts.domain.value_objects import Birthday, PasswordHash, UserId


@dataclass(frozen=True)
class AppUser:
    """An application identity.

    ``username_lower`` is the lower-cased copy of ``username`` used for
    case-insensitive lookup; construction fails if the two disagree.
    """

    id: UserId
    username: str
    username_lower: str
    first_name: str
    last_name: str
    role: UserRole
    birthday: Birthday
    class_id: str
    password_hash: PasswordHash
    created_at: datetime
    email: str = ""
    uid: str = ""

    def __post_init__(self) -> None:
        if self.username_lower != self.username.lower():
            raise ValueError("username_lower must be the lower-case form of username")

    @property
    def display_name(self) -> str:
        full = " ".join(part for part in (self.first_name, self.last_name) if part)
        return full or self.username
