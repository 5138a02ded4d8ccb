from accounts.domain.enums import UserRole
from accounts.domain.models import AppUser
from accounts.domain.value_objects import Birthday, PasswordHash, UserId, Username

__all__ = [
    "AppUser",
    "UserRole",
    "UserId",
    "Username",
    "Birthday",
    "PasswordHash",
]
