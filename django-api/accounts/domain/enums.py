from enum import Enum
from typing import Self


class UserRole(Enum):
    """Closed set of application roles."""

    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"
    KIOSK = "kiosk"

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            raise ValueError(f"Unknown role: {value!r}") from None
