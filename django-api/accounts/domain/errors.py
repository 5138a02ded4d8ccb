"""Domain error codes for the accounts module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_ID = "INVALID_ID"
    INVALID_ROLE = "INVALID_ROLE"
    INVALID_INPUT = "INVALID_INPUT"
    USERNAME_TAKEN = "USERNAME_TAKEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UserNotFoundError(DomainError):
    """Raised when a user is not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(code=ErrorCode.USER_NOT_FOUND, message="User not found")
        self.user_id = user_id


class InvalidUserIdError(DomainError):
    """Raised when a user ID is invalid."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_ID, message="Invalid user ID format")


class InvalidRoleError(DomainError):
    """Raised for a role outside admin/teacher/student/kiosk."""

    def __init__(self, role: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ROLE,
            message="Role must be one of: admin, teacher, student, kiosk",
        )
        self.role = role


class InvalidUserInputError(DomainError):
    """Raised when a user field fails validation."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)


class UsernameTakenError(DomainError):
    """Raised when a username is already used, ignoring case."""

    def __init__(self, username: str) -> None:
        super().__init__(code=ErrorCode.USERNAME_TAKEN, message="Username already exists")
        self.username = username


class InvalidCredentialsError(DomainError):
    """Raised when a username/password pair does not match."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid username or password",
        )
