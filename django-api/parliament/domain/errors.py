"""Domain error codes for the parliament module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    DATE_NOT_FOUND = "DATE_NOT_FOUND"
    SUBJECT_NOT_FOUND = "SUBJECT_NOT_FOUND"
    NOTE_NOT_FOUND = "NOTE_NOT_FOUND"
    HISTORY_NOT_FOUND = "HISTORY_NOT_FOUND"
    INVALID_ID = "INVALID_ID"
    INVALID_STATUS = "INVALID_STATUS"
    INVALID_INPUT = "INVALID_INPUT"
    DATE_CLOSED = "DATE_CLOSED"
    DATE_HAS_SUBJECTS = "DATE_HAS_SUBJECTS"
    NO_FIELDS_TO_UPDATE = "NO_FIELDS_TO_UPDATE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class DateNotFoundError(DomainError):
    """Raised when a parliament date is not found."""

    def __init__(self, date_id: str) -> None:
        super().__init__(
            code=ErrorCode.DATE_NOT_FOUND,
            message="Parliament date not found",
        )
        self.date_id = date_id


class SubjectNotFoundError(DomainError):
    """Raised when a subject is not found."""

    def __init__(self, subject_id: str) -> None:
        super().__init__(
            code=ErrorCode.SUBJECT_NOT_FOUND,
            message="Subject not found",
        )
        self.subject_id = subject_id


class NoteNotFoundError(DomainError):
    """Raised when a note is not found."""

    def __init__(self, note_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOTE_NOT_FOUND,
            message="Note not found",
        )
        self.note_id = note_id


class HistoryNotFoundError(DomainError):
    """Raised when an archived record is not found in history."""

    def __init__(self, original_id: str) -> None:
        super().__init__(
            code=ErrorCode.HISTORY_NOT_FOUND,
            message="Archived record not found in history",
        )
        self.original_id = original_id


class InvalidIdError(DomainError):
    """Raised when a record ID is not a valid UUID."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message="Invalid ID format",
        )


class InvalidStatusError(DomainError):
    """Raised for a status outside pending/approved/rejected."""

    def __init__(self, status: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STATUS,
            message="Status must be one of: pending, approved, rejected",
        )
        self.status = status


class InvalidInputError(DomainError):
    """Raised when a required text field is empty."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)


class DateClosedError(DomainError):
    """Raised when submitting a subject to a date that no longer accepts them."""

    def __init__(self, date_id: str) -> None:
        super().__init__(
            code=ErrorCode.DATE_CLOSED,
            message="The selected date is no longer open for proposals",
        )
        self.date_id = date_id


class DateHasSubjectsError(DomainError):
    """Raised when deleting a date that still has linked subjects."""

    def __init__(self, date_id: str, subject_count: int) -> None:
        super().__init__(
            code=ErrorCode.DATE_HAS_SUBJECTS,
            message=(
                f"Cannot delete a date with {subject_count} linked subjects; "
                "archive it instead"
            ),
        )
        self.date_id = date_id
        self.subject_count = subject_count


class NoFieldsToUpdateError(DomainError):
    """Raised when an update carries no fields."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_FIELDS_TO_UPDATE,
            message="No fields were provided to update",
        )
