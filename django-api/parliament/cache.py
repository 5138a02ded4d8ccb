"""Cache keys for parliament list responses.

Views read through these keys; signals.py invalidates them.
"""

from uuid import UUID

from django.conf import settings

from parliament.domain import SubjectStatus

DATES = "parliament:dates"
HISTORY = "parliament:history"


def subjects_key(status: str | None = None) -> str:
    return f"parliament:subjects:{status or 'all'}"


def notes_key(subject_id) -> str:
    # Request paths and model instances must map to the same key.
    try:
        subject_id = UUID(str(subject_id))
    except ValueError:
        pass
    return f"parliament:notes:{subject_id}"


def all_subject_keys() -> list[str]:
    return [subjects_key()] + [subjects_key(status.value) for status in SubjectStatus]


def timeout() -> int:
    return settings.PARLIAMENT["CACHE_TIMEOUT"]
