"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging
from functools import wraps

from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from parliament import cache as keys
from parliament.domain import Author
from parliament.domain.errors import DomainError, ErrorCode
from parliament.handlers import serializers as s
from parliament.services.parliament_service import ParliamentService, parse_status
from parliament.stores.django_store import DjangoParliamentStore

logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    ErrorCode.DATE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SUBJECT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.NOTE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.HISTORY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_STATUS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NO_FIELDS_TO_UPDATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DATE_CLOSED: status.HTTP_409_CONFLICT,
    ErrorCode.DATE_HAS_SUBJECTS: status.HTTP_409_CONFLICT,
}


def get_service() -> ParliamentService:
    return ParliamentService(DjangoParliamentStore())


def maps_domain_errors(handler):
    """Translate DomainError raised by a handler into an error response."""

    @wraps(handler)
    def wrapper(self, request, *args, **kwargs):
        try:
            return handler(self, request, *args, **kwargs)
        except DomainError as error:
            logger.info("%s %s rejected: %s", request.method, request.path, error)
            return Response(
                {"code": error.code.value, "message": error.message},
                status=_STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
            )

    return wrapper


def _validated(serializer_class, request: Request) -> dict:
    serializer = serializer_class(data=request.data)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


def _author(data: dict) -> Author:
    return Author(uid=data["createdByUid"], name=data["createdByName"])


class DateListView(APIView):
    """Handler for GET, POST /api/parliament/dates"""

    def get(self, request: Request) -> Response:
        data = cache.get_or_set(
            keys.DATES,
            lambda: s.ParliamentDateSerializer(get_service().list_dates(), many=True).data,
            keys.timeout(),
        )
        return Response(data)

    @maps_domain_errors
    def post(self, request: Request) -> Response:
        data = _validated(s.DateCreateInput, request)
        date = get_service().create_date(
            title=data["title"],
            date=data["date"],
            author=_author(data),
            is_open=data["isOpen"],
        )
        return Response(s.ParliamentDateSerializer(date).data, status=status.HTTP_201_CREATED)


class DateDetailView(APIView):
    """Handler for PATCH, DELETE /api/parliament/dates/{date_id}"""

    @maps_domain_errors
    def patch(self, request: Request, date_id: str) -> Response:
        data = _validated(s.DateUpdateInput, request)
        date = get_service().update_date(date_id, title=data.get("title"), date=data.get("date"))
        return Response(s.ParliamentDateSerializer(date).data)

    @maps_domain_errors
    def delete(self, request: Request, date_id: str) -> Response:
        get_service().delete_date(date_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class DateOpenView(APIView):
    """Handler for POST /api/parliament/dates/{date_id}/open"""

    @maps_domain_errors
    def post(self, request: Request, date_id: str) -> Response:
        data = _validated(s.DateOpenInput, request)
        date = get_service().set_date_open(date_id, data["isOpen"])
        return Response(s.ParliamentDateSerializer(date).data)


class DateArchiveView(APIView):
    """Handler for POST /api/parliament/dates/{date_id}/archive"""

    @maps_domain_errors
    def post(self, request: Request, date_id: str) -> Response:
        result = get_service().archive_date(date_id)
        return Response({"archivedCount": s.ArchiveResultSerializer(result).data})


class SubjectListView(APIView):
    """Handler for GET, POST /api/parliament/subjects"""

    @maps_domain_errors
    def get(self, request: Request) -> Response:
        service = get_service()
        author_uid = request.query_params.get("createdByUid")
        if author_uid is not None:
            subjects = service.list_subjects_for_author(author_uid)
            return Response(s.ParliamentSubjectSerializer(subjects, many=True).data)

        subject_status = request.query_params.get("status") or None
        if subject_status:
            subject_status = parse_status(subject_status).value
        key = keys.subjects_key(subject_status)
        data = cache.get(key)
        if data is None:
            data = s.ParliamentSubjectSerializer(
                service.list_subjects(subject_status), many=True
            ).data
            cache.set(key, data, keys.timeout())
        return Response(data)

    @maps_domain_errors
    def post(self, request: Request) -> Response:
        data = _validated(s.SubjectCreateInput, request)
        subject = get_service().submit_subject(
            title=data["title"],
            description=data["description"],
            author=_author(data),
            date_id=data["dateId"],
        )
        return Response(
            s.ParliamentSubjectSerializer(subject).data, status=status.HTTP_201_CREATED
        )


class SubjectDetailView(APIView):
    """Handler for GET, PATCH, DELETE /api/parliament/subjects/{subject_id}"""

    @maps_domain_errors
    def get(self, request: Request, subject_id: str) -> Response:
        subject = get_service().get_subject(subject_id)
        return Response(s.ParliamentSubjectSerializer(subject).data)

    @maps_domain_errors
    def patch(self, request: Request, subject_id: str) -> Response:
        data = _validated(s.SubjectUpdateInput, request)
        subject = get_service().update_subject(
            subject_id,
            title=data.get("title"),
            description=data.get("description"),
            date_id=data.get("dateId"),
        )
        return Response(s.ParliamentSubjectSerializer(subject).data)

    @maps_domain_errors
    def delete(self, request: Request, subject_id: str) -> Response:
        deleted_notes = get_service().delete_subject(subject_id)
        return Response({"deletedNotes": deleted_notes})


class SubjectStatusView(APIView):
    """Handler for POST /api/parliament/subjects/{subject_id}/status"""

    @maps_domain_errors
    def post(self, request: Request, subject_id: str) -> Response:
        data = _validated(s.SubjectStatusInput, request)
        subject = get_service().set_subject_status(
            subject_id, data["status"], data["statusReason"]
        )
        return Response(s.ParliamentSubjectSerializer(subject).data)


class NoteListView(APIView):
    """Handler for GET, POST /api/parliament/subjects/{subject_id}/notes"""

    @maps_domain_errors
    def get(self, request: Request, subject_id: str) -> Response:
        service = get_service()
        key = keys.notes_key(subject_id)
        data = cache.get(key)
        if data is None:
            data = s.ParliamentNoteSerializer(service.list_notes(subject_id), many=True).data
            cache.set(key, data, keys.timeout())
        return Response(data)

    @maps_domain_errors
    def post(self, request: Request, subject_id: str) -> Response:
        data = _validated(s.NoteCreateInput, request)
        note = get_service().add_note(
            subject_id,
            text=data["text"],
            author=_author(data),
            parent_note_id=data["parentNoteId"],
        )
        return Response(s.ParliamentNoteSerializer(note).data, status=status.HTTP_201_CREATED)


class NoteDetailView(APIView):
    """Handler for PATCH, DELETE /api/parliament/notes/{note_id}"""

    @maps_domain_errors
    def patch(self, request: Request, note_id: str) -> Response:
        data = _validated(s.NoteUpdateInput, request)
        note = get_service().update_note(note_id, data["text"])
        return Response(s.ParliamentNoteSerializer(note).data)

    @maps_domain_errors
    def delete(self, request: Request, note_id: str) -> Response:
        get_service().delete_note(note_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class HistoryListView(APIView):
    """Handler for GET /api/parliament/history"""

    def get(self, request: Request) -> Response:
        data = cache.get_or_set(
            keys.HISTORY,
            lambda: s.HistoryEntrySerializer(get_service().list_history(), many=True).data,
            keys.timeout(),
        )
        return Response(data)


class SubjectDecisionView(APIView):
    """Handler for POST /api/parliament/history/subjects/{original_id}/decisions"""

    @maps_domain_errors
    def post(self, request: Request, original_id: str) -> Response:
        data = _validated(s.DecisionInput, request)
        entry = get_service().add_subject_decision(original_id, data["text"], _author(data))
        return Response(s.HistoryEntrySerializer(entry).data, status=status.HTTP_201_CREATED)


class ParliamentSummaryView(APIView):
    """Handler for PUT /api/parliament/history/dates/{parliament_id}/summary"""

    @maps_domain_errors
    def put(self, request: Request, parliament_id: str) -> Response:
        data = _validated(s.SummaryInput, request)
        entry = get_service().update_parliament_summary(parliament_id, data["summary"])
        return Response(s.HistoryEntrySerializer(entry).data)


class IntegrityView(APIView):
    """Handler for GET /api/parliament/integrity"""

    def get(self, request: Request) -> Response:
        violations = get_service().find_integrity_violations()
        return Response(
            {
                "consistent": not violations,
                "violations": s.IntegrityViolationSerializer(violations, many=True).data,
            }
        )
