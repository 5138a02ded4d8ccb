"""Integration tests for the parliament HTTP API.

Responses use the camelCase record field names.
Run with: pytest tests/test_parliament_api.py -v
"""

from uuid import uuid4

import pytest
from rest_framework.test import APIClient

SUBJECT_FIELDS = {
    "id",
    "title",
    "description",
    "createdByUid",
    "createdByName",
    "createdAt",
    "status",
    "statusReason",
    "dateId",
    "dateTitle",
    "notesCount",
}


def create_date(client: APIClient, **overrides) -> dict:
    payload = {"title": "November session", "date": "2026-11-03T10:00:00Z"}
    payload.update(overrides)
    response = client.post("/api/parliament/dates", payload, format="json")
    assert response.status_code == 201, response.data
    return response.json()


def submit_subject(client: APIClient, date_id: str, **overrides) -> dict:
    payload = {
        "title": "Longer recess",
        "description": "Twenty minutes",
        "dateId": date_id,
        "createdByUid": "student-1",
        "createdByName": "Noa Levi",
    }
    payload.update(overrides)
    response = client.post("/api/parliament/subjects", payload, format="json")
    assert response.status_code == 201, response.data
    return response.json()


@pytest.mark.django_db
class TestDates:
    """Tests for /api/parliament/dates"""

    def test_create_date_returns_record(self, api_client: APIClient):
        body = create_date(api_client)
        assert set(body) == {
            "id",
            "title",
            "date",
            "isOpen",
            "createdAt",
            "createdByUid",
            "createdByName",
        }
        assert body["isOpen"] is True
        assert body["createdByName"] == "Admin"

    def test_list_dates_empty(self, api_client: APIClient):
        response = api_client.get("/api/parliament/dates")
        assert response.status_code == 200
        assert response.json() == []

    def test_update_without_fields_returns_400(self, api_client: APIClient):
        date = create_date(api_client)
        response = api_client.patch(f"/api/parliament/dates/{date['id']}", {}, format="json")
        assert response.status_code == 400
        assert response.json()["code"] == "NO_FIELDS_TO_UPDATE"

    def test_delete_date_with_subjects_returns_409(self, api_client: APIClient):
        date = create_date(api_client)
        submit_subject(api_client, date["id"])
        response = api_client.delete(f"/api/parliament/dates/{date['id']}")
        assert response.status_code == 409
        assert response.json()["code"] == "DATE_HAS_SUBJECTS"

    def test_invalid_id_format_returns_400(self, api_client: APIClient):
        response = api_client.post("/api/parliament/dates/not-a-uuid/open", {"isOpen": False}, format="json")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ID"

    def test_unknown_date_returns_404(self, api_client: APIClient):
        response = api_client.post(f"/api/parliament/dates/{uuid4()}/archive")
        assert response.status_code == 404

    def test_archive_reports_counts(self, api_client: APIClient):
        date = create_date(api_client)
        subject = submit_subject(api_client, date["id"])
        api_client.post(
            f"/api/parliament/subjects/{subject['id']}/notes",
            {"text": "Yes", "createdByUid": "u2", "createdByName": "Dana"},
            format="json",
        )

        response = api_client.post(f"/api/parliament/dates/{date['id']}/archive")

        assert response.status_code == 200
        assert response.json() == {"archivedCount": {"dates": 1, "subjects": 1, "notes": 1}}
        history = api_client.get("/api/parliament/history").json()
        assert {entry["type"] for entry in history} == {"date", "subject", "note"}


@pytest.mark.django_db
class TestSubjects:
    """Tests for /api/parliament/subjects"""

    def test_submit_returns_full_record(self, api_client: APIClient):
        date = create_date(api_client)
        body = submit_subject(api_client, date["id"])
        assert set(body) == SUBJECT_FIELDS
        assert body["status"] == "pending"
        assert body["notesCount"] == 0
        assert body["dateTitle"] == "November session"

    def test_submit_to_closed_date_returns_409(self, api_client: APIClient):
        date = create_date(api_client, isOpen=False)
        response = api_client.post(
            "/api/parliament/subjects",
            {"title": "T", "dateId": date["id"], "createdByUid": "u", "createdByName": "N"},
            format="json",
        )
        assert response.status_code == 409
        assert response.json()["code"] == "DATE_CLOSED"

    def test_submit_missing_fields_returns_400(self, api_client: APIClient):
        response = api_client.post("/api/parliament/subjects", {"title": "T"}, format="json")
        assert response.status_code == 400

    def test_set_status(self, api_client: APIClient):
        date = create_date(api_client)
        subject = submit_subject(api_client, date["id"])
        response = api_client.post(
            f"/api/parliament/subjects/{subject['id']}/status",
            {"status": "rejected", "statusReason": "Out of scope"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["status"] == "rejected"
        assert response.json()["statusReason"] == "Out of scope"

    def test_archived_status_is_rejected(self, api_client: APIClient):
        date = create_date(api_client)
        subject = submit_subject(api_client, date["id"])
        response = api_client.post(
            f"/api/parliament/subjects/{subject['id']}/status",
            {"status": "archived"},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_STATUS"

    def test_filter_by_status_and_author(self, api_client: APIClient):
        date = create_date(api_client)
        subject = submit_subject(api_client, date["id"])

        pending = api_client.get("/api/parliament/subjects", {"status": "pending"}).json()
        approved = api_client.get("/api/parliament/subjects", {"status": "approved"}).json()
        mine = api_client.get("/api/parliament/subjects", {"createdByUid": "student-1"}).json()

        assert [s["id"] for s in pending] == [subject["id"]]
        assert approved == []
        assert [s["id"] for s in mine] == [subject["id"]]

    def test_delete_subject_reports_deleted_notes(self, api_client: APIClient):
        date = create_date(api_client)
        subject = submit_subject(api_client, date["id"])
        api_client.post(
            f"/api/parliament/subjects/{subject['id']}/notes",
            {"text": "Yes", "createdByUid": "u2", "createdByName": "Dana"},
            format="json",
        )
        response = api_client.delete(f"/api/parliament/subjects/{subject['id']}")
        assert response.json() == {"deletedNotes": 1}


@pytest.mark.django_db
class TestNotes:
    """Tests for notes endpoints"""

    def test_notes_count_follows_notes(self, api_client: APIClient):
        date = create_date(api_client)
        subject = submit_subject(api_client, date["id"])
        notes_url = f"/api/parliament/subjects/{subject['id']}/notes"
        note_payload = {"text": "Agree", "createdByUid": "u2", "createdByName": "Dana"}

        first = api_client.post(notes_url, note_payload, format="json").json()
        api_client.post(notes_url, note_payload, format="json")
        assert api_client.get(f"/api/parliament/subjects/{subject['id']}").json()["notesCount"] == 2

        api_client.delete(f"/api/parliament/notes/{first['id']}")
        assert api_client.get(f"/api/parliament/subjects/{subject['id']}").json()["notesCount"] == 1
        assert len(api_client.get(notes_url).json()) == 1

    def test_note_record_fields(self, api_client: APIClient):
        date = create_date(api_client)
        subject = submit_subject(api_client, date["id"])
        note = api_client.post(
            f"/api/parliament/subjects/{subject['id']}/notes",
            {"text": "Agree", "createdByUid": "u2", "createdByName": "Dana"},
            format="json",
        ).json()
        assert note["subjectId"] == subject["id"]
        assert note["parentNoteId"] is None
        assert note["updatedAt"] is None

    def test_note_on_missing_subject_returns_404(self, api_client: APIClient):
        response = api_client.post(
            f"/api/parliament/subjects/{uuid4()}/notes",
            {"text": "Agree", "createdByUid": "u2", "createdByName": "Dana"},
            format="json",
        )
        assert response.status_code == 404

    def test_integrity_endpoint_is_consistent(self, api_client: APIClient):
        date = create_date(api_client)
        submit_subject(api_client, date["id"])
        body = api_client.get("/api/parliament/integrity").json()
        assert body == {"consistent": True, "violations": []}
