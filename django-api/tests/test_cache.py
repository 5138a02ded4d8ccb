"""Tests for cache behavior.

Invalidation runs on transaction commit, so writes are wrapped in
django_capture_on_commit_callbacks(execute=True).
Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache

from parliament import cache as keys
from parliament import models


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_date_list_is_cached(self, api_client, open_date):
        api_client.get("/api/parliament/dates")
        assert cache.get(keys.DATES) is not None

    def test_date_save_invalidates_dates_and_subjects(
        self, api_client, open_date, subject, django_capture_on_commit_callbacks
    ):
        api_client.get("/api/parliament/dates")
        api_client.get("/api/parliament/subjects")

        with django_capture_on_commit_callbacks(execute=True):
            models.ParliamentDate.objects.get(pk=open_date.id.value).save()

        assert cache.get(keys.DATES) is None
        assert cache.get(keys.subjects_key()) is None

    def test_subject_save_invalidates_status_lists(
        self, api_client, subject, django_capture_on_commit_callbacks
    ):
        api_client.get("/api/parliament/subjects", {"status": "pending"})
        assert cache.get(keys.subjects_key("pending")) is not None

        with django_capture_on_commit_callbacks(execute=True):
            models.ParliamentSubject.objects.get(pk=subject.id.value).save()

        assert cache.get(keys.subjects_key("pending")) is None

    def test_note_save_invalidates_notes_and_counts(
        self, api_client, service, subject, student, django_capture_on_commit_callbacks
    ):
        api_client.get(f"/api/parliament/subjects/{subject.id}/notes")
        api_client.get("/api/parliament/subjects")
        assert cache.get(keys.notes_key(subject.id)) == []

        with django_capture_on_commit_callbacks(execute=True):
            service.add_note(str(subject.id), "New note", student)

        assert cache.get(keys.notes_key(subject.id)) is None
        assert cache.get(keys.subjects_key()) is None

    def test_invalidation_waits_for_commit(
        self, api_client, service, subject, student, django_capture_on_commit_callbacks
    ):
        api_client.get("/api/parliament/subjects")

        with django_capture_on_commit_callbacks() as callbacks:
            service.add_note(str(subject.id), "New note", student)
            # Still uncommitted: the list keeps its entry.
            assert cache.get(keys.subjects_key()) is not None

        assert callbacks
        for callback in callbacks:
            callback()
        assert cache.get(keys.subjects_key()) is None

    def test_rename_is_visible_in_cached_subject_list(
        self, api_client, service, open_date, subject, django_capture_on_commit_callbacks
    ):
        api_client.get("/api/parliament/subjects")

        with django_capture_on_commit_callbacks(execute=True):
            service.update_date(str(open_date.id), title="Renamed")

        body = api_client.get("/api/parliament/subjects").json()
        assert body[0]["dateTitle"] == "Renamed"

    def test_notes_key_is_case_insensitive(self, subject):
        assert keys.notes_key(str(subject.id).upper()) == keys.notes_key(subject.id.value)

    def test_user_save_invalidates_user_list(
        self, api_client, user_service, django_capture_on_commit_callbacks
    ):
        api_client.get("/api/accounts/users")
        assert cache.get("accounts:users") == []

        with django_capture_on_commit_callbacks(execute=True):
            user_service.create_user("Noa", "secret")

        assert cache.get("accounts:users") is None

    def test_user_list_kept_until_commit(
        self, api_client, user_service, django_capture_on_commit_callbacks
    ):
        api_client.get("/api/accounts/users")

        with django_capture_on_commit_callbacks() as callbacks:
            user_service.create_user("Noa", "secret")

        assert cache.get("accounts:users") == []
        for callback in callbacks:
            callback()
        assert cache.get("accounts:users") is None
