"""Tests for admin write paths.

Admin edits must keep the same rules as the API so that stored rows stay readable.
Run with: pytest tests/test_admin.py -v
"""

import pytest

from accounts import models


def change_url(user) -> str:
    return f"/admin/accounts/appuser/{user.id}/change/"


def form_data(**overrides) -> dict:
    data = {
        "username": "noa",
        "first_name": "",
        "last_name": "",
        "role": "student",
        "birthday": "",
        "class_id": "",
        "email": "",
        "uid": "",
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestAppUserAdmin:
    def test_malformed_birthday_is_rejected(self, admin_client, api_client, user_service):
        user = user_service.create_user("noa", "secret", birthday="2010-12-31")

        response = admin_client.post(change_url(user), form_data(birthday="31/12/2010"))

        assert response.status_code == 200
        assert "birthday" in response.context["adminform"].form.errors
        assert models.AppUser.objects.get(pk=user.id.value).birthday == "2010-12-31"
        assert api_client.get("/api/accounts/users").status_code == 200

    def test_impossible_birthday_is_rejected(self, admin_client, user_service):
        user = user_service.create_user("noa", "secret")

        response = admin_client.post(change_url(user), form_data(birthday="2010-02-30"))

        assert response.status_code == 200
        assert models.AppUser.objects.get(pk=user.id.value).birthday == ""

    def test_rename_to_existing_name_in_other_case_is_rejected(self, admin_client, user_service):
        user_service.create_user("Dana", "secret")
        eli = user_service.create_user("Eli", "secret")

        response = admin_client.post(change_url(eli), form_data(username="DANA"))

        assert response.status_code == 200
        assert "username" in response.context["adminform"].form.errors
        assert models.AppUser.objects.get(pk=eli.id.value).username == "Eli"

    def test_rename_resyncs_username_lower(self, admin_client, user_service):
        user = user_service.create_user("noa", "secret")

        response = admin_client.post(
            change_url(user), form_data(username=" NoaL ", birthday="2012-05-17")
        )

        assert response.status_code == 302
        row = models.AppUser.objects.get(pk=user.id.value)
        assert (row.username, row.username_lower, row.birthday) == ("NoaL", "noal", "2012-05-17")

    def test_users_cannot_be_added(self, admin_client):
        assert admin_client.get("/admin/accounts/appuser/add/").status_code == 403


@pytest.mark.django_db
class TestParliamentAdmin:
    def test_subjects_cannot_be_added(self, admin_client):
        assert admin_client.get("/admin/parliament/parliamentsubject/add/").status_code == 403

    def test_subject_change_page_loads(self, admin_client, subject):
        response = admin_client.get(f"/admin/parliament/parliamentsubject/{subject.id}/change/")
        assert response.status_code == 200
