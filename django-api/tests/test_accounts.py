"""Tests for users, roles and credentials.

Run with: pytest tests/test_accounts.py -v
"""

from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from accounts import models
from accounts.domain import UserRole
from accounts.domain.errors import (
    InvalidCredentialsError,
    InvalidRoleError,
    InvalidUserInputError,
    UsernameTakenError,
    UserNotFoundError,
)


@pytest.mark.django_db
class TestUserService:
    """Tests for UserService against the database."""

    def test_create_user_derives_username_lower(self, user_service):
        user = user_service.create_user("  NoaLevi ", "secret", first_name="Noa")
        assert user.username == "NoaLevi"
        assert user.username_lower == "noalevi"
        assert user.role is UserRole.STUDENT

    def test_password_is_never_stored_in_plaintext(self, user_service):
        user_service.create_user("noa", "secret")
        stored = models.AppUser.objects.get(username_lower="noa").password_hash
        assert stored != "secret"
        assert "$" in stored

    def test_usernames_are_unique_ignoring_case(self, user_service):
        user_service.create_user("Noa", "secret")
        with pytest.raises(UsernameTakenError):
            user_service.create_user("NOA", "other")

    def test_unknown_role_is_rejected(self, user_service):
        with pytest.raises(InvalidRoleError):
            user_service.create_user("noa", "secret", role="editor")
        assert not models.AppUser.objects.exists()

    def test_invalid_birthday_is_rejected(self, user_service):
        with pytest.raises(InvalidUserInputError):
            user_service.create_user("noa", "secret", birthday="17.05.2012")

    def test_rename_resyncs_username_lower(self, user_service):
        user = user_service.create_user("noa", "secret")
        renamed = user_service.update_user(str(user.id), username="NoaL")
        assert renamed.username_lower == "noal"
        assert user_service.find_by_username("NOAL").id == user.id

    def test_rename_to_taken_name_is_rejected(self, user_service):
        user_service.create_user("noa", "secret")
        other = user_service.create_user("dana", "secret")
        with pytest.raises(UsernameTakenError):
            user_service.update_user(str(other.id), username="Noa")

    def test_update_role_and_password(self, user_service):
        user = user_service.create_user("noa", "secret")
        updated = user_service.update_user(str(user.id), role="teacher", password="new-pass")
        assert updated.role is UserRole.TEACHER
        assert user_service.authenticate("noa", "new-pass").id == user.id

    def test_update_unknown_field_is_rejected(self, user_service):
        user = user_service.create_user("noa", "secret")
        with pytest.raises(InvalidUserInputError):
            user_service.update_user(str(user.id), password_hash="md5$x$y")

    def test_authenticate_trims_and_ignores_username_case(self, user_service):
        user = user_service.create_user("Noa", "secret")
        assert user_service.authenticate(" noa ", " secret ").id == user.id

    def test_authenticate_wrong_password(self, user_service):
        user_service.create_user("noa", "secret")
        with pytest.raises(InvalidCredentialsError):
            user_service.authenticate("noa", "wrong")

    def test_authenticate_unknown_user(self, user_service):
        with pytest.raises(InvalidCredentialsError):
            user_service.authenticate("ghost", "secret")

    def test_username_exists_with_exclusion(self, user_service):
        user = user_service.create_user("noa", "secret")
        assert user_service.username_exists("NOA")
        assert not user_service.username_exists("noa", exclude_id=str(user.id))

    def test_users_listed_by_lower_username(self, user_service):
        user_service.create_user("zed", "secret")
        user_service.create_user("Amit", "secret")
        assert [u.username for u in user_service.list_users()] == ["Amit", "zed"]

    def test_resolve_role_lookup_order(self, user_service):
        teacher = user_service.create_user("tal", "secret", role="teacher", uid="auth-1")
        user_service.create_user("kiosk1", "secret", role="kiosk", email="kiosk@school.test")

        assert user_service.resolve_role(uid=str(teacher.id)) is UserRole.TEACHER
        assert user_service.resolve_role(uid="auth-1") is UserRole.TEACHER
        assert user_service.resolve_role(email="kiosk@school.test") is UserRole.KIOSK
        assert user_service.resolve_role(username="KIOSK1") is UserRole.KIOSK
        assert user_service.resolve_role(uid="nobody") is None

    def test_delete_missing_user(self, user_service):
        with pytest.raises(UserNotFoundError):
            user_service.delete_user(str(uuid4()))


@pytest.mark.django_db
class TestUsersApi:
    """Tests for /api/accounts endpoints"""

    def test_create_user_hides_password_hash(self, api_client: APIClient):
        response = api_client.post(
            "/api/accounts/users",
            {"username": "NoaL", "password": "secret", "role": "student", "birthday": "2012-05-17"},
            format="json",
        )
        assert response.status_code == 201
        body = response.json()
        assert body["usernameLower"] == "noal"
        assert body["birthday"] == "2012-05-17"
        assert "passwordHash" not in body
        assert "password" not in body

    def test_duplicate_username_returns_409(self, api_client: APIClient, user_service):
        user_service.create_user("noa", "secret")
        response = api_client.post(
            "/api/accounts/users", {"username": "Noa", "password": "x"}, format="json"
        )
        assert response.status_code == 409
        assert response.json()["code"] == "USERNAME_TAKEN"

    def test_invalid_role_returns_400(self, api_client: APIClient):
        response = api_client.post(
            "/api/accounts/users",
            {"username": "noa", "password": "x", "role": "superuser"},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ROLE"

    def test_patch_user(self, api_client: APIClient, user_service):
        user = user_service.create_user("noa", "secret")
        response = api_client.patch(
            f"/api/accounts/users/{user.id}", {"classId": "ח", "role": "kiosk"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["classId"] == "ח"
        assert response.json()["role"] == "kiosk"

    def test_login(self, api_client: APIClient, user_service):
        user = user_service.create_user("noa", "secret", role="teacher")
        response = api_client.post(
            "/api/accounts/login", {"username": "NOA", "password": "secret"}, format="json"
        )
        assert response.status_code == 200
        assert response.json() == {"id": str(user.id), "username": "noa", "role": "teacher"}

    def test_login_with_wrong_password_returns_401(self, api_client: APIClient, user_service):
        user_service.create_user("noa", "secret")
        response = api_client.post(
            "/api/accounts/login", {"username": "noa", "password": "nope"}, format="json"
        )
        assert response.status_code == 401

    def test_resolve_role(self, api_client: APIClient, user_service):
        user_service.create_user("noa", "secret", role="admin")
        assert api_client.get("/api/accounts/roles/resolve", {"username": "Noa"}).json() == {
            "role": "admin"
        }
        assert api_client.get("/api/accounts/roles/resolve", {"username": "x"}).json() == {
            "role": ""
        }

    def test_get_unknown_user_returns_404(self, api_client: APIClient):
        assert api_client.get(f"/api/accounts/users/{uuid4()}").status_code == 404
