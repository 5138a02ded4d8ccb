"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def service():
    from parliament.services.parliament_service import ParliamentService
    from parliament.stores.django_store import DjangoParliamentStore
    return ParliamentService(DjangoParliamentStore())


@pytest.fixture
def user_service():
    from accounts.services.user_service import UserService
    from accounts.stores.django_store import DjangoUserStore
    return UserService(DjangoUserStore())


@pytest.fixture
def admin_author():
    from parliament.domain import Author
    return Author(uid="admin-uid", name="Admin")


@pytest.fixture
def student():
    from parliament.domain import Author
    return Author(uid="student-1", name="Noa Levi")


@pytest.fixture
def session_time() -> datetime:
    return datetime(2026, 11, 3, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def open_date(service, admin_author, session_time):
    return service.create_date("November session", session_time, admin_author)


@pytest.fixture
def closed_date(service, admin_author, session_time):
    return service.create_date(
        "December session", session_time + timedelta(days=30), admin_author, is_open=False
    )


@pytest.fixture
def subject(service, student, open_date):
    return service.submit_subject(
        "Longer recess", "Recess should be twenty minutes", student, str(open_date.id)
    )
