"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from accounts.domain import AppUser, Birthday, PasswordHash, UserId, Username, UserRole
from parliament.domain import DateId, NotesCount, SubjectStatus


class TestNotesCount:
    """Tests for NotesCount value object."""

    def test_accepts_zero(self):
        assert NotesCount(0).value == 0

    def test_rejects_negative_value(self):
        with pytest.raises(ValueError):
            NotesCount(-1)


class TestIds:
    def test_from_string_valid_uuid(self):
        raw = uuid4()
        assert DateId.from_string(str(raw)).value == raw

    def test_from_string_invalid_uuid(self):
        with pytest.raises(ValueError):
            DateId.from_string("not-a-uuid")

    def test_str_is_canonical_uuid(self):
        raw = uuid4()
        assert str(UserId(raw)) == str(raw)


class TestSubjectStatus:
    @pytest.mark.parametrize("raw", ["pending", "approved", "rejected"])
    def test_accepts_known_statuses(self, raw):
        assert SubjectStatus.from_string(raw).value == raw

    def test_normalizes_case_and_whitespace(self):
        assert SubjectStatus.from_string(" Approved ") is SubjectStatus.APPROVED

    def test_rejects_archived(self):
        with pytest.raises(ValueError):
            SubjectStatus.from_string("archived")


class TestUserRole:
    def test_closed_set(self):
        assert {role.value for role in UserRole} == {"admin", "teacher", "student", "kiosk"}

    def test_rejects_unknown_role(self):
        with pytest.raises(ValueError):
            UserRole.from_string("editor")


class TestUsername:
    def test_lower(self):
        assert Username("NoaL").lower == "noal"

    @pytest.mark.parametrize("raw", ["", "  noa", "noa "])
    def test_rejects_blank_or_untrimmed(self, raw):
        with pytest.raises(ValueError):
            Username(raw)


class TestBirthday:
    def test_empty_is_allowed(self):
        assert Birthday("").as_date() is None

    def test_parses_iso_date(self):
        assert Birthday("2012-05-17").as_date().year == 2012

    @pytest.mark.parametrize("raw", ["17/05/2012", "2012-5-7", "2012-02-30"])
    def test_rejects_invalid_dates(self, raw):
        with pytest.raises(ValueError):
            Birthday(raw)


class TestPasswordHash:
    def test_accepts_encoded_hash(self):
        assert PasswordHash("md5$salt$abc").value.startswith("md5$")

    def test_rejects_plaintext(self):
        with pytest.raises(ValueError):
            PasswordHash("hunter2")

    def test_repr_hides_value(self):
        assert "md5" not in repr(PasswordHash("md5$salt$abc"))


class TestAppUser:
    def _user(self, **overrides) -> AppUser:
        fields = dict(
            id=UserId(uuid4()),
            username="NoaL",
            username_lower="noal",
            first_name="Noa",
            last_name="Levi",
            role=UserRole.STUDENT,
            birthday=Birthday("2012-05-17"),
            class_id="ז",
            password_hash=PasswordHash("md5$salt$abc"),
            created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        )
        fields.update(overrides)
        return AppUser(**fields)

    def test_username_lower_must_match_username(self):
        with pytest.raises(ValueError):
            self._user(username_lower="NoaL")

    def test_display_name_uses_full_name(self):
        assert self._user().display_name == "Noa Levi"

    def test_display_name_falls_back_to_username(self):
        assert self._user(first_name="", last_name="").display_name == "NoaL"
