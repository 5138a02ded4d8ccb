"""Serializers for transforming user domain models to API responses.

``passwordHash`` is part of the record schema but is never serialized.
"""

from rest_framework import serializers


class AppUserSerializer(serializers.Serializer):
    """Serializer for AppUser domain model."""

    id = serializers.CharField(source="id.value")
    username = serializers.CharField()
    usernameLower = serializers.CharField(source="username_lower")
    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    role = serializers.CharField(source="role.value")
    birthday = serializers.CharField(source="birthday.value")
    classId = serializers.CharField(source="class_id")
    createdAt = serializers.DateTimeField(source="created_at")
    email = serializers.CharField()
    uid = serializers.CharField()


class UserCreateInput(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)
    firstName = serializers.CharField(required=False, allow_blank=True, default="")
    lastName = serializers.CharField(required=False, allow_blank=True, default="")
    role = serializers.CharField(required=False, default="student")
    birthday = serializers.CharField(required=False, allow_blank=True, default="")
    classId = serializers.CharField(required=False, allow_blank=True, default="")
    email = serializers.EmailField(required=False, allow_blank=True, default="")
    uid = serializers.CharField(required=False, allow_blank=True, default="")


class UserUpdateInput(serializers.Serializer):
    username = serializers.CharField(required=False)
    password = serializers.CharField(required=False, trim_whitespace=False)
    firstName = serializers.CharField(required=False, allow_blank=True)
    lastName = serializers.CharField(required=False, allow_blank=True)
    role = serializers.CharField(required=False)
    birthday = serializers.CharField(required=False, allow_blank=True)
    classId = serializers.CharField(required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    uid = serializers.CharField(required=False, allow_blank=True)


class LoginInput(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)
