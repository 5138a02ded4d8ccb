"""HTTP handlers (views) for users and roles."""

import logging
from functools import wraps

from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts import cache as keys
from accounts.domain.errors import DomainError, ErrorCode
from accounts.handlers import serializers as s
from accounts.services.user_service import UserService
from accounts.stores.django_store import DjangoUserStore

logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ROLE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.USERNAME_TAKEN: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
}

# Wire name -> UserService keyword.
_UPDATE_FIELDS = {
    "username": "username",
    "password": "password",
    "firstName": "first_name",
    "lastName": "last_name",
    "role": "role",
    "birthday": "birthday",
    "classId": "class_id",
    "email": "email",
    "uid": "uid",
}


def get_service() -> UserService:
    return UserService(DjangoUserStore())


def maps_domain_errors(handler):
    """Translate DomainError raised by a handler into an error response."""

    @wraps(handler)
    def wrapper(self, request, *args, **kwargs):
        try:
            return handler(self, request, *args, **kwargs)
        except DomainError as error:
            logger.info("%s %s rejected: %s", request.method, request.path, error.code.value)
            return Response(
                {"code": error.code.value, "message": error.message},
                status=_STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
            )

    return wrapper


class UserListView(APIView):
    """Handler for GET, POST /api/accounts/users"""

    def get(self, request: Request) -> Response:
        data = cache.get_or_set(
            keys.USERS,
            lambda: s.AppUserSerializer(get_service().list_users(), many=True).data,
            keys.timeout(),
        )
        return Response(data)

    @maps_domain_errors
    def post(self, request: Request) -> Response:
        serializer = s.UserCreateInput(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        user = get_service().create_user(
            username=data["username"],
            password=data["password"],
            first_name=data["firstName"],
            last_name=data["lastName"],
            role=data["role"],
            birthday=data["birthday"],
            class_id=data["classId"],
            email=data["email"],
            uid=data["uid"],
        )
        return Response(s.AppUserSerializer(user).data, status=status.HTTP_201_CREATED)


class UserDetailView(APIView):
    """Handler for GET, PATCH, DELETE /api/accounts/users/{user_id}"""

    @maps_domain_errors
    def get(self, request: Request, user_id: str) -> Response:
        return Response(s.AppUserSerializer(get_service().get_user(user_id)).data)

    @maps_domain_errors
    def patch(self, request: Request, user_id: str) -> Response:
        serializer = s.UserUpdateInput(data=request.data)
        serializer.is_valid(raise_exception=True)
        changes = {
            _UPDATE_FIELDS[name]: value for name, value in serializer.validated_data.items()
        }
        user = get_service().update_user(user_id, **changes)
        return Response(s.AppUserSerializer(user).data)

    @maps_domain_errors
    def delete(self, request: Request, user_id: str) -> Response:
        get_service().delete_user(user_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class LoginView(APIView):
    """Handler for POST /api/accounts/login"""

    @maps_domain_errors
    def post(self, request: Request) -> Response:
        serializer = s.LoginInput(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = get_service().authenticate(
            serializer.validated_data["username"], serializer.validated_data["password"]
        )
        return Response({"id": str(user.id), "username": user.username, "role": user.role.value})


class RoleResolveView(APIView):
    """Handler for GET /api/accounts/roles/resolve"""

    def get(self, request: Request) -> Response:
        role = get_service().resolve_role(
            uid=request.query_params.get("uid"),
            email=request.query_params.get("email"),
            username=request.query_params.get("username"),
        )
        return Response({"role": role.value if role else ""})
