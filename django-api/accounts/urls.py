from django.urls import path

from accounts.handlers import LoginView, RoleResolveView, UserDetailView, UserListView

urlpatterns = [
    path("users", UserListView.as_view(), name="user-list"),
    path("users/<str:user_id>", UserDetailView.as_view(), name="user-detail"),
    path("login", LoginView.as_view(), name="login"),
    path("roles/resolve", RoleResolveView.as_view(), name="role-resolve"),
]
