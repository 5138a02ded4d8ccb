from accounts.handlers.views import LoginView, RoleResolveView, UserDetailView, UserListView

__all__ = ["UserListView", "UserDetailView", "LoginView", "RoleResolveView"]
