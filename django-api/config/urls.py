from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/parliament/", include("parliament.urls")),
    path("api/accounts/", include("accounts.urls")),
]
