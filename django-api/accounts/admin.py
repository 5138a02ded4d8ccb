from django import forms
from django.contrib import admin

from accounts.domain import Birthday
from accounts.models import AppUser


class AppUserAdminForm(forms.ModelForm):
    """Admin edits pass the same username and birthday rules as the API."""

    class Meta:
        model = AppUser
        fields = ["username", "first_name", "last_name", "role", "birthday", "class_id", "email", "uid"]

    def clean_username(self):
        username = self.cleaned_data["username"].strip()
        if not username:
            raise forms.ValidationError("Username is required.")
        taken = AppUser.objects.filter(username_lower=username.lower())
        if self.instance.pk:
            taken = taken.exclude(pk=self.instance.pk)
        if taken.exists():
            raise forms.ValidationError("This username is already taken.")
        return username

    def clean_birthday(self):
        try:
            return Birthday(self.cleaned_data["birthday"].strip()).value
        except ValueError:
            raise forms.ValidationError("Birthday must be a valid YYYY-MM-DD date.") from None


@admin.register(AppUser)
class AppUserAdmin(admin.ModelAdmin):
    form = AppUserAdminForm
    list_display = ["username", "first_name", "last_name", "role", "class_id"]
    list_filter = ["role", "class_id"]
    search_fields = ["username_lower", "first_name", "last_name", "email"]
    readonly_fields = ["username_lower"]

    def save_model(self, request, obj, form, change):
        obj.username_lower = obj.username.lower()
        super().save_model(request, obj, form, change)

    def has_add_permission(self, request):
        # Users need a password hash, so they are created through the API.
        return False
