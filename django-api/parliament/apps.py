from django.apps import AppConfig


class ParliamentConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "parliament"

    def ready(self) -> None:
        from parliament import signals  # noqa: F401
