from django.conf import settings

USERS = "accounts:users"


def timeout() -> int:
    return settings.PARLIAMENT["CACHE_TIMEOUT"]
