"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from accounts.cache import USERS
from accounts.models import AppUser


@receiver([post_save, post_delete], sender=AppUser)
def invalidate_user_cache(sender, instance, **kwargs):
    """Invalidate the user list once the write commits."""
    transaction.on_commit(lambda: cache.delete(USERS))
