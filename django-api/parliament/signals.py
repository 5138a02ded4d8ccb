"""Django signals for cache invalidation.

Keys are dropped once the surrounding transaction commits, so a read racing
a write cannot cache rows from before the commit.
"""

import logging

from django.core.cache import cache
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from parliament import cache as keys
from parliament.models import HistoryEntry, ParliamentDate, ParliamentNote, ParliamentSubject

logger = logging.getLogger(__name__)


def _invalidate_on_commit(stale: list[str]) -> None:
    def invalidate():
        cache.delete_many(stale)
        logger.debug("Invalidated %s", stale)

    transaction.on_commit(invalidate)


@receiver([post_save, post_delete], sender=ParliamentDate)
def invalidate_date_cache(sender, instance, **kwargs):
    """Invalidate dates and subjects (which copy the date title)."""
    stale = [keys.DATES, *keys.all_subject_keys()]
    if kwargs.get("signal") is post_delete:
        stale.append(keys.HISTORY)
    _invalidate_on_commit(stale)


@receiver([post_save, post_delete], sender=ParliamentSubject)
def invalidate_subject_cache(sender, instance, **kwargs):
    """Invalidate subject lists when a subject is saved or deleted."""
    _invalidate_on_commit([*keys.all_subject_keys(), keys.notes_key(instance.pk)])


@receiver([post_save, post_delete], sender=ParliamentNote)
def invalidate_note_cache(sender, instance, **kwargs):
    """Invalidate the subject's notes and the subject lists carrying its count."""
    _invalidate_on_commit([keys.notes_key(instance.subject_id), *keys.all_subject_keys()])


@receiver([post_save, post_delete], sender=HistoryEntry)
def invalidate_history_cache(sender, instance, **kwargs):
    _invalidate_on_commit([keys.HISTORY])
