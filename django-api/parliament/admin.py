from django.contrib import admin

from parliament.models import HistoryEntry, ParliamentDate, ParliamentNote, ParliamentSubject


class ReadOnlyInline(admin.TabularInline):
    """Inline listing; rows are created through the API so counters stay in sync."""

    extra = 0

    def has_add_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


class ParliamentSubjectInline(ReadOnlyInline):
    model = ParliamentSubject
    fields = ["title", "status", "created_by_name", "notes_count"]
    readonly_fields = fields


class ParliamentNoteInline(ReadOnlyInline):
    model = ParliamentNote
    fk_name = "subject"
    fields = ["text", "created_by_name", "parent_note"]
    readonly_fields = fields


@admin.register(ParliamentDate)
class ParliamentDateAdmin(admin.ModelAdmin):
    list_display = ["title", "date", "is_open", "created_by_name"]
    list_filter = ["is_open"]
    search_fields = ["title"]
    inlines = [ParliamentSubjectInline]

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        if change and "title" in form.changed_data:
            ParliamentSubject.objects.filter(date=obj).update(date_title=obj.title)


@admin.register(ParliamentSubject)
class ParliamentSubjectAdmin(admin.ModelAdmin):
    list_display = ["title", "date_title", "status", "notes_count", "created_by_name"]
    list_filter = ["status", "date"]
    search_fields = ["title", "created_by_name"]
    readonly_fields = ["date", "date_title", "notes_count"]
    inlines = [ParliamentNoteInline]

    def has_add_permission(self, request):
        # Subjects are submitted through the API, which copies the date title.
        return False


@admin.register(HistoryEntry)
class HistoryEntryAdmin(admin.ModelAdmin):
    list_display = ["kind", "original_id", "parliament_id", "archived_at"]
    list_filter = ["kind"]
