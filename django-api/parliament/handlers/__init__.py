from parliament.handlers.views import (
    DateArchiveView,
    DateDetailView,
    DateListView,
    DateOpenView,
    HistoryListView,
    IntegrityView,
    NoteDetailView,
    NoteListView,
    ParliamentSummaryView,
    SubjectDecisionView,
    SubjectDetailView,
    SubjectListView,
    SubjectStatusView,
)

__all__ = [
    "DateListView",
    "DateDetailView",
    "DateOpenView",
    "DateArchiveView",
    "SubjectListView",
    "SubjectDetailView",
    "SubjectStatusView",
    "NoteListView",
    "NoteDetailView",
    "HistoryListView",
    "SubjectDecisionView",
    "ParliamentSummaryView",
    "IntegrityView",
]
