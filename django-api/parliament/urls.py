from django.urls import path

from parliament.handlers import (
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

urlpatterns = [
    path("dates", DateListView.as_view(), name="date-list"),
    path("dates/<str:date_id>", DateDetailView.as_view(), name="date-detail"),
    path("dates/<str:date_id>/open", DateOpenView.as_view(), name="date-open"),
    path("dates/<str:date_id>/archive", DateArchiveView.as_view(), name="date-archive"),
    path("subjects", SubjectListView.as_view(), name="subject-list"),
    path("subjects/<str:subject_id>", SubjectDetailView.as_view(), name="subject-detail"),
    path(
        "subjects/<str:subject_id>/status",
        SubjectStatusView.as_view(),
        name="subject-status",
    ),
    path("subjects/<str:subject_id>/notes", NoteListView.as_view(), name="note-list"),
    path("notes/<str:note_id>", NoteDetailView.as_view(), name="note-detail"),
    path("history", HistoryListView.as_view(), name="history-list"),
    path(
        "history/subjects/<str:original_id>/decisions",
        SubjectDecisionView.as_view(),
        name="subject-decision",
    ),
    path(
        "history/dates/<str:parliament_id>/summary",
        ParliamentSummaryView.as_view(),
        name="parliament-summary",
    ),
    path("integrity", IntegrityView.as_view(), name="integrity"),
]
