from django.urls import path
from . import views

app_name = "gating"

urlpatterns = [
    # Catálogo con el estado de cada curso
    path("courses/", views.catalog, name="catalog"),

    # Curso / Lección
    path("courses/<slug:slug>/", views.course_access, name="course_access"),
    path("courses/<slug:slug>/complete/", views.course_complete, name="course_complete"),
    path(
        "courses/<slug:slug>/lessons/<int:lesson_index>/",
        views.lesson_access,
        name="lesson_access",
    ),
    path(
        "courses/<slug:slug>/lessons/<int:lesson_index>/complete/",
        views.lesson_complete,
        name="lesson_complete",
    ),

    # "Not Ready Yet"
    path("not-ready/", views.not_ready, name="not_ready"),

    # QA: override de flags por sesión
    path("dev/flags/", views.dev_flags, name="dev_flags"),
    path("dev/reset/", views.dev_reset, name="dev_reset"),
]
