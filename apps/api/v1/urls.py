# apps/api/v1/urls.py
from django.urls import path, include

from apps.api.common.views import health_check

urlpatterns = [
    path("health", health_check, name="health"),

    # =========================
    # Auth
    # =========================
    path("auth/", include("apps.core.urls")),

    # =========================
    # Catalog
    # =========================
    path("", include("apps.domains.subjects.urls")),
    path("", include("apps.domains.sections.urls")),
    path("", include("apps.domains.students.urls")),

    # 🔥 results first: exams/my/results, exams/<id>/start|submit, guest/, reports/
    path("", include("apps.domains.results.urls")),
    path("", include("apps.domains.exams.urls")),
]
