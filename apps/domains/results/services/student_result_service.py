# apps/domains/results/services/student_result_service.py
from __future__ import annotations

from apps.domains.results.models import Result
from apps.domains.results.services.eligibility import get_student_profile


def list_results_for_user(user):
    """Caller's own results, newest first. No profile -> empty."""
    profile = get_student_profile(user)
    if profile is None:
        return Result.objects.none()

    return (
        Result.objects
        .filter(student=profile)
        .select_related("exam", "exam__subject")
        .order_by("-completed_at", "-id")
    )
