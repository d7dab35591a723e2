import pytest

from apps.core.exceptions import ForbiddenError
from apps.domains.results.services.eligibility import (
    REATTEMPT_DENIED,
    check_eligibility,
    ensure_eligible,
)

pytestmark = pytest.mark.django_db


def test_first_attempt_is_allowed(make_exam, student):
    exam, _ = make_exam()
    assert check_eligibility(exam, student.user).allowed


def test_prior_result_denies_when_reattempt_disabled(make_exam, make_result, student):
    exam, _ = make_exam()
    make_result(exam, student)

    verdict = check_eligibility(exam, student.user)
    assert not verdict.allowed
    assert verdict.reason == REATTEMPT_DENIED

    with pytest.raises(ForbiddenError):
        ensure_eligible(exam, student.user)


def test_allow_reattempt_always_allows(make_exam, make_result, student):
    exam, _ = make_exam(allow_reattempt=True)
    make_result(exam, student)
    make_result(exam, student)
    assert check_eligibility(exam, student.user).allowed


def test_user_without_profile_is_allowed(make_exam, make_user):
    exam, _ = make_exam()
    assert check_eligibility(exam, make_user("student")).allowed


def test_guest_results_do_not_count(make_exam, make_result, student):
    exam, _ = make_exam()
    make_result(exam, None, guest_name="Visitor")
    assert check_eligibility(exam, student.user).allowed


def test_other_template_results_do_not_count(make_exam, make_result, student):
    first, _ = make_exam(name="Math-1")
    second, _ = make_exam(name="Math-2")
    make_result(first, student)
    assert check_eligibility(second, student.user).allowed
