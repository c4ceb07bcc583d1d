from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from engagescreen.schemas import (
    ApplicantProfile,
    BackgroundType,
    EducationRecord,
    EligibilityCriteria,
    EmploymentRecord,
)


def test_applicant_profile_defaults():
    profile = ApplicantProfile(date_of_birth="1990-01-01")

    assert profile.date_of_birth == date(1990, 1, 1)
    assert profile.background_type is BackgroundType.PRIVATE_SECTOR
    assert profile.applicant_id is None
    assert profile.educations == []
    assert profile.experiences == []


def test_applicant_profile_requires_date_of_birth():
    with pytest.raises(ValidationError):
        ApplicantProfile()  # type: ignore[call-arg]


def test_profile_is_read_only():
    profile = ApplicantProfile(date_of_birth="1990-01-01")

    with pytest.raises(ValidationError):
        profile.date_of_birth = date(1991, 1, 1)  # type: ignore[misc]


def test_employment_record_rejects_reversed_period():
    with pytest.raises(ValidationError):
        EmploymentRecord(start_date="2020-01-01", end_date="2019-12-31")


def test_employment_record_allows_open_and_single_day_periods():
    ongoing = EmploymentRecord(start_date="2020-01-01")
    single_day = EmploymentRecord(start_date="2020-01-01", end_date="2020-01-01")

    assert ongoing.end_date is None
    assert single_day.end_date == single_day.start_date


def test_education_record_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        EducationRecord(degree="B.A.", cgpa=9.1)  # type: ignore[call-arg]


def test_criteria_optional_fields():
    criteria = EligibilityCriteria(designation="CONSULTANT_CONTRACT")

    assert criteria.min_experience_years is None
    assert criteria.max_age is None
    assert criteria.min_qualification is None
    with pytest.raises(ValidationError):
        EligibilityCriteria(designation="CONSULTANT_CONTRACT", max_age=-1)
