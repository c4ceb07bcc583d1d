"""Pydantic schema definitions for applicant and advert records."""

from __future__ import annotations

from .applicant import (
    ApplicantProfile,
    BackgroundType,
    EducationRecord,
    EmploymentRecord,
)
from .categories import (
    QUALIFICATION_LABELS,
    QUALIFICATION_RANK,
    EmpanelmentCategory,
    Qualification,
    meets_min_qualification,
)
from .criteria import EligibilityCriteria

__all__ = [
    "ApplicantProfile",
    "BackgroundType",
    "EducationRecord",
    "EmploymentRecord",
    "EligibilityCriteria",
    "EmpanelmentCategory",
    "Qualification",
    "QUALIFICATION_LABELS",
    "QUALIFICATION_RANK",
    "meets_min_qualification",
]
