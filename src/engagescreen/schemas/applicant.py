from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BackgroundType(str, Enum):
    """Sector the applicant comes from."""

    GOVERNMENT_GROUP_A = "GOVERNMENT_GROUP_A"
    GOVERNMENT_OTHER = "GOVERNMENT_OTHER"
    CPSE = "CPSE"
    AUTONOMOUS_BODY = "AUTONOMOUS_BODY"
    PRIVATE_SECTOR = "PRIVATE_SECTOR"
    ACADEMIC = "ACADEMIC"
    SELF_EMPLOYED = "SELF_EMPLOYED"
    FRESH_GRADUATE = "FRESH_GRADUATE"


class EducationRecord(BaseModel):
    """Single education entry as declared by the applicant."""

    degree: str = ""
    field: str | None = None
    institution: str = ""
    university: str | None = None
    year_of_passing: int | None = None
    grade: str | None = None
    is_doctorate: bool = False
    is_post_graduation: bool = False
    is_premier_institute: bool = False

    model_config = ConfigDict(extra="forbid", frozen=True)


class EmploymentRecord(BaseModel):
    """Employment history entry. A missing end date means the role is ongoing."""

    organization: str = ""
    designation: str = ""
    start_date: date
    end_date: date | None = None
    is_current: bool = False
    is_group_a_service: bool = False
    is_level_12_or_above: bool = False
    pay_level: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def _check_period(self) -> "EmploymentRecord":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError(
                f"end_date {self.end_date.isoformat()} precedes start_date {self.start_date.isoformat()}"
            )
        return self


class ApplicantProfile(BaseModel):
    """Snapshot of an applicant taken at screening time."""

    applicant_id: str | None = None
    full_name: str | None = None
    date_of_birth: date
    background_type: BackgroundType = BackgroundType.PRIVATE_SECTOR
    educations: list[EducationRecord] = Field(default_factory=list)
    experiences: list[EmploymentRecord] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)
