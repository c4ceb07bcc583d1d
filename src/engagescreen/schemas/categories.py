"""Shared vocabularies for qualification ranks and empanelment categories."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class Qualification(str, Enum):
    CLASS_XII = "CLASS_XII"
    ITI = "ITI"
    GRADUATE = "GRADUATE"
    LAW = "LAW"
    POST_GRADUATE = "POST_GRADUATE"
    PROFESSIONAL = "PROFESSIONAL"
    DOCTORATE = "DOCTORATE"


# Graduate/Law and PostGraduate/Professional are peers.
QUALIFICATION_RANK = MappingProxyType(
    {
        Qualification.CLASS_XII: 1,
        Qualification.ITI: 2,
        Qualification.GRADUATE: 3,
        Qualification.LAW: 3,
        Qualification.POST_GRADUATE: 4,
        Qualification.PROFESSIONAL: 4,
        Qualification.DOCTORATE: 5,
    }
)

QUALIFICATION_LABELS = MappingProxyType(
    {
        Qualification.CLASS_XII: "Class XII",
        Qualification.ITI: "ITI / Diploma",
        Qualification.GRADUATE: "Graduate",
        Qualification.LAW: "Law Graduate",
        Qualification.POST_GRADUATE: "Post Graduate",
        Qualification.PROFESSIONAL: "Professional Degree",
        Qualification.DOCTORATE: "Doctorate",
    }
)


class EmpanelmentCategory(str, Enum):
    """Empanelment categories, declared in priority order."""

    ADVISOR = "ADVISOR"
    SENIOR_CONSULTANT = "SENIOR_CONSULTANT"
    CONSULTANT = "CONSULTANT"
    PROJECT_ASSOCIATE = "PROJECT_ASSOCIATE"
    YOUNG_PROFESSIONAL = "YOUNG_PROFESSIONAL"


def meets_min_qualification(actual: Qualification, required: Qualification) -> bool:
    return QUALIFICATION_RANK[actual] >= QUALIFICATION_RANK[required]
