"""Designation catalogue and remuneration matrices for contractual engagement.

Graded designations pay by completed years of experience (capped at five);
fixed-tier designations pay a flat monthly or daily amount for the highest
experience tier the applicant clears. Tables are read-only.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..schemas import BackgroundType, Qualification


class ContractualDesignation(str, Enum):
    SUPPORT_EXECUTIVE = "SUPPORT_EXECUTIVE"
    OFFICE_EXECUTIVE = "OFFICE_EXECUTIVE"
    ACCOUNTS_EXECUTIVE = "ACCOUNTS_EXECUTIVE"
    TECHNICAL_EXECUTIVE = "TECHNICAL_EXECUTIVE"
    LEGAL_EXECUTIVE = "LEGAL_EXECUTIVE"
    PROJECT_EXECUTIVE = "PROJECT_EXECUTIVE"
    RESEARCH_EXECUTIVE = "RESEARCH_EXECUTIVE"
    SENIOR_PROFESSIONAL = "SENIOR_PROFESSIONAL"
    YOUNG_PROFESSIONAL_CONTRACT = "YOUNG_PROFESSIONAL_CONTRACT"
    CONSULTANT_CONTRACT = "CONSULTANT_CONTRACT"
    SENIOR_CONSULTANT_CONTRACT = "SENIOR_CONSULTANT_CONTRACT"
    ADVISOR_CONTRACT = "ADVISOR_CONTRACT"
    SENIOR_ADVISOR = "SENIOR_ADVISOR"
    EXPERT_RETIRED = "EXPERT_RETIRED"


@dataclass(frozen=True)
class GradedEntry:
    """Minimum qualification plus experience-keyed maximum monthly pay."""

    min_qualification: Qualification
    remuneration_by_years: Mapping[int, int]

    def max_remuneration(self, experience_years: float, cap: int = 5) -> int:
        """Step lookup at the highest key not above floor(min(years, cap))."""
        years = math.floor(min(experience_years, cap))
        keys = sorted(self.remuneration_by_years)
        applicable = keys[0]
        for key in keys:
            if years >= key:
                applicable = key
        return self.remuneration_by_years[applicable]


@dataclass(frozen=True)
class FixedTier:
    min_qualification: Qualification
    min_experience_years: float
    max_age: int
    monthly_amount: int
    daily_amount: int


_EXECUTIVE_SCALE = MappingProxyType({0: 25000, 1: 28000, 2: 35000, 3: 42000, 4: 48000, 5: 55000})
_PROJECT_SCALE = MappingProxyType({0: 28000, 1: 35000, 2: 44000, 3: 50000, 4: 57000, 5: 65000})
_SENIOR_PROFESSIONAL_SCALE = MappingProxyType(
    {0: 34000, 1: 40000, 2: 48000, 3: 55000, 4: 62000, 5: 70000}
)

# A zero maximum means pay is set outside the matrix (minimum wages).
GRADED_MATRIX: Mapping[str, GradedEntry] = MappingProxyType(
    {
        ContractualDesignation.SUPPORT_EXECUTIVE.value: GradedEntry(
            Qualification.CLASS_XII, MappingProxyType({0: 0})
        ),
        ContractualDesignation.OFFICE_EXECUTIVE.value: GradedEntry(Qualification.GRADUATE, _EXECUTIVE_SCALE),
        ContractualDesignation.ACCOUNTS_EXECUTIVE.value: GradedEntry(Qualification.GRADUATE, _EXECUTIVE_SCALE),
        ContractualDesignation.TECHNICAL_EXECUTIVE.value: GradedEntry(Qualification.ITI, _EXECUTIVE_SCALE),
        ContractualDesignation.LEGAL_EXECUTIVE.value: GradedEntry(Qualification.LAW, _EXECUTIVE_SCALE),
        ContractualDesignation.PROJECT_EXECUTIVE.value: GradedEntry(Qualification.GRADUATE, _PROJECT_SCALE),
        ContractualDesignation.RESEARCH_EXECUTIVE.value: GradedEntry(Qualification.GRADUATE, _PROJECT_SCALE),
        ContractualDesignation.SENIOR_PROFESSIONAL.value: GradedEntry(
            Qualification.POST_GRADUATE, _SENIOR_PROFESSIONAL_SCALE
        ),
        ContractualDesignation.YOUNG_PROFESSIONAL_CONTRACT.value: GradedEntry(
            Qualification.PROFESSIONAL, MappingProxyType({0: 60000, 1: 60000})
        ),
    }
)

# Tiers are listed experience-descending.
FIXED_TIER_MATRIX: Mapping[str, tuple[FixedTier, ...]] = MappingProxyType(
    {
        ContractualDesignation.CONSULTANT_CONTRACT.value: (
            FixedTier(Qualification.GRADUATE, 10, 65, 90000, 6000),
            FixedTier(Qualification.GRADUATE, 6, 65, 75000, 5000),
        ),
        ContractualDesignation.SENIOR_CONSULTANT_CONTRACT.value: (
            FixedTier(Qualification.GRADUATE, 15, 65, 110000, 8000),
        ),
        ContractualDesignation.ADVISOR_CONTRACT.value: (
            FixedTier(Qualification.GRADUATE, 20, 65, 125000, 10000),
        ),
        ContractualDesignation.SENIOR_ADVISOR.value: (
            FixedTier(Qualification.DOCTORATE, 20, 65, 150000, 12000),
        ),
    }
)

RETIRED_DESIGNATIONS: frozenset[str] = frozenset({ContractualDesignation.EXPERT_RETIRED.value})

RETIRED_BACKGROUNDS: frozenset[BackgroundType] = frozenset(
    {
        BackgroundType.GOVERNMENT_GROUP_A,
        BackgroundType.GOVERNMENT_OTHER,
        BackgroundType.CPSE,
        BackgroundType.AUTONOMOUS_BODY,
    }
)

DESIGNATION_LABELS: Mapping[str, str] = MappingProxyType(
    {
        ContractualDesignation.SUPPORT_EXECUTIVE.value: "Support Executive",
        ContractualDesignation.OFFICE_EXECUTIVE.value: "Office Executive / Data Entry Operator",
        ContractualDesignation.ACCOUNTS_EXECUTIVE.value: "Accounts Executive",
        ContractualDesignation.TECHNICAL_EXECUTIVE.value: "Technical Executive",
        ContractualDesignation.LEGAL_EXECUTIVE.value: "Legal Executive",
        ContractualDesignation.PROJECT_EXECUTIVE.value: "Project Executive",
        ContractualDesignation.RESEARCH_EXECUTIVE.value: "Research Executive",
        ContractualDesignation.SENIOR_PROFESSIONAL.value: "Senior Professional",
        ContractualDesignation.YOUNG_PROFESSIONAL_CONTRACT.value: "Young Professional",
        ContractualDesignation.CONSULTANT_CONTRACT.value: "Consultant",
        ContractualDesignation.SENIOR_CONSULTANT_CONTRACT.value: "Senior Consultant",
        ContractualDesignation.ADVISOR_CONTRACT.value: "Advisor",
        ContractualDesignation.SENIOR_ADVISOR.value: "Senior Advisor",
        ContractualDesignation.EXPERT_RETIRED.value: "Expert (Retired)",
    }
)


def designation_label(designation: str) -> str:
    return DESIGNATION_LABELS.get(designation, designation)


def list_designations() -> list[dict[str, object]]:
    """Describe every known designation, e.g. for advert forms."""
    catalogue: list[dict[str, object]] = []
    for designation in ContractualDesignation:
        value = designation.value
        entry: dict[str, object] = {"designation": value, "label": designation_label(value)}
        if value in GRADED_MATRIX:
            graded = GRADED_MATRIX[value]
            entry.update(
                matrix="graded",
                min_qualification=graded.min_qualification.value,
                remuneration_by_years=dict(graded.remuneration_by_years),
            )
        elif value in FIXED_TIER_MATRIX:
            entry.update(
                matrix="fixed_tier",
                tiers=[
                    {
                        "min_qualification": tier.min_qualification.value,
                        "min_experience_years": tier.min_experience_years,
                        "max_age": tier.max_age,
                        "monthly_amount": tier.monthly_amount,
                        "daily_amount": tier.daily_amount,
                    }
                    for tier in FIXED_TIER_MATRIX[value]
                ],
            )
        else:
            entry.update(matrix="retired")
        catalogue.append(entry)
    return catalogue
