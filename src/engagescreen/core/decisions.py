"""Immutable decision records returned by the screening engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..schemas.categories import EmpanelmentCategory, Qualification

MatrixKind = Literal["graded", "fixed_tier", "retired", "unknown"]


@dataclass(slots=True, frozen=True)
class ComputedProfile:
    """Values derived from an applicant profile at one instant."""

    total_experience_years: float
    group_a_service_years: float
    level_12_plus_years: float
    age: int
    has_doctorate: bool
    has_post_grad: bool
    has_premier_degree: bool
    highest_qualification: Qualification


@dataclass(slots=True, frozen=True)
class RemunerationBand:
    """Suggested monthly remuneration range."""

    min: int
    max: int
    basis: str = "MONTHLY"
    daily_rate: int | None = None


@dataclass(slots=True, frozen=True)
class ScreeningDecision:
    """Outcome of screening one applicant against one contractual advert."""

    designation: str
    matrix: MatrixKind
    eligible: bool
    reasons: tuple[str, ...]
    meets_qualification: bool
    meets_experience: bool
    meets_age: bool
    computed: ComputedProfile
    suggested_band: RemunerationBand | None = None


@dataclass(slots=True, frozen=True)
class EmpanelmentDecision:
    """Outcome of empanelment category matching."""

    eligible: bool
    provisional_category: EmpanelmentCategory | None
    qualified_categories: tuple[EmpanelmentCategory, ...]
    reasons: tuple[str, ...]
    computed: ComputedProfile


@dataclass(slots=True, frozen=True)
class RemunerationOutcome:
    """Final remuneration after committee evaluation."""

    final_remuneration: int
    tier_label: str
    score_percent: float
