"""Empanelment category matching."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ...schemas import BackgroundType, EmpanelmentCategory, Qualification
from ..decisions import ComputedProfile, EmpanelmentDecision


@dataclass
class EmpanelmentConfig:
    """Thresholds for the five empanelment routes."""

    advisor_group_a_years: float = 20.0
    advisor_level_12_years: float = 10.0
    advisor_open_market_years: float = 25.0
    senior_consultant_years: float = 13.0
    senior_consultant_level_12_years: float = 5.0
    consultant_min_years: float = 6.0
    young_professional_max_age: int = 35
    government_backgrounds: tuple[str, ...] = (BackgroundType.GOVERNMENT_GROUP_A.value,)


CategoryCheck = Callable[[ComputedProfile, bool], tuple[bool, str]]


class EmpanelmentMatcher:
    """Evaluate every empanelment route and pick the highest-priority match."""

    method = "empanelment"

    def __init__(self, *, config: EmpanelmentConfig | None = None) -> None:
        self._config = config or EmpanelmentConfig()
        self._rules: tuple[tuple[EmpanelmentCategory, CategoryCheck], ...] = (
            (EmpanelmentCategory.ADVISOR, self._check_advisor),
            (EmpanelmentCategory.SENIOR_CONSULTANT, self._check_senior_consultant),
            (EmpanelmentCategory.CONSULTANT, self._check_consultant),
            (EmpanelmentCategory.PROJECT_ASSOCIATE, self._check_project_associate),
            (EmpanelmentCategory.YOUNG_PROFESSIONAL, self._check_young_professional),
        )

    def evaluate(
        self,
        computed: ComputedProfile,
        background_type: BackgroundType | str,
    ) -> EmpanelmentDecision:
        is_government = self._is_government(background_type)
        reasons: list[str] = []
        qualified: list[EmpanelmentCategory] = []

        # Every rule runs so the reasons cover all five categories.
        for category, check in self._rules:
            eligible, reason = check(computed, is_government)
            reasons.append(reason)
            if eligible:
                qualified.append(category)

        provisional = qualified[0] if qualified else None
        if provisional is None:
            reasons.append("Applicant does not meet the criteria for any empanelment category.")
        else:
            reasons.append(f"Provisionally classified as {provisional.value}.")

        return EmpanelmentDecision(
            eligible=provisional is not None,
            provisional_category=provisional,
            qualified_categories=tuple(qualified),
            reasons=tuple(reasons),
            computed=computed,
        )

    def _is_government(self, background_type: BackgroundType | str) -> bool:
        value = background_type.value if isinstance(background_type, BackgroundType) else str(background_type)
        return value in self._config.government_backgrounds

    def _check_advisor(self, computed: ComputedProfile, is_government: bool) -> tuple[bool, str]:
        cfg = self._config
        if is_government:
            ok = (
                computed.group_a_service_years >= cfg.advisor_group_a_years
                and computed.level_12_plus_years >= cfg.advisor_level_12_years
            )
            detail = (
                f"{computed.group_a_service_years:.1f} years Group-A service (needs {cfg.advisor_group_a_years:g}), "
                f"{computed.level_12_plus_years:.1f} years at Level-12+ (needs {cfg.advisor_level_12_years:g})."
            )
            return ok, _verdict(ok, "Advisor (government route)", detail)

        ok = computed.has_doctorate and computed.total_experience_years >= cfg.advisor_open_market_years
        detail = (
            f"doctorate {_yes_no(computed.has_doctorate)}, "
            f"{computed.total_experience_years:.1f} years experience (needs {cfg.advisor_open_market_years:g})."
        )
        return ok, _verdict(ok, "Advisor (open market)", detail)

    def _check_senior_consultant(self, computed: ComputedProfile, is_government: bool) -> tuple[bool, str]:
        cfg = self._config
        if is_government:
            ok = (
                computed.total_experience_years >= cfg.senior_consultant_years
                and computed.level_12_plus_years >= cfg.senior_consultant_level_12_years
            )
            detail = (
                f"{computed.total_experience_years:.1f} years total (needs {cfg.senior_consultant_years:g}), "
                f"{computed.level_12_plus_years:.1f} years at Level-12+ "
                f"(needs {cfg.senior_consultant_level_12_years:g})."
            )
            return ok, _verdict(ok, "Senior Consultant (government route)", detail)

        ok = computed.has_post_grad and computed.total_experience_years >= cfg.senior_consultant_years
        detail = (
            f"post-graduation {_yes_no(computed.has_post_grad)}, "
            f"{computed.total_experience_years:.1f} years experience (needs {cfg.senior_consultant_years:g})."
        )
        return ok, _verdict(ok, "Senior Consultant (open market)", detail)

    def _check_consultant(self, computed: ComputedProfile, is_government: bool) -> tuple[bool, str]:
        has_degree = _has_required_degree(computed)
        ok = has_degree and computed.total_experience_years >= self._config.consultant_min_years
        detail = (
            f"post-graduate/professional degree {_yes_no(has_degree)}, "
            f"{computed.total_experience_years:.1f} years experience "
            f"(needs at least {self._config.consultant_min_years:g})."
        )
        return ok, _verdict(ok, "Consultant", detail)

    def _check_project_associate(self, computed: ComputedProfile, is_government: bool) -> tuple[bool, str]:
        has_degree = _has_required_degree(computed)
        ok = has_degree and computed.total_experience_years < self._config.consultant_min_years
        detail = (
            f"post-graduate/professional degree {_yes_no(has_degree)}, "
            f"{computed.total_experience_years:.1f} years experience "
            f"(must be under {self._config.consultant_min_years:g})."
        )
        return ok, _verdict(ok, "Project Associate", detail)

    def _check_young_professional(self, computed: ComputedProfile, is_government: bool) -> tuple[bool, str]:
        max_age = self._config.young_professional_max_age
        ok = computed.has_premier_degree and computed.age <= max_age
        detail = (
            f"premier institute degree {_yes_no(computed.has_premier_degree)}, "
            f"age {computed.age} (maximum {max_age})."
        )
        return ok, _verdict(ok, "Young Professional", detail)


def _has_required_degree(computed: ComputedProfile) -> bool:
    return computed.has_post_grad or computed.highest_qualification is Qualification.PROFESSIONAL


def _verdict(ok: bool, label: str, detail: str) -> str:
    prefix = "Qualifies as" if ok else "Does not meet"
    return f"{prefix} {label}: {detail}"


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"
