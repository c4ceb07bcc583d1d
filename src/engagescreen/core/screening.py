"""Screening engine orchestration."""

from __future__ import annotations

from typing import Any, Callable

import pendulum
import structlog

from ..schemas import ApplicantProfile, EligibilityCriteria
from .decisions import EmpanelmentDecision, RemunerationOutcome, ScreeningDecision
from .evaluators.contractual import ContractualScreener
from .evaluators.empanelment import EmpanelmentMatcher
from .evaluators.experience import compute_profile, resolve_as_of
from .evaluators.remuneration import RemunerationCalculator


class ScreeningEngine:
    """Entry point for empanelment and contractual auto-screening.

    Each call samples the clock once and derives the computed profile once, so
    age and ongoing experience refer to the same instant. The engine keeps no
    state between calls.
    """

    def __init__(
        self,
        *,
        empanelment_matcher: EmpanelmentMatcher | None = None,
        contractual_screener: ContractualScreener | None = None,
        remuneration_calculator: RemunerationCalculator | None = None,
        now_provider: Callable[[], pendulum.DateTime] | None = None,
    ) -> None:
        self._empanelment = empanelment_matcher or EmpanelmentMatcher()
        self._contractual = contractual_screener or ContractualScreener()
        self._remuneration = remuneration_calculator or RemunerationCalculator()
        self._now_provider = now_provider or pendulum.now
        self._logger = structlog.get_logger(__name__)

    def screen_empanelment(
        self,
        profile: ApplicantProfile,
        *,
        as_of: Any | None = None,
    ) -> EmpanelmentDecision:
        instant = resolve_as_of(as_of, self._now_provider)
        computed = compute_profile(profile, instant)
        decision = self._empanelment.evaluate(computed, profile.background_type)
        self._logger.debug(
            "screening.empanelment",
            applicant_id=profile.applicant_id,
            as_of=instant.to_iso8601_string(),
            eligible=decision.eligible,
            provisional_category=decision.provisional_category,
            qualified_categories=decision.qualified_categories,
        )
        return decision

    def screen_contractual(
        self,
        profile: ApplicantProfile,
        criteria: EligibilityCriteria,
        *,
        as_of: Any | None = None,
    ) -> ScreeningDecision:
        instant = resolve_as_of(as_of, self._now_provider)
        computed = compute_profile(profile, instant)
        decision = self._contractual.evaluate(computed, criteria, profile.background_type)
        self._logger.debug(
            "screening.contractual",
            applicant_id=profile.applicant_id,
            designation=criteria.designation,
            as_of=instant.to_iso8601_string(),
            matrix=decision.matrix,
            eligible=decision.eligible,
        )
        return decision

    def calculate_remuneration(self, max_remuneration: int, score_percent: float) -> RemunerationOutcome:
        return self._remuneration.calculate(max_remuneration, score_percent)
