"""Contractual designation screening against the remuneration matrices."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...schemas import (
    BackgroundType,
    EligibilityCriteria,
    QUALIFICATION_LABELS,
    meets_min_qualification,
)
from ..decisions import ComputedProfile, RemunerationBand, ScreeningDecision
from ..matrices import (
    FIXED_TIER_MATRIX,
    GRADED_MATRIX,
    RETIRED_BACKGROUNDS,
    RETIRED_DESIGNATIONS,
    ContractualDesignation,
    FixedTier,
    GradedEntry,
    designation_label,
)
from .remuneration import apply_ratio


@dataclass
class ContractualConfig:
    """Gate defaults for contractual screening."""

    default_max_age: int = 999
    # Designations whose age ceiling ignores the advert value.
    fixed_age_ceilings: dict[str, int] = field(
        default_factory=lambda: {ContractualDesignation.YOUNG_PROFESSIONAL_CONTRACT.value: 35}
    )
    band_floor_ratio: float = 0.9
    experience_cap_years: int = 5


class ContractualScreener:
    """Resolve the designation to a matrix and apply its gates."""

    method = "contractual"

    def __init__(self, *, config: ContractualConfig | None = None) -> None:
        self._config = config or ContractualConfig()

    def evaluate(
        self,
        computed: ComputedProfile,
        criteria: EligibilityCriteria,
        background_type: BackgroundType | str,
    ) -> ScreeningDecision:
        designation = criteria.designation
        if designation in GRADED_MATRIX:
            return self._screen_graded(designation, GRADED_MATRIX[designation], computed, criteria)
        if designation in FIXED_TIER_MATRIX:
            return self._screen_fixed_tier(designation, FIXED_TIER_MATRIX[designation], computed, criteria)
        if designation in RETIRED_DESIGNATIONS:
            return self._screen_retired(designation, computed, background_type)
        return ScreeningDecision(
            designation=designation,
            matrix="unknown",
            eligible=False,
            reasons=(f"Unknown designation: {designation}. No matching eligibility matrix found.",),
            meets_qualification=False,
            meets_experience=False,
            meets_age=True,
            computed=computed,
        )

    def _screen_graded(
        self,
        designation: str,
        entry: GradedEntry,
        computed: ComputedProfile,
        criteria: EligibilityCriteria,
    ) -> ScreeningDecision:
        reasons: list[str] = []

        qualification_ok = meets_min_qualification(computed.highest_qualification, entry.min_qualification)
        if not qualification_ok:
            reasons.append(
                f"Qualification: requires {QUALIFICATION_LABELS[entry.min_qualification]}, "
                f"applicant has {QUALIFICATION_LABELS[computed.highest_qualification]}."
            )

        min_experience = criteria.min_experience_years if criteria.min_experience_years is not None else 0
        experience_ok = computed.total_experience_years >= min_experience
        if not experience_ok:
            reasons.append(
                f"Experience: requires {min_experience:g} years, "
                f"applicant has {computed.total_experience_years:.1f} years."
            )

        max_age = self._graded_max_age(designation, criteria)
        age_ok = computed.age <= max_age
        if not age_ok:
            reasons.append(f"Age: maximum {max_age}, applicant is {computed.age}.")

        eligible = qualification_ok and experience_ok and age_ok
        band: RemunerationBand | None = None
        if eligible:
            maximum = entry.max_remuneration(
                computed.total_experience_years, cap=self._config.experience_cap_years
            )
            if maximum > 0:
                band = RemunerationBand(
                    min=apply_ratio(maximum, self._config.band_floor_ratio),
                    max=maximum,
                    basis="MONTHLY",
                )
                reasons.append(
                    f"Remuneration band: Rs {band.min:,} - Rs {band.max:,}/month "
                    f"based on {computed.total_experience_years:.1f} years experience."
                )
            reasons.append(f"Eligible for {designation_label(designation)} position.")

        return ScreeningDecision(
            designation=designation,
            matrix="graded",
            eligible=eligible,
            reasons=tuple(reasons),
            meets_qualification=qualification_ok,
            meets_experience=experience_ok,
            meets_age=age_ok,
            computed=computed,
            suggested_band=band,
        )

    def _graded_max_age(self, designation: str, criteria: EligibilityCriteria) -> int:
        fixed = self._config.fixed_age_ceilings.get(designation)
        if fixed is not None:
            return fixed
        return criteria.max_age if criteria.max_age is not None else self._config.default_max_age

    def _screen_fixed_tier(
        self,
        designation: str,
        tiers: tuple[FixedTier, ...],
        computed: ComputedProfile,
        criteria: EligibilityCriteria,
    ) -> ScreeningDecision:
        label = designation_label(designation)
        reasons: list[str] = []
        flags = (False, False, True)

        for tier in tiers:
            min_experience = (
                criteria.min_experience_years
                if criteria.min_experience_years is not None
                else tier.min_experience_years
            )
            max_age = criteria.max_age if criteria.max_age is not None else tier.max_age
            qualification_ok = meets_min_qualification(computed.highest_qualification, tier.min_qualification)
            experience_ok = computed.total_experience_years >= min_experience
            age_ok = computed.age <= max_age

            if qualification_ok and experience_ok and age_ok:
                reasons.append(
                    f"Eligible for {label}: qualification {computed.highest_qualification.value} meets "
                    f"{tier.min_qualification.value}, {computed.total_experience_years:.1f} years "
                    f"(needs {min_experience:g}), age {computed.age} (maximum {max_age})."
                )
                reasons.append(
                    f"Remuneration: Rs {tier.monthly_amount:,}/month (fixed) or Rs {tier.daily_amount:,}/day."
                )
                return ScreeningDecision(
                    designation=designation,
                    matrix="fixed_tier",
                    eligible=True,
                    reasons=tuple(reasons),
                    meets_qualification=True,
                    meets_experience=True,
                    meets_age=True,
                    computed=computed,
                    suggested_band=RemunerationBand(
                        min=tier.monthly_amount,
                        max=tier.monthly_amount,
                        basis="MONTHLY",
                        daily_rate=tier.daily_amount,
                    ),
                )

            tier_name = f"{label} tier ({tier.min_experience_years:g}yr+)"
            if not qualification_ok:
                reasons.append(
                    f"{tier_name}: requires {QUALIFICATION_LABELS[tier.min_qualification]}, "
                    f"has {QUALIFICATION_LABELS[computed.highest_qualification]}."
                )
            if not experience_ok:
                reasons.append(
                    f"{tier_name}: requires {min_experience:g} years, "
                    f"has {computed.total_experience_years:.1f}."
                )
            if not age_ok:
                reasons.append(f"{tier_name}: maximum age {max_age}, applicant is {computed.age}.")
            flags = (qualification_ok, experience_ok, age_ok)

        return ScreeningDecision(
            designation=designation,
            matrix="fixed_tier",
            eligible=False,
            reasons=tuple(reasons),
            meets_qualification=flags[0],
            meets_experience=flags[1],
            meets_age=flags[2],
            computed=computed,
        )

    def _screen_retired(
        self,
        designation: str,
        computed: ComputedProfile,
        background_type: BackgroundType | str,
    ) -> ScreeningDecision:
        try:
            background = BackgroundType(background_type)
        except ValueError:
            background = None
        eligible = background in RETIRED_BACKGROUNDS
        if eligible:
            reasons = (
                f"Eligible as {designation_label(designation)}: retired from Government/CPSE/Autonomous Body.",
                "Remuneration: 50% of (last Basic Pay + current DA), fixed thereafter.",
            )
        else:
            reasons = (
                f"{designation_label(designation)} requires a person retired from "
                "Government/CPSE/Autonomous Body/Statutory Body.",
            )
        return ScreeningDecision(
            designation=designation,
            matrix="retired",
            eligible=eligible,
            reasons=reasons,
            meets_qualification=eligible,
            meets_experience=eligible,
            meets_age=True,
            computed=computed,
        )
