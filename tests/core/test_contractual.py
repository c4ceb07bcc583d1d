from __future__ import annotations

from dataclasses import replace

import pendulum
import pytest

from engagescreen.core import ComputedProfile, ContractualScreener, ScreeningEngine
from engagescreen.core.matrices import GRADED_MATRIX, ContractualDesignation
from engagescreen.schemas import (
    ApplicantProfile,
    BackgroundType,
    EducationRecord,
    EligibilityCriteria,
    EmploymentRecord,
    Qualification,
)

AS_OF = pendulum.datetime(2026, 1, 1, tz="UTC")

BASE = ComputedProfile(
    total_experience_years=0.0,
    group_a_service_years=0.0,
    level_12_plus_years=0.0,
    age=40,
    has_doctorate=False,
    has_post_grad=False,
    has_premier_degree=False,
    highest_qualification=Qualification.GRADUATE,
)


def computed(**overrides) -> ComputedProfile:
    return replace(BASE, **overrides)


def build_profile(**overrides) -> ApplicantProfile:
    defaults = {
        "applicant_id": "A-100",
        "date_of_birth": "1990-01-01",
        "background_type": BackgroundType.PRIVATE_SECTOR,
        "educations": [
            EducationRecord(degree="B.Sc Mathematics", institution="State University"),
        ],
        "experiences": [
            EmploymentRecord(
                organization="Tech Corp",
                designation="Analyst",
                start_date="2012-07-01",
                end_date="2020-07-01",
            )
        ],
    }
    defaults.update(overrides)
    return ApplicantProfile(**defaults)


def criteria(designation: ContractualDesignation | str, **kwargs) -> EligibilityCriteria:
    value = designation.value if isinstance(designation, ContractualDesignation) else designation
    return EligibilityCriteria(designation=value, **kwargs)


def test_graded_band_uses_capped_experience():
    engine = ScreeningEngine()

    decision = engine.screen_contractual(
        build_profile(), criteria(ContractualDesignation.OFFICE_EXECUTIVE), as_of=AS_OF
    )

    assert decision.matrix == "graded"
    assert decision.eligible is True
    assert decision.meets_qualification and decision.meets_experience and decision.meets_age
    assert decision.computed.total_experience_years == pytest.approx(8.0, abs=0.01)
    assert decision.suggested_band is not None
    assert decision.suggested_band.max == 55000
    assert decision.suggested_band.min == 49500
    assert decision.suggested_band.basis == "MONTHLY"
    assert decision.reasons[-1] == "Eligible for Office Executive / Data Entry Operator position."


def test_graded_rejects_insufficient_qualification():
    engine = ScreeningEngine()
    profile = build_profile(
        educations=[EducationRecord(degree="Higher Secondary", institution="CBSE School")]
    )

    decision = engine.screen_contractual(
        profile, criteria(ContractualDesignation.OFFICE_EXECUTIVE), as_of=AS_OF
    )

    assert decision.eligible is False
    assert decision.meets_qualification is False
    assert decision.suggested_band is None
    assert decision.reasons == ("Qualification: requires Graduate, applicant has Class XII.",)


def test_graded_rejects_insufficient_experience():
    engine = ScreeningEngine()
    profile = build_profile(
        experiences=[
            EmploymentRecord(
                organization="Startup",
                designation="Intern",
                start_date="2023-01-01",
                end_date="2023-06-01",
            )
        ]
    )

    decision = engine.screen_contractual(
        profile,
        criteria(ContractualDesignation.OFFICE_EXECUTIVE, min_experience_years=3),
        as_of=AS_OF,
    )

    assert decision.eligible is False
    assert decision.meets_experience is False
    assert decision.meets_qualification is True


def test_young_professional_age_ceiling_ignores_advert_value():
    screener = ContractualScreener()
    profile = computed(age=36, highest_qualification=Qualification.PROFESSIONAL)

    decision = screener.evaluate(
        profile,
        criteria(ContractualDesignation.YOUNG_PROFESSIONAL_CONTRACT, max_age=60),
        BackgroundType.PRIVATE_SECTOR,
    )

    assert decision.meets_age is False
    assert decision.eligible is False
    assert "Age: maximum 35, applicant is 36." in decision.reasons


def test_young_professional_fixed_band():
    engine = ScreeningEngine()
    profile = build_profile(
        date_of_birth="2000-01-01",
        educations=[EducationRecord(degree="B.Tech", institution="IIT", is_premier_institute=True)],
        experiences=[
            EmploymentRecord(
                organization="Google",
                designation="SDE",
                start_date="2022-07-01",
                end_date="2024-07-01",
            )
        ],
    )

    decision = engine.screen_contractual(
        profile, criteria(ContractualDesignation.YOUNG_PROFESSIONAL_CONTRACT), as_of=AS_OF
    )

    assert decision.eligible is True
    assert decision.suggested_band.max == 60000
    assert decision.suggested_band.min == 54000


def test_advert_max_age_applies_to_other_graded_designations():
    screener = ContractualScreener()

    decision = screener.evaluate(
        computed(age=50, total_experience_years=3.0),
        criteria(ContractualDesignation.PROJECT_EXECUTIVE, max_age=45),
        BackgroundType.PRIVATE_SECTOR,
    )

    assert decision.meets_age is False


@pytest.mark.parametrize(
    ("years", "expected"),
    [(0.0, 25000), (0.99, 25000), (1.0, 28000), (4.0, 48000), (4.9, 48000), (5.0, 55000), (12.0, 55000)],
)
def test_graded_step_function_floors_experience(years, expected):
    entry = GRADED_MATRIX[ContractualDesignation.OFFICE_EXECUTIVE.value]

    assert entry.max_remuneration(years) == expected


def test_graded_eligibility_is_monotonic_in_experience():
    screener = ContractualScreener()
    advert = criteria(ContractualDesignation.SENIOR_PROFESSIONAL, min_experience_years=3)
    previous_max = 0
    was_eligible = False

    for tenth in range(0, 121):
        decision = screener.evaluate(
            computed(total_experience_years=tenth / 10, highest_qualification=Qualification.POST_GRADUATE),
            advert,
            BackgroundType.PRIVATE_SECTOR,
        )
        assert not (was_eligible and not decision.eligible)
        was_eligible = decision.eligible
        if decision.suggested_band is not None:
            assert decision.suggested_band.max >= previous_max
            previous_max = decision.suggested_band.max

    assert was_eligible is True
    assert previous_max == 70000


def test_support_executive_is_eligible_without_band():
    screener = ContractualScreener()

    decision = screener.evaluate(
        computed(highest_qualification=Qualification.CLASS_XII),
        criteria(ContractualDesignation.SUPPORT_EXECUTIVE),
        BackgroundType.PRIVATE_SECTOR,
    )

    assert decision.eligible is True
    assert decision.suggested_band is None


def test_llb_holder_clears_legal_executive():
    engine = ScreeningEngine()
    profile = build_profile(educations=[EducationRecord(degree="LLB", institution="Law School")])

    decision = engine.screen_contractual(
        profile, criteria(ContractualDesignation.LEGAL_EXECUTIVE), as_of=AS_OF
    )

    assert decision.computed.highest_qualification is Qualification.PROFESSIONAL
    assert decision.eligible is True


def test_fixed_tier_picks_highest_cleared_tier():
    screener = ContractualScreener()
    advert = criteria(ContractualDesignation.CONSULTANT_CONTRACT)

    senior = screener.evaluate(computed(total_experience_years=12.0), advert, BackgroundType.PRIVATE_SECTOR)
    junior = screener.evaluate(computed(total_experience_years=7.0), advert, BackgroundType.PRIVATE_SECTOR)

    assert senior.matrix == "fixed_tier"
    assert (senior.suggested_band.min, senior.suggested_band.max) == (90000, 90000)
    assert senior.suggested_band.daily_rate == 6000
    assert junior.suggested_band.max == 75000
    assert junior.suggested_band.daily_rate == 5000
    assert junior.reasons[0] == "Consultant tier (10yr+): requires 10 years, has 7.0."


def test_fixed_tier_failure_reports_every_tier():
    screener = ContractualScreener()

    decision = screener.evaluate(
        computed(total_experience_years=4.0),
        criteria(ContractualDesignation.CONSULTANT_CONTRACT),
        BackgroundType.PRIVATE_SECTOR,
    )

    assert decision.eligible is False
    assert decision.suggested_band is None
    assert decision.reasons == (
        "Consultant tier (10yr+): requires 10 years, has 4.0.",
        "Consultant tier (6yr+): requires 6 years, has 4.0.",
    )
    assert decision.meets_qualification is True
    assert decision.meets_experience is False
    assert decision.meets_age is True


def test_fixed_tier_advert_thresholds_override_tier_thresholds():
    screener = ContractualScreener()

    decision = screener.evaluate(
        computed(total_experience_years=4.0, age=68),
        criteria(ContractualDesignation.CONSULTANT_CONTRACT, min_experience_years=3, max_age=70),
        BackgroundType.PRIVATE_SECTOR,
    )

    assert decision.eligible is True
    assert decision.suggested_band.max == 90000


def test_senior_advisor_requires_doctorate():
    screener = ContractualScreener()
    advert = criteria(ContractualDesignation.SENIOR_ADVISOR)

    graduate = screener.evaluate(computed(total_experience_years=25.0), advert, BackgroundType.PRIVATE_SECTOR)
    doctor = screener.evaluate(
        computed(total_experience_years=25.0, highest_qualification=Qualification.DOCTORATE),
        advert,
        BackgroundType.PRIVATE_SECTOR,
    )

    assert graduate.eligible is False
    assert graduate.meets_qualification is False
    assert graduate.reasons[0] == "Senior Advisor tier (20yr+): requires Doctorate, has Graduate."
    assert doctor.suggested_band.max == 150000


@pytest.mark.parametrize(
    ("background", "eligible"),
    [
        (BackgroundType.GOVERNMENT_GROUP_A, True),
        (BackgroundType.GOVERNMENT_OTHER, True),
        (BackgroundType.CPSE, True),
        (BackgroundType.AUTONOMOUS_BODY, True),
        (BackgroundType.PRIVATE_SECTOR, False),
        (BackgroundType.ACADEMIC, False),
    ],
)
def test_retired_expert_depends_only_on_background(background, eligible):
    screener = ContractualScreener()

    decision = screener.evaluate(
        computed(age=70, highest_qualification=Qualification.CLASS_XII),
        criteria(ContractualDesignation.EXPERT_RETIRED, max_age=65, min_experience_years=30),
        background,
    )

    assert decision.matrix == "retired"
    assert decision.eligible is eligible
    assert decision.suggested_band is None
    assert decision.meets_age is True


def test_unknown_designation_is_a_normal_outcome():
    screener = ContractualScreener()

    decision = screener.evaluate(computed(), criteria("CHIEF_WIZARD"), BackgroundType.PRIVATE_SECTOR)

    assert decision.matrix == "unknown"
    assert decision.eligible is False
    assert decision.reasons == ("Unknown designation: CHIEF_WIZARD. No matching eligibility matrix found.",)


def test_profile_without_records_is_screened_not_rejected_with_error():
    engine = ScreeningEngine()
    profile = ApplicantProfile(date_of_birth="1990-01-01")

    decision = engine.screen_contractual(
        profile, criteria(ContractualDesignation.OFFICE_EXECUTIVE, min_experience_years=1), as_of=AS_OF
    )

    assert decision.eligible is False
    assert decision.meets_qualification is False
    assert decision.meets_experience is False
