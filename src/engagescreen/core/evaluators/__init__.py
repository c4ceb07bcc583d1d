"""Rule evaluators used by the screening engine."""

from .contractual import ContractualConfig, ContractualScreener
from .empanelment import EmpanelmentConfig, EmpanelmentMatcher
from .experience import (
    compute_age,
    compute_profile,
    merge_intervals,
    resolve_as_of,
    total_experience_years,
)
from .qualification import classify_highest_qualification
from .remuneration import RemunerationCalculator, RemunerationConfig, calculate_remuneration

__all__ = [
    "ContractualConfig",
    "ContractualScreener",
    "EmpanelmentConfig",
    "EmpanelmentMatcher",
    "RemunerationCalculator",
    "RemunerationConfig",
    "calculate_remuneration",
    "classify_highest_qualification",
    "compute_age",
    "compute_profile",
    "merge_intervals",
    "resolve_as_of",
    "total_experience_years",
]
