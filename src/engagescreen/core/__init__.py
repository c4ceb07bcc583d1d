"""Core screening engine components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .decisions import (
    ComputedProfile,
    EmpanelmentDecision,
    RemunerationBand,
    RemunerationOutcome,
    ScreeningDecision,
)
from .evaluators import (
    ContractualScreener,
    EmpanelmentMatcher,
    RemunerationCalculator,
    calculate_remuneration,
)
from .matrices import ContractualDesignation, list_designations
from .screening import ScreeningEngine

__all__ = [
    "ScreeningEngine",
    "ComputedProfile",
    "EmpanelmentDecision",
    "ScreeningDecision",
    "RemunerationBand",
    "RemunerationOutcome",
    "ContractualDesignation",
    "ContractualScreener",
    "EmpanelmentMatcher",
    "RemunerationCalculator",
    "calculate_remuneration",
    "list_designations",
]
