"""Post-interview remuneration tiers."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from ..decisions import RemunerationOutcome


def round_half_up(value: float | Decimal) -> int:
    """Round to the nearest integer with halves going up."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def apply_ratio(amount: int, ratio: float) -> int:
    """Scale an amount by a ratio without binary float drift."""
    return round_half_up(Decimal(str(amount)) * Decimal(str(ratio)))


@dataclass
class RemunerationConfig:
    """Score thresholds (percent) and the reduced-tier ratio."""

    max_tier_above: float = 80.0
    reduced_tier_from: float = 60.0
    reduced_ratio: float = 0.9


class RemunerationCalculator:
    """Map a committee score to the payable share of the maximum band."""

    def __init__(self, *, config: RemunerationConfig | None = None) -> None:
        self._config = config or RemunerationConfig()

    def calculate(self, max_remuneration: int, score_percent: float) -> RemunerationOutcome:
        cfg = self._config
        if score_percent > cfg.max_tier_above:
            return RemunerationOutcome(int(max_remuneration), "MAX", score_percent)
        if score_percent >= cfg.reduced_tier_from:
            return RemunerationOutcome(
                apply_ratio(max_remuneration, cfg.reduced_ratio),
                f"{cfg.reduced_ratio * 100:g}%",
                score_percent,
            )
        return RemunerationOutcome(0, "NOT ELIGIBLE", score_percent)


def calculate_remuneration(max_remuneration: int, score_percent: float) -> RemunerationOutcome:
    """Apply the default tiers: above 80 pays in full, 60 to 80 pays 90%, below 60 nothing."""
    return RemunerationCalculator().calculate(max_remuneration, score_percent)
