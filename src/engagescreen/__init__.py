"""Eligibility screening engine for contractual and empanelment engagements."""

from __future__ import annotations

__version__ = "0.1.0"

from .core import ScreeningEngine, calculate_remuneration  # noqa: E402

__all__ = ["ScreeningEngine", "calculate_remuneration", "__version__"]
