"""Dependency injection container for the screening engine."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import (
    ContractualScreener,
    EmpanelmentMatcher,
    RemunerationCalculator,
    ScreeningEngine,
)
from .core.evaluators.contractual import ContractualConfig
from .core.evaluators.empanelment import EmpanelmentConfig
from .core.evaluators.remuneration import RemunerationConfig
from .pipeline import ScreeningPipeline


class ScreeningContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    empanelment_matcher = providers.Singleton(EmpanelmentMatcher)
    contractual_screener = providers.Singleton(ContractualScreener)
    remuneration_calculator = providers.Singleton(RemunerationCalculator)

    engine = providers.Singleton(
        ScreeningEngine,
        empanelment_matcher=empanelment_matcher,
        contractual_screener=contractual_screener,
        remuneration_calculator=remuneration_calculator,
    )

    pipeline = providers.Factory(
        ScreeningPipeline,
        engine=engine,
    )


def create_container(*, settings: dict | None = None) -> ScreeningContainer:
    """Instantiate container with optional rule overrides."""

    container = ScreeningContainer()

    if not settings:
        return container

    engine_settings = settings.get("engine", {}) if isinstance(settings, dict) else {}

    if "empanelment" in engine_settings:
        empanelment_config = EmpanelmentConfig(**engine_settings["empanelment"])
        container.empanelment_matcher.override(
            providers.Singleton(EmpanelmentMatcher, config=empanelment_config)
        )

    if "contractual" in engine_settings:
        contractual_config = ContractualConfig(**engine_settings["contractual"])
        container.contractual_screener.override(
            providers.Singleton(ContractualScreener, config=contractual_config)
        )

    if "remuneration" in engine_settings:
        remuneration_config = RemunerationConfig(**engine_settings["remuneration"])
        container.remuneration_calculator.override(
            providers.Singleton(RemunerationCalculator, config=remuneration_config)
        )

    return container
