"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class EngineConfig(BaseModel):
    empanelment: dict[str, Any] | None = None
    contractual: dict[str, Any] | None = None
    remuneration: dict[str, Any] | None = None

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    engine: EngineConfig = Field(default_factory=EngineConfig)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        rules = self.engine.model_dump(exclude_none=True)
        if rules:
            settings["engine"] = rules
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
