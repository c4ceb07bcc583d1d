"""Batch screening pipeline assembly and execution."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any, Literal

import pendulum
import structlog
from pydantic import ValidationError

from . import __version__
from .core import EmpanelmentDecision, ScreeningDecision, ScreeningEngine
from .core.evaluators.experience import resolve_as_of
from .schemas import ApplicantProfile, EligibilityCriteria

Track = Literal["empanelment", "contractual"]


class ApplicantLoadError(ValueError):
    """Raised when applicant loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[ApplicantProfile]):
        super().__init__("Applicant loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Applicant loading failed: {self.errors}"


class ApplicantLoader:
    """Load applicant profiles from JSON lines."""

    def load(self, path: Path) -> list[ApplicantProfile]:
        applicants: list[ApplicantProfile] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                if not isinstance(record, dict):
                    errors.append(f"line {idx}: expected a JSON object")
                    continue
                payload = record.get("profile", record)
                try:
                    applicants.append(ApplicantProfile.model_validate(payload))
                except ValidationError as exc:
                    errors.append(f"line {idx}: {exc}")
        if errors:
            raise ApplicantLoadError(errors, applicants)
        return applicants


class CriteriaLoader:
    """Load advert eligibility criteria."""

    def load(self, path: Path) -> EligibilityCriteria:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid criteria JSON: {exc}") from exc
        return EligibilityCriteria.model_validate(data)


class OutputWriter:
    """Persist screening decisions."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False, default=_json_default))
            handle.write("\n")


class ScreeningPipeline:
    """Screen a batch of applicants on one track and write the decisions."""

    def __init__(
        self,
        *,
        engine: ScreeningEngine,
        applicant_loader: ApplicantLoader | None = None,
        criteria_loader: CriteriaLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._engine = engine
        self._applicants = applicant_loader or ApplicantLoader()
        self._criteria = criteria_loader or CriteriaLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        track: Track,
        applicants_path: Path,
        output_path: Path,
        criteria_path: Path | None = None,
        as_of: str | None = None,
        audit_logger: "AuditLogger | None" = None,
    ) -> list[dict]:
        criteria: EligibilityCriteria | None = None
        if track == "contractual":
            if criteria_path is None:
                raise ValueError("Contractual screening requires a criteria file.")
            criteria = self._criteria.load(criteria_path)

        load_errors: list[str] = []
        try:
            applicants = self._applicants.load(applicants_path)
        except ApplicantLoadError as exc:
            applicants = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("applicants.partial_load", errors=exc.errors)

        # One instant for the whole batch.
        instant = resolve_as_of(as_of)
        serialized_results: list[dict] = []

        for applicant in applicants:
            decision: EmpanelmentDecision | ScreeningDecision
            if criteria is None:
                decision = self._engine.screen_empanelment(applicant, as_of=instant)
            else:
                decision = self._engine.screen_contractual(applicant, criteria, as_of=instant)

            entry = {"applicant_id": applicant.applicant_id, **asdict(decision)}
            serialized_entry = json.loads(
                json.dumps(entry, default=_json_default, ensure_ascii=False)
            )
            serialized_results.append(serialized_entry)

            if audit_logger:
                audit_logger.append(
                    {
                        "applicant_id": applicant.applicant_id,
                        "track": track,
                        "designation": criteria.designation if criteria else None,
                        "as_of": instant,
                        "eligible": decision.eligible,
                        "provisional_category": getattr(decision, "provisional_category", None),
                        "suggested_band": serialized_entry.get("suggested_band"),
                        "reasons": list(decision.reasons),
                        "app_version": __version__,
                    }
                )

            self._logger.info(
                "screening.result",
                applicant_id=applicant.applicant_id,
                track=track,
                eligible=decision.eligible,
                provisional_category=getattr(decision, "provisional_category", None),
            )

        metadata = {
            "track": track,
            "designation": criteria.designation if criteria else None,
            "applicant_count": len(applicants),
            "errors": load_errors,
            "as_of": instant.to_iso8601_string(),
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write(output_path, {"metadata": metadata, "results": serialized_results})
        return serialized_results


def _json_default(value: Any) -> Any:
    if isinstance(value, pendulum.DateTime):
        return value.to_iso8601_string()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
