from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EligibilityCriteria(BaseModel):
    """Criteria attached to one advertised contractual position."""

    designation: str
    advert_id: str | None = None
    min_experience_years: float | None = Field(default=None, ge=0)
    max_age: int | None = Field(default=None, ge=0)
    min_qualification: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)
