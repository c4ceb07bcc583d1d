"""Highest-qualification classification from education records."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from ...schemas import EducationRecord, Qualification

PROFESSIONAL_TOKENS: tuple[str, ...] = (
    "LLB",
    "B.TECH",
    "BE",
    "BTECH",
    "B.E",
    "BDS",
    "MBBS",
    "CA",
    "ICWA",
)
LAW_TOKENS: tuple[str, ...] = ("LLB", "LAW")
GRADUATE_TOKENS: tuple[str, ...] = ("B.", "BACHELOR", "GRADUATE", "DIPLOMA")
ITI_TOKENS: tuple[str, ...] = ("ITI", "NCVT", "SCVT")


def _degree_contains(tokens: Sequence[str]) -> Callable[[EducationRecord], bool]:
    def predicate(record: EducationRecord) -> bool:
        text = (record.degree or "").upper()
        return any(token in text for token in tokens)

    return predicate


# Evaluated top to bottom; the first rule any record satisfies wins.
# LLB is in the professional token set, so the law rule only sees "LAW" degrees.
CLASSIFICATION_RULES: tuple[tuple[Callable[[EducationRecord], bool], Qualification], ...] = (
    (lambda record: record.is_doctorate, Qualification.DOCTORATE),
    (lambda record: record.is_post_graduation, Qualification.POST_GRADUATE),
    (_degree_contains(PROFESSIONAL_TOKENS), Qualification.PROFESSIONAL),
    (_degree_contains(LAW_TOKENS), Qualification.LAW),
    (_degree_contains(GRADUATE_TOKENS), Qualification.GRADUATE),
    (_degree_contains(ITI_TOKENS), Qualification.ITI),
)


def classify_highest_qualification(educations: Iterable[EducationRecord]) -> Qualification:
    """Return the highest qualification across all records (Class XII by default)."""
    records = list(educations)
    for predicate, outcome in CLASSIFICATION_RULES:
        if any(predicate(record) for record in records):
            return outcome
    return Qualification.CLASS_XII
