"""Experience aggregation and age computation."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Callable, Iterable

import pendulum

from ...schemas import ApplicantProfile, EmploymentRecord
from ..decisions import ComputedProfile
from .qualification import classify_highest_qualification

SECONDS_PER_YEAR = 365.25 * 24 * 60 * 60


def resolve_as_of(
    value: Any | None,
    now_provider: Callable[[], pendulum.DateTime] | None = None,
) -> pendulum.DateTime:
    """Return the reference instant for a screening call.

    Accepts a pendulum/stdlib datetime, a date, or an ISO string (``YYYY-MM`` is
    read as the first of the month). Aware values keep their zone, naive ones
    are read as UTC. Anything unparsable falls back to the clock.
    """
    now = (now_provider or pendulum.now)()
    if value is None:
        return _aware(now)
    if isinstance(value, datetime):
        return _aware(pendulum.instance(value))
    if isinstance(value, date):
        return _start_of_day(value)
    text = str(value).strip()
    try:
        if len(text) == 7 and text[4] == "-":
            return pendulum.datetime(int(text[:4]), int(text[5:7]), 1, tz="UTC")
        parsed = pendulum.parse(text)
    except (ValueError, pendulum.parsing.exceptions.ParserError):
        return _aware(now)
    if isinstance(parsed, pendulum.DateTime):
        return _aware(parsed)
    if isinstance(parsed, pendulum.Date):
        return _start_of_day(parsed)
    return _aware(now)


def merge_intervals(
    intervals: Iterable[tuple[pendulum.DateTime, pendulum.DateTime]],
) -> list[tuple[pendulum.DateTime, pendulum.DateTime]]:
    """Sweep-merge intervals; touching intervals are merged too."""
    ordered = sorted(intervals, key=lambda item: item[0])
    merged: list[tuple[pendulum.DateTime, pendulum.DateTime]] = []
    for start, end in ordered:
        if merged and start <= merged[-1][1]:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def total_experience_years(
    experiences: Iterable[EmploymentRecord],
    as_of: pendulum.DateTime,
) -> float:
    """Calendar years covered by the employment records, overlaps counted once."""
    intervals = []
    for record in experiences:
        start = _start_of_day(record.start_date, as_of.tzinfo)
        end = as_of if record.is_current or record.end_date is None else _start_of_day(record.end_date, as_of.tzinfo)
        if end < start:
            continue
        intervals.append((start, end))

    seconds = sum(
        (end - start).total_seconds() for start, end in merge_intervals(intervals)
    )
    return seconds / SECONDS_PER_YEAR


def group_a_service_years(
    experiences: Iterable[EmploymentRecord],
    as_of: pendulum.DateTime,
) -> float:
    return total_experience_years(
        [record for record in experiences if record.is_group_a_service], as_of
    )


def level_12_plus_years(
    experiences: Iterable[EmploymentRecord],
    as_of: pendulum.DateTime,
) -> float:
    return total_experience_years(
        [record for record in experiences if record.is_level_12_or_above], as_of
    )


def compute_age(date_of_birth: date, as_of: pendulum.DateTime) -> int:
    """Completed years of age at ``as_of``."""
    today = as_of.date()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def compute_profile(profile: ApplicantProfile, as_of: pendulum.DateTime) -> ComputedProfile:
    """Derive every value the matchers need from one profile snapshot."""
    experiences = list(profile.experiences)
    educations = list(profile.educations)
    return ComputedProfile(
        total_experience_years=round(total_experience_years(experiences, as_of), 2),
        group_a_service_years=round(group_a_service_years(experiences, as_of), 2),
        level_12_plus_years=round(level_12_plus_years(experiences, as_of), 2),
        age=compute_age(profile.date_of_birth, as_of),
        has_doctorate=any(record.is_doctorate for record in educations),
        has_post_grad=any(record.is_post_graduation for record in educations),
        has_premier_degree=any(record.is_premier_institute for record in educations),
        highest_qualification=classify_highest_qualification(educations),
    )


def _start_of_day(value: date, tz: Any = "UTC") -> pendulum.DateTime:
    return pendulum.datetime(value.year, value.month, value.day, tz=tz)


def _aware(value: pendulum.DateTime) -> pendulum.DateTime:
    # Aware instants keep their own zone so the calendar date is the caller's.
    if value.tzinfo is None:
        return pendulum.instance(value, tz="UTC")
    return value
