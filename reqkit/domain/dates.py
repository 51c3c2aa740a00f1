from __future__ import annotations

import re
from datetime import UTC, date, datetime, timedelta
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..logging_conf import get_logger, log_fallback
from .text import pluralize_word

__all__ = [
    "SECONDS_PER_MINUTE",
    "MINUTES_PER_HOUR",
    "HOURS_PER_DAY",
    "DAYS_PER_WEEK",
    "DAYS_PER_MONTH",
    "relative_date",
    "humanize_date",
]

logger = get_logger("domain.dates")

# Tier thresholds; a month is approximated as 30 days.
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
DAYS_PER_MONTH = 30
WEEKS_BEFORE_MONTHS = 4

_DATETIME = TypeAdapter(datetime)
_YMD_RE = re.compile(r"^\s*(\d{1,4})-(\d{1,2})-(\d{1,2})")


def _to_aware(value: Any) -> datetime:
    """Coerce a datetime, ISO-8601 string or epoch number; naive values are UTC."""
    dt = _DATETIME.validate_python(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def _ago(count: int, unit: str) -> str:
    return f"{count} {pluralize_word(unit, count)} ago"


def relative_date(when: Any, *, now: datetime | None = None) -> Any:
    """Describe how long ago `when` was, using the coarsest fitting unit.

    Tiers (each floor-divided from the previous one):
      < 60 seconds -> "Few seconds ago"
      < 60 minutes -> "N minute(s) ago"
      < 24 hours   -> "N hour(s) ago"
      < 7 days     -> "N day(s) ago"
      < 4 weeks    -> "N week(s) ago"
      otherwise    -> "N month(s) ago" (30-day months)

    Returns `when` unchanged if it can't be interpreted as a point in time.
    """
    try:
        then = _to_aware(when)
    except ValidationError as e:
        log_fallback(logger, "date.parse", e)
        return when
    current = _to_aware(now) if now is not None else datetime.now(UTC)

    seconds = (current - then) // timedelta(seconds=1)
    minutes = seconds // SECONDS_PER_MINUTE
    hours = minutes // MINUTES_PER_HOUR
    days = hours // HOURS_PER_DAY
    weeks = days // DAYS_PER_WEEK
    months = days // DAYS_PER_MONTH

    if seconds < SECONDS_PER_MINUTE:
        return "Few seconds ago"
    if minutes < MINUTES_PER_HOUR:
        return _ago(minutes, "minute")
    if hours < HOURS_PER_DAY:
        return _ago(hours, "hour")
    if days < DAYS_PER_WEEK:
        return _ago(days, "day")
    # 28 and 29 days floor to zero months; stay on weeks until a full month has passed
    if weeks < WEEKS_BEFORE_MONTHS or months < 1:
        return _ago(weeks, "week")
    return _ago(months, "month")


def humanize_date(value: Any) -> Any:
    """Render a "YYYY-MM-DD" date as an en-US long date, e.g. "January 5, 2024".

    The components are read as a calendar date, so no time zone can shift the
    day. Anything after the day component (a time part) is ignored.
    """
    if not isinstance(value, str):
        return value
    m = _YMD_RE.match(value)
    if not m:
        return value
    try:
        d = date(*(int(part) for part in m.groups()))
    except ValueError:
        return value
    return f"{d:%B} {d.day}, {d.year}"
