"""
Factor functions shared by the wear recommender and the packing engine.

Every factor is normalized to [0, 1]. Inputs are validated here, at the
function boundary, so malformed data raises `InvalidInputError` instead of
leaking NaN into a weighted score.
"""
import math
from datetime import date, datetime, time, timezone
from typing import Iterable, Optional, Union

from app.core.errors import InvalidInputError
from app.core.taxonomy import FORMALITY_MAX, FORMALITY_MIN, SEASONS, Season

DateLike = Union[date, datetime, str]
Instant = Union[date, datetime]

FRESHNESS_WINDOW_DAYS = 30
SECONDS_PER_DAY = 86400
VARIETY_DECAY = 0.1
SEASON_UNSPECIFIED = 0.5
SEASON_MATCH = 1.0
SEASON_MISMATCH = 0.3
FORMALITY_STEP_PENALTY = 0.25

_MONTH_SEASON = {
    3: "spring", 4: "spring", 5: "spring",
    6: "summer", 7: "summer", 8: "summer",
    9: "fall", 10: "fall", 11: "fall",
    12: "winter", 1: "winter", 2: "winter",
}


def coerce_instant(value: DateLike, field: str = "date") -> Instant:
    """Parse ISO-8601 strings; date-only values stay dates, timestamps keep their time."""
    if isinstance(value, date):  # datetime included
        return value
    if isinstance(value, str):
        raw = value.strip()
        try:
            if len(raw) == 10:
                return date.fromisoformat(raw)
            return datetime.fromisoformat(raw.replace("Z", "+00:00"))
        except ValueError as e:
            raise InvalidInputError("invalid_date", field, str(e)) from e
    raise InvalidInputError("invalid_date", field, f"unsupported type {type(value).__name__}")


def coerce_date(value: DateLike, field: str = "date") -> date:
    """Reduce a date, datetime or ISO-8601 string to a calendar date."""
    instant = coerce_instant(value, field)
    if isinstance(instant, datetime):
        return instant.date()
    return instant


def _as_utc_naive(value: Instant) -> datetime:
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def days_between(earlier: Instant, later: Instant) -> int:
    """Whole days elapsed, floored.

    Plain dates count as midnight and aware datetimes are compared in UTC, so
    two timestamps two hours apart are 0 days apart even across midnight.
    """
    elapsed = _as_utc_naive(later) - _as_utc_naive(earlier)
    return math.floor(elapsed.total_seconds() / SECONDS_PER_DAY)


def _check_formality(value: object, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError("invalid_formality", field)
    if not FORMALITY_MIN <= value <= FORMALITY_MAX:
        raise InvalidInputError("invalid_formality", field, f"{value} not in 1-5")
    return value


def _check_season(value: object, field: str) -> str:
    if value not in SEASONS:
        raise InvalidInputError("invalid_season", field, repr(value))
    return value  # type: ignore[return-value]


def freshness_score(last_worn_at: Optional[DateLike], today: DateLike) -> float:
    """Inverse recency of wear: 0 if worn today, linear up to 1.0 at 30 days."""
    now = coerce_instant(today, "today")
    if last_worn_at is None:
        return 1.0
    last = coerce_instant(last_worn_at, "last_worn_at")

    days_since = days_between(last, now)
    if days_since <= 0:
        return 0.0
    if days_since >= FRESHNESS_WINDOW_DAYS:
        return 1.0
    return days_since / FRESHNESS_WINDOW_DAYS


def variety_score(times_worn: int) -> float:
    """Exponential decay over the wear count; favours rarely worn items."""
    if isinstance(times_worn, bool) or not isinstance(times_worn, int) or times_worn < 0:
        raise InvalidInputError("invalid_times_worn", "times_worn", repr(times_worn))
    if times_worn == 0:
        return 1.0
    return math.exp(-VARIETY_DECAY * times_worn)


def season_score(item_seasons: Iterable[str], current_season: str) -> float:
    _check_season(current_season, "current_season")
    seasons = list(item_seasons or [])
    if not seasons:
        return SEASON_UNSPECIFIED
    if current_season in seasons:
        return SEASON_MATCH
    return SEASON_MISMATCH


def formality_score(item_formality: int, target_formality: Optional[int]) -> float:
    """Each level of mismatch costs 0.25; no target means anything goes."""
    _check_formality(item_formality, "formality")
    if target_formality is None:
        return 1.0
    _check_formality(target_formality, "target_formality")
    difference = abs(item_formality - target_formality)
    return max(0.0, 1.0 - difference * FORMALITY_STEP_PENALTY)


def season_of(value: DateLike) -> Season:
    return _MONTH_SEASON[coerce_date(value, "today").month]


def clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))
