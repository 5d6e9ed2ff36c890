from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.core.errors import InvalidInputError
from app.core.taxonomy import FORMALITY_MAX, FORMALITY_MIN, normalize_season
from .primitives import Instant, coerce_date, coerce_instant, season_of


def _normalize_seasons(v: Any) -> List[str]:
    if v is None:
        return []
    if isinstance(v, str):
        v = [v]
    out: List[str] = []
    for s in v:
        if not isinstance(s, str):
            raise ValueError("invalid_season")
        norm = normalize_season(s)
        if norm not in out:
            out.append(norm)
    return out


def _date_or_none(v: Any, field_name: str) -> Optional[date]:
    if v is None or v == "":
        return None
    try:
        return coerce_date(v, field_name)
    except InvalidInputError as e:
        raise ValueError(e.code) from e


def _instant_or_none(v: Any, field_name: str) -> Optional[Instant]:
    if v is None or v == "":
        return None
    try:
        return coerce_instant(v, field_name)
    except InvalidInputError as e:
        raise ValueError(e.code) from e


class ItemForScoring(BaseModel):
    """Read-only snapshot of a wardrobe item as supplied by the item source."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str = ""
    category: str = ""
    season: List[str] = Field(default_factory=list)
    formality: int = Field(3, ge=FORMALITY_MIN, le=FORMALITY_MAX)
    times_worn: int = Field(0, ge=0)
    # timestamps keep their time of day for freshness
    last_worn_at: Optional[Union[datetime, date]] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v: Any):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("missing_id")
        return str(v)

    @field_validator("season", mode="before")
    @classmethod
    def _season(cls, v: Any):
        return _normalize_seasons(v)

    @field_validator("last_worn_at", mode="before")
    @classmethod
    def _last_worn(cls, v: Any):
        return _instant_or_none(v, "last_worn_at")

    @property
    def never_worn(self) -> bool:
        return self.last_worn_at is None


class ScoringContext(BaseModel):
    """Context for wear recommendations."""

    model_config = ConfigDict(frozen=True)

    current_season: str
    today: date
    target_formality: Optional[int] = Field(None, ge=FORMALITY_MIN, le=FORMALITY_MAX)

    @field_validator("current_season", mode="before")
    @classmethod
    def _season(cls, v: Any):
        if not isinstance(v, str):
            raise ValueError("invalid_season")
        return normalize_season(v)

    @field_validator("today", mode="before")
    @classmethod
    def _today(cls, v: Any):
        d = _date_or_none(v, "today")
        if d is None:
            raise ValueError("invalid_date")
        return d

    @classmethod
    def for_date(cls, today: Any, target_formality: Optional[int] = None) -> "ScoringContext":
        """Build a context whose season is derived from the calendar month."""
        try:
            return cls(current_season=season_of(today), today=today, target_formality=target_formality)
        except ValidationError as e:
            raise as_invalid_input(e) from e


@dataclass
class ScoredItem:
    """A ranked item with its combined score and human-readable reasons."""
    item_id: str
    name: str
    category: str
    score: float  # 0-1
    reasons: List[str] = field(default_factory=list)


def as_invalid_input(err: ValidationError, prefix: Optional[str] = None) -> InvalidInputError:
    errors = err.errors()
    first = errors[0] if errors else {}
    loc = [str(p) for p in first.get("loc", ())]
    field_name = next((p for p in loc if not p.isdigit()), None)
    msg = str(first.get("msg", "invalid_input"))
    if first.get("type") == "value_error":
        # pydantic prefixes custom ValueError messages
        code = msg.removeprefix("Value error, ")
    else:
        code = f"invalid_{field_name}" if field_name else "invalid_input"
    where = ".".join(loc) or None
    if prefix:
        where = f"{prefix}.{where}" if where else prefix
    return InvalidInputError(code, where, msg)


def _parse(model: type, raw: Iterable[Mapping[str, Any]]) -> list:
    out = []
    for i, r in enumerate(raw):
        try:
            out.append(model.model_validate(r))
        except ValidationError as e:
            raise as_invalid_input(e, prefix=f"items[{i}]") from e
    return out


def parse_items(raw: Iterable[Mapping[str, Any]]) -> List[ItemForScoring]:
    return _parse(ItemForScoring, raw)

