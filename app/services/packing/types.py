from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.core.errors import InvalidInputError
from app.core.taxonomy import FORMALITY_MAX, normalize_trip_type
from app.services.scoring import ScoredItem, as_invalid_input, coerce_date
from app.services.weather import WeatherForecast


class TripContext(BaseModel):
    """Trip parameters for packing suggestions.

    `formality` of 0 means "use the trip type's default". `today` is the
    reference date for freshness; it defaults to the current date.
    """

    model_config = ConfigDict(frozen=True)

    duration: int = Field(..., ge=1)
    trip_type: str = "other"
    formality: int = Field(0, ge=0, le=FORMALITY_MAX)
    weather: Optional[WeatherForecast] = None
    today: Optional[date] = None

    @field_validator("trip_type", mode="before")
    @classmethod
    def _trip_type(cls, v: Any):
        return normalize_trip_type(v)

    @field_validator("formality", mode="before")
    @classmethod
    def _formality(cls, v: Any):
        return 0 if v is None else v

    @property
    def reference_date(self) -> date:
        return self.today or date.today()

    @classmethod
    def from_dates(
        cls,
        start_date: Any,
        end_date: Any,
        trip_type: str,
        *,
        formality: Optional[int] = None,
        weather: Optional[WeatherForecast] = None,
        today: Optional[date] = None,
    ) -> "TripContext":
        start = coerce_date(start_date, "start_date")
        end = coerce_date(end_date, "end_date")
        if end < start:
            raise InvalidInputError("invalid_date_range", "end_date", "end date must be on or after start date")
        try:
            return cls(
                duration=trip_duration(start, end),
                trip_type=trip_type,
                formality=formality or 0,
                weather=weather,
                today=today,
            )
        except ValidationError as e:
            raise as_invalid_input(e, prefix="trip") from e


def trip_duration(start: date, end: date) -> int:
    """Trip length in days, counting both endpoints."""
    return (end - start).days + 1


@dataclass
class CategoryBreakdown:
    needed: int
    suggested: int


@dataclass
class PackingSuggestion:
    items: List[ScoredItem] = field(default_factory=list)
    category_breakdown: Dict[str, CategoryBreakdown] = field(default_factory=dict)
    season: str = "spring"
    target_formality: int = 3
