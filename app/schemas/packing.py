from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from app.schemas.recommendations import ScoredItemOut, WardrobeItemIn
from app.services.weather import WeatherForecast


class TripIn(BaseModel):
    duration: Optional[int] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    trip_type: str = "other"
    formality: Optional[int] = None
    destination: Optional[str] = None
    weather: Optional[WeatherForecast] = None
    today: Optional[str] = None


class PackingSuggestIn(BaseModel):
    items: List[WardrobeItemIn] = Field(default_factory=list)
    trip: TripIn
    fetch_weather: bool = False
    explain: bool = False


class CategoryBreakdownOut(BaseModel):
    needed: int
    suggested: int


class PackingSuggestOut(BaseModel):
    season: str
    target_formality: int
    items: List[ScoredItemOut]
    category_breakdown: Dict[str, CategoryBreakdownOut]
    weather: Optional[WeatherForecast] = None
    summary: Optional[str] = None
    ai_powered: bool = False


class PackingNeedsIn(BaseModel):
    duration: int
    trip_type: str = "other"


class PackingNeedsOut(BaseModel):
    duration: int
    trip_type: str
    target_formality: int
    needs: Dict[str, int]
