from typing import List, Optional

from pydantic import BaseModel, Field


class WeatherDay(BaseModel):
    date: str
    temp_min: float
    temp_max: float
    precipitation_mm: float = 0.0
    weather_code: Optional[int] = None
    description: str = ""

    @property
    def temp_mean(self) -> float:
        return (self.temp_min + self.temp_max) / 2


class WeatherLocation(BaseModel):
    name: str
    latitude: float
    longitude: float


class WeatherForecast(BaseModel):
    daily: List[WeatherDay] = Field(default_factory=list)
    location: Optional[WeatherLocation] = None
