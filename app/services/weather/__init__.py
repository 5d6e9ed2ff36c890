from .client import LocationNotFound, fetch_forecast, fetch_trip_forecast
from .parsing import (
    WEATHER_CODE_DESCRIPTIONS,
    describe_weather_code,
    parse_forecast_response,
    parse_geocoding_response,
)
from .types import WeatherDay, WeatherForecast, WeatherLocation

__all__ = [
    "LocationNotFound",
    "fetch_forecast",
    "fetch_trip_forecast",
    "WEATHER_CODE_DESCRIPTIONS",
    "describe_weather_code",
    "parse_forecast_response",
    "parse_geocoding_response",
    "WeatherDay",
    "WeatherForecast",
    "WeatherLocation",
]
