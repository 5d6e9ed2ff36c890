"""Open-Meteo payload parsing (geocoding search and daily forecast)."""
from typing import Any, Dict, List, Optional

from .types import WeatherDay, WeatherForecast, WeatherLocation

# WMO weather interpretation codes, as documented by Open-Meteo
WEATHER_CODE_DESCRIPTIONS: Dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


def describe_weather_code(code: Optional[int]) -> str:
    if code is None:
        return "Unknown"
    return WEATHER_CODE_DESCRIPTIONS.get(code, "Unknown")


def parse_geocoding_response(data: Dict[str, Any]) -> Optional[WeatherLocation]:
    results = (data or {}).get("results") or []
    if not results:
        return None
    first = results[0]
    admin1 = first.get("admin1")
    if admin1:
        name = f"{first['name']}, {admin1}, {first['country']}"
    else:
        name = f"{first['name']}, {first['country']}"
    return WeatherLocation(name=name, latitude=first["latitude"], longitude=first["longitude"])


def _at(values: List[Any], i: int) -> Any:
    return values[i] if i < len(values) else None


def parse_forecast_response(data: Dict[str, Any], location_name: str) -> WeatherForecast:
    """
    Build a forecast from Open-Meteo's column-oriented `daily` block.

    Days missing either temperature are dropped; a missing precipitation
    value counts as dry.
    """
    daily = data.get("daily") or {}
    times = daily.get("time") or []
    mins = daily.get("temperature_2m_min") or []
    maxs = daily.get("temperature_2m_max") or []
    precip = daily.get("precipitation_sum") or []
    codes = daily.get("weather_code") or []

    days: List[WeatherDay] = []
    for i, day in enumerate(times):
        t_min, t_max = _at(mins, i), _at(maxs, i)
        if t_min is None or t_max is None:
            continue
        code = _at(codes, i)
        days.append(
            WeatherDay(
                date=day,
                temp_min=t_min,
                temp_max=t_max,
                precipitation_mm=_at(precip, i) or 0.0,
                weather_code=code,
                description=describe_weather_code(code),
            )
        )

    return WeatherForecast(
        daily=days,
        location=WeatherLocation(
            name=location_name,
            latitude=data.get("latitude", 0.0),
            longitude=data.get("longitude", 0.0),
        ),
    )
