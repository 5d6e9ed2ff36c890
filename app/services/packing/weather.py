from typing import Optional

from app.services.weather import WeatherForecast

DEFAULT_SEASON = "spring"
RAIN_DAY_MM = 2.0
RAINY_TRIP_SHARE = 0.3


def average_temperature(forecast: WeatherForecast) -> Optional[float]:
    if not forecast.daily:
        return None
    return sum(d.temp_mean for d in forecast.daily) / len(forecast.daily)


def season_from_weather(forecast: Optional[WeatherForecast]) -> str:
    """Dominant season implied by the forecast's mean daily temperature."""
    if forecast is None:
        return DEFAULT_SEASON
    avg = average_temperature(forecast)
    if avg is None:
        return DEFAULT_SEASON
    if avg >= 25:
        return "summer"
    if avg >= 15:
        return "spring"
    if avg >= 5:
        return "fall"
    return "winter"


def weather_indicates_rain(forecast: Optional[WeatherForecast]) -> bool:
    if forecast is None or not forecast.daily:
        return False
    rainy_days = sum(1 for d in forecast.daily if d.precipitation_mm > RAIN_DAY_MM)
    return rainy_days / len(forecast.daily) > RAINY_TRIP_SHARE


def summarize_weather(forecast: Optional[WeatherForecast]) -> Optional[str]:
    avg = average_temperature(forecast) if forecast is not None else None
    if avg is None:
        return None
    summary = f"avg {avg:.1f}°C over {len(forecast.daily)} days ({season_from_weather(forecast)})"
    if weather_indicates_rain(forecast):
        summary += ", expect rain"
    return summary
