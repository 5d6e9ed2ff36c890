from __future__ import annotations

import logging
import time
from datetime import date
from typing import Optional

import httpx

from app.core.config import settings
from .parsing import parse_forecast_response, parse_geocoding_response
from .types import WeatherForecast

logger = logging.getLogger("uvicorn.error")


class LocationNotFound(LookupError):
    pass


async def _get_json(client: httpx.AsyncClient, url: str, params: dict) -> dict:
    resp = await client.get(url, params=params, timeout=settings.WEATHER_TIMEOUT_S)
    resp.raise_for_status()
    return resp.json()


async def fetch_forecast(
    destination: str,
    start_date: date,
    end_date: date,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> WeatherForecast:
    """Geocode `destination` and fetch its daily forecast for the date range.

    Raises `LocationNotFound` when geocoding has no match; transport and
    payload errors propagate.
    """
    owns_client = client is None
    client = client or httpx.AsyncClient()
    start = time.perf_counter()
    try:
        geo = await _get_json(
            client,
            settings.WEATHER_GEOCODING_URL,
            {"name": destination, "count": 1, "language": "en", "format": "json"},
        )
        location = parse_geocoding_response(geo)
        if location is None:
            raise LocationNotFound(destination)

        data = await _get_json(
            client,
            settings.WEATHER_FORECAST_URL,
            {
                "latitude": location.latitude,
                "longitude": location.longitude,
                "daily": "temperature_2m_min,temperature_2m_max,precipitation_sum,weather_code",
                "start_date": start_date.isoformat(),
                "end_date": end_date.isoformat(),
                "timezone": "auto",
            },
        )
        forecast = parse_forecast_response(data, location.name)
    finally:
        if owns_client:
            await client.aclose()
    logger.info(
        "weather:forecast location=%s days=%s latency_ms=%s",
        forecast.location.name if forecast.location else destination,
        len(forecast.daily),
        int((time.perf_counter() - start) * 1000),
    )
    return forecast


async def fetch_trip_forecast(
    destination: Optional[str],
    start_date: Optional[date],
    end_date: Optional[date],
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[WeatherForecast]:
    """Best-effort forecast lookup; any failure means "weather unknown"."""
    if not settings.WEATHER_ENABLED or not destination or not start_date or not end_date:
        return None
    try:
        return await fetch_forecast(destination, start_date, end_date, client=client)
    except LocationNotFound:
        logger.warning("weather:forecast location not found destination=%s", destination)
    except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
        logger.warning("weather:forecast failed destination=%s reason=%s", destination, e)
    return None
