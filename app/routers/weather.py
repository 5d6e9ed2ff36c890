import httpx
from fastapi import APIRouter, HTTPException

from app.core.errors import InvalidInputError
from app.schemas.weather import WeatherForecastIn
from app.services.scoring import coerce_date
from app.services.weather import LocationNotFound, WeatherForecast, fetch_forecast

router = APIRouter(prefix="/weather", tags=["weather"])


@router.post("/forecast", response_model=WeatherForecast)
async def forecast(payload: WeatherForecastIn):
    start = coerce_date(payload.start_date, "start_date")
    end = coerce_date(payload.end_date, "end_date")
    if end < start:
        raise InvalidInputError("invalid_date_range", "end_date")
    try:
        return await fetch_forecast(payload.destination, start, end)
    except LocationNotFound:
        raise HTTPException(status_code=404, detail="location_not_found")
    except (httpx.HTTPError, ValueError, KeyError, TypeError):
        raise HTTPException(status_code=502, detail="weather_unavailable")
