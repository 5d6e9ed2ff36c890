from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import ValidationError

from app.core.errors import InvalidInputError
from app.core.taxonomy import normalize_trip_type
from app.schemas.packing import (
    CategoryBreakdownOut,
    PackingNeedsIn,
    PackingNeedsOut,
    PackingSuggestIn,
    PackingSuggestOut,
    TripIn,
)
from app.schemas.recommendations import ScoredItemOut
from app.services.enrichment import enrich_packing_suggestion
from app.services.packing import (
    TripContext,
    calculate_category_needs,
    suggest_packing_items,
    trip_formality,
)
from app.services.scoring import as_invalid_input, coerce_date, parse_items
from app.services.weather import WeatherForecast, fetch_trip_forecast

router = APIRouter(prefix="/packing", tags=["packing"])

logger = logging.getLogger("uvicorn.error")


def _trip_context(trip: TripIn, weather: Optional[WeatherForecast]) -> TripContext:
    today = coerce_date(trip.today, "trip.today") if trip.today else None
    if trip.duration is None:
        if not (trip.start_date and trip.end_date):
            raise InvalidInputError("invalid_duration", "trip.duration", "duration or start_date/end_date required")
        return TripContext.from_dates(
            trip.start_date,
            trip.end_date,
            trip.trip_type,
            formality=trip.formality,
            weather=weather,
            today=today,
        )
    try:
        return TripContext(
            duration=trip.duration,
            trip_type=trip.trip_type,
            formality=trip.formality or 0,
            weather=weather,
            today=today,
        )
    except ValidationError as e:
        raise as_invalid_input(e, prefix="trip") from e


async def _resolve_weather(payload: PackingSuggestIn) -> Optional[WeatherForecast]:
    trip = payload.trip
    if trip.weather is not None or not payload.fetch_weather:
        return trip.weather
    if not (trip.destination and trip.start_date and trip.end_date):
        logger.info("packing: fetch_weather requested without destination and dates")
        return None
    return await fetch_trip_forecast(
        trip.destination,
        coerce_date(trip.start_date, "trip.start_date"),
        coerce_date(trip.end_date, "trip.end_date"),
    )


@router.post("/suggestions", response_model=PackingSuggestOut)
async def suggest_packing(payload: PackingSuggestIn):
    items = parse_items(i.model_dump() for i in payload.items)
    weather = await _resolve_weather(payload)
    trip = _trip_context(payload.trip, weather)
    suggestion = suggest_packing_items(items, trip)

    breakdown = {
        c: CategoryBreakdownOut(needed=b.needed, suggested=b.suggested)
        for c, b in suggestion.category_breakdown.items()
    }

    if not payload.explain:
        return PackingSuggestOut(
            season=suggestion.season,
            target_formality=suggestion.target_formality,
            items=[
                ScoredItemOut(
                    item_id=s.item_id,
                    name=s.name,
                    category=s.category,
                    score=s.score,
                    reasons=s.reasons,
                )
                for s in suggestion.items
            ],
            category_breakdown=breakdown,
            weather=weather,
        )

    enriched = await enrich_packing_suggestion(suggestion, trip, destination=payload.trip.destination)
    return PackingSuggestOut(
        season=enriched.season,
        target_formality=enriched.target_formality,
        items=[
            ScoredItemOut(
                item_id=e.item_id,
                name=e.name,
                category=e.category,
                score=e.score,
                reasons=e.reasons,
                explanation=e.explanation,
            )
            for e in enriched.items
        ],
        category_breakdown=breakdown,
        weather=weather,
        summary=enriched.summary,
        ai_powered=enriched.ai_powered,
    )


@router.post("/needs", response_model=PackingNeedsOut)
async def packing_needs(payload: PackingNeedsIn):
    trip_type = normalize_trip_type(payload.trip_type)
    return PackingNeedsOut(
        duration=payload.duration,
        trip_type=trip_type,
        target_formality=trip_formality(trip_type),
        needs=calculate_category_needs(payload.duration, trip_type),
    )
