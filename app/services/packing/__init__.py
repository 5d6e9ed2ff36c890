from .needs import (
    CATEGORY_RATIOS,
    TRIP_TYPE_CATEGORY_MULTIPLIERS,
    TRIP_TYPE_FORMALITY,
    CategoryRatio,
    calculate_category_needs,
    round_half_up,
    trip_formality,
)
from .suggest import PackingEngine, suggest_packing_items, versatility_score
from .types import CategoryBreakdown, PackingSuggestion, TripContext, trip_duration
from .weather import season_from_weather, summarize_weather, weather_indicates_rain

__all__ = [
    "CATEGORY_RATIOS",
    "TRIP_TYPE_CATEGORY_MULTIPLIERS",
    "TRIP_TYPE_FORMALITY",
    "CategoryRatio",
    "calculate_category_needs",
    "round_half_up",
    "trip_formality",
    "PackingEngine",
    "suggest_packing_items",
    "versatility_score",
    "CategoryBreakdown",
    "PackingSuggestion",
    "TripContext",
    "trip_duration",
    "season_from_weather",
    "summarize_weather",
    "weather_indicates_rain",
]
