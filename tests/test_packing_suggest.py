from datetime import date

import pytest
from pydantic import ValidationError

from app.core.errors import InvalidInputError
from app.core.taxonomy import ITEM_CATEGORIES
from app.services.packing import (
    PackingEngine,
    TripContext,
    season_from_weather,
    suggest_packing_items,
    summarize_weather,
    weather_indicates_rain,
)
from app.services.scoring import PackingWeights
from app.services.weather import WeatherForecast

from fixtures import make_item, make_multi_day_weather, make_weather, sample_wardrobe

TRIP_DAY = date(2026, 7, 1)


def trip(duration=3, trip_type="leisure", formality=2, weather=None, today=TRIP_DAY) -> TripContext:
    return TripContext(duration=duration, trip_type=trip_type, formality=formality, weather=weather, today=today)


def by_name(result, category):
    return {s.name: s for s in result.items if s.category == category}


# --- season from weather ---

@pytest.mark.parametrize(
    "avg, season",
    [(30, "summer"), (25, "summer"), (18, "spring"), (15, "spring"), (10, "fall"), (5, "fall"), (4.9, "winter"), (0, "winter")],
)
def test_season_from_weather(avg, season):
    assert season_from_weather(make_weather(avg)) == season


def test_season_defaults_to_spring_without_weather():
    assert season_from_weather(None) == "spring"
    assert season_from_weather(WeatherForecast(daily=[])) == "spring"


# --- rain ---

def test_rain_when_most_days_are_wet():
    assert weather_indicates_rain(make_multi_day_weather([5, 8, 0])) is True


def test_no_rain_when_few_days_are_wet():
    assert weather_indicates_rain(make_multi_day_weather([0, 0, 1])) is False
    # one wet day in four is 25%
    assert weather_indicates_rain(make_multi_day_weather([9, 0, 0, 0])) is False


def test_no_rain_without_forecast():
    assert weather_indicates_rain(None) is False
    assert weather_indicates_rain(WeatherForecast(daily=[])) is False


def test_weather_summary():
    assert summarize_weather(None) is None
    assert summarize_weather(make_multi_day_weather([5, 8, 0])) == "avg 17.5°C over 3 days (spring), expect rain"


# --- trip context ---

def test_trip_context_normalizes_trip_type_and_formality():
    ctx = TripContext(duration=2, trip_type=" Beach ", formality=None)
    assert ctx.trip_type == "beach"
    assert ctx.formality == 0
    assert ctx.reference_date == date.today()


def test_trip_from_dates_counts_both_ends():
    ctx = TripContext.from_dates("2026-07-01", "2026-07-03", "city")
    assert ctx.duration == 3
    assert TripContext.from_dates("2026-07-01", "2026-07-01", "city").duration == 1


def test_trip_from_dates_rejects_reversed_range():
    with pytest.raises(InvalidInputError) as exc:
        TripContext.from_dates("2026-07-03", "2026-07-01", "city")
    assert exc.value.code == "invalid_date_range"


def test_trip_type_must_be_text():
    with pytest.raises(ValidationError):
        TripContext(duration=3, trip_type=5)
    with pytest.raises(InvalidInputError) as exc:
        TripContext.from_dates("2026-07-01", "2026-07-03", 5)
    assert exc.value.code == "invalid_trip_type"
    assert exc.value.field == "trip.trip_type"
    assert TripContext(duration=3, trip_type="").trip_type == "other"


def test_trip_from_dates_rejects_bad_formality():
    with pytest.raises(InvalidInputError) as exc:
        TripContext.from_dates("2026-07-01", "2026-07-03", "city", formality=9)
    assert exc.value.code == "invalid_formality"
    assert exc.value.field == "trip.formality"


# --- suggestions ---

def test_hot_leisure_trip_end_to_end():
    result = suggest_packing_items(sample_wardrobe(), trip(weather=make_weather(28)))

    assert result.season == "summer"
    assert result.target_formality == 2
    assert result.items
    for s in result.items:
        assert 0.0 <= s.score <= 1.0
        assert s.reasons
    assert {s.item_id for s in result.items} == {"1", "2", "3", "4", "5", "6", "8"}
    assert [s.item_id for s in result.items[:3]] == ["6", "3", "1"]
    scores = [s.score for s in result.items]
    assert scores == sorted(scores, reverse=True)


def test_prefers_season_appropriate_items():
    result = suggest_packing_items(sample_wardrobe(), trip(weather=make_weather(28)))
    tops = by_name(result, "tops")
    assert tops["T-Shirt"].score == pytest.approx(0.85)
    assert tops["Dress Shirt"].score == pytest.approx(0.49)
    assert tops["Polo"].score == pytest.approx(0.8875)
    assert tops["Dress Shirt"].reasons == ["Off-season", "Fresh — not worn recently"]


def test_hot_weather_favours_summer_tag_all_else_equal():
    items = [
        make_item("a", "tops", season=["spring", "fall"], formality=2),
        make_item("b", "tops", season=["summer"], formality=2),
    ]
    result = suggest_packing_items(items, trip(duration=1, weather=make_weather(30)))
    assert [s.item_id for s in result.items] == ["b"]


def test_prefers_formality_matching_items_for_business():
    result = suggest_packing_items(sample_wardrobe(), trip(trip_type="business", formality=4, weather=make_weather(18)))
    tops = by_name(result, "tops")
    assert tops["Dress Shirt"].score == pytest.approx(0.85)
    assert tops["T-Shirt"].score == pytest.approx(0.49)
    assert tops["Dress Shirt"].reasons == ["Good for spring", "Formality matches trip", "Fresh — not worn recently"]
    assert "Formality mismatch" in tops["T-Shirt"].reasons


def test_shoe_reasons_include_staple():
    result = suggest_packing_items(sample_wardrobe(), trip(weather=make_weather(28)))
    sneakers = by_name(result, "shoes")["Sneakers"]
    assert sneakers.score == pytest.approx(0.925)
    assert sneakers.reasons == ["Good for summer", "Fresh — not worn recently", "Versatile wardrobe staple"]
    assert "Dress Shoes" not in by_name(result, "shoes")


def test_category_breakdown_counts():
    result = suggest_packing_items(sample_wardrobe(), trip(duration=5, weather=None))
    breakdown = result.category_breakdown

    assert list(breakdown) == list(ITEM_CATEGORIES)
    assert (breakdown["tops"].needed, breakdown["tops"].suggested) == (4, 3)
    assert (breakdown["bottoms"].needed, breakdown["bottoms"].suggested) == (3, 2)
    assert (breakdown["shoes"].needed, breakdown["shoes"].suggested) == (1, 1)
    assert (breakdown["underwear"].needed, breakdown["underwear"].suggested) == (5, 1)
    assert breakdown["outerwear"].suggested == 0
    for b in breakdown.values():
        assert b.suggested <= b.needed
    assert result.season == "spring"


def test_empty_wardrobe():
    result = suggest_packing_items([], trip(duration=5))
    assert result.items == []
    assert all(b.suggested == 0 and b.needed >= 1 for b in result.category_breakdown.values())


def test_items_outside_category_table_are_never_picked():
    items = [make_item("bag", "bags"), make_item("t", "tops")]
    result = suggest_packing_items(items, trip())
    assert [s.item_id for s in result.items] == ["t"]
    assert "bags" not in result.category_breakdown


def test_ties_break_on_item_id():
    items = [make_item("b", "tops"), make_item("c", "tops"), make_item("a", "tops")]
    result = suggest_packing_items(items, trip(duration=2))
    # two tops needed
    assert [s.item_id for s in result.items] == ["a", "b"]


def test_freshness_measured_from_trip_reference_date():
    worn = make_item("w", "tops", last_worn_at="2026-07-01")
    result = suggest_packing_items([worn], trip())
    assert "Fresh — not worn recently" not in result.items[0].reasons

    later = suggest_packing_items([worn], trip(today=date(2026, 8, 15)))
    assert "Fresh — not worn recently" in later.items[0].reasons


def test_trip_type_formality_used_when_unset():
    assert suggest_packing_items([], trip(trip_type="wedding", formality=0)).target_formality == 5
    assert suggest_packing_items([], trip(trip_type="safari", formality=0)).target_formality == 3
    assert suggest_packing_items([], trip(trip_type="wedding", formality=2)).target_formality == 2


def test_custom_packing_weights():
    engine = PackingEngine(PackingWeights(season=1.0, formality=0.0, freshness=0.0, versatility=0.0))
    result = engine.suggest([make_item("s", "tops", season=["fall"])], trip(weather=make_weather(28)))
    assert result.items[0].score == pytest.approx(0.3)
