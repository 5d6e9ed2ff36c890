import pytest

from app.core.errors import InvalidInputError
from app.core.taxonomy import ITEM_CATEGORIES, TRIP_TYPES
from app.services.packing import (
    CATEGORY_RATIOS,
    TRIP_TYPE_FORMALITY,
    calculate_category_needs,
    round_half_up,
    trip_formality,
)


def test_needs_cover_every_category_in_table_order():
    needs = calculate_category_needs(4, "city")
    assert list(needs) == list(ITEM_CATEGORIES)


def test_scales_with_trip_duration():
    short = calculate_category_needs(3, "leisure")
    long = calculate_category_needs(10, "leisure")
    assert long["tops"] > short["tops"]
    assert long["underwear"] > short["underwear"]


def test_one_underwear_per_day():
    assert calculate_category_needs(5, "leisure")["underwear"] == 5


def test_week_long_leisure_trip():
    assert calculate_category_needs(7, "leisure") == {
        "tops": 6,
        "bottoms": 4,
        "outerwear": 2,
        "shoes": 2,
        "accessories": 3,
        "dresses": 3,
        "activewear": 2,
        "swimwear": 2,
        "sleepwear": 3,
        "underwear": 7,
    }


def test_beach_gets_more_swimwear_than_business():
    beach = calculate_category_needs(5, "beach")
    business = calculate_category_needs(5, "business")
    assert beach["swimwear"] > business["swimwear"]
    assert beach["swimwear"] == 2
    assert business["swimwear"] == 1


def test_caps_hold_regardless_of_duration():
    needs = calculate_category_needs(30, "leisure")
    assert needs["outerwear"] == 2
    assert needs["shoes"] == 3
    assert needs["accessories"] == 5
    assert needs["sleepwear"] == 3


def test_at_least_one_per_category():
    for trip_type in ("leisure", "business", "beach", "adventure", "wedding"):
        needs = calculate_category_needs(1, trip_type)
        assert all(count >= 1 for count in needs.values()), trip_type


def test_multiplier_rounds_half_up():
    # 3 dresses * 1.5 = 4.5
    needs = calculate_category_needs(7, "wedding")
    assert needs["dresses"] == 5
    assert needs["accessories"] == 5


def test_adventure_adjustments():
    needs = calculate_category_needs(7, "adventure")
    assert needs["activewear"] == 4
    assert needs["outerwear"] == 3
    assert needs["dresses"] == 1


def test_unknown_trip_type_uses_base_ratios():
    assert calculate_category_needs(6, "safari") == calculate_category_needs(6, "leisure")


@pytest.mark.parametrize("duration", [0, -3, 2.5, None])
def test_rejects_invalid_duration(duration):
    with pytest.raises(InvalidInputError) as exc:
        calculate_category_needs(duration, "leisure")
    assert exc.value.code == "invalid_duration"


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(4.5) == 5
    assert round_half_up(0.49) == 0
    assert round_half_up(0.6) == 1


def test_trip_formality_defaults():
    assert trip_formality("business") == 4
    assert trip_formality("wedding") == 5
    assert trip_formality("beach") == 1
    assert trip_formality("safari") == 3
    assert trip_formality("beach", 4) == 4
    assert trip_formality("beach", 0) == 1


def test_every_trip_type_has_a_formality():
    assert set(TRIP_TYPE_FORMALITY) == set(TRIP_TYPES)


def test_ratio_table_follows_category_taxonomy():
    assert [r.category for r in CATEGORY_RATIOS] == list(ITEM_CATEGORIES)


def test_trip_type_is_case_insensitive():
    assert calculate_category_needs(5, " Beach ") == calculate_category_needs(5, "beach")
    assert calculate_category_needs(5, "Beach")["swimwear"] == 2
    assert trip_formality("Wedding") == 5


def test_missing_trip_type_means_other():
    assert calculate_category_needs(3, None) == calculate_category_needs(3, "other")
    assert trip_formality("") == 3


def test_non_text_trip_type_rejected():
    with pytest.raises(InvalidInputError) as exc:
        calculate_category_needs(5, 7)
    assert exc.value.code == "invalid_trip_type"
    assert exc.value.field == "trip_type"
