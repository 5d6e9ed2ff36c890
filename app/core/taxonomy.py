from typing import Literal

Season = Literal["spring", "summer", "fall", "winter"]

SEASONS: tuple[str, ...] = ("spring", "summer", "fall", "winter")

# Packing engine category table, in selection order
ITEM_CATEGORIES: tuple[str, ...] = (
    "tops",
    "bottoms",
    "outerwear",
    "shoes",
    "accessories",
    "dresses",
    "activewear",
    "swimwear",
    "sleepwear",
    "underwear",
)

TRIP_TYPES: tuple[str, ...] = (
    "business",
    "leisure",
    "adventure",
    "beach",
    "city",
    "wedding",
    "conference",
    "other",
)

FORMALITY_MIN = 1
FORMALITY_MAX = 5


def normalize_season(value: str) -> str:
    s = (value or "").strip().lower()
    if s == "autumn":
        return "fall"
    if s not in SEASONS:
        raise ValueError("invalid_season")
    return s


def normalize_trip_type(value: object) -> str:
    """Lowercased trip type; missing or blank means "other"."""
    if value is None:
        return "other"
    if not isinstance(value, str):
        raise ValueError("invalid_trip_type")
    return value.strip().lower() or "other"
