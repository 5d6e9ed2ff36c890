from .wardrobe_fixtures import (
    make_item,
    make_multi_day_weather,
    make_weather,
    sample_wardrobe,
    sample_wardrobe_raw,
)

__all__ = [
    "make_item",
    "make_multi_day_weather",
    "make_weather",
    "sample_wardrobe",
    "sample_wardrobe_raw",
]
