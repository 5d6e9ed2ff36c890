import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from app.core.errors import InvalidInputError
from app.core.taxonomy import ITEM_CATEGORIES, TRIP_TYPES, normalize_trip_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryRatio:
    """Items per trip day for a category, optionally capped."""
    category: str
    per_day: float
    cap: Optional[int] = None

    def base_count(self, days: int) -> int:
        count = math.ceil(days * self.per_day)
        if self.cap is not None:
            count = min(count, self.cap)
        return count


# category -> (items per day, cap)
_PER_DAY: Mapping[str, Tuple[float, Optional[int]]] = {
    "tops": (0.8, None),
    "bottoms": (0.5, None),
    "outerwear": (0.15, 2),
    "shoes": (0.2, 3),
    "accessories": (0.3, 5),
    "dresses": (0.3, None),
    "activewear": (0.2, 3),
    "swimwear": (0.15, 2),
    "sleepwear": (0.3, 3),
    "underwear": (1.0, None),  # one per day
}

# Selection order follows the taxonomy; a category without a ratio fails at import
CATEGORY_RATIOS: Tuple[CategoryRatio, ...] = tuple(CategoryRatio(c, *_PER_DAY[c]) for c in ITEM_CATEGORIES)

# Trip type -> formality level (1=very casual, 5=very formal)
TRIP_TYPE_FORMALITY: Mapping[str, int] = MappingProxyType({
    "business": 4,
    "conference": 4,
    "wedding": 5,
    "city": 3,
    "leisure": 2,
    "beach": 1,
    "adventure": 1,
    "other": 3,
})
DEFAULT_FORMALITY = 3

# Trip type adjustments to category quantities; missing entries mean x1
TRIP_TYPE_CATEGORY_MULTIPLIERS: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "beach": MappingProxyType({"swimwear": 2, "activewear": 1.5, "outerwear": 0.5}),
    "adventure": MappingProxyType({"activewear": 2, "outerwear": 1.5, "dresses": 0.2}),
    "business": MappingProxyType({"outerwear": 1.5, "activewear": 0.5, "swimwear": 0.2}),
    "wedding": MappingProxyType({"dresses": 1.5, "accessories": 1.5, "activewear": 0.3}),
})


def round_half_up(value: float) -> int:
    # round() is banker's rounding; 2.5 must become 3 here
    return math.floor(value + 0.5)


def _trip_type(value: object) -> str:
    try:
        trip_type = normalize_trip_type(value)
    except ValueError as e:
        raise InvalidInputError(str(e), "trip_type", repr(value)) from e
    if trip_type not in TRIP_TYPES:
        logger.debug("packing: unknown trip type=%s, using defaults", trip_type)
    return trip_type


def trip_formality(trip_type: str, formality: Optional[int] = None) -> int:
    if formality:
        return formality
    return TRIP_TYPE_FORMALITY.get(_trip_type(trip_type), DEFAULT_FORMALITY)


def calculate_category_needs(duration: int, trip_type: str) -> Dict[str, int]:
    """How many items of each category a trip of `duration` days needs."""
    if isinstance(duration, bool) or not isinstance(duration, int) or duration < 1:
        raise InvalidInputError("invalid_duration", "duration", repr(duration))

    multipliers = TRIP_TYPE_CATEGORY_MULTIPLIERS.get(_trip_type(trip_type), {})
    needs: Dict[str, int] = {}
    for ratio in CATEGORY_RATIOS:
        base = ratio.base_count(duration)
        multiplier = multipliers.get(ratio.category, 1)
        needs[ratio.category] = max(1, round_half_up(base * multiplier))
    return needs
