import logging
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List

from app.services.scoring import (
    PACKING_WEIGHTS,
    ItemForScoring,
    PackingWeights,
    ScoredItem,
    clamp_unit,
    formality_score,
    freshness_score,
    rank_key,
    season_score,
)
from .needs import CATEGORY_RATIOS, calculate_category_needs, trip_formality
from .types import CategoryBreakdown, PackingSuggestion, TripContext
from .weather import season_from_weather

logger = logging.getLogger(__name__)

VERSATILITY_FULL_AT = 20


def versatility_score(times_worn: int) -> float:
    """Frequently worn items are proven staples; saturates at 20 wears."""
    return min(times_worn / VERSATILITY_FULL_AT, 1.0)


class PackingEngine:
    """
    Picks the best items per category for a trip.

    Items are scored on season fit (30%), formality fit (30%), freshness
    (25%) and versatility (15%), grouped by category, and the top N per
    category are taken, N coming from the trip's category needs. Categories
    outside the fixed category table are never selected.
    """

    def __init__(self, weights: PackingWeights = PACKING_WEIGHTS):
        self.weights = weights

    def score_item(
        self,
        item: ItemForScoring,
        season: str,
        target_formality: int,
        today: date,
    ) -> ScoredItem:
        reasons: List[str] = []

        season_fit = season_score(item.season, season)
        if season_fit == 1.0:
            reasons.append(f"Good for {season}")
        if season_fit < 0.5:
            reasons.append("Off-season")

        formality_fit = formality_score(item.formality, target_formality)
        if formality_fit == 1.0:
            reasons.append("Formality matches trip")
        if formality_fit < 0.5:
            reasons.append("Formality mismatch")

        freshness = freshness_score(item.last_worn_at, today)
        if freshness >= 0.9:
            reasons.append("Fresh — not worn recently")

        versatility = versatility_score(item.times_worn)
        if versatility > 0.5:
            reasons.append("Versatile wardrobe staple")

        w = self.weights
        score = (
            season_fit * w.season
            + formality_fit * w.formality
            + freshness * w.freshness
            + versatility * w.versatility
        )

        return ScoredItem(
            item_id=item.id,
            name=item.name,
            category=item.category,
            score=clamp_unit(score),
            reasons=reasons,
        )

    def suggest(self, items: Iterable[ItemForScoring], trip: TripContext) -> PackingSuggestion:
        season = season_from_weather(trip.weather)
        target = trip_formality(trip.trip_type, trip.formality)
        today = trip.reference_date

        by_category: Dict[str, List[ScoredItem]] = defaultdict(list)
        for item in items:
            scored = self.score_item(item, season, target, today)
            by_category[scored.category].append(scored)
        for group in by_category.values():
            group.sort(key=rank_key)

        needs = calculate_category_needs(trip.duration, trip.trip_type)

        suggested: List[ScoredItem] = []
        breakdown: Dict[str, CategoryBreakdown] = {}
        for ratio in CATEGORY_RATIOS:
            needed = needs[ratio.category]
            picked = by_category.get(ratio.category, [])[:needed]
            suggested.extend(picked)
            breakdown[ratio.category] = CategoryBreakdown(needed=needed, suggested=len(picked))

        skipped = sorted(c for c in by_category if c not in breakdown)
        if skipped:
            logger.debug("packing: ignoring categories outside table categories=%s", skipped)

        suggested.sort(key=rank_key)
        return PackingSuggestion(
            items=suggested,
            category_breakdown=breakdown,
            season=season,
            target_formality=target,
        )


_default_engine = PackingEngine()


def suggest_packing_items(items: Iterable[ItemForScoring], trip: TripContext) -> PackingSuggestion:
    return _default_engine.suggest(items, trip)
