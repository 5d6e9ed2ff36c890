from typing import Iterable, List

from .primitives import clamp_unit, formality_score, freshness_score, season_score, variety_score
from .types import ItemForScoring, ScoredItem, ScoringContext
from .weights import WEAR_WEIGHTS, WearWeights


def rank_key(scored: ScoredItem) -> tuple:
    """Score descending; equal scores fall back to item id for a stable order."""
    return (-scored.score, scored.item_id)


class WearScorer:
    """
    Ranks wardrobe items for "what should I wear today".

    Combines four factors:
    - Freshness: days since last worn (35%)
    - Variety: total wear count, rarely worn items first (25%)
    - Season: item season tags vs current season (25%)
    - Formality: distance from the occasion's formality (15%)
    """

    def __init__(self, weights: WearWeights = WEAR_WEIGHTS):
        self.weights = weights

    def score_item(self, item: ItemForScoring, ctx: ScoringContext) -> ScoredItem:
        reasons: List[str] = []

        freshness = freshness_score(item.last_worn_at, ctx.today)
        variety = variety_score(item.times_worn)
        season = season_score(item.season, ctx.current_season)
        formality = formality_score(item.formality, ctx.target_formality)

        if freshness >= 0.9:
            reasons.append("Never worn before" if item.never_worn else "Not worn recently")
        elif freshness < 0.3:
            reasons.append("Worn recently")

        if variety >= 0.8:
            reasons.append("Rarely worn - try something different")

        if season == 1.0:
            reasons.append(f"Perfect for {ctx.current_season}")
        elif season < 0.5:
            reasons.append("Not ideal for current season")

        if ctx.target_formality is not None:
            if formality == 1.0:
                reasons.append("Formality matches occasion")
            elif formality < 0.5:
                reasons.append("Formality mismatch for occasion")

        w = self.weights
        score = (
            freshness * w.freshness
            + variety * w.variety
            + season * w.season
            + formality * w.formality
        )

        return ScoredItem(
            item_id=item.id,
            name=item.name,
            category=item.category,
            score=clamp_unit(score),
            reasons=reasons,
        )

    def rank(self, items: Iterable[ItemForScoring], ctx: ScoringContext) -> List[ScoredItem]:
        return sorted((self.score_item(item, ctx) for item in items), key=rank_key)


_default_scorer = WearScorer()


def score_item_for_wear(item: ItemForScoring, ctx: ScoringContext) -> ScoredItem:
    return _default_scorer.score_item(item, ctx)


def score_and_rank_items(items: Iterable[ItemForScoring], ctx: ScoringContext) -> List[ScoredItem]:
    return _default_scorer.rank(items, ctx)
