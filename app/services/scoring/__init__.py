from .primitives import (
    clamp_unit,
    coerce_date,
    coerce_instant,
    days_between,
    formality_score,
    freshness_score,
    season_of,
    season_score,
    variety_score,
)
from .types import (
    ItemForScoring,
    ScoredItem,
    ScoringContext,
    as_invalid_input,
    parse_items,
)
from .weights import PACKING_WEIGHTS, WEAR_WEIGHTS, PackingWeights, WearWeights
from .wear import WearScorer, rank_key, score_and_rank_items, score_item_for_wear

__all__ = [
    "clamp_unit",
    "coerce_date",
    "coerce_instant",
    "days_between",
    "formality_score",
    "freshness_score",
    "season_of",
    "season_score",
    "variety_score",
    "ItemForScoring",
    "ScoredItem",
    "ScoringContext",
    "as_invalid_input",
    "parse_items",
    "PACKING_WEIGHTS",
    "WEAR_WEIGHTS",
    "PackingWeights",
    "WearWeights",
    "WearScorer",
    "rank_key",
    "score_and_rank_items",
    "score_item_for_wear",
]
