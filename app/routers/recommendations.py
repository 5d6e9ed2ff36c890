from datetime import date
from typing import Optional

from fastapi import APIRouter
from pydantic import ValidationError

from app.core.config import settings
from app.schemas.recommendations import ScoredItemOut, WearRecommendIn, WearRecommendOut
from app.services.enrichment import enrich_wear_recommendations
from app.services.scoring import (
    ScoringContext,
    as_invalid_input,
    coerce_date,
    parse_items,
    score_and_rank_items,
)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


def _wear_context(today: Optional[str], season: Optional[str], target_formality: Optional[int]) -> ScoringContext:
    ref = coerce_date(today, "today") if today else date.today()
    if not season:
        return ScoringContext.for_date(ref, target_formality)
    try:
        return ScoringContext(current_season=season, today=ref, target_formality=target_formality)
    except ValidationError as e:
        raise as_invalid_input(e) from e


@router.post("/wear", response_model=WearRecommendOut)
async def recommend_wear(payload: WearRecommendIn):
    items = parse_items(i.model_dump() for i in payload.items)
    ctx = _wear_context(payload.today, payload.season, payload.target_formality)
    ranked = score_and_rank_items(items, ctx)[: payload.limit or settings.WEAR_RECOMMENDATION_LIMIT]

    if not payload.explain:
        return WearRecommendOut(
            season=ctx.current_season,
            today=ctx.today.isoformat(),
            items=[
                ScoredItemOut(
                    item_id=s.item_id,
                    name=s.name,
                    category=s.category,
                    score=s.score,
                    reasons=s.reasons,
                )
                for s in ranked
            ],
        )

    enriched = await enrich_wear_recommendations(ranked, ctx)
    return WearRecommendOut(
        season=enriched.season,
        today=ctx.today.isoformat(),
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
        summary=enriched.summary,
        ai_powered=enriched.ai_powered,
    )
