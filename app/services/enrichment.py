"""
Optional natural-language polish over scored results.

Enrichment only decorates: it attaches an `explanation` per item and a
summary line. Item identity, order, scores and selection are taken from the
deterministic result as-is, and any provider failure falls back to text
built from the rule-based reasons.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from app.core.config import settings
from app.services import llm as llm_service
from app.services.llm.types import ExplainItemIn, ExplainItemsInput, ExplainItemsOutput
from app.services.packing import CategoryBreakdown, PackingSuggestion, TripContext, summarize_weather
from app.services.scoring import ScoredItem, ScoringContext

logger = logging.getLogger("uvicorn.error")


@dataclass
class ExplainedItem:
    item_id: str
    name: str
    category: str
    score: float
    reasons: List[str]
    explanation: str


@dataclass
class EnrichedPackingSuggestion:
    items: List[ExplainedItem]
    category_breakdown: Dict[str, CategoryBreakdown]
    season: str
    target_formality: int
    summary: str
    ai_powered: bool = False


@dataclass
class EnrichedWearRecommendations:
    items: List[ExplainedItem]
    season: str
    summary: str
    ai_powered: bool = False


def fallback_explanation(reasons: Sequence[str]) -> str:
    if not reasons:
        return ""
    return ". ".join(reasons) + "."


def _explain_inputs(items: Sequence[ScoredItem]) -> List[ExplainItemIn]:
    limit = settings.LLM_MAX_EXPLAINED_ITEMS
    return [
        ExplainItemIn(
            item_id=s.item_id,
            name=s.name,
            category=s.category,
            score=s.score,
            reasons=list(s.reasons),
        )
        for s in items[:limit]
    ]


async def _explain(payload: ExplainItemsInput) -> Optional[ExplainItemsOutput]:
    if not settings.LLM_ENABLED or not payload.items:
        return None
    try:
        out = await llm_service.explain_items(payload)
    except Exception as e:
        logger.warning("%s-explain llm failed reason=%s", payload.task, e)
        return None
    logger.info(
        "%s-explain llm model=%s cached=%s latency_ms=%s",
        payload.task,
        out.usage.model,
        out.usage.cached,
        out.usage.latency_ms,
    )
    if not out.explanations and not out.summary:
        return None
    return out


def _merge(items: Sequence[ScoredItem], out: Optional[ExplainItemsOutput]) -> List[ExplainedItem]:
    by_id: Dict[str, str] = {}
    if out is not None:
        known = {s.item_id for s in items}
        by_id = {e.item_id: e.explanation for e in out.explanations if e.item_id in known}
    return [
        ExplainedItem(
            item_id=s.item_id,
            name=s.name,
            category=s.category,
            score=s.score,
            reasons=list(s.reasons),
            explanation=by_id.get(s.item_id) or fallback_explanation(s.reasons),
        )
        for s in items
    ]


async def enrich_packing_suggestion(
    suggestion: PackingSuggestion,
    trip: TripContext,
    destination: Optional[str] = None,
) -> EnrichedPackingSuggestion:
    fallback_summary = f"Packed {len(suggestion.items)} items for your {trip.duration}-day {trip.trip_type} trip."
    context = {
        "duration": trip.duration,
        "trip_type": trip.trip_type,
        "formality": suggestion.target_formality,
        "season": suggestion.season,
    }
    if destination:
        context["destination"] = destination
    weather_summary = summarize_weather(trip.weather)
    if weather_summary:
        context["weather"] = weather_summary

    out = await _explain(
        ExplainItemsInput(
            task="packing",
            context=context,
            category_breakdown={
                c: {"needed": b.needed, "suggested": b.suggested}
                for c, b in suggestion.category_breakdown.items()
            },
            items=_explain_inputs(suggestion.items),
        )
    )
    return EnrichedPackingSuggestion(
        items=_merge(suggestion.items, out),
        category_breakdown=suggestion.category_breakdown,
        season=suggestion.season,
        target_formality=suggestion.target_formality,
        summary=(out.summary if out and out.summary else fallback_summary),
        ai_powered=out is not None,
    )


async def enrich_wear_recommendations(
    items: Sequence[ScoredItem],
    ctx: ScoringContext,
) -> EnrichedWearRecommendations:
    fallback_summary = f"Top {len(items)} picks for {ctx.current_season}."
    context = {"season": ctx.current_season, "today": ctx.today.isoformat()}
    if ctx.target_formality is not None:
        context["target_formality"] = ctx.target_formality

    out = await _explain(ExplainItemsInput(task="wear", context=context, items=_explain_inputs(items)))
    return EnrichedWearRecommendations(
        items=_merge(items, out),
        season=ctx.current_season,
        summary=(out.summary if out and out.summary else fallback_summary),
        ai_powered=out is not None,
    )
