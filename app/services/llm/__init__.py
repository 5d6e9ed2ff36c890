from __future__ import annotations

import hashlib
import json
from typing import Any, Dict

from app.core.cache import cache_json_get, cache_json_set
from app.core.config import settings
from app.services.llm.providers.base import LLMProvider, NullProvider
from app.services.llm.prompts import PROMPT_VERSION
from app.services.llm.types import ExplainItemsInput, ExplainItemsOutput, LLMUsage

_provider: LLMProvider | None = None


def _hash_blob(data: Dict[str, Any]) -> str:
    return hashlib.sha256(json.dumps(data, sort_keys=True, default=str).encode()).hexdigest()


def _get_provider() -> LLMProvider:
    global _provider
    if _provider:
        return _provider
    if not settings.LLM_ENABLED:
        _provider = NullProvider()
        return _provider
    name = (settings.LLM_PROVIDER or "local").lower()
    if name == "openai":
        from app.services.llm.providers.openai import OpenAIProvider

        _provider = OpenAIProvider(settings.LLM_MODEL_EXPLAIN)
    else:
        _provider = NullProvider()
    return _provider


def set_provider(provider: LLMProvider | None) -> None:
    """Swap the active provider (None re-resolves from settings)."""
    global _provider
    _provider = provider


async def explain_items(payload: ExplainItemsInput) -> ExplainItemsOutput:
    payload.prompt_version = payload.prompt_version or PROMPT_VERSION
    if not settings.LLM_ENABLED:
        return ExplainItemsOutput(
            usage=LLMUsage(model="disabled", cached=True, prompt_version=payload.prompt_version),
        )

    cache_key = f"llm:explain-items:{payload.prompt_version}:{_hash_blob(payload.model_dump())}"
    cached = await cache_json_get(cache_key)
    if cached:
        out = ExplainItemsOutput.model_validate(cached)
        out.usage.cached = True
        out.usage.cache_key = cache_key
        return out

    provider = _get_provider()
    out = await provider.explain_items(payload, timeout_ms=settings.LLM_EXPLAIN_TIMEOUT_MS)
    out.usage.cached = False
    out.usage.cache_key = cache_key
    if out.explanations or out.summary:
        await cache_json_set(cache_key, out.model_dump(), settings.LLM_CACHE_TTL_S)
    return out
