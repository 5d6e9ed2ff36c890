from __future__ import annotations

import asyncio
import json
import time
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI

import logging

from app.services.llm.types import (
    ExplainItemsInput,
    ExplainItemsOutput,
    ItemExplanationOut,
    LLMUsage,
)
from app.services.llm.prompts import build_explain_items_prompt

logger = logging.getLogger("uvicorn.error")


class OpenAIProvider:
    name = "openai"

    def __init__(self, model_explain: str, client: Optional[Any] = None):
        self.client = client or AsyncOpenAI()
        self.model_explain = model_explain

    async def _chat(self, messages: List[Dict[str, Any]], model: str, timeout_ms: int) -> Dict[str, Any]:
        start = time.perf_counter()
        logger.info("llm:openai request model=%s timeout_ms=%s", model, timeout_ms)
        try:
            resp = await asyncio.wait_for(
                self.client.chat.completions.create(
                    model=model,
                    messages=messages,
                    temperature=0.2,
                    response_format={"type": "json_object"},
                ),
                timeout=timeout_ms / 1000.0,
            )
        except asyncio.TimeoutError:
            logger.warning("llm:openai timeout model=%s timeout_ms=%s", model, timeout_ms)
            raise
        latency_ms = int((time.perf_counter() - start) * 1000)
        choice = resp.choices[0].message.content if resp.choices else "{}"
        return {
            "content": choice or "{}",
            "latency_ms": latency_ms,
            "tokens_in": getattr(resp.usage, "prompt_tokens", 0) if resp.usage else 0,
            "tokens_out": getattr(resp.usage, "completion_tokens", 0) if resp.usage else 0,
        }

    async def explain_items(self, payload: ExplainItemsInput, *, timeout_ms: int) -> ExplainItemsOutput:
        messages = build_explain_items_prompt(payload)
        res = await self._chat(messages, self.model_explain, timeout_ms)
        summary, explanations = _safe_parse_explanations(res["content"])
        return ExplainItemsOutput(
            summary=summary,
            explanations=explanations,
            usage=LLMUsage(
                model=self.model_explain,
                tokens_in=res["tokens_in"],
                tokens_out=res["tokens_out"],
                latency_ms=res["latency_ms"],
                prompt_version=payload.prompt_version,
            ),
        )


def _extract_json(raw: str) -> Dict[str, Any]:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        # Tolerate prose around a JSON object
        start, end = raw.find("{"), raw.rfind("}")
        if start == -1 or end <= start:
            raise
        return json.loads(raw[start : end + 1])


def _safe_parse_explanations(raw: str) -> tuple[Optional[str], List[ItemExplanationOut]]:
    try:
        data = _extract_json(raw)
    except json.JSONDecodeError:
        return None, []
    if not isinstance(data, dict):
        return None, []
    summary = data.get("summary")
    out: List[ItemExplanationOut] = []
    for entry in data.get("items") or []:
        if not isinstance(entry, dict):
            continue
        item_id = entry.get("item_id") or entry.get("itemId")
        text = entry.get("explanation") or entry.get("aiExplanation")
        if item_id and isinstance(text, str) and text.strip():
            out.append(ItemExplanationOut(item_id=str(item_id), explanation=text.strip()))
    return (summary.strip() if isinstance(summary, str) and summary.strip() else None), out
