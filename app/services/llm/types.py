from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class LLMUsage(BaseModel):
    model: str = ""
    tokens_in: int = 0
    tokens_out: int = 0
    latency_ms: int = 0
    cached: bool = False
    cache_key: Optional[str] = None
    prompt_version: str = "p1"


class ExplainItemIn(BaseModel):
    item_id: str
    name: str = ""
    category: str = ""
    score: float = 0.0
    reasons: List[str] = Field(default_factory=list)


class ExplainItemsInput(BaseModel):
    task: str = "packing"  # packing | wear
    context: Dict[str, Any] = Field(default_factory=dict)
    category_breakdown: Dict[str, Dict[str, int]] = Field(default_factory=dict)
    items: List[ExplainItemIn] = Field(default_factory=list)
    prompt_version: str = "p1"


class ItemExplanationOut(BaseModel):
    item_id: str
    explanation: str


class ExplainItemsOutput(BaseModel):
    summary: Optional[str] = None
    explanations: List[ItemExplanationOut] = Field(default_factory=list)
    usage: LLMUsage = Field(default_factory=LLMUsage)
