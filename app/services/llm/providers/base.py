from __future__ import annotations

from typing import Protocol

from app.services.llm.types import ExplainItemsInput, ExplainItemsOutput


class LLMProvider(Protocol):
    async def explain_items(self, payload: ExplainItemsInput, *, timeout_ms: int) -> ExplainItemsOutput:
        ...


class NullProvider:
    """Safety net provider used when LLM is disabled."""

    name = "disabled"

    async def explain_items(self, payload: ExplainItemsInput, *, timeout_ms: int) -> ExplainItemsOutput:
        from app.services.llm.types import LLMUsage

        return ExplainItemsOutput(
            summary=None,
            explanations=[],
            usage=LLMUsage(model=self.name, prompt_version=payload.prompt_version, cached=True),
        )
