from __future__ import annotations

import json
from typing import Dict, List

from app.services.llm.types import ExplainItemsInput


PROMPT_VERSION = "p1"

PACKING_SYS = (
    "You are a packing assistant. You are given rule-based packing suggestions for a trip. "
    "Do not add, remove or reorder items and never change scores. "
    "Return ONLY JSON: {\"summary\": \"1-2 sentence packing plan\", "
    "\"items\": [{\"item_id\": \"...\", \"explanation\": \"one sentence why this item suits the trip\"}]}."
)

WEAR_SYS = (
    "You explain what-to-wear recommendations using only the provided scores, reasons and context. "
    "Do not add, remove or reorder items. "
    "Return ONLY JSON: {\"summary\": \"one sentence\", "
    "\"items\": [{\"item_id\": \"...\", \"explanation\": \"one sentence\"}]}."
)


def build_explain_items_prompt(payload: ExplainItemsInput) -> List[Dict[str, str]]:
    user_payload = {
        "task": payload.task,
        "context": payload.context,
        "category_breakdown": payload.category_breakdown,
        "items": [
            {
                "item_id": it.item_id,
                "name": it.name,
                "category": it.category,
                "score": round(it.score, 2),
                "reasons": it.reasons,
            }
            for it in payload.items
        ],
        "prompt_version": payload.prompt_version or PROMPT_VERSION,
    }
    system = WEAR_SYS if payload.task == "wear" else PACKING_SYS
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": json.dumps(user_payload, ensure_ascii=False)},
    ]
