from typing import List, Optional
from pydantic import BaseModel, Field


class WardrobeItemIn(BaseModel):
    id: str
    name: str = ""
    category: str = ""
    season: List[str] = Field(default_factory=list)
    formality: int = 3
    times_worn: int = 0
    last_worn_at: Optional[str] = None


class ScoredItemOut(BaseModel):
    item_id: str
    name: str = ""
    category: str = ""
    score: float
    reasons: List[str] = Field(default_factory=list)
    explanation: Optional[str] = None


class WearRecommendIn(BaseModel):
    items: List[WardrobeItemIn]
    today: Optional[str] = None
    season: Optional[str] = None
    target_formality: Optional[int] = None
    limit: Optional[int] = Field(None, ge=1)
    explain: bool = False


class WearRecommendOut(BaseModel):
    season: str
    today: str
    items: List[ScoredItemOut]
    summary: Optional[str] = None
    ai_powered: bool = False
