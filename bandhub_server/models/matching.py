"""Matching preview models (moderation)."""

from typing import List, Optional

from pydantic import BaseModel, Field

from bandhub.models import AttributionOutcome, MatchResult


class MatchPreviewRequest(BaseModel):
    title: str = ""
    description: str = ""
    channel_label: str = ""
    min_confidence: Optional[int] = Field(default=None, ge=0, le=100)


class MatchPreviewResponse(BaseModel):
    matches: List[MatchResult]
    is_battle: bool
    outcome: AttributionOutcome
