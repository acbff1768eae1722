"""Batch control surface request/response models."""

from typing import Optional

from pydantic import BaseModel, Field

from bandhub.models import MatchingStats


class BatchRequest(BaseModel):
    target: str
    dry_run: bool = False
    min_confidence: Optional[int] = Field(default=None, ge=0, le=100)
    limit: Optional[int] = Field(default=None, ge=1)


class BatchResult(BaseModel):
    target: str
    dry_run: bool
    stats: Optional[MatchingStats] = None
    match_rate: Optional[float] = None
    cleared_keys: Optional[int] = None
