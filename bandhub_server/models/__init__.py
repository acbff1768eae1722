"""Pydantic request/response models for the API."""

from .batch import BatchRequest, BatchResult
from .matching import MatchPreviewRequest, MatchPreviewResponse

__all__ = [
    "BatchRequest",
    "BatchResult",
    "MatchPreviewRequest",
    "MatchPreviewResponse",
]
