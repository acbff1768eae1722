"""
Scoring model — ScoredVideo and the related-videos response assembled from it.

Contains:
- SimilarityResult: score (0-100, 2 decimals) and human-readable reason
- ScoredVideo: a candidate with its similarity score and reason
- BecauseYouWatchedSection / RelatedVideosResponse: assembler output
"""

from typing import List, Optional

from pydantic import BaseModel

from .video import AttributableVideo


class SimilarityResult(BaseModel):
    score: float
    reason: str


class ScoredVideo(BaseModel):
    """A candidate video with its discovery score."""

    video: AttributableVideo
    similarity_score: float
    match_reason: str
    is_fallback: bool = False

    @property
    def org_id(self) -> Optional[str]:
        return self.video.attributed_org_id


class SourceVideoRef(BaseModel):
    id: str
    title: str


class BecauseYouWatchedSection(BaseModel):
    source_video: SourceVideoRef
    videos: List[ScoredVideo]


class RelatedVideosResponse(BaseModel):
    videos: List[ScoredVideo]
    because_you_watched: Optional[List[BecauseYouWatchedSection]] = None
    fallback_reason: Optional[str] = None
