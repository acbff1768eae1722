"""Data models for attribution and discovery scoring."""

from .config import (
    DEFAULT_MATCHING_CONFIG,
    DEFAULT_RECOMMENDATION_CONFIG,
    MatchingConfig,
    RecommendationConfig,
    resolve_matching_config,
    resolve_recommendation_config,
)
from .filters import (
    AnyVisible,
    CandidateFilter,
    CategoryEquals,
    EventNameContains,
    EventYearEquals,
    TagsOverlap,
)
from .matching import AttributionOutcome, MatchingStats, MatchResult, MatchType
from .organization import Organization, ensure_organizations
from .scoring import (
    BecauseYouWatchedSection,
    RelatedVideosResponse,
    ScoredVideo,
    SimilarityResult,
    SourceVideoRef,
)
from .video import AttributableVideo, WatchEvent, ensure_videos

__all__ = [
    "DEFAULT_MATCHING_CONFIG",
    "DEFAULT_RECOMMENDATION_CONFIG",
    "AnyVisible",
    "AttributableVideo",
    "AttributionOutcome",
    "BecauseYouWatchedSection",
    "CandidateFilter",
    "CategoryEquals",
    "EventNameContains",
    "EventYearEquals",
    "MatchResult",
    "MatchType",
    "MatchingConfig",
    "MatchingStats",
    "Organization",
    "RecommendationConfig",
    "RelatedVideosResponse",
    "ScoredVideo",
    "SimilarityResult",
    "SourceVideoRef",
    "TagsOverlap",
    "WatchEvent",
    "ensure_organizations",
    "ensure_videos",
    "resolve_matching_config",
    "resolve_recommendation_config",
]
