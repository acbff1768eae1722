"""
BandHub discovery core — attribution and related-video scoring.

Single entry point for the core package:
- models/: Organization, AttributableVideo, MatchingConfig, RecommendationConfig, filters
- aliases/: generate_aliases, build_alias_index
- matching/: find_matches, is_battle_video, decide_attribution
- stages/: compute_similarity, diversify_by_org, compose_with_fallback, candidate filters

Everything here is pure; persistence and caching live in bandhub_server.
"""

from .aliases import OrganizationAliases, build_alias_index, generate_aliases
from .matching import (
    attribute_video,
    attribute_videos,
    decide_attribution,
    find_event_matches,
    find_matches,
    is_battle_video,
    searchable_text,
    should_exclude,
    summarize_outcomes,
)
from .models import (
    AttributableVideo,
    AttributionOutcome,
    CandidateFilter,
    MatchingConfig,
    MatchingStats,
    MatchResult,
    Organization,
    RecommendationConfig,
    RelatedVideosResponse,
    ScoredVideo,
)
from .stages import (
    build_candidate_filter,
    build_fallback_filter,
    build_section_filter,
    compose_with_fallback,
    compute_similarity,
    diversify_by_org,
    score_candidates,
)

__version__ = "1.0.0"

__all__ = [
    "AttributableVideo",
    "AttributionOutcome",
    "CandidateFilter",
    "MatchResult",
    "MatchingConfig",
    "MatchingStats",
    "Organization",
    "OrganizationAliases",
    "RecommendationConfig",
    "RelatedVideosResponse",
    "ScoredVideo",
    "attribute_video",
    "attribute_videos",
    "build_alias_index",
    "build_candidate_filter",
    "build_fallback_filter",
    "build_section_filter",
    "compose_with_fallback",
    "compute_similarity",
    "decide_attribution",
    "diversify_by_org",
    "find_event_matches",
    "find_matches",
    "generate_aliases",
    "is_battle_video",
    "score_candidates",
    "searchable_text",
    "should_exclude",
    "summarize_outcomes",
]
