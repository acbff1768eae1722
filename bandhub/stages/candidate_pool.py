"""
Candidate filters — what the store should fetch for each discovery query.

- build_candidate_filter: related list. Any of same category, event name containment,
  event year, tag overlap; AnyVisible when the source has none of these.
- build_section_filter: "because you watched" sections. Same conditions minus the
  year; None when the watched video offers nothing to match on.
- build_fallback_filter: popularity-ranked backfill, same category when known.

All of them exclude the source's organization. score_candidates turns fetched rows
into ScoredVideos sorted by (score desc, views desc).
"""

from typing import Iterable, List, Optional, Set

from ..models.config import RecommendationConfig, resolve_recommendation_config
from ..models.filters import (
    AnyVisible,
    CandidateFilter,
    CategoryEquals,
    EventNameContains,
    EventYearEquals,
    TagsOverlap,
)
from ..models.scoring import ScoredVideo
from ..models.video import AttributableVideo
from .similarity import compute_similarity


def _content_conditions(source: AttributableVideo, include_year: bool) -> list:
    conditions = []
    if source.category_id:
        conditions.append(CategoryEquals(category_id=source.category_id))
    if source.event_name:
        conditions.append(EventNameContains(event_name=source.event_name))
    if include_year and source.event_year:
        conditions.append(EventYearEquals(event_year=source.event_year))
    if source.tags:
        conditions.append(TagsOverlap(tags=list(source.tags)))
    return conditions


def build_candidate_filter(source: AttributableVideo) -> CandidateFilter:
    conditions = _content_conditions(source, include_year=True) or [AnyVisible()]
    return CandidateFilter(
        any_of=conditions,
        exclude_org_id=source.attributed_org_id,
        ranking="relevance",
    )


def build_section_filter(source: AttributableVideo) -> Optional[CandidateFilter]:
    conditions = _content_conditions(source, include_year=False)
    if not conditions:
        return None
    return CandidateFilter(
        any_of=conditions,
        exclude_org_id=source.attributed_org_id,
        ranking="relevance",
    )


def build_fallback_filter(source: AttributableVideo) -> CandidateFilter:
    conditions = [CategoryEquals(category_id=source.category_id)] if source.category_id else []
    return CandidateFilter(
        any_of=conditions,
        exclude_org_id=source.attributed_org_id,
        ranking="popularity",
    )


def score_candidates(
    source: AttributableVideo,
    candidates: Iterable[AttributableVideo],
    exclude_ids: Optional[Set[str]] = None,
    config: Optional[RecommendationConfig] = None,
) -> List[ScoredVideo]:
    """Score every candidate not in exclude_ids (or the source itself), best first."""
    config = resolve_recommendation_config(config)
    excluded = set(exclude_ids or ())
    excluded.add(source.id)
    scored = []
    for candidate in candidates:
        if candidate.id in excluded:
            continue
        result = compute_similarity(source, candidate, config)
        scored.append(
            ScoredVideo(
                video=candidate,
                similarity_score=result.score,
                match_reason=result.reason,
            )
        )
    scored.sort(key=lambda s: (s.similarity_score, s.video.view_count), reverse=True)
    return scored
