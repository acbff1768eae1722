"""
Similarity scoring — how related a candidate video is to the one being watched.

Score (0-100) is a weighted sum:
- same category:        weight_same_category * 100  ("Similar style")
- same event name:      weight_same_event * 100     ("Same event")
  or, failing that, same event year: weight_same_event * 100 * same_year_credit ("Same year")
- matching tags:        weight_matching_tags * 100 * min(1, matches / len(source.tags))
- quality bonus:        full weight at high_quality_threshold ("High quality"), half at medium

Same-organization candidates are removed before scoring; the score deliberately has
no "same band" component.
"""

from typing import List, Optional

from ..models.config import RecommendationConfig, resolve_recommendation_config
from ..models.scoring import SimilarityResult
from ..models.video import AttributableVideo

NO_REASON = "Discover new bands"


def _event_component(source: AttributableVideo, candidate: AttributableVideo, config: RecommendationConfig):
    if (
        source.event_name
        and candidate.event_name
        and source.event_name.lower() == candidate.event_name.lower()
    ):
        return config.weight_same_event * 100, "Same event"
    if source.event_year and candidate.event_year and source.event_year == candidate.event_year:
        return config.weight_same_event * 100 * config.same_year_credit, "Same year"
    return 0.0, None


def _tag_component(source: AttributableVideo, candidate: AttributableVideo, config: RecommendationConfig):
    if not source.tags or not candidate.tags:
        return 0.0, None
    source_tags = {t.lower() for t in source.tags}
    matching = [t for t in candidate.tags if t.lower() in source_tags]
    if not matching:
        return 0.0, None
    ratio = min(1.0, len(matching) / len(source.tags))
    return config.weight_matching_tags * 100 * ratio, f"{len(matching)} matching tags"


def compute_similarity(
    source: AttributableVideo,
    candidate: AttributableVideo,
    config: Optional[RecommendationConfig] = None,
) -> SimilarityResult:
    """Score a candidate against the source video; reasons are joined with ", "."""
    config = resolve_recommendation_config(config)
    score = 0.0
    reasons: List[str] = []

    if source.category_id and candidate.category_id and source.category_id == candidate.category_id:
        score += config.weight_same_category * 100
        reasons.append("Similar style")

    for points, reason in (
        _event_component(source, candidate, config),
        _tag_component(source, candidate, config),
    ):
        score += points
        if reason:
            reasons.append(reason)

    if candidate.quality_score >= config.high_quality_threshold:
        score += config.weight_quality_bonus * 100
        reasons.append("High quality")
    elif candidate.quality_score >= config.medium_quality_threshold:
        score += config.weight_quality_bonus * 50

    return SimilarityResult(
        score=round(score, 2),
        reason=", ".join(reasons) if reasons else NO_REASON,
    )
