"""
Attribution decision — turn a video's text into an AttributionOutcome.

Order of checks:
1. Exclusion patterns (excluded videos are never attributed).
2. Event matching, when enabled and the text names a known classic.
3. Alias matching.
4. Top match below min_confidence -> low_confidence.
5. Battle keywords + a second organization at or above min_confidence -> opponent.

The decision is pure; persisting it is the caller's job.
"""

from typing import Iterable, Iterator, List, Optional

from ..aliases.generator import OrganizationAliases
from ..models.config import MatchingConfig, resolve_matching_config
from ..models.matching import AttributionOutcome, MatchingStats, MatchResult
from ..models.video import AttributableVideo
from .battle import is_battle_video
from .events import find_event_matches
from .exclusions import should_exclude
from .text_matcher import find_matches, searchable_text


def rank_matches(
    text: str,
    index: List[OrganizationAliases],
    config: MatchingConfig,
) -> List[MatchResult]:
    """Event matches when enabled and found, else alias matches."""
    if config.event_matching_enabled:
        event_matches = find_event_matches(text, index, config)
        if event_matches:
            return event_matches
    return find_matches(text, index, config)


def _pick_opponent(
    matches: List[MatchResult], top: MatchResult, min_confidence: int
) -> Optional[MatchResult]:
    second = next((m for m in matches if m.org_id != top.org_id), None)
    if second is not None and second.score >= min_confidence:
        return second
    return None


def decide_attribution(
    video_id: str,
    text: str,
    index: List[OrganizationAliases],
    config: Optional[MatchingConfig] = None,
) -> AttributionOutcome:
    """Decide which organization (and opponent, for battles) a block of text belongs to."""
    config = resolve_matching_config(config)

    if not text or not text.strip():
        return AttributionOutcome(video_id=video_id, status="no_match")

    reason = should_exclude(text, config.exclusion_patterns)
    if reason is not None:
        return AttributionOutcome(video_id=video_id, status="excluded", exclusion_reason=reason)

    matches = rank_matches(text, index, config)
    if not matches:
        return AttributionOutcome(video_id=video_id, status="no_match")

    top = matches[0]
    if top.score < config.min_confidence:
        return AttributionOutcome(video_id=video_id, status="low_confidence", matches=matches)

    battle = is_battle_video(text)
    opponent = _pick_opponent(matches, top, config.min_confidence) if battle else None
    return AttributionOutcome(
        video_id=video_id,
        status="attributed",
        org_id=top.org_id,
        org_name=top.org_name,
        opponent_org_id=opponent.org_id if opponent else None,
        confidence_score=top.score,
        matched_alias=top.matched_alias,
        match_type=top.match_type,
        is_battle=battle,
        is_all_star=top.is_all_star,
        matches=matches,
    )


def attribute_video(
    video: AttributableVideo,
    index: List[OrganizationAliases],
    config: Optional[MatchingConfig] = None,
) -> AttributionOutcome:
    return decide_attribution(video.id, searchable_text(video), index, config)


def attribute_videos(
    videos: Iterable[AttributableVideo],
    index: List[OrganizationAliases],
    config: Optional[MatchingConfig] = None,
) -> Iterator[AttributionOutcome]:
    """Decisions for unattributed videos, in input order. Attributed videos are skipped."""
    for video in videos:
        if video.is_attributed:
            continue
        yield attribute_video(video, index, config)


def summarize_outcomes(outcomes: Iterable[AttributionOutcome]) -> MatchingStats:
    """Fold outcomes into a single MatchingStats."""
    stats = MatchingStats()
    for outcome in outcomes:
        stats = stats.merge(MatchingStats.from_outcome(outcome))
    return stats
