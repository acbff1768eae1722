"""
Matching models — per-organization match results, per-video attribution outcomes,
and the batch statistics accumulator.

MatchResult keeps matched_alias and match_type so a moderator can audit an attribution.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

MatchType = Literal["exact_band_name", "school_name", "partial", "abbreviation", "all_star", "event"]

OutcomeStatus = Literal["attributed", "excluded", "no_match", "low_confidence"]


class MatchResult(BaseModel):
    """Best-scoring alias of one organization against a block of text."""

    org_id: str
    org_name: str
    score: int
    matched_alias: str
    match_type: MatchType
    is_all_star: bool = False


class AttributionOutcome(BaseModel):
    """Decision for one video. Org fields are only set when status == "attributed"."""

    video_id: str
    status: OutcomeStatus
    org_id: Optional[str] = None
    org_name: Optional[str] = None
    opponent_org_id: Optional[str] = None
    confidence_score: Optional[int] = None
    matched_alias: Optional[str] = None
    match_type: Optional[MatchType] = None
    is_all_star: bool = False
    is_battle: bool = False
    exclusion_reason: Optional[str] = None
    matches: List[MatchResult] = Field(default_factory=list)

    @property
    def is_attributed(self) -> bool:
        return self.status == "attributed"


class MatchingStats(BaseModel):
    """
    Counters for a batch attribution run.

    Each step returns its own stats; callers combine them with merge() instead of
    mutating a shared counter.
    """

    total_processed: int = 0
    matched: int = 0
    matched_all_star: int = 0
    excluded: int = 0
    single_org: int = 0
    battle_videos: int = 0
    no_match: int = 0
    low_confidence: int = 0
    org_counts: Dict[str, int] = Field(default_factory=dict)
    exclusion_reasons: Dict[str, int] = Field(default_factory=dict)
    errors: List[str] = Field(default_factory=list)
    duration_ms: int = 0

    @classmethod
    def from_outcome(cls, outcome: AttributionOutcome) -> "MatchingStats":
        """Stats for a single processed video."""
        stats = cls(total_processed=1)
        if outcome.status == "excluded":
            stats.excluded = 1
            reason = outcome.exclusion_reason or "unknown"
            stats.exclusion_reasons = {reason: 1}
        elif outcome.status == "no_match":
            stats.no_match = 1
        elif outcome.status == "low_confidence":
            stats.low_confidence = 1
        else:
            stats.matched = 1
            if outcome.is_all_star:
                stats.matched_all_star = 1
            if outcome.opponent_org_id is not None:
                stats.battle_videos = 1
            else:
                stats.single_org = 1
            stats.org_counts = {outcome.org_name or outcome.org_id or "": 1}
        return stats

    def merge(self, other: "MatchingStats") -> "MatchingStats":
        """Return a new accumulator combining both."""
        org_counts = dict(self.org_counts)
        for name, count in other.org_counts.items():
            org_counts[name] = org_counts.get(name, 0) + count
        reasons = dict(self.exclusion_reasons)
        for reason, count in other.exclusion_reasons.items():
            reasons[reason] = reasons.get(reason, 0) + count
        return MatchingStats(
            total_processed=self.total_processed + other.total_processed,
            matched=self.matched + other.matched,
            matched_all_star=self.matched_all_star + other.matched_all_star,
            excluded=self.excluded + other.excluded,
            single_org=self.single_org + other.single_org,
            battle_videos=self.battle_videos + other.battle_videos,
            no_match=self.no_match + other.no_match,
            low_confidence=self.low_confidence + other.low_confidence,
            org_counts=org_counts,
            exclusion_reasons=reasons,
            errors=self.errors + other.errors,
            duration_ms=self.duration_ms + other.duration_ms,
        )

    def with_error(self, message: str) -> "MatchingStats":
        return self.model_copy(update={"errors": self.errors + [message]})

    @property
    def match_rate(self) -> float:
        """Percentage of processed videos that were attributed (0-100, 1 decimal)."""
        if self.total_processed == 0:
            return 0.0
        return round(self.matched / self.total_processed * 100, 1)

    def top_organizations(self, n: int = 10) -> List[tuple]:
        """Most-attributed organizations as (name, count), highest first."""
        return sorted(self.org_counts.items(), key=lambda kv: kv[1], reverse=True)[:n]
