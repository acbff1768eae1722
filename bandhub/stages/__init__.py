"""Discovery stages: candidate filters, similarity scoring, diversification, fallback."""

from .candidate_pool import (
    build_candidate_filter,
    build_fallback_filter,
    build_section_filter,
    score_candidates,
)
from .diversity import diversify_by_org
from .fallback import FALLBACK_REASON, compose_with_fallback, fallback_entry
from .similarity import NO_REASON, compute_similarity

__all__ = [
    "FALLBACK_REASON",
    "NO_REASON",
    "build_candidate_filter",
    "build_fallback_filter",
    "build_section_filter",
    "compose_with_fallback",
    "compute_similarity",
    "diversify_by_org",
    "fallback_entry",
    "score_candidates",
]
