"""
Text matcher — score every organization's aliases against a block of video text.

Short aliases (<= boundary_alias_max_length) must match as whole ASCII words so that
"jsu" does not fire inside "jsunder"; longer aliases match as plain substrings.
Each organization keeps its single best alias. An alias found in the opening window
of the text (roughly the title) gets a bonus that is added without clamping, so an
early exact name match scores 110.

All-star and mass bands score on their own ladder (exact name, long alias, short
alias), all tagged match_type "all_star".
"""

import re
from typing import Iterable, List, Optional

from ..aliases.generator import OrganizationAliases
from ..models.config import MatchingConfig, resolve_matching_config
from ..models.matching import MatchResult
from ..models.video import AttributableVideo


def searchable_text(video: AttributableVideo) -> str:
    """Title, description and channel label joined with single spaces."""
    return " ".join([video.title or "", video.description or "", video.channel_label or ""])


def _alias_occurs(alias: str, lower_text: str, config: MatchingConfig) -> bool:
    if len(alias) <= config.boundary_alias_max_length:
        pattern = r"\b" + re.escape(alias) + r"\b"
        return re.search(pattern, lower_text, flags=re.IGNORECASE | re.ASCII) is not None
    return alias in lower_text


def _base_score(alias: str, entry: OrganizationAliases, config: MatchingConfig):
    """Return (score, match_type) for an alias by what it names and how long it is."""
    if entry.org.is_all_star:
        if alias == entry.org.canonical_name.lower():
            return config.score_all_star_exact, "all_star"
        if len(alias) >= config.all_star_alias_length:
            return config.score_all_star_alias, "all_star"
        return config.score_all_star_short, "all_star"
    if alias == entry.org.canonical_name.lower():
        return config.score_exact_name, "exact_band_name"
    if entry.org.school_name and alias == entry.org.school_name.lower():
        return config.score_school_name, "school_name"
    if len(alias) >= config.long_alias_length:
        return config.score_long_partial, "partial"
    if len(alias) >= config.medium_alias_length:
        return config.score_medium_partial, "partial"
    return config.score_abbreviation, "abbreviation"


def _best_match(
    entry: OrganizationAliases,
    lower_text: str,
    config: MatchingConfig,
) -> Optional[MatchResult]:
    best: Optional[MatchResult] = None
    window = lower_text[: config.title_window_chars]
    for alias in entry.aliases:
        if len(alias) < config.min_alias_length:
            continue
        if not _alias_occurs(alias, lower_text, config):
            continue
        score, match_type = _base_score(alias, entry, config)
        if alias in window:
            score += config.title_bonus
        # strict comparison: the first alias reaching the top score wins
        if best is None or score > best.score:
            best = MatchResult(
                org_id=entry.org.id,
                org_name=entry.org.canonical_name,
                score=score,
                matched_alias=alias,
                match_type=match_type,
                is_all_star=entry.org.is_all_star,
            )
    return best


def find_matches(
    text: str,
    index: Iterable[OrganizationAliases],
    config: Optional[MatchingConfig] = None,
) -> List[MatchResult]:
    """
    One MatchResult per organization with at least one alias found in text,
    sorted by score descending. Ties keep organization order.

    Empty or whitespace-only text yields no matches.
    """
    config = resolve_matching_config(config)
    if not text or not text.strip():
        return []
    lower_text = text.lower()
    results = []
    for entry in index:
        match = _best_match(entry, lower_text, config)
        if match is not None:
            results.append(match)
    results.sort(key=lambda m: m.score, reverse=True)
    return results
