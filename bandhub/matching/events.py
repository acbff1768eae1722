"""
Event-based matching — named classics imply their participating bands.

When the text mentions a known event, each participant is resolved to the first
organization whose canonical or school name contains it, and every resolved
organization is returned at event_match_score with match_type "event". The first
event (in table order) that resolves at least one organization wins.
"""

from typing import Dict, Iterable, List, Optional

from ..aliases.generator import OrganizationAliases
from ..models.config import MatchingConfig, resolve_matching_config
from ..models.matching import MatchResult

EVENT_PARTICIPANTS: Dict[str, List[str]] = {
    "meac swac challenge": [
        "Alcorn State",
        "Jackson State",
        "Southern",
        "Grambling State",
        "Alabama State",
        "Alabama A&M",
        "Norfolk State",
        "North Carolina A&T",
        "South Carolina State",
    ],
    "bayou classic": ["Southern University", "Grambling State"],
    "magic city classic": ["Alabama State", "Alabama A&M"],
    "florida classic": ["Florida A&M", "Bethune-Cookman"],
}


def _resolve_participant(
    participant: str, index: List[OrganizationAliases]
) -> Optional[OrganizationAliases]:
    needle = participant.lower()
    for entry in index:
        if needle in entry.org.canonical_name.lower() or needle in entry.org.school_name.lower():
            return entry
    return None


def find_event_matches(
    text: str,
    index: Iterable[OrganizationAliases],
    config: Optional[MatchingConfig] = None,
) -> List[MatchResult]:
    config = resolve_matching_config(config)
    entries = list(index)
    lower_text = text.lower()
    for event, participants in EVENT_PARTICIPANTS.items():
        if event not in lower_text:
            continue
        matches: List[MatchResult] = []
        seen = set()
        for participant in participants:
            entry = _resolve_participant(participant, entries)
            if entry is None or entry.org.id in seen:
                continue
            seen.add(entry.org.id)
            matches.append(
                MatchResult(
                    org_id=entry.org.id,
                    org_name=entry.org.canonical_name,
                    score=config.event_match_score,
                    matched_alias=event,
                    match_type="event",
                    is_all_star=entry.org.is_all_star,
                )
            )
        if matches:
            return matches
    return []
