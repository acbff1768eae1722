"""Attribution matching: text matcher, battle detection, exclusions, events, decisions."""

from .attribution import (
    attribute_video,
    attribute_videos,
    decide_attribution,
    rank_matches,
    summarize_outcomes,
)
from .battle import BATTLE_KEYWORDS, is_battle_video
from .events import EVENT_PARTICIPANTS, find_event_matches
from .exclusions import should_exclude
from .text_matcher import find_matches, searchable_text

__all__ = [
    "BATTLE_KEYWORDS",
    "EVENT_PARTICIPANTS",
    "attribute_video",
    "attribute_videos",
    "decide_attribution",
    "find_event_matches",
    "find_matches",
    "is_battle_video",
    "rank_matches",
    "searchable_text",
    "should_exclude",
    "summarize_outcomes",
]
