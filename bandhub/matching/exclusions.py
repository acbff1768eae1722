"""
Content exclusions — keep high school, middle school, podcast and generic content
out of attribution entirely.

Patterns come from MatchingConfig.exclusion_patterns:

    {"high_school": [...], "middle_school": [...], "podcasts": [...], "generic": [...]}

Groups are checked in that order and the first hit decides the reason. A podcast
pattern that starts with a space is a case-insensitive regular expression (after
trimming); every other pattern is a case-insensitive substring.
"""

import re
from typing import Dict, List, Optional

# config group -> reported reason
EXCLUSION_GROUPS = (
    ("high_school", "high_school"),
    ("middle_school", "middle_school"),
    ("podcasts", "podcast_show"),
    ("generic", "generic_content"),
)


def _pattern_hits(group: str, pattern: str, lower_text: str) -> bool:
    if group == "podcasts" and pattern.startswith(" "):
        return re.search(pattern.strip(), lower_text, flags=re.IGNORECASE) is not None
    return pattern.lower() in lower_text


def should_exclude(text: str, patterns: Dict[str, List[str]]) -> Optional[str]:
    """Return the exclusion reason for text, or None when it may be attributed."""
    if not patterns:
        return None
    lower_text = text.lower()
    for group, reason in EXCLUSION_GROUPS:
        for pattern in patterns.get(group) or []:
            if pattern and _pattern_hits(group, pattern, lower_text):
                return reason
    return None
