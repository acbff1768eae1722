"""Battle detection — does the text describe a head-to-head between two bands?"""

from typing import Tuple

BATTLE_KEYWORDS: Tuple[str, ...] = (
    " vs ",
    " vs. ",
    " v. ",
    " v ",
    " versus ",
    "battle",
    "botb",
    "band battle",
    "battle of the bands",
    "showdown",
    "face off",
    "faceoff",
)


def is_battle_video(text: str) -> bool:
    """Case-insensitive keyword test. Spaced keywords only match as separate words."""
    lower = text.lower()
    return any(keyword in lower for keyword in BATTLE_KEYWORDS)
