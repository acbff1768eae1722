"""
Fallback backfill — top up a short related list with popular videos.

Fallback entries carry similarity 0 and a popularity reason. Ids already present in
the primary list are never repeated, and the result never exceeds limit.
"""

from typing import List, Optional, Tuple

from ..models.scoring import ScoredVideo
from ..models.video import AttributableVideo

FALLBACK_REASON = "Including popular videos from similar categories"


def fallback_entry(video: AttributableVideo, category_known: bool) -> ScoredVideo:
    return ScoredVideo(
        video=video,
        similarity_score=0,
        match_reason="Popular in this category" if category_known else "Popular video",
        is_fallback=True,
    )


def compose_with_fallback(
    primary: List[ScoredVideo],
    fallback_videos: List[AttributableVideo],
    limit: int,
    category_known: bool,
) -> Tuple[List[ScoredVideo], Optional[str]]:
    """
    Return (videos, fallback_reason). fallback_reason is set only when at least one
    fallback video was appended.
    """
    videos = list(primary[:limit])
    seen = {item.video.id for item in videos}
    appended = 0
    for video in fallback_videos:
        if len(videos) >= limit:
            break
        if video.id in seen:
            continue
        seen.add(video.id)
        videos.append(fallback_entry(video, category_known))
        appended += 1
    return videos, (FALLBACK_REASON if appended else None)
