"""Related-video endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from bandhub.models import RelatedVideosResponse

from ..errors import VideoNotFoundError
from ..state import get_state

router = APIRouter()


@router.get("/{video_id}/related", response_model=RelatedVideosResponse)
def get_related_videos(
    video_id: str,
    limit: int = Query(10, ge=1, le=50),
    viewer_id: Optional[str] = Query(None),
):
    """Related videos from other bands; viewer_id adds "because you watched" sections."""
    state = get_state()
    try:
        return state.recommendations.get_related_videos(video_id, limit=limit, viewer_id=viewer_id)
    except VideoNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
