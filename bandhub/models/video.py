"""
Video model — a YouTube video that can be attributed to one organization (two for battles).

Rows are created by ingestion with attribution fields null; the matcher fills them once.
Built from store/API dicts via AttributableVideo.model_validate(d).
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AttributableVideo(BaseModel):
    """
    Video payload used by both the attribution and discovery paths.

    confidence_score is set if and only if attributed_org_id is set. It has no
    upper bound: an early exact-name match scores 110.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    title: str = ""
    description: str = ""
    channel_label: str = ""
    attributed_org_id: Optional[str] = None
    opponent_org_id: Optional[str] = None
    confidence_score: Optional[float] = Field(default=None, ge=0)
    category_id: Optional[str] = None
    event_name: Optional[str] = None
    event_year: Optional[int] = None
    tags: List[str] = Field(default_factory=list)
    quality_score: float = Field(default=0, ge=0, le=100)
    view_count: int = Field(default=0, ge=0)
    is_hidden: bool = False
    published_at: Optional[str] = None
    created_at: Optional[str] = None

    @model_validator(mode="after")
    def attribution_fields_consistent(self):
        if (self.attributed_org_id is None) != (self.confidence_score is None):
            raise ValueError(
                "confidence_score must be set if and only if attributed_org_id is set"
            )
        if self.opponent_org_id is not None:
            if self.attributed_org_id is None:
                raise ValueError("opponent_org_id requires attributed_org_id")
            if self.opponent_org_id == self.attributed_org_id:
                raise ValueError("opponent_org_id must differ from attributed_org_id")
        return self

    @property
    def is_attributed(self) -> bool:
        return self.attributed_org_id is not None


class WatchEvent(BaseModel):
    """One row of a viewer's watch history."""

    viewer_id: str
    video_id: str
    watched_at: str = ""


def ensure_videos(
    items: List[Union[Dict[str, Any], "AttributableVideo"]],
) -> List["AttributableVideo"]:
    """Convert list of dicts or AttributableVideos to models for use in the pipeline."""
    return [
        AttributableVideo.model_validate(v) if isinstance(v, dict) else v
        for v in items
    ]
