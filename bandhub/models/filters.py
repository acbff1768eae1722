"""
Candidate filter specification — a tagged variant the persistence layer interprets.

A CandidateFilter matches visible videos that satisfy ANY of its conditions and do not
belong to exclude_org_id. ranking tells the store how to order rows before the limit.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .video import AttributableVideo


class CategoryEquals(BaseModel):
    kind: Literal["category_equals"] = "category_equals"
    category_id: str

    def matches(self, video: AttributableVideo) -> bool:
        return video.category_id == self.category_id


class EventNameContains(BaseModel):
    """Case-insensitive containment of the source event name in the candidate's."""

    kind: Literal["event_name_contains"] = "event_name_contains"
    event_name: str

    def matches(self, video: AttributableVideo) -> bool:
        if not video.event_name:
            return False
        return self.event_name.lower() in video.event_name.lower()


class EventYearEquals(BaseModel):
    kind: Literal["event_year_equals"] = "event_year_equals"
    event_year: int

    def matches(self, video: AttributableVideo) -> bool:
        return video.event_year == self.event_year


class TagsOverlap(BaseModel):
    """At least one tag in common (exact, as stored)."""

    kind: Literal["tags_overlap"] = "tags_overlap"
    tags: List[str]

    def matches(self, video: AttributableVideo) -> bool:
        return bool(set(self.tags) & set(video.tags))


class AnyVisible(BaseModel):
    kind: Literal["any_visible"] = "any_visible"

    def matches(self, video: AttributableVideo) -> bool:
        return True


Condition = Annotated[
    Union[CategoryEquals, EventNameContains, EventYearEquals, TagsOverlap, AnyVisible],
    Field(discriminator="kind"),
]

# "relevance": quality_score, view_count, published_at (all desc)
# "popularity": view_count, quality_score (all desc)
Ranking = Literal["relevance", "popularity"]


class CandidateFilter(BaseModel):
    any_of: List[Condition] = Field(default_factory=list)
    exclude_org_id: Optional[str] = None
    ranking: Ranking = "relevance"

    def matches(self, video: AttributableVideo) -> bool:
        """Reference semantics for in-memory stores."""
        if video.is_hidden:
            return False
        if self.exclude_org_id is not None and video.attributed_org_id == self.exclude_org_id:
            return False
        if not self.any_of:
            return True
        return any(cond.matches(video) for cond in self.any_of)

    def rank(self, videos: List[AttributableVideo]) -> List[AttributableVideo]:
        """Order rows as the store returns them (reference semantics)."""
        ordered = list(videos)
        if self.ranking == "popularity":
            ordered.sort(key=lambda v: (v.view_count, v.quality_score), reverse=True)
        else:
            ordered.sort(key=lambda v: v.published_at or "", reverse=True)
            ordered.sort(key=lambda v: (v.quality_score, v.view_count), reverse=True)
        return ordered
