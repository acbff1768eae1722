"""
Related-video recommendations.

Assembles the related list for one video: candidate pool from the store, similarity
scoring, watched-video exclusion, organization diversification, popularity backfill,
and (for a known viewer) "because you watched" sections. Anonymous responses are
cached; every cache failure is logged and treated as a miss.
"""

import logging
from typing import List, Optional, Set

from pydantic import ValidationError

from bandhub.models import (
    AttributableVideo,
    BecauseYouWatchedSection,
    RecommendationConfig,
    RelatedVideosResponse,
    ScoredVideo,
    SourceVideoRef,
    resolve_recommendation_config,
)
from bandhub.stages import (
    build_candidate_filter,
    build_fallback_filter,
    build_section_filter,
    compose_with_fallback,
    compute_similarity,
    diversify_by_org,
    score_candidates,
)

from ..errors import VideoNotFoundError
from .cache_store import CacheStore
from .video_store import VideoStore

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "videos:related:"


def related_cache_key(video_id: str, limit: int) -> str:
    return f"{CACHE_KEY_PREFIX}{video_id}:limit:{limit}"


class RecommendationService:
    """Related videos for one source video, optionally personalized for a viewer."""

    def __init__(
        self,
        store: VideoStore,
        cache: Optional[CacheStore] = None,
        config: Optional[RecommendationConfig] = None,
    ):
        self.store = store
        self.cache = cache
        self.config = resolve_recommendation_config(config)

    # ------------------------------------------------------------------
    # Cache (fail-open)
    # ------------------------------------------------------------------

    def _cache_get(self, key: str) -> Optional[RelatedVideosResponse]:
        if self.cache is None:
            return None
        try:
            cached = self.cache.get(key)
            if cached is None:
                return None
            return RelatedVideosResponse.model_validate(cached)
        except ValidationError as e:
            logger.warning("Discarding malformed related-video cache entry %s: %s", key, e)
            return None
        except Exception as e:
            logger.warning("Related-video cache read failed for %s: %s", key, e)
            return None

    def _cache_set(self, key: str, response: RelatedVideosResponse) -> None:
        if self.cache is None:
            return
        try:
            self.cache.set(key, response.model_dump(mode="json"), self.config.cache_ttl_seconds)
        except Exception as e:
            logger.warning("Related-video cache write failed for %s: %s", key, e)

    def _cache_delete(self, prefix: str) -> int:
        if self.cache is None:
            return 0
        try:
            return self.cache.delete_by_prefix(prefix)
        except Exception as e:
            logger.warning("Related-video cache invalidation failed for %s: %s", prefix, e)
            return 0

    def invalidate_related_cache(self, video_id: str) -> int:
        """Drop cached responses for one source video (every limit)."""
        return self._cache_delete(f"{CACHE_KEY_PREFIX}{video_id}:")

    def invalidate_all_related_cache(self) -> int:
        return self._cache_delete(CACHE_KEY_PREFIX)

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def get_related_videos(
        self,
        video_id: str,
        limit: int = 10,
        viewer_id: Optional[str] = None,
    ) -> RelatedVideosResponse:
        """
        Related videos from other organizations.

        Raises VideoNotFoundError when video_id does not exist. Personalized responses
        (viewer_id set) exclude the viewer's watched videos and are never cached.
        """
        if limit < 1:
            raise ValueError("limit must be at least 1")

        cache_key = related_cache_key(video_id, limit)
        if viewer_id is None:
            cached = self._cache_get(cache_key)
            if cached is not None:
                logger.debug("Cache hit for related videos: %s", cache_key)
                return cached

        source = self.store.get_video(video_id)
        if source is None:
            raise VideoNotFoundError(video_id)

        watched: Set[str] = set()
        if viewer_id is not None:
            watched = self.store.get_watched_video_ids(viewer_id)

        primary = self._related(source, limit, watched)

        fallback_reason = None
        videos = primary
        if len(primary) < limit:
            needed = limit - len(primary)
            exclude = {source.id} | {item.video.id for item in primary} | watched
            fallback_rows = self.store.find_candidate_pool(
                build_fallback_filter(source), exclude, needed
            )
            videos, fallback_reason = compose_with_fallback(
                primary, fallback_rows, limit, category_known=bool(source.category_id)
            )

        sections = None
        if viewer_id is not None:
            sections = self._because_you_watched(viewer_id, video_id, watched)

        response = RelatedVideosResponse(
            videos=videos[:limit],
            because_you_watched=sections,
            fallback_reason=fallback_reason,
        )
        if viewer_id is None:
            self._cache_set(cache_key, response)
        return response

    def _related(
        self,
        source: AttributableVideo,
        limit: int,
        watched: Set[str],
    ) -> List[ScoredVideo]:
        pool = self.store.find_candidate_pool(
            build_candidate_filter(source),
            {source.id},
            limit * self.config.pool_multiplier,
        )
        scored = score_candidates(source, pool, exclude_ids=watched, config=self.config)
        return diversify_by_org(scored, limit, self.config.max_per_org)

    def _because_you_watched(
        self,
        viewer_id: str,
        current_video_id: str,
        watched: Set[str],
    ) -> List[BecauseYouWatchedSection]:
        cfg = self.config
        recent = self.store.get_recent_watched_videos(
            viewer_id, current_video_id, cfg.recent_watch_limit
        )
        unique: List[AttributableVideo] = []
        seen = set()
        for video in recent:
            if video.id not in seen:
                seen.add(video.id)
                unique.append(video)

        sections: List[BecauseYouWatchedSection] = []
        used_ids = {current_video_id} | set(watched)
        used_orgs: Set[str] = set()

        for src in unique:
            if len(sections) >= cfg.max_sections:
                break
            filter_spec = build_section_filter(src)
            if filter_spec is None:
                continue
            pool = self.store.find_candidate_pool(
                filter_spec, used_ids, cfg.videos_per_section * cfg.section_pool_multiplier
            )
            items = []
            for video in pool:
                if video.attributed_org_id in used_orgs:
                    continue
                result = compute_similarity(src, video, cfg)
                items.append(
                    ScoredVideo(video=video, similarity_score=result.score, match_reason=result.reason)
                )
            chosen = diversify_by_org(items, cfg.videos_per_section, cfg.section_max_per_org)
            if not chosen:
                continue
            for item in chosen:
                used_ids.add(item.video.id)
                if item.org_id is not None:
                    used_orgs.add(item.org_id)
            sections.append(
                BecauseYouWatchedSection(
                    source_video=SourceVideoRef(id=src.id, title=src.title),
                    videos=chosen,
                )
            )
        return sections
