"""Backing logic: stores, cache, attribution runner, recommendations, batch surface."""

from .attribution_runner import AttributionRun, AttributionRunner, log_stats
from .batch import BatchService
from .cache_store import CacheStore, InMemoryCache, RedisCache
from .recommendations import CACHE_KEY_PREFIX, RecommendationService, related_cache_key
from .video_store import InMemoryVideoStore, JsonVideoStore, VideoStore

__all__ = [
    "AttributionRun",
    "AttributionRunner",
    "BatchService",
    "CACHE_KEY_PREFIX",
    "CacheStore",
    "InMemoryCache",
    "InMemoryVideoStore",
    "JsonVideoStore",
    "RecommendationService",
    "RedisCache",
    "VideoStore",
    "log_stats",
    "related_cache_key",
]
