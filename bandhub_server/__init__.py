"""
BandHub Discovery Server

Usage: uvicorn bandhub_server:app --reload --port 8000
"""

from .app import app
from .config import ServerConfig, get_config, reload_config
from .errors import UnknownBatchTargetError, VideoNotFoundError
from .services import (
    AttributionRunner,
    BatchService,
    InMemoryCache,
    InMemoryVideoStore,
    JsonVideoStore,
    RecommendationService,
    RedisCache,
)

__all__ = [
    "app",
    "ServerConfig",
    "get_config",
    "reload_config",
    "AttributionRunner",
    "BatchService",
    "InMemoryCache",
    "InMemoryVideoStore",
    "JsonVideoStore",
    "RecommendationService",
    "RedisCache",
    "UnknownBatchTargetError",
    "VideoNotFoundError",
]
