"""Application state: config, store, cache and the services built on them."""

import logging
from typing import Any, Optional

from .config import ServerConfig, get_config
from .services import (
    AttributionRunner,
    BatchService,
    InMemoryCache,
    InMemoryVideoStore,
    JsonVideoStore,
    RecommendationService,
    RedisCache,
)

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(
        self,
        config: ServerConfig,
        store: Optional[Any] = None,
        cache: Optional[Any] = None,
    ):
        self.config = config
        self.store = store if store is not None else self._create_store(config)
        self.cache = cache if cache is not None else self._create_cache(config)
        logger.info(
            "Video store: %s, cache: %s",
            type(self.store).__name__,
            type(self.cache).__name__,
        )

        self.matching_config = config.matching_config()
        self.recommendation_config = config.recommendation_config()
        self.recommendations = RecommendationService(
            self.store, self.cache, self.recommendation_config
        )
        self.runner = AttributionRunner(
            self.store,
            self.matching_config,
            on_attributed=self.recommendations.invalidate_all_related_cache,
        )
        self.batch = BatchService(self.runner, self.recommendations)

    def _create_store(self, config: ServerConfig) -> Any:
        """JSON store when BANDHUB_DATA_DIR is set, else an empty in-memory store."""
        if config.data_dir is not None:
            return JsonVideoStore(config.data_dir)
        return InMemoryVideoStore()

    def _create_cache(self, config: ServerConfig) -> Any:
        """Redis when REDIS_URL is set, else in-process."""
        if config.redis_url:
            return RedisCache(url=config.redis_url)
        return InMemoryCache()


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        config = get_config()
        _state = AppState(config)
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace (or with None, reset) the global state."""
    global _state
    _state = state
