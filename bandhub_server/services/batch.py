"""
Batch control surface.

A BatchRequest names a target; run_batch dispatches it through a registry of
handlers. Targets:
- "match-videos": attribute the unattributed backlog (honours dry_run,
  min_confidence, limit).
- "clear-related-cache": drop every cached related-video response.
"""

import logging
from typing import Callable, Dict, Optional

from ..errors import UnknownBatchTargetError
from ..models import BatchRequest, BatchResult
from .attribution_runner import AttributionRunner
from .recommendations import RecommendationService

logger = logging.getLogger(__name__)

BatchHandler = Callable[[BatchRequest], BatchResult]


class BatchService:
    def __init__(
        self,
        runner: AttributionRunner,
        recommendations: Optional[RecommendationService] = None,
    ):
        self.runner = runner
        self.recommendations = recommendations
        self._handlers: Dict[str, BatchHandler] = {
            "match-videos": self._match_videos,
            "clear-related-cache": self._clear_related_cache,
        }

    @property
    def targets(self):
        return sorted(self._handlers)

    def run_batch(self, request: BatchRequest) -> BatchResult:
        handler = self._handlers.get(request.target)
        if handler is None:
            raise UnknownBatchTargetError(request.target, self._handlers)
        logger.info("Running batch target %s (dry_run=%s)", request.target, request.dry_run)
        return handler(request)

    def _match_videos(self, request: BatchRequest) -> BatchResult:
        run = self.runner.run(
            min_confidence=request.min_confidence,
            limit=request.limit,
            dry_run=request.dry_run,
        )
        return BatchResult(
            target=request.target,
            dry_run=request.dry_run,
            stats=run.stats,
            match_rate=run.stats.match_rate,
        )

    def _clear_related_cache(self, request: BatchRequest) -> BatchResult:
        cleared = 0
        if self.recommendations is not None and not request.dry_run:
            cleared = self.recommendations.invalidate_all_related_cache()
        return BatchResult(target=request.target, dry_run=request.dry_run, cleared_keys=cleared)
