"""
Batch attribution runner.

Loads organizations once, builds their alias index, then walks the unattributed
backlog sequentially: decide, persist, count. A failed write is logged with the video
id and recorded in the run's errors; the run carries on with the next video.
"""

import logging
import time
from typing import Callable, List, NamedTuple, Optional

from bandhub.aliases import build_alias_index
from bandhub.matching import attribute_video
from bandhub.models import (
    AttributionOutcome,
    MatchingConfig,
    MatchingStats,
    resolve_matching_config,
)

from .video_store import VideoStore

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 100


class AttributionRun(NamedTuple):
    stats: MatchingStats
    outcomes: List[AttributionOutcome]


def validate_run_parameters(min_confidence: Optional[int], limit: Optional[int]) -> None:
    if min_confidence is not None and not 0 <= min_confidence <= 100:
        raise ValueError(f"min_confidence must be between 0 and 100, got {min_confidence}")
    if limit is not None and limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")


class AttributionRunner:
    """Attribute unattributed videos in a store."""

    def __init__(
        self,
        store: VideoStore,
        config: Optional[MatchingConfig] = None,
        on_attributed: Optional[Callable[[], None]] = None,
    ):
        self.store = store
        self.config = resolve_matching_config(config)
        # Called once after a non-dry run that attributed at least one video
        self.on_attributed = on_attributed

    def run(
        self,
        min_confidence: Optional[int] = None,
        limit: Optional[int] = None,
        dry_run: bool = False,
    ) -> AttributionRun:
        validate_run_parameters(min_confidence, limit)
        config = self.config
        if min_confidence is not None:
            config = config.model_copy(update={"min_confidence": min_confidence})

        started = time.monotonic()
        index = build_alias_index(self.store.get_organizations(), config.all_star_bands)
        videos = self.store.find_unattributed_videos(limit)
        logger.info(
            "Matching %d videos against %d organizations (min_confidence=%d, dry_run=%s)",
            len(videos), len(index), config.min_confidence, dry_run,
        )

        stats = MatchingStats()
        outcomes: List[AttributionOutcome] = []
        for i, video in enumerate(videos, start=1):
            if video.is_attributed:
                continue
            outcome = attribute_video(video, index, config)
            outcomes.append(outcome)
            step = MatchingStats.from_outcome(outcome)
            if outcome.is_attributed and not dry_run:
                step = self._write(outcome, step)
            stats = stats.merge(step)
            if i % PROGRESS_EVERY == 0:
                logger.info("Processed %d/%d videos (%d matched)", i, len(videos), stats.matched)

        stats = stats.model_copy(update={"duration_ms": int((time.monotonic() - started) * 1000)})
        log_stats(stats, dry_run)

        if not dry_run and stats.matched > 0 and self.on_attributed is not None:
            self.on_attributed()
        return AttributionRun(stats=stats, outcomes=outcomes)

    def _write(self, outcome: AttributionOutcome, step: MatchingStats) -> MatchingStats:
        try:
            self.store.write_attribution(
                outcome.video_id,
                outcome.org_id,
                outcome.opponent_org_id,
                outcome.confidence_score,
            )
        except Exception as e:
            logger.error("Error updating video %s: %s", outcome.video_id, e)
            return step.with_error(f"Error updating {outcome.video_id}: {e}")
        return step


def log_stats(stats: MatchingStats, dry_run: bool = False) -> None:
    """Summary of a run at INFO; the top organizations at DEBUG."""
    logger.info(
        "Matching %s: processed=%d matched=%d (%.1f%%) all_star=%d single=%d battles=%d "
        "excluded=%d no_match=%d low_confidence=%d errors=%d in %dms",
        "preview" if dry_run else "complete",
        stats.total_processed,
        stats.matched,
        stats.match_rate,
        stats.matched_all_star,
        stats.single_org,
        stats.battle_videos,
        stats.excluded,
        stats.no_match,
        stats.low_confidence,
        len(stats.errors),
        stats.duration_ms,
    )
    for name, count in stats.top_organizations(10):
        logger.debug("  %s: %d", name, count)
