#!/usr/bin/env python3
"""
Attribute unattributed videos to organizations (or run another batch target).

Reads organizations.json / videos.json / watch_history.json from the data directory
and writes attributions back to videos.json. When REDIS_URL is set, cached
related-video responses are invalidated after a run that attributed anything.

Usage:
  bandhub-match --data-dir data/ --dry-run
  bandhub-match --data-dir data/ --min-confidence 50 --limit 500
  bandhub-match --target clear-related-cache
  python -m bandhub_server.scripts.match_videos --data-dir data/
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from ..app import configure_logging
from ..config import get_config
from ..errors import UnknownBatchTargetError
from ..models import BatchRequest, BatchResult
from ..state import AppState


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a BandHub batch target")
    parser.add_argument("--target", default="match-videos", help="Batch target (default: match-videos)")
    parser.add_argument("--data-dir", type=Path, help="Directory with the JSON data files (default: BANDHUB_DATA_DIR)")
    parser.add_argument("--config", type=Path, help="Algorithm config JSON (default: ALGORITHM_CONFIG_PATH)")
    parser.add_argument("--dry-run", action="store_true", help="Decide but do not write")
    parser.add_argument("--min-confidence", type=int, default=None, help="Minimum score to attribute, 0-100 (default: algorithm config, 30)")
    parser.add_argument("--limit", type=int, default=None, help="Max videos to process")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL)")
    return parser


def _print_result(result: BatchResult) -> None:
    print(f"\nTarget: {result.target}{' (dry run)' if result.dry_run else ''}")
    if result.cleared_keys is not None:
        print(f"  Cleared cache keys: {result.cleared_keys}")
    stats = result.stats
    if stats is None:
        return
    print(f"  Processed:      {stats.total_processed}")
    print(f"  Matched:        {stats.matched} ({stats.match_rate}%)")
    print(f"    all-star:     {stats.matched_all_star}")
    print(f"    single band:  {stats.single_org}")
    print(f"    battles:      {stats.battle_videos}")
    print(f"  Excluded:       {stats.excluded}")
    for reason, count in sorted(stats.exclusion_reasons.items()):
        print(f"    {reason}: {count}")
    print(f"  No match:       {stats.no_match}")
    print(f"  Low confidence: {stats.low_confidence}")
    print(f"  Duration:       {stats.duration_ms}ms")
    if stats.org_counts:
        print("  Top organizations:")
        for name, count in stats.top_organizations(10):
            print(f"    {name}: {count}")
    if stats.errors:
        print(f"  Errors ({len(stats.errors)}):")
        for err in stats.errors[:10]:
            print(f"    {err}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = get_config()
    overrides = {}
    if args.data_dir is not None:
        overrides["data_dir"] = args.data_dir
    if args.config is not None:
        overrides["algorithm_config_path"] = args.config
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    config = replace(config, **overrides)
    configure_logging(config.log_level)

    if config.data_dir is None:
        parser.error("--data-dir (or BANDHUB_DATA_DIR) is required")
    ok, errors = config.validate()
    if not ok:
        parser.error("; ".join(errors))

    try:
        request = BatchRequest(
            target=args.target,
            dry_run=args.dry_run,
            min_confidence=args.min_confidence,
            limit=args.limit,
        )
    except ValidationError as e:
        parser.error(str(e))

    state = AppState(config)
    try:
        result = state.batch.run_batch(request)
    except UnknownBatchTargetError as e:
        parser.error(str(e))
    _print_result(result)
    return 1 if result.stats is not None and result.stats.errors else 0


if __name__ == "__main__":
    sys.exit(main())
