"""
Organization diversification.

Walks candidates in their given (already ranked) order and keeps at most max_per_org
per organization until limit items are collected. Videos with no attributed
organization share a single bucket.
"""

from typing import Dict, List, Optional

from ..models.scoring import ScoredVideo


def diversify_by_org(
    items: List[ScoredVideo],
    limit: int,
    max_per_org: int = 2,
) -> List[ScoredVideo]:
    result: List[ScoredVideo] = []
    org_counts: Dict[Optional[str], int] = {}
    for item in items:
        if len(result) >= limit:
            break
        count = org_counts.get(item.org_id, 0)
        if count < max_per_org:
            result.append(item)
            org_counts[item.org_id] = count + 1
    return result
