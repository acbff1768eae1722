"""
Video Store abstraction.

Supplies organizations, unattributed videos, candidate pools and watch history to
the attribution runner and the recommendation service, and persists attribution
decisions. Implementations: in-memory (tests, local runs) and JSON files
(organizations.json, videos.json, watch_history.json in one data directory).
"""

import json
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Set, Union

from bandhub.models import (
    AttributableVideo,
    CandidateFilter,
    Organization,
    WatchEvent,
    ensure_organizations,
    ensure_videos,
)


class VideoStore(Protocol):
    """Protocol for video persistence. Implement for in-memory, JSON or a real database."""

    def get_organizations(self) -> List[Organization]:
        ...

    def get_organization(self, org_id: str) -> Optional[Organization]:
        ...

    def find_unattributed_videos(self, limit: Optional[int] = None) -> List[AttributableVideo]:
        """Videos with no attributed organization, newest first, at most limit."""
        ...

    def write_attribution(
        self,
        video_id: str,
        org_id: str,
        opponent_org_id: Optional[str],
        confidence_score: float,
    ) -> None:
        """
        Persist one decision. Only unattributed videos may be written: raises
        LookupError for an unknown id and ValueError if already attributed.
        """
        ...

    def find_candidate_pool(
        self,
        filter_spec: CandidateFilter,
        exclude_ids: Set[str],
        limit: int,
    ) -> List[AttributableVideo]:
        """Rows matching filter_spec minus exclude_ids, in filter_spec.ranking order."""
        ...

    def count_by_organization(self, org_id: str) -> int:
        ...

    def get_video(self, video_id: str) -> Optional[AttributableVideo]:
        ...

    def get_watched_video_ids(self, viewer_id: str) -> Set[str]:
        ...

    def get_recent_watched_videos(
        self,
        viewer_id: str,
        exclude_video_id: Optional[str],
        limit: int,
    ) -> List[AttributableVideo]:
        """Videos from the viewer's most recent watch rows (may repeat), newest first."""
        ...


class InMemoryVideoStore:
    """Video store held in process memory."""

    def __init__(
        self,
        organizations: Iterable[Union[Dict, Organization]] = (),
        videos: Iterable[Union[Dict, AttributableVideo]] = (),
        watch_history: Iterable[Union[Dict, WatchEvent]] = (),
    ):
        self._orgs: Dict[str, Organization] = {
            o.id: o for o in ensure_organizations(list(organizations))
        }
        self._videos: Dict[str, AttributableVideo] = {
            v.id: v for v in ensure_videos(list(videos))
        }
        self._watches: List[WatchEvent] = [
            WatchEvent.model_validate(w) if isinstance(w, dict) else w
            for w in watch_history
        ]

    def get_organizations(self) -> List[Organization]:
        return list(self._orgs.values())

    def get_organization(self, org_id: str) -> Optional[Organization]:
        return self._orgs.get(org_id)

    def add_video(self, video: Union[Dict, AttributableVideo]) -> AttributableVideo:
        v = ensure_videos([video])[0]
        self._videos[v.id] = v
        return v

    def record_watch(self, viewer_id: str, video_id: str, watched_at: str) -> None:
        self._watches.append(WatchEvent(viewer_id=viewer_id, video_id=video_id, watched_at=watched_at))

    def find_unattributed_videos(self, limit: Optional[int] = None) -> List[AttributableVideo]:
        pending = [v for v in self._videos.values() if not v.is_attributed]
        pending.sort(key=lambda v: v.created_at or "", reverse=True)
        return pending[:limit] if limit is not None else pending

    def write_attribution(
        self,
        video_id: str,
        org_id: str,
        opponent_org_id: Optional[str],
        confidence_score: float,
    ) -> None:
        video = self._videos.get(video_id)
        if video is None:
            raise LookupError(f"Video {video_id} not found")
        if video.is_attributed:
            raise ValueError(f"Video {video_id} is already attributed to {video.attributed_org_id}")
        updated = video.model_dump()
        updated.update(
            attributed_org_id=org_id,
            opponent_org_id=opponent_org_id,
            confidence_score=confidence_score,
        )
        self._videos[video_id] = AttributableVideo.model_validate(updated)

    def find_candidate_pool(
        self,
        filter_spec: CandidateFilter,
        exclude_ids: Set[str],
        limit: int,
    ) -> List[AttributableVideo]:
        rows = [
            v for v in self._videos.values()
            if v.id not in exclude_ids and filter_spec.matches(v)
        ]
        return filter_spec.rank(rows)[:limit]

    def count_by_organization(self, org_id: str) -> int:
        return sum(1 for v in self._videos.values() if v.attributed_org_id == org_id)

    def get_video(self, video_id: str) -> Optional[AttributableVideo]:
        return self._videos.get(video_id)

    def get_watched_video_ids(self, viewer_id: str) -> Set[str]:
        return {w.video_id for w in self._watches if w.viewer_id == viewer_id}

    def get_recent_watched_videos(
        self,
        viewer_id: str,
        exclude_video_id: Optional[str],
        limit: int,
    ) -> List[AttributableVideo]:
        rows = [
            w for w in self._watches
            if w.viewer_id == viewer_id and w.video_id != exclude_video_id
        ]
        rows.sort(key=lambda w: w.watched_at, reverse=True)
        out = []
        for w in rows[:limit]:
            video = self._videos.get(w.video_id)
            if video is not None:
                out.append(video)
        return out


class JsonVideoStore(InMemoryVideoStore):
    """
    Video store backed by JSON files in one directory. Missing files load as empty.
    Attribution writes are saved back to videos.json.
    """

    ORGANIZATIONS_FILE = "organizations.json"
    VIDEOS_FILE = "videos.json"
    WATCH_HISTORY_FILE = "watch_history.json"

    def __init__(self, data_dir: Union[Path, str]):
        self._dir = Path(data_dir)
        super().__init__(
            organizations=self._read_list(self.ORGANIZATIONS_FILE, "organizations"),
            videos=self._read_list(self.VIDEOS_FILE, "videos"),
            watch_history=self._read_list(self.WATCH_HISTORY_FILE, "watch_history"),
        )

    def _read_list(self, filename: str, key: str) -> List[Dict]:
        path = self._dir / filename
        if not path.exists():
            return []
        with open(path) as f:
            data = json.load(f)
        return data.get(key, []) if isinstance(data, dict) else data

    def _save_videos(self) -> None:
        """Write videos.json through a temp file so a failed write leaves the old file intact."""
        out = {"videos": [v.model_dump() for v in self._videos.values()]}
        path = self._dir / self.VIDEOS_FILE
        tmp_path = path.with_suffix(".json.tmp")
        with open(tmp_path, "w") as f:
            json.dump(out, f, indent=2)
        os.replace(tmp_path, path)

    def write_attribution(
        self,
        video_id: str,
        org_id: str,
        opponent_org_id: Optional[str],
        confidence_score: float,
    ) -> None:
        previous = self._videos.get(video_id)
        super().write_attribution(video_id, org_id, opponent_org_id, confidence_score)
        try:
            self._save_videos()
        except Exception:
            # Keep memory in step with the file
            self._videos[video_id] = previous
            raise
