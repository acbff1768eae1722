"""Shared fixtures: organizations, a video catalog with watch history, stores and app state."""

import pytest

from bandhub.aliases import build_alias_index
from bandhub.models import AttributableVideo, Organization
from bandhub_server.config import ServerConfig
from bandhub_server.services import InMemoryCache, InMemoryVideoStore
from bandhub_server.state import AppState, set_state

JSU = Organization(
    id="org-jsu",
    canonical_name="Sonic Boom of the South",
    school_name="Jackson State University",
    region="MS",
)
SOUTHERN = Organization(
    id="org-su",
    canonical_name="Human Jukebox",
    school_name="Southern University",
    region="LA",
)
GRAMBLING = Organization(
    id="org-gram",
    canonical_name="World Famed Tiger Marching Band",
    school_name="Grambling State University",
    region="LA",
)
TSU = Organization(
    id="org-tsu",
    canonical_name="Aristocrat of Bands",
    school_name="Tennessee State University",
    region="TN",
)

ALL_STAR = Organization(
    id="org-allstar",
    canonical_name="HBCU All-Star Band",
)
ALL_STAR_BANDS = {"hbcu all-star band": ["HBCU All Stars", "asb"]}


@pytest.fixture
def organizations():
    return [JSU, SOUTHERN, GRAMBLING, TSU]


@pytest.fixture
def alias_index(organizations):
    return build_alias_index(organizations)


def make_video(video_id, org_id=None, **fields) -> AttributableVideo:
    data = {"id": video_id, "title": fields.pop("title", f"Video {video_id}")}
    if org_id is not None:
        data["attributed_org_id"] = org_id
        data["confidence_score"] = fields.pop("confidence_score", 90)
    data.update(fields)
    return AttributableVideo.model_validate(data)


@pytest.fixture
def catalog():
    """
    Attributed catalog for discovery.

    src (JSU, halftime, Bayou Classic 2023) is the video being watched; JSU's other
    videos must never be recommended for it.
    """
    return [
        make_video("src", "org-jsu", category_id="halftime", event_name="Bayou Classic",
                   event_year=2023, tags=["halftime", "hbcu"], quality_score=8, view_count=500),
        make_video("jsu-2", "org-jsu", category_id="halftime", quality_score=9, view_count=900),
        make_video("su-1", "org-su", category_id="halftime", event_name="Bayou Classic",
                   event_year=2023, tags=["halftime", "hbcu"], quality_score=9, view_count=800),
        make_video("su-2", "org-su", category_id="halftime", quality_score=7, view_count=700),
        make_video("su-3", "org-su", category_id="halftime", quality_score=6, view_count=600),
        make_video("gram-1", "org-gram", category_id="halftime", event_year=2023,
                   quality_score=5, view_count=300),
        make_video("gram-2", "org-gram", category_id="stand-battle", tags=["hbcu"],
                   quality_score=4, view_count=5000),
        make_video("tsu-1", "org-tsu", category_id="stand-battle", quality_score=8, view_count=1200),
        make_video("tsu-2", "org-tsu", category_id="parade", quality_score=3, view_count=50),
        make_video("hidden", "org-tsu", category_id="halftime", quality_score=10,
                   view_count=99999, is_hidden=True),
    ]


@pytest.fixture
def watch_history():
    return [
        {"viewer_id": "viewer-1", "video_id": "tsu-1", "watched_at": "2024-05-03T10:00:00Z"},
        {"viewer_id": "viewer-1", "video_id": "gram-2", "watched_at": "2024-05-02T10:00:00Z"},
        {"viewer_id": "viewer-1", "video_id": "tsu-1", "watched_at": "2024-05-01T10:00:00Z"},
        {"viewer_id": "viewer-1", "video_id": "src", "watched_at": "2024-04-30T10:00:00Z"},
    ]


@pytest.fixture
def store(organizations, catalog, watch_history):
    return InMemoryVideoStore(organizations, catalog, watch_history)


@pytest.fixture
def app_state(store):
    state = AppState(ServerConfig(), store=store, cache=InMemoryCache())
    set_state(state)
    yield state
    set_state(None)
