"""
API Tests

Exercise the FastAPI app in-process with TestClient against the shared in-memory
catalog (see conftest.app_state).

Run:
----
    pytest tests/test_api.py -v
"""

import json

import pytest
from fastapi.testclient import TestClient

from bandhub_server.app import create_app
from bandhub_server.config import ServerConfig
from bandhub_server.services import InMemoryCache
from bandhub_server.state import AppState, set_state

BATTLE_TEXT = "Jackson State vs Southern University Battle of the Bands 2024"


class TestApi:
    @pytest.fixture(autouse=True)
    def setup(self, app_state):
        self.state = app_state
        self.client = TestClient(create_app())

    def test_root_and_health(self):
        assert self.client.get("/").json()["organizations"] == 4
        health = self.client.get("/api/health").json()
        assert health["status"] == "healthy"
        assert health["cache"]["available"]

    def test_related_videos(self):
        response = self.client.get("/api/videos/src/related", params={"limit": 3})
        assert response.status_code == 200
        body = response.json()
        assert [v["video"]["id"] for v in body["videos"]] == ["su-1", "gram-1", "su-2"]
        assert body["videos"][0]["match_reason"] == "Similar style, Same event, 2 matching tags, High quality"

    def test_related_videos_personalized(self):
        body = self.client.get("/api/videos/src/related", params={"viewer_id": "viewer-1"}).json()
        assert body["because_you_watched"][0]["source_video"]["id"] == "gram-2"

    def test_related_videos_not_found(self):
        assert self.client.get("/api/videos/missing/related").status_code == 404

    def test_related_videos_bad_limit(self):
        assert self.client.get("/api/videos/src/related", params={"limit": 0}).status_code == 422

    def test_matching_preview(self):
        response = self.client.post(
            "/api/matching/preview", json={"title": BATTLE_TEXT, "min_confidence": 50}
        )
        body = response.json()
        assert body["is_battle"]
        assert body["outcome"]["status"] == "attributed"
        assert body["outcome"]["org_id"] == "org-su"
        assert body["outcome"]["opponent_org_id"] == "org-jsu"
        assert [m["org_id"] for m in body["matches"]] == ["org-su", "org-jsu"]
        assert body["matches"][0]["match_type"] == "school_name"

    def test_matching_preview_low_confidence_lists_matches(self):
        body = self.client.post(
            "/api/matching/preview", json={"title": "JSU homecoming", "min_confidence": 50}
        ).json()
        assert body["outcome"]["status"] == "low_confidence"
        assert body["matches"][0]["matched_alias"] == "jsu"

    def test_batch_dry_run(self):
        self.state.store.add_video({"id": "new", "title": BATTLE_TEXT})
        response = self.client.post("/api/batch/run", json={"target": "match-videos", "dry_run": True})
        assert response.status_code == 200
        body = response.json()
        assert body["stats"]["matched"] == 1
        assert self.state.store.get_video("new").attributed_org_id is None

    def test_batch_run_writes_and_clears_cache(self):
        self.client.get("/api/videos/src/related", params={"limit": 3})
        assert len(self.state.cache) == 1
        self.state.store.add_video({"id": "new", "title": BATTLE_TEXT})
        body = self.client.post(
            "/api/batch/run", json={"target": "match-videos", "min_confidence": 50}
        ).json()
        assert body["stats"]["battle_videos"] == 1
        assert self.state.store.get_video("new").opponent_org_id == "org-jsu"
        assert len(self.state.cache) == 0

    def test_batch_clear_cache(self):
        self.client.get("/api/videos/src/related", params={"limit": 3})
        body = self.client.post("/api/batch/run", json={"target": "clear-related-cache"}).json()
        assert body["cleared_keys"] == 1

    def test_batch_unknown_target(self):
        response = self.client.post("/api/batch/run", json={"target": "reindex"})
        assert response.status_code == 400
        assert "reindex" in response.json()["detail"]

    @pytest.mark.parametrize("payload", [
        {"target": "match-videos", "min_confidence": 101},
        {"target": "match-videos", "limit": 0},
    ])
    def test_batch_invalid_parameters(self, payload):
        assert self.client.post("/api/batch/run", json=payload).status_code == 422

    def test_batch_targets(self):
        assert self.client.get("/api/batch/targets").json()["targets"] == [
            "clear-related-cache", "match-videos",
        ]

    def test_organizations(self):
        body = self.client.get("/api/organizations").json()
        assert body["total"] == 4
        org = self.client.get("/api/organizations/org-su").json()
        assert org["canonical_name"] == "Human Jukebox"
        assert org["video_count"] == 3
        aliases = self.client.get("/api/organizations/org-jsu/aliases").json()["aliases"]
        assert "jsu" in aliases
        assert self.client.get("/api/organizations/nope").status_code == 404
        assert self.client.get("/api/organizations/nope/aliases").status_code == 404


class TestBatchConfiguredFloor:
    """match-videos without min_confidence uses the algorithm config's floor."""

    @pytest.fixture(autouse=True)
    def setup(self, store, tmp_path):
        config_path = tmp_path / "algorithm.json"
        config_path.write_text(json.dumps({"matching": {"min_confidence": 50}}))
        self.state = AppState(
            ServerConfig(algorithm_config_path=config_path), store=store, cache=InMemoryCache()
        )
        self.state.store.add_video({"id": "new", "title": "JSU homecoming"})
        set_state(self.state)
        self.client = TestClient(create_app())
        yield
        set_state(None)

    def test_config_floor_applies(self):
        body = self.client.post(
            "/api/batch/run", json={"target": "match-videos", "dry_run": True}
        ).json()
        assert body["stats"]["matched"] == 0
        assert body["stats"]["low_confidence"] == 1

    def test_request_overrides_config_floor(self):
        body = self.client.post(
            "/api/batch/run", json={"target": "match-videos", "dry_run": True, "min_confidence": 30}
        ).json()
        assert body["stats"]["matched"] == 1
