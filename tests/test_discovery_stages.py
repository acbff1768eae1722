"""
Discovery Stage Tests

Similarity scoring, organization diversification, fallback backfill and candidate
filter construction.

Run:
----
    pytest tests/test_discovery_stages.py -v
"""

import pytest

from bandhub.models import (
    AnyVisible,
    CandidateFilter,
    CategoryEquals,
    EventNameContains,
    EventYearEquals,
    RecommendationConfig,
    ScoredVideo,
    TagsOverlap,
)
from bandhub.stages import (
    FALLBACK_REASON,
    build_candidate_filter,
    build_fallback_filter,
    build_section_filter,
    compose_with_fallback,
    compute_similarity,
    diversify_by_org,
    score_candidates,
)
from tests.conftest import make_video


def scored(video_id, org_id, score=50.0):
    return ScoredVideo(video=make_video(video_id, org_id), similarity_score=score, match_reason="x")


class TestSimilarity:
    @pytest.fixture(autouse=True)
    def setup(self):
        self.source = make_video(
            "src", "org-a", category_id="halftime", event_name="Bayou Classic",
            event_year=2023, tags=["Halftime", "HBCU"], quality_score=8,
        )

    def test_ceiling(self):
        candidate = make_video(
            "c", "org-b", category_id="halftime", event_name="bayou classic",
            event_year=2023, tags=["halftime", "hbcu"], quality_score=7,
        )
        result = compute_similarity(self.source, candidate)
        assert result.score == pytest.approx(100.0)
        assert result.reason == "Similar style, Same event, 2 matching tags, High quality"

    def test_category_only_medium_quality(self):
        candidate = make_video("c", "org-b", category_id="halftime", quality_score=6)
        result = compute_similarity(self.source, candidate)
        assert result.score == pytest.approx(45.0)
        assert result.reason == "Similar style"

    def test_same_year_partial_credit(self):
        candidate = make_video("c", "org-b", event_name="Homecoming", event_year=2023)
        result = compute_similarity(self.source, candidate)
        assert result.score == pytest.approx(21.0)
        assert result.reason == "Same year"

    def test_tag_ratio(self):
        candidate = make_video("c", "org-b", tags=["hbcu", "drumline"])
        result = compute_similarity(self.source, candidate)
        assert result.score == pytest.approx(10.0)
        assert result.reason == "1 matching tags"

    def test_no_overlap(self):
        candidate = make_video("c", "org-b", quality_score=2)
        result = compute_similarity(self.source, candidate)
        assert result.score == 0
        assert result.reason == "Discover new bands"

    def test_rounded_to_two_decimals(self):
        source = make_video("s", tags=["a", "b", "c"])
        candidate = make_video("c", tags=["a"])
        assert compute_similarity(source, candidate).score == 6.67

    def test_weights_from_config(self):
        config = RecommendationConfig(
            weight_same_category=0.7, weight_same_event=0.1,
            weight_matching_tags=0.1, weight_quality_bonus=0.1,
        )
        candidate = make_video("c", "org-b", category_id="halftime")
        assert compute_similarity(self.source, candidate, config).score == pytest.approx(70.0)


class TestDiversify:
    def test_cap_and_order(self):
        items = [scored("1", "a"), scored("2", "a"), scored("3", "a"), scored("4", "b"), scored("5", "a")]
        result = diversify_by_org(items, limit=10, max_per_org=2)
        assert [i.video.id for i in result] == ["1", "2", "4"]

    def test_limit(self):
        items = [scored(str(i), f"org-{i}") for i in range(5)]
        assert len(diversify_by_org(items, limit=3)) == 3

    def test_section_cap_of_one(self):
        items = [scored("1", "a"), scored("2", "a"), scored("3", "b")]
        assert [i.video.id for i in diversify_by_org(items, 3, max_per_org=1)] == ["1", "3"]


class TestFallback:
    def test_completeness_without_duplicates(self):
        primary = [scored("1", "a"), scored("2", "b")]
        fallback = [make_video("2", "b"), make_video("3", "c"), make_video("4", "d"), make_video("5", "e")]
        videos, reason = compose_with_fallback(primary, fallback, limit=4, category_known=True)
        ids = [v.video.id for v in videos]
        assert ids == ["1", "2", "3", "4"]
        assert len(set(ids)) == len(ids)
        assert reason == FALLBACK_REASON
        assert videos[2].similarity_score == 0
        assert videos[2].match_reason == "Popular in this category"
        assert videos[2].is_fallback

    def test_not_enough_fallback(self):
        primary = [scored("1", "a")]
        videos, _ = compose_with_fallback(primary, [make_video("2", "b")], limit=5, category_known=False)
        assert len(videos) == 2
        assert videos[1].match_reason == "Popular video"

    def test_no_fallback_appended(self):
        primary = [scored("1", "a")]
        videos, reason = compose_with_fallback(primary, [], limit=5, category_known=True)
        assert len(videos) == 1
        assert reason is None


class TestCandidateFilters:
    def test_related_filter_conditions(self):
        source = make_video("s", "org-a", category_id="halftime", event_name="Bayou Classic",
                            event_year=2023, tags=["hbcu"])
        filter_spec = build_candidate_filter(source)
        kinds = [c.kind for c in filter_spec.any_of]
        assert kinds == ["category_equals", "event_name_contains", "event_year_equals", "tags_overlap"]
        assert filter_spec.exclude_org_id == "org-a"
        assert filter_spec.ranking == "relevance"

    def test_related_filter_without_content(self):
        filter_spec = build_candidate_filter(make_video("s", "org-a"))
        assert len(filter_spec.any_of) == 1
        assert isinstance(filter_spec.any_of[0], AnyVisible)

    def test_section_filter_ignores_year(self):
        assert build_section_filter(make_video("s", "org-a", event_year=2023)) is None
        filter_spec = build_section_filter(make_video("s", "org-a", event_year=2023, tags=["x"]))
        assert [c.kind for c in filter_spec.any_of] == ["tags_overlap"]

    def test_fallback_filter(self):
        filter_spec = build_fallback_filter(make_video("s", "org-a", category_id="parade"))
        assert filter_spec.ranking == "popularity"
        assert filter_spec.any_of == [CategoryEquals(category_id="parade")]
        assert build_fallback_filter(make_video("s", "org-a")).any_of == []

    def test_filter_round_trips_through_discriminator(self):
        filter_spec = CandidateFilter(
            any_of=[CategoryEquals(category_id="c"), EventYearEquals(event_year=2020)],
            exclude_org_id="x",
        )
        parsed = CandidateFilter.model_validate(filter_spec.model_dump())
        assert isinstance(parsed.any_of[1], EventYearEquals)

    def test_matches(self):
        filter_spec = CandidateFilter(
            any_of=[EventNameContains(event_name="classic"), TagsOverlap(tags=["hbcu"])],
            exclude_org_id="org-a",
        )
        assert filter_spec.matches(make_video("1", "org-b", event_name="Bayou CLASSIC"))
        assert filter_spec.matches(make_video("2", "org-b", tags=["hbcu"]))
        assert not filter_spec.matches(make_video("3", "org-a", tags=["hbcu"]))
        assert not filter_spec.matches(make_video("4", "org-b", tags=["hbcu"], is_hidden=True))
        assert not filter_spec.matches(make_video("5", "org-b", tags=["HBCU"]))


class TestScoreCandidates:
    def test_sorted_by_score_then_views(self):
        source = make_video("s", "org-a", category_id="halftime")
        candidates = [
            make_video("low", "org-b"),
            make_video("cat-few", "org-c", category_id="halftime", view_count=10),
            make_video("cat-many", "org-d", category_id="halftime", view_count=1000),
            make_video("s", "org-a", category_id="halftime"),
        ]
        result = score_candidates(source, candidates, exclude_ids={"low"})
        assert [r.video.id for r in result] == ["cat-many", "cat-few"]
