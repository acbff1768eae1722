"""
Algorithm configuration — attribution matching and discovery scoring parameters.

MatchingConfig and RecommendationConfig defaults are defined here. The server may
pass a dict (e.g. from ALGORITHM_CONFIG_PATH); from_dict() merges it with these defaults.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class MatchingConfig(BaseModel):
    """Configuration for the text matcher and attribution decision."""

    # -------------------------------------------------------------------------
    # Acceptance
    # -------------------------------------------------------------------------

    # Top organization must score at least this to be attributed (0-100).
    # The same floor applies to the opponent of a battle video.
    min_confidence: int = Field(default=30, ge=0, le=100)

    # -------------------------------------------------------------------------
    # Alias matching
    # -------------------------------------------------------------------------

    # Aliases shorter than this are never used for matching.
    min_alias_length: int = 3
    # Aliases up to this length must match as a whole word.
    boundary_alias_max_length: int = 4

    # -------------------------------------------------------------------------
    # Base scores by match type
    # -------------------------------------------------------------------------

    score_exact_name: int = 100
    score_school_name: int = 80
    # alias length >= long_alias_length
    score_long_partial: int = 60
    long_alias_length: int = 8
    # alias length >= medium_alias_length
    score_medium_partial: int = 50
    medium_alias_length: int = 5
    score_abbreviation: int = 30

    # All-star / mass bands: exact band name, aliases of at least
    # all_star_alias_length characters, shorter aliases
    score_all_star_exact: int = 110
    score_all_star_alias: int = 90
    all_star_alias_length: int = 4
    score_all_star_short: int = 70

    # Lowercased all-star band name -> extra aliases for that band
    all_star_bands: Dict[str, List[str]] = Field(default_factory=dict)

    # -------------------------------------------------------------------------
    # Positional bonus (title-weighted). Added without clamping.
    # -------------------------------------------------------------------------

    title_window_chars: int = 200
    title_bonus: int = 10

    # -------------------------------------------------------------------------
    # Event-based matching: known classics name their participants
    # -------------------------------------------------------------------------

    event_matching_enabled: bool = False
    event_match_score: int = 85

    # -------------------------------------------------------------------------
    # Exclusions: reason -> substring patterns. Podcast patterns starting with
    # a space are treated as case-insensitive regexes.
    # -------------------------------------------------------------------------

    exclusion_patterns: Dict[str, List[str]] = Field(default_factory=dict)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "MatchingConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = dict(config_dict.get("matching", {}))
        if "scores" in config_dict:
            scores = config_dict["scores"]
            for key in (
                "exact_name", "school_name", "long_partial", "medium_partial", "abbreviation",
                "all_star_exact", "all_star_alias", "all_star_short",
            ):
                if key in scores:
                    flat[f"score_{key}"] = scores[key]
        if "events" in config_dict:
            ev = config_dict["events"]
            flat["event_matching_enabled"] = ev.get("enabled", False)
            flat["event_match_score"] = ev.get("score", 85)
        if "exclusions" in config_dict:
            flat["exclusion_patterns"] = config_dict["exclusions"]
        if "all_star_bands" in config_dict:
            flat["all_star_bands"] = {
                band["name"].lower(): list(band.get("aliases", []))
                for band in config_dict["all_star_bands"]
            }
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


class RecommendationConfig(BaseModel):
    """Configuration for related-video scoring and assembly."""

    # -------------------------------------------------------------------------
    # Similarity weights (must sum to 1.0); each contributes weight * 100 points
    # -------------------------------------------------------------------------

    weight_same_category: float = 0.4
    weight_same_event: float = 0.3
    weight_matching_tags: float = 0.2
    weight_quality_bonus: float = 0.1

    # Share of the event weight granted when only the event year matches.
    same_year_credit: float = 0.7

    # Candidate quality_score thresholds for the full and half quality bonus.
    high_quality_threshold: float = 7
    medium_quality_threshold: float = 5

    # -------------------------------------------------------------------------
    # Candidate pool and diversification
    # -------------------------------------------------------------------------

    # Candidate pool is capped at limit * pool_multiplier rows.
    pool_multiplier: int = 5
    # Max results per organization in the main related list.
    max_per_org: int = 2

    # -------------------------------------------------------------------------
    # "Because you watched" sections
    # -------------------------------------------------------------------------

    max_sections: int = 5
    videos_per_section: int = 3
    section_max_per_org: int = 1
    # Section pools fetch videos_per_section * section_pool_multiplier rows.
    section_pool_multiplier: int = 3
    recent_watch_limit: int = 20

    # -------------------------------------------------------------------------
    # Caching (anonymous results only)
    # -------------------------------------------------------------------------

    cache_ttl_seconds: int = 21600

    @model_validator(mode="after")
    def weights_sum_to_one(self):
        total = (
            self.weight_same_category
            + self.weight_same_event
            + self.weight_matching_tags
            + self.weight_quality_bonus
        )
        if abs(total - 1.0) > 0.01:
            raise ValueError(f"Similarity weights must sum to 1.0, got {total}")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RecommendationConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "similarity" in config_dict:
            sim = config_dict["similarity"]
            for key in ("same_category", "same_event", "matching_tags", "quality_bonus"):
                if key in sim:
                    flat[f"weight_{key}"] = sim[key]
            if "same_year_credit" in sim:
                flat["same_year_credit"] = sim["same_year_credit"]
        if "diversity" in config_dict:
            div = config_dict["diversity"]
            flat["max_per_org"] = div.get("max_per_org", 2)
            flat["section_max_per_org"] = div.get("section_max_per_org", 1)
        if "sections" in config_dict:
            sec = config_dict["sections"]
            flat["max_sections"] = sec.get("max_sections", 5)
            flat["videos_per_section"] = sec.get("videos_per_section", 3)
        if "cache" in config_dict:
            flat["cache_ttl_seconds"] = config_dict["cache"].get("ttl_seconds", 21600)
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_MATCHING_CONFIG = MatchingConfig()
DEFAULT_RECOMMENDATION_CONFIG = RecommendationConfig()


def resolve_matching_config(config: Optional[MatchingConfig]) -> MatchingConfig:
    """Return config or DEFAULT_MATCHING_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_MATCHING_CONFIG


def resolve_recommendation_config(
    config: Optional[RecommendationConfig],
) -> RecommendationConfig:
    """Return config or DEFAULT_RECOMMENDATION_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_RECOMMENDATION_CONFIG
