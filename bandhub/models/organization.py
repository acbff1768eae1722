"""
Organization model — the canonical entity (a school's band) videos are attributed to.

Aliases are never stored on the record; they are derived by aliases.generate_aliases.
"""

from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict


class Organization(BaseModel):
    """
    Canonical band record.

    canonical_name: the band's full name (e.g. "Sonic Boom of the South").
    school_name: the institution name (e.g. "Jackson State University").
    region: state/locale code (e.g. "MS").
    band_type: "HBCU" for a school band, "ALL_STAR" for an all-star or mass band
        assembled from several schools.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    canonical_name: str
    school_name: str = ""
    region: str = ""
    band_type: Literal["HBCU", "ALL_STAR"] = "HBCU"

    @property
    def is_all_star(self) -> bool:
        """ALL_STAR band type, or "all-star" / "mass band" in the name."""
        if self.band_type == "ALL_STAR":
            return True
        name = self.canonical_name.lower()
        return "all-star" in name or "mass band" in name


def ensure_organizations(
    items: List[Union[Dict[str, Any], "Organization"]],
) -> List["Organization"]:
    """Convert list of dicts or Organizations to Organization models."""
    return [
        Organization.model_validate(o) if isinstance(o, dict) else o
        for o in items
    ]
