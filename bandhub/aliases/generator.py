"""
Alias generation — derive lowercase search aliases for an organization.

Aliases come from the band name (full name, short forms, nicknames) and the school
name (full name, suffix-stripped form, acronyms, A&M/A&T and "State University"
patterns, region-aware codes, disambiguated short codes). Output is deterministic:
unique, trimmed, lowercase, in generation order.
"""

import re
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from ..models.organization import Organization

from .rules import JOINER_RULES, NICKNAME_RULES, SCHOOL_RULES, region_code_for

_CONNECTIVES = {"the", "and"}
_ACRONYM_STOPWORDS = {"of", "the", "at", "and"}


class OrganizationAliases(NamedTuple):
    """An organization with its precomputed aliases (built once per batch run)."""

    org: Organization
    aliases: Tuple[str, ...]


def _initials(words: Iterable[str]) -> str:
    return "".join(w[0] for w in words if w)


def _name_short_forms(name: str) -> List[str]:
    """First two and three significant words, e.g. "sonic boom" from "Sonic Boom of the South"."""
    stripped = re.sub(r"\s+of\s+the\s+", " ", name, flags=re.IGNORECASE)
    stripped = re.sub(r"\s+of\s+", " ", stripped, flags=re.IGNORECASE)
    parts = [
        p for p in stripped.split(" ")
        if len(p) > 2 and p.lower() not in _CONNECTIVES
    ]
    out = []
    if len(parts) >= 2:
        out.append(" ".join(parts[:2]))
        if len(parts) >= 3:
            out.append(" ".join(parts[:3]))
    return out


def _nickname_aliases(name: str) -> List[str]:
    upper = name.upper()
    out: List[str] = []
    for rule in NICKNAME_RULES:
        if rule.applies(upper):
            out.extend(rule.aliases)
    return out


def _school_short_form(school: str) -> str:
    simple = re.sub(r"\s+university$", "", school, count=1, flags=re.IGNORECASE)
    simple = re.sub(r"\s+college$", "", simple, count=1, flags=re.IGNORECASE)
    return simple.strip()


def _school_acronym(school: str) -> str:
    words = [
        w for w in school.replace("&", "and").split()
        if w.lower() not in _ACRONYM_STOPWORDS
    ]
    return _initials(words).upper()


def _joiner_aliases(school: str) -> List[str]:
    """A&M / A&T spelled-out variants and prefix-derived codes (PVAMU, ALAM)."""
    out: List[str] = []
    if "A&M" in school:
        out.append(school.replace("A&M", "A and M", 1))
        m = re.search(r"(.+?)\s*A&M", school, flags=re.IGNORECASE)
        if m:
            prefix = m.group(1).strip()
            prefix_words = prefix.split()
            if len(prefix_words) >= 2:
                acronym = _initials(prefix_words)
                out.extend([f"{acronym}AMU", f"{acronym}AM", f"{acronym} A&M"])
            elif len(prefix_words) == 1:
                code = region_code_for(prefix)
                if code:
                    out.extend([f"{code}AM", f"{code}AMU"])
    if "A&T" in school:
        out.append(school.replace("A&T", "A and T", 1))
        upper = school.upper()
        for rule in JOINER_RULES:
            if rule.applies(upper):
                out.extend(rule.aliases)
    return out


def _state_university_aliases(school: str) -> List[str]:
    """"Jackson State University" -> jackson state, jackson st, jsu, j-state."""
    if "State University" not in school:
        return []
    m = re.search(r"(.+?)\s+State\s+University", school, flags=re.IGNORECASE)
    if not m:
        return []
    state_name = m.group(1).strip()
    out = [f"{state_name} state", f"{state_name} st"]
    words = state_name.split()
    if len(words) == 1:
        out.extend([f"{state_name[0]}SU", f"{state_name[0]}-state"])
    else:
        out.append(f"{_initials(words)}SU")
    return out


def _university_of_at_aliases(school: str) -> List[str]:
    """"University of Arkansas at Pine Bluff" -> uapb, arpb, pine bluff, arkansas pine bluff."""
    m = re.search(r"university\s+of\s+(.+?)\s+at\s+(.+)", school, flags=re.IGNORECASE)
    if not m:
        return []
    state, location = m.group(1), m.group(2)
    location_acronym = _initials(location.split())
    out = []
    code = region_code_for(state)
    if code:
        out.extend([f"UA{location_acronym}", f"{code}{location_acronym}"])
    out.extend([location, f"{state} {location}"])
    return out


def _school_rule_aliases(school: str) -> List[str]:
    upper = school.upper()
    out: List[str] = []
    for rule in SCHOOL_RULES:
        if rule.applies(upper):
            out.extend(rule.aliases)
    return out


def _normalize(raw: Iterable[str]) -> Tuple[str, ...]:
    seen = set()
    aliases: List[str] = []
    for alias in raw:
        normalized = alias.strip().lower()
        if normalized and normalized not in seen:
            seen.add(normalized)
            aliases.append(normalized)
    return tuple(aliases)


def generate_aliases(
    org: Organization,
    all_star_bands: Optional[Dict[str, List[str]]] = None,
) -> Tuple[str, ...]:
    """
    Derive the alias collection for one organization.

    Pure and deterministic: the same record always yields the same tuple. Every
    alias is non-empty, trimmed and lowercase, with duplicates removed (first
    occurrence kept).

    All-star and mass bands span several schools, so they get only their own name
    plus whatever all_star_bands (lowercased name -> aliases) lists for them.
    """
    name = org.canonical_name
    school = org.school_name

    if org.is_all_star:
        return _normalize([name, *(all_star_bands or {}).get(name.lower(), [])])

    raw: List[str] = [name]
    raw.extend(_name_short_forms(name))
    raw.extend(_nickname_aliases(name))

    if school.strip():
        raw.append(school)
        short = _school_short_form(school)
        if short.lower() != school.lower():
            raw.append(short)
        acronym = _school_acronym(school)
        if len(acronym) >= 2:
            raw.append(acronym)
        raw.extend(_joiner_aliases(school))
        raw.extend(_state_university_aliases(school))
        raw.extend(_university_of_at_aliases(school))
        raw.extend(_school_rule_aliases(school))

    return _normalize(raw)


def build_alias_index(
    orgs: Iterable[Organization],
    all_star_bands: Optional[Dict[str, List[str]]] = None,
) -> List[OrganizationAliases]:
    """Precompute aliases for every organization (once per batch run)."""
    return [
        OrganizationAliases(org=org, aliases=generate_aliases(org, all_star_bands))
        for org in orgs
    ]
