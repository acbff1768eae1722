"""Alias derivation: rule tables and the generator built on them."""

from .generator import OrganizationAliases, build_alias_index, generate_aliases
from .rules import JOINER_RULES, NICKNAME_RULES, REGION_NAMES, SCHOOL_RULES, AliasRule, region_code_for

__all__ = [
    "AliasRule",
    "JOINER_RULES",
    "NICKNAME_RULES",
    "OrganizationAliases",
    "REGION_NAMES",
    "SCHOOL_RULES",
    "build_alias_index",
    "generate_aliases",
    "region_code_for",
]
