"""Skill name normalization and synonym expansion.

Every surface form of a skill ("React.js", "ReactJS", "react") collapses to
one normalized string. A skill is present in a keyword set when any of its
normalized variants is.
"""

import re
from collections.abc import Iterable
from functools import lru_cache

from services.skill_catalog import synonyms_of

_STRIP_RE = re.compile(r"[^a-z0-9.+/#-]")

# Canonicalization rules applied after stripping (spaces are already gone,
# so "ci cd" arrives here as "cicd")
_CANONICAL_RULES: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"^react(?:\.?js)?$"), "react"),
    (re.compile(r"^node(?:\.?js)?$"), "nodejs"),
    (re.compile(r"^ci[-/]?cd$"), "ci/cd"),
)


def normalize_skill(token: str | None) -> str:
    """Normalize a token or skill name to its canonical matching form.

    Idempotent: normalizing an already-normalized value returns it unchanged.
    """
    if not token:
        return ""
    normalized = _STRIP_RE.sub("", token.lower()).strip(".-")
    for pattern, canonical in _CANONICAL_RULES:
        if pattern.match(normalized):
            return canonical
    return normalized


@lru_cache(maxsize=None)
def skill_variants(skill: str) -> frozenset[str]:
    """Normalized forms of a skill's display name and all its synonyms."""
    variants = {normalize_skill(skill)}
    variants.update(normalize_skill(synonym) for synonym in synonyms_of(skill))
    variants.discard("")
    return frozenset(variants)


def normalize_keywords(keywords: Iterable[str]) -> set[str]:
    """Normalize each keyword individually into a new set."""
    return {normalized for normalized in map(normalize_skill, keywords) if normalized}


def has_skill(skill: str, normalized_keywords: set[str]) -> bool:
    return not skill_variants(skill).isdisjoint(normalized_keywords)
