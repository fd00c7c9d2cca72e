"""Catalog-driven skill matching and gap ranking between a CV and a job.

For each canonical catalog skill, decide whether the CV and the job
description mention it (via normalized variants), then emit matches for
skills on both sides and prioritized gaps for job-only skills.
"""

import logging
from collections.abc import Iterable

from models.schemas.analysis_report import MissingSkill, SkillMatch
from services.skill_catalog import ALL_SKILLS, category_of
from services.skill_normalizer import has_skill, normalize_keywords, normalize_skill, skill_variants

logger = logging.getLogger(__name__)


def skill_priority(skill: str, job_keywords: Iterable[str]) -> int:
    """Count job keyword entries whose normalized form is a variant of ``skill``."""
    variants = skill_variants(skill)
    return sum(1 for keyword in job_keywords if normalize_skill(keyword) in variants)


def find_skill_matches(cv_keywords: Iterable[str], job_keywords: Iterable[str]) -> list[SkillMatch]:
    """Skills present in both keyword sets, in catalog order."""
    matches, _ = match_skills(cv_keywords, job_keywords)
    return matches


def find_missing_skills(cv_keywords: Iterable[str], job_keywords: Iterable[str]) -> list[MissingSkill]:
    """Job-only skills, highest priority first."""
    _, missing = match_skills(cv_keywords, job_keywords)
    return missing


def match_skills(
    cv_keywords: Iterable[str], job_keywords: Iterable[str]
) -> tuple[list[SkillMatch], list[MissingSkill]]:
    """Compute matched and missing catalog skills.

    The missing list is sorted by priority descending; ``sorted`` is stable,
    so equal priorities keep catalog order.
    """
    job_keywords = list(job_keywords)
    cv_normalized = normalize_keywords(cv_keywords)
    job_normalized = normalize_keywords(job_keywords)

    matches: list[SkillMatch] = []
    missing: list[MissingSkill] = []
    for skill in ALL_SKILLS:
        if not has_skill(skill, job_normalized):
            continue
        category = category_of(skill)
        if has_skill(skill, cv_normalized):
            matches.append(SkillMatch(skill=skill, category=category))
        else:
            missing.append(MissingSkill(
                skill=skill,
                category=category,
                priority=skill_priority(skill, job_keywords),
            ))

    missing = sorted(missing, key=lambda m: m.priority, reverse=True)
    logger.debug("Skill match: %d matched, %d missing", len(matches), len(missing))
    return matches, missing
