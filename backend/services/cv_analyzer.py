"""Report assembler: one immutable analysis report per (CV, job) pair.

Pipeline:
1. Keyword extraction for both texts
2. Catalog skill matching + gap prioritization
3. Weighted scoring
4. Category bucketing and top-gap truncation
5. Recommendations and status label

The report is a pure function of its two inputs, so results are memoized.
"""

import logging
from collections.abc import Sequence
from functools import lru_cache

from config import settings
from models.schemas.analysis_report import (
    AnalysisReport,
    MissingSkill,
    ScoreBreakdown,
    SkillCategory,
    SkillMatch,
)
from services import keyword_extractor, scoring
from services.recommendations import generate_recommendations, score_status
from services.skill_matcher import match_skills

logger = logging.getLogger(__name__)


def _bucket_by_category(
    items: Sequence[SkillMatch | MissingSkill],
) -> dict[SkillCategory, tuple]:
    """Group items by category; every category is present, possibly empty."""
    return {
        category: tuple(item for item in items if item.category == category)
        for category in SkillCategory
    }


def generate_analysis_report(cv_text: str | None, job_description: str | None) -> AnalysisReport:
    """Run the full analysis pipeline. Never raises on empty or odd input.

    Each call returns its own copy of the memoized report.
    """
    report = _build_report(cv_text or "", job_description or "")
    return report.model_copy(deep=True)


@lru_cache(maxsize=settings.analysis_cache_size)
def _build_report(cv_text: str, job_description: str) -> AnalysisReport:
    cv_keywords = keyword_extractor.extract_keywords(cv_text)
    job_keywords = keyword_extractor.extract_keywords(job_description)
    matches, missing = match_skills(cv_keywords, job_keywords)

    if cv_text and job_description:
        breakdown = scoring.compute_breakdown(cv_text, len(job_keywords), matches, missing)
    else:
        breakdown = ScoreBreakdown()
    score = breakdown.total

    report = AnalysisReport(
        score=score,
        total_skill_matches=len(matches),
        total_missing_skills=len(missing),
        skill_matches=tuple(matches),
        missing_skills=tuple(missing[:settings.missing_skills_limit]),
        matches_by_category=_bucket_by_category(matches),
        missing_by_category=_bucket_by_category(missing),
        word_count=scoring.count_words(cv_text),
        recommendations=tuple(generate_recommendations(score, missing, cv_text)),
        score_breakdown=breakdown,
        status=score_status(score),
    )
    logger.debug(
        "Analysis complete: score=%d matched=%d missing=%d",
        score, len(matches), len(missing),
    )
    return report
