"""Weighted CV score (0-100) from five additive components.

Components and their maximum contributions:
- keyword match (40): matched skills relative to job keyword richness
- length (15): CV word count, best in the 400-800 range
- section completeness (20): "experience", "education", "skills" mentioned
- skill diversity (15): distinct categories among matched skills
- missing critical (10): penalty for job skills with priority >= 2
"""

import logging
import math

from models.schemas.analysis_report import MissingSkill, ScoreBreakdown, SkillCategory, SkillMatch
from services.keyword_extractor import extract_keywords
from services.skill_matcher import match_skills

logger = logging.getLogger(__name__)

MAX_KEYWORD_SCORE = 40
MAX_SECTION_SCORE = 20
MAX_DIVERSITY_SCORE = 15
MAX_CRITICAL_SCORE = 10

# Job keyword sets include bigrams and trigrams, roughly tripling their size;
# only a tenth of the set counts towards the match ratio denominator
KEYWORD_RATIO_DAMPING = 0.1

OPTIMAL_WORD_RANGE = (400, 800)
ACCEPTABLE_WORD_RANGE = (300, 1000)

EXPECTED_SECTIONS = ("experience", "education", "skills")

CRITICAL_PRIORITY = 2
CRITICAL_PENALTY = 2


def count_words(text: str | None) -> int:
    """Whitespace-separated word count of the raw text."""
    if not text:
        return 0
    return len(text.split())


def keyword_match_points(match_count: int, job_keyword_count: int) -> float:
    ratio = match_count / max(job_keyword_count * KEYWORD_RATIO_DAMPING, 1)
    return min(ratio * MAX_KEYWORD_SCORE, MAX_KEYWORD_SCORE)


def length_points(word_count: int) -> float:
    if OPTIMAL_WORD_RANGE[0] <= word_count <= OPTIMAL_WORD_RANGE[1]:
        return 15
    if ACCEPTABLE_WORD_RANGE[0] <= word_count <= ACCEPTABLE_WORD_RANGE[1]:
        return 10
    return 5


def section_points(cv_text: str) -> float:
    """Lenient section check: plain substring search, not header detection."""
    lower = cv_text.lower()
    found = sum(1 for section in EXPECTED_SECTIONS if section in lower)
    return found / len(EXPECTED_SECTIONS) * MAX_SECTION_SCORE


def diversity_points(matches: list[SkillMatch]) -> float:
    categories = {m.category for m in matches}
    return len(categories) / len(SkillCategory) * MAX_DIVERSITY_SCORE


def critical_points(missing: list[MissingSkill]) -> float:
    critical = sum(1 for m in missing if m.priority >= CRITICAL_PRIORITY)
    return max(MAX_CRITICAL_SCORE - CRITICAL_PENALTY * critical, 0)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_breakdown(
    cv_text: str,
    job_keyword_count: int,
    matches: list[SkillMatch],
    missing: list[MissingSkill],
) -> ScoreBreakdown:
    """Score already-matched inputs. Callers handle the empty-input case."""
    keyword = keyword_match_points(len(matches), job_keyword_count)
    length = length_points(count_words(cv_text))
    sections = section_points(cv_text)
    diversity = diversity_points(matches)
    critical = critical_points(missing)

    raw = keyword + length + sections + diversity + critical
    total = min(100, max(0, _round_half_up(raw)))
    return ScoreBreakdown(
        keyword_match=round(keyword, 2),
        length=length,
        section_completeness=round(sections, 2),
        skill_diversity=round(diversity, 2),
        missing_critical=critical,
        total=total,
    )


def score_breakdown(cv_text: str | None, job_description: str | None) -> ScoreBreakdown:
    """Score a CV against a job description, component by component.

    Empty CV text or job description short-circuits to an all-zero breakdown.
    """
    if not cv_text or not job_description:
        return ScoreBreakdown()

    cv_keywords = extract_keywords(cv_text)
    job_keywords = extract_keywords(job_description)
    matches, missing = match_skills(cv_keywords, job_keywords)
    return compute_breakdown(cv_text, len(job_keywords), matches, missing)


def calculate_cv_score(cv_text: str | None, job_description: str | None) -> int:
    """Overall match score 0-100. Deterministic, no side effects."""
    breakdown = score_breakdown(cv_text, job_description)
    logger.debug("CV score computed: %d", breakdown.total)
    return breakdown.total
