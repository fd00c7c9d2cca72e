"""Rule-based advice and score labels derived from an analysis.

Template rules only, no model: each rule is evaluated independently and
appends at most one recommendation, in a fixed order.
"""

from collections.abc import Sequence

from models.schemas.analysis_report import (
    AnalysisReport,
    MissingSkill,
    Recommendation,
    RecommendationType,
)
from services.scoring import count_words

LOW_SCORE_THRESHOLD = 60
EXCELLENT_SCORE_THRESHOLD = 80
MANY_MISSING_THRESHOLD = 5
SHORT_CV_WORDS = 300
LONG_CV_WORDS = 1000


def generate_recommendations(
    score: int,
    missing_skills: Sequence[MissingSkill],
    cv_text: str | None,
) -> list[Recommendation]:
    """Build recommendations from score, skill gaps and CV length."""
    recommendations: list[Recommendation] = []

    if score < LOW_SCORE_THRESHOLD:
        recommendations.append(Recommendation(
            type=RecommendationType.CRITICAL,
            title="Low Match Score",
            description="Your CV needs significant optimization for this role",
            action="Consider adding more relevant keywords and skills",
        ))

    if len(missing_skills) > MANY_MISSING_THRESHOLD:
        top = ", ".join(m.skill for m in missing_skills[:3])
        recommendations.append(Recommendation(
            type=RecommendationType.WARNING,
            title="Missing Key Skills",
            description=f"{len(missing_skills)} important skills not found in your CV",
            action=f"Focus on adding: {top}",
        ))

    word_count = count_words(cv_text)
    if word_count < SHORT_CV_WORDS:
        recommendations.append(Recommendation(
            type=RecommendationType.INFO,
            title="CV Too Short",
            description="Your CV might be too brief for this role",
            action="Consider adding more detail to your experience sections",
        ))
    elif word_count > LONG_CV_WORDS:
        recommendations.append(Recommendation(
            type=RecommendationType.INFO,
            title="CV Too Long",
            description="Your CV might be too lengthy for quick screening",
            action="Consider condensing to the most relevant information",
        ))

    if score >= EXCELLENT_SCORE_THRESHOLD:
        recommendations.append(Recommendation(
            type=RecommendationType.SUCCESS,
            title="Excellent Match!",
            description="Your CV is well-optimized for this position",
            action="Review the optimized version and apply with confidence",
        ))

    return recommendations


# ---------------------------------------------------------------------------
# Score labels
# ---------------------------------------------------------------------------

def score_status(score: int) -> str:
    if score >= 80:
        return "Excellent Match!"
    elif score >= 60:
        return "Good Match"
    elif score >= 40:
        return "Fair Match"
    return "Needs Improvement"


def score_color(score: int) -> str:
    if score >= 80:
        return "green"
    elif score >= 60:
        return "yellow"
    elif score >= 40:
        return "orange"
    return "red"


def has_optimization_potential(report: AnalysisReport) -> bool:
    """Whether the optimizer is likely to move the needle for this CV."""
    return report.score < 70 or report.total_missing_skills > 3
