import pytest

from models.schemas.analysis_report import MissingSkill, SkillCategory, SkillMatch
from services.scoring import (
    calculate_cv_score,
    count_words,
    critical_points,
    diversity_points,
    keyword_match_points,
    length_points,
    score_breakdown,
    section_points,
)


def _missing(priority: int) -> MissingSkill:
    return MissingSkill(skill="Docker", category=SkillCategory.CLOUD, priority=priority)


def test_empty_inputs_score_zero(sample_cv, sample_jd):
    assert calculate_cv_score("", sample_jd) == 0
    assert calculate_cv_score(sample_cv, "") == 0
    assert calculate_cv_score(None, None) == 0
    assert score_breakdown("", sample_jd).length == 0


def test_end_to_end_scenario_score(sample_jd):
    cv = (
        "John Doe\nEXPERIENCE\n- Developed web applications using JavaScript and React\n"
        "EDUCATION\nSKILLS\nJavaScript, React"
    )
    breakdown = score_breakdown(cv, sample_jd)
    # 2 matches over 24 job keywords: 2 / 2.4 * 40
    assert breakdown.keyword_match == pytest.approx(33.33, abs=0.01)
    assert breakdown.length == 5
    assert breakdown.section_completeness == 20
    assert breakdown.skill_diversity == 2.5
    assert breakdown.missing_critical == 10
    assert breakdown.total == 71
    assert calculate_cv_score(cv, sample_jd) == 71


def test_react_js_in_cv_scores_against_react_in_job():
    breakdown = score_breakdown("React.js", "React")
    # one match over one job keyword: the ratio denominator floors at 1
    assert breakdown.keyword_match == 40
    assert breakdown.skill_diversity == 2.5
    assert breakdown.missing_critical == 10
    assert calculate_cv_score("React.js", "React") == breakdown.total
    assert breakdown.total > calculate_cv_score("Vue.js", "React")


def test_score_is_deterministic(sample_cv, sample_jd):
    assert calculate_cv_score(sample_cv, sample_jd) == calculate_cv_score(sample_cv, sample_jd)


def test_score_within_bounds(sample_cv, sample_jd):
    score = calculate_cv_score(sample_cv * 50, sample_jd)
    assert 0 <= score <= 100


def test_score_monotonic_in_skill_overlap():
    job = "Python developer with Docker and Kubernetes, experience required"
    cv = "Python developer with five years of experience"
    before = calculate_cv_score(cv, job)
    after = calculate_cv_score(cv + " Docker", job)
    assert after >= before
    assert calculate_cv_score(cv + " Docker Kubernetes", job) >= after


# --- Components ---

def test_keyword_match_points():
    assert keyword_match_points(0, 100) == 0
    assert keyword_match_points(2, 100) == pytest.approx(8.0)
    # short job descriptions: denominator floors at 1, contribution caps at 40
    assert keyword_match_points(1, 5) == 40
    assert keyword_match_points(10, 20) == 40


@pytest.mark.parametrize(
    "words, points",
    [(0, 5), (299, 5), (300, 10), (399, 10), (400, 15), (800, 15), (801, 10), (1000, 10), (1001, 5)],
)
def test_length_points(words, points):
    assert length_points(words) == points


def test_section_points_one_section_boundary():
    assert section_points("Ten years of Experience in retail") == pytest.approx(20 / 3)


def test_section_points_is_lenient_substring_search():
    assert section_points("I led a skills workshop") == pytest.approx(20 / 3)
    assert section_points("EXPERIENCE\nEDUCATION\nSKILLS") == 20
    assert section_points("nothing") == 0


def test_one_section_cv_gets_partial_completeness():
    breakdown = score_breakdown("Python experience", "Python")
    assert breakdown.section_completeness == pytest.approx(6.67)


def test_diversity_points():
    matches = [
        SkillMatch(skill="React", category=SkillCategory.FRONTEND),
        SkillMatch(skill="Vue", category=SkillCategory.FRONTEND),
        SkillMatch(skill="Docker", category=SkillCategory.CLOUD),
    ]
    assert diversity_points(matches) == 5
    assert diversity_points([]) == 0


def test_critical_points_penalty():
    assert critical_points([]) == 10
    assert critical_points([_missing(1), _missing(1)]) == 10
    assert critical_points([_missing(2), _missing(3)]) == 6
    assert critical_points([_missing(2)] * 6) == 0


def test_count_words():
    assert count_words("") == 0
    assert count_words(None) == 0
    assert count_words("  one two\nthree\tfour  ") == 4
