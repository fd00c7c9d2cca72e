from models.schemas.analysis_report import SkillCategory
from services.keyword_extractor import extract_keywords
from services.skill_matcher import (
    find_missing_skills,
    find_skill_matches,
    match_skills,
    skill_priority,
)


def _skills(items):
    return [item.skill for item in items]


def test_match_skills_basic():
    cv = extract_keywords("JavaScript and React developer")
    job = extract_keywords("React, JavaScript and Docker wanted")
    matches, missing = match_skills(cv, job)
    assert _skills(matches) == ["React", "JavaScript"]  # catalog order
    assert _skills(missing) == ["Docker"]


def test_match_skills_synonym_react_js():
    """React.js in the CV satisfies React in the job description."""
    cv = extract_keywords("Built UIs with React.js")
    job = extract_keywords("Looking for React engineers")
    matches, missing = match_skills(cv, job)
    assert "React" in _skills(matches)
    assert "React" not in _skills(missing)


def test_match_skills_synonym_csharp():
    cv = extract_keywords("Backend services in CSharp")
    job = extract_keywords("Strong C# required")
    matches, _ = match_skills(cv, job)
    assert "C#" in _skills(matches)


def test_java_does_not_match_javascript():
    cv = extract_keywords("JavaScript expert")
    job = extract_keywords("Java backend role")
    matches, missing = match_skills(cv, job)
    assert matches == []
    assert _skills(missing) == ["Java"]


def test_cv_only_skills_are_ignored():
    cv = extract_keywords("Python Django Redis")
    job = extract_keywords("Python developer")
    matches, missing = match_skills(cv, job)
    assert _skills(matches) == ["Python"]
    assert missing == []


def test_match_categories():
    cv = extract_keywords("PostgreSQL and Kubernetes")
    job = extract_keywords("Postgres, K8s, Jira")
    matches, missing = match_skills(cv, job)
    by_skill = {m.skill: m.category for m in matches}
    assert by_skill == {
        "PostgreSQL": SkillCategory.DATABASE,
        "Kubernetes": SkillCategory.CLOUD,
    }
    assert missing[0].category == SkillCategory.TOOLS


def test_multi_word_skill_match():
    cv = extract_keywords("Known for problem solving and team work")
    job = extract_keywords("Problem solving and teamwork matter here")
    matches, _ = match_skills(cv, job)
    assert _skills(matches) == ["Team work", "Problem solving"]


# --- Priority ranker ---

def test_skill_priority_counts_variant_entries():
    job = extract_keywords("C# and CSharp and C-sharp")
    assert skill_priority("C#", job) == 3


def test_skill_priority_zero_when_absent():
    assert skill_priority("Rust", extract_keywords("Python only")) == 0


def test_missing_sorted_by_priority_desc_stable():
    cv = extract_keywords("nothing relevant here")
    job = extract_keywords("Python, Docker, C#, CSharp, React, ReactJS")
    missing = find_missing_skills(cv, job)
    priorities = [m.priority for m in missing]
    assert priorities == sorted(priorities, reverse=True)
    # React (2 surface forms) and C# (2) first, in catalog order, then the rest
    assert _skills(missing) == ["React", "C#", "Python", "Docker"]


def test_find_skill_matches_and_missing_agree_with_match_skills():
    cv = extract_keywords("React Python")
    job = extract_keywords("React Python AWS")
    assert find_skill_matches(cv, job) == match_skills(cv, job)[0]
    assert find_missing_skills(cv, job) == match_skills(cv, job)[1]


def test_empty_inputs():
    assert match_skills(set(), set()) == ([], [])
    matches, missing = match_skills(set(), extract_keywords("Python"))
    assert matches == []
    assert _skills(missing) == ["Python"]
