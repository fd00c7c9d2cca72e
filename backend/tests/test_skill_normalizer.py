import pytest

from services.skill_catalog import (
    ALL_SKILLS,
    SKILL_CATEGORIES,
    SKILL_SYNONYMS,
    category_of,
)
from models.schemas.analysis_report import SkillCategory
from services.skill_normalizer import (
    has_skill,
    normalize_keywords,
    normalize_skill,
    skill_variants,
)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("React", "react"),
        ("React.js", "react"),
        ("ReactJS", "react"),
        ("Node", "nodejs"),
        ("Node.js", "nodejs"),
        ("NodeJS", "nodejs"),
        ("CI/CD", "ci/cd"),
        ("CI-CD", "ci/cd"),
        ("CI CD", "ci/cd"),
        ("C#", "c#"),
        ("C sharp", "csharp"),
        ("C++", "c++"),
        ("SQL Server", "sqlserver"),
        ("react.", "react"),
    ],
)
def test_normalize_skill(token, expected):
    assert normalize_skill(token) == expected


def test_normalize_skill_empty():
    assert normalize_skill("") == ""
    assert normalize_skill(None) == ""


@pytest.mark.parametrize(
    "token",
    ["React.js", "NodeJS", "ci cd", "C-sharp", "  VS Code ", "-node.js-", "Problem-solving", "Résumé!"],
)
def test_normalize_skill_idempotent(token):
    once = normalize_skill(token)
    assert normalize_skill(once) == once


def test_skill_variants_many_to_one():
    assert skill_variants("React") == frozenset({"react"})
    assert skill_variants("C#") == frozenset({"c#", "csharp", "c-sharp"})
    assert "k8s" in skill_variants("Kubernetes")


def test_skill_variants_without_synonyms():
    assert skill_variants("Python") == frozenset({"python"})


def test_normalize_keywords_collapses_variants():
    assert normalize_keywords({"react", "react.js", "reactjs"}) == {"react"}


def test_has_skill_via_synonym():
    keywords = normalize_keywords({"golang", "services"})
    assert has_skill("Go", keywords)
    assert not has_skill("Rust", keywords)


def test_multi_word_skill_matches_bigram():
    keywords = normalize_keywords({"strong", "problem solving", "solving"})
    assert has_skill("Problem solving", keywords)


# --- Catalog invariants ---

def test_every_category_has_skills():
    assert set(SKILL_CATEGORIES) == set(SkillCategory)
    assert all(SKILL_CATEGORIES[c] for c in SkillCategory)


def test_every_skill_in_exactly_one_category():
    assert len(ALL_SKILLS) == len(set(ALL_SKILLS))
    for skill in ALL_SKILLS:
        owners = [c for c, skills in SKILL_CATEGORIES.items() if skill in skills]
        assert owners == [category_of(skill)]


def test_synonym_table_only_names_catalog_skills():
    assert set(SKILL_SYNONYMS) <= set(ALL_SKILLS)


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        SKILL_CATEGORIES[SkillCategory.TOOLS] = ("Vim",)
