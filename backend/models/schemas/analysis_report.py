"""Analysis engine output: skill matches, gaps, score and recommendations."""

from enum import Enum

from pydantic import BaseModel


class SkillCategory(str, Enum):
    """Fixed skill categories. Every catalog skill belongs to exactly one."""
    FRONTEND = "Frontend"
    BACKEND = "Backend"
    DATABASE = "Database"
    CLOUD = "Cloud"
    TOOLS = "Tools"
    SOFT_SKILLS = "Soft Skills"


class RecommendationType(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class SkillMatch(BaseModel):
    """A catalog skill found in both the CV and the job description."""
    model_config = {"frozen": True}

    skill: str  # canonical display name, e.g. "React"
    category: SkillCategory


class MissingSkill(BaseModel):
    """A catalog skill the job description asks for but the CV lacks."""
    model_config = {"frozen": True}

    skill: str
    category: SkillCategory
    priority: int = 0  # job keyword entries matching any variant of the skill


class Recommendation(BaseModel):
    model_config = {"frozen": True}

    type: RecommendationType
    title: str
    description: str
    action: str


class ScoreBreakdown(BaseModel):
    """Per-component contributions to the overall score (before rounding)."""
    model_config = {"frozen": True}

    keyword_match: float = 0.0  # 0-40
    length: float = 0.0  # 0-15
    section_completeness: float = 0.0  # 0-20
    skill_diversity: float = 0.0  # 0-15
    missing_critical: float = 0.0  # 0-10
    total: int = 0  # rounded and clamped to 0-100


class AnalysisReport(BaseModel):
    """Immutable result of analyzing one (CV text, job description) pair.

    ``missing_skills`` holds only the highest-priority gaps, while
    ``missing_by_category`` and ``total_missing_skills`` cover all of them.
    Both category maps always carry every ``SkillCategory`` key.
    """
    model_config = {"frozen": True}

    score: int = 0
    total_skill_matches: int = 0
    total_missing_skills: int = 0
    skill_matches: tuple[SkillMatch, ...] = ()
    missing_skills: tuple[MissingSkill, ...] = ()
    matches_by_category: dict[SkillCategory, tuple[SkillMatch, ...]] = {}
    missing_by_category: dict[SkillCategory, tuple[MissingSkill, ...]] = {}
    word_count: int = 0
    recommendations: tuple[Recommendation, ...] = ()
    score_breakdown: ScoreBreakdown = ScoreBreakdown()
    status: str = ""  # e.g. "Good Match"
