"""Pydantic contracts shared by the analysis engine and the API."""

from models.schemas.analysis_report import (
    AnalysisReport,
    MissingSkill,
    Recommendation,
    RecommendationType,
    ScoreBreakdown,
    SkillCategory,
    SkillMatch,
)
from models.schemas.cv_document import CVData, CVForm
from models.schemas.optimization_result import OptimizationResult

__all__ = [
    "AnalysisReport",
    "MissingSkill",
    "Recommendation",
    "RecommendationType",
    "ScoreBreakdown",
    "SkillCategory",
    "SkillMatch",
    "CVData",
    "CVForm",
    "OptimizationResult",
]
