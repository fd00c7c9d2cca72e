"""Optimizer output: rewritten CV, cover letter and the analysis behind them."""

from pydantic import BaseModel

from models.schemas.analysis_report import AnalysisReport


class OptimizationResult(BaseModel):
    optimized_cv: str = ""
    cover_letter: str = ""
    analysis: AnalysisReport = AnalysisReport()
