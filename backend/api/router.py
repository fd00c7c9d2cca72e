import logging

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import OptimizeRequest, ParseCVRequest, QuickAnalyzeRequest
from models.responses import BuildCVResponse, HealthResponse
from models.schemas.analysis_report import AnalysisReport
from models.schemas.cv_document import CVData, CVForm
from models.schemas.optimization_result import OptimizationResult
from services import cover_letter, cv_builder, cv_optimizer, cv_parser, document_parser
from services.cv_analyzer import generate_analysis_report
from services.skill_catalog import ALL_SKILLS

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", skills=len(ALL_SKILLS))


@router.post("/analyze", response_model=AnalysisReport)
@limiter.limit(settings.rate_limit)
async def analyze(
    request: Request,
    cv_file: UploadFile = File(...),
    job_description: str = Form(...),
):
    if not document_parser.is_supported(cv_file.filename):
        logger.warning("Rejected upload with unsupported type: %s", cv_file.filename)
        raise HTTPException(status_code=400, detail="Only plain text CV files are accepted")

    content = await cv_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    if len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )

    try:
        cv_text = document_parser.extract_text(content, cv_file.filename)
    except document_parser.DocumentDecodeError:
        logger.warning("Could not decode uploaded CV: %s", cv_file.filename)
        raise HTTPException(status_code=400, detail="Could not read CV file as UTF-8 text")

    if not cv_text:
        raise HTTPException(status_code=400, detail="No text found in CV file")
    if len(cv_text) > settings.max_cv_chars:
        raise HTTPException(
            status_code=400,
            detail=f"CV too long (max {settings.max_cv_chars} chars)",
        )

    return generate_analysis_report(cv_text, job_description)


@router.post("/analyze/quick", response_model=AnalysisReport)
@limiter.limit(settings.rate_limit)
async def analyze_quick(request: Request, body: QuickAnalyzeRequest):
    return generate_analysis_report(body.cv_text, body.job_description)


@router.post("/optimize", response_model=OptimizationResult)
@limiter.limit(settings.rate_limit)
async def optimize(request: Request, body: OptimizeRequest):
    return OptimizationResult(
        optimized_cv=cv_optimizer.optimize_cv(
            body.cv_text, body.job_description, body.role, body.company
        ),
        cover_letter=cover_letter.generate_cover_letter(
            body.full_name, body.company, body.role, body.job_description
        ),
        analysis=generate_analysis_report(body.cv_text, body.job_description),
    )


@router.post("/cv/build", response_model=BuildCVResponse)
async def build_cv(form: CVForm):
    return BuildCVResponse(cv_text=cv_builder.build_cv_text(form))


@router.post("/cv/parse", response_model=CVData)
async def parse_cv(body: ParseCVRequest):
    return cv_parser.parse_cv(body.cv_text, body.full_name, body.location)
