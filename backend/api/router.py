from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import __version__, settings
from models.requests import EvaluateRequest
from models.responses import ScoreReport
from services import pdf_parser, resume_analyzer

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "version": __version__,
    }


@router.post("/evaluate", response_model=ScoreReport)
@limiter.limit(settings.rate_limit)
async def evaluate(
    request: Request,
    resume_file: UploadFile = File(...),
    job_description: str = Form(""),
):
    # Validate file type
    if not resume_file.filename or not resume_file.filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=400, detail="Only PDF files are accepted")

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    if len(job_description) > settings.max_jd_length:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_jd_length} chars)",
        )

    # Extraction failures never reach the scoring engine
    try:
        resume_text = pdf_parser.extract_text(content)
    except pdf_parser.ExtractionError as e:
        raise HTTPException(status_code=422, detail=f"Text extraction failed: {e}")

    return await resume_analyzer.score_resume(
        resume_text, job_description, filename=resume_file.filename
    )


@router.post("/evaluate/quick", response_model=ScoreReport)
@limiter.limit(settings.rate_limit)
async def evaluate_quick(request: Request, body: EvaluateRequest):
    if not body.resume_text.strip() and body.resume_data is None:
        raise HTTPException(status_code=400, detail="Provide resume_text or resume_data")

    return await resume_analyzer.score_resume(
        body.resume_text,
        body.job_description,
        resume_data=body.resume_data,
        filename=body.filename,
    )
