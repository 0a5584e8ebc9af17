import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile
from starlette.concurrency import run_in_threadpool

from ..ai_services import AIService, get_ai_service
from ..errors import ValidationError
from ..extract import ALLOWED_EXTENSIONS, MAX_UPLOAD_BYTES, extract_text, normalize_extension, saved_upload
from ..schemas import (
    CoverLetterOut, CoverLetterRequest, GenerateResumeRequest, OptimizedResumeOut, UploadOut,
)
from ..validation import INSUFFICIENT_MESSAGE, check_sufficiency, require_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/resume", tags=["resume"])


@router.post("/upload", response_model=UploadOut)
async def upload_resume(request: Request, resume: Optional[UploadFile] = File(None)):
    """Extract plain text from an uploaded PDF, DOC, DOCX or TXT resume."""
    if resume is None or not resume.filename:
        raise ValidationError("No file uploaded")

    ext = normalize_extension(resume.filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise ValidationError("Invalid file type. Only PDF, DOCX, DOC, and TXT files are allowed.")

    contents = await resume.read()
    if len(contents) > MAX_UPLOAD_BYTES:
        raise ValidationError("File too large. Maximum size is 5MB.")

    upload_dir = request.app.state.settings.upload_dir
    with saved_upload(contents, ext, upload_dir) as path:
        text = await run_in_threadpool(extract_text, path, ext)

    logger.info(f"Extracted {len(text)} characters from {ext} upload")
    return UploadOut(extractedText=text, message="File processed successfully")


@router.post("/generate", response_model=OptimizedResumeOut)
async def generate_resume(body: GenerateResumeRequest, ai: AIService = Depends(get_ai_service)):
    require_text(body.resumeText, message="Please paste your resume content.")

    # Sparse manual entries are refused rather than padded out by the model
    verdict = check_sufficiency(body.resumeText)
    if not verdict.sufficient:
        logger.info(f"Rejected manual resume entry: {verdict.reason} "
                    f"({verdict.characters} chars, {verdict.words} words, sections={list(verdict.sections)})")
        raise ValidationError(INSUFFICIENT_MESSAGE)

    optimized = await ai.generate_optimized_resume(body.resumeText, body.jobDescription)
    return OptimizedResumeOut(optimizedResume=optimized, message="Resume generated successfully")


@router.post("/cover-letter", response_model=CoverLetterOut)
async def cover_letter(body: CoverLetterRequest, ai: AIService = Depends(get_ai_service)):
    require_text(body.resumeText, body.jobDescription,
                 message="Resume text and job description are required")

    letter = await ai.generate_cover_letter(
        body.resumeText, body.jobDescription,
        company_name=body.companyName, position_title=body.positionTitle,
    )
    return CoverLetterOut(coverLetter=letter, message="Cover letter generated successfully")
