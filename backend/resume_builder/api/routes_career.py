from fastapi import APIRouter, Depends

from ..ai_services import AIService, get_ai_service
from ..schemas import (
    CareerAdviceOut, CareerAdviceRequest, InterviewPrepOut, InterviewPrepRequest,
    LinkedInSummaryOut, LinkedInSummaryRequest,
)
from ..validation import require_text

router = APIRouter(prefix="/api/career", tags=["career"])

# These generators only need some resume text; the sufficiency gate is
# reserved for the optimized-resume flow.
RESUME_REQUIRED = "Resume text is required"


@router.post("/linkedin-summary", response_model=LinkedInSummaryOut)
async def linkedin_summary(body: LinkedInSummaryRequest, ai: AIService = Depends(get_ai_service)):
    require_text(body.resumeText, message=RESUME_REQUIRED)
    summary = await ai.generate_linkedin_summary(
        body.resumeText, industry=body.industry, experience_level=body.experienceLevel,
    )
    return LinkedInSummaryOut(linkedinSummary=summary, message="LinkedIn summary generated successfully")


@router.post("/interview-prep", response_model=InterviewPrepOut)
async def interview_prep(body: InterviewPrepRequest, ai: AIService = Depends(get_ai_service)):
    require_text(body.resumeText, message=RESUME_REQUIRED)
    guide = await ai.generate_interview_prep(
        body.resumeText,
        job_description=body.jobDescription,
        position_title=body.positionTitle,
        industry=body.industry,
    )
    return InterviewPrepOut(interviewPrep=guide, message="Interview preparation guide generated successfully")


@router.post("/career-advice", response_model=CareerAdviceOut)
async def career_advice(body: CareerAdviceRequest, ai: AIService = Depends(get_ai_service)):
    require_text(body.resumeText, message=RESUME_REQUIRED)
    advice = await ai.generate_career_advice(
        body.resumeText,
        career_goals=body.careerGoals,
        current_challenges=body.currentChallenges,
        industry=body.industry,
    )
    return CareerAdviceOut(careerAdvice=advice, message="Career advice generated successfully")
