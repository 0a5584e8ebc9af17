from pydantic import BaseModel
from typing import Optional

# Request fields are all optional so missing text surfaces as a 400 with a
# readable message instead of a schema error.

class GenerateResumeRequest(BaseModel):
    resumeText: Optional[str] = None
    jobDescription: Optional[str] = None

class CoverLetterRequest(BaseModel):
    resumeText: Optional[str] = None
    jobDescription: Optional[str] = None
    companyName: Optional[str] = None
    positionTitle: Optional[str] = None

class LinkedInSummaryRequest(BaseModel):
    resumeText: Optional[str] = None
    industry: Optional[str] = None
    experienceLevel: Optional[str] = None

class InterviewPrepRequest(BaseModel):
    resumeText: Optional[str] = None
    jobDescription: Optional[str] = None
    positionTitle: Optional[str] = None
    industry: Optional[str] = None

class CareerAdviceRequest(BaseModel):
    resumeText: Optional[str] = None
    careerGoals: Optional[str] = None
    currentChallenges: Optional[str] = None
    industry: Optional[str] = None

class GenerationOut(BaseModel):
    success: bool = True
    message: str

class UploadOut(GenerationOut):
    extractedText: str

class OptimizedResumeOut(GenerationOut):
    optimizedResume: str

class CoverLetterOut(GenerationOut):
    coverLetter: str

class LinkedInSummaryOut(GenerationOut):
    linkedinSummary: str

class InterviewPrepOut(GenerationOut):
    interviewPrep: str

class CareerAdviceOut(GenerationOut):
    careerAdvice: str

class ErrorOut(BaseModel):
    success: bool = False
    message: str

class HealthOut(BaseModel):
    status: str = "ok"
