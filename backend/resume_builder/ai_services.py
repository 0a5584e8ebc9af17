"""
AI Services Module for the Resume Builder
Builds the career-document prompts and sends them to the selected
OpenAI-compatible chat-completions endpoint.
"""
import logging
from typing import Optional

import httpx
from fastapi import Request

from .errors import ProviderError
from .providers import ProviderSelector

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7

RESUME_SYSTEM_PROMPT = (
    "You are an expert resume writer and career coach with 15+ years of experience "
    "helping professionals land their dream jobs."
)
COVER_LETTER_SYSTEM_PROMPT = (
    "You are an expert career coach and professional writer specializing in cover letters."
)
LINKEDIN_SYSTEM_PROMPT = "You are a LinkedIn expert and personal branding specialist."
INTERVIEW_SYSTEM_PROMPT = (
    "You are an expert career coach and interview preparation specialist with extensive "
    "experience in various industries."
)
CAREER_ADVICE_SYSTEM_PROMPT = (
    "You are an expert career coach and professional development specialist with deep "
    "knowledge across multiple industries."
)


def _line(label: str, value: Optional[str]) -> str:
    return f"{label}: {value}" if value else ""


class AIService:
    """Generates career documents through the configured LLM provider"""

    def __init__(self, selector: ProviderSelector, timeout: float = 60.0):
        self.selector = selector
        self.timeout = timeout

    async def generate_optimized_resume(self, resume_text: str, job_description: Optional[str] = None) -> str:
        prompt = f"""
        You are an expert resume writer and career coach. Please analyze the following resume information and create an optimized, professional resume.

        User's Resume Information:
        {resume_text}

        {_line("Target Job Description", job_description)}

        Please create a well-structured resume that includes:
        1. Professional Summary/Objective
        2. Skills section (organized by category)
        3. Work Experience (with quantified achievements)
        4. Education
        5. Certifications (if any)
        6. Additional sections as relevant

        Format the response as a clean, professional resume. Use action verbs, quantify achievements where possible, and ensure ATS compatibility.
        Keep each line under 80 characters for better readability.
        """
        return await self._call_llm(prompt, RESUME_SYSTEM_PROMPT, max_tokens=2000)

    async def generate_cover_letter(
        self,
        resume_text: str,
        job_description: str,
        company_name: Optional[str] = None,
        position_title: Optional[str] = None,
    ) -> str:
        prompt = f"""
        Create a compelling, personalized cover letter based on the following information:

        Resume Information:
        {resume_text}

        Job Description:
        {job_description}

        {_line("Company", company_name)}
        {_line("Position", position_title)}

        The cover letter should:
        1. Be professional and engaging
        2. Highlight relevant experience and skills
        3. Show enthusiasm for the role
        4. Be 3-4 paragraphs long
        5. Include specific examples from the resume
        6. Be tailored to the job requirements

        Format as a proper business letter with appropriate greeting and closing.
        """
        return await self._call_llm(prompt, COVER_LETTER_SYSTEM_PROMPT, max_tokens=1500)

    async def generate_linkedin_summary(
        self,
        resume_text: str,
        industry: Optional[str] = None,
        experience_level: Optional[str] = None,
    ) -> str:
        prompt = f"""
        Create a compelling LinkedIn summary based on the following resume information:

        Resume Information:
        {resume_text}

        {_line("Industry", industry)}
        {_line("Experience Level", experience_level)}

        The LinkedIn summary should:
        1. Be 2-3 paragraphs (150-300 words)
        2. Start with a strong hook
        3. Highlight key achievements and skills
        4. Include relevant keywords for the industry
        5. Show personality and passion
        6. End with a call-to-action
        7. Be professional yet engaging

        Format it as a LinkedIn summary with proper line breaks.
        """
        return await self._call_llm(prompt, LINKEDIN_SYSTEM_PROMPT, max_tokens=1000)

    async def generate_interview_prep(
        self,
        resume_text: str,
        job_description: Optional[str] = None,
        position_title: Optional[str] = None,
        industry: Optional[str] = None,
    ) -> str:
        prompt = f"""
        Generate comprehensive mock interview questions and preparation guidance based on:

        Resume Information:
        {resume_text}

        {_line("Job Description", job_description)}
        {_line("Position", position_title)}
        {_line("Industry", industry)}

        Please provide:
        1. 10-15 behavioral questions (STAR method)
        2. 5-8 technical questions (if applicable)
        3. 3-5 situational questions
        4. 2-3 questions about the candidate's background
        5. Sample answers for 3 key questions
        6. Interview tips and strategies
        7. Questions the candidate should ask the interviewer

        Format as a comprehensive interview preparation guide.
        """
        return await self._call_llm(prompt, INTERVIEW_SYSTEM_PROMPT, max_tokens=2500)

    async def generate_career_advice(
        self,
        resume_text: str,
        career_goals: Optional[str] = None,
        current_challenges: Optional[str] = None,
        industry: Optional[str] = None,
    ) -> str:
        prompt = f"""
        Provide personalized career advice based on the following information:

        Current Resume/Background:
        {resume_text}

        {_line("Career Goals", career_goals)}
        {_line("Current Challenges", current_challenges)}
        {_line("Industry", industry)}

        Please provide:
        1. Analysis of current strengths and areas for improvement
        2. Specific recommendations for career advancement
        3. Skill development suggestions
        4. Networking strategies
        5. Industry insights and trends
        6. Actionable next steps
        7. Timeline recommendations

        Format as a comprehensive career development plan.
        """
        return await self._call_llm(prompt, CAREER_ADVICE_SYSTEM_PROMPT, max_tokens=2000)

    async def _call_llm(self, prompt: str, system: str, max_tokens: int) -> str:
        """HTTP call to the selected OpenAI-compatible endpoint"""
        selection = self.selector.get()

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {selection.api_key}",
        }
        payload = {
            "model": selection.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": max_tokens,
            "temperature": TEMPERATURE,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{selection.endpoint}/chat/completions",
                    headers=headers,
                    json=payload,
                )
        except httpx.HTTPError as e:
            logger.error(f"LLM request to {selection.provider.name} failed: {e}")
            raise ProviderError(f"LLM request failed: {e}") from e

        if response.status_code != 200:
            logger.error(f"LLM call failed: {response.status_code} {response.text}")
            raise ProviderError(f"API call failed: {response.status_code} {response.text}")

        try:
            return response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected LLM response shape: {e}")
            raise ProviderError(f"Unexpected response from LLM provider: {e}") from e


def get_ai_service(request: Request) -> AIService:
    """FastAPI dependency returning the service built for this app instance"""
    return request.app.state.ai_service
