"""
Sufficiency check for manually entered resume text.

Sparse input would make the model invent a resume, so the optimized-resume
flow refuses text that is too short or lacks at least two of the core
sections (experience, skills, education).
"""
import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Pattern, Tuple

from .errors import ValidationError

MIN_CHARACTERS = 300
MIN_WORDS = 60
MIN_SECTIONS = 2

SECTION_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "experience": ("experience", "work", "employment", "role", "roles"),
    "skills": ("skill", "skills", "technology", "technologies", "stack", "tool", "tools"),
    "education": ("education", "degree", "bachelor", "master", "university", "college"),
}

INSUFFICIENT_MESSAGE = (
    "Please provide more resume details before generating. Include at least two of: "
    "Work Experience (with bullets), Skills, and Education, roughly 60+ words total."
)


def _section_pattern(keywords: Tuple[str, ...]) -> Pattern[str]:
    # keyword must end on an ASCII word boundary; "networking" is not "work"
    alternatives = "|".join(re.escape(k) for k in sorted(keywords, key=len, reverse=True))
    return re.compile(rf"(?:{alternatives})\b", re.IGNORECASE | re.ASCII)


SECTION_PATTERNS: Dict[str, Pattern[str]] = {
    name: _section_pattern(keywords) for name, keywords in SECTION_KEYWORDS.items()
}


@dataclass(frozen=True)
class SufficiencyVerdict:
    sufficient: bool
    reason: str  # empty | too_short | too_few_words | missing_sections | ok
    characters: int = 0
    words: int = 0
    sections: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def missing_sections(self) -> Tuple[str, ...]:
        return tuple(name for name in SECTION_KEYWORDS if name not in self.sections)


def detect_sections(text: str) -> Tuple[str, ...]:
    return tuple(name for name, pattern in SECTION_PATTERNS.items() if pattern.search(text))


def check_sufficiency(resume_text: Optional[str]) -> SufficiencyVerdict:
    text = (resume_text or "").strip()
    if not text:
        return SufficiencyVerdict(False, "empty")

    characters = len(text)
    if characters < MIN_CHARACTERS:
        return SufficiencyVerdict(False, "too_short", characters=characters)

    words = len(text.split())
    if words < MIN_WORDS:
        return SufficiencyVerdict(False, "too_few_words", characters=characters, words=words)

    sections = detect_sections(text)
    if len(sections) < MIN_SECTIONS:
        return SufficiencyVerdict(False, "missing_sections", characters, words, sections)

    return SufficiencyVerdict(True, "ok", characters, words, sections)


def require_text(*values: Optional[str], message: str) -> None:
    """Raise ValidationError unless every value has non-whitespace content."""
    if any(not (v or "").strip() for v in values):
        raise ValidationError(message)
