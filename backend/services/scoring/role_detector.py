"""Fresher vs experienced role detection.

Decides which tier-weight table applies. An explicit years-of-experience
requirement wins over entry-level wording ("Junior engineer, 3+ years"
is an experienced role); when the JD says neither, the resume decides.
"""

import logging
import re

from models.schemas import ResumeData
from services.scoring.rubric import DEFAULT_RUBRIC, Rubric
from services.section_parser import extract_required_years

logger = logging.getLogger(__name__)

FRESHER = "fresher"
EXPERIENCED = "experienced"

_DASHES_RE = re.compile(r"[‐‑‒–—―]")


def _phrase_pattern(phrase: str) -> re.Pattern:
    return re.compile(rf"(?<![a-z0-9]){re.escape(phrase.lower())}(?![a-z0-9])")


def _normalize_jd(job_description: str) -> str:
    text = _DASHES_RE.sub("-", job_description.lower())
    return re.sub(r"\s+", " ", text)


def find_fresher_signals(job_description: str, rubric: Rubric = DEFAULT_RUBRIC) -> list[str]:
    """Configured fresher phrases present in the JD, in rubric order."""
    text = _normalize_jd(job_description)
    return [p for p in rubric.fresher_phrases if _phrase_pattern(p).search(text)]


def detect_role_type(
    resume: ResumeData,
    job_description: str | None,
    rubric: Rubric = DEFAULT_RUBRIC,
) -> str:
    """Return ``"fresher"`` or ``"experienced"``."""
    jd = job_description or ""

    if jd.strip():
        required = extract_required_years(_normalize_jd(jd))
        if required >= rubric.experienced_min_years:
            logger.debug("Experienced role: JD requires %.0f years", required)
            return EXPERIENCED

        signals = find_fresher_signals(jd, rubric)
        if signals:
            logger.debug("Fresher role: JD signals %s", signals)
            return FRESHER

    if not resume.work_experience:
        return FRESHER
    return EXPERIENCED
