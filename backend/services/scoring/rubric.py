"""Rubric tables for the 16-parameter ATS score.

The engine never reads these tables from module state directly: every
scoring function takes a ``Rubric`` argument (defaulting to
``DEFAULT_RUBRIC``) so alternate weightings can be injected in tests or
from configuration.
"""

import math

from pydantic import BaseModel, model_validator

# ---------------------------------------------------------------------------
# Fixed names
# ---------------------------------------------------------------------------
TIER_KEYS: tuple[str, ...] = (
    "experience",
    "skills_keywords",
    "education",
    "certifications",
    "basic_structure",
    "content_structure",
    "qualitative",
    "competitive",
)

TIER_NAMES: dict[str, str] = {
    "experience": "Experience",
    "skills_keywords": "Skills & Keywords",
    "education": "Education",
    "certifications": "Certifications",
    "basic_structure": "Basic Structure",
    "content_structure": "Content Structure",
    "qualitative": "Qualitative",
    "competitive": "Competitive",
}

METRIC_KEYS: tuple[str, ...] = (
    "jd_keywords_match",
    "technical_skills_alignment",
    "quantified_results_presence",
    "job_title_relevance",
    "experience_relevance",
)

# Metrics that compare the resume with the job description. Without a JD
# they are reported as zero and never feed a floor rule.
JD_RELATIVE_METRICS: frozenset[str] = frozenset({
    "jd_keywords_match",
    "technical_skills_alignment",
    "job_title_relevance",
    "experience_relevance",
})

# ---------------------------------------------------------------------------
# Default tables
# ---------------------------------------------------------------------------
# Per-parameter caps. They add up to 138, so the overall score (their sum)
# is capped separately at OVERALL_SCORE_CAP.
PARAMETER_MAX_SCORES: dict[str, int] = {
    "keywordMatch": 25,
    "skillsAlignment": 20,
    "experienceRelevance": 15,
    "technicalCompetencies": 12,
    "educationScore": 10,
    "quantifiedAchievements": 8,
    "employmentHistory": 8,
    "industryExperience": 7,
    "jobTitleMatch": 6,
    "careerProgression": 6,
    "certifications": 5,
    "formatting": 5,
    "contentQuality": 4,
    "grammar": 3,
    "resumeLength": 2,
    "filenameQuality": 2,
}

OVERALL_SCORE_CAP = 100

METRIC_MAX_SCORES: dict[str, int] = {
    "jd_keywords_match": 5,
    "technical_skills_alignment": 5,
    "quantified_results_presence": 3,
    "job_title_relevance": 3,
    "experience_relevance": 3,
}

STANDARD_TIER_WEIGHTS: dict[str, int] = {
    "experience": 25,
    "skills_keywords": 25,
    "education": 6,
    "certifications": 4,
    "basic_structure": 10,
    "content_structure": 15,
    "qualitative": 7,
    "competitive": 8,
}

# Entry-level roles: experience is de-emphasised in favour of skills,
# education and certifications.
FRESHER_TIER_WEIGHTS: dict[str, int] = {
    "experience": 8,
    "skills_keywords": 28,
    "education": 15,
    "certifications": 8,
    "basic_structure": 11,
    "content_structure": 16,
    "qualitative": 7,
    "competitive": 7,
}

DEFAULT_FRESHER_PHRASES: tuple[str, ...] = (
    "fresher",
    "freshers",
    "fresh graduate",
    "fresh graduates",
    "entry level",
    "entry-level",
    "new grad",
    "new graduate",
    "recent graduate",
    "campus hire",
    "campus hiring",
    "graduate program",
    "trainee",
    "intern",
    "internship",
    "junior",
    "no experience required",
    "no prior experience",
    "0-1 years",
    "0-2 years",
)


class Rubric(BaseModel):
    """Immutable scoring configuration."""

    model_config = {"frozen": True}

    parameter_max_scores: dict[str, int] = PARAMETER_MAX_SCORES
    metric_max_scores: dict[str, int] = METRIC_MAX_SCORES
    standard_tier_weights: dict[str, int] = STANDARD_TIER_WEIGHTS
    fresher_tier_weights: dict[str, int] = FRESHER_TIER_WEIGHTS
    fresher_phrases: tuple[str, ...] = DEFAULT_FRESHER_PHRASES
    experienced_min_years: int = 2
    min_jd_length: int = 50
    overall_score_cap: int = OVERALL_SCORE_CAP

    @model_validator(mode="after")
    def check_tables(self) -> "Rubric":
        if set(self.parameter_max_scores) != set(PARAMETER_MAX_SCORES):
            raise ValueError("parameter_max_scores must name exactly the 16 parameters")
        if sum(self.parameter_max_scores.values()) < self.overall_score_cap:
            raise ValueError("parameter maximums must allow the overall score cap to be reached")
        if any(v <= 0 for v in self.parameter_max_scores.values()):
            raise ValueError("parameter maximums must be positive")
        if set(self.metric_max_scores) != set(METRIC_KEYS):
            raise ValueError("metric_max_scores must name exactly the 5 critical metrics")
        for label, weights in (
            ("standard_tier_weights", self.standard_tier_weights),
            ("fresher_tier_weights", self.fresher_tier_weights),
        ):
            if set(weights) != set(TIER_KEYS):
                raise ValueError(f"{label} must name exactly the 8 tiers")
            if sum(weights.values()) != 100:
                raise ValueError(f"{label} must sum to 100")
        return self

    def tier_weights(self, role_type: str) -> dict[str, int]:
        if role_type == "fresher":
            return self.fresher_tier_weights
        return self.standard_tier_weights

    def has_jd(self, job_description: str | None) -> bool:
        """A job description only counts when it is longer than ``min_jd_length``."""
        return len((job_description or "").strip()) > self.min_jd_length


DEFAULT_RUBRIC = Rubric()


def rubric_from_settings(settings) -> Rubric:
    """Build a rubric with the thresholds and phrase list from ``Settings``."""
    phrases = tuple(settings.fresher_phrases) if settings.fresher_phrases else DEFAULT_FRESHER_PHRASES
    return Rubric(
        fresher_phrases=phrases,
        experienced_min_years=settings.experienced_min_years,
        min_jd_length=settings.min_jd_length,
    )


# ---------------------------------------------------------------------------
# Arithmetic helpers
# ---------------------------------------------------------------------------

def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; scores need 12.5 -> 13.
    return int(math.floor(value + 0.5))


def scale(percentage: float, maximum: int) -> int:
    """Scale a 0-100 percentage onto ``0..maximum`` with half-up rounding."""
    return round_half_up(percentage / 100 * maximum)


def percent(part: float, whole: float) -> int:
    """Whole-number percentage with an explicit zero guard."""
    if whole <= 0:
        return 0
    return max(0, min(100, round_half_up(part / whole * 100)))
