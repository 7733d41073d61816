"""Pydantic contracts passed between the scoring stages."""

from models.schemas.critical_metrics import CriticalMetric
from models.schemas.parameter_scores import ParameterScore
from models.schemas.resume_data import (
    AdditionalSection,
    Certification,
    Education,
    Project,
    ResumeData,
    SkillGroup,
    WorkExperience,
)
from models.schemas.tier_scores import TierScore

__all__ = [
    "AdditionalSection",
    "Certification",
    "CriticalMetric",
    "Education",
    "ParameterScore",
    "Project",
    "ResumeData",
    "SkillGroup",
    "TierScore",
    "WorkExperience",
]
