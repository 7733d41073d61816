"""ATS scoring engine entry point.

Flow:
    resume_text + ResumeData + JD
      -> role detection (fresher / experienced)
      -> tier scorer  +  critical-metrics extractor   (independent)
      -> parameter mapper (floors, then clamp)
      -> report builder

The engine is a pure function of its inputs: no I/O, no clock, no shared
state. Text extraction and any LLM normalization happen before it is called.
"""

import logging

from models.responses import MissingKeywords, ScoreReport
from models.schemas import ResumeData
from services.keyword_extractor import (
    categorize_missing_keywords,
    compute_keyword_density,
    match_job_keywords,
)
from services.scoring.critical_metrics import extract_critical_metrics
from services.scoring.parameter_mapper import map_to_parameters
from services.scoring.report_builder import build_report
from services.scoring.role_detector import detect_role_type
from services.scoring.rubric import DEFAULT_RUBRIC, Rubric
from services.scoring.tier_scorer import score_tiers

logger = logging.getLogger(__name__)


def evaluate(
    resume_text: str,
    resume_data: ResumeData | None,
    job_description: str | None,
    *,
    filename: str | None = None,
    rubric: Rubric = DEFAULT_RUBRIC,
) -> ScoreReport:
    """Score a resume against an optional job description.

    ``resume_data`` may be None (treated as an empty resume) and
    ``job_description`` may be None, blank or too short, in which case the
    engine runs in generic resume-quality mode.
    """
    resume = resume_data or ResumeData()
    text = (resume_text or "").strip() or resume.as_text()
    jd = (job_description or "").strip()
    has_jd = rubric.has_jd(jd)

    role_type = detect_role_type(resume, jd, rubric)
    tiers = score_tiers(
        resume,
        job_description=jd,
        resume_text=text,
        role_type=role_type,
        rubric=rubric,
        filename=filename,
    )
    metrics = extract_critical_metrics(resume, jd, resume_text=text, rubric=rubric)
    parameters = map_to_parameters(tiers, metrics, has_jd, rubric=rubric)

    matched: list[str] = []
    missing = MissingKeywords()
    density: dict[str, float] = {}
    if has_jd:
        matched, missing_terms = match_job_keywords(text, jd)
        missing = MissingKeywords(**categorize_missing_keywords(missing_terms, jd))
        density = compute_keyword_density(text, matched)

    report = build_report(
        parameters,
        tiers=tiers,
        metrics=metrics,
        role_type=role_type,
        has_jd=has_jd,
        matched_keywords=matched,
        missing_keywords=missing,
        keyword_density=density,
        score_cap=rubric.overall_score_cap,
    )
    logger.info(
        "Scored resume: overall=%d quality=%s role=%s has_jd=%s",
        report.overall_score, report.match_quality, role_type, has_jd,
    )
    return report
