"""Critical metrics: job-description-aware signals.

Five metrics compare the resume against the JD. They are not summed into
the overall score; the parameter mapper uses them as floors and boosts.
Without a usable JD, the four JD-relative metrics are reported as 0 so they
can never lift a parameter.
"""

import logging
import re

from models.schemas import CriticalMetric, ResumeData
from services.keyword_extractor import (
    JD_STOPWORDS,
    extract_technical_terms,
    match_job_keywords,
    match_keywords,
)
from services.pdf_parser import has_quantity
from services.scoring.rubric import (
    DEFAULT_RUBRIC,
    JD_RELATIVE_METRICS,
    METRIC_KEYS,
    Rubric,
    percent,
)

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[a-z][a-z0-9+#]*")


def _jd_words(job_description: str) -> set[str]:
    return set(_WORD_RE.findall(job_description.lower()))


def _significant_words(text: str, min_length: int) -> set[str]:
    return {
        w for w in _WORD_RE.findall(text.lower())
        if len(w) > min_length and w not in JD_STOPWORDS
    }


def _jd_keywords_match(resume: ResumeData, text: str, jd: str) -> tuple[int, str]:
    matched, missing = match_job_keywords(text, jd)
    total = len(matched) + len(missing)
    if not total:
        return 0, "No keywords could be extracted from the job description"
    return percent(len(matched), total), f"{len(matched)}/{total} job keywords found"


def _technical_skills_alignment(resume: ResumeData, text: str, jd: str) -> tuple[int, str]:
    jd_tech = extract_technical_terms(jd)
    if not jd_tech:
        return 0, "No technical terms found in the job description"
    evidence = "\n".join(resume.all_skills() + resume.experience_bullets() + resume.project_bullets())
    matched, _ = match_keywords(f"{evidence}\n{text}", jd_tech)
    return percent(len(matched), len(jd_tech)), f"{len(matched)}/{len(jd_tech)} required technologies present"


def _quantified_results_presence(resume: ResumeData, text: str, jd: str) -> tuple[int, str]:
    bullets = resume.experience_bullets() + resume.project_bullets()
    if not bullets:
        return 0, "No experience or project bullets"
    quantified = sum(1 for b in bullets if has_quantity(b))
    return percent(quantified, len(bullets)), f"{quantified}/{len(bullets)} bullets quantified"


def _job_title_relevance(resume: ResumeData, text: str, jd: str) -> tuple[int, str]:
    titles = [e.role for e in resume.work_experience if e.role.strip()]
    if not titles:
        return 0, "No job titles to compare"

    jd_words = _jd_words(jd)

    def relevant(title: str) -> bool:
        return any(w in jd_words for w in _significant_words(title, 3))

    # most recent title counts double
    weighted = 2 * relevant(titles[0]) + sum(relevant(t) for t in titles[1:])
    total = 2 + len(titles) - 1
    return percent(weighted, total), f"Most recent title {'matches' if relevant(titles[0]) else 'does not match'} the job"


def _experience_relevance(resume: ResumeData, text: str, jd: str) -> tuple[int, str]:
    bullets = resume.experience_bullets()
    if not bullets:
        return 0, "No experience bullets to compare"
    jd_words = _jd_words(jd)
    relevant = sum(
        1 for b in bullets
        if len(_significant_words(b, 4) & jd_words) >= 2
    )
    return percent(relevant, len(bullets)), f"{relevant}/{len(bullets)} bullets relate to the job"


_METRIC_FUNCTIONS = {
    "jd_keywords_match": _jd_keywords_match,
    "technical_skills_alignment": _technical_skills_alignment,
    "quantified_results_presence": _quantified_results_presence,
    "job_title_relevance": _job_title_relevance,
    "experience_relevance": _experience_relevance,
}


def extract_critical_metrics(
    resume: ResumeData,
    job_description: str | None,
    resume_text: str = "",
    rubric: Rubric = DEFAULT_RUBRIC,
) -> dict[str, CriticalMetric]:
    """Compute the five critical metrics for a resume."""
    jd = (job_description or "").strip()
    has_jd = rubric.has_jd(jd)
    text = resume_text.strip() or resume.as_text()

    metrics: dict[str, CriticalMetric] = {}
    for name in METRIC_KEYS:
        if name in JD_RELATIVE_METRICS and not has_jd:
            percentage, details = 0, "No job description provided"
        else:
            percentage, details = _METRIC_FUNCTIONS[name](resume, text, jd)
        metrics[name] = CriticalMetric(
            name=name,
            percentage=percentage,
            max_score=rubric.metric_max_scores[name],
            details=details,
        )
        logger.debug("Metric %s: %d%%", name, percentage)
    return metrics
