"""Tier scorer: eight percentage-based views of resume quality.

Each tier function looks at one aspect of the resume and returns a
percentage (0-100) plus a short list of the most important issues. Tier
weights come from the rubric and depend on the detected role type; the
percentages do not.

Missing sections score 0 for their tier. No tier function raises on
incomplete input and every ratio is guarded against empty denominators.
"""

import logging
import re
from dataclasses import dataclass

from models.schemas import ResumeData, TierScore
from services.keyword_extractor import (
    TRENDING_KEYWORDS,
    compute_keyword_overlap,
    extract_keywords,
    extract_technical_terms,
    match_job_keywords,
)
from services.pdf_parser import (
    has_quantity,
    score_bullet,
    starts_with_action_verb,
    starts_with_weak_opener,
)
from services.scoring.rubric import (
    DEFAULT_RUBRIC,
    TIER_KEYS,
    TIER_NAMES,
    Rubric,
    round_half_up,
)
from services.section_parser import (
    EMAIL_RE,
    GITHUB_RE,
    LINKEDIN_RE,
    PHONE_RE,
    compute_section_completeness,
    extract_education_level,
    has_year,
    is_ongoing,
    parse_sections,
)
from services.similarity import tfidf_cosine_similarity

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------
_DEGREE_POINTS = {"phd": 30, "masters": 25, "bachelors": 20, "associate": 10, "": 5}
_DEGREE_ORDER = ["", "associate", "bachelors", "masters", "phd"]

CERT_PROVIDERS: frozenset[str] = frozenset({
    "aws", "amazon", "microsoft", "azure", "google", "gcp", "oracle", "cisco",
    "comptia", "pmi", "scrum alliance", "scrum.org", "isc2", "isaca",
    "salesforce", "red hat", "linux foundation", "cncf", "hashicorp",
    "databricks", "snowflake", "tableau", "ibm", "meta", "coursera",
    "udemy", "edx", "nptel", "nasscom",
})

IN_DEMAND_CERT_TERMS: frozenset[str] = frozenset({
    # Cloud
    "aws", "azure", "gcp", "google cloud", "cloud", "kubernetes", "cka", "terraform",
    # Security
    "security", "cissp", "cism", "ceh", "oscp", "security+",
    # Project management
    "pmp", "prince2", "scrum", "csm", "agile",
    # Data
    "data", "machine learning", "analytics", "databricks",
})

_LEADERSHIP_RE = re.compile(
    r"\b(?:led|lead|leading|managed|mentored|mentoring|head|director|manager|"
    r"senior|principal|supervised|spearheaded|founded|architected|owned)\b",
    re.IGNORECASE,
)
_SENIORITY_RE = re.compile(
    r"\b(?:senior|sr|lead|principal|staff|manager|head|director|architect|chief|vp)\b",
    re.IGNORECASE,
)
_AWARD_RE = re.compile(
    r"\b(?:award(?:ed)?|winner|won|hackathon|ranked|rank|scholarship|recognition|honou?rs?)\b",
    re.IGNORECASE,
)
_OPEN_WORK_RE = re.compile(
    r"\b(?:open[- ]source|publications?|published|patents?|conference|speaker|contributor)\b",
    re.IGNORECASE,
)
_BAD_FILENAME_RE = re.compile(
    r"untitled|document|scan|copy|final|draft|\(\d+\)|^\d+$|^img|^image",
)


@dataclass(frozen=True)
class _TierInputs:
    resume: ResumeData
    text: str
    job_description: str
    has_jd: bool
    filename: str | None

    @property
    def experience_bullets(self) -> list[str]:
        return self.resume.experience_bullets()

    @property
    def all_bullets(self) -> list[str]:
        return self.resume.experience_bullets() + self.resume.project_bullets()


def _ratio(count: int, total: int) -> float:
    return count / total if total else 0.0


# ---------------------------------------------------------------------------
# Tier functions: (inputs) -> (percentage, issues)
# ---------------------------------------------------------------------------

def _score_experience(inp: _TierInputs) -> tuple[int, list[str]]:
    entries = inp.resume.work_experience
    if not entries:
        return 0, ["No work experience entries found"]

    issues: list[str] = []
    points = 30 + 5 * min(len(entries) - 1, 2)

    if any(is_ongoing(e.period) for e in entries):
        points += 15
    elif any(has_year(e.period) for e in entries):
        points += 8
    else:
        issues.append("Add start and end dates to each role")

    bullets = inp.experience_bullets
    if bullets:
        action = _ratio(sum(starts_with_action_verb(b) for b in bullets), len(bullets))
        quantified = _ratio(sum(has_quantity(b) for b in bullets), len(bullets))
        points += round_half_up(action * 25) + round_half_up(quantified * 20)
        if action < 0.5:
            issues.append("Start more bullets with strong action verbs")
        if quantified < 0.3:
            issues.append("Quantify results with numbers, percentages or scale")
    else:
        issues.append("Describe each role with achievement bullets")

    return min(100, points), issues


def _score_skills_keywords(inp: _TierInputs) -> tuple[int, list[str]]:
    issues: list[str] = []
    skills = inp.resume.all_skills()
    points = min(30, 3 * len(skills))
    if not skills:
        issues.append("Add a dedicated skills section")

    categorized = [g for g in inp.resume.skills if g.category.strip() and g.items]
    if len(categorized) >= 2:
        points += 10
    elif categorized:
        points += 5
    elif skills:
        issues.append("Group skills into categories (languages, frameworks, tools)")

    if inp.has_jd:
        matched, missing = match_job_keywords(inp.text, inp.job_description)
        points += round_half_up(compute_keyword_overlap(matched, missing) * 60)
        if missing:
            issues.append(f"Missing job keywords: {', '.join(missing[:5])}")
    else:
        found = extract_technical_terms(inp.text)
        points += min(60, 6 * len(found))
        if len(found) < 5:
            issues.append("Mention more concrete tools and technologies")

    return min(100, points), issues


def _highest_degree(degrees: list[str]) -> str:
    best = ""
    for degree in degrees:
        level = extract_education_level(degree)
        if _DEGREE_ORDER.index(level) > _DEGREE_ORDER.index(best):
            best = level
    return best


def _score_education(inp: _TierInputs) -> tuple[int, list[str]]:
    entries = inp.resume.education
    if not entries:
        section = parse_sections(inp.text).get("education", "")
        if section and extract_education_level(section):
            return 30, ["Education is not itemised; list degree, school and year"]
        return 0, ["No education entries found"]

    issues: list[str] = []
    points = 40 + _DEGREE_POINTS[_highest_degree([e.degree for e in entries])]

    if any(e.school.strip() for e in entries):
        points += 10
    else:
        issues.append("Name the institution for each degree")
    if any(has_year(e.year) or has_year(e.degree) for e in entries):
        points += 10
    else:
        issues.append("Add graduation years")
    if any(e.score.strip() for e in entries):
        points += 10

    return min(100, points), issues


def _score_certifications(inp: _TierInputs) -> tuple[int, list[str]]:
    certs = [c for c in inp.resume.certifications if c.title.strip()]
    if not certs:
        return 0, ["No certifications listed"]

    issues: list[str] = []
    points = 40 + min(20, 7 * (len(certs) - 1))

    texts = [f"{c.title} {c.description}".lower() for c in certs]
    credible = sum(1 for t in texts if any(p in t for p in CERT_PROVIDERS))
    points += round_half_up(_ratio(credible, len(certs)) * 15)
    if not credible:
        issues.append("Name the issuing organisation for each certification")

    if any(term in t for t in texts for term in IN_DEMAND_CERT_TERMS):
        points += 15

    if inp.has_jd:
        jd_lower = inp.job_description.lower()
        relevant = sum(
            1 for t in texts
            if any(len(w) > 3 and w in jd_lower for w in re.findall(r"[a-z][a-z0-9+#.]*", t))
        )
        points += round_half_up(_ratio(relevant, len(certs)) * 10)
        if not relevant:
            issues.append("Certifications do not relate to the job description")
    else:
        points += 5

    return min(100, points), issues


def _filename_points(filename: str | None, resume: ResumeData) -> int:
    if not filename:
        return 3
    stem = filename.rsplit(".", 1)[0].lower()
    if _BAD_FILENAME_RE.search(stem):
        return 0
    first_name = resume.name.split()[0].lower() if resume.name.split() else ""
    if "resume" in stem or "cv" in stem or (first_name and first_name in stem):
        return 5
    return 3


def _score_basic_structure(inp: _TierInputs) -> tuple[int, list[str]]:
    text = inp.text
    word_count = len(text.split())
    if word_count == 0:
        return 0, ["Resume text is empty"]

    issues: list[str] = []
    if 400 <= word_count <= 800:
        points = 25
    elif 250 <= word_count < 400 or 800 < word_count <= 1100:
        points = 18
    elif word_count >= 100:
        points = 10
        issues.append(f"Resume length ({word_count} words) is outside the 400-800 word range")
    else:
        points = 5
        issues.append("Resume is too short to describe your background")

    resume = inp.resume
    if resume.email or EMAIL_RE.search(text):
        points += 15
    else:
        issues.append("Add an email address")
    if resume.phone or PHONE_RE.search(text):
        points += 10
    else:
        issues.append("Add a phone number")
    if resume.links or LINKEDIN_RE.search(text) or GITHUB_RE.search(text):
        points += 10
    else:
        issues.append("Add a LinkedIn or GitHub profile link")
    if resume.name.strip():
        points += 10

    found_sections = set(parse_sections(text)) - {"header"}
    points += round_half_up(compute_section_completeness(found_sections) * 15)
    if len(found_sections) < 3:
        issues.append("Use standard section headings (Experience, Education, Skills)")

    lines = [line for line in text.split("\n") if line.strip()]
    long_lines = sum(1 for line in lines if len(line) > 180)
    if _ratio(long_lines, len(lines)) < 0.1:
        points += 10
    else:
        issues.append("Break long paragraphs into short lines or bullets")

    filename_points = _filename_points(inp.filename, resume)
    points += filename_points
    if filename_points == 0:
        issues.append("Rename the file to something like FirstName_LastName_Resume.pdf")

    return min(100, points), issues


def _score_content_structure(inp: _TierInputs) -> tuple[int, list[str]]:
    resume = inp.resume
    issues: list[str] = []
    points = 0

    core = {
        "summary": bool(resume.summary.strip()),
        "experience or projects": bool(resume.work_experience or resume.projects),
        "education": bool(resume.education),
        "skills": bool(resume.all_skills()),
    }
    points += 10 * sum(core.values())
    missing = [name for name, present in core.items() if not present]
    if missing:
        issues.append(f"Missing sections: {', '.join(missing)}")

    summary_words = len(resume.summary.split())
    if 20 <= summary_words <= 80:
        points += 10
    elif summary_words:
        points += 5
        issues.append("Keep the summary between 20 and 80 words")

    if resume.work_experience:
        per_role = _ratio(len(inp.experience_bullets), len(resume.work_experience))
        if 3 <= per_role <= 6:
            points += 15
        elif per_role >= 1:
            points += 8
            issues.append("Use 3-6 bullets per role")
    elif resume.project_bullets():
        points += 8

    bullets = inp.all_bullets
    if bullets:
        well_sized = sum(1 for b in bullets if 8 <= len(b.split()) <= 35)
        points += round_half_up(_ratio(well_sized, len(bullets)) * 15)

    dated = [e.period for e in resume.work_experience] + [
        f"{e.year} {e.degree}" for e in resume.education
    ]
    if dated:
        points += round_half_up(_ratio(sum(has_year(d) or is_ongoing(d) for d in dated), len(dated)) * 10)

    if any(p.bullets for p in resume.projects):
        points += 10
    elif resume.projects:
        points += 5

    return min(100, points), issues


def _score_qualitative(inp: _TierInputs) -> tuple[int, list[str]]:
    resume = inp.resume
    issues: list[str] = []
    points = 0

    bullets = inp.all_bullets
    if bullets:
        quantified = _ratio(sum(has_quantity(b) for b in bullets), len(bullets))
        points += round_half_up(quantified * 30)

        jd_terms = extract_technical_terms(inp.job_description) if inp.has_jd else None
        quality = sum(score_bullet(b, jd_terms)["quality_score"] for b in bullets) / len(bullets)
        points += round_half_up(quality * 0.2)

        weak = sum(starts_with_weak_opener(b) for b in bullets)
        points += round_half_up((1 - _ratio(weak, len(bullets))) * 20)
        if weak:
            issues.append("Replace duty phrasing ('responsible for', 'worked on') with results")
        if quantified < 0.3:
            issues.append("Few bullets show measurable impact")
    else:
        issues.append("No bullet points to evaluate")

    if resume.summary.strip():
        points += 10
    if resume.achievements:
        points += 10
    if resume.additional_sections:
        points += 10

    return min(100, points), issues


def _score_competitive(inp: _TierInputs) -> tuple[int, list[str]]:
    resume = inp.resume
    issues: list[str] = []
    points = 0

    narrative = " ".join([e.role for e in resume.work_experience] + inp.all_bullets)
    if _LEADERSHIP_RE.search(narrative):
        points += 20
    else:
        issues.append("Show ownership or leadership (led, mentored, owned)")

    roles = [e.role for e in resume.work_experience if e.role.strip()]
    if len(roles) >= 2:
        points += 10
        # most recent role first
        if _SENIORITY_RE.search(roles[0]) and not _SENIORITY_RE.search(roles[-1]):
            points += 10

    trending = extract_keywords(inp.text, vocabulary=TRENDING_KEYWORDS)
    points += min(20, 5 * len(trending))

    if resume.achievements or _AWARD_RE.search(inp.text):
        points += 15
    else:
        issues.append("Add awards, rankings or other recognition")

    if any(p.links for p in resume.projects) or (resume.projects and GITHUB_RE.search(inp.text)):
        points += 10

    if inp.has_jd:
        similarity = tfidf_cosine_similarity(inp.text, inp.job_description)
        points += round_half_up(min(1.0, similarity * 2) * 15)
    elif _OPEN_WORK_RE.search(inp.text):
        points += 15

    return min(100, points), issues


_TIER_FUNCTIONS = {
    "experience": _score_experience,
    "skills_keywords": _score_skills_keywords,
    "education": _score_education,
    "certifications": _score_certifications,
    "basic_structure": _score_basic_structure,
    "content_structure": _score_content_structure,
    "qualitative": _score_qualitative,
    "competitive": _score_competitive,
}


def score_tiers(
    resume: ResumeData,
    job_description: str | None = "",
    resume_text: str = "",
    role_type: str = "experienced",
    rubric: Rubric = DEFAULT_RUBRIC,
    filename: str | None = None,
) -> dict[str, TierScore]:
    """Score all eight tiers.

    ``resume_text`` falls back to a rendering of ``resume`` when empty. The
    job description only contributes when it passes the rubric's
    minimum-length check.
    """
    jd = (job_description or "").strip()
    inputs = _TierInputs(
        resume=resume,
        text=resume_text.strip() or resume.as_text(),
        job_description=jd,
        has_jd=rubric.has_jd(jd),
        filename=filename,
    )
    weights = rubric.tier_weights(role_type)

    tiers: dict[str, TierScore] = {}
    for key in TIER_KEYS:
        percentage, issues = _TIER_FUNCTIONS[key](inputs)
        tiers[key] = TierScore(
            key=key,
            tier_name=TIER_NAMES[key],
            percentage=max(0, min(100, percentage)),
            weight=weights[key],
            top_issues=issues[:3],
        )
        logger.debug("Tier %s: %d%% (weight %d)", key, percentage, weights[key])
    return tiers
