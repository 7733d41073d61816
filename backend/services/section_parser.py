"""Resume section segmentation, contact extraction and requirement parsing."""

import re

# Section header patterns and their canonical names
SECTION_PATTERNS: dict[str, list[str]] = {
    "experience": [
        r"(?:work|professional|employment)\s*(?:experience|history)",
        r"experience",
        r"internships?(?:\s*(?:&|and)\s*experience)?",
        r"career\s*(?:history|path)",
        r"(?:positions?\s*held|roles)",
    ],
    "education": [
        r"education(?:al)?\s*(?:background|qualifications|history)?",
        r"academic\s*(?:background|qualifications|details)",
    ],
    "skills": [
        r"(?:technical|core|key|professional)?\s*skills(?:\s*(?:&|and)\s*tools)?",
        r"(?:technical|core)?\s*(?:competencies|proficiencies|expertise)",
        r"technologies",
        r"(?:technical\s+)?(?:stack|toolkit|tooling)",
        r"(?:programming\s+)?languages",
    ],
    "summary": [
        r"(?:professional|executive|career)?\s*summary",
        r"(?:career|professional)?\s*objective",
        r"profile",
        r"about\s*me",
    ],
    "projects": [
        r"(?:key|notable|selected|personal|academic)?\s*projects",
        r"portfolio",
    ],
    "certifications": [
        r"certific(?:ations?|ates?)",
        r"licen[sc]es?\s*(?:&|and)?\s*certific(?:ations?|ates?)",
    ],
    "achievements": [
        r"(?:key\s+)?achievements?",
        r"(?:awards?|honors?|accomplishments)(?:\s*(?:&|and)\s*(?:awards?|honors?))?",
    ],
}

# Compile all patterns into a single regex per section
_COMPILED: dict[str, re.Pattern] = {}
for section, patterns in SECTION_PATTERNS.items():
    combined = "|".join(patterns)
    _COMPILED[section] = re.compile(
        rf"^\s*(?:{combined})\s*:?\s*$", re.IGNORECASE | re.MULTILINE
    )

# Contact info patterns
EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+")
PHONE_RE = re.compile(r"\+?[\d\s\-().]{7,15}\d")
LINKEDIN_RE = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com/[\w-]+", re.IGNORECASE)
URL_RE = re.compile(r"(?:https?://)?(?:www\.)?[\w-]+\.(?:com|io|dev|org|net|me|app)(?:/[\w./-]*)?", re.IGNORECASE)

# Weighted section importance for completeness scoring
SECTION_WEIGHTS: dict[str, float] = {
    "experience": 20,
    "skills": 15,
    "education": 12,
    "projects": 12,
    "summary": 10,
    "certifications": 8,
    "achievements": 5,
}
_TOTAL_WEIGHT = sum(SECTION_WEIGHTS.values())


def match_heading(line: str) -> str | None:
    """Return the canonical section name if ``line`` is a known heading."""
    stripped = line.strip()
    if not stripped:
        return None
    for section_name, pattern in _COMPILED.items():
        if pattern.match(stripped):
            return section_name
    return None


def parse_sections(text: str) -> dict[str, str]:
    """Split resume text into named sections.

    Returns a dict mapping section name -> section text content.
    Unmatched text at the top goes into 'header'.
    """
    sections: dict[str, str] = {}
    current_section = "header"
    current_lines: list[str] = []

    for line in text.split("\n"):
        matched_section = match_heading(line)

        if matched_section:
            if current_lines:
                previous = sections.get(current_section, "")
                content = "\n".join(current_lines).strip()
                sections[current_section] = f"{previous}\n{content}".strip() if previous else content
            current_section = matched_section
            current_lines = []
        else:
            current_lines.append(line)

    if current_lines:
        previous = sections.get(current_section, "")
        content = "\n".join(current_lines).strip()
        sections[current_section] = f"{previous}\n{content}".strip() if previous else content

    return sections


def extract_contact_info(text: str) -> dict[str, str | None]:
    """Extract contact information from resume text."""
    email_match = EMAIL_RE.search(text)
    phone_match = PHONE_RE.search(text)
    linkedin_match = LINKEDIN_RE.search(text)
    github_match = GITHUB_RE.search(text)

    return {
        "email": email_match.group() if email_match else None,
        "phone": phone_match.group().strip() if phone_match else None,
        "linkedin": linkedin_match.group() if linkedin_match else None,
        "github": github_match.group() if github_match else None,
    }


def compute_section_completeness(sections: dict[str, str] | set[str]) -> float:
    """Score 0.0-1.0 based on weighted importance of present sections."""
    found_weight = sum(
        SECTION_WEIGHTS[s] for s in SECTION_WEIGHTS if s in sections
    )
    return round(found_weight / _TOTAL_WEIGHT, 3)


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

# Date ranges: "Jan 2019 - Present", "2020 - 2023", "March 2018 – Nov 2022"
_MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
DATE_RANGE_RE = re.compile(
    rf"({_MONTHS}\.?\s*\d{{4}}|\d{{4}})"
    r"\s*(?:[-–—]+|to)\s*"
    rf"({_MONTHS}\.?\s*\d{{4}}|\d{{4}}|[Pp]resent|[Cc]urrent|[Nn]ow)",
    re.IGNORECASE,
)
YEAR_RE = re.compile(r"\b(?:19[7-9]\d|20\d\d)\b")
ONGOING_RE = re.compile(r"\b(?:present|current|now|ongoing|till date)\b", re.IGNORECASE)


def is_ongoing(period: str) -> bool:
    return bool(ONGOING_RE.search(period))


def has_year(text: str) -> bool:
    return bool(YEAR_RE.search(text))


# ---------------------------------------------------------------------------
# Job description requirements
# ---------------------------------------------------------------------------

# "5+ years of experience", "3 years of industry experience", "2-4 yrs exp"
EXP_YEARS_RE = re.compile(
    r"(\d+)\s*(?:\+|(?:-|–|to)\s*\d+)?\s*(?:years?|yrs?)\s*"
    r"(?:of\s+)?(?:[a-z/-]+\s+){0,2}?(?:experience|exp\b)",
    re.IGNORECASE,
)
# "minimum 3 years", "at least 4 years"
_MIN_YEARS_RE = re.compile(
    r"(?:minimum(?:\s+of)?|at\s+least)\s+(\d+)\s*\+?\s*(?:years?|yrs?)",
    re.IGNORECASE,
)


def extract_required_years(job_description: str) -> float:
    """Extract the largest required years of experience from a job description.

    For ranges ("2-4 years") the lower bound is the requirement.
    """
    best = 0.0
    for pattern in (EXP_YEARS_RE, _MIN_YEARS_RE):
        for match in pattern.finditer(job_description):
            years = float(match.group(1))
            if years < 50 and years > best:
                best = years
    return best


# ---------------------------------------------------------------------------
# Education level detection
# ---------------------------------------------------------------------------

DEGREE_PATTERNS: dict[str, list[str]] = {
    "phd": [
        r"ph\.?d", r"doctorate", r"doctoral", r"doctor of philosophy",
    ],
    "masters": [
        r"m\.s\.?", r"ms", r"m\.?sc\.?", r"m\.e\.?", r"m\.?tech", r"mba", r"mca",
        r"m\.a\.?", r"master(?:'?s)?",
    ],
    "bachelors": [
        r"b\.s\.?", r"bs", r"b\.?sc\.?", r"b\.e\.?", r"b\.?tech", r"b\.a\.?",
        r"bca", r"bachelor(?:'?s)?", r"b\.?eng",
    ],
    "associate": [
        r"a\.s\.?", r"a\.a\.?", r"associate(?:'?s)?", r"diploma",
    ],
}

_DEGREE_COMPILED: dict[str, re.Pattern] = {}
for _level, _patterns in DEGREE_PATTERNS.items():
    _combined = "|".join(_patterns)
    _DEGREE_COMPILED[_level] = re.compile(
        rf"\b(?:{_combined})\b", re.IGNORECASE
    )

# Order matters: check highest first
_DEGREE_PRIORITY = ["phd", "masters", "bachelors", "associate"]


def extract_education_level(text: str) -> str:
    """Detect the highest education level mentioned in text.

    Returns one of: 'phd', 'masters', 'bachelors', 'associate', or '' if none found.
    """
    for level in _DEGREE_PRIORITY:
        if _DEGREE_COMPILED[level].search(text):
            return level
    return ""
