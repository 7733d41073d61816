"""Rule-based conversion of resume text into ResumeData.

Used when no structured fields are supplied and LLM normalization is not
configured (or fails). Relies on section_parser for segmentation and
pdf_parser for bullet detection; anything it cannot place is left empty.
"""

import logging
import re

from models.schemas import (
    Certification,
    Education,
    Project,
    ResumeData,
    SkillGroup,
    WorkExperience,
)
from services.pdf_parser import is_bullet_line, strip_bullet
from services.section_parser import (
    DATE_RANGE_RE,
    EMAIL_RE,
    GITHUB_RE,
    LINKEDIN_RE,
    PHONE_RE,
    URL_RE,
    YEAR_RE,
    extract_contact_info,
    extract_education_level,
    parse_sections,
)

logger = logging.getLogger(__name__)

_FIELD_SPLIT_RE = re.compile(r"\s*(?:\||\s[–—-]\s|\s@\s|\bat\b|,)\s*")
_SKILL_SPLIT_RE = re.compile(r"\s*[,;|•·]\s*")
_SCHOOL_RE = re.compile(
    r"\b(?:university|college|institute|school|academy|polytechnic|iit|nit|iiit)\b",
    re.IGNORECASE,
)
_GRADE_RE = re.compile(
    r"(?:c?gpa|percentage|grade|score)\s*[:\-]?\s*(\d+(?:\.\d+)?\s*(?:/\s*\d+(?:\.\d+)?)?\s*%?)"
    r"|\b(\d{2}(?:\.\d+)?\s*%)",
    re.IGNORECASE,
)


def _split_fields(line: str) -> list[str]:
    return [part.strip() for part in _FIELD_SPLIT_RE.split(line) if part and part.strip()]


def _non_empty_lines(section: str) -> list[str]:
    return [line.strip() for line in section.split("\n") if line.strip()]


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------

def _parse_name(header: str) -> str:
    for line in _non_empty_lines(header)[:3]:
        if EMAIL_RE.search(line) or PHONE_RE.search(line) or URL_RE.search(line):
            continue
        words = line.split()
        if 1 < len(words) <= 5 and not any(ch.isdigit() for ch in line):
            return line
    return ""


def _parse_links(text: str) -> list[str]:
    links: list[str] = []
    for pattern in (LINKEDIN_RE, GITHUB_RE):
        links.extend(m.group() for m in pattern.finditer(text))
    return list(dict.fromkeys(links))


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def parse_experience(section: str) -> list[WorkExperience]:
    entries: list[WorkExperience] = []
    current: WorkExperience | None = None

    for line in _non_empty_lines(section):
        if is_bullet_line(line):
            if current is None:
                current = WorkExperience()
                entries.append(current)
            current.bullets.append(strip_bullet(line))
            continue

        date_match = DATE_RANGE_RE.search(line)
        remainder = DATE_RANGE_RE.sub("", line).strip(" |,–—-") if date_match else line
        fields = _split_fields(remainder)

        # wrapped continuation of the previous bullet
        if current is not None and current.bullets and line[:1].islower():
            current.bullets[-1] = f"{current.bullets[-1]} {line}"
            continue

        starts_new = current is None or bool(current.bullets) or (bool(current.role) and bool(current.period) and bool(fields))
        if starts_new:
            current = WorkExperience()
            entries.append(current)

        if date_match and not current.period:
            current.period = date_match.group(0)
        for value in fields:
            if not current.role:
                current.role = value
            elif not current.company:
                current.company = value

    return entries


def parse_education(section: str) -> list[Education]:
    entries: list[Education] = []
    current: Education | None = None

    for line in _non_empty_lines(section):
        text = strip_bullet(line)
        level = extract_education_level(text)
        if current is None or (level and current.degree):
            current = Education()
            entries.append(current)

        grade = _GRADE_RE.search(text)
        if grade and not current.score:
            current.score = (grade.group(1) or grade.group(2)).strip()
            text = _GRADE_RE.sub("", text)

        years = YEAR_RE.findall(text)
        if years and not current.year:
            current.year = years[-1]
        text = DATE_RANGE_RE.sub("", text)
        text = YEAR_RE.sub("", text)

        for part in _split_fields(text):
            if part.lower() in ("in", "from"):
                continue
            if not current.degree and extract_education_level(part):
                current.degree = part
            elif not current.school and _SCHOOL_RE.search(part):
                current.school = part
            elif not current.degree:
                current.degree = part
            elif not current.school:
                current.school = part

    return [e for e in entries if e.degree or e.school]


def parse_skills(section: str) -> list[SkillGroup]:
    groups: list[SkillGroup] = []
    loose: list[str] = []
    for line in _non_empty_lines(section):
        text = strip_bullet(line)
        category = ""
        if ":" in text:
            category, text = (part.strip() for part in text.split(":", 1))
        items = [item.strip(" .") for item in _SKILL_SPLIT_RE.split(text) if item.strip(" .")]
        if category:
            groups.append(SkillGroup(category=category, items=items))
        else:
            loose.extend(items)
    if loose:
        groups.append(SkillGroup(items=loose))
    return groups


def parse_projects(section: str) -> list[Project]:
    projects: list[Project] = []
    current: Project | None = None

    for line in _non_empty_lines(section):
        links = [m.group() for m in URL_RE.finditer(line) if "." in m.group()]
        if is_bullet_line(line):
            if current is None:
                current = Project()
                projects.append(current)
            current.bullets.append(strip_bullet(line))
            current.links.extend(links)
            continue

        # a long sentence under a title is a description, not a new project
        if current is not None and not current.bullets and len(line.split()) > 8:
            current.bullets.append(line)
            current.links.extend(links)
            continue

        current = Project()
        projects.append(current)
        title = URL_RE.sub("", line).strip(" |–—-:")
        current.title = _split_fields(title)[0] if _split_fields(title) else title
        current.links.extend(links)

    return projects


def parse_certifications(section: str) -> list[Certification]:
    certs = []
    for line in _non_empty_lines(section):
        text = strip_bullet(line)
        parts = re.split(r"\s+[-–—|]\s+", text, maxsplit=1)
        certs.append(Certification(
            title=parts[0].strip(),
            description=parts[1].strip() if len(parts) > 1 else "",
        ))
    return certs


def parse_resume(text: str) -> ResumeData:
    """Build ResumeData from plain resume text."""
    sections = parse_sections(text)
    contact = extract_contact_info(text)
    header = sections.get("header", "")

    resume = ResumeData(
        name=_parse_name(header),
        email=contact["email"] or "",
        phone=contact["phone"] or "",
        links=_parse_links(text),
        summary=" ".join(_non_empty_lines(sections.get("summary", ""))),
        work_experience=parse_experience(sections.get("experience", "")),
        education=parse_education(sections.get("education", "")),
        projects=parse_projects(sections.get("projects", "")),
        skills=parse_skills(sections.get("skills", "")),
        certifications=parse_certifications(sections.get("certifications", "")),
        achievements=[strip_bullet(line) for line in _non_empty_lines(sections.get("achievements", ""))],
    )
    logger.debug(
        "Parsed resume: %d roles, %d degrees, %d projects, %d skills",
        len(resume.work_experience), len(resume.education),
        len(resume.projects), len(resume.all_skills()),
    )
    return resume
