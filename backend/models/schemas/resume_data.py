"""Normalized resume representation consumed by the scoring engine."""

from typing import Any

from pydantic import BaseModel, field_validator, model_validator


class _NullTolerantModel(BaseModel):
    """Base model that treats explicit nulls as absent so defaults apply."""

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class WorkExperience(_NullTolerantModel):
    """A single work experience entry."""
    role: str = ""
    company: str = ""
    period: str = ""
    bullets: list[str] = []


class Education(_NullTolerantModel):
    degree: str = ""
    school: str = ""
    year: str = ""
    score: str = ""  # GPA, CGPA or percentage as written


class Project(_NullTolerantModel):
    title: str = ""
    bullets: list[str] = []
    links: list[str] = []


class SkillGroup(_NullTolerantModel):
    category: str = ""
    items: list[str] = []


class Certification(_NullTolerantModel):
    title: str = ""
    description: str = ""


class AdditionalSection(_NullTolerantModel):
    title: str = ""
    lines: list[str] = []


class ResumeData(_NullTolerantModel):
    """Structured resume fields.

    Every list defaults to empty and explicit nulls are treated as absent,
    so partially filled resumes (common with OCR or LLM output) validate
    and score without special cases.
    """
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    links: list[str] = []
    summary: str = ""
    work_experience: list[WorkExperience] = []
    education: list[Education] = []
    projects: list[Project] = []
    skills: list[SkillGroup] = []
    certifications: list[Certification] = []
    additional_sections: list[AdditionalSection] = []
    achievements: list[str] = []

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_flat_skills(cls, value: Any) -> Any:
        # ["Python", "SQL"] -> one uncategorised group
        if isinstance(value, list) and value and all(isinstance(v, str) for v in value):
            return [{"category": "", "items": value}]
        return value

    @field_validator("certifications", mode="before")
    @classmethod
    def coerce_certification_strings(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [{"title": v} if isinstance(v, str) else v for v in value]
        return value

    @field_validator("links", "achievements", mode="before")
    @classmethod
    def drop_null_items(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [v for v in value if v]
        return value

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def all_skills(self) -> list[str]:
        """Flattened skill items, de-duplicated case-insensitively, in order."""
        seen: set[str] = set()
        result = []
        for group in self.skills:
            for item in group.items:
                key = item.strip().lower()
                if key and key not in seen:
                    seen.add(key)
                    result.append(item.strip())
        return result

    def experience_bullets(self) -> list[str]:
        return [b for entry in self.work_experience for b in entry.bullets if b.strip()]

    def project_bullets(self) -> list[str]:
        return [b for project in self.projects for b in project.bullets if b.strip()]

    def as_text(self) -> str:
        """Render the fields as plain resume text.

        Used when the caller supplies structured data without the raw text.
        Output order is fixed so the rendering is deterministic.
        """
        lines: list[str] = []
        header = [self.name, self.email, self.phone, self.location, *self.links]
        lines.extend(part for part in header if part)

        if self.summary:
            lines += ["", "Summary", self.summary]
        if self.work_experience:
            lines += ["", "Experience"]
            for entry in self.work_experience:
                lines.append(" | ".join(p for p in (entry.role, entry.company, entry.period) if p))
                lines.extend(f"- {b}" for b in entry.bullets)
        if self.education:
            lines += ["", "Education"]
            for edu in self.education:
                lines.append(" | ".join(p for p in (edu.degree, edu.school, edu.year, edu.score) if p))
        if self.projects:
            lines += ["", "Projects"]
            for project in self.projects:
                lines.append(" | ".join(p for p in (project.title, *project.links) if p))
                lines.extend(f"- {b}" for b in project.bullets)
        if self.skills:
            lines += ["", "Skills"]
            for group in self.skills:
                items = ", ".join(group.items)
                lines.append(f"{group.category}: {items}" if group.category else items)
        if self.certifications:
            lines += ["", "Certifications"]
            for cert in self.certifications:
                lines.append(f"{cert.title} - {cert.description}" if cert.description else cert.title)
        if self.achievements:
            lines += ["", "Achievements"]
            lines.extend(f"- {a}" for a in self.achievements)
        for section in self.additional_sections:
            lines += ["", section.title]
            lines.extend(section.lines)

        return "\n".join(lines).strip()
