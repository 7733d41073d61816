"""Prompt templates for Gemini API calls."""


def build_normalization_prompt(resume_text: str) -> str:
    """Ask for the resume's fields as ResumeData JSON.

    The model only restructures text. It must not score, judge or invent
    content, so the deterministic engine sees the same facts the resume states.
    """
    return f"""You are a resume parser. Convert the resume below into structured JSON.

RULES:
- Copy text exactly as written. Do not rewrite, summarise, correct or invent anything.
- Use empty strings and empty lists for anything the resume does not contain.
- List work experience, education and projects in the order they appear.
- Put each bullet point in its own string, without the bullet symbol.

RESUME:
---
{resume_text}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "name": "<full name>",
  "email": "<email>",
  "phone": "<phone>",
  "location": "<city, country>",
  "links": ["<linkedin/github/portfolio urls>"],
  "summary": "<summary or objective paragraph>",
  "work_experience": [
    {{"role": "<job title>", "company": "<company>", "period": "<date range as written>", "bullets": ["<bullet>"]}}
  ],
  "education": [
    {{"degree": "<degree and field>", "school": "<institution>", "year": "<graduation year>", "score": "<GPA/percentage if stated>"}}
  ],
  "projects": [
    {{"title": "<project name>", "bullets": ["<bullet>"], "links": ["<url>"]}}
  ],
  "skills": [
    {{"category": "<category or empty>", "items": ["<skill>"]}}
  ],
  "certifications": [
    {{"title": "<certification>", "description": "<issuer, year>"}}
  ],
  "additional_sections": [
    {{"title": "<heading>", "lines": ["<line>"]}}
  ],
  "achievements": ["<award or achievement>"]
}}"""
