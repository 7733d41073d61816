from services.section_parser import (
    compute_section_completeness,
    extract_contact_info,
    extract_education_level,
    extract_required_years,
    has_year,
    is_ongoing,
    match_heading,
    parse_sections,
)


SAMPLE_RESUME = """John Doe
john.doe@email.com | (555) 123-4567
linkedin.com/in/johndoe | github.com/johndoe

Summary
Experienced software engineer with 5+ years building web applications.

Experience
Senior Software Engineer | TechCorp | 2021 - Present
• Built REST APIs serving 1M requests/day
• Led team of 5 engineers

Software Engineer | StartupXYZ | 2019 - 2021
• Developed React frontend components
• Implemented CI/CD pipelines

Education
B.S. Computer Science | State University | 2019

Skills
Python, JavaScript, React, Docker, AWS, PostgreSQL, Git
"""


def test_parse_sections_detects_all():
    sections = parse_sections(SAMPLE_RESUME)
    assert "summary" in sections
    assert "experience" in sections
    assert "education" in sections
    assert "skills" in sections
    assert "header" in sections


def test_parse_sections_content():
    sections = parse_sections(SAMPLE_RESUME)
    assert "REST APIs" in sections["experience"]
    assert "Computer Science" in sections["education"]
    assert "Python" in sections["skills"]


def test_parse_sections_empty():
    sections = parse_sections("")
    assert len(sections) <= 1  # At most 'header' with empty content


def test_extract_contact_info():
    contact = extract_contact_info(SAMPLE_RESUME)
    assert contact["email"] == "john.doe@email.com"
    assert contact["linkedin"] == "linkedin.com/in/johndoe"
    assert contact["github"] == "github.com/johndoe"


def test_compute_section_completeness_full():
    sections = parse_sections(SAMPLE_RESUME)
    score = compute_section_completeness(sections)
    # Has experience + education + skills + summary = high score
    assert score >= 0.6


def test_compute_section_completeness_partial():
    text = """Summary
Some summary text

Skills
Python, Java
"""
    sections = parse_sections(text)
    score = compute_section_completeness(sections)
    assert 0.0 < score < 0.6  # Missing experience, education


# --- Heading and date tests ---

def test_match_heading_variants():
    assert match_heading("WORK EXPERIENCE") == "experience"
    assert match_heading("Internships") == "experience"
    assert match_heading("Technical Skills:") == "skills"
    assert match_heading("Academic Projects") == "projects"
    assert match_heading("Awards & Honors") == "achievements"
    assert match_heading("Built REST APIs") is None


def test_parse_sections_merges_repeated_headings():
    text = "Skills\nPython\n\nExperience\nDev at X\n\nSkills\nDocker\n"
    sections = parse_sections(text)
    assert "Python" in sections["skills"]
    assert "Docker" in sections["skills"]


def test_compute_section_completeness_accepts_set():
    assert compute_section_completeness({"experience", "skills", "education"}) == compute_section_completeness(
        {"experience": "x", "skills": "y", "education": "z"}
    )


def test_is_ongoing():
    assert is_ongoing("Jan 2021 - Present")
    assert is_ongoing("2022 - current")
    assert not is_ongoing("2019 - 2021")


def test_has_year():
    assert has_year("Mar 2018 - Nov 2022")
    assert not has_year("Six months")


# --- Required years tests ---

def test_extract_required_years():
    jd = "Requirements: 5+ years of experience in software development"
    years = extract_required_years(jd)
    assert years == 5.0


def test_extract_required_years_range_uses_lower_bound():
    assert extract_required_years("We need 2-4 years of industry experience.") == 2.0


def test_extract_required_years_minimum_phrase():
    assert extract_required_years("Minimum 3 years working with Java") == 3.0


def test_extract_required_years_none():
    assert extract_required_years("Freshers welcome. Strong Python basics.") == 0.0


# --- Education level tests ---

def test_extract_education_level_bachelors():
    assert extract_education_level("B.S. Computer Science") == "bachelors"
    assert extract_education_level("Bachelor's in Engineering") == "bachelors"


def test_extract_education_level_masters():
    assert extract_education_level("M.S. in Data Science") == "masters"
    assert extract_education_level("Master's degree in CS") == "masters"


def test_extract_education_level_phd():
    assert extract_education_level("Ph.D. in Machine Learning") == "phd"


def test_extract_education_level_none():
    assert extract_education_level("Some random text") == ""


def test_extract_education_level_highest():
    """Should return the highest degree found."""
    text = "B.S. from MIT, M.S. from Stanford, Ph.D. from Berkeley"
    assert extract_education_level(text) == "phd"


def test_extract_education_level_ignores_common_words():
    assert extract_education_level("Worked as a tutor and helped me grow") == ""


def test_extract_education_level_diploma():
    assert extract_education_level("Diploma in Mechanical Engineering") == "associate"
