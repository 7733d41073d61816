"""Shared test configuration, pytest markers and resume fixtures."""

import os

# Settings are read at import time; keep tests offline and unthrottled.
os.environ["LLM_NORMALIZATION"] = "false"
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest  # noqa: E402

from models.schemas import (  # noqa: E402
    Certification,
    Education,
    Project,
    ResumeData,
    SkillGroup,
    WorkExperience,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end scoring of a realistic resume and JD"
    )


EXPERIENCED_JD = """Senior Full-Stack Developer

Requirements:
- 3+ years of experience building web applications
- Strong JavaScript, React, Node.js and AWS skills
- Experience with REST APIs, Docker and CI/CD pipelines

Responsibilities:
- Build and maintain customer-facing e-commerce features
- Mentor junior developers and review code
"""

FRESHER_JD = """Graduate Software Engineer (Entry-Level)

We welcome fresh graduates. No experience required.
Skills: Python or Java, SQL, data structures and algorithms, Git.
You will join our graduate program and learn from senior engineers.
"""


SAMPLE_RESUME_TEXT = """Jane Doe
jane.doe@example.com | +1 555 010 0100
linkedin.com/in/janedoe | github.com/janedoe

Summary
Full-stack engineer with 5 years of experience building JavaScript, React and
Node.js applications on AWS for high-traffic e-commerce platforms.

Experience
Senior Full-Stack Developer | ShopCo | Jan 2021 - Present
• Built customer-facing e-commerce features in React and Node.js handling 20K orders per day
• Migrated legacy APIs to AWS Lambda, reducing hosting costs by 35%
• Led a team of 4 engineers delivering the new JavaScript storefront

Software Engineer | WebWorks | Jun 2018 - Dec 2020
• Developed REST APIs in Node.js and Express for 12 client projects
• Improved page load time by 40% with React code splitting

Education
B.Tech in Computer Science | State University | 2018 | CGPA 8.4/10

Skills
Languages: JavaScript, TypeScript, Python
Frameworks: React, Node.js, Express
Cloud: AWS, Docker

Certifications
AWS Certified Developer - Amazon Web Services, 2022
"""


@pytest.fixture
def experienced_jd():
    return EXPERIENCED_JD


@pytest.fixture
def fresher_jd():
    return FRESHER_JD


@pytest.fixture
def sample_resume_text():
    return SAMPLE_RESUME_TEXT


@pytest.fixture
def experienced_resume():
    return ResumeData(
        name="Jane Doe",
        email="jane.doe@example.com",
        phone="+1 555 010 0100",
        links=["linkedin.com/in/janedoe", "github.com/janedoe"],
        summary=(
            "Full-stack engineer with 5 years of experience building JavaScript, React "
            "and Node.js applications on AWS for high-traffic e-commerce platforms."
        ),
        work_experience=[
            WorkExperience(
                role="Senior Full-Stack Developer",
                company="ShopCo",
                period="Jan 2021 - Present",
                bullets=[
                    "Built customer-facing e-commerce features in React and Node.js handling 20K orders per day",
                    "Migrated legacy APIs to AWS Lambda, reducing hosting costs by 35%",
                    "Led a team of 4 engineers delivering the new JavaScript storefront",
                    "Responsible for code reviews and release planning",
                ],
            ),
            WorkExperience(
                role="Software Engineer",
                company="WebWorks",
                period="Jun 2018 - Dec 2020",
                bullets=[
                    "Developed REST APIs in Node.js and Express for 12 client projects",
                    "Improved page load time by 40% with React code splitting",
                    "Wrote integration tests for payment workflows",
                ],
            ),
        ],
        education=[
            Education(
                degree="B.Tech in Computer Science",
                school="State University",
                year="2018",
                score="8.4/10",
            ),
        ],
        projects=[
            Project(
                title="Price Tracker",
                bullets=["Built a price tracking app with React and AWS serving 2,000 users"],
                links=["github.com/janedoe/price-tracker"],
            ),
        ],
        skills=[
            SkillGroup(category="Languages", items=["JavaScript", "TypeScript", "Python"]),
            SkillGroup(category="Frameworks", items=["React", "Node.js", "Express"]),
            SkillGroup(category="Cloud", items=["AWS", "Docker"]),
        ],
        certifications=[
            Certification(title="AWS Certified Developer - Associate", description="Amazon Web Services, 2022"),
        ],
        achievements=["Winner, ShopCo internal hackathon 2022"],
    )


@pytest.fixture
def fresher_resume():
    return ResumeData(
        name="Ravi Kumar",
        email="ravi.kumar@example.com",
        phone="+91 98765 43210",
        links=["github.com/ravikumar"],
        summary="Computer science graduate who enjoys building data-driven web apps with Python and SQL.",
        education=[
            Education(degree="B.E. Computer Science", school="City Institute of Technology", year="2024", score="82%"),
        ],
        projects=[
            Project(
                title="Library Manager",
                bullets=[
                    "Built a Flask app with SQL storage used by 300 students",
                    "Implemented search with indexing, cutting lookup time by 60%",
                ],
                links=["github.com/ravikumar/library-manager"],
            ),
        ],
        skills=[
            SkillGroup(category="Languages", items=["Python", "Java", "SQL"]),
            SkillGroup(category="Tools", items=["Git", "Flask"]),
        ],
        certifications=[Certification(title="Oracle Certified Associate, Java SE")],
    )
