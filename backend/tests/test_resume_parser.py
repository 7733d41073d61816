from services.resume_parser import (
    parse_certifications,
    parse_education,
    parse_experience,
    parse_projects,
    parse_resume,
    parse_skills,
)


def test_parse_resume_full(sample_resume_text):
    resume = parse_resume(sample_resume_text)
    assert resume.name == "Jane Doe"
    assert resume.email == "jane.doe@example.com"
    assert resume.phone
    assert resume.links == ["linkedin.com/in/janedoe", "github.com/janedoe"]
    assert resume.summary.startswith("Full-stack engineer")

    assert len(resume.work_experience) == 2
    latest = resume.work_experience[0]
    assert latest.role == "Senior Full-Stack Developer"
    assert latest.company == "ShopCo"
    assert latest.period == "Jan 2021 - Present"
    assert len(latest.bullets) == 3
    assert resume.work_experience[1].period == "Jun 2018 - Dec 2020"

    assert len(resume.education) == 1
    edu = resume.education[0]
    assert edu.degree == "B.Tech in Computer Science"
    assert edu.school == "State University"
    assert edu.year == "2018"
    assert edu.score == "8.4/10"

    assert [g.category for g in resume.skills] == ["Languages", "Frameworks", "Cloud"]
    assert "Node.js" in resume.all_skills()
    assert resume.certifications[0].title == "AWS Certified Developer"


def test_parse_resume_empty():
    resume = parse_resume("")
    assert resume.name == ""
    assert resume.work_experience == []
    assert resume.skills == []


def test_parse_experience_title_at_company_with_date_line():
    section = """Data Analyst at Acme Corp
2019 - 2021
- Built dashboards for the sales team
  used by 40 regional managers
- Automated monthly reporting"""
    entries = parse_experience(section)
    assert len(entries) == 1
    entry = entries[0]
    assert entry.role == "Data Analyst"
    assert entry.company == "Acme Corp"
    assert entry.period == "2019 - 2021"
    assert entry.bullets == [
        "Built dashboards for the sales team used by 40 regional managers",
        "Automated monthly reporting",
    ]


def test_parse_education_multiple_entries():
    section = """M.S. Data Science, Lake University, 2022
B.E. Mechanical Engineering | City Institute of Technology | 2019 | 78%"""
    entries = parse_education(section)
    assert len(entries) == 2
    assert entries[0].degree == "M.S. Data Science"
    assert entries[0].school == "Lake University"
    assert entries[1].year == "2019"
    assert entries[1].score == "78%"


def test_parse_skills_loose_items_form_one_group():
    groups = parse_skills("Python, SQL; Docker\n• Git | Linux")
    assert len(groups) == 1
    assert groups[0].category == ""
    assert groups[0].items == ["Python", "SQL", "Docker", "Git", "Linux"]


def test_parse_projects_titles_links_and_descriptions():
    section = """Price Tracker | github.com/janedoe/price-tracker
• Built a price tracking app with React and AWS serving 2,000 users
Chat App
A realtime chat application with websockets, rooms and message history search"""
    projects = parse_projects(section)
    assert [p.title for p in projects] == ["Price Tracker", "Chat App"]
    assert projects[0].links == ["github.com/janedoe/price-tracker"]
    assert len(projects[1].bullets) == 1


def test_parse_certifications_splits_issuer():
    certs = parse_certifications("• CKA - Linux Foundation\nPMP")
    assert certs[0].title == "CKA"
    assert certs[0].description == "Linux Foundation"
    assert certs[1].title == "PMP"
    assert certs[1].description == ""
