"""Improvement advice per rubric parameter."""

DISPLAY_NAMES: dict[str, str] = {
    "keywordMatch": "Keyword Match",
    "skillsAlignment": "Skills Alignment",
    "experienceRelevance": "Experience Relevance",
    "technicalCompetencies": "Technical Competencies",
    "educationScore": "Education",
    "quantifiedAchievements": "Quantified Achievements",
    "employmentHistory": "Employment History",
    "industryExperience": "Industry Experience",
    "jobTitleMatch": "Job Title Match",
    "careerProgression": "Career Progression",
    "certifications": "Certifications",
    "formatting": "Formatting",
    "contentQuality": "Content Quality",
    "grammar": "Grammar & Writing",
    "resumeLength": "Resume Length",
    "filenameQuality": "Filename Quality",
}

SUGGESTIONS: dict[str, list[str]] = {
    "keywordMatch": [
        "Mirror the exact keywords from the job description in your skills and bullets",
        "Add missing required technologies you have genuinely used",
        "Use both the acronym and the full form once (e.g. 'Machine Learning (ML)')",
        "Repeat the most important keywords in your summary",
    ],
    "skillsAlignment": [
        "Reorder your skills so the job's core technologies come first",
        "Show each key skill in at least one experience or project bullet",
        "Remove outdated or unrelated skills that dilute the match",
    ],
    "experienceRelevance": [
        "Lead each role with the responsibilities closest to the target job",
        "Rewrite bullets using the job description's terminology",
        "Cut bullets that do not support the target role",
    ],
    "technicalCompetencies": [
        "Group technical skills by category (languages, frameworks, cloud, tools)",
        "Name specific versions, platforms and tools instead of generic terms",
        "Link technologies to outcomes in your bullets",
    ],
    "educationScore": [
        "List degree, institution and graduation year for each entry",
        "Add GPA or percentage when it is strong",
        "Include relevant coursework or academic projects",
    ],
    "quantifiedAchievements": [
        "Add numbers to your bullets: percentages, revenue, users, time saved",
        "State the scale you worked at (team size, traffic, data volume)",
        "Describe before/after results instead of duties",
    ],
    "employmentHistory": [
        "Give every role a title, company and date range",
        "Explain gaps longer than six months briefly",
        "Keep roles in reverse chronological order",
    ],
    "industryExperience": [
        "Highlight domain-specific work relevant to the target industry",
        "Mention industry tools, regulations or standards you worked with",
        "Add recognitions, open-source or community work in the field",
    ],
    "jobTitleMatch": [
        "Align your headline or summary title with the target job title",
        "Use standard industry titles where your official title is unusual",
    ],
    "careerProgression": [
        "Show promotions and growing responsibility across roles",
        "Mention people or projects you led",
    ],
    "certifications": [
        "Add certifications that are relevant to the target role",
        "Name the issuing organisation and year for each certification",
    ],
    "formatting": [
        "Use standard headings: Summary, Experience, Education, Skills",
        "Avoid tables, columns and graphics that ATS parsers misread",
        "Put contact details in plain text at the top",
    ],
    "contentQuality": [
        "Use 3-6 concise bullets per role",
        "Write a 2-4 sentence summary tailored to the role",
    ],
    "grammar": [
        "Start bullets with past-tense action verbs",
        "Replace 'responsible for' with what you achieved",
    ],
    "resumeLength": [
        "Aim for 400-800 words (one page early career, two pages senior)",
    ],
    "filenameQuality": [
        "Name the file FirstName_LastName_Resume.pdf",
    ],
}

QUICK_FIXES: dict[str, list[str]] = {
    "keywordMatch": ["Add the top 5 missing job keywords to your skills section"],
    "skillsAlignment": ["Move the job's required skills to the start of your skills list"],
    "experienceRelevance": ["Rewrite your first bullet in each role using job terminology"],
    "technicalCompetencies": ["Split your skills into labelled categories"],
    "educationScore": ["Add graduation years to your education entries"],
    "quantifiedAchievements": ["Add one number to each of your top three bullets"],
    "employmentHistory": ["Add month and year ranges to every role"],
    "industryExperience": ["Name the industry or domain in your summary"],
    "jobTitleMatch": ["Put the target job title in your summary headline"],
    "careerProgression": ["Mention a promotion or a team you led"],
    "certifications": ["List certifications under their own heading"],
    "formatting": ["Add an email, phone and LinkedIn line at the top"],
    "contentQuality": ["Trim long bullets to one or two lines"],
    "grammar": ["Change the first word of each bullet to an action verb"],
    "resumeLength": ["Remove bullets older than ten years or unrelated to the role"],
    "filenameQuality": ["Rename the file before uploading"],
}

EXAMPLES: dict[str, str] = {
    "keywordMatch": "Skills: Python, React, Node.js, AWS (Lambda, S3), Docker, PostgreSQL",
    "skillsAlignment": "Built REST APIs in Node.js deployed on AWS Lambda serving 50K requests/day",
    "experienceRelevance": "Designed microservices for order processing, matching the job's backend focus",
    "technicalCompetencies": "Languages: Python, TypeScript | Cloud: AWS, GCP | Tools: Docker, Terraform",
    "educationScore": "B.Tech, Computer Science | XYZ University | 2022 | CGPA 8.6/10",
    "quantifiedAchievements": "Reduced page load time by 40%, lifting conversions 12% for 200K monthly users",
    "employmentHistory": "Software Engineer | Acme Corp | Jan 2021 - Present",
    "industryExperience": "Built PCI-compliant payment flows for a fintech platform",
    "jobTitleMatch": "Full-Stack Developer with 4 years of React and Node.js experience",
    "careerProgression": "Promoted from Developer to Senior Developer within 18 months",
    "certifications": "AWS Certified Solutions Architect - Associate (Amazon Web Services, 2023)",
    "formatting": "Jane Doe | jane@example.com | +1 555 010 0100 | linkedin.com/in/janedoe",
    "contentQuality": "Led migration of 12 services to Kubernetes, cutting deploy time from 2h to 15m",
    "grammar": "Automated weekly reporting, saving the team 6 hours per week",
    "resumeLength": "One page for under 5 years of experience, two pages beyond",
    "filenameQuality": "Jane_Doe_Resume.pdf",
}
