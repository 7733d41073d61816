"""Keyword extraction and matching for resume-JD analysis.

Combines TF-IDF-based dynamic keyword discovery with a curated
fallback dictionary, skill synonym resolution, fuzzy matching,
and JD section segmentation for comprehensive coverage.
"""

import logging
import re
from collections import Counter

from nltk.stem.snowball import SnowballStemmer
from rapidfuzz import fuzz

from services.similarity import extract_tfidf_keywords

logger = logging.getLogger(__name__)

_stemmer = SnowballStemmer("english")

# ---------------------------------------------------------------------------
# JD boilerplate filtering: non-technical terms TF-IDF often picks up
# These are common in job descriptions but NOT job requirements/skills
# ---------------------------------------------------------------------------
JD_STOPWORDS: frozenset[str] = frozenset({
    # Company / HR boilerplate
    "opportunity", "opportunities", "position", "positions", "role", "roles",
    "candidate", "candidates", "applicant", "applicants", "application",
    "applications", "employment", "employer", "employee", "employees",
    "company", "organization", "team", "teams", "department",
    # Compensation & benefits
    "compensation", "salary", "benefits", "bonus", "bonuses", "equity",
    "insurance", "401k", "pto", "vacation", "retirement",
    "medical", "dental", "vision",
    # Legal / EEO / privacy
    "privacy", "notice", "policy", "policies", "compliance",
    "equal", "discrimination", "disability", "veteran", "race", "color",
    "religion", "sex", "gender", "orientation", "national", "origin", "age",
    "genetic", "genetics", "protected", "status", "regard",
    "eeo", "affirmative", "accommodation", "accessible",
    # Generic JD filler
    "facing", "range", "related", "including",
    "based", "preferred", "required", "minimum", "maximum",
    "experience", "qualified", "qualification", "qualifications",
    "responsible", "responsibilities", "requirement", "requirements",
    "description", "overview", "summary", "mission",
    "proud", "committed", "dedicated", "passionate", "exciting",
    "thriving", "innovative", "dynamic", "diverse", "inclusive",
    "competitive", "exceptional", "flexible", "remote", "hybrid",
    "onsite", "location", "office", "welcome", "looking", "seeking",
    # Generic action words that aren't skills
    "deliver", "manage", "create", "build", "develop", "maintain",
    "implement", "design", "support", "ensure", "provide", "engage",
    "communicate", "collaborate", "utilize", "leverage",
    "connect", "serve", "help", "join", "apply", "submit",
    # Common words that sneak through TF-IDF
    "job", "work", "working", "workers", "career", "careers",
    "people", "person", "individual", "individuals",
    "us", "our", "we", "will", "can", "may",
    "year", "years", "day", "days", "time",
    "great", "best", "good", "strong", "key", "core",
    "new", "first", "well", "also", "part",
    "full", "level", "senior", "junior", "mid", "staff",
    "fresher", "freshers", "entry", "graduate", "graduates",
    "processing", "information", "data",  # only when standalone, not "data structures"
})

_BOILERPLATE_PHRASES: frozenset[str] = frozenset({
    "privacy notice", "equal opportunity", "employment opportunity",
    "job applicant", "personal data", "national origin",
    "gender identity", "sexual orientation", "veteran status",
    "total compensation", "base salary", "salary range",
    "full time", "part time", "paid time",
})

# ---------------------------------------------------------------------------
# JD section headers that indicate boilerplate (not requirements)
# Text under these headings is stripped before keyword extraction
# ---------------------------------------------------------------------------
_JD_BOILERPLATE_PATTERNS: list[re.Pattern] = [
    re.compile(
        r"(?:^|\n)\s*(?:"
        r"(?:as\s+part\s+of\s+(?:our|the)\s+team|what\s+we\s+offer|"
        r"(?:our|the)\s+(?:benefits|perks|compensation)|"
        r"(?:salary|pay|compensation)\s+(?:range|information)|"
        r"equal\s+(?:opportunity|employment)|"
        r"privacy\s+(?:notice|policy)|"
        r"eeo\s+statement|"
        r"about\s+(?:us|the\s+company|our\s+mission)|"
        r"(?:our|the)\s+mission|"
        r"who\s+we\s+are|"
        r"depending\s+on\s+the\s+position)"
        r")",
        re.IGNORECASE | re.MULTILINE,
    ),
]

# Lines that state a hard requirement; missing terms found here are critical
_REQUIREMENT_LINE_RE = re.compile(
    r"\b(?:required|requirements?|must|mandatory|essential|minimum|need(?:ed)?)\b",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Skill synonym mapping: aliases -> canonical form
# Applied BEFORE matching so "K8s" and "Kubernetes" both resolve to "kubernetes"
# ---------------------------------------------------------------------------
SKILL_SYNONYMS: dict[str, str] = {
    # JavaScript ecosystem
    "js": "javascript", "es6": "javascript", "es2015": "javascript",
    "ts": "typescript",
    "react.js": "react", "reactjs": "react",
    "vue.js": "vue", "vuejs": "vue",
    "angular.js": "angular", "angularjs": "angular",
    "node": "node.js", "nodejs": "node.js",
    "next": "next.js", "nextjs": "next.js",
    "nuxtjs": "nuxt",
    "express.js": "express", "expressjs": "express",
    # Python ecosystem
    "py": "python", "python3": "python",
    "sklearn": "scikit-learn",
    "tensor flow": "tensorflow",
    "torch": "pytorch",
    "fast api": "fastapi",
    # Cloud & DevOps
    "k8s": "kubernetes", "kube": "kubernetes",
    "amazon web services": "aws", "amazon aws": "aws",
    "google cloud": "gcp", "google cloud platform": "gcp",
    "microsoft azure": "azure",
    "cicd": "ci/cd", "ci cd": "ci/cd",
    "github action": "github actions", "gh actions": "github actions",
    "docker compose": "docker",
    "tf": "terraform",
    # Databases
    "postgres": "postgresql", "pg": "postgresql",
    "mongo": "mongodb", "mongo db": "mongodb",
    "my sql": "mysql",
    "ms sql": "sql server", "mssql": "sql server",
    "dynamo": "dynamodb", "dynamo db": "dynamodb",
    # Languages
    "c sharp": "c#", "csharp": "c#",
    "cpp": "c++", "c plus plus": "c++",
    "golang": "go",
    # AI/ML
    "ml": "machine learning", "ai/ml": "machine learning",
    "dl": "deep learning",
    "nlp": "natural language processing",
    "gen ai": "generative ai", "genai": "generative ai",
    "large language model": "llm", "large language models": "llm",
    # Tools & methodologies
    "vs code": "vscode", "visual studio code": "vscode",
    "rest api": "rest", "restful": "rest", "rest apis": "rest",
    "graph ql": "graphql",
    # Soft skills
    "project mgmt": "project management",
    "agile methodology": "agile", "agile/scrum": "agile",
    "problem solving": "problem-solving",
}

SOFT_SKILLS: frozenset[str] = frozenset({
    "agile", "scrum", "kanban", "leadership", "communication",
    "problem-solving", "teamwork", "project management",
})

# Supplementary keyword dictionary for common tech terms that TF-IDF might miss
# due to short document length. Used as a fallback layer, not the primary source.
TECHNICAL_KEYWORDS: frozenset[str] = frozenset({
    # Programming languages
    "python", "javascript", "typescript", "java", "c++", "c#", "go", "rust",
    "ruby", "php", "swift", "kotlin", "scala", "r", "matlab", "sql",
    # Frontend
    "react", "react native", "angular", "vue", "svelte", "next.js", "nuxt",
    "html", "css", "tailwind", "bootstrap", "sass", "webpack", "vite", "redux",
    # Backend
    "node.js", "express", "fastapi", "django", "flask", "spring", "spring boot",
    "rails", ".net", "graphql", "rest", "grpc", "microservices",
    # Cloud & DevOps
    "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "ansible",
    "jenkins", "github actions", "ci/cd", "linux", "nginx", "git",
    # Data
    "postgresql", "mysql", "mongodb", "redis", "elasticsearch", "kafka",
    "spark", "hadoop", "snowflake", "bigquery", "pandas", "numpy",
    "tableau", "power bi", "excel", "etl", "airflow",
    # ML/AI
    "machine learning", "deep learning", "tensorflow", "pytorch",
    "natural language processing", "computer vision", "scikit-learn",
    "llm", "transformers", "generative ai",
    # Testing
    "jest", "pytest", "selenium", "cypress", "junit",
})

COMMON_KEYWORDS: frozenset[str] = TECHNICAL_KEYWORDS | SOFT_SKILLS

# Technologies with strong current hiring demand
TRENDING_KEYWORDS: frozenset[str] = frozenset({
    "aws", "azure", "gcp", "kubernetes", "docker", "microservices",
    "machine learning", "deep learning", "llm", "generative ai",
    "typescript", "react", "terraform", "ci/cd", "kafka", "pytorch",
})

# Fuzzy match threshold (0-100). 80+ catches "Postgres" -> "PostgreSQL" etc.
FUZZY_THRESHOLD = 80


def _normalize(text: str, stem: bool = False) -> str:
    """Normalize text for keyword matching.

    When stem=True, applies Snowball stemming so
    'developing', 'developed', 'developer' all reduce to 'develop'.
    """
    # Strip sentence-ending periods but keep dots in tech terms like "node.js"
    text = re.sub(r"[.,;:](\s|$)", " ", text.lower())
    normalized = re.sub(r"[^a-z0-9.#+/ -]", " ", text)
    if stem:
        normalized = " ".join(_stemmer.stem(w) for w in normalized.split())
    return normalized


def _canonicalize(term: str) -> str:
    """Resolve a term to its canonical form via synonym dictionary."""
    lower = term.lower().strip()
    return SKILL_SYNONYMS.get(lower, lower)


def _canonicalize_set(terms: set[str]) -> set[str]:
    return {_canonicalize(t) for t in terms}


def _extract_terms(text: str) -> set[str]:
    """Extract multi-word and single-word terms from text.

    Includes both raw normalized forms and stemmed forms for broader matching.
    """
    words: set[str] = set()
    for norm_text in (_normalize(text), _normalize(text, stem=True)):
        word_list = norm_text.split()
        words.update(word_list)
        for i in range(len(word_list) - 1):
            words.add(f"{word_list[i]} {word_list[i+1]}")
        for i in range(len(word_list) - 2):
            words.add(f"{word_list[i]} {word_list[i+1]} {word_list[i+2]}")
    return words


def _contains_term(term: str, text_lower: str) -> bool:
    # Word-boundary search so "go" does not match "good"
    pattern = rf"(?<![a-z0-9]){re.escape(term)}(?![a-z0-9])"
    return re.search(pattern, text_lower) is not None


def _extract_relevant_jd_sections(job_description: str) -> str:
    """Extract only the relevant sections from a job description.

    Strips boilerplate: benefits, EEO statements, privacy notices, company info.
    Keeps: responsibilities, requirements, qualifications, technical details.
    """
    text = job_description

    # Requirements usually come first, then boilerplate: cut at the earliest one
    earliest_boilerplate = len(text)
    for pattern in _JD_BOILERPLATE_PATTERNS:
        match = pattern.search(text)
        if match:
            earliest_boilerplate = min(earliest_boilerplate, match.start())

    if 50 < earliest_boilerplate < len(text):
        text = text[:earliest_boilerplate]

    return text.strip()


def _is_technical_term(term: str) -> bool:
    """Check if a TF-IDF-extracted term is likely a technical/job-relevant keyword.

    Filters out generic JD boilerplate that TF-IDF picks up as 'important'.
    """
    words = term.lower().split()
    if len(words) == 1:
        return words[0] not in JD_STOPWORDS and len(words[0]) > 1 and not words[0].isdigit()

    # Multi-word: reject if ALL words are filler or numbers
    if all(w in JD_STOPWORDS or w.isdigit() for w in words):
        return False
    return term.lower() not in _BOILERPLATE_PHRASES


def extract_keywords_tfidf(job_description: str, top_n: int = 20) -> list[str]:
    """Extract important keywords from JD using TF-IDF (dynamic, not hardcoded).

    Pre-filters JD to remove boilerplate sections and post-filters
    results to remove non-technical terms.
    """
    relevant_jd = _extract_relevant_jd_sections(job_description)
    raw_keywords = extract_tfidf_keywords(relevant_jd or job_description, top_n=top_n * 2)

    filtered = [kw for kw in raw_keywords if _is_technical_term(kw)]
    return filtered[:top_n]


def extract_keywords(job_description: str, vocabulary: frozenset[str] = COMMON_KEYWORDS) -> set[str]:
    """Extract relevant keywords from a job description using the curated dictionary."""
    jd_terms = _extract_terms(job_description)
    canonical_jd = _canonicalize_set(jd_terms)
    return {kw for kw in vocabulary if _canonicalize(kw) in canonical_jd or kw in jd_terms}


def extract_technical_terms(text: str) -> set[str]:
    """Technical vocabulary (no soft skills) mentioned in ``text``."""
    return extract_keywords(text, vocabulary=TECHNICAL_KEYWORDS)


def extract_keywords_combined(job_description: str, top_n: int = 25) -> list[str]:
    """Extract keywords using both TF-IDF and dictionary methods.

    Dictionary hits come first (sorted), then TF-IDF-only terms. TF-IDF
    bigrams that merely repeat a dictionary hit are dropped.
    """
    dict_kws = extract_keywords(job_description)
    tfidf_kws = set(extract_keywords_tfidf(job_description, top_n=top_n))
    extra = {
        kw for kw in tfidf_kws - dict_kws
        if not any(_canonicalize(part) in dict_kws for part in kw.split())
    }
    combined = sorted(dict_kws) + sorted(extra)
    return combined[:top_n]


def _fuzzy_match(keyword: str, resume_terms: set[str], canon_terms: set[str], resume_lower: str) -> bool:
    """Check if keyword matches any resume term using exact, synonym, or fuzzy matching."""
    canon_kw = _canonicalize(keyword)

    # 1. Exact match (fastest path)
    if keyword in resume_terms or _contains_term(keyword.lower(), resume_lower):
        return True

    # 2. Canonical match (synonym resolution)
    if canon_kw in canon_terms or _contains_term(canon_kw, resume_lower):
        return True

    # 3. Fuzzy match (Levenshtein distance) for typos and close variants
    # Short terms ("react" vs "reach") are too close to fuzzy match safely
    if len(canon_kw) >= 6:
        for term in resume_terms:
            if len(term) >= 6 and fuzz.ratio(canon_kw, term) >= FUZZY_THRESHOLD:
                return True

    return False


def match_keywords(
    resume_text: str, job_keywords: set[str] | list[str]
) -> tuple[list[str], list[str]]:
    """Match resume text against job keywords using synonym + fuzzy matching."""
    resume_terms = _extract_terms(resume_text)
    canon_terms = _canonicalize_set(resume_terms)
    resume_lower = resume_text.lower()

    matched = []
    missing = []
    for kw in sorted(set(job_keywords)):
        if _fuzzy_match(kw, resume_terms, canon_terms, resume_lower):
            matched.append(kw)
        else:
            missing.append(kw)

    return matched, missing


def match_job_keywords(resume_text: str, job_description: str) -> tuple[list[str], list[str]]:
    """Extract JD keywords and split them into (matched, missing) for a resume."""
    if not job_description.strip():
        return [], []
    return match_keywords(resume_text, extract_keywords_combined(job_description))


def compute_keyword_overlap(matched: list[str], missing: list[str]) -> float:
    """Compute keyword overlap ratio as 0.0-1.0 (0.0 when there are no keywords)."""
    total = len(matched) + len(missing)
    if total == 0:
        return 0.0
    return len(matched) / total


def compute_keyword_density(
    resume_text: str, keywords: list[str]
) -> dict[str, float]:
    """Compute keyword density (frequency / total words) for each keyword.

    Returns dict of keyword -> density percentage.
    ATS optimal range: 1-3% per primary keyword.
    """
    words = resume_text.lower().split()
    total_words = len(words)
    if total_words == 0:
        return {}

    word_counts = Counter(words)
    densities = {}
    for kw in keywords:
        kw_lower = kw.lower()
        if " " in kw_lower:
            count = resume_text.lower().count(kw_lower)
        else:
            count = word_counts.get(kw_lower, 0)
        densities[kw] = round((count / total_words) * 100, 2)

    return densities


def categorize_missing_keywords(
    missing: list[str], job_description: str
) -> dict[str, list[str]]:
    """Split missing keywords into critical / important / optional.

    Critical: technical terms named on a requirement line or repeated in the
    JD. Important: other technical vocabulary or repeated terms. Optional:
    everything else.
    """
    jd_lower = job_description.lower()
    requirement_text = "\n".join(
        line for line in jd_lower.split("\n") if _REQUIREMENT_LINE_RE.search(line)
    )

    result: dict[str, list[str]] = {"critical": [], "important": [], "optional": []}
    for kw in missing:
        canon = _canonicalize(kw)
        technical = canon in TECHNICAL_KEYWORDS
        mentions = len(re.findall(rf"(?<![a-z0-9]){re.escape(kw.lower())}(?![a-z0-9])", jd_lower))
        on_requirement_line = _contains_term(kw.lower(), requirement_text)

        if technical and (on_requirement_line or mentions >= 2):
            result["critical"].append(kw)
        elif technical or mentions >= 2:
            result["important"].append(kw)
        else:
            result["optional"].append(kw)
    return result
