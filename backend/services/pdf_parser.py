"""PDF text extraction and bullet-level text signals."""

import io
import logging
import re

import pdfplumber

logger = logging.getLogger(__name__)

# Bullet markers: standard + expanded unicode set
BULLET_MARKERS = frozenset("•-–—►▪✓*○◆⚫→▸▹◇■□●")

# Strong action verbs for bullet quality scoring
ACTION_VERBS = frozenset({
    "achieved", "administered", "advanced", "analyzed", "architected",
    "automated", "built", "collaborated", "conducted", "configured",
    "consolidated", "contributed", "coordinated", "created", "decreased",
    "delivered", "deployed", "designed", "developed", "directed",
    "drove", "eliminated", "enabled", "engineered", "enhanced",
    "established", "evaluated", "executed", "expanded", "facilitated",
    "founded", "generated", "grew", "identified", "implemented",
    "improved", "increased", "influenced", "initiated", "innovated",
    "integrated", "introduced", "launched", "led", "leveraged",
    "maintained", "managed", "mentored", "migrated", "modernized",
    "negotiated", "optimized", "orchestrated", "organized", "overhauled",
    "partnered", "performed", "pioneered", "planned", "presented",
    "processed", "produced", "programmed", "proposed", "published",
    "rebuilt", "reduced", "refactored", "refined", "remodeled",
    "resolved", "restructured", "revamped", "scaled", "secured",
    "simplified", "spearheaded", "standardized", "streamlined",
    "strengthened", "supervised", "surpassed", "tested", "trained",
    "transformed", "tripled", "upgraded", "utilized",
})

# Openers that describe duties instead of results
WEAK_OPENERS: tuple[str, ...] = (
    "responsible for", "helped", "helped with", "worked on", "assisted",
    "duties included", "involved in", "tasked with", "participated in",
)

# Measurable quantities: percentages, currency, multipliers, abbreviated
# magnitudes ("3.5M") and large comma-grouped numbers ("1,200").
_QUANTITY_RE = re.compile(
    r"\d+(?:\.\d+)?\s*%"
    r"|[$€£₹]\s?\d"
    r"|\b\d+(?:\.\d+)?\s*x\b"
    r"|\b\d+(?:\.\d+)?\s*[kmb]\b"
    r"|\b\d{1,3}(?:,\d{3})+\b",
    re.IGNORECASE,
)

# Bare counts and durations need a unit ("12 clients", "90 seconds").
_COUNT_RE = re.compile(
    r"\b\d+\+?\s*(?:users?|clients?|customers?|requests?|endpoints?|services?|"
    r"teams?|members?|people|engineers?|developers?|projects?|stores?|"
    r"countries|cities|transactions?|orders?|records?|downloads?|"
    r"million|billion|thousand|lakhs?|crores?)\b"
    r"|\b\d+\+?\s*(?:ms|milliseconds?|seconds?|minutes?|hours?|days?|weeks?|months?|years?)\b",
    re.IGNORECASE,
)

# A number right after one of these is a version ("Java 8 services")
VERSIONED_TECH = frozenset({
    "android", "angular", "angularjs", "asp.net", "bootstrap", "c#", "centos",
    "django", "dotnet", ".net", "es", "excel", "html", "ios", "java", "jdk",
    "jre", "kotlin", "laravel", "macos", "mysql", "node", "node.js", "office",
    "oracle", "perl", "php", "postgres", "postgresql", "python", "rails",
    "react", "rhel", "ruby", "scala", "spring", "swift", "symfony", "ubuntu",
    "vue", "webpack", "windows",
})


class ExtractionError(Exception):
    """The document could not be read or contained no extractable text."""


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file.

    Raises ExtractionError when the bytes are not a readable PDF or when no
    text layer is present (e.g. a scanned image).
    """
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        logger.warning("PDF parsing failed: %s", e)
        raise ExtractionError("Could not parse PDF file") from e

    text = "\n".join(pages).strip()
    if not text:
        raise ExtractionError("No text could be extracted from PDF")
    return text


def is_bullet_line(line: str) -> bool:
    stripped = line.strip()
    return bool(stripped) and (
        stripped[0] in BULLET_MARKERS or bool(re.match(r"^\d{1,2}[.)]\s", stripped))
    )


def strip_bullet(line: str) -> str:
    stripped = line.strip()
    stripped = re.sub(r"^\d{1,2}[.)]\s*", "", stripped)
    return stripped.lstrip("".join(BULLET_MARKERS) + " ").strip()


def _follows_version_name(text: str, start: int) -> bool:
    preceding = text[:start].split()
    return bool(preceding) and preceding[-1].lower().strip("(,") in VERSIONED_TECH


def has_quantity(text: str) -> bool:
    """True when the text states a measurable result."""
    if _QUANTITY_RE.search(text):
        return True
    return any(not _follows_version_name(text, m.start()) for m in _COUNT_RE.finditer(text))


def starts_with_action_verb(bullet: str) -> bool:
    words = bullet.split()
    if not words:
        return False
    first = re.sub(r"[^a-z]", "", words[0].lower())
    return first in ACTION_VERBS


def starts_with_weak_opener(bullet: str) -> bool:
    return bullet.strip().lower().startswith(WEAK_OPENERS)


def score_bullet(bullet: str, jd_keywords: set[str] | None = None) -> dict:
    """Score a single bullet point on quality rubric.

    Returns dict with individual quality signals and overall score (0-100).
    """
    word_count = len(bullet.split())
    has_action_verb = starts_with_action_verb(bullet)
    has_metrics = has_quantity(bullet)
    length_ok = 8 <= word_count <= 35

    keyword_count = 0
    if jd_keywords:
        bullet_lower = bullet.lower()
        keyword_count = sum(1 for kw in jd_keywords if kw.lower() in bullet_lower)

    score = 0
    if has_action_verb:
        score += 30
    if has_metrics:
        score += 35
    if length_ok:
        score += 15
    if keyword_count >= 2:
        score += 20
    elif keyword_count == 1:
        score += 10

    return {
        "text": bullet[:100],
        "has_action_verb": has_action_verb,
        "has_metrics": has_metrics,
        "length_ok": length_ok,
        "keyword_count": keyword_count,
        "quality_score": min(100, score),
    }
