"""TF-IDF similarity and keyword extraction for resume-JD matching."""

import logging

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine

logger = logging.getLogger(__name__)

# Generic filler text that gives the IDF something to contrast against,
# so distinctive terms in a single document stand out.
_REFERENCE_CORPUS = [
    "the candidate should have experience and skills in relevant areas",
    "looking for a professional with strong background and qualifications",
    "requirements include working with teams and delivering results",
]


def tfidf_cosine_similarity(text_a: str, text_b: str) -> float:
    """Compute cosine similarity between two texts using TF-IDF vectors."""
    if not text_a.strip() or not text_b.strip():
        return 0.0

    vectorizer = TfidfVectorizer(
        stop_words="english",
        max_features=5000,
        sublinear_tf=True,
        ngram_range=(1, 2),
    )
    try:
        tfidf_matrix = vectorizer.fit_transform([text_a, text_b])
        score = sklearn_cosine(tfidf_matrix[0:1], tfidf_matrix[1:2])[0][0]
        return float(score)
    except ValueError:
        # vocabulary is empty (only stop words)
        return 0.0


def extract_tfidf_keywords(text: str, top_n: int = 20) -> list[str]:
    """Extract top keywords from text using TF-IDF scores.

    Ties are broken by vocabulary order so the result is stable for a given
    input.
    """
    if not text.strip():
        return []

    vectorizer = TfidfVectorizer(
        stop_words="english",
        max_features=3000,
        sublinear_tf=True,
        ngram_range=(1, 2),
    )

    try:
        tfidf_matrix = vectorizer.fit_transform([text] + _REFERENCE_CORPUS)
    except ValueError:
        return []

    feature_names = vectorizer.get_feature_names_out()
    scores = tfidf_matrix[0].toarray().flatten()

    top_indices = np.argsort(-scores, kind="stable")[:top_n]
    keywords = [
        str(feature_names[i])
        for i in top_indices
        if scores[i] > 0 and len(feature_names[i]) > 1
    ]
    logger.debug("TF-IDF keywords: %s", keywords)
    return keywords
