"""TF-IDF text similarity for comparing business and career goals."""

import logging

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine

logger = logging.getLogger(__name__)


def tfidf_cosine_similarity(text_a: str, text_b: str) -> float:
    """Compute cosine similarity between two texts using TF-IDF vectors."""
    if not text_a.strip() or not text_b.strip():
        return 0.0

    vectorizer = TfidfVectorizer(
        stop_words="english",
        sublinear_tf=True,
        ngram_range=(1, 2),
    )
    try:
        tfidf_matrix = vectorizer.fit_transform([text_a, text_b])
        score = sklearn_cosine(tfidf_matrix[0:1], tfidf_matrix[1:2])[0][0]
        return max(0.0, min(1.0, float(score)))
    except ValueError:
        # Raised when both texts contain only stop words
        logger.debug("TF-IDF vocabulary empty for goal comparison")
        return 0.0


def goal_similarity(business_goal: str, career_goal: str, method: str) -> float | None:
    """External semantic score for the alignment scorer.

    Returns None for the "tokens" method so the scorer falls back to its
    own token-overlap estimate.
    """
    if method == "tfidf":
        return tfidf_cosine_similarity(business_goal, career_goal)
    if method != "tokens":
        logger.warning("Unknown semantic_match_method %r, using token overlap", method)
    return None
