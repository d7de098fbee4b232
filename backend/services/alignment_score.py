"""Business <-> career alignment scoring.

Weighted combination of four components, each in [0, 1]:
    - Skill overlap rate: shared skill names / all distinct skill names
    - Skill rating similarity: how close the ratings of shared skills are
    - Category balance: cosine similarity of category distributions
    - Semantic match: goal-text overlap, or a caller-supplied score

Every function here is pure and never raises on empty input; missing data
degrades to a zero score.
"""

import re
from collections import Counter
from collections.abc import Sequence

import numpy as np

from models.schemas.alignment import (
    AlignmentAnalysis,
    AlignmentLevel,
    AlignmentScoreComponents,
    AlignmentWeights,
    SkillSetComparison,
)
from models.schemas.skill import Skill

DEFAULT_WEIGHTS = AlignmentWeights()

# Ratings run 1-5, so the largest possible difference is 4
MAX_RATING_GAP = 4

# Level bands on the 0-100 score, lower bound inclusive
HIGH_ALIGNMENT_THRESHOLD = 70
PARTIAL_ALIGNMENT_THRESHOLD = 40

# Insight cut points: (strong_above, weak_below)
OVERLAP_INSIGHT_THRESHOLDS = (0.6, 0.3)
RATING_INSIGHT_THRESHOLDS = (0.7, 0.4)
BALANCE_INSIGHT_THRESHOLDS = (0.7, 0.4)
SEMANTIC_INSIGHT_THRESHOLDS = (0.5, 0.2)

_GOAL_TOKEN_PATTERN = re.compile(r"\b[a-z]{3,}\b")


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def normalize_skill_name(name: str) -> str:
    return name.strip().lower()


def _ratings_by_name(skills: Sequence[Skill]) -> dict[str, int]:
    """Map normalized name -> rating, keeping the first occurrence."""
    ratings: dict[str, int] = {}
    for skill in skills:
        ratings.setdefault(normalize_skill_name(skill.name), skill.rating)
    return ratings


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------

def compare_skill_sets(
    business_skills: Sequence[Skill],
    career_skills: Sequence[Skill],
) -> SkillSetComparison:
    """Name overlap and rating agreement between two skill lists.

    Category is ignored when deciding whether two skills are the same.
    """
    business = _ratings_by_name(business_skills)
    career = _ratings_by_name(career_skills)

    shared = [name for name in business if name in career]
    union = business.keys() | career.keys()
    overlap_rate = len(shared) / len(union) if union else 0.0

    similarities = [
        1 - abs(business[name] - career[name]) / MAX_RATING_GAP
        for name in shared
    ]
    rating_similarity = sum(similarities) / len(similarities) if similarities else 0.0

    return SkillSetComparison(
        overlap_rate=_clamp(overlap_rate),
        rating_similarity=_clamp(rating_similarity),
        shared_skills=shared,
    )


def _category_distribution(skills: Sequence[Skill]) -> dict[str, float]:
    counts = Counter(skill.category.value for skill in skills)
    total = sum(counts.values()) or 1
    return {category: count / total for category, count in counts.items()}


def category_balance(
    business_skills: Sequence[Skill],
    career_skills: Sequence[Skill],
) -> float:
    """Cosine similarity of the two lists' category distributions.

    Compares distribution shape rather than counts, so lists of very
    different lengths can still score 1.0.
    """
    business = _category_distribution(business_skills)
    career = _category_distribution(career_skills)

    categories = sorted(business.keys() | career.keys())
    if not categories:
        return 0.0

    business_vec = np.array([business.get(c, 0.0) for c in categories])
    career_vec = np.array([career.get(c, 0.0) for c in categories])

    magnitude = float(np.linalg.norm(business_vec) * np.linalg.norm(career_vec))
    if magnitude == 0.0:
        return 0.0
    return _clamp(np.dot(business_vec, career_vec) / magnitude)


def tokenize_goal(text: str) -> set[str]:
    """Lowercase words of three or more letters."""
    return set(_GOAL_TOKEN_PATTERN.findall(text.lower()))


def semantic_match(
    business_goal: str,
    career_goal: str,
    external_score: float | None = None,
) -> float:
    """Goal similarity. Uses external_score when given, else token overlap.

    The token overlap is a bag-of-words stand-in; any text similarity
    (see services.similarity) can be passed in as external_score.
    """
    if external_score is not None:
        return _clamp(external_score)
    if not business_goal or not career_goal:
        return 0.0

    business_tokens = tokenize_goal(business_goal)
    career_tokens = tokenize_goal(career_goal)
    shared = business_tokens & career_tokens
    return _clamp(len(shared) / max(len(business_tokens), len(career_tokens), 1))


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def compute_alignment_score(
    business_skills: Sequence[Skill],
    career_skills: Sequence[Skill],
    business_goal: str = "",
    career_goal: str = "",
    external_semantic_score: float | None = None,
    weights: AlignmentWeights = DEFAULT_WEIGHTS,
) -> AlignmentScoreComponents:
    """Weighted alignment score. All-zero if either skill list is empty."""
    if not business_skills or not career_skills:
        return AlignmentScoreComponents()

    comparison = compare_skill_sets(business_skills, career_skills)
    balance = category_balance(business_skills, career_skills)
    semantic = semantic_match(business_goal, career_goal, external_semantic_score)

    raw = (
        weights.skill_overlap * comparison.overlap_rate
        + weights.rating_similarity * comparison.rating_similarity
        + weights.category_balance * balance
        + weights.semantic_match * semantic
    )

    return AlignmentScoreComponents(
        skill_overlap_rate=comparison.overlap_rate,
        skill_rating_similarity=comparison.rating_similarity,
        category_balance=balance,
        semantic_match=semantic,
        final_score=round(_clamp(raw), 2),
    )


def alignment_level(final_score: float) -> AlignmentLevel:
    """Bucket a 0-1 score into High / Partial / Low."""
    percent = final_score * 100
    if percent >= HIGH_ALIGNMENT_THRESHOLD:
        return AlignmentLevel.HIGH
    if percent >= PARTIAL_ALIGNMENT_THRESHOLD:
        return AlignmentLevel.PARTIAL
    return AlignmentLevel.LOW


def alignment_insights(components: AlignmentScoreComponents) -> str:
    """Human-readable sentences for components outside their neutral band."""
    insights: list[str] = []

    strong, weak = OVERLAP_INSIGHT_THRESHOLDS
    overlap_pct = round(components.skill_overlap_rate * 100)
    if components.skill_overlap_rate > strong:
        insights.append(
            f"Strong skill overlap ({overlap_pct}%) indicates aligned development focus"
        )
    elif components.skill_overlap_rate < weak:
        insights.append(
            f"Limited skill overlap ({overlap_pct}%) suggests different development paths"
        )

    strong, weak = RATING_INSIGHT_THRESHOLDS
    if components.skill_rating_similarity > strong:
        insights.append(
            "Consistent skill ratings show balanced effort across business and career goals"
        )
    elif components.skill_rating_similarity < weak:
        insights.append(
            "Divergent skill ratings indicate different priorities between "
            "business and career development"
        )

    strong, weak = BALANCE_INSIGHT_THRESHOLDS
    if components.category_balance > strong:
        insights.append(
            "Well-balanced skill categories across both business and career development"
        )
    elif components.category_balance < weak:
        insights.append(
            "Skill categories are heavily skewed - consider diversifying your development focus"
        )

    strong, weak = SEMANTIC_INSIGHT_THRESHOLDS
    if components.semantic_match > strong:
        insights.append("Goals show strong thematic alignment")
    elif components.semantic_match < weak:
        insights.append(
            "Goals appear to focus on different themes - consider finding common ground"
        )

    if not insights:
        return ""
    return ". ".join(insights) + "."


def generate_alignment_analysis(
    business_skills: Sequence[Skill],
    career_skills: Sequence[Skill],
    business_goal: str = "",
    career_goal: str = "",
    external_semantic_score: float | None = None,
    weights: AlignmentWeights = DEFAULT_WEIGHTS,
) -> AlignmentAnalysis:
    """Alignment components plus percentage score, level and insights."""
    components = compute_alignment_score(
        business_skills,
        career_skills,
        business_goal=business_goal,
        career_goal=career_goal,
        external_semantic_score=external_semantic_score,
        weights=weights,
    )
    return AlignmentAnalysis(
        score=round(components.final_score * 100, 2),
        level=alignment_level(components.final_score),
        insights=alignment_insights(components),
        components=components,
    )
