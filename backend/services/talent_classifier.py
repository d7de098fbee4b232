"""Readiness bucketing and the alignment x readiness talent-type matrix."""

from collections.abc import Sequence

from models.schemas.alignment import AlignmentLevel, ReadinessLevel, TalentType
from models.schemas.skill import Skill

MAX_RATING = 5

# Mean rating as a percentage of MAX_RATING, lower bound inclusive
HIGH_READINESS_THRESHOLD = 75
MEDIUM_READINESS_THRESHOLD = 50

TALENT_MATRIX: dict[AlignmentLevel, dict[ReadinessLevel, TalentType]] = {
    AlignmentLevel.HIGH: {
        ReadinessLevel.HIGH: TalentType.STRATEGIC_CONTRIBUTOR,
        ReadinessLevel.MEDIUM: TalentType.EMERGING_TALENT,
        ReadinessLevel.LOW: TalentType.FOUNDATIONAL_BUILDER,
    },
    AlignmentLevel.PARTIAL: {
        ReadinessLevel.HIGH: TalentType.FUNCTIONAL_EXPERT,
        ReadinessLevel.MEDIUM: TalentType.EVOLVING_GENERALIST,
        ReadinessLevel.LOW: TalentType.EXPLORING_TALENT,
    },
    AlignmentLevel.LOW: {
        ReadinessLevel.HIGH: TalentType.REDIRECTION_NEEDED,
        ReadinessLevel.MEDIUM: TalentType.POTENTIAL_SHIFTER,
        ReadinessLevel.LOW: TalentType.CAREER_EXPLORER,
    },
}


def readiness_percentage(skills: Sequence[Skill]) -> float:
    """Mean rating as a 0-100 percentage. 0 for an empty list."""
    if not skills:
        return 0.0
    mean_rating = sum(skill.rating for skill in skills) / len(skills)
    return mean_rating / MAX_RATING * 100


def readiness_level(skills: Sequence[Skill]) -> ReadinessLevel:
    if not skills:
        return ReadinessLevel.LOW
    percentage = readiness_percentage(skills)
    if percentage >= HIGH_READINESS_THRESHOLD:
        return ReadinessLevel.HIGH
    if percentage >= MEDIUM_READINESS_THRESHOLD:
        return ReadinessLevel.MEDIUM
    return ReadinessLevel.LOW


def determine_talent_type(
    alignment: AlignmentLevel,
    readiness: ReadinessLevel,
) -> TalentType:
    return TALENT_MATRIX[AlignmentLevel(alignment)][ReadinessLevel(readiness)]


def describe_talent_type(talent_type: TalentType, alignment: AlignmentLevel) -> str:
    """Fallback description used when no AI description is available."""
    return (
        f"You are a {talent_type.value} with {alignment.value.lower()} alignment "
        f"between your business and career goals."
    )
