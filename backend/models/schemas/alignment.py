"""Alignment scoring contracts: weights, components and analysis output."""

from enum import Enum

from pydantic import BaseModel, model_validator


class AlignmentLevel(str, Enum):
    HIGH = "High"
    PARTIAL = "Partial"
    LOW = "Low"


class ReadinessLevel(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class TalentType(str, Enum):
    STRATEGIC_CONTRIBUTOR = "Strategic Contributor"
    EMERGING_TALENT = "Emerging Talent"
    FOUNDATIONAL_BUILDER = "Foundational Builder"
    FUNCTIONAL_EXPERT = "Functional Expert"
    EVOLVING_GENERALIST = "Evolving Generalist"
    EXPLORING_TALENT = "Exploring Talent"
    REDIRECTION_NEEDED = "Re-direction Needed"
    POTENTIAL_SHIFTER = "Potential Shifter"
    CAREER_EXPLORER = "Career Explorer"


class AlignmentWeights(BaseModel):
    """Relative weight of each component in the final alignment score."""
    skill_overlap: float = 0.4
    rating_similarity: float = 0.3
    category_balance: float = 0.2
    semantic_match: float = 0.1

    @model_validator(mode="after")
    def _check_total(self) -> "AlignmentWeights":
        total = (
            self.skill_overlap
            + self.rating_similarity
            + self.category_balance
            + self.semantic_match
        )
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"Alignment weights must sum to 1.0, got {total:.4f}")
        return self


class SkillSetComparison(BaseModel):
    overlap_rate: float = 0.0
    rating_similarity: float = 0.0
    shared_skills: list[str] = []  # normalized names present in both lists


class AlignmentScoreComponents(BaseModel):
    """Component scores, each in [0, 1]. final_score is rounded to 2 decimals."""
    skill_overlap_rate: float = 0.0
    skill_rating_similarity: float = 0.0
    category_balance: float = 0.0
    semantic_match: float = 0.0
    final_score: float = 0.0


class AlignmentAnalysis(BaseModel):
    score: float = 0.0  # final_score as a 0-100 percentage
    level: AlignmentLevel = AlignmentLevel.LOW
    insights: str = ""
    components: AlignmentScoreComponents = AlignmentScoreComponents()
