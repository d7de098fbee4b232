"""Shared Pydantic contracts for skills, alignment scoring and assessments."""

from models.schemas.skill import Skill, SkillCategory
from models.schemas.alignment import (
    AlignmentAnalysis,
    AlignmentLevel,
    AlignmentScoreComponents,
    AlignmentWeights,
    ReadinessLevel,
    SkillSetComparison,
    TalentType,
)
from models.schemas.assessment import Assessment, AssessmentStatus, SummaryData, User
from models.schemas.generation import CareerAlignment, CareerSkillsResult

__all__ = [
    "Skill",
    "SkillCategory",
    "AlignmentAnalysis",
    "AlignmentLevel",
    "AlignmentScoreComponents",
    "AlignmentWeights",
    "ReadinessLevel",
    "SkillSetComparison",
    "TalentType",
    "Assessment",
    "AssessmentStatus",
    "SummaryData",
    "User",
    "CareerAlignment",
    "CareerSkillsResult",
]
