from pydantic import BaseModel

from models.schemas.alignment import AlignmentAnalysis, ReadinessLevel, TalentType
from models.schemas.assessment import Assessment, SummaryData
from models.schemas.skill import Skill
from models.schemas.generation import CareerAlignment


class AlignmentResponse(BaseModel):
    analysis: AlignmentAnalysis
    readiness_level: ReadinessLevel
    talent_type: TalentType


class KeyResultsResponse(BaseModel):
    key_results: str


class OptimizedTextResponse(BaseModel):
    optimized_text: str


class OptimizedGoalResponse(BaseModel):
    optimized_goal: str


class BusinessSkillsResponse(BaseModel):
    skills: list[Skill] = []
    assessment: Assessment


class CareerSkillsResponse(BaseModel):
    skills: list[Skill] = []
    intro: str = ""
    alignment: CareerAlignment = CareerAlignment()
    skill_themes: list[str] = []
    degraded: bool = False
    assessment: Assessment | None = None  # None for temporary assessments


class SummaryResponse(BaseModel):
    summary: SummaryData
    assessment: Assessment | None = None  # None for temporary assessments
