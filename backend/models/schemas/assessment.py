"""Assessment and user records held by the assessment store."""

import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field

from models.schemas.alignment import (
    AlignmentLevel,
    AlignmentScoreComponents,
    ReadinessLevel,
)
from models.schemas.skill import Skill


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


class AssessmentStatus(str, Enum):
    DRAFT = "draft"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class AdditionalInputs(BaseModel):
    business_challenges: str = Field("", max_length=1000)
    career_aspirations: str = Field("", max_length=1000)
    learning_preferences: list[str] = []
    time_availability: str = Field("", max_length=500)
    work_environment: str = Field("", max_length=500)
    motivation_factors: list[str] = []
    development_barriers: list[str] = []


class VennDiagramFeedback(BaseModel):
    business_feedback: str = ""
    career_feedback: str = ""
    alignment_feedback: str = ""


class SummaryData(BaseModel):
    """Result of the Summary step: readiness, talent type and next steps."""
    business_readiness: int = 0  # 0-100
    career_readiness: int = 0  # 0-100
    readiness_level: ReadinessLevel = ReadinessLevel.LOW
    talent_type: str = ""
    talent_description: str = ""
    focus_areas: list[str] = []
    recommendations: list[str] = []
    suggested_next_steps: list[str] = []
    alignment_score: float = 0.0  # 0-100
    alignment_level: AlignmentLevel = AlignmentLevel.LOW
    alignment_insights: str = ""
    alignment_components: AlignmentScoreComponents = AlignmentScoreComponents()
    venn_diagram_feedback: VennDiagramFeedback = VennDiagramFeedback()
    degraded: bool = False


class Assessment(BaseModel):
    id: str = Field(default_factory=_new_id)
    user_id: str
    language: str = "English"
    role: str = ""
    business_goal: str = ""
    key_results: str = ""
    career_goal: str = ""
    peer_feedback: str = ""
    career_intro: str = ""
    business_skills: list[Skill] = []
    career_skills: list[Skill] = []
    business_feedback_support: str = ""
    business_feedback_obstacles: str = ""
    career_feedback: str = ""
    additional_inputs: AdditionalInputs | None = None
    summary: SummaryData | None = None
    next_steps: list[str] = []
    next_steps_other: str = ""
    final_thoughts: str = ""
    status: AssessmentStatus = AssessmentStatus.DRAFT
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class User(BaseModel):
    id: str = Field(default_factory=_new_id)
    email: str
    name: str
    department: str = ""
    role: str = ""
    is_active: bool = True
    assessment_ids: list[str] = []
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
