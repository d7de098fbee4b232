from pydantic import BaseModel, Field

from models.schemas.assessment import AdditionalInputs, AssessmentStatus, SummaryData
from models.schemas.skill import Skill


class AlignmentRequest(BaseModel):
    business_skills: list[Skill] = []
    career_skills: list[Skill] = []
    business_goal: str = Field("", max_length=5000)
    career_goal: str = Field("", max_length=5000)
    semantic_match: float | None = Field(
        None, ge=0.0, le=1.0, description="Externally computed goal similarity"
    )


class CreateUserRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=320)
    name: str = Field(..., min_length=1, max_length=200)
    department: str = ""
    role: str = ""


class UpdateUserRequest(BaseModel):
    email: str | None = Field(None, min_length=3, max_length=320)
    name: str | None = Field(None, min_length=1, max_length=200)
    department: str | None = None
    role: str | None = None
    is_active: bool | None = None


class AssessmentFields(BaseModel):
    """Client-editable assessment fields. Unset fields are left untouched on update."""
    language: str | None = None
    role: str | None = None
    business_goal: str | None = Field(None, max_length=5000)
    key_results: str | None = Field(None, max_length=5000)
    career_goal: str | None = Field(None, max_length=5000)
    peer_feedback: str | None = Field(None, max_length=5000)
    career_intro: str | None = None
    business_skills: list[Skill] | None = None
    career_skills: list[Skill] | None = None
    business_feedback_support: str | None = None
    business_feedback_obstacles: str | None = None
    career_feedback: str | None = None
    additional_inputs: AdditionalInputs | None = None
    summary: SummaryData | None = None
    next_steps: list[str] | None = None
    next_steps_other: str | None = None
    final_thoughts: str | None = None
    status: AssessmentStatus | None = None


class CreateAssessmentRequest(AssessmentFields):
    user_id: str


class KeyResultsRequest(BaseModel):
    role: str = Field(..., min_length=1)
    business_goal: str = Field(..., min_length=1, max_length=5000)


class OptimizeTextRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=5000)


class OptimizeBusinessGoalRequest(BaseModel):
    role: str = Field(..., min_length=1)
    business_goal: str = Field(..., min_length=1, max_length=5000)


class BusinessSkillsRequest(BaseModel):
    role: str = Field(..., min_length=1)
    business_goal: str = Field(..., min_length=1, max_length=5000)
    key_results: str = Field("", max_length=5000)


class CareerSkillsRequest(BaseModel):
    role: str = Field(..., min_length=1)
    career_goal: str = Field(..., min_length=1, max_length=5000)
    peer_feedback: str = Field("", max_length=5000)
