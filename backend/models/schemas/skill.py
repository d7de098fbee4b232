"""Skill records shared by the assessment, generation and scoring layers."""

import uuid
from enum import Enum

from pydantic import BaseModel, Field


class SkillCategory(str, Enum):
    PROBLEM_SOLVING = "problem_solving"
    COMMUNICATION = "communication"
    AI_CAPABILITY = "ai_capability"
    LEADERSHIP = "leadership"
    FUNCTIONAL = "functional"


def new_skill_id() -> str:
    return f"skill-{uuid.uuid4().hex[:12]}"


class Skill(BaseModel):
    """A named, categorized skill with a 1-5 self rating."""
    id: str = Field(default_factory=new_skill_id)
    name: str = Field(..., min_length=1)
    description: str = ""
    category: SkillCategory
    rating: int = Field(1, ge=1, le=5)  # 1=needs development, 5=expert
