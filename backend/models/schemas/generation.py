"""Outputs of the AI skill-suggestion calls."""

from pydantic import BaseModel

from models.schemas.skill import Skill


class CareerAlignment(BaseModel):
    """Gemini's read on how well the career goal fits the current role."""
    level: str = "Partial alignment"  # Strong / Partial / Low alignment
    explanation: str = "Analysis completed"


class CareerSkillsResult(BaseModel):
    intro: str = ""
    skills: list[Skill] = []
    alignment: CareerAlignment = CareerAlignment()
    skill_themes: list[str] = []
    degraded: bool = False
