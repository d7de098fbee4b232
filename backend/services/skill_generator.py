"""AI suggestions for the Business and Career steps.

Selects general skills from a fixed catalogue, generates functional skills,
drafts key results and polishes goal text. Every call degrades to a safe
default when Gemini is unavailable.
"""

import logging

from rapidfuzz import fuzz

from config import settings
from models.schemas.generation import CareerAlignment, CareerSkillsResult
from models.schemas.skill import Skill, SkillCategory
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

GENERAL_SKILL_COUNT = 3
FUNCTIONAL_SKILL_COUNT = 2

GENERIC_SKILL_DESCRIPTION = "A key general skill for professional development."
KEY_RESULTS_ERROR = "Could not generate suggestions due to an error."

GENERAL_SKILL_CATALOGUE: dict[SkillCategory, list[tuple[str, str]]] = {
    SkillCategory.PROBLEM_SOLVING: [
        ("Critical Thinking", "Ability to analyze problems and make sound decisions"),
        ("Problem Solving", "Skill in identifying and resolving complex issues"),
        ("Analytical Skills", "Capability to break down complex information"),
    ],
    SkillCategory.COMMUNICATION: [
        ("Verbal Communication", "Effective speaking and presentation skills"),
        ("Written Communication", "Clear and professional writing abilities"),
        ("Active Listening", "Ability to understand and respond to others effectively"),
    ],
    SkillCategory.AI_CAPABILITY: [
        ("AI Literacy", "Understanding of AI concepts and applications"),
        ("Prompt Engineering", "Skill in crafting effective AI prompts"),
        ("AI Tools Usage", "Proficiency with AI-powered tools and platforms"),
    ],
    SkillCategory.LEADERSHIP: [
        ("Team Leadership", "Ability to guide and inspire team members"),
        ("Strategic Thinking", "Capability to plan and execute long-term strategies"),
        ("Decision Making", "Skill in making informed and timely decisions"),
    ],
}

_CATALOGUE_BY_NAME = {
    name: (category, description)
    for category, skills in GENERAL_SKILL_CATALOGUE.items()
    for name, description in skills
}


def catalogue_text() -> str:
    """Render the general-skill catalogue for inclusion in a prompt."""
    blocks = []
    for category, skills in GENERAL_SKILL_CATALOGUE.items():
        lines = "\n".join(f"- {name}: {description}" for name, description in skills)
        blocks.append(f"Category: {category.value}\nSkills:\n{lines}")
    return "\n\n".join(blocks)


def _general_skills(names: list) -> list[Skill]:
    skills: list[Skill] = []
    for name in names[:GENERAL_SKILL_COUNT]:
        if not isinstance(name, str) or not name.strip():
            continue
        category, description = _CATALOGUE_BY_NAME.get(
            name, (SkillCategory.PROBLEM_SOLVING, GENERIC_SKILL_DESCRIPTION)
        )
        skills.append(Skill(name=name, description=description, category=category))
    return skills


def find_duplicate(name: str, existing_functional: list[Skill]) -> Skill | None:
    """Return the existing functional skill whose name closely matches, if any."""
    best: Skill | None = None
    best_score = 0.0
    for skill in existing_functional:
        score = fuzz.token_sort_ratio(name.lower(), skill.name.lower())
        if score >= settings.skill_dedupe_threshold and score > best_score:
            best, best_score = skill, score
    return best


def _functional_skills(raw: list, existing_functional: list[Skill]) -> list[Skill]:
    skills: list[Skill] = []
    reused_ids: set[str] = set()
    for item in raw[:FUNCTIONAL_SKILL_COUNT]:
        if not isinstance(item, dict):
            continue
        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            continue
        duplicate = find_duplicate(name, existing_functional)
        if duplicate is not None:
            if duplicate.id in reused_ids:
                continue
            reused_ids.add(duplicate.id)
            logger.info("Reusing functional skill %r for generated %r", duplicate.name, name)
            skills.append(Skill(
                id=duplicate.id,
                name=duplicate.name,
                description=duplicate.description,
                category=SkillCategory.FUNCTIONAL,
            ))
        else:
            description = item.get("description")
            skills.append(Skill(
                name=name,
                description=description if isinstance(description, str) else "",
                category=SkillCategory.FUNCTIONAL,
            ))
    return skills


async def generate_key_results(role: str, business_goal: str) -> str:
    prompt = prompt_builder.build_key_results_prompt(role, business_goal)
    text = await gemini_client.generate_text(prompt)
    return text if text else KEY_RESULTS_ERROR


async def optimize_business_goal(role: str, business_goal: str) -> str:
    prompt = prompt_builder.build_optimize_business_goal_prompt(role, business_goal)
    text = await gemini_client.generate_text(prompt)
    return text or business_goal


async def optimize_text(text: str) -> str:
    prompt = prompt_builder.build_optimize_career_goal_prompt(text)
    optimized = await gemini_client.generate_text(prompt)
    return optimized or text


async def generate_business_skills(
    role: str,
    business_goal: str,
    key_results: str = "",
    existing_functional: list[Skill] | None = None,
) -> list[Skill]:
    """3 catalogue skills + 2 functional skills, or [] if generation fails."""
    prompt = prompt_builder.build_business_skills_prompt(
        role, business_goal, key_results, catalogue_text()
    )
    data = await gemini_client.generate_json(prompt, prompt_builder.BUSINESS_SKILLS_SCHEMA)
    if not data:
        logger.warning("Business skill generation unavailable")
        return []

    return (
        _general_skills(data.get("generalSkillNames") or [])
        + _functional_skills(data.get("functionalSkills") or [], existing_functional or [])
    )


async def generate_career_skills(
    role: str,
    career_goal: str,
    peer_feedback: str = "",
    existing_functional: list[Skill] | None = None,
) -> CareerSkillsResult:
    prompt = prompt_builder.build_career_analysis_prompt(
        role, career_goal, peer_feedback, catalogue_text()
    )
    data = await gemini_client.generate_json(prompt, prompt_builder.CAREER_ANALYSIS_SCHEMA)
    if not data:
        logger.warning("Career skill generation unavailable")
        return CareerSkillsResult(
            intro="AItlas encountered an issue. Let's focus on the skills for now!",
            degraded=True,
        )

    alignment_raw = data.get("alignment")
    alignment = (
        CareerAlignment(
            level=alignment_raw.get("level") or CareerAlignment().level,
            explanation=alignment_raw.get("explanation") or CareerAlignment().explanation,
        )
        if isinstance(alignment_raw, dict)
        else CareerAlignment()
    )
    skills = (
        _general_skills(data.get("generalSkillNames") or [])
        + _functional_skills(data.get("functionalSkills") or [], existing_functional or [])
    )
    return CareerSkillsResult(
        intro="Analysis completed successfully.",
        skills=skills,
        alignment=alignment,
        skill_themes=[t for t in data.get("skillThemes") or [] if isinstance(t, str)],
    )
