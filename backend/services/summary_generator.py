"""Orchestrator for the Summary step.

Pipeline:
1. Deterministic alignment analysis + readiness over the rated skills
2. Gemini talent-type analysis (description, focus areas, recommendations)
3. Gemini Venn-diagram feedback (business / career / alignment)
4. Gemini suggested next steps
5. Combine, falling back to computed values wherever Gemini is unavailable
"""

import logging

from config import settings
from models.schemas.alignment import ReadinessLevel, TalentType
from models.schemas.assessment import Assessment, SummaryData, VennDiagramFeedback
from services import gemini_client, prompt_builder
from services.alignment_score import generate_alignment_analysis
from services.similarity import goal_similarity
from services.talent_classifier import (
    MAX_RATING,
    describe_talent_type,
    determine_talent_type,
    readiness_level,
    readiness_percentage,
)

logger = logging.getLogger(__name__)

FALLBACK_FOCUS_AREAS = ["Problem Solving", "Communication"]
FALLBACK_RECOMMENDATIONS = [
    "Focus on skill development",
    "Align your goals better",
    "Seek mentorship",
]
FALLBACK_NEXT_STEPS = [
    "Focus on developing your lowest-rated skills",
    "Seek mentorship in your focus areas",
    "Create a development plan aligned with your goals",
]
FALLBACK_VENN_FEEDBACK = VennDiagramFeedback(
    business_feedback=(
        "Focus on developing your core business skills to improve readiness "
        "for your current role."
    ),
    career_feedback=(
        "Continue building expertise in areas that align with your career growth goals."
    ),
    alignment_feedback=(
        "Work on aligning your business and career development to create synergy."
    ),
)


def _string_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str) and v.strip()]


def _parse_label(enum_cls, value):
    """Return the enum member for value, or None if it is not a valid label."""
    try:
        return enum_cls(value)
    except ValueError:
        return None


async def generate_summary(assessment: Assessment) -> SummaryData:
    """Run the full summary pipeline for one assessment."""
    all_skills = assessment.business_skills + assessment.career_skills

    # --- Step 1: Deterministic scoring ---
    external_semantic = goal_similarity(
        assessment.business_goal,
        assessment.career_goal,
        settings.semantic_match_method,
    )
    analysis = generate_alignment_analysis(
        assessment.business_skills,
        assessment.career_skills,
        business_goal=assessment.business_goal,
        career_goal=assessment.career_goal,
        external_semantic_score=external_semantic,
        weights=settings.alignment_weights,
    )
    computed_readiness = readiness_level(all_skills)
    computed_talent = determine_talent_type(analysis.level, computed_readiness)

    # --- Step 2: Talent-type analysis ---
    degraded = False
    talent_data = await gemini_client.generate_json(
        prompt_builder.build_talent_type_prompt(assessment),
        prompt_builder.TALENT_TYPE_SCHEMA,
    )
    if talent_data:
        # AI labels are accepted only when they belong to the fixed sets
        readiness = _parse_label(ReadinessLevel, talent_data.get("readinessLevel")) or computed_readiness
        talent_type = _parse_label(TalentType, talent_data.get("talentType")) or computed_talent
        talent_description = talent_data.get("talentDescription") or describe_talent_type(
            talent_type, analysis.level
        )
        focus_areas = _string_list(talent_data.get("focusAreas")) or FALLBACK_FOCUS_AREAS
        recommendations = _string_list(talent_data.get("recommendations")) or FALLBACK_RECOMMENDATIONS
    else:
        logger.warning("Gemini talent analysis unavailable, using computed talent type")
        degraded = True
        readiness = computed_readiness
        talent_type = computed_talent
        talent_description = describe_talent_type(talent_type, analysis.level)
        focus_areas = list(FALLBACK_FOCUS_AREAS)
        recommendations = list(FALLBACK_RECOMMENDATIONS)

    # --- Step 3: Venn-diagram feedback ---
    business_pct = readiness_percentage(assessment.business_skills)
    career_pct = readiness_percentage(assessment.career_skills)
    venn_data = await gemini_client.generate_json(
        prompt_builder.build_venn_feedback_prompt(
            assessment,
            analysis,
            business_average=business_pct / 100 * MAX_RATING,
            career_average=career_pct / 100 * MAX_RATING,
        ),
        prompt_builder.VENN_FEEDBACK_SCHEMA,
    )
    if venn_data:
        venn_feedback = VennDiagramFeedback(
            business_feedback=venn_data.get("businessFeedback") or FALLBACK_VENN_FEEDBACK.business_feedback,
            career_feedback=venn_data.get("careerFeedback") or FALLBACK_VENN_FEEDBACK.career_feedback,
            alignment_feedback=venn_data.get("alignmentFeedback") or FALLBACK_VENN_FEEDBACK.alignment_feedback,
        )
    else:
        logger.warning("Gemini Venn feedback unavailable")
        degraded = True
        venn_feedback = FALLBACK_VENN_FEEDBACK.model_copy()

    # --- Step 4: Suggested next steps ---
    steps_data = await gemini_client.generate_json(
        prompt_builder.build_next_steps_prompt(
            assessment,
            talent_type=talent_type.value,
            focus_areas=focus_areas,
            alignment_level=analysis.level.value,
            readiness_level=readiness.value,
        ),
        prompt_builder.NEXT_STEPS_SCHEMA,
    )
    next_steps = _string_list((steps_data or {}).get("suggestedNextSteps"))
    if not next_steps:
        logger.warning("Gemini next steps unavailable")
        degraded = True
        next_steps = list(FALLBACK_NEXT_STEPS)

    # --- Step 5: Combine ---
    return SummaryData(
        business_readiness=round(business_pct),
        career_readiness=round(career_pct),
        readiness_level=readiness,
        talent_type=talent_type.value,
        talent_description=talent_description,
        focus_areas=focus_areas,
        recommendations=recommendations,
        suggested_next_steps=next_steps[:3],
        alignment_score=analysis.score,
        alignment_level=analysis.level,
        alignment_insights=analysis.insights,
        alignment_components=analysis.components,
        venn_diagram_feedback=venn_feedback,
        degraded=degraded,
    )


def placeholder_assessment() -> Assessment:
    """Stand-in used when summarising a temporary (unsaved) assessment."""
    return Assessment(
        user_id="temp",
        business_goal="Sample business goal",
        career_goal="Sample career goal",
    )
