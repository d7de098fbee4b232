"""All prompt templates and response schemas for Gemini API calls."""

from models.schemas.alignment import AlignmentAnalysis
from models.schemas.assessment import Assessment
from models.schemas.skill import Skill

PROMPT_VERSION = "1.0.0"

# ---------------------------------------------------------------------------
# Response schemas (Gemini structured output)
# ---------------------------------------------------------------------------

_STRING = {"type": "STRING"}
_STRING_LIST = {"type": "ARRAY", "items": _STRING}

_FUNCTIONAL_SKILLS = {
    "type": "ARRAY",
    "description": "Exactly 2 newly generated Functional skills, each with a name and description.",
    "items": {
        "type": "OBJECT",
        "properties": {"name": _STRING, "description": _STRING},
        "required": ["name", "description"],
    },
}

_GENERAL_SKILL_NAMES = {
    "type": "ARRAY",
    "description": "Exactly 3 skill names selected from the provided General Skills List.",
    "items": _STRING,
}

BUSINESS_SKILLS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "generalSkillNames": _GENERAL_SKILL_NAMES,
        "functionalSkills": _FUNCTIONAL_SKILLS,
    },
    "required": ["generalSkillNames", "functionalSkills"],
}

CAREER_ANALYSIS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "alignment": {
            "type": "OBJECT",
            "properties": {
                "level": {
                    "type": "STRING",
                    "description": 'One of "Strong alignment", "Partial alignment" or "Low alignment"',
                },
                "explanation": _STRING,
            },
            "required": ["level", "explanation"],
        },
        "skillThemes": {
            "type": "ARRAY",
            "description": "4-5 skill themes that would be most impactful for their development.",
            "items": _STRING,
        },
        "generalSkillNames": _GENERAL_SKILL_NAMES,
        "functionalSkills": _FUNCTIONAL_SKILLS,
    },
    "required": ["alignment", "skillThemes", "generalSkillNames", "functionalSkills"],
}

TALENT_TYPE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "alignmentScore": {"type": "NUMBER"},
        "alignmentLevel": _STRING,
        "readinessLevel": _STRING,
        "talentType": _STRING,
        "talentDescription": _STRING,
        "focusAreas": _STRING_LIST,
        "recommendations": _STRING_LIST,
        "alignmentInsights": _STRING,
    },
    "required": [
        "alignmentScore", "alignmentLevel", "readinessLevel", "talentType",
        "talentDescription", "focusAreas", "recommendations", "alignmentInsights",
    ],
}

VENN_FEEDBACK_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "businessFeedback": _STRING,
        "careerFeedback": _STRING,
        "alignmentFeedback": _STRING,
    },
    "required": ["businessFeedback", "careerFeedback", "alignmentFeedback"],
}

NEXT_STEPS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "suggestedNextSteps": {
            "type": "ARRAY",
            "description": "Exactly 3 actionable next steps.",
            "items": _STRING,
        },
    },
    "required": ["suggestedNextSteps"],
}


def format_skill_ratings(skills: list[Skill]) -> str:
    return "\n".join(
        f"- {s.name} ({s.category.value}): {s.rating}/5" for s in skills
    ) or "- None rated"


# ---------------------------------------------------------------------------
# Business step
# ---------------------------------------------------------------------------

def build_key_results_prompt(role: str, business_goal: str) -> str:
    return f"""Suggest 3 specific and measurable Key Results (KRs) for the following objective.
The person responsible for this objective is a "{role}".
The objective is: "{business_goal}".

Return ONLY the Key Results as a bulleted list, with each KR on a new line starting with a dash.
Do not include any introductory text or explanations. For example:
- Increase user engagement by 15%
- Launch the new feature by the end of Q3
- Reduce customer churn by 5%"""


def build_business_skills_prompt(
    role: str,
    business_goal: str,
    key_results: str,
    catalogue_text: str,
) -> str:
    key_results_line = (
        f'Consider these specific key results as well: "{key_results}".\n' if key_results else ""
    )
    return f"""You are a skills analyst. Your task is to recommend 5 skills for a person with the role '{role}' working towards this business goal: "{business_goal}".
{key_results_line}
Perform the following two tasks:
1. Select exactly 3 skills from the following list of General skills that are most relevant. Only return the names of the skills you select.
2. Generate exactly 2 new 'Functional' skills. These should be specific, technical, or domain-specific skills directly related to the user's role and goal. For each functional skill, provide a name and a description.

General Skills List:
{catalogue_text}"""


def build_optimize_business_goal_prompt(role: str, business_goal: str) -> str:
    return f"""You are a business strategy consultant and career coach. A user in the role of "{role}" has written this goal: "{business_goal}".
Refine it into one clear, specific, and actionable business objective that describes what success looks like this quarter.

Guidelines:
- Keep it concise (one sentence, max two)
- Focus on the intended outcome or impact, not tasks
- Use clear, professional, and motivational language
- Make sure it fits the responsibilities of the {role}

Return only the rewritten business goal."""


# ---------------------------------------------------------------------------
# Career step
# ---------------------------------------------------------------------------

def build_career_analysis_prompt(
    role: str,
    career_goal: str,
    peer_feedback: str,
    catalogue_text: str,
) -> str:
    return f"""You are a professional talent development coach. Based on the user's career development scenario, recommend the most relevant skills for their growth.

User's Current Role: "{role}"
User's Personal Growth Goal for the Year: "{career_goal}"
Recent Feedback Received by User: "{peer_feedback or 'No feedback provided.'}"

Your task is to:
1. Assess how well the growth goal aligns with the current role ("Strong alignment", "Partial alignment" or "Low alignment") and explain briefly.
2. Name 4-5 skill themes that would be most impactful for their development.
3. Select exactly 3 skills from the following list that are most relevant for their growth goal.
4. Generate exactly 2 new 'Functional' skills that directly relate to achieving their stated goal.

General Skills List:
{catalogue_text}"""


def build_optimize_career_goal_prompt(text: str) -> str:
    return f"""You are a career coach. A user has provided the following text about their personal development goal. Rewrite it to be more constructive, specific, and actionable. Keep it concise (1-2 sentences) and encouraging.
Original text: "{text}"

Return only the rewritten text, without any preamble."""


# ---------------------------------------------------------------------------
# Summary step
# ---------------------------------------------------------------------------

def build_talent_type_prompt(assessment: Assessment) -> str:
    """Talent-type analysis. The alignment rubric mirrors services.alignment_score."""
    return f"""You are a talent development expert. Analyze the user's career development profile using a comprehensive alignment scoring system.

User Profile:
- Current Role: {assessment.role}
- Business Goal: {assessment.business_goal}
- Career Goal: {assessment.career_goal}
- Key Results: {assessment.key_results}

Skill Assessment:
Business Skills Ratings (1=Needs Development, 5=Expert):
{format_skill_ratings(assessment.business_skills)}

Career Growth Skills Ratings (1=Needs Development, 5=Expert):
{format_skill_ratings(assessment.career_skills)}

User Context: {assessment.business_feedback_support or 'N/A'}, {assessment.career_feedback or 'N/A'}

Calculate alignment score using these components:
1. Skill Overlap Rate (40%): Percentage of skills that appear in both business and career lists
2. Skill Rating Similarity (30%): How close the ratings are for shared skills
3. Category Balance Index (20%): How well-distributed skills are across categories
4. Semantic Match (10%): Keyword overlap between business and career goals

Provide analysis:
1. "alignmentScore": Numerical score (0-100) based on the weighted calculation above
2. "alignmentLevel": "High" (70+), "Partial" (40-69), or "Low" (<40)
3. "readinessLevel": "High" (75+), "Medium" (50-74), or "Low" (<50) based on average skill ratings
4. "talentType": One of these types based on alignment + readiness matrix:
   - Strategic Contributor (High alignment + High readiness)
   - Emerging Talent (High alignment + Medium readiness)
   - Foundational Builder (High alignment + Low readiness)
   - Functional Expert (Partial alignment + High readiness)
   - Evolving Generalist (Partial alignment + Medium readiness)
   - Exploring Talent (Partial alignment + Low readiness)
   - Re-direction Needed (Low alignment + High readiness)
   - Potential Shifter (Low alignment + Medium readiness)
   - Career Explorer (Low alignment + Low readiness)
5. "talentDescription": A brief, encouraging description of this talent type (2-3 sentences)
6. "focusAreas": Array of 2-3 skill categories that need the most development
7. "recommendations": Array of 3-4 specific, actionable recommendations for this talent type
8. "alignmentInsights": Brief explanation of what's driving the alignment score (strengths and gaps)"""


def build_venn_feedback_prompt(
    assessment: Assessment,
    analysis: AlignmentAnalysis,
    business_average: float,
    career_average: float,
) -> str:
    c = analysis.components
    return f"""You are a career coach providing targeted feedback based on the user's comprehensive assessment results.

User Profile:
- Role: {assessment.role}
- Business Goal: {assessment.business_goal}
- Career Goal: {assessment.career_goal}
- Business Skills Average: {business_average:.1f}/5
- Career Skills Average: {career_average:.1f}/5
- Alignment Score: {analysis.score:.0f}%

Alignment Analysis Components:
- Skill Overlap Rate: {c.skill_overlap_rate:.0%}
- Skill Rating Similarity: {c.skill_rating_similarity:.0%}
- Category Balance: {c.category_balance:.0%}
- Semantic Match: {c.semantic_match:.0%}

Provide constructive, actionable feedback for each area:
1. "businessFeedback": Specific advice for improving business readiness (2-3 sentences)
2. "careerFeedback": Specific advice for career development (2-3 sentences)
3. "alignmentFeedback": Specific advice for aligning business and career goals (2-3 sentences)

Make each feedback constructive, specific, and focused on next steps they can take within 3-6 months."""


def build_next_steps_prompt(
    assessment: Assessment,
    talent_type: str,
    focus_areas: list[str],
    alignment_level: str,
    readiness_level: str,
) -> str:
    return f"""You are a career development coach creating a personalized action plan based on the user's complete assessment.

Complete User Profile:
- Role: {assessment.role}
- Business Goal: {assessment.business_goal}
- Career Goal: {assessment.career_goal}
- Key Results: {assessment.key_results}

Skill Assessment Results:
Business Skills:
{format_skill_ratings(assessment.business_skills)}
Career Skills:
{format_skill_ratings(assessment.career_skills)}

Talent Analysis:
- Talent Type: {talent_type}
- Focus Areas: {', '.join(focus_areas)}
- Alignment Level: {alignment_level}
- Readiness Level: {readiness_level}

User Context: {assessment.business_feedback_support or 'N/A'}, {assessment.career_feedback or 'N/A'}

Generate exactly 3 personalized, actionable next steps that:
1. Address their lowest-rated skills
2. Align with their talent type and development needs
3. Are specific and achievable within 3-6 months
4. Build toward their stated goals
5. Include concrete actions (e.g., "Lead a cross-functional project", "Complete a certification in...")"""
