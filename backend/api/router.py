from fastapi import APIRouter, Depends, HTTPException, Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_assessment_store
from config import settings
from models.requests import (
    AlignmentRequest,
    AssessmentFields,
    BusinessSkillsRequest,
    CareerSkillsRequest,
    CreateAssessmentRequest,
    CreateUserRequest,
    KeyResultsRequest,
    OptimizeBusinessGoalRequest,
    OptimizeTextRequest,
    UpdateUserRequest,
)
from models.responses import (
    AlignmentResponse,
    BusinessSkillsResponse,
    CareerSkillsResponse,
    KeyResultsResponse,
    OptimizedGoalResponse,
    OptimizedTextResponse,
    SummaryResponse,
)
from models.schemas.assessment import Assessment, User
from services import prompt_builder, skill_generator, summary_generator
from services.alignment_score import generate_alignment_analysis
from services.assessment_store import (
    AssessmentNotFoundError,
    AssessmentStore,
    DuplicateUserError,
    UserNotFoundError,
)
from services.similarity import goal_similarity
from services.talent_classifier import determine_talent_type, readiness_level

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

TEMP_ID_PREFIX = "temp-"


def _is_temporary(assessment_id: str) -> bool:
    """Unsaved wizard sessions use temp- ids; results are returned, not stored."""
    return assessment_id.startswith(TEMP_ID_PREFIX)


def _load_assessment(store: AssessmentStore, assessment_id: str) -> Assessment:
    try:
        return store.get_assessment(assessment_id)
    except AssessmentNotFoundError:
        raise HTTPException(status_code=404, detail="Assessment not found")


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "prompt_version": prompt_builder.PROMPT_VERSION,
    }


# ---------------------------------------------------------------------------
# Alignment scoring
# ---------------------------------------------------------------------------

@router.post("/alignment/analyze", response_model=AlignmentResponse)
async def analyze_alignment(body: AlignmentRequest):
    external_semantic = body.semantic_match
    if external_semantic is None:
        external_semantic = goal_similarity(
            body.business_goal, body.career_goal, settings.semantic_match_method
        )
    analysis = generate_alignment_analysis(
        body.business_skills,
        body.career_skills,
        business_goal=body.business_goal,
        career_goal=body.career_goal,
        external_semantic_score=external_semantic,
        weights=settings.alignment_weights,
    )
    readiness = readiness_level(body.business_skills + body.career_skills)
    return AlignmentResponse(
        analysis=analysis,
        readiness_level=readiness,
        talent_type=determine_talent_type(analysis.level, readiness),
    )


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

@router.post("/users", response_model=User, status_code=201)
def create_user(body: CreateUserRequest, store: AssessmentStore = Depends(get_assessment_store)):
    try:
        return store.create_user(body.email, body.name, body.department, body.role)
    except DuplicateUserError:
        raise HTTPException(status_code=409, detail="User with this email already exists")


@router.get("/users", response_model=list[User])
def list_users(
    skip: int = 0,
    limit: int = 50,
    store: AssessmentStore = Depends(get_assessment_store),
):
    return store.list_users(skip=max(0, skip), limit=min(max(1, limit), 200))


@router.get("/users/lookup/{email}", response_model=User)
def lookup_user(email: str, store: AssessmentStore = Depends(get_assessment_store)):
    try:
        return store.get_user_by_email(email)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")


@router.get("/users/{user_id}", response_model=User)
def get_user(user_id: str, store: AssessmentStore = Depends(get_assessment_store)):
    try:
        return store.get_user(user_id)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")


@router.put("/users/{user_id}", response_model=User)
def update_user(
    user_id: str,
    body: UpdateUserRequest,
    store: AssessmentStore = Depends(get_assessment_store),
):
    try:
        return store.update_user(user_id, body.model_dump(exclude_unset=True, exclude_none=True))
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    except DuplicateUserError:
        raise HTTPException(status_code=409, detail="User with this email already exists")


# ---------------------------------------------------------------------------
# Assessments
# ---------------------------------------------------------------------------

@router.post("/assessments", response_model=Assessment, status_code=201)
def create_assessment(
    body: CreateAssessmentRequest,
    store: AssessmentStore = Depends(get_assessment_store),
):
    data = body.model_dump(exclude_unset=True, exclude_none=True, exclude={"user_id"})
    try:
        return store.create_assessment(body.user_id, data)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")


@router.get("/assessments/user/{user_id}", response_model=list[Assessment])
def list_user_assessments(user_id: str, store: AssessmentStore = Depends(get_assessment_store)):
    return store.list_user_assessments(user_id)


@router.get("/assessments/{assessment_id}", response_model=Assessment)
def get_assessment(assessment_id: str, store: AssessmentStore = Depends(get_assessment_store)):
    return _load_assessment(store, assessment_id)


@router.put("/assessments/{assessment_id}", response_model=Assessment)
def update_assessment(
    assessment_id: str,
    body: AssessmentFields,
    store: AssessmentStore = Depends(get_assessment_store),
):
    try:
        return store.update_assessment(
            assessment_id, body.model_dump(exclude_unset=True, exclude_none=True)
        )
    except AssessmentNotFoundError:
        raise HTTPException(status_code=404, detail="Assessment not found")


@router.delete("/assessments/{assessment_id}", status_code=204)
def delete_assessment(assessment_id: str, store: AssessmentStore = Depends(get_assessment_store)):
    try:
        store.delete_assessment(assessment_id)
    except AssessmentNotFoundError:
        raise HTTPException(status_code=404, detail="Assessment not found")
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# AI generation
# ---------------------------------------------------------------------------

@router.post("/assessments/generate-key-results", response_model=KeyResultsResponse)
@limiter.limit(settings.rate_limit)
async def generate_key_results(request: Request, body: KeyResultsRequest):
    key_results = await skill_generator.generate_key_results(body.role, body.business_goal)
    return KeyResultsResponse(key_results=key_results)


@router.post("/assessments/optimize-text", response_model=OptimizedTextResponse)
@limiter.limit(settings.rate_limit)
async def optimize_text(request: Request, body: OptimizeTextRequest):
    optimized = await skill_generator.optimize_text(body.text)
    return OptimizedTextResponse(optimized_text=optimized)


@router.post("/assessments/optimize-business-goal", response_model=OptimizedGoalResponse)
@limiter.limit(settings.rate_limit)
async def optimize_business_goal(request: Request, body: OptimizeBusinessGoalRequest):
    optimized = await skill_generator.optimize_business_goal(body.role, body.business_goal)
    return OptimizedGoalResponse(optimized_goal=optimized)


@router.post("/assessments/{assessment_id}/generate-business-skills", response_model=BusinessSkillsResponse)
@limiter.limit(settings.rate_limit)
async def generate_business_skills(
    request: Request,
    assessment_id: str,
    body: BusinessSkillsRequest,
    store: AssessmentStore = Depends(get_assessment_store),
):
    assessment = _load_assessment(store, assessment_id)
    skills = await skill_generator.generate_business_skills(
        body.role,
        body.business_goal,
        key_results=body.key_results,
        existing_functional=store.functional_skills(),
    )
    # A failed generation keeps whatever skills the user already had
    if skills:
        assessment = store.update_assessment(assessment_id, {"business_skills": skills})
    return BusinessSkillsResponse(skills=skills, assessment=assessment)


@router.post("/assessments/{assessment_id}/generate-career-skills", response_model=CareerSkillsResponse)
@limiter.limit(settings.rate_limit)
async def generate_career_skills(
    request: Request,
    assessment_id: str,
    body: CareerSkillsRequest,
    store: AssessmentStore = Depends(get_assessment_store),
):
    if not _is_temporary(assessment_id):
        _load_assessment(store, assessment_id)

    result = await skill_generator.generate_career_skills(
        body.role,
        body.career_goal,
        peer_feedback=body.peer_feedback,
        existing_functional=store.functional_skills(),
    )
    response = CareerSkillsResponse(**result.model_dump())
    if _is_temporary(assessment_id):
        return response

    changes: dict = {"career_intro": result.intro}
    if result.skills:
        changes["career_skills"] = result.skills
    response.assessment = store.update_assessment(assessment_id, changes)
    return response


@router.post("/assessments/{assessment_id}/generate-summary", response_model=SummaryResponse)
@limiter.limit(settings.rate_limit)
async def generate_summary(
    request: Request,
    assessment_id: str,
    store: AssessmentStore = Depends(get_assessment_store),
):
    if _is_temporary(assessment_id):
        summary = await summary_generator.generate_summary(
            summary_generator.placeholder_assessment()
        )
        return SummaryResponse(summary=summary)

    assessment = _load_assessment(store, assessment_id)
    summary = await summary_generator.generate_summary(assessment)
    updated = store.update_assessment(assessment_id, {"summary": summary})
    return SummaryResponse(summary=summary, assessment=updated)
