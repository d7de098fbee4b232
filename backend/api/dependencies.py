"""Shared dependencies for API routes."""

from fastapi import Depends
from sqlalchemy.orm import Session

from database.database import get_db
from services.assessment_store import AssessmentStore


def get_assessment_store(db: Session = Depends(get_db)) -> AssessmentStore:
    return AssessmentStore(db)
