"""Users and their assessments, persisted through SQLAlchemy.

Records are stored as JSON documents and handed out as Pydantic models,
so callers never hold on to live ORM rows.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from database.models import AssessmentRecord, UserRecord
from database.repositories.base import BaseRepository
from models.schemas.assessment import Assessment, User
from models.schemas.skill import Skill, SkillCategory

logger = logging.getLogger(__name__)

# Fields a client may never overwrite through an update
_PROTECTED_FIELDS = {"id", "created_at", "updated_at"}


class StoreError(Exception):
    """Base class for store lookup errors."""


class UserNotFoundError(StoreError):
    pass


class AssessmentNotFoundError(StoreError):
    pass


class DuplicateUserError(StoreError):
    pass


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _user_document(user: User) -> dict:
    # assessment_ids is derived from the assessments table on read
    return user.model_dump(mode="json", exclude={"assessment_ids"})


class AssessmentStore(BaseRepository):

    # -- users --------------------------------------------------------------

    def _user_record(self, user_id: str) -> UserRecord:
        record = self.db.get(UserRecord, user_id)
        if record is None:
            raise UserNotFoundError(user_id)
        return record

    def _email_taken(self, email: str, exclude_id: str | None = None) -> bool:
        stmt = select(UserRecord.id).where(UserRecord.email == email)
        if exclude_id is not None:
            stmt = stmt.where(UserRecord.id != exclude_id)
        return self.db.execute(stmt).first() is not None

    def _to_user(self, record: UserRecord) -> User:
        assessment_ids = self.db.execute(
            select(AssessmentRecord.id)
            .where(AssessmentRecord.user_id == record.id)
            .order_by(AssessmentRecord.seq)
        ).scalars().all()
        return User.model_validate({**record.data, "assessment_ids": list(assessment_ids)})

    def _commit_user(self, email: str) -> None:
        try:
            self.commit()
        except IntegrityError as exc:
            # Unique email constraint lost a race with another writer
            raise DuplicateUserError(f"User with email {email} already exists") from exc

    def create_user(self, email: str, name: str, department: str = "", role: str = "") -> User:
        email = _normalize_email(email)
        if self._email_taken(email):
            raise DuplicateUserError(f"User with email {email} already exists")
        user = User(email=email, name=name.strip(), department=department, role=role)
        self.db.add(UserRecord(
            id=user.id,
            email=user.email,
            created_at=user.created_at,
            data=_user_document(user),
        ))
        self._commit_user(email)
        logger.info("Created user %s", user.id)
        return user

    def get_user(self, user_id: str) -> User:
        return self._to_user(self._user_record(user_id))

    def get_user_by_email(self, email: str) -> User:
        email = _normalize_email(email)
        record = self.db.execute(
            select(UserRecord).where(UserRecord.email == email)
        ).scalar_one_or_none()
        if record is None:
            raise UserNotFoundError(email)
        return self._to_user(record)

    def update_user(self, user_id: str, changes: dict[str, Any]) -> User:
        changes = {k: v for k, v in changes.items() if k not in _PROTECTED_FIELDS | {"assessment_ids"}}
        if "email" in changes:
            changes["email"] = _normalize_email(changes["email"])
        record = self._user_record(user_id)
        if "email" in changes and self._email_taken(changes["email"], exclude_id=user_id):
            raise DuplicateUserError(f"User with email {changes['email']} already exists")

        updated = User.model_validate(
            {**record.data, **changes, "updated_at": datetime.now(timezone.utc)}
        )
        record.email = updated.email
        record.data = _user_document(updated)
        self._commit_user(updated.email)
        return self._to_user(record)

    def list_users(self, skip: int = 0, limit: int = 50) -> list[User]:
        records = self.db.execute(
            select(UserRecord)
            .order_by(UserRecord.created_at, UserRecord.id)
            .offset(skip)
            .limit(limit)
        ).scalars().all()
        return [self._to_user(r) for r in records]

    # -- assessments --------------------------------------------------------

    def _assessment_record(self, assessment_id: str) -> AssessmentRecord:
        record = self.db.execute(
            select(AssessmentRecord).where(AssessmentRecord.id == assessment_id)
        ).scalar_one_or_none()
        if record is None:
            raise AssessmentNotFoundError(assessment_id)
        return record

    def create_assessment(self, user_id: str, data: dict[str, Any]) -> Assessment:
        data = {k: v for k, v in data.items() if k not in _PROTECTED_FIELDS}
        self._user_record(user_id)
        assessment = Assessment.model_validate({**data, "user_id": user_id})
        self.db.add(AssessmentRecord(
            id=assessment.id,
            user_id=user_id,
            created_at=assessment.created_at,
            data=assessment.model_dump(mode="json"),
        ))
        self.commit()
        logger.info("Created assessment %s for user %s", assessment.id, user_id)
        return assessment

    def get_assessment(self, assessment_id: str) -> Assessment:
        return Assessment.model_validate(self._assessment_record(assessment_id).data)

    def update_assessment(self, assessment_id: str, changes: dict[str, Any]) -> Assessment:
        """Apply a partial update. Validation errors leave the record unchanged."""
        changes = {k: v for k, v in changes.items() if k not in _PROTECTED_FIELDS | {"user_id"}}
        record = self._assessment_record(assessment_id)
        current = Assessment.model_validate(record.data)
        updated = Assessment.model_validate(
            {**current.model_dump(), **changes, "updated_at": datetime.now(timezone.utc)}
        )
        # Reassign rather than mutate so the JSON column is flagged dirty
        record.data = updated.model_dump(mode="json")
        self.commit()
        return updated

    def delete_assessment(self, assessment_id: str) -> None:
        result = self.db.execute(
            delete(AssessmentRecord).where(AssessmentRecord.id == assessment_id)
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise AssessmentNotFoundError(assessment_id)
        self.commit()
        logger.info("Deleted assessment %s", assessment_id)

    def list_user_assessments(self, user_id: str) -> list[Assessment]:
        """A user's assessments, newest first."""
        records = self.db.execute(
            select(AssessmentRecord)
            .where(AssessmentRecord.user_id == user_id)
            .order_by(AssessmentRecord.created_at.desc(), AssessmentRecord.seq.desc())
        ).scalars().all()
        return [Assessment.model_validate(r.data) for r in records]

    def functional_skills(self) -> list[Skill]:
        """Distinct functional skills across all assessments, for deduplication."""
        seen: dict[str, Skill] = {}
        documents = self.db.execute(
            select(AssessmentRecord.data).order_by(AssessmentRecord.seq)
        ).scalars()
        for document in documents:
            for raw in document.get("business_skills", []) + document.get("career_skills", []):
                skill = Skill.model_validate(raw)
                if skill.category == SkillCategory.FUNCTIONAL:
                    seen.setdefault(skill.name.strip().lower(), skill)
        return list(seen.values())
