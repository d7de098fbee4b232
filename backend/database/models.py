"""SQLAlchemy tables for users and assessments.

Each row keeps the full Pydantic record as a JSON document in ``data``;
the remaining columns exist for lookups and ordering.
"""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class UserRecord(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    email = Column(Text, nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    data = Column(JSON, nullable=False, default=dict)


class AssessmentRecord(Base):
    __tablename__ = "assessments"

    # Surrogate key; also the insertion order used to break created_at ties
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), nullable=False, unique=True)
    user_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    data = Column(JSON, nullable=False, default=dict)

    __table_args__ = (
        Index("idx_assessments_user_created", "user_id", "created_at"),
    )
