# server/models/assessment.py

from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from datetime import datetime, timezone
from . import Base


def _utcnow():
    return datetime.now(timezone.utc)


class LeadershipValue(Base):
    __tablename__ = "leadership_values"

    id = Column(Integer, primary_key=True, index=True)
    value = Column(String, nullable=False)
    description = Column(Text, nullable=False)


class Submission(Base):
    __tablename__ = "submissions"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    company_code = Column(String, index=True, nullable=True)
    # stored as a single JSON column, always read back as list[str]
    core_values = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
